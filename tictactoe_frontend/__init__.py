"""
Two player tic-tac-toe on a PySide6 window.
"""
from .game_logic import GameLogic, GameResult, MoveResult, Status, Symbol, calculate_game_result

__version__ = "0.1.0"
