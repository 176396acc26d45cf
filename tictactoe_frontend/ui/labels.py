"""
Text shown by the window, derived from game state only.
"""
from typing import Optional

from ..game_logic import GameLogic, Status


def status_text(game: GameLogic) -> str:
    if game.status is Status.WON and game.winner:
        return f"{game.winner} wins!"
    if game.status is Status.DRAW:
        return "Draw!"
    return f"{game.current_symbol.value}'s turn"


def status_kind(game: GameLogic) -> str:
    # style class for the status label
    if game.status is Status.WON and game.winner:
        return "win"
    if game.status is Status.DRAW:
        return "draw"
    return "playing"


def cell_text(value: Optional[str]) -> str:
    return value or ""


def cell_label(value: Optional[str]) -> str:
    """accessible name for a cell button"""
    return f"Cell {value}" if value else "Empty cell"
