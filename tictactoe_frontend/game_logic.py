import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

logger = logging.getLogger(__name__)

BOARD_CELLS = 9

# rows, cols, diags; checked in this order
LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Symbol(str, Enum):
    X = "X"
    O = "O"

    def opposite(self) -> "Symbol":
        return Symbol.O if self is Symbol.X else Symbol.X


class Status(str, Enum):
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


class MoveResult(str, Enum):
    WIN = "win"
    DRAW = "draw"
    CONTINUE = "continue"
    INVALID = "invalid"


class GameResult(NamedTuple):
    """
    outcome of a board: winner, draw, or neither (ongoing)
    """
    winner: Optional[str] = None
    draw: bool = False

    @property
    def ongoing(self) -> bool:
        return self.winner is None and not self.draw


def calculate_game_result(squares: Sequence[Optional[str]]) -> GameResult:
    """
    scan the 8 lines for three of a kind, then check for a full board
    """
    if len(squares) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(squares)}")
    for a, b, c in LINES:
        if squares[a] and squares[a] == squares[b] == squares[c]:
            return GameResult(winner=squares[a])
    if all(squares):
        return GameResult(draw=True)
    return GameResult()


class GameLogic:
    """
    tic-tac-toe state and click handling
    """
    def __init__(self):
        self.restart()

    @property
    def board(self) -> List[Optional[str]]:
        # copy so callers can't edit cells behind our back
        return list(self._board)

    @property
    def current_symbol(self) -> Symbol:
        return Symbol.X if self.x_is_next else Symbol.O

    @property
    def game_over(self) -> bool:
        return self.status is not Status.PLAYING

    def is_cell_empty(self, index: int) -> bool:
        """
        true if index valid and cell blank
        """
        if 0 <= index < BOARD_CELLS:
            return self._board[index] is None
        return False

    def handle_click(self, index: int) -> MoveResult:
        """
        place current symbol at index if legal, then classify the board
        returns MoveResult.WIN, DRAW, CONTINUE, or INVALID
        """
        if self.game_over or not self.is_cell_empty(index):
            logger.debug("ignored click on cell %s (status=%s)", index, self.status.value)
            return MoveResult.INVALID

        symbol = self.current_symbol
        board = self.board
        board[index] = symbol.value
        result = calculate_game_result(board)
        self._board = board
        self.move_count += 1
        logger.debug("move %d: %s -> cell %d", self.move_count, symbol.value, index)

        if result.winner:
            self.status = Status.WON; self.winner = result.winner
            logger.info("%s wins after %d moves", self.winner, self.move_count)
            return MoveResult.WIN
        if result.draw:
            self.status = Status.DRAW; self.winner = None
            logger.info("draw after %d moves", self.move_count)
            return MoveResult.DRAW
        self.x_is_next = symbol.opposite() is Symbol.X
        return MoveResult.CONTINUE

    def restart(self):
        """
        back to an empty board, X to move
        """
        self._board: List[Optional[str]] = [None] * BOARD_CELLS
        self.x_is_next = True
        self.status = Status.PLAYING
        self.winner: Optional[str] = None
        self.move_count = 0
