from PySide6.QtWidgets import QWidget, QGridLayout, QPushButton, QSizePolicy
from PySide6.QtCore import QSize, Signal
from PySide6.QtGui import QFont

from ..game_logic import BOARD_CELLS
from .labels import cell_label, cell_text

GRID_SIZE = 3


class SquareButton(QPushButton):
    """
    one clickable board cell
    """
    def __init__(self, index, parent=None):
        super().__init__("", parent)
        self.index = index
        self.setObjectName("square")
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(64, 64))
        f = QFont(); f.setPointSize(28); f.setBold(True); self.setFont(f)
        self.set_value(None)

    def set_value(self, value):
        # text, a11y name and `filled` style property
        self.setText(cell_text(value))
        self.setAccessibleName(cell_label(value))
        self.setProperty("filled", bool(value))
        # re-polish so the stylesheet picks up the property change
        self.style().unpolish(self); self.style().polish(self)


class BoardWidget(QWidget):
    """
    3x3 grid of cell buttons
    """
    cell_clicked = Signal(int)  # emits flat cell index 0-8

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setObjectName("board")
        self.setMinimumSize(QSize(220, 220))
        layout = QGridLayout(self)
        layout.setSpacing(6)
        layout.setContentsMargins(0, 0, 0, 0)
        self.squares = []
        for i in range(BOARD_CELLS):
            btn = SquareButton(i, parent=self)
            btn.clicked.connect(lambda _checked=False, i=i: self.cell_clicked.emit(i))
            layout.addWidget(btn, i // GRID_SIZE, i % GRID_SIZE)
            self.squares.append(btn)
        self.refresh()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def refresh(self):
        """
        sync buttons and `status` property with the game state
        """
        for btn, value in zip(self.squares, self.game_logic.board):
            btn.set_value(value)
        self.setProperty("status", self.game_logic.status.value)
        self.style().unpolish(self); self.style().polish(self)
