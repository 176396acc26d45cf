import logging

from ..game_logic import GameLogic, MoveResult
from ..ui.board_widget import BoardWidget
from .labels import status_kind, status_text

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QSizePolicy
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tic Tac Toe"
FOOTER_TEXT = "Minimal • Two Player • Light Theme"
RESTART_TEXT = "Restart Game"
DEFAULT_SIZE = (420, 560)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, game_logic=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = game_logic or GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self._setup_ui()
        self._render()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*DEFAULT_SIZE)
        self.central_widget = QWidget()
        self.central_widget.setObjectName("app")
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self.title_label = QLabel(WINDOW_TITLE)
        self.title_label.setObjectName("appTitle")
        f = QFont(); f.setPointSize(22); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.title_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_controls()            # status + restart
        self.main_layout.addWidget(self.controls_widget)

        self.footer_label = QLabel(FOOTER_TEXT)
        self.footer_label.setObjectName("footer")
        self.footer_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.footer_label)

    def _create_controls(self):
        # status label + restart button
        self.controls_widget = QWidget()
        hl = QHBoxLayout(self.controls_widget)
        self.status_label = QLabel("")
        self.status_label.setObjectName("result")
        f = QFont(); f.setPointSize(14); f.setBold(True); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.status_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.restart_button = QPushButton(RESTART_TEXT)
        self.restart_button.setObjectName("restartBtn")
        self.restart_button.setAccessibleName(RESTART_TEXT)
        self.restart_button.clicked.connect(self.restart_game)
        hl.addWidget(self.status_label)
        hl.addStretch(1)
        hl.addWidget(self.restart_button)

    def _render(self):
        # project game state onto widgets
        self.board_widget.refresh()
        self.status_label.setText(status_text(self.game_logic))
        self.status_label.setProperty("kind", status_kind(self.game_logic))
        self.status_label.style().unpolish(self.status_label)
        self.status_label.style().polish(self.status_label)

    @Slot(int)
    def _on_cell_clicked(self, index):
        # illegal clicks are ignored by the game logic
        res = self.game_logic.handle_click(index)
        if res is MoveResult.INVALID:
            return
        self._render()

    @Slot()
    def restart_game(self):
        # back to a fresh local game
        logger.info("restarting game")
        self.game_logic.restart()
        self._render()
