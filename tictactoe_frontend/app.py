import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from .ui.main_window import TicTacToeWindow

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

ACCENT_COLOR = QColor("#ffca28")      # yellow
PRIMARY_COLOR = QColor("#1976d2")     # blue
SECONDARY_COLOR = QColor("#424242")   # gray

WINDOW_COLOR = QColor("#ffffff")
WINDOW_TEXT_COLOR = SECONDARY_COLOR
BASE_COLOR = QColor("#ffffff")
ALT_BASE_COLOR = QColor("#f5f5f5")
TEXT_COLOR = SECONDARY_COLOR
BUTTON_COLOR = QColor("#f5f5f5")
BUTTON_TEXT_COLOR = SECONDARY_COLOR
HIGHLIGHT_COLOR = PRIMARY_COLOR
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_TEXT_COLOR = QColor(160, 160, 160)

STYLE_SHEET = f"""
    QWidget#app {{ background-color: {WINDOW_COLOR.name()}; }}
    QLabel#appTitle {{ color: {PRIMARY_COLOR.name()}; }}
    QLabel#footer {{ color: #9e9e9e; font-size: 11px; }}
    QLabel#result[kind="playing"] {{ color: {SECONDARY_COLOR.name()}; }}
    QLabel#result[kind="win"] {{ color: {PRIMARY_COLOR.name()}; }}
    QLabel#result[kind="draw"] {{ color: #b28704; }}
    QPushButton#square {{
        background-color: #fafafa;
        color: {PRIMARY_COLOR.name()};
        border: 2px solid {SECONDARY_COLOR.name()};
        border-radius: 6px;
    }}
    QPushButton#square:hover {{ background-color: #fff8e1; }}
    QPushButton#square[filled="true"] {{ background-color: #ffffff; }}
    QWidget#board[status="won"] QPushButton#square {{ border-color: {PRIMARY_COLOR.name()}; }}
    QWidget#board[status="draw"] QPushButton#square {{ border-color: {ACCENT_COLOR.name()}; }}
    QPushButton#restartBtn {{
        background-color: {ACCENT_COLOR.name()};
        color: {SECONDARY_COLOR.name()};
        border: none; border-radius: 4px;
        padding: 6px 14px; font-weight: bold;
    }}
"""

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the light theme palette and style sheet using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)
    app.setStyleSheet(STYLE_SHEET)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tictactoe", description="Two player tic-tac-toe")
    p.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING",
                   help="Logging level (default: WARNING)")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return p


def resolve_log_level(ns) -> int:
    # -v wins over --log-level
    return logging.DEBUG if ns.verbose else getattr(logging, ns.log_level)


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    # unknown args are left for Qt (e.g. -platform offscreen)
    ns, qt_args = build_parser().parse_known_args(argv[1:])
    level = resolve_log_level(ns)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication([argv[0], *qt_args])
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    logger.info("window shown")
    return app.exec()
