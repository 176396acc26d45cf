from tictactoe_frontend.game_logic import GameLogic
from tictactoe_frontend.ui.labels import cell_label, cell_text, status_kind, status_text


def test_status_on_new_game():
    game = GameLogic()
    assert status_text(game) == "X's turn"
    assert status_kind(game) == "playing"


def test_status_after_one_move():
    game = GameLogic()
    game.handle_click(0)
    assert status_text(game) == "O's turn"


def test_status_win():
    game = GameLogic()
    for idx in [0, 3, 1, 4, 2]:
        game.handle_click(idx)
    assert status_text(game) == "X wins!"
    assert status_kind(game) == "win"


def test_status_draw():
    game = GameLogic()
    for idx in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
        game.handle_click(idx)
    assert status_text(game) == "Draw!"
    assert status_kind(game) == "draw"


def test_cell_labels():
    assert cell_text(None) == ""
    assert cell_text("O") == "O"
    assert cell_label(None) == "Empty cell"
    assert cell_label("X") == "Cell X"
