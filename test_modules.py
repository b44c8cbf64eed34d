"""
Tests for the TicTacToe front-end modules: console game, board snapshots
and confetti. These run without a display.
"""

import itertools
import random

import numpy as np
import pytest
from PIL import Image, ImageColor

from board_image import render_board, save_board
from confetti import ConfettiField
from game import AIPlayer, GameConfig, GameMode, Mark
from main import ConsoleGame, parse_cell

X, O = Mark.X, Mark.O


def scripted_input(moves, play_again="n"):
    """Input function that feeds moves, then answers the play-again prompt."""
    moves = iter(moves)

    def _input(prompt):
        if prompt.startswith("Play again"):
            return play_again
        return next(moves)

    return _input


# ==================== CONSOLE ====================

@pytest.mark.parametrize("text, index", [
    ("1", 0),
    ("9", 8),
    (" 5 ", 4),
    ("0,0", 0),
    ("1,2", 5),
    ("2,1", 7),
])
def test_parse_cell(text, index):
    assert parse_cell(text) == index


@pytest.mark.parametrize("text", ["", "abc", "1,", "x,1", "3,3", "-1,0"])
def test_parse_cell_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_cell(text)


@pytest.mark.parametrize("text", ["0", "10", "-3"])
def test_parse_cell_rejects_numbers_off_the_board(text):
    with pytest.raises(ValueError, match="Must be 1-9"):
        parse_cell(text)


def test_console_two_player_game(capsys):
    game = ConsoleGame(
        mode=GameMode.TWO_PLAYER,
        input_func=scripted_input(["1", "4", "2", "5", "3"]),
    )
    game.start()

    assert game.session.winner == X
    assert game.session.winning_line == (0, 1, 2)
    out = capsys.readouterr().out
    assert "Player X Wins!" in out
    assert "Goodbye!" in out


def test_console_reports_bad_input_and_keeps_going(capsys):
    game = ConsoleGame(
        input_func=scripted_input(["hello", "1", "1", "0", "q"]),
    )
    game.start()

    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "already occupied" in out
    assert "Invalid cell 0. Must be 1-9." in out
    assert "Invalid position" not in out
    assert game.session.board[0] == X
    assert game.session.current_player == O
    assert game.session.active


def test_console_restart_command():
    game = ConsoleGame(input_func=scripted_input(["5", "r", "q"]))
    game.start()
    assert game.session.board == [None] * 9
    assert game.session.current_player == X


def test_console_change_mode_command():
    game = ConsoleGame(input_func=scripted_input(["5", "m", "q"]))
    game.start()
    assert game.session.mode == GameMode.VS_OPPONENT
    assert game.session.board == [None] * 9


def test_console_vs_computer_plays_to_the_end(capsys):
    sleeps = []
    ai = AIPlayer(rng=random.Random(5))
    # Keep offering cells 1-9; taken ones are rejected and the next is tried
    cells = itertools.cycle(str(i) for i in range(1, 10))
    game = ConsoleGame(
        mode=GameMode.VS_OPPONENT,
        delay_ms=250,
        ai=ai,
        input_func=scripted_input(cells),
        sleep_func=sleeps.append,
    )
    game.start()

    session = game.session
    assert not session.active
    computer_moves = [m for m in session.moves if m.player == O]
    assert len(sleeps) == len(computer_moves) > 0
    assert all(s == pytest.approx(0.25) for s in sleeps)

    out = capsys.readouterr().out
    if session.winner == O:
        assert "Computer Wins!" in out
    elif session.winner == X:
        assert "You Win!" in out
    else:
        assert "It's a Draw!" in out


def test_console_computer_blocks():
    ai = AIPlayer(rng=random.Random(0))
    game = ConsoleGame(
        mode=GameMode.VS_OPPONENT,
        delay_ms=0,
        ai=ai,
        input_func=scripted_input(["1", "2", "q"]),
        sleep_func=lambda s: None,
    )
    game.start()
    # X took 1, O took center, X took 2, O must block at 3
    assert game.session.board[4] == O
    assert game.session.board[2] == O


def test_console_saves_final_board(tmp_path):
    path = tmp_path / "final.png"
    game = ConsoleGame(
        input_func=scripted_input(["1", "4", "2", "5", "3"]),
        snapshot_path=str(path),
    )
    game.start()

    assert path.exists()
    with Image.open(path) as image:
        assert image.size == (GameConfig.SNAPSHOT_SIZE, GameConfig.SNAPSHOT_SIZE)


# ==================== BOARD SNAPSHOT ====================

def test_render_board_size_and_mode():
    image = render_board([None] * 9, size=240)
    assert image.size == (240, 240)
    assert image.mode == "RGB"


def test_render_board_highlights_winning_cells():
    board = [X, X, X,
             O, O, None,
             None, None, None]
    image = render_board(board, winning_line=(0, 1, 2), size=300)

    win_rgb = ImageColor.getrgb(GameConfig.WIN_CELL_COLOR)
    cell_rgb = ImageColor.getrgb(GameConfig.CELL_COLOR)
    # Cell corners stay clear of marks and grid lines
    assert image.getpixel((10, 10)) == win_rgb
    assert image.getpixel((210, 10)) == win_rgb
    assert image.getpixel((10, 110)) == cell_rgb
    assert image.getpixel((210, 210)) == cell_rgb


def test_render_board_draws_marks():
    board = [X, O, None] + [None] * 6
    image = render_board(board, size=300)

    # X crosses at the centre of its cell, an O is hollow
    assert image.getpixel((50, 50)) == ImageColor.getrgb(GameConfig.X_COLOR)
    assert image.getpixel((150, 50)) == ImageColor.getrgb(GameConfig.CELL_COLOR)
    assert image.getpixel((250, 50)) == ImageColor.getrgb(GameConfig.CELL_COLOR)


def test_save_board_writes_png(tmp_path):
    path = save_board([X] + [None] * 8, str(tmp_path / "board.png"))
    with Image.open(path) as image:
        assert image.format == "PNG"


# ==================== CONFETTI ====================

def make_field(count=50):
    return ConfettiField(400, 300, count=count, rng=np.random.default_rng(42))


def test_confetti_starts_above_the_screen():
    field = make_field()
    assert len(list(field.particles())) == 50
    assert np.all(field.y <= 0)
    assert np.all((field.x >= 0) & (field.x <= 400))
    assert np.all((field.size >= 5) & (field.size <= 15))


def test_confetti_falls_and_drifts():
    field = make_field()
    x0, y0 = field.x.copy(), field.y.copy()
    field.step()

    np.testing.assert_allclose(field.y, y0 + field.speed_y)
    np.testing.assert_allclose(field.x, x0 + field.speed_x)
    assert np.all(field.speed_y >= 2) and np.all(field.speed_y <= 5)
    assert np.all(np.abs(field.speed_x) <= 2)


def test_confetti_respawns_at_top():
    field = make_field()
    field.y[0] = field.height + 100
    field.step()
    assert field.y[0] == ConfettiField.RESPAWN_Y


def test_confetti_particles_are_drawable():
    field = make_field()
    for _ in range(10):
        field.step()
    for p in field.particles():
        assert p.color in GameConfig.CONFETTI_COLORS
        assert p.shape in ("rect", "circle")
        assert 0 <= p.rotation < 360


# ==================== KEYBOARD NAVIGATION ====================

@pytest.mark.parametrize("index, key, expected", [
    (0, "Up", 6),
    (1, "Up", 7),
    (4, "Up", 1),
    (7, "Down", 1),
    (8, "Down", 2),
    (4, "Down", 7),
    (3, "Left", 5),
    (0, "Left", 2),
    (4, "Left", 3),
    (5, "Right", 3),
    (8, "Right", 6),
    (4, "Right", 5),
])
def test_arrow_keys_wrap_around_the_board(index, key, expected):
    ui = pytest.importorskip("ui")
    assert ui.next_focus_index(index, key) == expected


def test_other_keys_keep_focus():
    ui = pytest.importorskip("ui")
    assert ui.next_focus_index(4, "Return") == 4
