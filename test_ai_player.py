"""
Tests for the heuristic AI opponent.
Random tie-breaks are checked against the set of allowed cells.
"""

import random

import pytest

from game import AIPlayer, Mark, NO_MOVE, check_win, empty_board, select_move

X, O = Mark.X, Mark.O

CORNERS = {0, 2, 6, 8}
EDGES = {1, 3, 5, 7}


def seeded(seed=0, mark=O):
    return AIPlayer(mark, rng=random.Random(seed))


def test_blocks_immediate_threat():
    board = [X, X, None,
             None, None, None,
             None, None, None]
    ai = seeded()
    assert ai.select_move(board) == 2
    assert ai.last_reason == "block"


def test_blocks_column_threat():
    board = [X, O, None,
             X, None, None,
             None, None, None]
    assert select_move(board) == 6


def test_takes_win_before_block():
    board = [O, O, None,
             X, X, None,
             None, None, None]
    ai = seeded()
    assert ai.select_move(board) == 2
    assert ai.last_reason == "win"


def test_lowest_winning_index_first():
    # O can win at 2 (top row) or 3 (left column)
    board = [O, O, None,
             None, X, X,
             O, X, None]
    assert select_move(board) == 2


def test_only_picks_a_line_that_really_completes():
    # O at 0 and 4: only 8 finishes a line
    board = [O, None, None,
             None, O, None,
             None, None, None]
    index = select_move(board)
    assert index == 8

    after = list(board)
    after[index] = O
    assert check_win(after) == (0, 4, 8)


def test_no_false_win_with_single_mark():
    board = [O, None, None,
             None, None, None,
             None, None, None]
    ai = seeded()
    assert ai.select_move(board) == 4
    assert ai.last_reason == "center"


def test_takes_center_when_free():
    board = [X, None, None,
             None, None, None,
             None, None, None]
    assert select_move(board) == 4


def test_takes_center_on_empty_board():
    assert select_move(empty_board()) == 4


def test_takes_a_corner_when_center_is_gone():
    board = [None, None, None,
             None, X, None,
             None, None, None]
    picks = set()
    for seed in range(200):
        ai = seeded(seed)
        move = ai.select_move(board)
        assert move in CORNERS
        assert ai.last_reason == "corner"
        picks.add(move)
    # Tie-break is random across all free corners
    assert picks == CORNERS


def test_takes_an_edge_when_center_and_corners_are_gone():
    board = [X, None, O,
             O, O, X,
             X, None, O]
    picks = set()
    for seed in range(100):
        ai = seeded(seed)
        move = ai.select_move(board)
        assert move in {1, 7}
        assert ai.last_reason == "edge"
        picks.add(move)
    assert picks == {1, 7}


def test_single_free_edge():
    board = [X, O, X,
             None, O, X,
             O, X, O]
    assert select_move(board) == 3


def test_full_board_returns_no_move():
    board = [X, O, X,
             X, O, O,
             O, X, X]
    ai = seeded()
    assert ai.select_move(board) == NO_MOVE
    assert ai.last_reason is None


def test_plays_as_x_too():
    board = [X, X, None,
             O, O, None,
             None, None, None]
    assert select_move(board, X) == 2
    assert select_move(board, O) == 5


def test_rejects_non_mark():
    with pytest.raises(TypeError):
        AIPlayer("O")


def test_never_picks_occupied_cell_and_leaves_board_alone():
    rng = random.Random(7)
    ai = seeded(3)
    for _ in range(500):
        board = [rng.choice([X, O, None]) for _ in range(9)]
        before = list(board)
        move = ai.select_move(board)

        assert board == before
        if None in board:
            assert 0 <= move <= 8
            assert board[move] is None
        else:
            assert move == NO_MOVE


def test_move_suggestion_text():
    ai = seeded()
    text = ai.get_move_suggestion([X, X, None] + [None] * 6)
    assert "cell 3" in text
    assert "block" in text

    full = [X, O, X, X, O, O, O, X, X]
    assert ai.get_move_suggestion(full) == "No moves available!"
