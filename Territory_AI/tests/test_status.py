"""Status derivation: running while a border is open, then decided by cell counts."""

import random

import pytest

from Territory_AI.Board import Board, Cell, Color, Owner, Status


@pytest.mark.parametrize(
    "rows,expected",
    [
        (("PR .G", ".G AB"), Status.RUNNING),
        (("PR PR", "AB AB"), Status.DRAW),
        (("PR PR", "PR AB"), Status.WIN),
        (("PR AB", "AB AB"), Status.LOST),
    ],
)
def test_two_by_two(rows, expected):
    assert Board.from_pretty(*rows).status is expected


def test_two_by_two_game_to_the_end():
    b = Board.from_pretty(
        "PR .G",
        ".Y AB",
    )
    assert b.status is Status.RUNNING
    b.change_color_of(Owner.PLAYER, Color.GREEN)
    assert b.status is Status.RUNNING
    b.change_color_of(Owner.AI, Color.YELLOW)
    assert b.status is Status.DRAW


def test_player_takes_the_last_cells():
    b = Board.from_pretty(
        "PR .G",
        ".G AB",
    )
    assert b.change_color_of(Owner.PLAYER, Color.GREEN) == 2
    assert b.status is Status.WIN


def test_ai_takes_the_last_cells():
    b = Board.from_pretty(
        "PR .G",
        ".G AB",
    )
    assert b.change_color_of(Owner.AI, Color.GREEN) == 2
    assert b.status is Status.LOST


def test_status_recomputed_by_update():
    b = Board.from_pretty("PR .G", ".G AB")
    b.cells[1] = Cell(Owner.PLAYER, Color.GREEN)
    b.cells[2] = Cell(Owner.AI, Color.GREEN)
    assert b.status is Status.RUNNING
    assert b.update_status() is Status.DRAW
    assert b.status is Status.DRAW


def test_running_on_fresh_boards():
    for seed in range(10):
        assert Board(5, 5, rng=random.Random(seed)).status is Status.RUNNING
