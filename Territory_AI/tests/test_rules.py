"""Color-pick checks and player input parsing."""

import logging
import random
import time

import pytest

from Territory_AI.Board import Board, Cell, Color, COLOR_COUNT, Owner
from Territory_AI.Player import HumanPlayer, GuiHumanPlayer, parse_color
from Territory_AI.ai.greedy_player import GreedyPlayer
from Territory_AI.engine import referee


def contact_board():
    cells = [
        Cell(Owner.PLAYER, Color.RED), Cell(Owner.PLAYER, Color.RED), Cell(Owner.NOBODY, Color.GREEN),
        Cell(Owner.PLAYER, Color.RED), Cell(Owner.AI, Color.BLUE), Cell(Owner.AI, Color.BLUE),
    ]
    return Board.from_cells(3, 2, cells, rng=random.Random(0))


def test_current_color_pick_rejected_with_warning(caplog):
    b = contact_board()
    with caplog.at_level(logging.WARNING):
        assert referee.check_pick(Color.RED, b) is False
    assert any("already has this color" in r.getMessage() for r in caplog.records)


def test_opponent_color_allowed_for_player_in_contact():
    b = contact_board()
    assert b.is_player_and_ai_in_contact()
    assert referee.check_pick(Color.BLUE, b) is True
    b.change_color_of(Owner.PLAYER, Color.BLUE)
    assert b.count_of(Owner.AI) == 2


@pytest.mark.parametrize("value", [COLOR_COUNT, 3, "red", None])
def test_non_colors_rejected(value):
    with pytest.raises(ValueError):
        referee.check_pick(value, contact_board())


@pytest.mark.parametrize(
    "raw,expected",
    [("red", Color.RED), (" Magenta ", Color.MAGENTA), ("7", Color.WHITE), ("0", Color.RED)],
)
def test_parse_color(raw, expected):
    assert parse_color(raw) == expected


@pytest.mark.parametrize("raw", ["8", "purple", "", "-1"])
def test_parse_color_rejects(raw):
    with pytest.raises(ValueError):
        parse_color(raw)


def test_human_player_reads_stdin(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "cyan")
    assert HumanPlayer().next_color(contact_board()) == Color.CYAN


def test_human_player_expired_deadline():
    with pytest.raises(TimeoutError):
        HumanPlayer().next_color(contact_board(), deadline=time.time() - 1)


def test_gui_player_delegates_to_view():
    class View:
        def wait_for_color(self, board, deadline):
            return Color.YELLOW

    assert GuiHumanPlayer(View()).next_color(contact_board()) == Color.YELLOW


def test_greedy_player_never_repeats_its_color():
    for seed in range(30):
        b = Board(6, 6, rng=random.Random(seed))
        player = GreedyPlayer(owner=Owner.PLAYER, rng=random.Random(seed))
        for _ in range(10):
            pick = player.next_color(b)
            assert pick != b.color_of(Owner.PLAYER)
            b.change_color_of(Owner.PLAYER, pick)
            b.change_color_of(Owner.AI, b.best_color_for(Owner.AI))
