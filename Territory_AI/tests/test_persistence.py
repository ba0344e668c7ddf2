"""Binary save/load: exact layout, validation, and all-or-nothing loading."""

import random
import struct

import pytest

from Territory_AI.Board import Board, Cell, Color, Owner, Status
from Territory_AI.engine import persistence


def test_file_layout(tmp_path):
    b = Board(3, 2, rng=random.Random(7))
    path = tmp_path / "board.bin"
    b.save(path)

    data = path.read_bytes()
    assert len(data) == 8 + 3 * 2 * 8
    assert struct.unpack_from("<ii", data, 0) == (3, 2)
    for i, cell in enumerate(b.cells):
        assert struct.unpack_from("<ii", data, 8 + 8 * i) == (int(cell.owner), int(cell.color))


def test_load_replaces_grid_and_status(tmp_path):
    played = Board(6, 4, rng=random.Random(1))
    for color in (Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW):
        played.change_color_of(Owner.PLAYER, color)
    path = tmp_path / "board.bin"
    played.save(str(path))

    other = Board(9, 9, rng=random.Random(2))
    other.load(str(path))
    assert other == played
    assert (other.width, other.height) == (6, 4)
    assert other.status is played.status


def test_load_rederives_finished_status(tmp_path):
    path = tmp_path / "done.bin"
    cells = [Cell(Owner.PLAYER, Color.RED)] * 3 + [Cell(Owner.AI, Color.BLUE)]
    persistence.write_board(path, 2, 2, cells)

    b = Board(4, 4, rng=random.Random(3))
    b.load(path)
    assert b.status is Status.WIN


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-2, 2)])
def test_bad_dimensions_leave_board_untouched(tmp_path, width, height):
    path = tmp_path / "bad.bin"
    path.write_bytes(struct.pack("<ii", width, height))
    b = Board(4, 4, rng=random.Random(4))
    before = b.clone()
    with pytest.raises(ValueError):
        b.load(path)
    assert b == before


def test_truncated_file_leaves_board_untouched(tmp_path):
    path = tmp_path / "short.bin"
    payload = persistence.encode_board(2, 2, [Cell(Owner.PLAYER, Color.RED)] * 4)
    path.write_bytes(payload[:-4])
    b = Board(4, 4, rng=random.Random(5))
    before = b.clone()
    with pytest.raises(ValueError):
        b.load(path)
    assert b == before


def test_corrupt_cell_rejected(tmp_path):
    path = tmp_path / "corrupt.bin"
    path.write_bytes(struct.pack("<ii", 1, 1) + struct.pack("<ii", 1, 99))
    with pytest.raises(ValueError):
        persistence.read_board(path)


def test_missing_file_raises(tmp_path):
    b = Board(3, 3, rng=random.Random(6))
    with pytest.raises(OSError):
        b.load(tmp_path / "nope.bin")


def test_unwritable_target_raises(tmp_path):
    b = Board(3, 3, rng=random.Random(6))
    with pytest.raises(OSError):
        b.save(tmp_path / "missing-dir" / "board.bin")


def test_failed_save_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "board.bin"
    first = Board(3, 3, rng=random.Random(8))
    first.save(path)
    original = path.read_bytes()

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(persistence.os, "replace", boom)
    with pytest.raises(OSError):
        Board(5, 5, rng=random.Random(9)).save(path)
    assert path.read_bytes() == original
    assert [p.name for p in tmp_path.iterdir()] == ["board.bin"]
