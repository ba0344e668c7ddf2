"""Binary board files: int32 width, height, then (owner, color) per cell in row-major order."""

import os
import struct
import tempfile

try:
    from Board import Cell, Color, Owner
except ImportError:
    from Territory_AI.Board import Cell, Color, Owner

HEADER = struct.Struct("<ii")
CELL = struct.Struct("<ii")


def encode_board(width, height, cells):
    payload = bytearray(HEADER.pack(width, height))
    for cell in cells:
        payload += CELL.pack(int(cell.owner), int(cell.color))
    return bytes(payload)


def decode_board(data):
    """Decode a board payload; raise ValueError on bad dimensions or truncated/corrupt data."""
    if len(data) < HEADER.size:
        raise ValueError("board file too short for its header")
    width, height = HEADER.unpack_from(data, 0)
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid dimensions {width}x{height} in board file")

    expected = HEADER.size + width * height * CELL.size
    if len(data) < expected:
        raise ValueError(f"board file truncated: expected {expected} bytes, got {len(data)}")

    cells = []
    for owner_raw, color_raw in CELL.iter_unpack(data[HEADER.size:expected]):
        try:
            cells.append(Cell(Owner(owner_raw), Color(color_raw)))
        except ValueError as exc:
            raise ValueError(f"corrupt cell (owner={owner_raw}, color={color_raw})") from exc
    return width, height, cells


def write_board(path, width, height, cells):
    """Write atomically: serialize into a sibling temp file then rename over `path`."""
    data = encode_board(width, height, cells)
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".board-", dir=directory)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def read_board(path):
    with open(path, "rb") as f:
        data = f.read()
    return decode_board(data)
