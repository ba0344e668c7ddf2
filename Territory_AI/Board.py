"""Board state container: cell ownership, recolor-and-claim, and status derivation."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum

LOGGER = logging.getLogger(__name__)


class Owner(IntEnum):
    NOBODY = 0
    PLAYER = 1
    AI = 2


class Color(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3
    CYAN = 4
    MAGENTA = 5
    BLACK = 6
    WHITE = 7


# Number of playable colors; used for random draws and never stored in a cell.
COLOR_COUNT = len(Color)
PLAYABLE_COLORS = tuple(Color)
# One letter per color for `pretty()`; K is black.
COLOR_LETTERS = "RGBYCMKW"

# Four-neighborhood offsets (up, down, left, right).
NEIGHBORS_4 = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Status(Enum):
    RUNNING = "running"
    WIN = "win"
    DRAW = "draw"
    LOST = "lost"


@dataclass(frozen=True)
class Cell:
    owner: Owner = Owner.NOBODY
    color: Color = Color.BLACK


def generate_random_color(rng=None):
    """Draw a uniformly random playable color from `rng` (module random if None)."""
    rng = rng or random
    return Color(rng.randrange(COLOR_COUNT))


def color_name(color):
    try:
        return Color(color).name.lower()
    except ValueError:
        return "unknown"


def opponent_of(owner):
    if owner == Owner.PLAYER:
        return Owner.AI
    if owner == Owner.AI:
        return Owner.PLAYER
    raise ValueError("Nobody has no opponent")


class Board:
    def __init__(self, width, height, rng=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid dimensions {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.cells = []
        self.status = Status.RUNNING
        self._initialize()
        self.update_status()

    @classmethod
    def from_cells(cls, width, height, cells, rng=None):
        """Build a board from an explicit row-major cell list."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid dimensions {width}x{height}")
        cells = list(cells)
        if len(cells) != width * height:
            raise ValueError(f"Expected {width * height} cells, got {len(cells)}")
        board = cls.__new__(cls)
        board.width = width
        board.height = height
        board.rng = rng or random.Random()
        board.cells = cells
        board.status = Status.RUNNING
        board.update_status()
        return board

    @classmethod
    def from_pretty(cls, *rows, rng=None):
        """Inverse of `pretty()`: rows of tokens like "PR .K AB"."""
        marks = {".": Owner.NOBODY, "P": Owner.PLAYER, "A": Owner.AI}
        letters = dict(zip(COLOR_LETTERS, Color))
        grid = [row.split() for row in rows]
        if not grid or any(len(row) != len(grid[0]) for row in grid):
            raise ValueError("rows must be non-empty and of equal length")
        try:
            cells = [Cell(marks[tok[0]], letters[tok[1]]) for row in grid for tok in row]
        except (KeyError, IndexError) as exc:
            raise ValueError(f"Bad cell token in {rows!r}") from exc
        return cls.from_cells(len(grid[0]), len(grid), cells, rng=rng)

    def _initialize(self):
        self.cells = [Cell(Owner.NOBODY, generate_random_color(self.rng)) for _ in range(self.width * self.height)]

        player = Cell(Owner.PLAYER, self.cells[0].color)
        ai_color = self.cells[self.linear(self.width - 1, self.height - 1)].color
        while ai_color == player.color:
            ai_color = generate_random_color(self.rng)
        ai = Cell(Owner.AI, ai_color)

        # 2x2 seeds clipped to the grid; the AI block wins overlaps on tiny boards.
        for x, y in ((0, 0), (1, 0), (0, 1), (1, 1)):
            if self.in_bounds(x, y):
                self.cells[self.linear(x, y)] = player
        w, h = self.width, self.height
        for x, y in ((w - 1, h - 1), (w - 1, h - 2), (w - 2, h - 2), (w - 2, h - 1)):
            if self.in_bounds(x, y):
                self.cells[self.linear(x, y)] = ai

    def linear(self, x, y):
        return y * self.width + x

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x, y):
        """Yield the in-bounds 4-neighbors of (x, y)."""
        for dx, dy in NEIGHBORS_4:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield nx, ny

    def at(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"Invalid coordinates {x}x{y}")
        return self.cells[self.linear(x, y)]

    def clone(self):
        new_board = Board.__new__(Board)
        new_board.width = self.width
        new_board.height = self.height
        new_board.rng = self.rng
        new_board.cells = self.cells[:]
        new_board.status = self.status
        return new_board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width, self.height, self.cells) == (other.width, other.height, other.cells)

    def __repr__(self):
        return f"Board({self.width}x{self.height}, status={self.status.value})"

    def color_of(self, owner):
        """Color of the owner's anchor cell: (0, 0) for the player, the opposite corner for the AI."""
        if owner == Owner.PLAYER:
            return self.at(0, 0).color
        if owner == Owner.AI:
            return self.at(self.width - 1, self.height - 1).color
        raise ValueError("Nobody has no color")

    def player_color(self):
        return self.color_of(Owner.PLAYER)

    def ai_color(self):
        return self.color_of(Owner.AI)

    def count_of(self, owner):
        return sum(1 for c in self.cells if c.owner == owner)

    def occupied_by(self, owner):
        return self.count_of(owner) / len(self.cells)

    def has_border_with(self, x, y, owner):
        return any(self.cells[self.linear(nx, ny)].owner == owner for nx, ny in self.neighbors(x, y))

    def is_player_and_ai_in_contact(self):
        for y in range(self.height):
            for x in range(self.width):
                if self.cells[self.linear(x, y)].owner != Owner.PLAYER:
                    continue
                if self.has_border_with(x, y, Owner.AI):
                    return True
        return False

    def change_color_of(self, owner, color):
        """
        Recolor every cell of `owner` to `color`, then claim each unowned cell of
        that color touching the owner's territory. Adjacency is judged against
        the ownership at the start of the call, so the frontier advances by one
        ring per call. Returns the number of cells gained.
        """
        if owner not in (Owner.PLAYER, Owner.AI):
            raise ValueError(f"cannot recolor cells of {owner!r}")
        if not isinstance(color, Color):
            raise ValueError(f"not a playable color: {color!r}")

        owned = Cell(owner, color)
        before = [c.owner for c in self.cells]
        self.cells = [owned if c.owner == owner else c for c in self.cells]

        claimed = []
        for y in range(self.height):
            for x in range(self.width):
                idx = self.linear(x, y)
                c = self.cells[idx]
                if c.owner != Owner.NOBODY or c.color != color:
                    continue
                if any(before[self.linear(nx, ny)] == owner for nx, ny in self.neighbors(x, y)):
                    claimed.append(idx)
        for idx in claimed:
            self.cells[idx] = owned

        LOGGER.debug("%s gained %d cell(s) with %s", owner.name.lower(), len(claimed), color_name(color))
        self.update_status()
        return len(claimed)

    def best_color_for(self, owner, rng=None):
        """Greedy one-ply color choice for `owner`; never mutates the board."""
        try:
            from ai import heuristic
        except ImportError:
            from Territory_AI.ai import heuristic
        return heuristic.best_color(self, owner, rng=rng or self.rng)

    def update_status(self):
        for y in range(self.height):
            for x in range(self.width):
                if self.cells[self.linear(x, y)].owner != Owner.NOBODY:
                    continue
                if self.has_border_with(x, y, Owner.PLAYER) or self.has_border_with(x, y, Owner.AI):
                    self.status = Status.RUNNING
                    return self.status

        player = self.count_of(Owner.PLAYER)
        ai = self.count_of(Owner.AI)
        if player > ai:
            self.status = Status.WIN
        elif player < ai:
            self.status = Status.LOST
        else:
            self.status = Status.DRAW
        return self.status

    def save(self, path):
        try:
            from engine import persistence
        except ImportError:
            from Territory_AI.engine import persistence
        persistence.write_board(path, self.width, self.height, self.cells)

    def load(self, path):
        """Replace the grid with the one stored at `path`; the board is untouched on failure."""
        try:
            from engine import persistence
        except ImportError:
            from Territory_AI.engine import persistence
        width, height, cells = persistence.read_board(path)
        self.width = width
        self.height = height
        self.cells = cells
        self.update_status()

    def pretty(self):
        """ASCII dump: owner marker (P/A/.) followed by a color letter (K is black)."""
        marks = {Owner.NOBODY: ".", Owner.PLAYER: "P", Owner.AI: "A"}
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                c = self.cells[self.linear(x, y)]
                row.append(marks[c.owner] + COLOR_LETTERS[c.color])
            lines.append(" ".join(row))
        return "\n".join(lines)
