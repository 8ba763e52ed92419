"""
grid.py — Grid Container & Generator
=====================================
Single source of truth for the board.  Algorithms and the renderer
both talk to this object.

Responsibilities:
  1. Wall flags for a fixed rows × cols board     (is_wall / set_wall / toggle)
  2. Neighbour queries in a fixed N, E, S, W order
  3. Editing helpers for the UI                   (drag lines, random walls)
  4. Serialisation round-trip                     (to_dict / from_dict)
  5. Snapshots                                    (private copy per search)

Design decisions:
  - Walls are stored in one flat row-major list.  Cells are addressed by
    flat index `row * cols + col` inside the engine so per-search
    bookkeeping can live in plain parallel lists (arena + index).
  - Dimensions are fixed at construction; there is no resize.
  - Neighbour order North, East, South, West is load-bearing: it is the
    tie-break whenever two cells are otherwise equally eligible.
"""

import random
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from grid.cell import Cell, Position
from grid.errors import InvalidGrid


# North, East, South, West
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

WALL_CHAR = "#"


class Grid:
    """
    Attributes:
        rows, cols : Fixed dimensions.
        _walls     : Flat row-major list of wall flags.
    """

    __slots__ = ("rows", "cols", "_walls")

    def __init__(self, rows: int, cols: int, walls: Optional[Iterable[bool]] = None):
        if rows <= 0 or cols <= 0:
            raise InvalidGrid(f"grid dimensions must be positive, got {rows}x{cols}")
        self.rows: int = rows
        self.cols: int = cols
        if walls is None:
            self._walls: List[bool] = [False] * (rows * cols)
        else:
            self._walls = [bool(w) for w in walls]
            if len(self._walls) != rows * cols:
                raise InvalidGrid(
                    f"expected {rows * cols} wall flags for a {rows}x{cols} grid, "
                    f"got {len(self._walls)}"
                )

    # ==================================================================
    # Construction helpers
    # ==================================================================
    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[bool]]]) -> "Grid":
        """
        Build from nested rows.  Each row is either a string ('#' = wall,
        anything else open) or a sequence of truthy wall flags.

            Grid.from_rows(["..#",
                            ".#.",
                            "..."])
        """
        if not rows:
            raise InvalidGrid("grid has no rows")
        width = len(rows[0])
        if width == 0:
            raise InvalidGrid("grid has no columns")

        walls: List[bool] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGrid(
                    f"grid is not rectangular: row {r} has {len(row)} cells, expected {width}"
                )
            if isinstance(row, str):
                walls.extend(ch == WALL_CHAR for ch in row)
            else:
                walls.extend(bool(v) for v in row)
        return cls(len(rows), width, walls)

    @classmethod
    def generate_random(
        cls,
        rows: int,
        cols: int,
        wall_prob: float = 0.25,
        seed: Optional[int] = None,
        keep_clear: Iterable[Position] = (),
    ) -> "Grid":
        """
        Random obstacle field.  Cells listed in `keep_clear` (typically the
        current start and end) are never walled.
        """
        rng = random.Random(seed)
        g = cls(rows, cols)
        protected = {g.index(Position.coerce(p)) for p in keep_clear if g.in_bounds(Position.coerce(p))}
        for idx in range(rows * cols):
            if idx not in protected and rng.random() < wall_prob:
                g._walls[idx] = True
        return g

    def snapshot(self) -> "Grid":
        """Independent copy — searches never touch the caller's grid."""
        return Grid(self.rows, self.cols, list(self._walls))

    # ==================================================================
    # Indexing
    # ==================================================================
    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos[0] < self.rows and 0 <= pos[1] < self.cols

    def index(self, pos: Position) -> int:
        return pos[0] * self.cols + pos[1]

    def position(self, idx: int) -> Position:
        return Position(*divmod(idx, self.cols))

    # ==================================================================
    # Walls
    # ==================================================================
    def is_wall(self, pos: Position) -> bool:
        return self._walls[self.index(pos)]

    def is_wall_index(self, idx: int) -> bool:
        return self._walls[idx]

    def set_wall(self, pos: Position, value: bool = True) -> None:
        self._walls[self.index(pos)] = bool(value)

    def toggle_wall(self, pos: Position) -> bool:
        """Flip one cell and return its new wall flag."""
        idx = self.index(pos)
        self._walls[idx] = not self._walls[idx]
        return self._walls[idx]

    def clear_walls(self) -> None:
        self._walls = [False] * self.size

    def wall_count(self) -> int:
        return sum(self._walls)

    def draw_line(
        self,
        a: Position,
        b: Position,
        protected: Iterable[Position] = (),
    ) -> List[Position]:
        """
        Paint walls on every cell a mouse drag from `a` to `b` crosses, so a
        fast drag never leaves gaps.  Protected cells (start / end) are left
        alone.  Returns the cells that were painted.
        """
        keep = {Position.coerce(p) for p in protected}
        painted = []
        for pos in line_between(a, b):
            if self.in_bounds(pos) and pos not in keep:
                self.set_wall(pos, True)
                painted.append(pos)
        return painted

    # ==================================================================
    # Adjacency
    # ==================================================================
    def neighbours(self, pos: Position) -> List[Position]:
        """In-bounds orthogonal neighbours in N, E, S, W order (walls included)."""
        row, col = pos
        out = []
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            if 0 <= r < self.rows and 0 <= c < self.cols:
                out.append(Position(r, c))
        return out

    def neighbour_indices(self, idx: int) -> List[int]:
        """Flat-index version of neighbours(), same order."""
        row, col = divmod(idx, self.cols)
        out = []
        if row > 0:
            out.append(idx - self.cols)
        if col < self.cols - 1:
            out.append(idx + 1)
        if row < self.rows - 1:
            out.append(idx + self.cols)
        if col > 0:
            out.append(idx - 1)
        return out

    def cells(self) -> Iterator[Cell]:
        """All cells in row-major order."""
        for idx, wall in enumerate(self._walls):
            row, col = divmod(idx, self.cols)
            yield Cell(row, col, wall)

    # ==================================================================
    # Serialisation
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "walls": "".join("1" if w else "0" for w in self._walls),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Grid":
        walls = data.get("walls") or ""
        if not walls:
            return cls(data["rows"], data["cols"])
        return cls(data["rows"], data["cols"], (ch == "1" for ch in walls))

    # ==================================================================
    # Dunder
    # ==================================================================
    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, walls={self.wall_count()})"

    def __str__(self) -> str:
        lines = []
        for r in range(self.rows):
            row = self._walls[r * self.cols:(r + 1) * self.cols]
            lines.append("".join(WALL_CHAR if w else "." for w in row))
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Grid)
            and self.rows == other.rows
            and self.cols == other.cols
            and self._walls == other._walls
        )


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------
def line_between(a: Position, b: Position) -> List[Position]:
    """Bresenham line from a to b inclusive."""
    row0, col0 = Position.coerce(a)
    row1, col1 = Position.coerce(b)
    dx = abs(col1 - col0)
    dy = abs(row1 - row0)
    sx = 1 if col0 < col1 else -1
    sy = 1 if row0 < row1 else -1
    err = dx - dy

    cells = []
    row, col = row0, col0
    while True:
        cells.append(Position(row, col))
        if row == row1 and col == col1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            col += sx
        if e2 < dx:
            err += dx
            row += sy
    return cells
