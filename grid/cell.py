from enum import Enum
from typing import Any, NamedTuple


# ---------------------------------------------------------------------------
# Cell State Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class CellState(Enum):
    EMPTY    = "empty"      # default dark
    WALL     = "wall"       # user-placed obstacle
    START    = "start"      # teal — start cell
    END      = "end"        # magenta — goal cell
    VISITED  = "visited"    # expanded by the search
    CURRENT  = "current"    # the most recently animated cell
    PATH     = "path"       # on the reconstructed path


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------
class Position(NamedTuple):
    """A (row, col) grid coordinate."""

    row: int
    col: int

    @classmethod
    def coerce(cls, value: Any) -> "Position":
        """
        Accept a Position, a (row, col) pair, or a {"row": r, "col": c} mapping.
        Raises TypeError for anything else.
        """
        if isinstance(value, Position):
            return value
        if isinstance(value, dict):
            try:
                return cls(int(value["row"]), int(value["col"]))
            except KeyError as e:
                raise TypeError(f"position mapping is missing {e.args[0]!r}") from None
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(int(value[0]), int(value[1]))
        raise TypeError(f"cannot interpret {value!r} as a (row, col) position")

    def to_dict(self) -> dict:
        return {"row": self.row, "col": self.col}


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
class Cell(NamedTuple):
    """
    Read-only view of one grid square, as handed out by Grid.cells().

    Attributes:
        row, col : Coordinates.
        is_wall  : Obstacle flag, fixed for the duration of a search.
    """

    row:     int
    col:     int
    is_wall: bool = False

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)

    def to_dict(self) -> dict:
        return {"row": self.row, "col": self.col, "is_wall": self.is_wall}
