"""
grid/
-----
Core data layer.  Public API:

    from grid import Grid, Cell, Position, CellState
    from grid import SearchError, InvalidGrid, InvalidEndpoint, …
"""

from grid.cell   import Cell, CellState, Position
from grid.errors import (
    SearchError,
    InvalidGrid,
    InvalidEndpoint,
    UnknownAlgorithm,
    NodeBudgetExceeded,
)
from grid.grid   import Grid

__all__ = [
    "Cell",      "CellState",   "Position",
    "Grid",
    "SearchError",
    "InvalidGrid",
    "InvalidEndpoint",
    "UnknownAlgorithm",
    "NodeBudgetExceeded",
]
