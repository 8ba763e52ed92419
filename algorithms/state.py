"""
state.py — Per-Search Bookkeeping & Result Records
===================================================
SearchState is the only mutable structure a search touches.  It is built
fresh for every invocation from a grid snapshot and thrown away once the
SearchResult is assembled, so repeated or concurrent searches never see
stale distances or predecessors.

Design decisions:
  - Parallel flat lists indexed by `row * cols + col`, not Node objects.
    Back-pointers are plain ints, so there are no object reference cycles
    and the whole state is trivially copyable.
  - `distance` uses math.inf as the "unreached" sentinel.
  - VisitedRecord / PathStep / SearchResult are frozen snapshots handed to
    the presentation layer; nothing downstream can mutate them.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from grid import Grid, Position

INF = math.inf


# ---------------------------------------------------------------------------
# Output records
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class VisitedRecord:
    row:      int
    col:      int
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col, "distance": self.distance}


@dataclass(frozen=True)
class PathStep:
    row: int
    col: int

    def to_dict(self) -> Dict[str, int]:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class SearchResult:
    """
    Attributes:
        algorithm        : Registry key of the algorithm that produced this.
        visited_in_order : Expanded cells in exploration order (start and
                           the discovered end cell excluded).
        path             : Cells from the one next to start through end
                           inclusive; empty when unreachable or start == end.
        expanded         : Number of cells closed, start included.
    """

    algorithm:        str                  = ""
    visited_in_order: List[VisitedRecord]  = field(default_factory=list)
    path:             List[PathStep]       = field(default_factory=list)
    expanded:         int                  = 0

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def path_length(self) -> int:
        return len(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm":        self.algorithm,
            "visited_in_order": [v.to_dict() for v in self.visited_in_order],
            "path":             [p.to_dict() for p in self.path],
        }


# ---------------------------------------------------------------------------
# SearchState
# ---------------------------------------------------------------------------
class SearchState:
    """
    Attributes:
        grid        : Private snapshot of the caller's grid.
        start, end  : Flat indices.
        distance    : Tentative / final distance per cell (INF = unreached).
        predecessor : Back-pointer per cell (flat index) or None.
        visited     : Closed flag per cell.
        in_frontier : Open-set flag per cell.
        expanded    : Running count of closed cells.
    """

    __slots__ = (
        "grid", "start", "end",
        "distance", "predecessor", "visited", "in_frontier",
        "expanded",
    )

    def __init__(self, grid: Grid, start: Position, end: Position):
        n = grid.size
        self.grid:        Grid                  = grid
        self.start:       int                   = grid.index(start)
        self.end:         int                   = grid.index(end)
        self.distance:    List[float]           = [INF] * n
        self.predecessor: List[Optional[int]]   = [None] * n
        self.visited:     List[bool]            = [False] * n
        self.in_frontier: List[bool]            = [False] * n
        self.expanded:    int                   = 0

    def is_discovered(self, idx: int) -> bool:
        return self.distance[idx] != INF

    def record(self, idx: int) -> VisitedRecord:
        row, col = self.grid.position(idx)
        return VisitedRecord(row, col, self.distance[idx])

    def close(self, idx: int) -> None:
        self.visited[idx] = True
        self.expanded += 1
