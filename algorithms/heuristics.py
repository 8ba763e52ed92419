"""
heuristics.py — Distance Estimates to the End Cell
===================================================
All heuristics take two (row, col) positions and return a float.

  • manhattan – |Δrow| + |Δcol|    (default; admissible and consistent on a
                                   4-connected unit-cost grid)
  • euclidean – √(Δrow² + Δcol²)   (admissible, weaker guidance)
  • zero      – h = 0              (A* degrades to Dijkstra; for teaching)
"""

import math
from typing import Callable, Dict, List, Optional

from grid import Grid, Position


def manhattan(a: Position, b: Position) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Position, b: Position) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def zero(a: Position, b: Position) -> float:
    return 0.0


HEURISTICS: Dict[str, Callable[[Position, Position], float]] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "zero":      zero,
}

DEFAULT_HEURISTIC = "manhattan"


def get_heuristic(name: Optional[str]) -> Callable[[Position, Position], float]:
    """Look up a heuristic by name; unknown or empty names fall back to Manhattan."""
    return HEURISTICS.get(name or DEFAULT_HEURISTIC, manhattan)


def index_heuristic(grid: Grid, end: Position, name: Optional[str] = None) -> Callable[[int], float]:
    """
    Bind a heuristic to one grid and end cell, keyed by flat index.
    Values are computed once per cell and cached.
    """
    fn = get_heuristic(name)
    cache: List[Optional[float]] = [None] * grid.size

    def h(idx: int) -> float:
        value = cache[idx]
        if value is None:
            value = cache[idx] = fn(grid.position(idx), end)
        return value

    return h
