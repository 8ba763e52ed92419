"""
search.py — Generic Search Engine
==================================
One expand / relax loop shared by every algorithm.  What makes BFS differ
from A* is entirely contained in the SearchStrategy it is given:

    strategy.make_frontier(state)  → which cell comes out next
    strategy.relax(state, f, u, v) → may neighbour v be (re)pushed from u?

Loop (per pop):
  1. skip walls and cells already closed (stale heap duplicates)
  2. end cell reached  → rebuild the path and stop; the end cell is NOT
     appended to the visited order
  3. record the cell in visited order (start excluded), close it
  4. relax every open, non-wall neighbour in N, E, S, W order

An exhausted frontier means "unreachable": the visited order is returned
with an empty path.  Bad input is rejected before the loop starts.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple, Union

from grid import Grid, Position, InvalidGrid, InvalidEndpoint, NodeBudgetExceeded
from algorithms.frontier import Frontier
from algorithms.state import PathStep, SearchResult, SearchState, VisitedRecord

logger = logging.getLogger(__name__)

GridLike = Union[Grid, Sequence[Union[str, Sequence[bool]]]]


# ---------------------------------------------------------------------------
# Strategies — relaxation policies
# ---------------------------------------------------------------------------
class SearchStrategy(ABC):
    """Pairs a frontier with a relaxation rule."""

    key: str = ""

    @abstractmethod
    def make_frontier(self, state: SearchState) -> Frontier: ...

    @abstractmethod
    def relax(self, state: SearchState, frontier: Frontier, current: int, nbr: int) -> bool:
        """Update nbr's bookkeeping from current; True if nbr should be pushed."""


class FirstDiscoveryStrategy(SearchStrategy):
    """
    BFS / DFS / Greedy rule: a cell is claimed by whichever cell discovers it
    first.  Its distance is set exactly once and never revisited.
    """

    def relax(self, state: SearchState, frontier: Frontier, current: int, nbr: int) -> bool:
        if state.is_discovered(nbr):
            return False
        state.distance[nbr]    = state.distance[current] + 1
        state.predecessor[nbr] = current
        return True


class RelaxationStrategy(SearchStrategy):
    """
    Dijkstra rule: lower the distance whenever a strictly shorter route
    turns up and push the cell again.  Distances only ever decrease.
    """

    def relax(self, state: SearchState, frontier: Frontier, current: int, nbr: int) -> bool:
        candidate = state.distance[current] + 1
        if candidate < state.distance[nbr]:
            state.distance[nbr]    = candidate
            state.predecessor[nbr] = current
            return True
        return False


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------
def coerce_grid(grid: GridLike) -> Grid:
    """Return a private snapshot of `grid`, building one from nested rows if needed."""
    if isinstance(grid, Grid):
        return grid.snapshot()
    if isinstance(grid, (list, tuple)):
        return Grid.from_rows(grid)
    raise InvalidGrid(f"expected a Grid or a sequence of rows, got {type(grid).__name__}")


def coerce_endpoint(grid: Grid, value: Any, role: str) -> Position:
    try:
        pos = Position.coerce(value)
    except (TypeError, ValueError) as e:
        raise InvalidEndpoint(f"{role} is not a (row, col) position: {e}", role=role) from None
    if not grid.in_bounds(pos):
        raise InvalidEndpoint(
            f"{role} {tuple(pos)} is outside the {grid.rows}x{grid.cols} grid",
            role=role, position=tuple(pos),
        )
    if grid.is_wall(pos):
        raise InvalidEndpoint(f"{role} {tuple(pos)} is a wall", role=role, position=tuple(pos))
    return pos


def prepare(grid: GridLike, start: Any, end: Any) -> Tuple[Grid, Position, Position]:
    snap = coerce_grid(grid)
    return snap, coerce_endpoint(snap, start, "start"), coerce_endpoint(snap, end, "end")


# ---------------------------------------------------------------------------
# Path reconstruction
# ---------------------------------------------------------------------------
def reconstruct_path(state: SearchState, reached: int) -> List[PathStep]:
    """
    Follow back-pointers from `reached` to the start cell, excluding the
    start itself, and return the route in start → end order.
    """
    path: List[PathStep] = []
    cur: Optional[int] = reached
    while cur is not None and cur != state.start:
        row, col = state.grid.position(cur)
        path.append(PathStep(row, col))
        cur = state.predecessor[cur]
    if cur is None:
        raise RuntimeError(
            f"predecessor chain from {state.grid.position(reached)} never reached the start cell"
        )
    path.reverse()
    return path


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class SearchEngine:
    """
    Attributes:
        strategy     : Frontier + relaxation policy.
        max_expanded : Optional guard on closed cells; exceeding it raises
                       NodeBudgetExceeded.
    """

    def __init__(self, strategy: SearchStrategy, max_expanded: Optional[int] = None):
        self.strategy     = strategy
        self.max_expanded = max_expanded

    def run(self, grid: GridLike, start: Any, end: Any) -> SearchResult:
        snap, start_pos, end_pos = prepare(grid, start, end)
        key = self.strategy.key

        logger.debug(
            "%s search on %dx%d grid from %s to %s",
            key, snap.rows, snap.cols, tuple(start_pos), tuple(end_pos),
        )

        state    = SearchState(snap, start_pos, end_pos)
        frontier = self.strategy.make_frontier(state)
        visited: List[VisitedRecord] = []

        state.distance[state.start] = 0
        frontier.push(state.start)
        state.in_frontier[state.start] = True

        while not frontier.is_empty():
            cur = frontier.pop()
            state.in_frontier[cur] = cur in frontier

            if snap.is_wall_index(cur) or state.visited[cur]:
                continue

            if cur == state.end:
                path = reconstruct_path(state, cur)
                logger.debug("%s reached end after %d visits, path length %d", key, len(visited), len(path))
                return SearchResult(key, visited, path, state.expanded)

            if cur != state.start:
                visited.append(state.record(cur))
            state.close(cur)

            if self.max_expanded is not None and state.expanded > self.max_expanded:
                logger.warning("%s aborted after expanding %d cells", key, state.expanded)
                raise NodeBudgetExceeded(self.max_expanded, key)

            for nbr in snap.neighbour_indices(cur):
                if snap.is_wall_index(nbr) or state.visited[nbr]:
                    continue
                if self.strategy.relax(state, frontier, cur, nbr):
                    frontier.push(nbr)
                    state.in_frontier[nbr] = True

        logger.debug("%s exhausted frontier after %d visits, end unreachable", key, len(visited))
        return SearchResult(key, visited, [], state.expanded)
