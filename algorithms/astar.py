"""
astar.py — A* Search
=====================
Min-f-score frontier, f = g + h, where g is the distance from start (same
meaning as Dijkstra's distance) and h is a heuristic estimate to the end
cell.  Manhattan distance is the default; it is admissible and consistent
for 4-directional unit-cost moves, so the returned path is optimal.

Relaxation (open-set rule):
  • neighbour not in the open set → set g / prev and insert it
  • in the open set, tentative g >= g → skip
  • otherwise                        → lower g, update prev, push again

Open-set membership is the engine-maintained in_frontier flag.
"""

from typing import Any, List, Optional

from algorithms.frontier import Frontier, MinFScoreFrontier
from algorithms.heuristics import DEFAULT_HEURISTIC, index_heuristic
from algorithms.search import GridLike, SearchEngine, SearchStrategy
from algorithms.state import SearchResult, SearchState


PSEUDOCODE: List[str] = [
    "def AStar(grid, start, end, h):",              # 0
    "    g[start] ← 0",                             # 1
    "    open ← [(h(start), start)]",               # 2
    "    while open is not empty:",                 # 3
    "        cell ← open.pop_min_f()",              # 4
    "        if cell == end: return path(cell)",    # 5
    "        visited.append(cell);  close(cell)",   # 6
    "        for nbr in N, E, S, W of cell:",       # 7
    "            if nbr is wall or closed: skip",   # 8
    "            tentative ← g[cell] + 1",          # 9
    "            if nbr not in open: open.add(nbr)",# 10
    "            elif tentative >= g[nbr]: skip",   # 11
    "            prev[nbr] ← cell",                 # 12
    "            g[nbr] ← tentative",               # 13
    "            f[nbr] ← g[nbr] + h(nbr)",         # 14
    "    return NOT FOUND",                         # 15
]


class AStarStrategy(SearchStrategy):
    key = "astar"

    def __init__(self, heuristic: str = DEFAULT_HEURISTIC):
        self.heuristic = heuristic

    def make_frontier(self, state: SearchState) -> Frontier:
        h = index_heuristic(state.grid, state.grid.position(state.end), self.heuristic)
        return MinFScoreFrontier(state, h)

    def relax(self, state: SearchState, frontier: Frontier, current: int, nbr: int) -> bool:
        tentative = state.distance[current] + 1
        if state.in_frontier[nbr] and tentative >= state.distance[nbr]:
            return False
        state.distance[nbr]    = tentative
        state.predecessor[nbr] = current
        return True


def astar(
    grid: GridLike,
    start: Any,
    end: Any,
    max_expanded: Optional[int] = None,
    heuristic: str = DEFAULT_HEURISTIC,
) -> SearchResult:
    """
    Args:
        grid         : The grid to search; never mutated.
        start, end   : (row, col) or {"row", "col"}.
        max_expanded : Optional node budget.
        heuristic    : Key into HEURISTICS ("manhattan" by default).
    """
    return SearchEngine(AStarStrategy(heuristic), max_expanded).run(grid, start, end)
