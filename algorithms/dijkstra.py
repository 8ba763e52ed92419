"""
dijkstra.py — Dijkstra's Algorithm
===================================
Min-distance frontier + relaxation rule.  Every cell starts at infinity
except the start; a neighbour is (re)pushed whenever current + 1 beats its
recorded distance.  Equal distances leave the heap in discovery order.

A cell can sit in the heap more than once after an improvement; the engine
skips the stale copy once the cell is closed.  Only finite distances are
ever pushed, so the loop ends exactly when no finite-distance candidate
remains.

On a uniform-cost grid this explores the same rings as BFS; it is kept
as its own algorithm because the frontier and relaxation rule are what
the visualizer is demonstrating.
"""

from typing import Any, List, Optional

from algorithms.frontier import Frontier, MinDistanceFrontier
from algorithms.search import GridLike, RelaxationStrategy, SearchEngine
from algorithms.state import SearchResult, SearchState


PSEUDOCODE: List[str] = [
    "def Dijkstra(grid, start, end):",              # 0
    "    dist[*] ← ∞;  dist[start] ← 0",            # 1
    "    pq ← [(0, start)]",                        # 2
    "    while pq is not empty:",                   # 3
    "        cell ← pq.pop_min()",                  # 4
    "        if cell is closed: continue",          # 5
    "        if cell == end: return path(cell)",    # 6
    "        visited.append(cell);  close(cell)",   # 7
    "        for nbr in N, E, S, W of cell:",       # 8
    "            alt ← dist[cell] + 1",             # 9
    "            if alt < dist[nbr]:",              # 10
    "                dist[nbr] ← alt",              # 11
    "                prev[nbr] ← cell",             # 12
    "                pq.push((alt, nbr))",          # 13
    "    return NOT FOUND",                         # 14
]


class DijkstraStrategy(RelaxationStrategy):
    key = "dijkstra"

    def make_frontier(self, state: SearchState) -> Frontier:
        return MinDistanceFrontier(state)


def dijkstra(
    grid: GridLike,
    start: Any,
    end: Any,
    max_expanded: Optional[int] = None,
) -> SearchResult:
    return SearchEngine(DijkstraStrategy(), max_expanded).run(grid, start, end)
