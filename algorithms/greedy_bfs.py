"""
greedy_bfs.py — Greedy Best-First Search
==========================================
Expands the cell with the smallest h(n) — pure heuristic, zero regard
for the cost incurred so far.  Ties leave the heap in discovery order.

This is intentionally SUBOPTIMAL.  Cells are claimed on first discovery
(same rule as BFS / DFS); the distance recorded for each cell is kept for
display only and plays no part in ordering.

Shares the heuristic catalogue with A* (manhattan / euclidean / zero).
"""

from typing import Any, List, Optional

from algorithms.frontier import Frontier, MinHeuristicFrontier
from algorithms.heuristics import DEFAULT_HEURISTIC, index_heuristic
from algorithms.search import FirstDiscoveryStrategy, GridLike, SearchEngine
from algorithms.state import SearchResult, SearchState


PSEUDOCODE: List[str] = [
    "def GreedyBFS(grid, start, end, h):",          # 0
    "    open ← [(h(start), start)]",               # 1
    "    while open is not empty:",                 # 2
    "        cell ← open.pop_min_h()",              # 3
    "        if cell == end: return path(cell)",    # 4
    "        visited.append(cell)",                 # 5
    "        for nbr in N, E, S, W of cell:",       # 6
    "            if nbr is open and unseen:",       # 7
    "                dist[nbr] ← dist[cell] + 1",   # 8
    "                prev[nbr] ← cell",             # 9
    "                open.push((h(nbr), nbr))",     # 10
    "    return NOT FOUND",                         # 11
]


class GreedyBestFirstStrategy(FirstDiscoveryStrategy):
    key = "greedy"

    def __init__(self, heuristic: str = DEFAULT_HEURISTIC):
        self.heuristic = heuristic

    def make_frontier(self, state: SearchState) -> Frontier:
        return MinHeuristicFrontier(
            index_heuristic(state.grid, state.grid.position(state.end), self.heuristic)
        )


def greedy_bfs(
    grid: GridLike,
    start: Any,
    end: Any,
    max_expanded: Optional[int] = None,
    heuristic: str = DEFAULT_HEURISTIC,
) -> SearchResult:
    return SearchEngine(GreedyBestFirstStrategy(heuristic), max_expanded).run(grid, start, end)
