"""
dfs.py — Depth-First Search
============================
LIFO frontier + the same first-discovery rule as BFS.

Neighbours are pushed N, E, S, W and popped last-in-first-out, so the
West-most newly discovered branch is followed first.  `distance` still
tracks hops along the discovery tree, but it is NOT a shortest distance
and the returned path is not guaranteed to be shortest.
"""

from typing import Any, List, Optional

from algorithms.frontier import Frontier, LifoFrontier
from algorithms.search import FirstDiscoveryStrategy, GridLike, SearchEngine
from algorithms.state import SearchResult, SearchState


PSEUDOCODE: List[str] = [
    "def DFS(grid, start, end):",                   # 0
    "    stack ← [start];  dist[start] ← 0",        # 1
    "    while stack is not empty:",                # 2
    "        cell ← stack.pop()",                   # 3
    "        if cell == end: return path(cell)",    # 4
    "        visited.append(cell)",                 # 5
    "        for nbr in N, E, S, W of cell:",       # 6
    "            if nbr is open and unseen:",       # 7
    "                dist[nbr] ← dist[cell] + 1",   # 8
    "                prev[nbr] ← cell",             # 9
    "                stack.push(nbr)",              # 10
    "    return NOT FOUND",                         # 11
]


class DepthFirstStrategy(FirstDiscoveryStrategy):
    key = "dfs"

    def make_frontier(self, state: SearchState) -> Frontier:
        return LifoFrontier()


def dfs(
    grid: GridLike,
    start: Any,
    end: Any,
    max_expanded: Optional[int] = None,
) -> SearchResult:
    return SearchEngine(DepthFirstStrategy(), max_expanded).run(grid, start, end)
