"""
bfs.py — Breadth-First Search
==============================
FIFO frontier + first-discovery relaxation.  Every cell at distance d is
enqueued before any cell at distance d + 1 is dequeued, so the first time
the end cell comes off the queue its path is shortest by edge count.

Discovery is checked at push time, not pop time: a cell is enqueued at
most once.

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the entrypoint so the UI can show them.
"""

from typing import Any, List, Optional

from algorithms.frontier import FifoFrontier, Frontier
from algorithms.search import FirstDiscoveryStrategy, GridLike, SearchEngine
from algorithms.state import SearchResult, SearchState


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(grid, start, end):",                   # 0
    "    queue ← [start];  dist[start] ← 0",        # 1
    "    while queue is not empty:",                # 2
    "        cell ← queue.dequeue()",               # 3
    "        if cell == end: return path(cell)",    # 4
    "        visited.append(cell)",                 # 5
    "        for nbr in N, E, S, W of cell:",       # 6
    "            if nbr is open and unseen:",       # 7
    "                dist[nbr] ← dist[cell] + 1",   # 8
    "                prev[nbr] ← cell",             # 9
    "                queue.enqueue(nbr)",           # 10
    "    return NOT FOUND",                         # 11
]


class BreadthFirstStrategy(FirstDiscoveryStrategy):
    key = "bfs"

    def make_frontier(self, state: SearchState) -> Frontier:
        return FifoFrontier()


def bfs(
    grid: GridLike,
    start: Any,
    end: Any,
    max_expanded: Optional[int] = None,
) -> SearchResult:
    """
    Args:
        grid         : Grid (or nested rows) to search; never mutated.
        start, end   : (row, col) or {"row", "col"}.
        max_expanded : Optional node budget.

    Returns:
        SearchResult with the visited order and the shortest path.
    """
    return SearchEngine(BreadthFirstStrategy(), max_expanded).run(grid, start, end)
