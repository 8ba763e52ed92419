"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every search the visualizer knows about.

    from algorithms import ALGORITHM_INFO, get_algorithm, compute

ALGORITHM_INFO is a read-only mapping:
    {
        "bfs": AlgoInfo(key, name, description, fn, pseudocode, …),
        …
    }

The metadata is for display only; behaviour lives in the entrypoint.
Adding an algorithm is: write the strategy module, add one entry here.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Tuple

from grid import UnknownAlgorithm

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bfs        import bfs        as _bfs,        PSEUDOCODE as _bfs_pc
from algorithms.dfs        import dfs        as _dfs,        PSEUDOCODE as _dfs_pc
from algorithms.dijkstra   import dijkstra   as _dijkstra,   PSEUDOCODE as _dij_pc
from algorithms.astar      import astar      as _astar,      PSEUDOCODE as _ast_pc
from algorithms.greedy_bfs import greedy_bfs as _greedy,     PSEUDOCODE as _gbfs_pc
from algorithms.state      import PathStep, SearchResult, VisitedRecord


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:                 str                    # registry key, e.g. "bfs"
    name:                str                    # human label, e.g. "Breadth-First Search"
    description:         str                    # one paragraph for the info card
    fn:                  Callable[..., SearchResult]
    pseudocode:          Tuple[str, ...]        = ()
    tags:                Tuple[str, ...]        = ()
    has_heuristic:       bool                   = False   # expose heuristic selector?
    guarantees_shortest: bool                   = False
    complexity_time:     str                    = ""
    complexity_space:    str                    = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_REGISTRY = {

    "bfs": AlgoInfo(
        key="bfs", name="Breadth-First Search", fn=_bfs, pseudocode=tuple(_bfs_pc),
        description=(
            "BFS is unweighted and guarantees the shortest path. It explores all "
            "neighbors at the current depth before moving deeper."
        ),
        tags=("unweighted", "shortest-path"),
        guarantees_shortest=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
    ),

    "dfs": AlgoInfo(
        key="dfs", name="Depth-First Search", fn=_dfs, pseudocode=tuple(_dfs_pc),
        description=(
            "DFS is unweighted and does not guarantee the shortest path. It explores "
            "as far as possible along each branch before backtracking."
        ),
        tags=("unweighted", "traversal"),
        complexity_time="O(V + E)", complexity_space="O(V)",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", name="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=tuple(_dij_pc),
        description=(
            "Dijkstra's algorithm is weighted and guarantees the shortest path. It's "
            "optimal for graphs with non-negative edge weights."
        ),
        tags=("weighted", "shortest-path"),
        guarantees_shortest=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
    ),

    "astar": AlgoInfo(
        key="astar", name="A* Search", fn=_astar, pseudocode=tuple(_ast_pc),
        description=(
            "A* is weighted and uses heuristics to find the shortest path efficiently. "
            "It combines the benefits of Dijkstra and Greedy Best-First."
        ),
        tags=("weighted", "shortest-path", "heuristic"),
        has_heuristic=True, guarantees_shortest=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
    ),

    "greedy": AlgoInfo(
        key="greedy", name="Greedy Best-First Search", fn=_greedy, pseudocode=tuple(_gbfs_pc),
        description=(
            "Greedy Best-First Search is unweighted and does not guarantee the shortest "
            "path. It uses heuristics to move toward the goal quickly."
        ),
        tags=("heuristic", "suboptimal"),
        has_heuristic=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
    ),
}

ALGORITHM_INFO: Mapping[str, AlgoInfo] = MappingProxyType(_REGISTRY)


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return ALGORITHM_INFO.get(key)


def require_algorithm(key: str) -> AlgoInfo:
    """Return AlgoInfo by key or raise UnknownAlgorithm."""
    info = ALGORITHM_INFO.get(key)
    if info is None:
        raise UnknownAlgorithm(key)
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(ALGORITHM_INFO.values())


def compute(
    key: str,
    grid: Any,
    start: Any,
    end: Any,
    max_expanded: Optional[int] = None,
    heuristic: Optional[str] = None,
) -> SearchResult:
    """
    Run one algorithm by key.  `heuristic` is ignored by algorithms that
    do not use one.
    """
    info = require_algorithm(key)
    kwargs: dict = {"max_expanded": max_expanded}
    if info.has_heuristic and heuristic:
        kwargs["heuristic"] = heuristic
    return info.fn(grid, start, end, **kwargs)


__all__ = [
    "AlgoInfo",
    "ALGORITHM_INFO",
    "PathStep",
    "SearchResult",
    "VisitedRecord",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
    "compute",
]
