"""
frontier.py — Frontier Strategies
==================================
The frontier is the set of discovered-but-not-yet-expanded cells.  Its
removal policy is what distinguishes one search from another; the engine
loop itself is shared.

    FifoFrontier         – queue          (BFS)
    LifoFrontier         – stack          (DFS)
    MinDistanceFrontier  – min distance   (Dijkstra)
    MinFScoreFrontier    – min g + h      (A*)
    MinHeuristicFrontier – min h          (Greedy Best-First)

All frontiers hold flat cell indices and expose the same small API:
push / pop / is_empty / contains (also `in`) / len.

Priority frontiers are binary heaps of (priority, sequence, index).  The
sequence counter grows monotonically, so two cells with equal priority
come out in push order — which, because the engine pushes neighbours in
N, E, S, W order, keeps every run deterministic.  The priority is read
when the cell is pushed; a cell whose priority improves is simply pushed
again and the stale entry is skipped by the engine once the cell is closed.
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Dict, List, Tuple

from algorithms.state import SearchState


class Frontier(ABC):
    """Open set of flat cell indices."""

    def __init__(self):
        # idx -> number of live entries, for O(1) membership
        self._members: Dict[int, int] = {}

    @abstractmethod
    def _put(self, idx: int) -> None: ...

    @abstractmethod
    def _take(self) -> int: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def push(self, idx: int) -> None:
        self._put(idx)
        self._members[idx] = self._members.get(idx, 0) + 1

    def pop(self) -> int:
        if self.is_empty():
            raise IndexError(f"pop from empty {type(self).__name__}")
        idx = self._take()
        left = self._members[idx] - 1
        if left:
            self._members[idx] = left
        else:
            del self._members[idx]
        return idx

    def is_empty(self) -> bool:
        return len(self) == 0

    def contains(self, idx: int) -> bool:
        return idx in self._members

    def __contains__(self, idx: int) -> bool:
        return self.contains(idx)

    def __bool__(self) -> bool:
        return not self.is_empty()


# ---------------------------------------------------------------------------
# Plain containers
# ---------------------------------------------------------------------------
class FifoFrontier(Frontier):
    """First in, first out."""

    def __init__(self):
        super().__init__()
        self._queue: deque = deque()

    def _put(self, idx: int) -> None:
        self._queue.append(idx)

    def _take(self) -> int:
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class LifoFrontier(Frontier):
    """Last in, first out."""

    def __init__(self):
        super().__init__()
        self._stack: List[int] = []

    def _put(self, idx: int) -> None:
        self._stack.append(idx)

    def _take(self) -> int:
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


# ---------------------------------------------------------------------------
# Priority containers
# ---------------------------------------------------------------------------
class PriorityFrontier(Frontier):
    """
    Min-heap keyed by (key(idx), push sequence).

    Args:
        key : Callable returning the priority of a cell at push time.
    """

    def __init__(self, key: Callable[[int], float]):
        super().__init__()
        self._key = key
        self._heap: List[Tuple[float, int, int]] = []
        self._seq = itertools.count()

    def _put(self, idx: int) -> None:
        heapq.heappush(self._heap, (self._key(idx), next(self._seq), idx))

    def _take(self) -> int:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


class MinDistanceFrontier(PriorityFrontier):
    def __init__(self, state: SearchState):
        super().__init__(key=lambda idx: state.distance[idx])


class MinFScoreFrontier(PriorityFrontier):
    """f = g + h."""

    def __init__(self, state: SearchState, h: Callable[[int], float]):
        super().__init__(key=lambda idx: state.distance[idx] + h(idx))


class MinHeuristicFrontier(PriorityFrontier):
    def __init__(self, h: Callable[[int], float]):
        super().__init__(key=h)
