"""
errors.py — Search Error Taxonomy
==================================
Every precondition failure the search core can report.  All of them except
the node budget are raised before the search loop starts, so a caller never
receives a partial result alongside an exception.

    SearchError                 (base, also a ValueError)
    ├── InvalidGrid             empty / non-rectangular / zero-sized grid
    ├── InvalidEndpoint         start or end out of bounds or on a wall
    ├── UnknownAlgorithm        registry lookup miss
    └── NodeBudgetExceeded      expanded-cell guard tripped mid-search

An unreachable end cell is NOT an error: the engine returns an empty path.
"""

from typing import Optional, Tuple


class SearchError(ValueError):
    """Base class for everything the search core raises on bad input."""


class InvalidGrid(SearchError):
    pass


class InvalidEndpoint(SearchError):
    """
    Attributes:
        role     : "start" or "end".
        position : The offending (row, col), if one was supplied.
    """

    def __init__(
        self,
        message: str,
        role: str = "",
        position: Optional[Tuple[int, int]] = None,
    ):
        super().__init__(message)
        self.role     = role
        self.position = position


class UnknownAlgorithm(SearchError):
    def __init__(self, key: str):
        super().__init__(f"Unknown algorithm: {key!r}")
        self.key = key


class NodeBudgetExceeded(SearchError):
    """Raised when a search closes more cells than the caller allowed."""

    def __init__(self, budget: int, algorithm: str = ""):
        super().__init__(f"search aborted: node budget exceeded ({budget} cells)")
        self.budget    = budget
        self.algorithm = algorithm
