"""
recorder.py — Run Recorder & Analytics
========================================
Runs one search to completion, times it, and computes the metrics the
UI needs for the Analytics panel and Comparison Mode.

Usage:
    rec = Recorder()
    rec.start(algo_key="dijkstra", grid=g, start=(0, 0), end=(5, 7))
    rec.run_to_completion()          # runs the search, builds metrics
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot

Comparison Mode:
    The UI holds two Recorders (one per algo), runs both to completion
    on the SAME grid, then calls compare(rec1, rec2) → ComparisonResult.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from grid import Grid, Position
from algorithms import AlgoInfo, SearchResult, compute, require_algorithm
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    start:           tuple = ()
    end:             tuple = ()
    cells_visited:   int   = 0          # len(visited_in_order)
    path_length:     int   = 0          # number of moves on the final path
    total_steps:     int   = 0          # playback frames
    wall_time_ms:    float = 0.0        # time to run the search to completion
    path_found:      bool  = False
    heuristic:       str   = ""         # for A* / Greedy

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["start"] = list(self.start)
        data["end"]   = list(self.end)
        return data


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_cells: str = ""   # which algo visited fewer cells
    winner_path:  str = ""   # which algo found the shorter path
    winner_time:  str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        result  : The SearchResult (available after run_to_completion).
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : Stepper loaded with the result, ready for playback.
    """

    def __init__(self):
        self.result:  Optional[SearchResult] = None
        self.metrics: Optional[RunMetrics]   = None
        self.stepper: Optional[Stepper]      = None

        self._algo_info:    Optional[AlgoInfo] = None
        self._grid:         Optional[Grid]     = None
        self._start:        Any                = None
        self._end:          Any                = None
        self._heuristic:    str                = ""
        self._max_expanded: Optional[int]      = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        grid: Grid,
        start: Any,
        end: Any,
        heuristic: str = "",
        max_expanded: Optional[int] = None,
    ) -> None:
        """Remember what to run.  Raises UnknownAlgorithm for a bad key."""
        self._algo_info    = require_algorithm(algo_key)
        self._grid         = grid
        self._start        = start
        self._end          = end
        self._heuristic    = heuristic if self._algo_info.has_heuristic else ""
        self._max_expanded = max_expanded
        self.result        = None
        self.metrics       = None
        self.stepper       = None

    def run_to_completion(self) -> RunMetrics:
        """Run the search, load a Stepper with it, compute metrics."""
        if self._algo_info is None:
            raise RuntimeError("Call start() first.")

        t0 = time.perf_counter()
        self.result = compute(
            self._algo_info.key, self._grid, self._start, self._end,
            max_expanded=self._max_expanded, heuristic=self._heuristic or None,
        )
        wall_ms = (time.perf_counter() - t0) * 1000

        self.stepper = Stepper()
        self.stepper.start(self.result)

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "%s: visited %d cells, path %s in %.2f ms",
            self.metrics.algo_key, self.metrics.cells_visited,
            self.metrics.path_length if self.metrics.path_found else "not found",
            self.metrics.wall_time_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key":  self._algo_info.key if self._algo_info else "",
            "heuristic": self._heuristic,
            "grid":      self._grid.to_dict() if self._grid else {},
            "metrics":   self.metrics.to_dict() if self.metrics else {},
            "result":    self.result.to_dict() if self.result else {},
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info   = self._algo_info
        result = self.result
        return RunMetrics(
            algo_key=info.key,
            algo_label=info.name,
            start=tuple(Position.coerce(self._start)),
            end=tuple(Position.coerce(self._end)),
            cells_visited=len(result.visited_in_order),
            path_length=result.path_length,
            total_steps=self.stepper.total_steps if self.stepper else 0,
            wall_time_ms=round(wall_ms, 3),
            path_found=result.found,
            heuristic=self._heuristic,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        # lower is better for every metric compared here
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    # a missing path always loses to a found one
    inf = float("inf")
    l_path = l.path_length if l.path_found else inf
    r_path = r.path_length if r.path_found else inf

    return ComparisonResult(
        left=l,
        right=r,
        winner_cells=winner(l.cells_visited, r.cells_visited),
        winner_path=winner(l_path, r_path),
        winner_time=winner(l.wall_time_ms, r.wall_time_ms),
    )
