"""
step.py — Playback Frame Snapshot
==================================
A search runs to completion first; playback then walks its two output
sequences.  A Step is one animation frame:

    step 0                     – "init": empty board, nothing revealed
    steps 1 … V                – "visit": reveal visited_in_order[i - 1]
    steps V + 1 … V + P        – "path":  reveal path[i - V - 1]

`step_number` doubles as the number of revealed records, so the renderer
only needs the SearchResult and a cursor to draw any frame.

Design decisions:
  - Step is a frozen dataclass — a SNAPSHOT, never mutated.
  - Any frame can be built in O(1) from the result and its number, so
    playback is just a cursor; nothing is buffered.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Any

from algorithms.state import SearchResult


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number : 0-based frame index (= records revealed so far).
        kind        : "init", "visit" or "path".
        row, col    : Cell revealed by this frame (None for "init").
        distance    : Distance at visitation ("visit" frames only).
        explanation : Human-readable caption for the frame.
        is_final    : True on the very last frame.
    """

    step_number:  int             = 0
    kind:         str             = "init"
    row:          Optional[int]   = None
    col:          Optional[int]   = None
    distance:     Optional[float] = None
    explanation:  str             = ""
    is_final:     bool            = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number": self.step_number,
            "kind":        self.kind,
            "row":         self.row,
            "col":         self.col,
            "distance":    self.distance,
            "explanation": self.explanation,
            "is_final":    self.is_final,
        }


def total_steps(result: SearchResult) -> int:
    """Number of frames, init frame included."""
    return 1 + len(result.visited_in_order) + len(result.path)


def frame_at(result: SearchResult, n: int) -> Step:
    """Build frame `n` directly.  Raises IndexError outside [0, total_steps)."""
    last = total_steps(result) - 1
    if not 0 <= n <= last:
        raise IndexError(f"frame {n} out of range 0..{last}")

    visited = result.visited_in_order
    if n == 0:
        intro = f"Start searching with {result.algorithm}." if visited else "Nothing to expand."
        return Step(step_number=0, explanation=intro, is_final=last == 0)

    if n <= len(visited):
        rec = visited[n - 1]
        return Step(
            step_number=n, kind="visit", row=rec.row, col=rec.col, distance=rec.distance,
            explanation=f"Expand ({rec.row}, {rec.col}) at distance {rec.distance}.",
            is_final=n == last,
        )

    i = n - len(visited)
    p = result.path[i - 1]
    if i == len(result.path):
        text = f"End reached. Path length {len(result.path)}."
    else:
        text = f"Path step {i}: ({p.row}, {p.col})."
    return Step(step_number=n, kind="path", row=p.row, col=p.col, explanation=text, is_final=n == last)


def iter_steps(result: SearchResult) -> Iterator[Step]:
    """Yield every playback frame for a finished search."""
    for n in range(total_steps(result)):
        yield frame_at(result, n)
