"""
stepper.py — Playback Cursor
=============================
Walks the frames of one finished search.  The search is already done, so
playback is a cursor over [0, total_steps) plus a small state machine:

    IDLE ──start()──▶ PAUSED ◀──▶ PLAYING
                        │            │
                        └─ last frame reached ─▶ FINISHED
    stepping back from the last frame returns to PAUSED;
    reset() goes back to IDLE from anywhere.

The search never sleeps.  The browser drives the cursor with one
next_step() per request and waits delay_ms() between requests.
"""

from enum import Enum
from typing import Optional

from config import DEFAULT_SPEED, PATH_DELAY_MS, SPEED_PRESETS, VISIT_DELAY_MS
from algorithms.state import SearchResult
from engine.step import Step, frame_at, total_steps


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


class Stepper:
    """
    Attributes:
        result      : SearchResult being played back, or None when idle.
        current_idx : Frame on display (-1 when idle).
        state       : StepperState.
        speed       : Seconds per frame at the selected preset.
    """

    def __init__(self):
        self.result:      Optional[SearchResult] = None
        self.current_idx: int                    = -1
        self.state:       StepperState           = StepperState.IDLE
        self.speed:       float                  = SPEED_PRESETS[DEFAULT_SPEED]

    def start(self, result: SearchResult) -> None:
        """Load a finished search and show frame 0."""
        self.result = result
        self.state = StepperState.PAUSED
        self._move(0)

    def reset(self) -> None:
        self.result = None
        self.current_idx = -1
        self.state = StepperState.IDLE

    # -- cursor ---------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one frame; False (and FINISHED) when there is none."""
        if self.current_idx + 1 >= self.total_steps:
            if self.result is not None:
                self.state = StepperState.FINISHED
            return False
        self._move(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        if self.current_idx <= 0:
            return False
        self._move(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        if not 0 <= idx < self.total_steps:
            return False
        self._move(idx)
        return True

    def rewind(self) -> None:
        self.goto_step(0)

    def jump_to_end(self) -> None:
        if self.goto_step(self.total_steps - 1):
            self.state = StepperState.FINISHED

    # -- auto-play ------------------------------------------------------
    def play(self) -> None:
        if self.state is StepperState.PAUSED:
            self.state = StepperState.PLAYING

    def pause(self) -> None:
        if self.state is StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS[DEFAULT_SPEED])

    def delay_ms(self) -> int:
        """
        Pause before the next frame.  Path frames linger longer than visit
        frames; both scale with the speed preset relative to the default.
        """
        step = self.current_step
        base = PATH_DELAY_MS if step is not None and step.kind == "path" else VISIT_DELAY_MS
        return max(1, round(base * self.speed / SPEED_PRESETS[DEFAULT_SPEED]))

    # -- read-only ------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if self.result is None or self.current_idx < 0:
            return None
        return frame_at(self.result, self.current_idx)

    @property
    def total_steps(self) -> int:
        return total_steps(self.result) if self.result is not None else 0

    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is StepperState.PLAYING

    def _move(self, idx: int) -> None:
        self.current_idx = idx
        step = frame_at(self.result, idx)
        if step.is_final:
            self.state = StepperState.FINISHED
        elif self.state is StepperState.FINISHED:
            self.state = StepperState.PAUSED
