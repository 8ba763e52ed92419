"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, compare
"""

from engine.step     import Step, frame_at, iter_steps, total_steps
from engine.stepper  import Stepper, StepperState
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Step",
    "frame_at",
    "iter_steps",
    "total_steps",
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
