"""
engine/
-------
Animation, playback & session layer.

    from engine import QuicksortAnimator, Stepper, Recorder, SortSession
"""

from engine.animator import QuicksortAnimator, AnimatorPhase
from engine.stepper  import Stepper, StepperState
from engine.recorder import Recorder, RunMetrics
from engine.session  import SortSession, SessionBusy, NoActiveRun

__all__ = [
    "QuicksortAnimator",
    "AnimatorPhase",
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "SortSession",
    "SessionBusy",
    "NoActiveRun",
]
