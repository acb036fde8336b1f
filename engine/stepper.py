"""
stepper.py — Step-by-Step Driver
==================================
The Stepper owns one QuicksortAnimator and keeps every TickResult it
has produced.  The Recorder uses it to drive whole runs headlessly; the
browser page paces live runs itself at TICK_INTERVAL_MS.

State machine:
    IDLE   →  start()  →  READY
    READY  →  (animator done) → FINISHED
    any    →  reset()  →  IDLE

There is no rewind: ticks mutate the sequence in place, so the buffered
steps are history for display only.

Thread safety:
  Not thread-safe.  Call next_step() from one thread only.
"""

from enum import Enum
from typing import Optional, List

from algorithms.step import TickResult
from engine.animator import QuicksortAnimator


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    READY    = "ready"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        animator : The run being driven, or None.
        steps    : Every TickResult produced so far.
        state    : Current StepperState.
    """

    def __init__(self):
        self.animator: Optional[QuicksortAnimator] = None
        self.steps:    List[TickResult] = []
        self.state:    StepperState     = StepperState.IDLE

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, animator: QuicksortAnimator) -> None:
        self.animator = animator
        self.steps    = []
        self.state    = StepperState.READY

    def reset(self) -> None:
        """Abandon the animator.  It owns nothing, so there is no cleanup."""
        self.animator = None
        self.steps    = []
        self.state    = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Run one tick.  Returns False once the run has finished."""
        if self.state != StepperState.READY:
            return False
        result = self.animator.tick()
        self.steps.append(result)
        if result.is_final:
            self.state = StepperState.FINISHED
        return True

    def jump_to_end(self) -> None:
        while self.next_step():
            pass
