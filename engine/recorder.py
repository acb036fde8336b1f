"""
recorder.py — Run Recorder & Analytics
========================================
Drives a whole sort run headlessly, keeps every TickResult, then
computes the numbers the analytics panel shows.

Usage:
    rec = Recorder()
    rec.start(store, SortDirection.DESCENDING)
    metrics = rec.run_to_completion()
    rec.export()                     # serialisable snapshot for replay
"""

import time
from dataclasses import dataclass, asdict
from typing import Optional, List, Dict, Any

from sequence import SequenceStore, SortDirection
from algorithms.step import TickResult
from engine.animator import QuicksortAnimator
from engine.stepper import Stepper


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    length:          int   = 0
    direction:       str   = ""
    total_ticks:     int   = 0
    partitions:      int   = 0
    discarded:       int   = 0          # ranges popped with low ≥ high
    swaps:           int   = 0
    highlight_ticks: int   = 0
    clear_ticks:     int   = 0
    wall_time_ms:    float = 0.0
    is_sorted:       bool  = False


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Every TickResult from the run.
        metrics : RunMetrics (available after run_to_completion).
        stepper : The underlying Stepper.
    """

    def __init__(self):
        self.steps:   List[TickResult]     = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._store:     Optional[SequenceStore] = None
        self._direction: Optional[SortDirection] = None
        self._initial:   List[int]               = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, store: SequenceStore, direction: SortDirection) -> None:
        self._store     = store
        self._direction = direction
        self._initial   = store.values()
        self.steps      = []
        self.metrics    = None

        self.stepper = Stepper()
        self.stepper.start(QuicksortAnimator(store, direction))

    def run_to_completion(self) -> RunMetrics:
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.stepper.jump_to_end()
        wall_ms = (time.monotonic() - started) * 1000

        self.steps   = list(self.stepper.steps)
        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "direction": self._direction.value if self._direction else "",
            "initial":   list(self._initial),
            "final":     self._store.values() if self._store else [],
            "metrics":   asdict(self.metrics) if self.metrics else {},
            "steps":     [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        anim = self.stepper.animator
        phases = [s.phase for s in self.steps]
        discarded = phases.count("discard")
        # a run can close on a discarded range
        if self.steps and self.steps[-1].range is not None:
            discarded += 1

        return RunMetrics(
            length=len(self._store),
            direction=self._direction.value,
            total_ticks=len(self.steps),
            partitions=anim.partitions,
            discarded=discarded,
            swaps=anim.swaps_recorded,
            highlight_ticks=phases.count("highlighting"),
            clear_ticks=phases.count("clearing"),
            wall_time_ms=round(wall_ms, 2),
            is_sorted=self._store.is_sorted(self._direction),
        )
