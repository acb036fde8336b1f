"""
session.py — Sort Session Controller
======================================
One user's state: the numbers on screen, the direction flag, whether
the controls are enabled, and the animator of the run in progress.

The host never reaches into the animator directly.  It asks the session
to start a run, forwards timer ticks, and repaints from the commands it
gets back.  While a run is in progress every action that could mutate
the sequence (regenerate, new sort, new numbers) is refused.
"""

import logging
import random
from typing import Any, Dict, List, Optional, Set

from sequence import (
    SequenceStore,
    SortDirection,
    generate_numbers,
    regenerate_from_click,
)
from algorithms.step import (
    RenderCommand,
    RenderControlsEnabled,
    RenderHighlight,
    TickResult,
)
from engine.animator import QuicksortAnimator

log = logging.getLogger(__name__)


class SessionBusy(RuntimeError):
    """Raised when an action would mutate the sequence mid-sort."""


class NoActiveRun(RuntimeError):
    """Raised when ticking a session with no sort in progress."""


class SortSession:
    """
    Attributes:
        store            : Numbers currently displayed (None on the intro screen).
        direction        : Direction of the latest (or running) sort.
        runs             : Sort runs started so far.
        controls_enabled : Whether sort / reset are clickable.
        highlighted      : Indices currently lit.
        animator         : Run in progress, or None.
    """

    def __init__(
        self,
        store: Optional[SequenceStore] = None,
        direction: SortDirection = SortDirection.ASCENDING,
    ):
        self.store:            Optional[SequenceStore]     = store
        self.direction:        SortDirection               = direction
        self.runs:             int                         = 0
        self.controls_enabled: bool                        = True
        self.highlighted:      Set[int]                    = set()
        self.animator:         Optional[QuicksortAnimator] = None

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------
    def load_numbers(self, count: int, rng: Optional[random.Random] = None) -> SequenceStore:
        self._ensure_idle()
        self.store = generate_numbers(count, rng=rng)
        self.highlighted.clear()
        return self.store

    def regenerate(self, index: int, rng: Optional[random.Random] = None) -> SequenceStore:
        """Rebuild the sequence sized by the clicked (small) value."""
        self._ensure_idle()
        if self.store is None:
            raise NoActiveRun("No numbers to click on.")
        self.store = regenerate_from_click(self.store, index, rng=rng)
        self.highlighted.clear()
        return self.store

    # ------------------------------------------------------------------
    # Sort run
    # ------------------------------------------------------------------
    def start_sort(self) -> List[RenderCommand]:
        self._ensure_idle()
        if self.store is None:
            raise NoActiveRun("Generate numbers before sorting.")

        self.direction        = self.direction.flipped()
        self.runs            += 1
        self.controls_enabled = False
        self.highlighted.clear()
        self.animator = QuicksortAnimator(self.store, self.direction)
        log.info("sort run %d started: %d numbers, %s", self.runs, len(self.store), self.direction.value)
        return [RenderControlsEnabled(False)]

    def tick(self) -> TickResult:
        if self.animator is None:
            raise NoActiveRun("No sort in progress.")

        result = self.animator.tick()
        self._apply(result.commands)
        if result.is_final:
            self.animator = None
        return result

    def reset(self) -> None:
        """Back to the intro screen, abandoning any run in progress."""
        if self.animator is not None:
            log.info("sort run %d abandoned", self.runs)
        self.animator         = None
        self.store            = None
        self.controls_enabled = True
        self.highlighted.clear()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.animator is not None

    def sort_button_label(self) -> str:
        if self.runs == 0:
            return "Sort"
        return f"Sort {self.direction.arrow}"

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "store":            self.store.to_dict() if self.store else None,
            "direction":        self.direction.value,
            "runs":             self.runs,
            "controls_enabled": self.controls_enabled,
            "highlighted":      sorted(self.highlighted),
            "animator":         self.animator.to_dict() if self.animator else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SortSession":
        store = SequenceStore.from_dict(data["store"]) if data.get("store") else None
        sess = cls(store, SortDirection(data.get("direction", "ascending")))
        sess.runs             = data.get("runs", 0)
        sess.controls_enabled = data.get("controls_enabled", True)
        sess.highlighted      = set(data.get("highlighted", []))
        if data.get("animator") and store is not None:
            sess.animator = QuicksortAnimator.from_dict(store, data["animator"])
        return sess

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _apply(self, commands: List[RenderCommand]) -> None:
        for cmd in commands:
            if isinstance(cmd, RenderHighlight):
                if cmd.on:
                    self.highlighted.add(cmd.index)
                else:
                    self.highlighted.discard(cmd.index)
            elif isinstance(cmd, RenderControlsEnabled):
                self.controls_enabled = cmd.enabled

    def _ensure_idle(self) -> None:
        if self.animator is not None:
            raise SessionBusy("Wait for the current sort to finish.")
