"""
animator.py — Step-wise Quicksort Animator
===========================================
An explicit state machine that runs an iterative quicksort one atomic
unit of work per tick, so the host can repaint in between.

Every tick() evaluates, in this order:

    1. CLEARING      → dequeue the front swap, dim both buttons
    2. queue waiting → peek the front swap, refresh both labels, light them up
    3. stack waiting → pop a range; partition it (or discard if low ≥ high)
    4. nothing left  → done; re-enable the host's controls

Swaps are applied to the sequence eagerly during the partition pass;
the queue only replays them.  A highlight therefore always stays on for
exactly one tick before it is cleared, and no two pairs are ever lit
at the same time.

State is held in plain containers (a list used as a LIFO stack and a
deque used as a FIFO queue) so it serialises cleanly into the web
session between ticks.
"""

import logging
from collections import deque
from enum import Enum
from typing import Any, Deque, Dict, List, Optional, Tuple

from sequence import SequenceStore, SortDirection
from algorithms.quicksort import lomuto_partition
from algorithms.step import (
    SwapOp,
    RenderSet,
    RenderHighlight,
    RenderControlsEnabled,
    TickResult,
)

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------
class AnimatorPhase(Enum):
    IDLE         = "idle"           # nothing lit; next tick partitions or finishes
    HIGHLIGHTING = "highlighting"   # next tick lights up the front swap
    CLEARING     = "clearing"       # a pair is lit; next tick dims it


# ---------------------------------------------------------------------------
# Animator
# ---------------------------------------------------------------------------
class QuicksortAnimator:
    """
    Attributes:
        store          : The SequenceStore being permuted in place.
        direction      : SortDirection read on every comparison.
        range_stack    : Pending (low, high) ranges, popped LIFO.
        swap_queue     : SwapOps from the last partition pass, drained FIFO.
        phase          : Current AnimatorPhase.
        done           : True once the completion tick has run.
        tick_count     : Ticks consumed so far (including the final one).
        partitions     : Partition passes performed.
        swaps_recorded : SwapOps produced across all passes.
    """

    def __init__(
        self,
        store: SequenceStore,
        direction: SortDirection,
        low: int = 0,
        high: Optional[int] = None,
    ):
        self.store:          SequenceStore          = store
        self.direction:      SortDirection          = direction
        self.range_stack:    List[Tuple[int, int]]  = []
        self.swap_queue:     Deque[SwapOp]          = deque()
        self.phase:          AnimatorPhase          = AnimatorPhase.IDLE
        self.done:           bool                   = False
        self.tick_count:     int                    = 0
        self.partitions:     int                    = 0
        self.swaps_recorded: int                    = 0

        self._push_range(low, len(store) - 1 if high is None else high)

    # ------------------------------------------------------------------
    # Tick  (call this from your timer / event loop)
    # ------------------------------------------------------------------
    def tick(self) -> TickResult:
        if self.done:
            return TickResult(
                tick_number=self.tick_count,
                phase="finished",
                explanation="Sorting already finished.",
                is_final=True,
            )

        if self.phase is AnimatorPhase.CLEARING:
            result = self._clear_front()
        elif self.swap_queue:
            result = self._highlight_front()
        elif self.range_stack:
            result = self._partition_next()
        else:
            result = self._finish()

        self.tick_count += 1
        return result

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def active_swap(self) -> Optional[Tuple[int, int]]:
        """The pair currently lit, if any."""
        if self.phase is AnimatorPhase.CLEARING and self.swap_queue:
            return self.swap_queue[0].as_pair()
        return None

    @property
    def pending_swaps(self) -> List[Tuple[int, int]]:
        return [op.as_pair() for op in self.swap_queue]

    @property
    def pending_ranges(self) -> List[Tuple[int, int]]:
        return list(self.range_stack)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "direction":      self.direction.value,
            "range_stack":    [list(r) for r in self.range_stack],
            "swap_queue":     [list(op.as_pair()) for op in self.swap_queue],
            "phase":          self.phase.value,
            "done":           self.done,
            "tick_count":     self.tick_count,
            "partitions":     self.partitions,
            "swaps_recorded": self.swaps_recorded,
        }

    @classmethod
    def from_dict(cls, store: SequenceStore, data: Dict[str, Any]) -> "QuicksortAnimator":
        anim = cls.__new__(cls)
        anim.store          = store
        anim.direction      = SortDirection(data["direction"])
        anim.range_stack    = []
        anim.swap_queue     = deque(SwapOp(i, j) for i, j in data.get("swap_queue", []))
        anim.phase          = AnimatorPhase(data.get("phase", "idle"))
        anim.done           = data.get("done", False)
        anim.tick_count     = data.get("tick_count", 0)
        anim.partitions     = data.get("partitions", 0)
        anim.swaps_recorded = data.get("swaps_recorded", 0)
        for low, high in data.get("range_stack", []):
            anim._push_range(low, high)
        return anim

    # ------------------------------------------------------------------
    # Internal — one method per state
    # ------------------------------------------------------------------
    def _clear_front(self) -> TickResult:
        op = self.swap_queue.popleft()
        self.phase = AnimatorPhase.HIGHLIGHTING if self.swap_queue else AnimatorPhase.IDLE
        return TickResult(
            tick_number=self.tick_count,
            phase="clearing",
            commands=[RenderHighlight(op.i, False), RenderHighlight(op.j, False)],
            swap=op.as_pair(),
            explanation=f"Swap of positions {op.i} and {op.j} committed.",
        )

    def _highlight_front(self) -> TickResult:
        op = self.swap_queue[0]
        vi, vj = self.store.get(op.i), self.store.get(op.j)
        self.phase = AnimatorPhase.CLEARING
        return TickResult(
            tick_number=self.tick_count,
            phase="highlighting",
            commands=[
                RenderSet(op.i, vi),
                RenderSet(op.j, vj),
                RenderHighlight(op.i, True),
                RenderHighlight(op.j, True),
            ],
            swap=op.as_pair(),
            explanation=f"Swap positions {op.i} and {op.j}: now {vi} and {vj}.",
        )

    def _partition_next(self) -> TickResult:
        low, high = self.range_stack.pop()
        if low >= high:
            # the last range discarded closes the run in the same tick
            if not self.range_stack:
                return self._finish(discarded=(low, high))
            return TickResult(
                tick_number=self.tick_count,
                phase="discard",
                range=(low, high),
                explanation=f"Range ({low}, {high}) has at most one element, nothing to do.",
            )

        pivot_value = self.store.get(high)
        pivot_index, swaps = lomuto_partition(self.store, low, high, self.direction)
        self.partitions     += 1
        self.swaps_recorded += len(swaps)
        self.swap_queue.extend(swaps)

        self._push_range(low, pivot_index - 1)
        self._push_range(pivot_index + 1, high)

        log.debug(
            "partition (%d, %d) pivot=%d → index %d, %d swap(s)",
            low, high, pivot_value, pivot_index, len(swaps),
        )
        return TickResult(
            tick_number=self.tick_count,
            phase="partition",
            range=(low, high),
            pivot_index=pivot_index,
            swaps_queued=len(swaps),
            explanation=(
                f"Partition ({low}, {high}) around pivot {pivot_value}: "
                f"it lands at index {pivot_index}, {len(swaps)} swap(s) to show."
            ),
        )

    def _finish(self, discarded: Optional[Tuple[int, int]] = None) -> TickResult:
        self.done = True
        log.info(
            "quicksort finished: %d partitions, %d swaps, %d ticks",
            self.partitions, self.swaps_recorded, self.tick_count + 1,
        )
        return TickResult(
            tick_number=self.tick_count,
            phase="finished",
            range=discarded,
            commands=[RenderControlsEnabled(True)],
            explanation=f"Sorting finished ({self.direction.value}).",
            is_final=True,
        )

    def _push_range(self, low: int, high: int) -> None:
        assert 0 <= low <= high + 1 <= len(self.store), (
            f"range ({low}, {high}) outside sequence of length {len(self.store)}"
        )
        self.range_stack.append((low, high))
