"""
step.py — Render Commands & Tick Snapshot
==========================================
The animator never touches widgets.  Every tick it hands back a
TickResult: a frozen-in-time picture of what the host must repaint.

    • RenderSet(index, value)        – new label for a button
    • RenderHighlight(index, on)     – toggle emphasis on a button
    • RenderControlsEnabled(enabled) – sort / reset buttons on or off

Design decisions:
  - Commands and TickResult are frozen dataclasses.  The animator is the
    only writer; session, stepper and renderer are pure readers.
  - Every command serialises to a dict with a "kind" discriminator so
    the browser can replay it without knowing Python types.
  - SwapOp documents a swap that has ALREADY been applied to the
    sequence.  It exists only to sequence the animation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


# ---------------------------------------------------------------------------
# Swap record
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SwapOp:
    i: int
    j: int

    def as_pair(self) -> Tuple[int, int]:
        return (self.i, self.j)


# ---------------------------------------------------------------------------
# Render commands
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RenderSet:
    index: int
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "set", "index": self.index, "value": self.value}


@dataclass(frozen=True)
class RenderHighlight:
    index: int
    on:    bool

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "highlight", "index": self.index, "on": self.on}


@dataclass(frozen=True)
class RenderControlsEnabled:
    enabled: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "controls", "enabled": self.enabled}


RenderCommand = Union[RenderSet, RenderHighlight, RenderControlsEnabled]


# ---------------------------------------------------------------------------
# Tick snapshot
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TickResult:
    """
    Attributes:
        tick_number : 0-based index of this tick in the run.
        phase       : What the tick did:
                        "highlighting" – labels refreshed, pair lit up
                        "clearing"     – pair dimmed, swap dequeued
                        "partition"    – one Lomuto pass over `range`
                        "discard"      – popped a range needing no work
                        "finished"     – run complete (or already was)
        commands    : Render commands for the host, in order.
        swap        : (i, j) being animated, if any.
        range       : (low, high) popped this tick, if any.
        pivot_index : Final pivot slot for a partition tick.
        swaps_queued: Number of SwapOps a partition tick enqueued.
        explanation : Human-readable account of the tick.
        is_final    : True on the completion tick and every tick after it.
    """

    tick_number:  int                       = 0
    phase:        str                       = "idle"
    commands:     List[RenderCommand]       = field(default_factory=list)
    swap:         Optional[Tuple[int, int]] = None
    range:        Optional[Tuple[int, int]] = None
    pivot_index:  Optional[int]             = None
    swaps_queued: int                       = 0
    explanation:  str                       = ""
    is_final:     bool                      = False

    @property
    def is_visible(self) -> bool:
        return any(not isinstance(c, RenderControlsEnabled) for c in self.commands)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick_number":  self.tick_number,
            "phase":        self.phase,
            "commands":     [c.to_dict() for c in self.commands],
            "swap":         list(self.swap) if self.swap else None,
            "range":        list(self.range) if self.range else None,
            "pivot_index":  self.pivot_index,
            "swaps_queued": self.swaps_queued,
            "explanation":  self.explanation,
            "is_final":     self.is_final,
        }
