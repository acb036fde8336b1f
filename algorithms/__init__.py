"""
algorithms/__init__.py — Algorithm Registry
=============================================
    from algorithms import REGISTRY, get_algorithm

Only quicksort is animated, but the host still reads its label,
pseudocode and complexity from an AlgoInfo card so the side panel is
data-driven.
"""

from dataclasses import dataclass
from typing import List, Dict, Optional

from algorithms.quicksort import lomuto_partition, PSEUDOCODE as _qs_pc
from algorithms.step import (
    SwapOp,
    RenderSet,
    RenderHighlight,
    RenderControlsEnabled,
    RenderCommand,
    TickResult,
)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "quicksort"
    label:            str                    # human label
    pseudocode:       List[str]              # lines for the side-panel
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "quicksort": AlgoInfo(
        key="quicksort", label="Quicksort (Lomuto)", pseudocode=_qs_pc,
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(n) stack",
        description="Last element as pivot. One partition pass per tick, then each swap is replayed.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "lomuto_partition",
    "SwapOp",
    "RenderSet",
    "RenderHighlight",
    "RenderControlsEnabled",
    "RenderCommand",
    "TickResult",
]
