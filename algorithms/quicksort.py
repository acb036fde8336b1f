"""
quicksort.py — Lomuto Partition
================================
One full, direction-aware Lomuto pass.  Swaps are applied to the store
the moment they are decided; the returned SwapOps only tell the
animator what to show afterwards.

Self-swaps (i == j) are never performed or recorded, so a pass over an
already-partitioned range can legitimately return no SwapOps at all.
"""

from typing import List, Tuple

from sequence import SequenceStore, SortDirection
from algorithms.step import SwapOp


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def QUICKSORT(seq):",                                 # 0
    "    stack ← [(0, n-1)]",                              # 1
    "    while stack is not empty:",                       # 2
    "        (low, high) ← stack.pop()",                   # 3
    "        if low >= high: continue",                    # 4
    "        pivot ← seq[high];  i ← low - 1",             # 5
    "        for j in low .. high-1:",                     # 6
    "            if seq[j] ≤ pivot  (≥ when descending):", # 7
    "                i ← i + 1;  swap(seq[i], seq[j])",    # 8
    "        swap(seq[i+1], seq[high])",                   # 9
    "        stack.push((low, i));  stack.push((i+2, high))",  # 10
    "    return seq",                                      # 11
]


# ---------------------------------------------------------------------------
# Partition
# ---------------------------------------------------------------------------
def lomuto_partition(
    store: SequenceStore,
    low: int,
    high: int,
    direction: SortDirection,
) -> Tuple[int, List[SwapOp]]:
    """
    Partition store[low..high] around store[high].

    Returns (pivot_index, swaps) where `swaps` lists every exchange in
    the order it was applied.
    """
    assert 0 <= low < high < len(store), f"bad partition range ({low}, {high})"

    pivot = store.get(high)
    swaps: List[SwapOp] = []
    i = low - 1

    for j in range(low, high):
        if direction.accepts(store.get(j), pivot):
            i += 1
            if i != j:
                store.swap(i, j)
                swaps.append(SwapOp(i, j))

    if i + 1 != high:
        store.swap(i + 1, high)
        swaps.append(SwapOp(i + 1, high))

    return i + 1, swaps
