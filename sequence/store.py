"""
store.py — Sequence Store
==========================
The mutable array of integers currently on screen, plus the direction
flag the comparator reads.

Design decisions:
  - The store is never resized.  Regeneration builds a NEW store; the
    animator only ever permutes the one it was handed.
  - Out-of-range access raises IndexError.  Python's negative-index
    wrap-around is refused explicitly, since a negative index here can
    only come from a bug in the range bookkeeping.
"""

from enum import Enum
from typing import Dict, Iterable, List, Any


# ---------------------------------------------------------------------------
# Sort Direction
# ---------------------------------------------------------------------------
class SortDirection(Enum):
    ASCENDING  = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING

    def accepts(self, value: int, pivot: int) -> bool:
        """True if `value` belongs on the left of `pivot` for this direction."""
        if self is SortDirection.ASCENDING:
            return value <= pivot
        return value >= pivot

    @property
    def arrow(self) -> str:
        return "↑" if self is SortDirection.ASCENDING else "↓"


# ---------------------------------------------------------------------------
# Sequence Store
# ---------------------------------------------------------------------------
class SequenceStore:
    """
    Attributes:
        _values : The backing list.  Length is fixed at construction.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int]):
        self._values: List[int] = [int(v) for v in values]
        if not self._values:
            raise ValueError("A sequence needs at least one value.")

    # ------------------------------------------------------------------
    # Minimal contract used by the animator
    # ------------------------------------------------------------------
    def get(self, i: int) -> int:
        self._check(i)
        return self._values[i]

    def set(self, i: int, value: int) -> None:
        self._check(i)
        self._values[i] = int(value)

    def swap(self, i: int, j: int) -> None:
        self._check(i)
        self._check(j)
        self._values[i], self._values[j] = self._values[j], self._values[i]

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, i: int) -> int:
        return self.get(i)

    def __iter__(self):
        return iter(list(self._values))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SequenceStore):
            return self._values == other._values
        return NotImplemented

    def __repr__(self) -> str:
        return f"SequenceStore({self._values!r})"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def values(self) -> List[int]:
        """Copy of the current contents."""
        return list(self._values)

    def is_sorted(self, direction: SortDirection) -> bool:
        pairs = zip(self._values, self._values[1:])
        return all(direction.accepts(a, b) for a, b in pairs)

    def to_dict(self) -> Dict[str, Any]:
        return {"values": list(self._values)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SequenceStore":
        return cls(data["values"])

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._values):
            raise IndexError(
                f"index {i} out of range for sequence of length {len(self._values)}"
            )
