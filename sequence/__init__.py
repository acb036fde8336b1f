"""
sequence/
---------
Core data layer.  Public API:

    from sequence import SequenceStore, SortDirection
    from sequence import generate_numbers, parse_count, regenerate_from_click
"""

from sequence.store     import SequenceStore, SortDirection
from sequence.generator import (
    MAX_RANDOM_VALUE,
    SMALL_NUMBER_THRESHOLD,
    InvalidCountError,
    RegenerationRefused,
    generate_numbers,
    parse_count,
    regenerate_from_click,
)

__all__ = [
    "SequenceStore",          "SortDirection",
    "MAX_RANDOM_VALUE",       "SMALL_NUMBER_THRESHOLD",
    "InvalidCountError",      "RegenerationRefused",
    "generate_numbers",       "parse_count",
    "regenerate_from_click",
]
