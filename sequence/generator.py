"""
generator.py — Number Generation & Count Parsing
==================================================
Everything that produces a fresh SequenceStore:

    parse_count("25")              → 25   (or InvalidCountError)
    generate_numbers(25, seed=7)   → SequenceStore with one value ≤ 30
    regenerate_from_click(s, 3)    → new store sized by the clicked value

The regenerated size is the clicked value itself, which is bounded by
SMALL_NUMBER_THRESHOLD, so it always satisfies the same bounds as a
count typed into the intro screen.
"""

import logging
import random
from typing import Optional

from sequence.store import SequenceStore

log = logging.getLogger(__name__)


MAX_RANDOM_VALUE       = 1000
SMALL_NUMBER_THRESHOLD = 30


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class InvalidCountError(ValueError):
    """Raised when the requested count is not a usable integer."""


class RegenerationRefused(ValueError):
    """Raised when a clicked value is too large to seed a regeneration."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
def parse_count(text) -> int:
    raw = str(text).strip() if text is not None else ""
    try:
        value = int(raw)
    except ValueError:
        raise InvalidCountError("Please enter a valid number.") from None

    if value <= 0:
        raise InvalidCountError("Number must be positive.")
    if value > MAX_RANDOM_VALUE:
        raise InvalidCountError(
            f"Number must be less than or equal to {MAX_RANDOM_VALUE}."
        )
    return value


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------
def generate_numbers(
    count: int,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> SequenceStore:
    """
    Random values in [1, MAX_RANDOM_VALUE].  One randomly chosen slot is
    drawn from [1, SMALL_NUMBER_THRESHOLD] so there is always something
    the user can click to regenerate.
    """
    if count <= 0:
        raise InvalidCountError("Number must be positive.")
    rng = rng or random.Random(seed)

    small_index = rng.randrange(count)
    values = [
        rng.randint(1, SMALL_NUMBER_THRESHOLD) if i == small_index
        else rng.randint(1, MAX_RANDOM_VALUE)
        for i in range(count)
    ]
    log.debug("generated %d numbers (small slot at %d)", count, small_index)
    return SequenceStore(values)


def regenerate_from_click(
    store: SequenceStore,
    index: int,
    rng: Optional[random.Random] = None,
) -> SequenceStore:
    value = store.get(index)
    if value > SMALL_NUMBER_THRESHOLD:
        raise RegenerationRefused(
            f"Please select a value smaller or equal to {SMALL_NUMBER_THRESHOLD}."
        )
    log.info("regenerating %d numbers from click on index %d", value, index)
    return generate_numbers(value, rng=rng)
