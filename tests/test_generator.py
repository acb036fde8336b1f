import random

import pytest

from sequence import (
    MAX_RANDOM_VALUE,
    SMALL_NUMBER_THRESHOLD,
    InvalidCountError,
    RegenerationRefused,
    SequenceStore,
    generate_numbers,
    parse_count,
    regenerate_from_click,
)


@pytest.mark.parametrize("text, expected", [("5", 5), ("  42 ", 42), ("1000", 1000), ("1", 1)])
def test_parse_count_accepts(text, expected):
    assert parse_count(text) == expected


@pytest.mark.parametrize("text, message", [
    ("abc", "Please enter a valid number."),
    ("", "Please enter a valid number."),
    ("4.5", "Please enter a valid number."),
    ("0", "Number must be positive."),
    ("-3", "Number must be positive."),
    ("1001", "Number must be less than or equal to 1000."),
])
def test_parse_count_rejects(text, message):
    with pytest.raises(InvalidCountError) as exc:
        parse_count(text)
    assert str(exc.value) == message


def test_generated_numbers_respect_bounds(rng):
    for count in (1, 2, 10, 250):
        store = generate_numbers(count, rng=rng)
        values = store.values()
        assert len(values) == count
        assert all(1 <= v <= MAX_RANDOM_VALUE for v in values)
        assert min(values) <= SMALL_NUMBER_THRESHOLD


def test_seeded_generation_is_reproducible():
    assert generate_numbers(30, seed=5) == generate_numbers(30, seed=5)


def test_regenerate_from_small_click(rng):
    store = SequenceStore([500, 7, 900])
    fresh = regenerate_from_click(store, 1, rng=rng)
    assert len(fresh) == 7
    assert min(fresh.values()) <= SMALL_NUMBER_THRESHOLD


def test_regenerate_refuses_large_value():
    store = SequenceStore([500, 7, 900])
    with pytest.raises(RegenerationRefused) as exc:
        regenerate_from_click(store, 0, rng=random.Random(0))
    assert "30" in str(exc.value)
