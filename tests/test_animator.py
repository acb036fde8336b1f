import random
from collections import Counter

import pytest

from sequence import SequenceStore, SortDirection
from algorithms import RenderSet, RenderHighlight, RenderControlsEnabled
from engine import QuicksortAnimator, AnimatorPhase
from tests.helpers import drain


ASC = SortDirection.ASCENDING
DESC = SortDirection.DESCENDING


def test_concrete_scenario_highlight_then_clear_before_next_range():
    store = SequenceStore([5, 2, 8, 1])
    anim = QuicksortAnimator(store, ASC)

    first = anim.tick()
    assert first.phase == "partition"
    assert first.range == (0, 3) and first.pivot_index == 0
    assert first.commands == []
    assert store.values() == [1, 2, 8, 5]
    assert anim.pending_swaps == [(0, 3)]
    assert anim.pending_ranges == [(0, -1), (1, 3)]

    lit = anim.tick()
    assert lit.phase == "highlighting"
    assert lit.commands == [
        RenderSet(0, 1), RenderSet(3, 5),
        RenderHighlight(0, True), RenderHighlight(3, True),
    ]
    assert anim.active_swap == (0, 3)
    assert anim.phase is AnimatorPhase.CLEARING

    dim = anim.tick()
    assert dim.phase == "clearing"
    assert dim.commands == [RenderHighlight(0, False), RenderHighlight(3, False)]
    assert anim.pending_swaps == []
    assert anim.phase is AnimatorPhase.IDLE

    nxt = anim.tick()
    assert nxt.phase == "partition" and nxt.range == (1, 3)


def test_single_element_finishes_on_first_tick():
    for direction in (ASC, DESC):
        anim = QuicksortAnimator(SequenceStore([1]), direction)
        result = anim.tick()
        assert result.is_final and anim.done
        assert result.tick_number == 0
        assert result.commands == [RenderControlsEnabled(True)]
        assert not result.is_visible


def test_ticks_after_done_have_no_effect():
    store = SequenceStore([2, 1])
    anim = QuicksortAnimator(store, ASC)
    drain(anim)
    before = store.values()
    for _ in range(3):
        extra = anim.tick()
        assert extra.is_final and extra.commands == []
    assert store.values() == before


def test_discarded_range_is_invisible():
    anim = QuicksortAnimator(SequenceStore([5, 2, 8, 1]), ASC)
    discards = 0
    while not anim.done:
        ranges_before = anim.pending_ranges
        swaps_before = anim.pending_swaps
        r = anim.tick()
        if r.phase != "discard":
            continue
        discards += 1
        assert r.commands == [] and r.swaps_queued == 0
        low, high = r.range
        assert low >= high
        # only the popped range is gone
        assert ranges_before[-1] == r.range
        assert anim.pending_ranges == ranges_before[:-1]
        assert anim.pending_swaps == swaps_before == []
    assert discards == 2


@pytest.mark.parametrize("direction", [ASC, DESC])
@pytest.mark.parametrize("size", [1, 2, 3, 7, 16, 64])
def test_run_sorts_and_preserves_multiset(direction, size):
    rng = random.Random(size)
    values = [rng.randint(1, 20) for _ in range(size)]
    store = SequenceStore(values)
    drain(QuicksortAnimator(store, direction))
    assert Counter(store.values()) == Counter(values)
    assert store.values() == sorted(values, reverse=direction is DESC)


def test_every_swap_is_wrapped_by_one_highlight_and_one_clear():
    rng = random.Random(99)
    store = SequenceStore([rng.randint(1, 1000) for _ in range(40)])
    results = drain(QuicksortAnimator(store, ASC))

    queued = sum(r.swaps_queued for r in results)
    lit = [r for r in results if r.phase == "highlighting"]
    dim = [r for r in results if r.phase == "clearing"]
    assert len(lit) == len(dim) == queued

    # highlight of a pair is always immediately followed by its clear
    for a, b in zip(results, results[1:]):
        if a.phase == "highlighting":
            assert b.phase == "clearing" and b.swap == a.swap

    # never more than one pair lit at a time
    on = set()
    for r in results:
        for c in r.commands:
            if isinstance(c, RenderHighlight):
                if c.on:
                    on.add(c.index)
                else:
                    on.discard(c.index)
        assert len(on) <= 2
    assert not on


def test_swaps_drained_in_fifo_order():
    anim = QuicksortAnimator(SequenceStore([5, 2, 8, 4]), DESC)
    first = anim.tick()
    expected = anim.pending_swaps
    assert first.swaps_queued == len(expected) == 2

    drained = []
    while anim.pending_swaps:
        r = anim.tick()
        if r.phase == "clearing":
            drained.append(r.swap)
    assert drained == expected


def test_already_sorted_never_records_self_swaps():
    store = SequenceStore(list(range(1, 21)))
    anim = QuicksortAnimator(store, ASC)
    results = drain(anim)
    for r in results:
        if r.swap is not None:
            assert r.swap[0] != r.swap[1]
    assert anim.swaps_recorded == 0
    # the algorithm is not adaptive: every range is still partitioned
    assert anim.partitions == 19


def test_alternating_direction_runs():
    store = SequenceStore([4, 9, 1, 7, 3])
    direction = ASC
    for run in range(1, 5):
        direction = direction.flipped()
        drain(QuicksortAnimator(store, direction))
        expected_desc = run % 2 == 1
        assert store.values() == sorted(store.values(), reverse=expected_desc)


def test_state_survives_serialisation_mid_run():
    rng = random.Random(3)
    values = [rng.randint(1, 50) for _ in range(12)]
    store_a, store_b = SequenceStore(values), SequenceStore(values)
    a = QuicksortAnimator(store_a, DESC)
    b = QuicksortAnimator(store_b, DESC)
    for _ in range(5):
        a.tick()
        b = QuicksortAnimator.from_dict(store_b, b.to_dict())
        b.tick()
    assert a.to_dict() == b.to_dict()
    assert [r.to_dict() for r in drain(a)] == [r.to_dict() for r in drain(b)]


def test_subrange_animator_leaves_outside_untouched():
    store = SequenceStore([9, 5, 3, 4, 0])
    drain(QuicksortAnimator(store, ASC, low=1, high=3))
    assert store.values() == [9, 3, 4, 5, 0]
