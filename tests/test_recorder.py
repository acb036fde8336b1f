import pytest

from sequence import SequenceStore, SortDirection
from engine import Recorder


def test_run_to_completion_requires_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_metrics_for_concrete_run():
    store = SequenceStore([5, 2, 8, 1])
    rec = Recorder()
    rec.start(store, SortDirection.ASCENDING)
    m = rec.run_to_completion()

    assert store.values() == [1, 2, 5, 8]
    assert m.is_sorted
    assert m.length == 4 and m.direction == "ascending"
    assert m.partitions == 2
    assert m.swaps == 2
    assert m.highlight_ticks == m.clear_ticks == 2
    assert m.discarded == 3
    # 2 partitions + 2×2 swap ticks + 2 discards + the closing discard
    assert m.total_ticks == 9
    assert rec.get_metrics() is m


def test_export_is_serialisable_snapshot():
    rec = Recorder()
    rec.start(SequenceStore([3, 1, 2]), SortDirection.DESCENDING)
    rec.run_to_completion()
    out = rec.export()
    assert out["initial"] == [3, 1, 2]
    assert out["final"] == [3, 2, 1]
    assert out["direction"] == "descending"
    assert out["metrics"]["is_sorted"] is True
    assert out["steps"][-1]["is_final"] is True
    kinds = {c["kind"] for s in out["steps"] for c in s["commands"]}
    assert kinds <= {"set", "highlight", "controls"}
