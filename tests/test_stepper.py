from sequence import SequenceStore, SortDirection
from engine import QuicksortAnimator, Stepper, StepperState


def make_stepper(values):
    stepper = Stepper()
    stepper.start(QuicksortAnimator(SequenceStore(values), SortDirection.ASCENDING))
    return stepper


def test_lifecycle_states():
    stepper = Stepper()
    assert stepper.state == StepperState.IDLE
    assert stepper.next_step() is False

    stepper.start(QuicksortAnimator(SequenceStore([2, 1]), SortDirection.ASCENDING))
    assert stepper.state == StepperState.READY

    stepper.reset()
    assert stepper.state == StepperState.IDLE and stepper.animator is None
    assert stepper.steps == []


def test_next_step_buffers_each_tick():
    stepper = make_stepper([5, 2, 8, 1])
    assert stepper.next_step() is True
    assert [s.phase for s in stepper.steps] == ["partition"]
    assert stepper.next_step() is True
    assert stepper.steps[-1].phase == "highlighting"
    assert stepper.state == StepperState.READY


def test_jump_to_end_finishes():
    stepper = make_stepper([4, 3, 2, 1])
    stepper.jump_to_end()
    assert stepper.state == StepperState.FINISHED
    assert stepper.steps[-1].is_final
    assert sum(s.is_final for s in stepper.steps) == 1
    assert stepper.animator.store.values() == [1, 2, 3, 4]
    assert stepper.next_step() is False
