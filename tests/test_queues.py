import pytest

from aspen.queues import Queue
from aspen.state import State
from aspen.trigger import Trigger


def _complete(queue):
    queue.set_complete()


def _complete_with_value(queue):
    queue.set_complete(1)


def _fail(queue):
    queue.set_exception(RuntimeError("fail"))


@pytest.mark.parametrize("finish, expected", [
    (_complete, State.COMPLETE),
    (_complete_with_value, State.COMPLETE_EVALUATED),
    (_fail, State.COMPLETE_EVALUATED),
])
def test_queue_immediate_finish(finish, expected):
    queue = Queue()
    finish(queue)
    assert queue.commit(0) == expected


@pytest.mark.parametrize("finish, expected", [
    (_complete, State.COMPLETE),
    (lambda queue: queue.push(1), State.EVALUATED),
    (_complete_with_value, State.COMPLETE_EVALUATED),
])
def test_queue_empty_then_update(finish, expected):
    queue = Queue()
    assert queue.commit(0) == State.NONE
    finish(queue)
    assert queue.commit(1) == expected
    if expected != State.COMPLETE:
        assert queue.eval() == 1


def test_queue_single_value():
    queue = Queue()
    queue.set_complete(123)
    assert queue.commit(0) == State.COMPLETE_EVALUATED
    assert queue.eval() == 123


def test_queue_complete_with_exception():
    queue = Queue()
    queue.set_exception(RuntimeError(""))
    assert queue.commit(0) == State.COMPLETE_EVALUATED
    with pytest.raises(RuntimeError):
        queue.eval()


def test_queue_empty_then_complete_exception():
    queue = Queue()
    assert queue.commit(0) == State.NONE
    _fail(queue)
    assert queue.commit(1) == State.COMPLETE_EVALUATED
    with pytest.raises(RuntimeError, match="fail"):
        queue.eval()


def test_queue_single_value_then_complete():
    queue = Queue()
    queue.push(321)
    assert queue.commit(0) == State.EVALUATED
    assert queue.eval() == 321
    _complete(queue)
    assert queue.commit(1) == State.COMPLETE
    assert queue.eval() == 321


def test_queue_single_value_then_exception():
    queue = Queue()
    queue.push(321)
    assert queue.commit(0) == State.EVALUATED
    assert queue.eval() == 321
    queue.set_exception(RuntimeError(""))
    assert queue.commit(1) == State.COMPLETE_EVALUATED
    with pytest.raises(RuntimeError):
        queue.eval()


def test_multiple_values_continue_in_order():
    queue = Queue()
    for value in (5, 10, 15):
        queue.push(value)
    observed = [(queue.commit(sequence), queue.eval()) for sequence in range(4)]
    assert observed == [
        (State.CONTINUE_EVALUATED, 5),
        (State.CONTINUE_EVALUATED, 10),
        (State.EVALUATED, 15),
        (State.NONE, 15),
    ]


def test_eval_before_any_value_raises():
    with pytest.raises(RuntimeError, match="Uninitialized"):
        Queue().eval()


def test_push_signals_trigger_seen_on_commit():
    signals = []
    previous = Trigger.get_trigger()
    Trigger.set_trigger(Trigger(lambda: signals.append(True)))
    try:
        queue = Queue()
        assert queue.commit(0) == State.NONE
    finally:
        Trigger.set_trigger(previous)
    queue.push(7)
    queue.set_complete()
    assert signals == [True, True]