import pytest

from aspen.cell import Cell
from aspen.commit_handler import CommitHandler, StaticCommitHandler, apply
from aspen.queues import Queue
from aspen.state import State


class _Shared:
    """Shares one reactor between several parents within a sequence."""

    def __init__(self, reactor):
        self.reactor = reactor
        self._sequence = None
        self._state = State.NONE

    def commit(self, sequence):
        if sequence != self._sequence:
            self._sequence = sequence
            self._state = self.reactor.commit(sequence)
        return self._state

    def eval(self):
        return self.reactor.eval()


def _constant(value):
    cell = Cell(value)
    cell.set_complete()
    return cell


def _completed_queue():
    queue = Queue()
    queue.set_complete()
    return queue


@pytest.mark.parametrize("handler, expected", [
    (StaticCommitHandler(), State.COMPLETE),
    (CommitHandler([]), State.COMPLETE),
    (CommitHandler([_constant(1), _constant(2)]), State.COMPLETE_EVALUATED),
    (CommitHandler([_constant(4), _completed_queue()]), State.COMPLETE),
])
def test_single_commit(handler, expected):
    assert handler.commit(0) == expected


def test_static_immediate_complete():
    reactor = StaticCommitHandler(Queue())
    queue = reactor[0]
    queue.push(1)
    queue.commit(0)
    queue.set_complete()
    assert reactor.commit(1) == State.COMPLETE


def test_static_complete():
    queue = _Shared(Queue())
    reactor = StaticCommitHandler(queue, queue)
    reactor[0].reactor.push(1)
    assert reactor.commit(0) == State.EVALUATED
    reactor[1].reactor.set_complete()
    assert reactor.commit(1) == State.COMPLETE


def test_static_empty_and_evaluated():
    reactor = StaticCommitHandler(Queue(), Queue())
    assert reactor.commit(0) == State.NONE
    reactor[0].push(123)
    assert reactor.commit(1) == State.NONE
    reactor[1].push(321)
    assert reactor.commit(2) == State.EVALUATED


def test_static_delayed_evaluation():
    reactor = StaticCommitHandler(Queue(), _constant(5))
    assert reactor.commit(0) == State.NONE
    reactor[0].push(123)
    assert reactor.commit(1) == State.EVALUATED
    assert reactor.commit(2) == State.NONE


def test_commit_handler_len_and_getitem():
    first, second = Queue(), Queue()
    handler = CommitHandler([first, second])
    assert len(handler) == 2
    assert (handler[0], handler[1]) == (first, second)
    assert handler[0] is first
    with pytest.raises(IndexError):
        handler[2]


def test_commit_handler_continuation_propagates():
    queue = Queue()
    for value in (1, 2, 3):
        queue.push(value)
    handler = CommitHandler([queue])
    assert handler.commit(0) == State.CONTINUE_EVALUATED
    assert handler[0].eval() == 1


def test_apply_passes_reactors_in_order():
    handler = StaticCommitHandler(_constant(10), _constant(20))
    handler.commit(0)
    assert apply(lambda a, b: (a.eval(), b.eval()), handler) == (10, 20)