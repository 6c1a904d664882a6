# aspen

A small library for reactive programming. Programs are built from
*reactors*: objects that are committed again and again and, after each
commit, report a `State` saying whether they produced a new value, want to
be committed again right away, or have come to an end.

## Installing

```
pip install .
```

## The reactor protocol

Every reactor has two methods:

- `commit(sequence)` advances the reactor and returns a `State`.
- `eval()` returns the most recent value, or raises the exception the
  reactor holds.

Any object with these two methods can take part.

`aspen.state.State` is a set of flags:

| State                | Meaning                                  |
|----------------------|------------------------------------------|
| `NONE`               | nothing changed                          |
| `EVALUATED`          | there is a new value                     |
| `CONTINUE`           | commit again immediately                 |
| `COMPLETE`           | the reactor has finished                 |
| `CONTINUE_EVALUATED` | a new value, and commit again            |
| `COMPLETE_EVALUATED` | a final value                            |

The functions `combine`, `has_evaluation`, `has_continuation`,
`is_complete`, `set_flag` and `reset_flag` in `aspen.state` work with these
flags.

## Building blocks

- `aspen.cell.Cell` evaluates to the value most recently given to `set`;
  `set_complete` finishes it, optionally with a last value. Calling `eval`
  before any value was committed raises `RuntimeError`.
- `aspen.queues.Queue` evaluates, one commit at a time, to every value
  pushed with `push`. `set_complete` finishes it, optionally pushing a last
  value; `set_exception` finishes it with an exception that `eval` raises.
- `aspen.basic`:
  - `Throw` / `throws` — completes at once and raises the given exception
    (an instance or an exception class) from `eval`.
  - `Perpetual` / `perpetual` — always reports `CONTINUE_EVALUATED` and
    evaluates to `None`.
  - `Proxy` / `proxy` — forwards to a reactor set later with `set_reactor`;
    a re-entrant commit, as in a cyclic graph, returns the last known state
    instead of recursing.
  - `StateReactor` — evaluates to the `State` another reactor reported.
  - `Unique` — holds a single reactor and forwards to it.
- `aspen.commit_handler`:
  - `CommitHandler(children)` and `StaticCommitHandler(*children)` commit a
    set of reactors together and report their aggregate state. The first
    evaluation is reported only once every child has evaluated; a child that
    completes without ever evaluating completes the whole handler. Handlers
    support `len()`, indexing and iteration over their reactors.
  - `apply(f, handler)` calls `f` with the handler's reactors as arguments.
- `aspen.combinators`:
  - `Group` / `group(*reactors)` — interleaves reactors, taking turns
    between them. Arguments that are not reactors evaluate once to
    themselves; with no arguments the result completes without evaluating.
  - `When` / `when(condition, series)` — starts committing `series` once
    `condition` evaluates true.
  - `Concur` / `concur(producer)` — evaluates to every value of every
    reactor that `producer` evaluates to, visiting them in turn.
- `aspen.maybe`: `Maybe` holds a value or an exception (`Maybe(value)`,
  `Maybe(exception=error)`); `get()` returns the value or raises.
  `try_call(f)` calls `f` and captures its result or exception in a `Maybe`.
- `aspen.trigger.Trigger` carries the callback that cells and queues signal
  when a new value arrives. `Trigger.set_trigger` and `Trigger.get_trigger`
  set and read the trigger of the current thread; cells and queues pick it
  up on their first commit.

## Examples

```python
from aspen.queues import Queue
from aspen.state import State

queue = Queue()
queue.push(321)
assert queue.commit(0) == State.EVALUATED
assert queue.eval() == 321

queue.set_complete()
assert queue.commit(1) == State.COMPLETE
```

```python
from aspen.combinators import group
from aspen.state import State

reactor = group(1, 2)
assert reactor.commit(0) == State.CONTINUE_EVALUATED
assert reactor.eval() == 1
assert reactor.commit(1) == State.COMPLETE_EVALUATED
assert reactor.eval() == 2
```

## Running a reactor

`aspen.executor.Executor` drives a reactor:

```python
from aspen.executor import Executor

executor = Executor(reactor)
executor.run_until_none()      # commit until the reactor stops asking to continue
executor.run_until_complete()  # commit, waiting for updates, until it completes
```

While it runs, the executor installs its own `Trigger` for the current
thread, so cells and queues fed from other threads wake it up. When
`run_until_complete` is called from the main thread, Ctrl-C aborts every
running executor instead of raising `KeyboardInterrupt`; the previous
signal handler is restored afterwards.

## What the package does not include

There are no reactors for mapping a function over other reactors, chaining
reactors one after another, folding, or arithmetic and comparison between
reactors; build such pieces on the `commit`/`eval` protocol. The package
provides no command-line program.

## Tests

```
pip install .[test]
pytest
```