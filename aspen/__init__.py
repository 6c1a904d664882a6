"""Composable reactors: states, cells, queues, commit handlers, combinators and an executor."""

__version__ = "0.1.0"

__all__ = [
    "basic",
    "cell",
    "combinators",
    "commit_handler",
    "executor",
    "maybe",
    "queues",
    "state",
    "trigger",
]