"""Execution-state signals returned by console commands."""

from __future__ import annotations

import enum


class ExecutionState(enum.Enum):
    """What the caller of the console should do after a line completes."""

    DEBUGGING = "debugging"  # keep prompting
    RUNNING = "running"  # resume the target
    HALTED = "halted"  # target stopped; keep prompting
    QUIT = "quit"  # terminate the debugger

    @classmethod
    def coerce(cls, value: object) -> "ExecutionState":
        if value is None:
            return cls.DEBUGGING
        if isinstance(value, cls):
            return value
        raise TypeError(f"command handlers must return ExecutionState, not {type(value).__name__}")
