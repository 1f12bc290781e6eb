"""Interactive REPL for emu-dbg."""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.patch_stdout import patch_stdout

from .executor import ConsoleExecutor
from .state import ExecutionState

LOGGER = logging.getLogger("emu_dbg.repl")


class DebuggerREPL:
    """prompt-toolkit REPL; reads plain stdin when it is not a terminal."""

    def __init__(self, executor: ConsoleExecutor, target: Any) -> None:
        self.executor = executor
        self.target = target

    def run(self, state: ExecutionState = ExecutionState.DEBUGGING) -> int:
        if self.executor.read_line is None:
            self.executor.read_line = self._build_reader()
        while state is not ExecutionState.QUIT:
            if state is ExecutionState.RUNNING:
                self._resume()
            try:
                state = self.executor.prompt(self.target)
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
        return 0

    def _build_reader(self) -> Callable[[], str]:
        prompt_text = self.executor.ctx.prompt
        if not sys.stdin.isatty():
            return lambda: input(prompt_text)
        session: PromptSession[str] = PromptSession()

        def read_line() -> str:
            with patch_stdout():
                return session.prompt(prompt_text)

        return read_line

    def _resume(self) -> None:
        run = getattr(self.target, "run", None)
        if not callable(run):
            LOGGER.debug("target %r cannot be resumed", self.target)
            return
        reason = run()
        if reason:
            print(f"Stopped: {reason}")
