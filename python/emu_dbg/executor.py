"""Line and script orchestration for the debugger console."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from .coercion import coerce
from .commands import CommandRegistry
from .context import DebuggerContext
from .errors import CommandError, ConsoleError, NoMatchError, ScriptDepthError, ScriptError, ScriptIOError
from .output import emit_error
from .parser import split_command
from .state import ExecutionState

LOGGER = logging.getLogger("emu_dbg.executor")

COMMENT_PREFIX = "#"
SCRIPT_PREFIX = "@"


class ConsoleExecutor:
    """Runs console lines and scripts against a command registry.

    ``read_line`` is the prompt: a callable returning the next line of user
    input.  It may raise ``EOFError`` to signal the end of input.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        ctx: Optional[DebuggerContext] = None,
        *,
        read_line: Optional[Callable[[], str]] = None,
    ) -> None:
        self.registry = registry
        self.ctx = ctx or DebuggerContext()
        self.read_line = read_line
        self.last_line: Optional[str] = None
        self.error_count = 0
        self._script_depth = 0

    def prompt(self, target: Any) -> ExecutionState:
        """Read one line, execute it and return the resulting state.

        An empty line repeats the last line that executed successfully.
        """
        if self.read_line is None:
            raise RuntimeError("no line reader configured")
        status = getattr(target, "format_status", None)
        if callable(status):
            print(status())
        line = self.read_line().strip()
        if not line:
            if not self.last_line:
                return ExecutionState.DEBUGGING
            line = self.last_line
        try:
            state = self.run_line(line, target)
        except ConsoleError as exc:
            self._report(exc)
            return ExecutionState.DEBUGGING
        except Exception as exc:
            LOGGER.exception("command failed: %s", line)
            self._report(exc, prefix="command failed: ")
            return ExecutionState.DEBUGGING
        self.last_line = line
        return state

    def execute_line(self, line: str, target: Any) -> ExecutionState:
        """Execute *line*, reporting command errors instead of raising them.

        Script errors still propagate so that they abort enclosing scripts.
        """
        try:
            return self.run_line(line, target)
        except ScriptError:
            raise
        except CommandError as exc:
            self._report(exc)
        except Exception as exc:
            LOGGER.exception("command failed: %s", line)
            self._report(exc, prefix="command failed: ")
        return ExecutionState.DEBUGGING

    def run_line(self, line: str, target: Any) -> ExecutionState:
        """Execute *line*; every failure is raised to the caller."""
        text = line.strip()
        if not text or text.startswith(COMMENT_PREFIX):
            return ExecutionState.DEBUGGING
        if text.startswith(SCRIPT_PREFIX):
            return self.execute_script(text[len(SCRIPT_PREFIX):].strip(), target)
        tokens = split_command(text)
        resolution = self.registry.resolve(tokens)
        if resolution is None:
            raise NoMatchError(text)
        handler, values = coerce(resolution.node, resolution.args)
        LOGGER.debug("invoking '%s' with %r", resolution.node.path, values)
        return ExecutionState.coerce(handler.invoke(values))

    def execute_script(self, path: str, target: Any) -> ExecutionState:
        """Run every non-blank, non-comment line of the script at *path*.

        Returns the state of the last executed line, or ``HALTED`` when the
        script has nothing to execute.  A ``QUIT`` ends the script early.
        """
        limit = self.ctx.max_script_depth
        if self._script_depth >= limit:
            raise ScriptDepthError(path, limit)
        script = Path(path).expanduser()
        try:
            lines = script.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise ScriptIOError(path, exc) from exc
        self._script_depth += 1
        LOGGER.debug("entering script %s (depth %d)", script, self._script_depth)
        state = ExecutionState.HALTED
        try:
            for raw in lines:
                line = raw.strip()
                if not line:
                    continue
                if self.ctx.echo_scripts:
                    print(line)
                state = self.execute_line(line, target)
                if state is ExecutionState.QUIT:
                    break
        finally:
            self._script_depth -= 1
            LOGGER.debug("leaving script %s", script)
        return state

    def _report(self, exc: BaseException, *, prefix: str = "") -> None:
        self.error_count += 1
        emit_error(self.ctx, message=f"{prefix}{exc}", error=exc)
