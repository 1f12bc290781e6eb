"""emu-dbg CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from .commands import build_registry
from .context import DEFAULT_MAX_SCRIPT_DEPTH, DebuggerContext, default_log_level
from .errors import ScriptError
from .executor import ConsoleExecutor
from .output import emit_error
from .repl import DebuggerREPL
from .state import ExecutionState
from .target import SimulatedTarget

LOG = logging.getLogger("emu_dbg.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Emulator debugger console")
    parser.add_argument("--json", action="store_true", help="Emit JSON output when supported")
    parser.add_argument("--log-level", default=default_log_level(), help="Logging level (default WARNING)")
    parser.add_argument("--prompt", default="> ", help="Interactive prompt text")
    parser.add_argument("--no-echo", action="store_true", help="Do not echo script lines before running them")
    parser.add_argument(
        "--max-script-depth",
        type=_positive_int,
        default=DEFAULT_MAX_SCRIPT_DEPTH,
        help="Maximum nesting of @script inclusion",
    )
    parser.add_argument("--memory-size", type=_positive_int, default=4096, help="Simulated memory size in words")
    parser.add_argument(
        "-s",
        "--script",
        action="append",
        default=[],
        help="Run a script before prompting (may be repeated)",
    )
    parser.add_argument(
        "-c",
        "--command",
        help="Execute a single command non-interactively (quote the command string)",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    ctx = DebuggerContext(
        json_output=args.json,
        echo_scripts=not args.no_echo,
        max_script_depth=args.max_script_depth,
        prompt=args.prompt,
        log_level=args.log_level.upper(),
    )
    target = SimulatedTarget(memory_size=args.memory_size)
    executor = ConsoleExecutor(build_registry(ctx, target), ctx)
    state = ExecutionState.DEBUGGING
    for script in args.script:
        try:
            state = executor.execute_script(script, target)
        except ScriptError as exc:
            LOG.error("script %s aborted: %s", script, exc)
            emit_error(ctx, message=str(exc), error=exc)
            return 1
        if state is ExecutionState.QUIT:
            return 0
    if args.command:
        return _run_single_command(executor, target, args.command)
    repl = DebuggerREPL(executor, target)
    try:
        return repl.run(state)
    except KeyboardInterrupt:
        print()
        return 0


def _run_single_command(executor: ConsoleExecutor, target: SimulatedTarget, command_line: str) -> int:
    errors = executor.error_count
    try:
        executor.execute_line(command_line, target)
    except ScriptError as exc:
        emit_error(executor.ctx, message=str(exc), error=exc)
        return 1
    return 1 if executor.error_count > errors else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
