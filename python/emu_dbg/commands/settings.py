"""Console settings commands."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from ..context import DebuggerContext
from ..params import boolean, string, symbol
from ..state import ExecutionState
from .base import CommandGroup

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry


class LogLevel(enum.Enum):
    Debug = logging.DEBUG
    Info = logging.INFO
    Warning = logging.WARNING
    Error = logging.ERROR


class SettingsCommands(CommandGroup):
    def __init__(self, ctx: DebuggerContext) -> None:
        self.ctx = ctx

    def register(self, registry: "CommandRegistry") -> None:
        registry.add(
            "set log level",
            self.set_log_level,
            params=(symbol(LogLevel, "level"),),
            description="Sets the logging verbosity.",
            usage="<level>",
        )
        registry.add(
            "set json output",
            self.set_json_output,
            params=(boolean("enabled"),),
            description="Switches between text and JSON output.",
            usage="<true|false>",
        )
        registry.add(
            "set script echo",
            self.set_script_echo,
            params=(boolean("enabled"),),
            description="Controls whether script lines are echoed before running.",
            usage="<true|false>",
        )
        registry.add("echo", self.echo, params=(string("text"),), description="Prints its argument.", usage="<text>")

    def set_log_level(self, level: LogLevel) -> ExecutionState:
        logging.getLogger().setLevel(level.value)
        self.ctx.log_level = logging.getLevelName(level.value)
        return ExecutionState.DEBUGGING

    def set_json_output(self, enabled: bool) -> ExecutionState:
        self.ctx.json_output = enabled
        return ExecutionState.DEBUGGING

    def set_script_echo(self, enabled: bool) -> ExecutionState:
        self.ctx.echo_scripts = enabled
        return ExecutionState.DEBUGGING

    def echo(self, text: str) -> ExecutionState:
        print(text)
        return ExecutionState.DEBUGGING
