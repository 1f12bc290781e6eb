"""Built-in console commands: command listing and quit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..context import DebuggerContext
from ..output import emit_result
from ..state import ExecutionState
from .base import CommandGroup

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry


class BuiltinCommands(CommandGroup):
    def __init__(self, ctx: DebuggerContext) -> None:
        self.ctx = ctx
        self._registry: CommandRegistry | None = None

    def register(self, registry: "CommandRegistry") -> None:
        registry.add("show commands", self.show_commands, description="Shows debugger commands and their descriptions.")
        registry.add("help", self.show_commands, description="Shows debugger commands and their descriptions.")
        registry.add("quit", self.quit, description="Terminates the emulator process.")

    def bind(self, registry: "CommandRegistry") -> None:
        self._registry = registry

    def show_commands(self) -> ExecutionState:
        registry = self._registry
        if not registry:
            return ExecutionState.DEBUGGING
        specs = list(registry.list_commands())
        if self.ctx.json_output:
            entries = [
                {"name": spec.name, "usage": spec.usage, "description": spec.description, "arity": spec.arity}
                for spec in specs
            ]
            emit_result(self.ctx, message="commands", data={"commands": entries})
        else:
            for spec in specs:
                print(spec.format_help())
        return ExecutionState.DEBUGGING

    def quit(self) -> ExecutionState:
        return ExecutionState.QUIT
