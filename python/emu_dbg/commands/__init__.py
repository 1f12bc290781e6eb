"""Command registry for emu-dbg."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable, List, Optional, Sequence, Union

from ..errors import RegistrationError
from ..params import Param
from ..parser import split_command
from ..resolver import Resolution, resolve
from .base import CommandGroup, CommandSpec, normalise_name
from .builtin import BuiltinCommands
from .control import ControlCommands
from .memory import MemoryCommands
from .settings import SettingsCommands
from .tree import CommandNode, Handler, build_tree

if TYPE_CHECKING:  # pragma: no cover
    from ..context import DebuggerContext
    from ..target import SimulatedTarget

LOGGER = logging.getLogger("emu_dbg.commands")


class CommandRegistry:
    """Stores the registered commands and the tree built from them."""

    def __init__(self) -> None:
        self.root = CommandNode.root()
        self._ordered: List[CommandSpec] = []

    def add(
        self,
        name: str,
        handler: Callable[..., Any],
        *,
        params: Sequence[Param] = (),
        description: str = "",
        usage: str = "",
    ) -> CommandSpec:
        words = normalise_name(name)
        if not words:
            raise RegistrationError("Out of words building command node.")
        spec = CommandSpec(" ".join(words), handler, tuple(params), description, usage)
        self.root.insert(words, Handler.from_spec(spec))
        self._ordered.append(spec)
        LOGGER.debug("registered '%s' (%d argument(s))", spec.name, spec.arity)
        return spec

    def register_group(self, group: CommandGroup) -> None:
        group.register(self)
        bind = getattr(group, "bind", None)
        if callable(bind):
            bind(self)

    def list_commands(self) -> Iterable[CommandSpec]:
        return self._ordered

    def get(self, name: str) -> Optional[CommandNode]:
        node: Optional[CommandNode] = self.root
        for word in normalise_name(name):
            node = node.child(word) if node else None
        return node if node is not self.root else None

    def resolve(self, line: Union[str, Sequence[str]]) -> Optional[Resolution]:
        tokens = split_command(line) if isinstance(line, str) else list(line)
        return resolve(self.root, tokens)


def build_registry(ctx: "DebuggerContext", target: "SimulatedTarget") -> CommandRegistry:
    registry = CommandRegistry()
    groups = [
        BuiltinCommands(ctx),
        MemoryCommands(ctx, target),
        ControlCommands(ctx, target),
        SettingsCommands(ctx),
    ]
    for group in groups:
        registry.register_group(group)
    return registry


__all__ = [
    "CommandRegistry",
    "CommandGroup",
    "CommandSpec",
    "CommandNode",
    "Handler",
    "build_tree",
    "build_registry",
]
