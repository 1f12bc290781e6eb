"""Command registration entries and group base class."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List, Tuple

from ..params import Param

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry


def normalise_name(name: str) -> List[str]:
    return name.strip().lower().split()


@dataclass(frozen=True)
class CommandSpec:
    """One registration: a multi-word name bound to a single handler."""

    name: str
    handler: Callable[..., Any]
    params: Tuple[Param, ...] = ()
    description: str = ""
    usage: str = ""

    @property
    def words(self) -> List[str]:
        return normalise_name(self.name)

    @property
    def owner(self) -> Any:
        return getattr(self.handler, "__self__", None)

    @property
    def arity(self) -> int:
        return len(self.params)

    def format_help(self) -> str:
        if self.usage:
            return f"{self.name} {self.usage} - {self.description}"
        return f"{self.name} - {self.description}"


class CommandGroup:
    """Object that contributes a set of commands to a registry."""

    def register(self, registry: "CommandRegistry") -> None:
        raise NotImplementedError("CommandGroup must implement register()")
