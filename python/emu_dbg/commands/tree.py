"""Prefix tree of multi-word console commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..errors import DuplicateOverloadError, RegistrationError
from ..params import Param, ParamKind
from .base import CommandSpec


@dataclass(frozen=True)
class Handler:
    """A callable bound to its declared parameter list."""

    func: Callable[..., Any]
    params: Tuple[Param, ...] = ()
    owner: Any = None

    def __post_init__(self) -> None:
        for index, param in enumerate(self.params):
            if param.kind is ParamKind.ARRAY:
                raise RegistrationError(
                    f"parameter {index} ({param.label}) is an array; array parameters are not supported"
                )

    @classmethod
    def from_spec(cls, spec: CommandSpec) -> "Handler":
        return cls(spec.handler, tuple(spec.params), spec.owner)

    @property
    def arity(self) -> int:
        return len(self.params)

    def invoke(self, args: Sequence[Any]) -> Any:
        return self.func(*args)


@dataclass
class CommandNode:
    """A node in the debug command tree.

    A node with handlers is a command terminus.  It may still have children
    when a longer command shares its words, e.g. ``step`` and ``step over``.
    ``owner`` is the owner of the first handler attached; intermediate nodes
    have none.
    """

    name: str
    path: str = ""
    owner: Any = None
    handlers: List[Handler] = field(default_factory=list)
    children: Dict[str, "CommandNode"] = field(default_factory=dict)

    @classmethod
    def root(cls) -> "CommandNode":
        return cls("root")

    @property
    def is_terminus(self) -> bool:
        return bool(self.handlers)

    def child(self, word: str) -> Optional["CommandNode"]:
        return self.children.get(word.lower())

    def arities(self) -> List[int]:
        return [handler.arity for handler in self.handlers]

    def add_handler(self, handler: Handler) -> None:
        if handler.arity in self.arities():
            raise DuplicateOverloadError(self.path, handler.arity)
        if not self.handlers:
            self.owner = handler.owner
        self.handlers.append(handler)

    def insert(self, words: Sequence[str], handler: Handler) -> "CommandNode":
        """Walk (creating as needed) the path *words* and attach *handler* at its end."""
        if not words:
            raise RegistrationError("Out of words building command node.")
        node = self
        for depth, word in enumerate(words):
            child = node.children.get(word)
            if child is None:
                child = CommandNode(word, path=" ".join(words[: depth + 1]))
                node.children[word] = child
            node = child
        node.add_handler(handler)
        return node

    def __str__(self) -> str:
        if not self.handlers:
            return f"{self.name}... ({len(self.children)})"
        return self.name


def build_tree(specs: Iterable[CommandSpec]) -> CommandNode:
    """Build a fresh command tree from registration entries."""
    root = CommandNode.root()
    for spec in specs:
        root.insert(spec.words, Handler.from_spec(spec))
    return root


__all__ = ["Handler", "CommandNode", "build_tree"]
