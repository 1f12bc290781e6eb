"""Resolve token sequences against the command tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from .commands.tree import CommandNode

LOGGER = logging.getLogger("emu_dbg.resolver")


@dataclass
class Resolution:
    node: "CommandNode"
    args: List[str]
    consumed: int


def resolve(root: "CommandNode", tokens: Sequence[str]) -> Optional[Resolution]:
    """Find the deepest command terminus matching the leading *tokens*.

    Returns ``None`` when no registered command matches.  Tokens not used to
    walk the tree are returned as the command's arguments.
    """
    node = root
    index = 0
    while True:
        # a terminus stops the walk when it cannot be extended or nothing is left to extend it with
        if node.handlers and (not node.children or index >= len(tokens)):
            break
        if index >= len(tokens):
            return None
        child = node.child(tokens[index])
        if child is None:
            if node.handlers:
                break
            return None
        node = child
        index += 1
    args = list(tokens[index:])
    LOGGER.debug("resolved %r to '%s' with args %r", list(tokens), node.path, args)
    return Resolution(node=node, args=args, consumed=index)


__all__ = ["Resolution", "resolve"]
