"""Argument coercion: overload selection and per-parameter conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple

from .errors import ArgumentCountError, ArgumentTypeError

if TYPE_CHECKING:  # pragma: no cover
    from .commands.tree import CommandNode, Handler


def select_handler(node: "CommandNode", args: Optional[Sequence[str]]) -> "Handler":
    """Pick the overload whose parameter count equals the argument count."""
    count = len(args) if args else 0
    for handler in node.handlers:
        if handler.arity == count:
            return handler
    raise ArgumentCountError(node.path, count, node.arities())


def coerce_arguments(handler: "Handler", args: Optional[Sequence[str]]) -> List[Any]:
    """Convert raw tokens to the handler's declared parameter types, in order."""
    tokens = list(args or ())
    values: List[Any] = []
    for index, (param, token) in enumerate(zip(handler.params, tokens)):
        try:
            values.append(param.parse(token, index))
        except ArgumentTypeError as exc:
            if exc.index < 0:
                exc.index = index
            raise
    return values


def coerce(node: "CommandNode", args: Optional[Sequence[str]]) -> Tuple["Handler", List[Any]]:
    handler = select_handler(node, args)
    return handler, coerce_arguments(handler, args)


__all__ = ["select_handler", "coerce_arguments", "coerce"]
