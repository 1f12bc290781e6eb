"""Rendering of console results and diagnostics, as text or JSON."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .context import DebuggerContext

WORDS_PER_LINE = 8


def _print_json(status: str, **fields: Any) -> None:
    payload: Dict[str, Any] = {"status": status}
    payload.update({key: value for key, value in fields.items() if value is not None})
    print(json.dumps(payload, indent=2, sort_keys=True))


def emit_result(ctx: DebuggerContext, *, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
    """Print a one-line confirmation, or its data in JSON mode."""
    if not ctx.json_output:
        print(message)
    elif data is not None:
        _print_json("ok", result=dict(data))
    else:
        _print_json("ok", message=message)


def emit_error(ctx: DebuggerContext, *, message: str, error: Optional[BaseException] = None) -> None:
    """Print a one-line diagnostic.

    In JSON mode the details carry the exception class and, for argument
    errors, the offending token and parameter index.
    """
    if not ctx.json_output:
        print(f"error: {message}")
        return
    details: Dict[str, Any] = {}
    if error is not None:
        details["type"] = type(error).__name__
        for attr in ("token", "index", "path", "limit"):
            value = getattr(error, attr, None)
            if value is not None:
                details[attr] = value
    _print_json("error", error=message, details=details or None)


def _ascii_column(words: Iterable[int], filler: str) -> str:
    chars: List[str] = []
    for word in words:
        for byte in (word >> 8, word & 0xFF):
            chars.append(chr(byte) if 32 <= byte < 127 else filler)
    return "".join(chars)


def render_memory(ctx: DebuggerContext, address: int, words: Sequence[int], *, filler: str = ".") -> None:
    """Octal dump, eight words per line with a two-bytes-per-word text column."""
    if ctx.json_output:
        _print_json("ok", result={"address": address, "words": list(words)})
        return
    for offset in range(0, len(words), WORDS_PER_LINE):
        chunk = words[offset : offset + WORDS_PER_LINE]
        octal = " ".join(f"{word:06o}" for word in chunk)
        print(f"{address + offset:06o}: {octal}  {_ascii_column(chunk, filler)}")


def render_registers(ctx: DebuggerContext, registers: Mapping[str, int]) -> None:
    if ctx.json_output:
        _print_json("ok", result={"registers": dict(registers)})
        return
    for name, value in registers.items():
        print(f"  {name:<4} {value:06o}")


def render_breakpoints(ctx: DebuggerContext, addresses: Sequence[int]) -> None:
    if ctx.json_output:
        _print_json("ok", result={"breakpoints": list(addresses)})
    elif not addresses:
        print("No breakpoints set")
    else:
        for address in addresses:
            print(f"  {address:06o}")


__all__ = ["emit_result", "emit_error", "render_memory", "render_registers", "render_breakpoints"]
