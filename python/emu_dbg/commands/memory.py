"""Memory inspection and modification commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List

from ..context import DebuggerContext
from ..errors import ArgumentTypeError
from ..output import emit_error, emit_result, render_memory
from ..params import char, parse_u16, string, u16
from ..state import ExecutionState
from ..target import SimulatedTarget
from .base import CommandGroup

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry

DEFAULT_DISPLAY_COUNT = 8


class MemoryCommands(CommandGroup):
    def __init__(self, ctx: DebuggerContext, target: SimulatedTarget) -> None:
        self.ctx = ctx
        self.target = target
        self.filler = "."

    def register(self, registry: "CommandRegistry") -> None:
        registry.add(
            "display memory",
            self.display_memory,
            params=(u16("address"),),
            description="Displays memory starting at the given address.",
            usage="<address>",
        )
        registry.add(
            "display memory",
            self.display_memory_range,
            params=(u16("address"), u16("count")),
            description="Displays <count> words of memory starting at the given address.",
            usage="<address> <count>",
        )
        registry.add(
            "set memory",
            self.set_memory,
            params=(u16("address"), u16("value")),
            description="Stores a word in memory.",
            usage="<address> <value>",
        )
        registry.add(
            "fill memory",
            self.fill_memory,
            params=(u16("address"), u16("count"), u16("value")),
            description="Stores <value> into <count> consecutive words.",
            usage="<address> <count> <value>",
        )
        registry.add(
            "load memory",
            self.load_memory,
            params=(string("file"), u16("address")),
            description="Loads whitespace-separated words from a file into memory.",
            usage="<file> <address>",
        )
        registry.add(
            "set display filler",
            self.set_filler,
            params=(char("filler"),),
            description="Sets the character shown for unprintable bytes in memory dumps.",
            usage="<char>",
        )

    def display_memory(self, address: int) -> ExecutionState:
        return self.display_memory_range(address, DEFAULT_DISPLAY_COUNT)

    def display_memory_range(self, address: int, count: int) -> ExecutionState:
        if not self._check_range(address, count):
            return ExecutionState.DEBUGGING
        words = [self.target.read(addr) for addr in range(address, address + count)]
        render_memory(self.ctx, address, words, filler=self.filler)
        return ExecutionState.DEBUGGING

    def set_memory(self, address: int, value: int) -> ExecutionState:
        if self._check_range(address, 1):
            self.target.write(address, value)
            emit_result(self.ctx, message=f"{address:06o} <- {value:06o}", data={"address": address, "value": value})
        return ExecutionState.DEBUGGING

    def fill_memory(self, address: int, count: int, value: int) -> ExecutionState:
        if self._check_range(address, count):
            for addr in range(address, address + count):
                self.target.write(addr, value)
            emit_result(
                self.ctx,
                message=f"Filled {count} word(s) at {address:06o} with {value:06o}",
                data={"address": address, "count": count, "value": value},
            )
        return ExecutionState.DEBUGGING

    def load_memory(self, file: str, address: int) -> ExecutionState:
        try:
            words = self._read_words(Path(file).expanduser())
        except (OSError, ArgumentTypeError) as exc:
            emit_error(self.ctx, message=f"load failed: {exc}")
            return ExecutionState.DEBUGGING
        if not words:
            emit_error(self.ctx, message=f"load failed: {file} contains no words")
            return ExecutionState.DEBUGGING
        if self._check_range(address, len(words)):
            for offset, word in enumerate(words):
                self.target.write(address + offset, word)
            emit_result(
                self.ctx,
                message=f"Loaded {len(words)} word(s) at {address:06o}",
                data={"address": address, "count": len(words)},
            )
        return ExecutionState.DEBUGGING

    def set_filler(self, filler: str) -> ExecutionState:
        self.filler = filler
        return ExecutionState.DEBUGGING

    @staticmethod
    def _read_words(path: Path) -> List[int]:
        # same literal syntax as console arguments: octal unless prefixed
        return [parse_u16(token) for token in path.read_text(encoding="utf-8").split()]

    def _check_range(self, address: int, count: int) -> bool:
        if count < 1:
            emit_error(self.ctx, message=f"word count must be at least 1, got {count}")
            return False
        size = self.target.memory_size
        if not self.target.contains(address) or address + count > size:
            emit_error(
                self.ctx,
                message=f"address range {address:06o}+{count} is outside memory (size {size:06o})",
            )
            return False
        return True
