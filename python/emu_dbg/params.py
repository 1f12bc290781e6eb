"""Parameter kinds accepted by console command handlers.

Handlers declare their parameters as a tuple of :class:`Param` values.  Each
kind owns a parse function that turns one raw token into a typed value or
raises :class:`~emu_dbg.errors.ArgumentTypeError`.

Numeric arguments use a one-letter radix prefix::

    b1010   binary
    o17     octal
    d15     decimal
    xf      hexadecimal
    17      octal (no prefix)
"""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from .errors import ArgumentTypeError, RegistrationError


class ParamKind(enum.Enum):
    BOOL = "bool"
    U16 = "u16"
    U32 = "u32"
    STRING = "string"
    CHAR = "char"
    F32 = "f32"
    SYMBOL = "symbol"
    ARRAY = "array"


@dataclass(frozen=True)
class Param:
    """One declared handler parameter."""

    kind: ParamKind
    name: str = ""
    symbols: Optional[Type[enum.Enum]] = None

    def __post_init__(self) -> None:
        if self.kind is ParamKind.SYMBOL:
            if not (isinstance(self.symbols, type) and issubclass(self.symbols, enum.Enum)):
                raise RegistrationError(f"symbol parameter '{self.name}' needs an Enum class")
        elif self.symbols is not None:
            raise RegistrationError(f"parameter '{self.name}' of kind {self.kind.value} cannot carry symbols")

    @property
    def label(self) -> str:
        return self.name or self.kind.value

    def parse(self, token: str, index: int) -> Any:
        if self.kind is ParamKind.SYMBOL:
            return parse_symbol(token, self.symbols, index)  # type: ignore[arg-type]
        parser = _PARSERS.get(self.kind)
        if parser is None:
            raise ArgumentTypeError(
                f"Unhandled type for parameter {index}, type {self.kind.value}", token=token, index=index
            )
        return parser(token)


def boolean(name: str = "") -> Param:
    return Param(ParamKind.BOOL, name)


def u16(name: str = "") -> Param:
    return Param(ParamKind.U16, name)


def u32(name: str = "") -> Param:
    return Param(ParamKind.U32, name)


def string(name: str = "") -> Param:
    return Param(ParamKind.STRING, name)


def char(name: str = "") -> Param:
    return Param(ParamKind.CHAR, name)


def f32(name: str = "") -> Param:
    return Param(ParamKind.F32, name)


def symbol(symbols: Type[enum.Enum], name: str = "") -> Param:
    return Param(ParamKind.SYMBOL, name, symbols)


def array(name: str = "") -> Param:
    """Declare an array parameter.

    Array parameters are not supported; registering a handler that uses one
    raises :class:`RegistrationError`.
    """
    return Param(ParamKind.ARRAY, name)


_RADIX_PREFIXES: Dict[str, int] = {"b": 2, "o": 8, "d": 10, "x": 16}
_RADIX_DIGITS: Dict[int, str] = {
    2: "01",
    8: "01234567",
    10: "0123456789",
    16: "0123456789abcdef",
}
DEFAULT_RADIX = 8


def split_radix(token: str) -> tuple[int, str]:
    """Return ``(radix, digits)`` for a prefixed numeric literal."""
    if token and token[0] in _RADIX_PREFIXES:
        return _RADIX_PREFIXES[token[0]], token[1:]
    return DEFAULT_RADIX, token


def _parse_unsigned(token: str, bits: int) -> int:
    radix, digits = split_radix(token)
    allowed = _RADIX_DIGITS[radix]
    if not digits or any(ch not in allowed for ch in digits.lower()):
        raise ArgumentTypeError(f"{token} is not a valid {bits}-bit value.", token=token)
    value = int(digits, radix)
    if value >= 1 << bits:
        raise ArgumentTypeError(f"{token} is not a valid {bits}-bit value.", token=token)
    return value


def parse_u16(token: str) -> int:
    return _parse_unsigned(token, 16)


def parse_u32(token: str) -> int:
    return _parse_unsigned(token, 32)


def parse_bool(token: str) -> bool:
    if token == "true":
        return True
    if token == "false":
        return False
    raise ArgumentTypeError(f"{token} is not a valid boolean (expected true or false).", token=token)


def parse_string(token: str) -> str:
    return token


def parse_char(token: str) -> str:
    if not token:
        raise ArgumentTypeError("Expected a single character, got an empty argument.", token=token)
    return token[0]


def parse_f32(token: str) -> float:
    try:
        value = float(token)
        # round through single precision; raises OverflowError outside its range
        return struct.unpack("<f", struct.pack("<f", value))[0] if math.isfinite(value) else value
    except (OverflowError, ValueError):
        raise ArgumentTypeError(f"{token} is not a valid 32-bit float.", token=token) from None


def parse_symbol(token: str, symbols: Type[enum.Enum], index: int = 0) -> enum.Enum:
    needle = token.lower()
    for name, member in symbols.__members__.items():
        if name.lower() == needle:
            return member
    legal = " ".join(symbols.__members__)
    raise ArgumentTypeError(
        f"Invalid value for parameter {index}.  Possible values are: {legal}",
        token=token,
        index=index,
    )


_PARSERS: Dict[ParamKind, Callable[[str], Any]] = {
    ParamKind.BOOL: parse_bool,
    ParamKind.U16: parse_u16,
    ParamKind.U32: parse_u32,
    ParamKind.STRING: parse_string,
    ParamKind.CHAR: parse_char,
    ParamKind.F32: parse_f32,
}


__all__ = [
    "ParamKind",
    "Param",
    "boolean",
    "u16",
    "u32",
    "string",
    "char",
    "f32",
    "symbol",
    "array",
    "split_radix",
    "parse_u16",
    "parse_u32",
    "parse_bool",
    "parse_string",
    "parse_char",
    "parse_f32",
    "parse_symbol",
]
