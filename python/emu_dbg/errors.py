"""Exception hierarchy for emu-dbg."""

from __future__ import annotations

from typing import Sequence


class ConsoleError(RuntimeError):
    """Base class for every error raised by the console."""


class RegistrationError(ConsoleError):
    """Raised when a command cannot be added to the command tree."""


class DuplicateOverloadError(RegistrationError):
    """Raised when two handlers share a path and an argument count."""

    def __init__(self, name: str, arity: int) -> None:
        super().__init__(f"Duplicate overload for console command '{name}' ({arity} argument(s))")
        self.name = name
        self.arity = arity


class CommandError(ConsoleError):
    """Errors confined to a single input line."""


class NoMatchError(CommandError):
    """Raised when a line does not resolve to a registered command."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Invalid command: {line}")
        self.line = line


class ArgumentCountError(CommandError):
    """Raised when no overload accepts the supplied number of arguments."""

    def __init__(self, name: str, count: int, accepted: Sequence[int]) -> None:
        arities = " or ".join(str(value) for value in sorted(accepted))
        super().__init__(
            f"Invalid argument count to command '{name}': got {count}, expected {arities}"
        )
        self.name = name
        self.count = count
        self.accepted = tuple(sorted(accepted))


class ArgumentTypeError(CommandError):
    """Raised when a token cannot be converted to its declared type."""

    def __init__(self, message: str, *, token: str = "", index: int = -1) -> None:
        super().__init__(message)
        self.token = token
        self.index = index


class ScriptError(ConsoleError):
    """Errors that abort script execution at every enclosing level."""


class ScriptIOError(ScriptError):
    """Raised when a script file cannot be opened or read."""

    def __init__(self, path: str, cause: Exception) -> None:
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Unable to read script '{path}': {reason}")
        self.path = path
        self.cause = cause


class ScriptDepthError(ScriptError):
    """Raised when nested @script inclusion exceeds the configured limit."""

    def __init__(self, path: str, limit: int) -> None:
        super().__init__(f"Script '{path}' exceeds the maximum inclusion depth of {limit}")
        self.path = path
        self.limit = limit


__all__ = [
    "ConsoleError",
    "RegistrationError",
    "DuplicateOverloadError",
    "CommandError",
    "NoMatchError",
    "ArgumentCountError",
    "ArgumentTypeError",
    "ScriptError",
    "ScriptIOError",
    "ScriptDepthError",
]
