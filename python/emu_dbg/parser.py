"""Command-line tokenizer for emu-dbg."""

from __future__ import annotations

import enum
from typing import List

QUOTE = '"'


class _ScanState(enum.Enum):
    IN_TOKEN = 0
    IN_WHITESPACE = 1
    IN_QUOTED_STRING = 2


def split_command(line: str) -> List[str]:
    """Split *line* into tokens on whitespace, keeping ``"quoted text"`` whole.

    Quotes are not part of the emitted token.  An unterminated quote runs to
    the end of the line; whatever was collected becomes the final token when
    it is non-empty.  A closed pair of quotes always yields a token, even
    ``""``.
    """
    tokens: List[str] = []
    if not line:
        return tokens
    text = line.strip()
    buffer: List[str] = []
    state = _ScanState.IN_TOKEN
    for ch in text:
        if state is _ScanState.IN_TOKEN:
            if ch.isspace():
                tokens.append("".join(buffer))
                buffer.clear()
                state = _ScanState.IN_WHITESPACE
            elif ch == QUOTE:
                # a quote inside a token continues that token as quoted text
                state = _ScanState.IN_QUOTED_STRING
            else:
                buffer.append(ch)
        elif state is _ScanState.IN_WHITESPACE:
            if ch.isspace():
                continue
            if ch == QUOTE:
                state = _ScanState.IN_QUOTED_STRING
            else:
                buffer.append(ch)
                state = _ScanState.IN_TOKEN
        else:
            if ch == QUOTE:
                tokens.append("".join(buffer))
                buffer.clear()
                state = _ScanState.IN_WHITESPACE
            else:
                buffer.append(ch)
    if buffer:
        tokens.append("".join(buffer))
    return tokens


__all__ = ["split_command"]
