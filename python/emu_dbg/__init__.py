"""
emu-dbg console package.

An interactive command console for emulator debugging: multi-word commands
are resolved against a prefix tree, overloaded by argument count, and their
arguments converted to typed values before the handler runs.  Use
``python -m emu_dbg`` or the ``emu-dbg`` script to launch it.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
