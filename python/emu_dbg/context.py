"""Runtime configuration shared by the console and its commands."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_MAX_SCRIPT_DEPTH = 16
LOG_LEVEL_ENV = "EMU_DBG_LOG"


def default_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "WARNING")


@dataclass
class DebuggerContext:
    """Holds console settings that commands may read or change."""

    json_output: bool = False
    echo_scripts: bool = True
    max_script_depth: int = DEFAULT_MAX_SCRIPT_DEPTH
    prompt: str = "> "
    log_level: str = field(default_factory=default_log_level)
