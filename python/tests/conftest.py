"""
Pytest configuration and fixtures for emu-dbg tests.
"""
import sys
from pathlib import Path

import pytest

PYTHON_SRC = Path(__file__).resolve().parents[1]
if str(PYTHON_SRC) not in sys.path:
    sys.path.append(str(PYTHON_SRC))

from emu_dbg.commands import build_registry  # noqa: E402
from emu_dbg.context import DebuggerContext  # noqa: E402
from emu_dbg.executor import ConsoleExecutor  # noqa: E402
from emu_dbg.target import SimulatedTarget  # noqa: E402


@pytest.fixture
def ctx():
    return DebuggerContext(echo_scripts=False)


@pytest.fixture
def target():
    return SimulatedTarget(memory_size=512)


@pytest.fixture
def registry(ctx, target):
    return build_registry(ctx, target)


@pytest.fixture
def executor(registry, ctx):
    return ConsoleExecutor(registry, ctx)
