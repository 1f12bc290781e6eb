"""Tests for the stock emu-dbg command groups."""

from __future__ import annotations

import json
import logging

from emu_dbg.parser import split_command
from emu_dbg.resolver import resolve
from emu_dbg.state import ExecutionState
from emu_dbg.target import Register


def test_help_lists_every_registration(executor, registry, target, capsys):
    assert executor.execute_line("show commands", target) is ExecutionState.DEBUGGING
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(list(registry.list_commands()))
    assert "quit - Terminates the emulator process." in lines
    assert "display memory <address> <count> - Displays <count> words of memory starting at the given address." in lines


def test_help_entries_resolve_back_to_their_handlers(registry):
    for spec in registry.list_commands():
        result = resolve(registry.root, split_command(spec.name))
        assert result is not None, spec.name
        assert result.node.path == spec.name
        assert result.args == []
        assert spec.handler in [handler.func for handler in result.node.handlers]


def test_help_in_json_mode(executor, target, ctx, capsys):
    ctx.json_output = True
    executor.execute_line("help", target)
    payload = json.loads(capsys.readouterr().out)
    names = [entry["name"] for entry in payload["result"]["commands"]]
    assert "show commands" in names and "set log level" in names


def test_quit_returns_quit(executor, target):
    assert executor.execute_line("quit", target) is ExecutionState.QUIT


def test_set_and_display_memory(executor, target, capsys):
    executor.execute_line("set memory 100 x4142", target)
    assert target.read(0o100) == 0x4142
    capsys.readouterr()
    executor.execute_line("display memory 100 2", target)
    out = capsys.readouterr().out
    assert out.startswith("000100: 040502 000000")
    assert "AB.." in out


def test_display_memory_default_count(executor, target, capsys):
    executor.execute_line("display memory 0", target)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert len(lines[0].split(":")[1].split()) == 9  # eight words plus ascii column


def test_display_filler(executor, target, capsys):
    executor.execute_line("set display filler *", target)
    executor.execute_line("display memory 0 1", target)
    assert capsys.readouterr().out.rstrip().endswith("**")


def test_memory_range_is_checked(executor, target, capsys):
    executor.execute_line("set memory d512 1", target)
    assert "outside memory (size 001000)" in capsys.readouterr().out


def test_zero_word_display_reports_the_count(executor, target, capsys):
    executor.execute_line("display memory 0 0", target)
    out = capsys.readouterr().out
    assert "word count must be at least 1, got 0" in out
    assert "outside memory" not in out


def test_display_memory_in_json_mode(executor, target, ctx, capsys):
    target.write(3, 0o7)
    ctx.json_output = True
    executor.execute_line("display memory 2 2", target)
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"status": "ok", "result": {"address": 2, "words": [0, 7]}}


def test_fill_and_load_memory(executor, target, tmp_path):
    executor.execute_line("fill memory 10 3 7", target)
    assert [target.read(addr) for addr in range(0o10, 0o13)] == [7, 7, 7]
    image = tmp_path / "image.txt"
    image.write_text("1 2 x10\n17\n", encoding="utf-8")
    executor.execute_line(f'load memory "{image}" 20', target)
    assert [target.read(addr) for addr in range(0o20, 0o24)] == [1, 2, 16, 15]


def test_load_memory_reports_bad_file(executor, target, tmp_path, capsys):
    executor.execute_line(f'load memory "{tmp_path / "none.txt"}" 0', target)
    assert "load failed" in capsys.readouterr().out


def test_step_overloads(executor, target):
    target.write(0, 1)
    target.write(1, 1)
    target.write(2, 1)
    assert executor.execute_line("step", target) is ExecutionState.DEBUGGING
    assert target.pc == 1
    assert executor.execute_line("step 2", target) is ExecutionState.DEBUGGING
    assert target.pc == 3
    assert executor.execute_line("step 1", target) is ExecutionState.HALTED
    assert target.halted


def test_go_returns_running(executor, target):
    assert executor.execute_line("go", target) is ExecutionState.RUNNING


def test_breakpoints(executor, target, capsys):
    executor.execute_line("set breakpoint 40", target)
    executor.execute_line("set breakpoint 10", target)
    capsys.readouterr()
    executor.execute_line("show breakpoints", target)
    assert capsys.readouterr().out.split() == ["000010", "000040"]
    executor.execute_line("clear breakpoint 40", target)
    assert target.breakpoints == {0o10}
    executor.execute_line("clear breakpoint 40", target)
    assert "no breakpoint" in capsys.readouterr().out


def test_set_register_symbol_is_case_insensitive(executor, target, capsys):
    executor.execute_line("set register pc 200", target)
    assert target.registers[Register.PC] == 0o200
    executor.execute_line("set register Link 3", target)
    assert target.registers[Register.LINK] == 1
    executor.execute_line("set register sp 1", target)
    out = capsys.readouterr().out
    assert "Possible values are: AC PC LINK" in out


def test_show_registers(executor, target, capsys):
    target.set_register(Register.AC, 0o17)
    executor.execute_line("show registers", target)
    out = capsys.readouterr().out
    assert "AC   000017" in out


def test_set_speed(executor, target, capsys):
    executor.execute_line("set speed 2.5", target)
    assert target.speed == 2.5
    executor.execute_line("set speed 0", target)
    assert "must be a positive finite number" in capsys.readouterr().out


def test_set_speed_rejects_non_finite_values(executor, target, capsys):
    executor.execute_line("set speed 2", target)
    for token in ("nan", "inf", "-inf"):
        executor.execute_line(f"set speed {token}", target)
        assert "must be a positive finite number" in capsys.readouterr().out
        assert target.speed == 2


def test_registers_and_breakpoints_in_json_mode(executor, target, ctx, capsys):
    target.set_register(Register.PC, 0o5)
    ctx.json_output = True
    executor.execute_line("show registers", target)
    registers = json.loads(capsys.readouterr().out)["result"]["registers"]
    assert registers["PC"] == 5 and registers["AC"] == 0
    executor.execute_line("show breakpoints", target)
    assert json.loads(capsys.readouterr().out)["result"] == {"breakpoints": []}
    target.breakpoints.update({0o20, 0o4})
    executor.execute_line("show breakpoints", target)
    assert json.loads(capsys.readouterr().out)["result"] == {"breakpoints": [4, 16]}


def test_argument_errors_carry_token_and_index_in_json_mode(executor, target, ctx, capsys):
    ctx.json_output = True
    executor.execute_line("set memory 1 9", target)
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "error"
    assert payload["details"] == {"type": "ArgumentTypeError", "token": "9", "index": 1}


def test_halt_and_reset(executor, target):
    assert executor.execute_line("halt", target) is ExecutionState.HALTED
    assert target.halted
    executor.execute_line("reset", target)
    assert not target.halted


def test_settings_commands(executor, target, ctx, capsys):
    executor.execute_line("set json output true", target)
    assert ctx.json_output is True
    executor.execute_line("set script echo false", target)
    assert ctx.echo_scripts is False
    executor.execute_line('echo "hello there"', target)
    assert "hello there" in capsys.readouterr().out


def test_set_log_level(executor, target, ctx):
    root = logging.getLogger()
    previous = root.level
    try:
        executor.execute_line("set log level debug", target)
        assert root.level == logging.DEBUG
        assert ctx.log_level == "DEBUG"
    finally:
        root.setLevel(previous)
