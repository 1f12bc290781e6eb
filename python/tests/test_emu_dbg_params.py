"""Parameter parsing tests for emu-dbg."""

from __future__ import annotations

import enum

import pytest

from emu_dbg.errors import ArgumentTypeError, RegistrationError
from emu_dbg.params import (
    Param,
    ParamKind,
    f32,
    parse_bool,
    parse_char,
    parse_f32,
    parse_symbol,
    parse_u16,
    parse_u32,
    split_radix,
    symbol,
)


class Verbosity(enum.Enum):
    Quiet = 0
    Verbose = 1


@pytest.mark.parametrize("parse", [parse_u16, parse_u32])
@pytest.mark.parametrize(
    "token, expected",
    [("d10", 10), ("x10", 16), ("o10", 8), ("b10", 2), ("10", 8), ("0", 0), ("xff", 255)],
)
def test_radix_prefixes(parse, token, expected):
    assert parse(token) == expected


def test_unprefixed_literal_defaults_to_octal():
    assert split_radix("777") == (8, "777")
    with pytest.raises(ArgumentTypeError):
        parse_u16("9")


def test_u16_range():
    assert parse_u16("xffff") == 0xFFFF
    with pytest.raises(ArgumentTypeError) as exc:
        parse_u16("x10000")
    assert "not a valid 16-bit value" in str(exc.value)


def test_u32_range():
    assert parse_u32("xffffffff") == 0xFFFFFFFF
    with pytest.raises(ArgumentTypeError) as exc:
        parse_u32("x100000000")
    assert "not a valid 32-bit value" in str(exc.value)


@pytest.mark.parametrize("token", ["", "x", "d", "-1", "+7", "1_0", "x0x10", "b102", "d1a", "X10"])
def test_invalid_numeric_tokens(token):
    with pytest.raises(ArgumentTypeError):
        parse_u32(token)


def test_bool_is_case_sensitive():
    assert parse_bool("true") is True
    assert parse_bool("false") is False
    with pytest.raises(ArgumentTypeError):
        parse_bool("True")
    with pytest.raises(ArgumentTypeError):
        parse_bool("1")


def test_char_takes_first_character():
    assert parse_char("xyz") == "x"
    with pytest.raises(ArgumentTypeError):
        parse_char("")


def test_f32_rounds_to_single_precision():
    assert parse_f32("1.5") == 1.5
    assert parse_f32("0.1") != 0.1
    assert abs(parse_f32("0.1") - 0.1) < 1e-7
    with pytest.raises(ArgumentTypeError):
        parse_f32("fast")
    with pytest.raises(ArgumentTypeError) as exc:
        parse_f32("1e39")
    assert "32-bit float" in str(exc.value)


def test_symbol_is_case_insensitive():
    assert parse_symbol("verbose", Verbosity) is Verbosity.Verbose
    assert parse_symbol("QUIET", Verbosity) is Verbosity.Quiet


def test_symbol_failure_lists_legal_names():
    with pytest.raises(ArgumentTypeError) as exc:
        parse_symbol("loud", Verbosity, 2)
    message = str(exc.value)
    assert "parameter 2" in message
    assert "Quiet" in message and "Verbose" in message
    assert exc.value.index == 2


def test_symbol_param_requires_enum():
    assert symbol(Verbosity).symbols is Verbosity
    with pytest.raises(RegistrationError):
        Param(ParamKind.SYMBOL, "level")
    with pytest.raises(RegistrationError):
        Param(ParamKind.U16, "x", Verbosity)


def test_param_parse_dispatches_on_kind():
    assert f32("speed").parse("2.5", 0) == 2.5
    assert symbol(Verbosity).parse("Verbose", 0) is Verbosity.Verbose
