from __future__ import annotations

from ircwire.errors import (
    EmptyInputError,
    InternalError,
    MissingCommandError,
    ParseErrorKind,
    ParsingError,
)


def test_internal_error_copies_data():
    data = {"a": 1}
    err = InternalError("boom", data=data)
    data["a"] = 2
    assert err.data == {"a": 1}
    assert str(err) == "boom"


def test_internal_error_default_data():
    assert InternalError("x").data == {}


def test_empty_input_error():
    err = EmptyInputError()
    assert isinstance(err, ParsingError)
    assert isinstance(err, InternalError)
    assert err.kind is ParseErrorKind.EMPTY_INPUT
    assert err.data["kind"] == "empty_input"
    assert err.line == ""


def test_missing_command_error_keeps_line():
    err = MissingCommandError(":p\r\n")
    assert err.kind is ParseErrorKind.MISSING_COMMAND
    assert err.line == ":p\r\n"
    assert err.data == {"kind": "missing_command"}


def test_parsing_error_merges_data():
    err = ParsingError("x", kind=ParseErrorKind.EMPTY_INPUT, data={"extra": True})
    assert err.data == {"kind": "empty_input", "extra": True}


def test_taxonomy_is_closed():
    assert {k.value for k in ParseErrorKind} == {"empty_input", "missing_command"}
