import importlib

from ircwire import constants
from ircwire.constants import _get_env_bool, _get_env_int, _get_env_str


def test_get_env_int_valid_positive_integer(monkeypatch):
    """Test parsing a valid positive integer from environment variable."""
    monkeypatch.setenv("TEST_VAR", "123")
    assert _get_env_int("TEST_VAR", 999) == 123


def test_get_env_int_invalid_string(monkeypatch, capsys):
    """Test handling of invalid string value in environment variable."""
    monkeypatch.setenv("TEST_VAR", "abc")
    assert _get_env_int("TEST_VAR", 999) == 999
    assert "Invalid integer value" in capsys.readouterr().out


def test_get_env_int_unset(monkeypatch):
    monkeypatch.delenv("TEST_VAR", raising=False)
    assert _get_env_int("TEST_VAR", 7) == 7


def test_get_env_bool_variants(monkeypatch):
    for raw, expected in (("true", True), ("YES", True), ("1", True), ("no", False), ("0", False)):
        monkeypatch.setenv("TEST_FLAG", raw)
        assert _get_env_bool("TEST_FLAG", not expected) is expected


def test_get_env_bool_invalid(monkeypatch, capsys):
    monkeypatch.setenv("TEST_FLAG", "maybe")
    assert _get_env_bool("TEST_FLAG", True) is True
    assert "Invalid boolean value" in capsys.readouterr().out


def test_get_env_str_blank_uses_default(monkeypatch):
    monkeypatch.setenv("TEST_STR", "   ")
    assert _get_env_str("TEST_STR", "utf-8") == "utf-8"


def test_protocol_constants():
    assert constants.LINE_TERMINATOR == "\r\n"
    assert constants.TRAILING_MARKER == " :"
    assert constants.MAX_ARGS == 14


def test_env_override_on_reload(monkeypatch):
    monkeypatch.setenv("IRCWIRE_LOG_LINE_PREVIEW", "40")
    monkeypatch.setenv("IRCWIRE_LOG_PARSE_FAILURES", "false")
    try:
        reloaded = importlib.reload(constants)
        assert reloaded.IRCWIRE_LOG_LINE_PREVIEW == 40
        assert reloaded.IRCWIRE_LOG_PARSE_FAILURES is False
    finally:
        monkeypatch.undo()
        importlib.reload(constants)
