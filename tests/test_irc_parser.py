from __future__ import annotations

import pytest

from ircwire.errors import EmptyInputError, MissingCommandError, ParseErrorKind
from ircwire.irc.models import Message, Tag
from ircwire.irc.parser import parse


def test_parse_empty_line_raises_empty_input():
    with pytest.raises(EmptyInputError) as excinfo:
        parse("")
    assert excinfo.value.kind is ParseErrorKind.EMPTY_INPUT


def test_parse_empty_bytes_raises_empty_input():
    with pytest.raises(EmptyInputError):
        parse(b"")


def test_parse_prefix_and_trailing_only_raises_missing_command():
    with pytest.raises(MissingCommandError) as excinfo:
        parse(":invalid :message\r\n")
    assert excinfo.value.kind is ParseErrorKind.MISSING_COMMAND
    assert excinfo.value.line == ":invalid :message\r\n"


def test_parse_simple_privmsg():
    msg = parse("PRIVMSG test :Testing!\r\n")
    assert msg == Message(command="PRIVMSG", args=("test",), suffix="Testing!")
    assert msg.prefix is None
    assert msg.tags is None


def test_parse_with_prefix():
    msg = parse(":test!test@test PRIVMSG test :Still testing!\r\n")
    assert msg.prefix == "test!test@test"
    assert msg.command == "PRIVMSG"
    assert msg.args == ("test",)
    assert msg.suffix == "Still testing!"
    assert msg.source_nickname == "test"


def test_parse_with_tags():
    msg = parse(
        "@aaa=bbb;ccc;example.com/ddd=eee :test!test@test PRIVMSG test "
        ":Testing with tags!\r\n"
    )
    assert msg.tags == (
        Tag("aaa", "bbb"),
        Tag("ccc", None),
        Tag("example.com/ddd", "eee"),
    )
    assert msg.prefix == "test!test@test"
    assert msg.command == "PRIVMSG"
    assert msg.args == ("test",)
    assert msg.suffix == "Testing with tags!"


def test_parse_colon_inside_argument_is_not_trailing():
    # Some servers (UnrealIRCd) send colons inside middle parameters.
    msg = parse(":test!test@test COMMAND ARG:test :Testing!\r\n")
    assert msg.args == ("ARG:test",)
    assert msg.suffix == "Testing!"


def test_parse_trailing_keeps_spaces_and_colons():
    msg = parse("PRIVMSG #chan :hello :world  with  gaps\r\n")
    assert msg.args == ("#chan",)
    assert msg.suffix == "hello :world  with  gaps"


def test_parse_empty_trailing_is_not_absent():
    msg = parse("TOPIC #chan :\r\n")
    assert msg.args == ("#chan",)
    assert msg.suffix == ""


def test_parse_command_only():
    msg = parse("PING\r\n")
    assert msg.command == "PING"
    assert msg.args == ()
    assert msg.suffix is None


def test_parse_preserves_command_case():
    assert parse("privmsg #a :x\r\n").command == "privmsg"


def test_parse_numeric_reply():
    msg = parse(":irc.test.net 001 nick :Welcome to the network\r\n")
    assert msg.prefix == "irc.test.net"
    assert msg.command == "001"
    assert msg.args == ("nick",)
    assert msg.suffix == "Welcome to the network"
    assert msg.source_nickname is None


def test_parse_trailing_right_after_command():
    msg = parse("PING :irc.test.net\r\n")
    assert msg.command == "PING"
    assert msg.args == ()
    assert msg.suffix == "irc.test.net"


def test_parse_bytes_input():
    msg = parse(b":nick!u@h PRIVMSG #room :caf\xc3\xa9\r\n")
    assert msg.suffix == "café"


def test_parse_undecodable_bytes_are_replaced():
    msg = parse(b"PRIVMSG #room :\xff\r\n")
    assert msg.suffix == "�"


def test_from_line_matches_parse():
    line = ":a!b@c JOIN #room\r\n"
    assert Message.from_line(line) == parse(line)
