"""IRC wire line parsing.

The scan runs left to right over index ranges of the input. Each stage takes
the offset where the previous one stopped and returns what it found plus the
offset for the next stage, so only the fields that end up in the Message are
ever sliced out of the line:

    tags -> prefix -> trailing detection -> command -> args
"""

from __future__ import annotations

import logging

from ..constants import (
    IRCWIRE_ENCODING,
    IRCWIRE_LOG_PARSE_FAILURES,
    LINE_TERMINATOR,
    MAX_ARGS,
    PREFIX_MARKER,
    TAG_MARKER,
    TRAILING_MARKER,
)
from ..errors import EmptyInputError, MissingCommandError, ParsingError
from ..logs.logger import logger, preview_line
from .models import Message, Tag


def parse(line: str | bytes) -> Message:
    """Parse one wire line into a Message.

    Args:
        line: A complete line, normally CRLF-terminated. Bytes are decoded
            with the configured encoding, undecodable bytes replaced.

    Returns:
        The parsed Message.

    Raises:
        EmptyInputError: The line has zero length.
        MissingCommandError: No command token remains after the tag and
            prefix sections.
    """
    if isinstance(line, bytes | bytearray):
        line = bytes(line).decode(IRCWIRE_ENCODING, errors="replace")
    if not line:
        raise EmptyInputError()

    end = _content_end(line)
    tags, pos = _scan_tags(line, 0, end)
    prefix, pos = _scan_prefix(line, pos, end)
    suffix, body_end = _scan_trailing(line, pos, end)
    command, pos = _scan_command(line, pos, body_end)
    if command is None:
        raise MissingCommandError(line)
    args = _scan_args(line, pos, body_end)
    return Message(command=command, prefix=prefix, args=args, suffix=suffix, tags=tags)


def try_parse(line: str | bytes) -> Message | None:
    """Parse a line, returning ``None`` instead of raising on malformed input."""
    try:
        return parse(line)
    except ParsingError as e:
        if IRCWIRE_LOG_PARSE_FAILURES:
            raw = line if isinstance(line, str) else bytes(line).decode(
                IRCWIRE_ENCODING, errors="replace"
            )
            logger.log_event(
                "irc",
                "parse_failed",
                level=logging.DEBUG,
                kind=e.kind.value,
                raw=preview_line(raw),
            )
        return None


def _content_end(line: str) -> int:
    if line.endswith(LINE_TERMINATOR):
        return len(line) - len(LINE_TERMINATOR)
    if line.endswith("\n"):
        return len(line) - 1
    return len(line)


def _section_bounds(line: str, start: int, end: int) -> tuple[int, int]:
    # A marked section runs to the next space; the space itself is consumed.
    space = line.find(" ", start, end)
    if space == -1:
        return end, end
    return space, space + 1


def _scan_tags(line: str, start: int, end: int) -> tuple[tuple[Tag, ...] | None, int]:
    if start >= end or not line.startswith(TAG_MARKER, start):
        return None, start
    section_end, next_pos = _section_bounds(line, start, end)
    tags: list[Tag] = []
    for fragment in line[start + 1 : section_end].split(";"):
        key, sep, value = fragment.partition("=")
        if not key:
            continue
        tags.append(Tag(key, value if sep else None))
    return tuple(tags), next_pos


def _scan_prefix(line: str, start: int, end: int) -> tuple[str | None, int]:
    if start >= end or not line.startswith(PREFIX_MARKER, start):
        return None, start
    section_end, next_pos = _section_bounds(line, start, end)
    return line[start + 1 : section_end], next_pos


def _scan_trailing(line: str, start: int, end: int) -> tuple[str | None, int]:
    """Locate the trailing parameter.

    Returns the suffix (or ``None``) and the offset where the command/args
    text stops.
    """
    # Text that opens with ':' here lost its preceding space to the prefix
    # stage, so it is trailing in full.
    if start < end and line.startswith(PREFIX_MARKER, start):
        return line[start + 1 : end], start
    marker = line.find(TRAILING_MARKER, start, end)
    if marker == -1:
        return None, end
    return line[marker + len(TRAILING_MARKER) : end], marker


def _skip_spaces(line: str, pos: int, end: int) -> int:
    while pos < end and line[pos] == " ":
        pos += 1
    return pos


def _scan_command(line: str, start: int, end: int) -> tuple[str | None, int]:
    pos = _skip_spaces(line, start, end)
    if pos >= end:
        return None, pos
    stop = line.find(" ", pos, end)
    if stop == -1:
        stop = end
    return line[pos:stop], stop


def _scan_args(line: str, start: int, end: int) -> tuple[str, ...]:
    """Split positional parameters, capping them at MAX_ARGS.

    Empty tokens from repeated spaces never count toward the cap, and the
    space before a trailing marker is not kept on the last captured token.
    """
    args: list[str] = []
    pos = _skip_spaces(line, start, end)
    while pos < end:
        if len(args) == MAX_ARGS - 1:
            # Last slot keeps the remainder whole, embedded spaces included.
            args.append(line[pos:end].rstrip(" "))
            break
        stop = line.find(" ", pos, end)
        if stop == -1:
            stop = end
        args.append(line[pos:stop])
        pos = _skip_spaces(line, stop, end)
    return tuple(args)


__all__ = ["parse", "try_parse"]
