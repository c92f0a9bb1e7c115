"""IRC wire line serialization."""

from __future__ import annotations

from ..constants import IRCWIRE_ENCODING, LINE_TERMINATOR, PREFIX_MARKER, TRAILING_MARKER
from .models import Message


def serialize(message: Message) -> str:
    """Render a Message as a CRLF-terminated wire line.

    Tags are not emitted; a tagged message serializes exactly like its
    untagged counterpart.
    """
    parts: list[str] = []
    if message.prefix is not None:
        parts.append(f"{PREFIX_MARKER}{message.prefix} ")
    parts.append(message.command)
    for arg in message.args:
        parts.append(f" {arg}")
    if message.suffix is not None:
        parts.append(f"{TRAILING_MARKER}{message.suffix}")
    parts.append(LINE_TERMINATOR)
    return "".join(parts)


def serialize_bytes(message: Message) -> bytes:
    return serialize(message).encode(IRCWIRE_ENCODING, errors="replace")


__all__ = ["serialize", "serialize_bytes"]
