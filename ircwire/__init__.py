"""ircwire: IRC wire line codec with IRCv3 tag and capability support."""

from .errors import (  # noqa: F401
    EmptyInputError,
    MissingCommandError,
    ParseErrorKind,
    ParsingError,
)
from .irc import (  # noqa: F401
    Capability,
    Message,
    Tag,
    build_cap_request,
    parse,
    serialize,
    serialize_bytes,
    source_nickname,
    try_parse,
    wire_string,
)

__version__ = "0.1.0"

__all__ = [
    "Capability",
    "EmptyInputError",
    "Message",
    "MissingCommandError",
    "ParseErrorKind",
    "ParsingError",
    "Tag",
    "build_cap_request",
    "parse",
    "serialize",
    "serialize_bytes",
    "source_nickname",
    "try_parse",
    "wire_string",
]
