"""Error types raised by the codec."""

from .internal import (  # noqa: F401
    EmptyInputError,
    InternalError,
    MissingCommandError,
    ParseErrorKind,
    ParsingError,
)

__all__ = [
    "InternalError",
    "ParseErrorKind",
    "ParsingError",
    "EmptyInputError",
    "MissingCommandError",
]
