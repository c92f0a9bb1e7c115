"""Centralized internal error hierarchy.

These exceptions provide semantic categories for callers of the codec. The
transport or session layer decides what a failure means (drop the line, or
treat it as a protocol violation); the codec only reports which kind occurred.

Classes:
  InternalError        – Base for all internal errors.
  ParsingError         – A wire line could not be turned into a Message.
  EmptyInputError      – The line had zero length.
  MissingCommandError  – No command token remained after tags and prefix.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class InternalError(Exception):
    """Base class for all internal errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParseErrorKind(Enum):
    """Closed set of reasons a wire line fails to parse.

    Attributes:
        EMPTY_INPUT: The line had zero length.
        MISSING_COMMAND: No command token after the optional sections.
    """

    EMPTY_INPUT = "empty_input"
    MISSING_COMMAND = "missing_command"


class ParsingError(InternalError):
    """Exception raised when a wire line cannot be parsed.

    Every instance carries exactly one ``kind``; there is no partial result.

    Attributes:
        kind: The ParseErrorKind describing the failure.
        line: The offending input as received.
    """

    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        *,
        kind: ParseErrorKind,
        line: str = "",
        data: Mapping[str, object] | None = None,
    ) -> None:
        merged: dict[str, object] = {"kind": kind.value}
        if data:
            merged.update(data)
        super().__init__(message, data=merged)
        self.kind = kind
        self.line = line


class EmptyInputError(ParsingError):
    """Raised for a zero-length line."""

    def __init__(self, message: str = "Cannot parse an empty line") -> None:
        super().__init__(message, kind=ParseErrorKind.EMPTY_INPUT)


class MissingCommandError(ParsingError):
    """Raised when no command token can be located in the line."""

    def __init__(
        self, line: str, message: str = "Cannot parse a line without a command"
    ) -> None:
        super().__init__(message, kind=ParseErrorKind.MISSING_COMMAND, line=line)


__all__ = [
    "InternalError",
    "ParseErrorKind",
    "ParsingError",
    "EmptyInputError",
    "MissingCommandError",
]
