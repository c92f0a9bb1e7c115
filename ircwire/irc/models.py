"""IRC message data models."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Tag:
    """A message tag as defined by IRCv3.2.

    Attributes:
        key (str): Tag name, possibly vendor-prefixed (``example.com/foo``).
        value (str | None): Tag value; ``None`` for a flag-only tag.
    """

    key: str
    value: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Tag key must not be empty")


@dataclass(frozen=True, slots=True)
class Message:
    """One IRC protocol line.

    Attributes:
        tags (tuple[Tag, ...] | None): IRCv3.2 message tags. ``None`` when the
            line carried no tag section at all.
        prefix (str | None): Message source, a server name or
            ``nick[!user][@host]``.
        command (str): Command verb, case preserved.
        args (tuple[str, ...]): Positional parameters in wire order.
        suffix (str | None): The trailing parameter, the only one allowed to
            contain spaces. An empty string is distinct from ``None``.
    """

    command: str
    prefix: str | None = None
    args: tuple[str, ...] = ()
    suffix: str | None = None
    tags: tuple[Tag, ...] | None = None

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("Message command must not be empty")
        if isinstance(self.args, str):
            raise TypeError("Message args must be an iterable of strings, not a str")
        # Freeze caller-provided sequences so the value stays immutable.
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))
        if self.tags is not None and not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))

    @classmethod
    def new(
        cls,
        prefix: str | None,
        command: str,
        args: Iterable[str] | None = None,
        suffix: str | None = None,
    ) -> Message:
        """Create an untagged message from its parts."""
        return cls.with_tags(None, prefix, command, args, suffix)

    @classmethod
    def with_tags(
        cls,
        tags: Iterable[Tag] | None,
        prefix: str | None,
        command: str,
        args: Iterable[str] | None = None,
        suffix: str | None = None,
    ) -> Message:
        """Create a message optionally including IRCv3.2 message tags."""
        return cls(
            command=command,
            prefix=prefix,
            args=args if args is not None else (),
            suffix=suffix,
            tags=tuple(tags) if tags is not None else None,
        )

    @classmethod
    def from_line(cls, line: str | bytes) -> Message:
        """Parse a wire line, raising ParsingError on malformed input."""
        from .parser import parse

        return parse(line)

    @property
    def source_nickname(self) -> str | None:
        from .nickname import source_nickname

        return source_nickname(self)

    def to_line(self) -> str:
        from .serializer import serialize

        return serialize(self)

    def get_tag(self, key: str) -> str | None:
        """Return the value of the first tag named ``key``.

        Flag-only tags and missing tags both give ``None``; use
        :meth:`has_tag` to tell them apart.
        """
        for tag in self.tags or ():
            if tag.key == key:
                return tag.value
        return None

    def has_tag(self, key: str) -> bool:
        return any(tag.key == key for tag in self.tags or ())


__all__ = ["Tag", "Message"]
