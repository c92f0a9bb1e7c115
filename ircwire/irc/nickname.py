"""Source nickname extraction."""

from __future__ import annotations

from .models import Message


def source_nickname(message: Message) -> str | None:
    """Return the nickname of the message source, if it names a user.

    Prefixes containing a '.' are server names and give ``None``. Otherwise
    the nickname is everything before the first '!' or, failing that, before
    the first '@'; a bare prefix is taken as the nickname itself.
    """
    prefix = message.prefix
    if prefix is None or "." in prefix:
        return None
    for separator in ("!", "@"):
        if separator in prefix:
            return prefix.split(separator, 1)[0]
    return prefix


__all__ = ["source_nickname"]
