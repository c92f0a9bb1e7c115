"""Supported IRCv3 capability extensions.

The member values are the canonical wire strings sent during ``CAP``
negotiation. ``enum.unique`` turns an accidentally shared wire string into an
import-time error, and new extensions are added as one new member.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum, unique

from ..logs.logger import logger
from .models import Message


@unique
class Capability(Enum):
    """IRCv3 extensions understood by the codec.

    Attributes:
        MULTI_PREFIX: multi-prefix (all channel mode prefixes in NAMES/WHO).
        ACCOUNT_NOTIFY: account-notify (ACCOUNT messages on login/logout).
        AWAY_NOTIFY: away-notify (AWAY messages for shared-channel users).
        EXTENDED_JOIN: extended-join (account and realname on JOIN).
    """

    MULTI_PREFIX = "multi-prefix"
    ACCOUNT_NOTIFY = "account-notify"
    AWAY_NOTIFY = "away-notify"
    EXTENDED_JOIN = "extended-join"

    @classmethod
    def from_wire(cls, text: str) -> Capability | None:
        """Look up a capability by wire string; unknown names give ``None``.

        Values announced with a ``=value`` suffix in ``CAP LS 302`` replies are
        matched on the name part only.
        """
        name = text.strip().split("=", 1)[0]
        try:
            return cls(name)
        except ValueError:
            logger.log_event("irc", "cap_unknown", level=logging.DEBUG, name=name)
            return None


def wire_string(capability: Capability) -> str:
    return capability.value


def build_cap_request(capabilities: Iterable[Capability]) -> Message:
    """Build a ``CAP REQ`` message for the given capabilities.

    Duplicates are dropped, first occurrence order kept.

    Raises:
        ValueError: No capabilities were given.
    """
    names = list(dict.fromkeys(wire_string(cap) for cap in capabilities))
    if not names:
        raise ValueError("A capability request needs at least one capability")
    caps = " ".join(names)
    logger.log_event("irc", "cap_request", level=logging.DEBUG, caps=caps, command="CAP")
    return Message.new(None, "CAP", ["REQ"], caps)


__all__ = ["Capability", "wire_string", "build_cap_request"]
