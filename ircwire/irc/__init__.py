"""IRC codec package.

Contains the message models, the wire parser and serializer, source nickname
extraction and the IRCv3 capability registry.
"""

from .caps import Capability, build_cap_request, wire_string  # noqa: F401
from .models import Message, Tag  # noqa: F401
from .nickname import source_nickname  # noqa: F401
from .parser import parse, try_parse  # noqa: F401
from .serializer import serialize, serialize_bytes  # noqa: F401

__all__ = [
    "Capability",
    "Message",
    "Tag",
    "build_cap_request",
    "parse",
    "serialize",
    "serialize_bytes",
    "source_nickname",
    "try_parse",
    "wire_string",
]
