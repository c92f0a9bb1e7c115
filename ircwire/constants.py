"""
Configuration constants for the ircwire codec

This module contains the protocol constants and the small set of tunables used
by the codec. Each tunable can be overridden by setting an environment variable
with the same name.
"""

import os

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    """Retrieve a boolean flag from an environment variable.

    Accepts 'true', '1', 'yes' and 'false', '0', 'no' (case-insensitive).
    Anything else prints a warning and yields the default.
    """
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    print(f"Warning: Invalid boolean value for {name}='{value}', using default {default}")
    return default


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


# Wire grammar constants (fixed by the protocol, not configurable)
LINE_TERMINATOR = "\r\n"
TRAILING_MARKER = " :"
TAG_MARKER = "@"
PREFIX_MARKER = ":"
MAX_ARGS = 14  # Positional parameters captured before the rest is kept whole

# Text codec used when lines arrive or leave as bytes
IRCWIRE_ENCODING = _get_env_str("IRCWIRE_ENCODING", "utf-8")

# Logging behaviour
IRCWIRE_LOG_PARSE_FAILURES = _get_env_bool("IRCWIRE_LOG_PARSE_FAILURES", True)
IRCWIRE_LOG_LINE_PREVIEW = _get_env_int(
    "IRCWIRE_LOG_LINE_PREVIEW", 120
)  # Characters of a raw line kept in log context
