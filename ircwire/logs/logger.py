"""Event logger used across the codec."""

from __future__ import annotations

import logging
import os

from ..constants import IRCWIRE_LOG_LINE_PREVIEW


def _debug_enabled() -> bool:
    return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")


def preview_line(line: str, limit: int = IRCWIRE_LOG_LINE_PREVIEW) -> str:
    """Return a printable, length-capped rendition of a raw wire line."""
    text = line.replace("\r", "\\r").replace("\n", "\\n")
    if limit > 0 and len(text) > limit:
        return text[: limit - 1] + "…"
    return text


class WireLogger:
    EVENT_NAME_WIDTH = 32
    PREFIX_WIDTH = 24

    def __init__(self, name: str = "ircwire", log_file: str | None = None) -> None:
        self.logger = logging.getLogger(name)
        self.log_file = log_file
        self.logger.handlers.clear()
        self.logger.setLevel(logging.DEBUG if _debug_enabled() else logging.INFO)

        # Library logger: console output is the application's choice, see
        # LoggerConfigurator. Events propagate to whatever root handlers exist.
        self.logger.addHandler(logging.NullHandler())

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
            )
            self.logger.addHandler(file_handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        """Log a catalogued event.

        The human readable text comes from ``human`` when given, otherwise from
        the ``(domain, action)`` template in the event catalog, formatted with
        ``kwargs``. Unknown events fall back to ``"<domain>: <action>"`` and are
        marked ``derived``.
        """
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES as _event_templates

            template = _event_templates.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        human_text: str | None,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        kw: dict[str, object] = dict(kwargs)
        source, command = self._extract_reserved(kw)
        prefix = self._build_prefix(source, command)
        msg = (
            self._build_debug_message(event_name, prefix, human_text, kw)
            if _debug_enabled()
            else self._build_concise_message(event_name, prefix, human_text)
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _extract_reserved(
        kwargs: dict[str, object],
    ) -> tuple[str | None, str | None]:
        source_o = kwargs.pop("source", None)
        command_o = kwargs.pop("command", None)
        source = source_o if isinstance(source_o, str) else None
        command = command_o if isinstance(command_o, str) else None
        return source, command

    @classmethod
    def _build_prefix(cls, source: str | None, command: str | None) -> str:
        label = source or "codec"
        core = f"{label}>{command}" if command else label
        padded = core.ljust(cls.PREFIX_WIDTH)[: cls.PREFIX_WIDTH]
        return f"[{padded}]"

    @classmethod
    def _build_debug_message(
        cls,
        event_name: str,
        prefix: str,
        human_text: str | None,
        kwargs: dict[str, object],
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = cls.EVENT_NAME_WIDTH
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix}"
        if human_text:
            base = f"{base} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base

    @staticmethod
    def _build_concise_message(
        event_name: str, prefix: str, human_text: str | None
    ) -> str:
        return f"{prefix} {human_text or event_name}"


logger = WireLogger()
