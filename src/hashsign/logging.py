"""Structured logging setup."""
from __future__ import annotations

import logging
import sys
from typing import Any, Dict, FrozenSet

import structlog

_DEFAULT_LEVEL = "info"

SENSITIVE_KEYS: FrozenSet[str] = frozenset(
    {"private_key", "privateKey", "seed", "signature", "message", "public_key", "publicKey"}
)
_REDACTED = "<redacted>"


def configure_logging(level: str | None = None) -> None:
    """Configure structlog for the library.

    Emits JSON lines to stderr with the keys ``level``, ``ts``, ``msg`` and
    ``component``. Values bound under any name in ``SENSITIVE_KEYS`` are
    replaced before rendering, so an accidental ``log.info(..., private_key=k)``
    never reaches a handler.
    """

    numeric_level = _level_from_str((level or _DEFAULT_LEVEL).lower())

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _component_processor,
            _rename_event_to_msg,
            scrub_sensitive,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Events reach handlers only through stdlib logging, so nothing is printed
    until the application configures logging (see ``configure_logging``).
    """
    return structlog.wrap_logger(logging.getLogger(name))


def scrub_sensitive(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = _REDACTED
    return event_dict


def _component_processor(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if event_dict.get("component") is None:
        event_dict["component"] = getattr(logger, "name", None) or "hashsign"
    return event_dict


def _rename_event_to_msg(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


def _level_from_str(level: str) -> int:
    mapping: Dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }
    return mapping.get(level, logging.INFO)


__all__ = ["SENSITIVE_KEYS", "configure_logging", "get_logger", "scrub_sensitive"]
