from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog


def _add_ts(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("ts", datetime.now(timezone.utc).isoformat(timespec="seconds"))
    return event_dict


# The API credential travels as a query parameter, so anything key-like is masked.
_SECRET_KEYS = {"api_key", "api-key", "apikey", "nyt_api_key", "token", "secret", "password"}


def _secret_guard(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for key in list(event_dict.keys()):
        if str(key).lower() in _SECRET_KEYS:
            event_dict[key] = "***redacted***"
    return event_dict


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure one structlog stack for the shell, the scheduler and the fetchers.

    Log output goes to stderr so it never interleaves with the command menu on stdout.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            _add_ts,
            _secret_guard,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(*args: Any, **initial_values: Any) -> Any:
    """Lazy structlog proxy; picks up whatever configure_logging installs later."""
    return structlog.get_logger(*args, **initial_values)
