"""Library logging for poll operations.

The ``expectpoll`` logger carries a ``NullHandler``; applications opt in to attempt
tracing by configuring that logger (DEBUG shows every attempt and wait).
"""

from __future__ import annotations

import itertools
import logging as py_logging
from collections.abc import MutableMapping
from typing import Any

LOGGER_NAME = "expectpoll"

py_logging.getLogger(LOGGER_NAME).addHandler(py_logging.NullHandler())

_poll_ids = itertools.count(1)


class PollLoggerAdapter(py_logging.LoggerAdapter):
    """Prefix records with the poll id so concurrent polls can be told apart."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        extra = self.extra or {}
        kwargs["extra"] = {**extra, **kwargs.get("extra", {})}
        return f"poll={extra['poll_id']} timeout_ms={extra['timeout_ms']} {msg}", kwargs


def poll_logger(timeout_ms: int) -> PollLoggerAdapter:
    return PollLoggerAdapter(
        py_logging.getLogger(f"{LOGGER_NAME}.poller"),
        {"poll_id": next(_poll_ids), "timeout_ms": timeout_ms},
    )
