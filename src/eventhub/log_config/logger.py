"""Contextual logger used when events are handed to the hub.

Modules log through ``logging.getLogger(__name__)``; handler and level
setup is left to the application embedding the hub.
"""

from __future__ import annotations

import logging
from typing import Any


class ContextualLogger:
    """Thin wrapper that prepends ``[key=value …]`` context to every message.

    Usage::

        log = ContextualLogger(logging.getLogger(__name__), event="signIn", id=event.id)
        log.debug("Publishing to channel %r", channel)
        # => "[event=signIn] [id=…] Publishing to channel 'auth'"
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        self._logger = logger
        self._prefix = " ".join(f"[{k}={v}]" for k, v in context.items())

    def _fmt(self, msg: str) -> str:
        return f"{self._prefix} {msg}" if self._prefix else msg

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(self._fmt(msg), *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(self._fmt(msg), *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(self._fmt(msg), *args, **kwargs)
