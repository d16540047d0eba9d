"""
Analytics Provider — Log-Once Helpers
=======================================
Configuration problems are reported once per process, not on
every session that trips over them.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("analytics.provider")

_seen: set[tuple[int, str]] = set()


def _log_once(level: int, message: str) -> bool:
    key = (level, message)
    if key in _seen:
        return False
    _seen.add(key)
    logger.log(level, message)
    return True


def warn_once(message: str) -> bool:
    """Log a warning the first time message is seen. Returns True if logged."""
    return _log_once(logging.WARNING, message)


def error_once(message: str) -> bool:
    """Log an error the first time message is seen. Returns True if logged."""
    return _log_once(logging.ERROR, message)


def reset_once() -> None:
    """Forget previously logged messages."""
    _seen.clear()
