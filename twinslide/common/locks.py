"""Process-wide named locks guarding the shared render cache.

The lock set is created once at startup, before any window exists, and is
never re-created afterwards. Both window contexts reach the cache through
the same lock objects.
"""

from __future__ import annotations

import logging
import threading

from twinslide.common.settings import settings

logger = logging.getLogger(__name__)

__all__ = [
    "locks_init",
    "locks_isInitialized",
    "lock_get",
]

_locks: dict[str, threading.Lock] | None = None


def locks_init() -> None:
    """
    Create the named lock set.

    Repeated calls keep the existing locks.
    """
    global _locks
    if _locks is not None:
        logger.debug("Named locks already initialized")
        return
    _locks = {name: threading.Lock() for name in settings.LOCK_NAMES}
    logger.debug("Initialized named locks: %s", ", ".join(_locks))


def locks_isInitialized() -> bool:
    """
    Report whether locks_init() has run.

    Returns:
        True once the lock set exists.
    """
    return _locks is not None


def lock_get(name: str) -> threading.Lock:
    """
    Get a named lock.

    Args:
        name: Lock name from settings.LOCK_NAMES.

    Returns:
        The shared lock object.

    Raises:
        RuntimeError: If locks_init() has not been called.
        KeyError: If the name is unknown.
    """
    if _locks is None:
        raise RuntimeError("Named locks not initialized. Call locks_init() first.")
    return _locks[name]
