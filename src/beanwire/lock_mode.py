from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for bean factory initialization passes.

    Reads (``get``, ``get_controllers``, ``size``) never lock: each pass
    publishes a complete registry in one assignment.
    """

    THREAD = "thread"
    """Serialize ``initialize``/``resolve`` passes with a ``threading.RLock``."""

    NONE = "none"
    """Run passes without locking. Use when a single thread owns the factory."""
