from __future__ import annotations

import importlib
from typing import Any

from beanwire._internal.type_checks import is_runtime_class


def _load_settings_base() -> type[Any] | None:
    try:
        module = importlib.import_module("pydantic_settings")
    except ImportError:
        return None
    base_settings = getattr(module, "BaseSettings", None)
    return base_settings if isinstance(base_settings, type) else None


SETTINGS_BASE: type[Any] | None = _load_settings_base()


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return whether a bean class is a ``pydantic_settings.BaseSettings`` model.

    Settings beans are always built through their zero-argument constructor,
    so field values come from the environment and ``.env`` files instead of
    from other beans. Without ``pydantic-settings`` installed this returns
    ``False`` for every candidate.

    Args:
        candidate: Object to test.

    """
    if SETTINGS_BASE is None or not is_runtime_class(candidate):
        return False
    try:
        return issubclass(candidate, SETTINGS_BASE)
    except TypeError:
        return False


__all__ = ["SETTINGS_BASE", "is_pydantic_settings_subclass"]
