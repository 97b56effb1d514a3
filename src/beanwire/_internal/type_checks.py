from __future__ import annotations

import inspect
import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_protocol_class(candidate: type[Any]) -> bool:
    return bool(getattr(candidate, "_is_protocol", False))


def is_concrete_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate can be instantiated directly.

    Abstract base classes with unimplemented abstract methods and
    ``typing.Protocol`` classes are treated as interfaces.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    if not is_runtime_class(candidate):
        return False
    if inspect.isabstract(candidate):
        return False
    return not is_protocol_class(candidate)


def is_nominal_subclass(candidate: type[Any], base: type[Any]) -> bool:
    """Return whether candidate subclasses base without structural matching.

    Protocol bases are matched by explicit inheritance only, since
    ``issubclass`` rejects non runtime-checkable protocols.

    Args:
        candidate: Class that may implement ``base``.
        base: Interface or base class.

    """
    if is_protocol_class(base):
        return base in candidate.__mro__
    try:
        return issubclass(candidate, base)
    except TypeError:
        return base in candidate.__mro__


__all__ = ["is_concrete_class", "is_nominal_subclass", "is_protocol_class", "is_runtime_class"]
