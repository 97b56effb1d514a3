from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

C = TypeVar("C", bound=type[Any])
F = TypeVar("F", bound=Callable[..., Any])

STEREOTYPES_ATTR = "__beanwire_stereotypes__"
INJECT_ATTR = "__beanwire_inject__"


class Stereotype(str, Enum):
    """Role markers that make a class discoverable by ``BeanScanner``.

    Each stereotype recorded on a class becomes a capability of its bean
    definition. ``CONTROLLER`` is the capability read by
    ``BeanFactory.get_controllers``.
    """

    COMPONENT = "component"
    """Generic managed bean."""

    CONTROLLER = "controller"
    """Bean exposed through ``BeanFactory.get_controllers``."""

    SERVICE = "service"
    """Bean holding application logic."""

    REPOSITORY = "repository"
    """Bean wrapping data access."""


CONTROLLER = Stereotype.CONTROLLER.value
DEFAULT_STEREOTYPES: frozenset[str] = frozenset(stereotype.value for stereotype in Stereotype)


def capability_name(capability: str) -> str:
    """Return the plain string for a capability given as str or ``Stereotype``."""
    return capability.value if isinstance(capability, Stereotype) else capability


def _stereotype_decorator(stereotype: Stereotype) -> Callable[[C], C]:
    def decorator(cls: C) -> C:
        # Stereotypes live in the class's own namespace so they are not inherited.
        existing = cls.__dict__.get(STEREOTYPES_ATTR, frozenset())
        setattr(cls, STEREOTYPES_ATTR, frozenset({*existing, stereotype.value}))
        return cls

    decorator.__name__ = stereotype.value
    decorator.__qualname__ = stereotype.value
    decorator.__doc__ = f"Mark a class with the ``{stereotype.value}`` stereotype."
    return decorator


component = _stereotype_decorator(Stereotype.COMPONENT)
controller = _stereotype_decorator(Stereotype.CONTROLLER)
service = _stereotype_decorator(Stereotype.SERVICE)
repository = _stereotype_decorator(Stereotype.REPOSITORY)


def stereotypes_of(cls: type[Any]) -> frozenset[str]:
    """Return the stereotypes declared directly on ``cls``.

    Args:
        cls: Class to inspect.

    """
    return frozenset(cls.__dict__.get(STEREOTYPES_ATTR, frozenset()))


def inject(func: F) -> F:
    """Mark ``__init__`` as the constructor that receives bean dependencies.

    Examples:
        .. code-block:: python

            @service
            class UserService:
                @inject
                def __init__(self, repository: UserRepository) -> None:
                    self.repository = repository

    """
    setattr(func, INJECT_ATTR, True)
    return func


def is_inject_marked(func: object) -> bool:
    return bool(getattr(func, INJECT_ATTR, False))


__all__ = [
    "CONTROLLER",
    "DEFAULT_STEREOTYPES",
    "Stereotype",
    "capability_name",
    "component",
    "controller",
    "inject",
    "is_inject_marked",
    "repository",
    "service",
    "stereotypes_of",
]
