from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _type_name(bean_type: Any) -> str:
    return getattr(bean_type, "__qualname__", repr(bean_type))


class BeanwireError(Exception):
    """Represent a base class for all beanwire-specific failures.

    Catch this type when you want to handle any beanwire error path without
    matching each concrete exception class individually.
    """


class BeanwireInvalidBeanError(BeanwireError):
    """Signal an invalid bean set entry.

    Raised while building a ``BeanSet`` when an entry is not a class or when
    the same class is given twice with conflicting definitions.
    """


class BeanwireNotRegisteredBeanError(BeanwireError):
    """Signal that a type is not managed by the bean factory.

    Raised when resolution or instantiation reaches a concrete type that is
    not a member of the bean set, or an interface that no bean implements.

    Typical fixes include adding the class to the bean set, marking it with a
    stereotype so ``BeanScanner`` picks it up, or adding an implementation of
    the requested interface.
    """

    def __init__(self, bean_type: Any) -> None:
        self.bean_type = bean_type
        msg = f"Cannot instantiate not registered bean '{_type_name(bean_type)}'."
        super().__init__(msg)


class BeanwireAmbiguousBindingError(BeanwireError):
    """Signal that an interface has more than one implementation in the bean set.

    The factory never picks one candidate arbitrarily. Typical fixes are
    removing all but one implementation from the bean set or depending on the
    concrete class directly.
    """

    def __init__(self, bean_type: Any, candidates: Sequence[type[Any]]) -> None:
        self.bean_type = bean_type
        self.candidates = tuple(candidates)
        names = ", ".join(f"'{_type_name(candidate)}'" for candidate in self.candidates)
        msg = (
            f"Ambiguous binding for '{_type_name(bean_type)}': "
            f"{len(self.candidates)} candidates found ({names})."
        )
        super().__init__(msg)


class BeanwireCyclicDependencyError(BeanwireError):
    """Signal a dependency cycle between beans.

    ``path`` holds the chain of concrete types being resolved when the cycle
    was detected, starting and ending with the same type.
    """

    def __init__(self, bean_type: Any, path: Sequence[type[Any]]) -> None:
        self.bean_type = bean_type
        self.path = tuple(path)
        chain = " -> ".join(_type_name(item) for item in self.path)
        msg = f"Cyclic dependency detected while resolving '{_type_name(bean_type)}': {chain}."
        super().__init__(msg)


class BeanwireInstantiateBeansError(BeanwireError):
    """Signal that a bean constructor could not be invoked.

    Wraps the original exception, available both as ``cause`` and as
    ``__cause__``. Common triggers are a missing zero-argument constructor
    for a class without an injectable constructor, or a constructor that
    raises.
    """

    def __init__(self, bean_type: Any, cause: BaseException) -> None:
        self.bean_type = bean_type
        self.cause = cause
        msg = f"Failed to instantiate bean '{_type_name(bean_type)}': {cause!r}"
        super().__init__(msg)


class BeanwireConstructorInferenceError(BeanwireError):
    """Signal that constructor dependencies cannot be inferred.

    Common triggers are missing or unresolvable type annotations on required
    constructor parameters.

    Typical fixes include adding parameter annotations or declaring explicit
    ``dependencies`` on the ``BeanDefinition``.
    """


class BeanwireScanError(BeanwireError):
    """Signal that a package could not be imported while scanning for beans."""
