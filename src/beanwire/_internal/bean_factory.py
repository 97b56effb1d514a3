from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from contextlib import AbstractContextManager, contextmanager, nullcontext
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeVar, cast

from beanwire._internal.bean_set import BeanSet, BeanSetEntry
from beanwire._internal.concrete import ConcreteTypeResolver
from beanwire._internal.constructors import InjectableConstructor, InjectableConstructorLookup
from beanwire._internal.markers import CONTROLLER
from beanwire.exceptions import (
    BeanwireCyclicDependencyError,
    BeanwireInstantiateBeansError,
    BeanwireNotRegisteredBeanError,
)
from beanwire.lock_mode import LockMode

T = TypeVar("T")

logger = logging.getLogger(__name__)
_MISSING = object()


class BeanFactoryState(Enum):
    """Outcome of the most recent ``initialize`` call."""

    NEW = "new"
    """No pass has run yet."""

    INITIALIZED = "initialized"
    """``initialize`` completed and every bean set entry is available."""

    FAILED = "failed"
    """The last ``initialize`` raised. Nothing it staged was published."""


@dataclass(slots=True)
class _ResolutionPass:
    """Per-pass state: staged instances and the types currently being built."""

    published: Mapping[type[Any], Any]
    staged: dict[type[Any], Any] = field(default_factory=dict)
    resolving: list[type[Any]] = field(default_factory=list)

    def lookup(self, concrete_type: type[Any]) -> Any:
        instance = self.published.get(concrete_type, _MISSING)
        if instance is _MISSING:
            instance = self.staged.get(concrete_type, _MISSING)
        return instance


class BeanFactory:
    """Build and hold one singleton per concrete bean class.

    The factory is given a closed ``BeanSet``. ``initialize`` resolves every
    entry: interfaces are mapped to their only implementation, constructor
    dependencies are resolved depth first, and each concrete class is
    instantiated at most once for the lifetime of the factory.

    Each pass stages new instances privately and publishes them in a single
    assignment when the whole pass succeeds. A failing pass publishes nothing;
    a failing ``initialize`` also leaves the factory in
    ``BeanFactoryState.FAILED``.
    """

    def __init__(
        self,
        bean_set: BeanSet | Iterable[BeanSetEntry],
        *,
        lock_mode: LockMode = LockMode.THREAD,
        autowire_constructors: bool = True,
    ) -> None:
        """Create a bean factory over a closed bean set.

        Args:
            bean_set: Classes eligible for management, either as a ``BeanSet``
                or as an iterable of classes and ``BeanDefinition`` objects.
            lock_mode: Serialize passes with a thread lock (``LockMode.THREAD``)
                or run them unguarded (``LockMode.NONE``).
            autowire_constructors: Treat any constructor with required
                parameters as injectable. When disabled only explicit
                dependencies and ``@inject`` constructors receive beans; all
                other classes are built through their zero-argument
                constructor.

        """
        self._bean_set = bean_set if isinstance(bean_set, BeanSet) else BeanSet(bean_set)
        self._concrete_types = ConcreteTypeResolver(self._bean_set)
        self._constructors = InjectableConstructorLookup(autowire=autowire_constructors)
        self._beans: dict[type[Any], Any] = {}
        self._state = BeanFactoryState.NEW
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if lock_mode is LockMode.THREAD else nullcontext()
        )

    @property
    def bean_set(self) -> BeanSet:
        return self._bean_set

    @property
    def state(self) -> BeanFactoryState:
        return self._state

    @property
    def beans(self) -> Mapping[type[Any], Any]:
        """Read-only view of the published registry keyed by concrete type."""
        return MappingProxyType(self._beans)

    def initialize(self) -> None:
        """Instantiate every bean in the bean set.

        Calling ``initialize`` again is safe: beans already in the registry
        are reused, so no class is instantiated twice.

        Raises:
            BeanwireNotRegisteredBeanError: A dependency is outside the bean set.
            BeanwireAmbiguousBindingError: An interface has several implementations.
            BeanwireCyclicDependencyError: Beans depend on each other in a cycle.
            BeanwireInstantiateBeansError: A constructor could not be invoked.
            BeanwireConstructorInferenceError: A constructor parameter has no
                usable annotation.

        """
        with self._resolution_pass(tracks_state=True) as resolution:
            for bean_type in self._bean_set:
                self._register_instantiated_bean(bean_type, resolution)
        self._state = BeanFactoryState.INITIALIZED
        logger.info(
            "Bean factory initialized: bean_set_size=%d bean_count=%d",
            len(self._bean_set),
            len(self._beans),
        )

    def resolve(self, bean_type: type[T]) -> T:
        """Return the singleton ``bean_type`` resolves to, building it if needed.

        Interfaces resolve to their only implementation in the bean set, so
        resolving an interface and its implementation yields the same object.

        Args:
            bean_type: Interface or concrete class to resolve.

        Raises:
            BeanwireNotRegisteredBeanError: ``bean_type`` is not managed.
            BeanwireAmbiguousBindingError: Several implementations match.

        """
        with self._resolution_pass() as resolution:
            instance = self._register_instantiated_bean(bean_type, resolution)
        return cast("T", instance)

    def get(self, bean_type: type[T]) -> T | None:
        """Return the singleton registered for a concrete class, or ``None``.

        Never triggers resolution.

        Args:
            bean_type: Concrete class used as registry key.

        """
        return cast("T | None", self._beans.get(bean_type))

    def get_controllers(self) -> dict[type[Any], Any]:
        """Return registered beans whose class carries the controller capability."""
        return self.get_beans_with_capability(CONTROLLER)

    def get_beans_with_capability(self, capability: str) -> dict[type[Any], Any]:
        """Return registered beans whose bean set entry carries ``capability``.

        Args:
            capability: Capability name, for example ``"controller"``.

        """
        return {
            bean_type: instance
            for bean_type, instance in self._beans.items()
            if self._bean_set.has_capability(bean_type, capability)
        }

    def size(self) -> int:
        """Return the number of distinct concrete classes instantiated."""
        return len(self._beans)

    def __len__(self) -> int:
        return len(self._beans)

    def __contains__(self, bean_type: object) -> bool:
        return bean_type in self._beans

    @contextmanager
    def _resolution_pass(self, *, tracks_state: bool = False) -> Iterator[_ResolutionPass]:
        with self._lock:
            resolution = _ResolutionPass(published=self._beans)
            try:
                yield resolution
            except Exception:
                if tracks_state:
                    self._state = BeanFactoryState.FAILED
                logger.info(
                    "Bean factory pass failed; discarded %d staged beans",
                    len(resolution.staged),
                )
                raise
            if resolution.staged:
                self._beans = {**self._beans, **resolution.staged}

    def _register_instantiated_bean(self, bean_type: Any, resolution: _ResolutionPass) -> Any:
        concrete_type = self._concrete_types.find_concrete_type(bean_type)

        instance = resolution.lookup(concrete_type)
        if instance is not _MISSING:
            return instance

        if concrete_type in resolution.resolving:
            start = resolution.resolving.index(concrete_type)
            path = [*resolution.resolving[start:], concrete_type]
            raise BeanwireCyclicDependencyError(bean_type, path)

        resolution.resolving.append(concrete_type)
        try:
            instance = self._instantiate_class(concrete_type, resolution)
        finally:
            resolution.resolving.pop()

        resolution.staged[concrete_type] = instance
        logger.debug("Instantiated bean %s", concrete_type.__qualname__)
        return instance

    def _instantiate_class(self, concrete_type: type[Any], resolution: _ResolutionPass) -> Any:
        definition = self._bean_set.definition_for(concrete_type)
        if definition is None:
            raise BeanwireNotRegisteredBeanError(concrete_type)

        constructor = self._constructors.find(definition)
        if constructor is None:
            return self._default_constructor_instantiate(concrete_type)
        return self._instantiate_constructor(constructor, resolution)

    def _instantiate_constructor(
        self,
        constructor: InjectableConstructor,
        resolution: _ResolutionPass,
    ) -> Any:
        arguments = [
            self._register_instantiated_bean(parameter.provides, resolution)
            for parameter in constructor.parameters
        ]
        try:
            return constructor.invoke(arguments)
        except Exception as error:
            logger.error(
                "Failed to instantiate %s by injectable constructor: %r",
                constructor.bean_type.__qualname__,
                error,
            )
            raise BeanwireInstantiateBeansError(constructor.bean_type, error) from error

    def _default_constructor_instantiate(self, concrete_type: type[Any]) -> Any:
        try:
            return concrete_type()
        except Exception as error:
            logger.error(
                "Failed to instantiate %s by default constructor: %r",
                concrete_type.__qualname__,
                error,
            )
            raise BeanwireInstantiateBeansError(concrete_type, error) from error


__all__ = ["BeanFactory", "BeanFactoryState"]
