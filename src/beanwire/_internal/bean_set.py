from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from beanwire._internal.markers import capability_name, stereotypes_of
from beanwire._internal.type_checks import is_runtime_class
from beanwire.exceptions import BeanwireInvalidBeanError


@dataclass(frozen=True, slots=True)
class BeanDefinition:
    """Describe one class managed by the bean factory.

    Attributes:
        bean_type: The managed class. May be an interface or a concrete class.
        dependencies: Explicit ordered constructor parameter types. ``None``
            lets the factory look up the injectable constructor itself.
        capabilities: Capability names attached to the bean, for example
            ``"controller"``.

    """

    bean_type: type[Any]
    dependencies: tuple[Any, ...] | None = None
    capabilities: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.dependencies is not None:
            object.__setattr__(self, "dependencies", tuple(self.dependencies))
        normalized = frozenset(capability_name(capability) for capability in self.capabilities)
        object.__setattr__(self, "capabilities", normalized)

    @classmethod
    def from_type(cls, bean_type: type[Any]) -> BeanDefinition:
        """Build a definition whose capabilities come from stereotype markers."""
        return cls(bean_type=bean_type, capabilities=stereotypes_of(bean_type))


BeanSetEntry = type[Any] | BeanDefinition


class BeanSet:
    """Immutable, insertion-ordered set of bean definitions keyed by type.

    Entries may be plain classes or ``BeanDefinition`` objects. Plain classes
    take their capabilities from stereotype markers when the set is built, so
    later capability checks never look at the class again.
    """

    __slots__ = ("_definitions",)

    def __init__(self, entries: Iterable[BeanSetEntry] = ()) -> None:
        definitions: dict[type[Any], BeanDefinition] = {}
        for entry in entries:
            definition = self._to_definition(entry)
            existing = definitions.get(definition.bean_type)
            if existing is not None and existing != definition:
                msg = (
                    f"Bean '{definition.bean_type.__qualname__}' is defined twice "
                    "with conflicting definitions."
                )
                raise BeanwireInvalidBeanError(msg)
            definitions[definition.bean_type] = definition
        self._definitions = definitions

    @classmethod
    def of(cls, *entries: BeanSetEntry) -> BeanSet:
        return cls(entries)

    def _to_definition(self, entry: object) -> BeanDefinition:
        if isinstance(entry, BeanDefinition):
            if not is_runtime_class(entry.bean_type):
                msg = f"Bean definition must describe a class, got {entry.bean_type!r}."
                raise BeanwireInvalidBeanError(msg)
            return entry
        if not is_runtime_class(entry):
            msg = f"Bean set entries must be classes or BeanDefinition objects, got {entry!r}."
            raise BeanwireInvalidBeanError(msg)
        return BeanDefinition.from_type(entry)

    def __contains__(self, bean_type: object) -> bool:
        return bean_type in self._definitions

    def __iter__(self) -> Iterator[type[Any]]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        names = ", ".join(bean_type.__qualname__ for bean_type in self._definitions)
        return f"BeanSet({names})"

    @property
    def definitions(self) -> tuple[BeanDefinition, ...]:
        return tuple(self._definitions.values())

    def definition_for(self, bean_type: type[Any]) -> BeanDefinition | None:
        return self._definitions.get(bean_type)

    def has_capability(self, bean_type: type[Any], capability: str) -> bool:
        """Return whether a member of the set carries ``capability``.

        Args:
            bean_type: Bean class to check.
            capability: Capability name, for example ``"controller"``.

        """
        definition = self._definitions.get(bean_type)
        return definition is not None and capability_name(capability) in definition.capabilities


__all__ = ["BeanDefinition", "BeanSet", "BeanSetEntry"]
