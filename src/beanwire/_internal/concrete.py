from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from beanwire._internal.bean_set import BeanSet
from beanwire._internal.type_checks import is_concrete_class, is_nominal_subclass
from beanwire.exceptions import BeanwireAmbiguousBindingError, BeanwireNotRegisteredBeanError


@dataclass(frozen=True, slots=True)
class ConcreteTypeResolver:
    """Map bean set types to the single concrete class that implements them."""

    bean_set: BeanSet

    def find_candidates(self, bean_type: type[Any]) -> tuple[type[Any], ...]:
        """Return the concrete bean set members assignable to ``bean_type``.

        Candidates are ordered by module and qualified name so error messages
        and policies built on top of them are deterministic.

        Args:
            bean_type: Interface or base class to look up implementations for.

        """
        candidates = [
            member
            for member in self.bean_set
            if member is not bean_type
            and is_concrete_class(member)
            and is_nominal_subclass(member, bean_type)
        ]
        return tuple(sorted(candidates, key=lambda member: (member.__module__, member.__qualname__)))

    def find_concrete_type(self, bean_type: Any) -> type[Any]:
        """Return the concrete class that ``bean_type`` resolves to.

        Concrete members of the bean set resolve to themselves. Interfaces
        resolve to their only concrete implementation in the bean set.

        Args:
            bean_type: Interface or concrete class requested by the caller or
                by a constructor parameter.

        Raises:
            BeanwireNotRegisteredBeanError: The type is concrete but not a
                member of the bean set, or no member implements it.
            BeanwireAmbiguousBindingError: More than one member implements it.

        """
        if is_concrete_class(bean_type):
            if bean_type not in self.bean_set:
                raise BeanwireNotRegisteredBeanError(bean_type)
            return bean_type

        if not isinstance(bean_type, type):
            raise BeanwireNotRegisteredBeanError(bean_type)

        candidates = self.find_candidates(bean_type)
        if not candidates:
            raise BeanwireNotRegisteredBeanError(bean_type)
        if len(candidates) > 1:
            raise BeanwireAmbiguousBindingError(bean_type, candidates)
        return candidates[0]


__all__ = ["ConcreteTypeResolver"]
