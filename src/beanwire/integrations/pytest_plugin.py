from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from beanwire.bean_factory import BeanFactory
from beanwire.bean_set import BeanSet, BeanSetEntry


@pytest.fixture()
def beanwire_bean_set() -> BeanSet | Iterable[BeanSetEntry]:
    """Fixture hook for the bean set used by ``beanwire_bean_factory``.

    Users must override this fixture in their own test suite and return a
    ``BeanSet`` (or an iterable of classes and definitions).

    """
    msg = (
        "The beanwire pytest plugin requires overriding the 'beanwire_bean_set' fixture in "
        "your test suite. Define @pytest.fixture() def beanwire_bean_set() -> BeanSet: ... "
        "and return the beans under test."
    )
    raise RuntimeError(msg)


@pytest.fixture()
def beanwire_bean_factory(beanwire_bean_set: BeanSet | Iterable[BeanSetEntry]) -> BeanFactory:
    """Create and initialize a per-test bean factory.

    The fixture is function-scoped, so every test gets fresh singletons.

    Returns:
        An initialized ``BeanFactory`` over ``beanwire_bean_set``.

    """
    bean_factory = BeanFactory(beanwire_bean_set)
    bean_factory.initialize()
    return bean_factory


@pytest.fixture()
def beanwire_controllers(beanwire_bean_factory: BeanFactory) -> dict[type[Any], Any]:
    """Return the controller beans of ``beanwire_bean_factory``."""
    return beanwire_bean_factory.get_controllers()


__all__ = ["beanwire_bean_factory", "beanwire_bean_set", "beanwire_controllers"]
