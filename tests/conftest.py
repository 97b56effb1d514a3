"""Shared pytest fixtures for beanwire tests."""

from __future__ import annotations

import pytest

from beanwire.bean_factory import BeanFactory
from beanwire.bean_set import BeanSet
from beanwire.constructors import InjectableConstructorLookup
from tests.beans import Controller, IService, ServiceImpl


@pytest.fixture()
def scenario_bean_set() -> BeanSet:
    """Bean set with an interface, its only implementation and a controller."""
    return BeanSet.of(IService, ServiceImpl, Controller)


@pytest.fixture()
def scenario_bean_factory(scenario_bean_set: BeanSet) -> BeanFactory:
    """Initialized bean factory over ``scenario_bean_set``."""
    bean_factory = BeanFactory(scenario_bean_set)
    bean_factory.initialize()
    return bean_factory


@pytest.fixture()
def constructor_lookup() -> InjectableConstructorLookup:
    """Constructor lookup with autowiring enabled."""
    return InjectableConstructorLookup()
