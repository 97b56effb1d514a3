"""Common error classes for troubleshooting.

This module triggers representative error paths and prints exception type
names so you can recognize each error category quickly.
"""

from __future__ import annotations

from typing import Protocol

from beanwire import (
    BeanFactory,
    BeanFactoryState,
    BeanSet,
    BeanwireAmbiguousBindingError,
    BeanwireCyclicDependencyError,
    BeanwireInstantiateBeansError,
    BeanwireNotRegisteredBeanError,
)


class Storage(Protocol):
    def save(self, data: str) -> None: ...


class DiskStorage(Storage):
    def save(self, data: str) -> None:
        pass


class MemoryStorage(Storage):
    def save(self, data: str) -> None:
        pass


class Uploader:
    def __init__(self, storage: Storage) -> None:
        self.storage = storage


class Unregistered:
    pass


class Chicken:
    def __init__(self, egg: Egg) -> None:
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken) -> None:
        self.chicken = chicken


class BrokenClient:
    def __init__(self) -> None:
        msg = "connection refused"
        raise ConnectionError(msg)


def main() -> None:
    bean_factory = BeanFactory(BeanSet.of(Uploader))
    try:
        bean_factory.resolve(Unregistered)
    except BeanwireNotRegisteredBeanError as error:
        missing = type(error).__name__
    print(f"missing={missing}")  # => missing=BeanwireNotRegisteredBeanError

    bean_factory = BeanFactory(BeanSet.of(DiskStorage, MemoryStorage, Uploader))
    try:
        bean_factory.initialize()
    except BeanwireAmbiguousBindingError as error:
        ambiguous = type(error).__name__
    print(f"ambiguous={ambiguous}")  # => ambiguous=BeanwireAmbiguousBindingError
    print(f"state={bean_factory.state.value} beans={bean_factory.size()}")  # => state=failed beans=0

    bean_factory = BeanFactory(BeanSet.of(Chicken, Egg))
    try:
        bean_factory.initialize()
    except BeanwireCyclicDependencyError as error:
        cycle = " -> ".join(bean_type.__name__ for bean_type in error.path)
    print(f"cycle={cycle}")  # => cycle=Chicken -> Egg -> Chicken

    bean_factory = BeanFactory(BeanSet.of(BrokenClient))
    try:
        bean_factory.initialize()
    except BeanwireInstantiateBeansError as error:
        cause = type(error.cause).__name__
    print(f"instantiate_cause={cause}")  # => instantiate_cause=ConnectionError
    print(f"failed={bean_factory.state is BeanFactoryState.FAILED}")  # => failed=True


if __name__ == "__main__":
    main()
