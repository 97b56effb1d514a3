from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import Protocol, runtime_checkable

from beanwire._internal.type_checks import (
    is_concrete_class,
    is_nominal_subclass,
    is_runtime_class,
)


class Port(Protocol):
    def send(self) -> None: ...


@runtime_checkable
class Closeable(Protocol):
    def close(self) -> None: ...


class Adapter(Port):
    def send(self) -> None:
        pass


class File:
    def close(self) -> None:
        pass


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


class Square(Shape):
    def area(self) -> float:
        return 1.0


def test_runtime_class_excludes_generic_aliases() -> None:
    assert is_runtime_class(Square)
    assert not is_runtime_class(list[int])
    assert not is_runtime_class(Square())


def test_concrete_class_excludes_interfaces() -> None:
    assert is_concrete_class(Square)
    assert is_concrete_class(Adapter)
    assert not is_concrete_class(Shape)
    assert not is_concrete_class(Port)
    assert not is_concrete_class(Closeable)


def test_nominal_subclass_ignores_structural_matches() -> None:
    assert is_nominal_subclass(Adapter, Port)
    assert not is_nominal_subclass(File, Closeable)
    assert is_nominal_subclass(Square, Shape)


def test_nominal_subclass_defers_to_abc_subclass_hooks() -> None:
    class Bag:
        def __len__(self) -> int:
            return 0

    assert is_nominal_subclass(Bag, Sized)
