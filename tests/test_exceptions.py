"""Tests for the beanwire exception hierarchy."""

from __future__ import annotations

import pytest

from beanwire.exceptions import (
    BeanwireAmbiguousBindingError,
    BeanwireConstructorInferenceError,
    BeanwireCyclicDependencyError,
    BeanwireError,
    BeanwireInstantiateBeansError,
    BeanwireInvalidBeanError,
    BeanwireNotRegisteredBeanError,
    BeanwireScanError,
)


class First:
    pass


class Second:
    pass


@pytest.mark.parametrize(
    "error_type",
    [
        BeanwireAmbiguousBindingError,
        BeanwireConstructorInferenceError,
        BeanwireCyclicDependencyError,
        BeanwireInstantiateBeansError,
        BeanwireInvalidBeanError,
        BeanwireNotRegisteredBeanError,
        BeanwireScanError,
    ],
)
def test_every_error_is_a_beanwire_error(error_type: type[Exception]) -> None:
    assert issubclass(error_type, BeanwireError)


def test_not_registered_error_names_the_type() -> None:
    error = BeanwireNotRegisteredBeanError(First)

    assert error.bean_type is First
    assert str(error) == "Cannot instantiate not registered bean 'First'."


def test_ambiguous_binding_error_lists_candidates() -> None:
    error = BeanwireAmbiguousBindingError(object, [First, Second])

    assert error.candidates == (First, Second)
    assert "2 candidates found ('First', 'Second')" in str(error)


def test_cyclic_dependency_error_renders_the_path() -> None:
    error = BeanwireCyclicDependencyError(First, [First, Second, First])

    assert error.path == (First, Second, First)
    assert str(error).endswith("First -> Second -> First.")


def test_instantiate_error_keeps_the_cause() -> None:
    cause = ValueError("bad")

    error = BeanwireInstantiateBeansError(First, cause)

    assert error.cause is cause
    assert "ValueError('bad')" in str(error)
