"""Interfaces resolve to their only implementation in the bean set.

Constructors may depend on abstract classes or protocols. The factory looks
for exactly one concrete bean implementing the interface and injects that
singleton everywhere it is requested.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from beanwire import BeanFactory, BeanSet


class Notifier(ABC):
    @abstractmethod
    def notify(self, message: str) -> str: ...


class EmailNotifier(Notifier):
    def notify(self, message: str) -> str:
        return f"email:{message}"


class SignupService:
    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier


class BillingService:
    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier


def main() -> None:
    bean_factory = BeanFactory(BeanSet.of(Notifier, EmailNotifier, SignupService, BillingService))
    bean_factory.initialize()

    signup = bean_factory.get(SignupService)
    billing = bean_factory.get(BillingService)
    assert signup is not None
    assert billing is not None

    print(signup.notifier.notify("welcome"))  # => email:welcome
    print(f"same_notifier={signup.notifier is billing.notifier}")  # => same_notifier=True
    print(f"via_interface={bean_factory.resolve(Notifier) is signup.notifier}")  # => via_interface=True
    print(f"bean_count={len(bean_factory)}")  # => bean_count=3


if __name__ == "__main__":
    main()
