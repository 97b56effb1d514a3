"""Describe beans explicitly with ``BeanDefinition``.

Explicit definitions list constructor dependencies and capabilities up front,
so the factory needs no annotations or markers. With
``autowire_constructors=False`` only explicit dependencies and ``@inject``
constructors receive beans.
"""

from __future__ import annotations

from beanwire import CONTROLLER, BeanDefinition, BeanFactory, BeanSet, inject


class Clock:
    def now(self) -> str:
        return "12:00"


class Scheduler:
    def __init__(self, clock, label="jobs"):  # noqa: ANN001
        self.clock = clock
        self.label = label


class Reporter:
    @inject
    def __init__(self, scheduler: Scheduler) -> None:
        self.scheduler = scheduler


def main() -> None:
    bean_set = BeanSet(
        [
            Clock,
            BeanDefinition(Scheduler, dependencies=(Clock,)),
            BeanDefinition(Reporter, capabilities=frozenset({CONTROLLER})),
        ],
    )
    bean_factory = BeanFactory(bean_set, autowire_constructors=False)
    bean_factory.initialize()

    reporter = bean_factory.get(Reporter)
    assert reporter is not None
    print(f"time={reporter.scheduler.clock.now()}")  # => time=12:00
    print(f"label={reporter.scheduler.label}")  # => label=jobs
    print(f"controllers={[t.__name__ for t in bean_factory.get_controllers()]}")  # => controllers=['Reporter']


if __name__ == "__main__":
    main()
