"""Controller beans are exposed through ``get_controllers``.

``@controller`` records a capability on the bean definition. The factory
filters its registry on that capability without touching any other bean.
"""

from __future__ import annotations

from beanwire import BeanFactory, BeanSet, controller, service


@service
class GreetingService:
    def greet(self, name: str) -> str:
        return f"Hello, {name}!"


@controller
class GreetingController:
    def __init__(self, greetings: GreetingService) -> None:
        self.greetings = greetings

    def handle(self, name: str) -> str:
        return self.greetings.greet(name)


def main() -> None:
    bean_factory = BeanFactory(BeanSet.of(GreetingService, GreetingController))
    bean_factory.initialize()

    controllers = bean_factory.get_controllers()
    names = sorted(bean_type.__name__ for bean_type in controllers)
    print(f"controllers={names}")  # => controllers=['GreetingController']

    greeting_controller = controllers[GreetingController]
    print(greeting_controller.handle("bean"))  # => Hello, bean!


if __name__ == "__main__":
    main()
