"""Serve controller beans with FastAPI.

``request_mapping`` describes routes on controller classes and methods.
``include_controllers`` builds one router per controller bean, using the
singleton's bound methods as endpoints.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from beanwire import BeanFactory, BeanSet, controller, service
from beanwire.integrations.fastapi import include_controllers, request_mapping


@service
class TodoService:
    def __init__(self) -> None:
        self.items = ["write docs"]

    def add(self, item: str) -> int:
        self.items.append(item)
        return len(self.items)


@controller
@request_mapping("/todos", tags=["todos"])
class TodoController:
    def __init__(self, todos: TodoService) -> None:
        self.todos = todos

    @request_mapping("")
    def list_items(self) -> dict[str, list[str]]:
        return {"items": self.todos.items}

    @request_mapping("/{item}", methods=["POST"])
    def add_item(self, item: str) -> dict[str, int]:
        return {"count": self.todos.add(item)}


def main() -> None:
    bean_factory = BeanFactory(BeanSet.of(TodoService, TodoController))
    bean_factory.initialize()

    app = FastAPI()
    include_controllers(app, bean_factory)
    client = TestClient(app)

    print(client.post("/todos/ship").json())  # => {'count': 2}
    print(client.get("/todos").json())  # => {'items': ['write docs', 'ship']}


if __name__ == "__main__":
    main()
