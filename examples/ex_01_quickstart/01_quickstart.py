"""Quickstart: wire a closed set of beans from constructor type hints.

List the classes the factory may manage, call ``initialize`` once, and read
the singletons back by type.
"""

from __future__ import annotations

from beanwire import BeanFactory, BeanSet


class Database:
    def __init__(self) -> None:
        self.host = "localhost"


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository


def main() -> None:
    bean_factory = BeanFactory(BeanSet.of(Database, UserRepository, UserService))
    bean_factory.initialize()

    service = bean_factory.get(UserService)
    assert service is not None

    print(f"db_host={service.repository.database.host}")  # => db_host=localhost
    print(f"bean_count={bean_factory.size()}")  # => bean_count=3

    shared = service.repository.database is bean_factory.get(Database)
    print(f"shared_database={shared}")  # => shared_database=True


if __name__ == "__main__":
    main()
