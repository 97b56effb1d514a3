"""Pydantic settings beans load from the environment.

``BaseSettings`` subclasses in the bean set are built through their
zero-argument constructor, so their fields come from environment variables.
Other beans receive the settings singleton like any other dependency.
"""

from __future__ import annotations

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from beanwire import BeanFactory, BeanSet


class DatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SHOP_DB_")

    host: str = "localhost"
    port: int = 5432


class ConnectionPool:
    def __init__(self, settings: DatabaseSettings) -> None:
        self.dsn = f"postgres://{settings.host}:{settings.port}"


def main() -> None:
    os.environ["SHOP_DB_HOST"] = "db.internal"

    bean_factory = BeanFactory(BeanSet.of(DatabaseSettings, ConnectionPool))
    bean_factory.initialize()

    pool = bean_factory.get(ConnectionPool)
    assert pool is not None
    print(f"dsn={pool.dsn}")  # => dsn=postgres://db.internal:5432
    print(f"settings_singleton={bean_factory.resolve(DatabaseSettings) is bean_factory.get(DatabaseSettings)}")  # => settings_singleton=True


if __name__ == "__main__":
    main()
