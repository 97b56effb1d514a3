"""Scan a package for stereotype-marked classes.

``BeanScanner`` imports a package and its submodules and turns every class
marked with ``@component``, ``@controller``, ``@service`` or ``@repository``
into a bean set entry.
"""

from __future__ import annotations

from beanwire import BeanFactory, BeanScanner


def main() -> None:
    bean_set = BeanScanner("shop").scan()
    names = sorted(bean_type.__name__ for bean_type in bean_set)
    print(f"scanned={names}")  # => scanned=['CatalogController', 'CatalogService', 'ProductRepository']

    bean_factory = BeanFactory(bean_set)
    bean_factory.initialize()

    for catalog_controller in bean_factory.get_controllers().values():
        print(catalog_controller.catalog.describe("1"))  # => keyboard


if __name__ == "__main__":
    main()
