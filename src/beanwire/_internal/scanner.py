from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from collections.abc import Iterable, Iterator
from types import ModuleType
from typing import Any

from beanwire._internal.bean_set import BeanDefinition, BeanSet
from beanwire._internal.markers import DEFAULT_STEREOTYPES, capability_name, stereotypes_of
from beanwire.exceptions import BeanwireScanError

logger = logging.getLogger(__name__)


class BeanScanner:
    """Discover stereotype-marked classes in Python packages.

    Every base package is imported together with all of its submodules.
    Classes defined in those modules (not merely imported into them) that
    carry at least one of the accepted stereotypes become bean set entries.
    """

    def __init__(
        self,
        *base_packages: str | ModuleType,
        stereotypes: Iterable[str] = DEFAULT_STEREOTYPES,
    ) -> None:
        """Configure the packages and stereotypes to scan for.

        Args:
            *base_packages: Dotted package names or already imported modules.
            stereotypes: Stereotype names that make a class a bean. Defaults
                to every ``Stereotype``.

        """
        self._base_packages = base_packages
        self._stereotypes = frozenset(capability_name(stereotype) for stereotype in stereotypes)

    def scan(self) -> BeanSet:
        """Import the configured packages and return the discovered bean set.

        Raises:
            BeanwireScanError: A package or submodule failed to import.

        """
        definitions: list[BeanDefinition] = []
        for module in self._iter_modules():
            definitions.extend(self._definitions_in(module))
        logger.info(
            "Scanned packages %s: found %d beans",
            [self._package_name(package) for package in self._base_packages],
            len(definitions),
        )
        return BeanSet(definitions)

    def _iter_modules(self) -> Iterator[ModuleType]:
        seen: set[str] = set()
        for package in self._base_packages:
            root = self._import(package) if isinstance(package, str) else package
            modules = [root]
            search_path = getattr(root, "__path__", None)
            if search_path is not None:
                submodule_names = sorted(
                    info.name
                    for info in pkgutil.walk_packages(
                        search_path,
                        prefix=f"{root.__name__}.",
                        onerror=self._raise_walk_error,
                    )
                )
                modules.extend(self._import(name) for name in submodule_names)
            for module in modules:
                if module.__name__ in seen:
                    continue
                seen.add(module.__name__)
                yield module

    def _definitions_in(self, module: ModuleType) -> Iterator[BeanDefinition]:
        classes = [
            member
            for _, member in inspect.getmembers(module, inspect.isclass)
            if member.__module__ == module.__name__
        ]
        classes.sort(key=self._definition_order)
        for cls in classes:
            capabilities = stereotypes_of(cls)
            if capabilities & self._stereotypes:
                logger.debug("Found bean %s.%s", cls.__module__, cls.__qualname__)
                yield BeanDefinition(bean_type=cls, capabilities=capabilities)

    def _import(self, name: str) -> ModuleType:
        try:
            return importlib.import_module(name)
        except Exception as error:
            msg = f"Failed to import '{name}' while scanning for beans: {error!r}"
            raise BeanwireScanError(msg) from error

    def _raise_walk_error(self, name: str) -> None:
        msg = f"Failed to import '{name}' while scanning for beans."
        raise BeanwireScanError(msg)

    @staticmethod
    def _definition_order(cls: type[Any]) -> tuple[int, str]:
        try:
            line = inspect.getsourcelines(cls)[1]
        except (OSError, TypeError):
            line = 0
        return line, cls.__qualname__

    @staticmethod
    def _package_name(package: str | ModuleType) -> str:
        return package if isinstance(package, str) else package.__name__


__all__ = ["BeanScanner"]
