from __future__ import annotations

import sys
import textwrap
import uuid
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from beanwire.bean_factory import BeanFactory
from beanwire.exceptions import BeanwireScanError
from beanwire.markers import CONTROLLER, Stereotype
from beanwire.scanner import BeanScanner

PackageFactory = Callable[[dict[str, str]], str]


@pytest.fixture()
def make_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[PackageFactory]:
    """Write a uniquely named package to disk and make it importable."""
    monkeypatch.syspath_prepend(str(tmp_path))
    created: list[str] = []

    def make(files: dict[str, str]) -> str:
        name = f"scanned_{uuid.uuid4().hex}"
        created.append(name)
        for relative_path, source in files.items():
            path = tmp_path / name / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding="utf-8")
        return name

    yield make

    for name in created:
        for module_name in [module for module in sys.modules if module.startswith(name)]:
            del sys.modules[module_name]


SHOP_FILES = {
    "__init__.py": "",
    "repositories.py": """
        from beanwire import repository


        @repository
        class ProductRepository:
            pass
    """,
    "services/__init__.py": "",
    "services/catalog.py": """
        from beanwire import service

        from ..repositories import ProductRepository


        class Helper:
            pass


        @service
        class CatalogService:
            def __init__(self, products: ProductRepository) -> None:
                self.products = products
    """,
    "web.py": """
        from beanwire import controller

        from .repositories import ProductRepository
        from .services.catalog import CatalogService


        @controller
        class CatalogController:
            def __init__(self, catalog: CatalogService) -> None:
                self.catalog = catalog


        class Unmarked(CatalogController):
            pass
    """,
}


def _names(bean_types: object) -> list[str]:
    return [bean_type.__name__ for bean_type in bean_types]  # type: ignore[attr-defined]


def test_scan_collects_marked_classes_from_all_submodules(make_package: PackageFactory) -> None:
    package = make_package(SHOP_FILES)

    bean_set = BeanScanner(package).scan()

    assert _names(bean_set) == ["ProductRepository", "CatalogService", "CatalogController"]


def test_scan_records_stereotypes_as_capabilities(make_package: PackageFactory) -> None:
    package = make_package(SHOP_FILES)

    bean_set = BeanScanner(package).scan()
    controller_type = next(bean_type for bean_type in bean_set if bean_type.__name__ == "CatalogController")

    assert bean_set.has_capability(controller_type, CONTROLLER)


def test_scanned_bean_set_initializes(make_package: PackageFactory) -> None:
    package = make_package(SHOP_FILES)

    bean_factory = BeanFactory(BeanScanner(package).scan())
    bean_factory.initialize()

    controllers = list(bean_factory.get_controllers().values())
    assert len(controllers) == 1
    assert bean_factory.size() == 3
    assert type(controllers[0].catalog.products).__name__ == "ProductRepository"


def test_scan_filters_by_stereotype(make_package: PackageFactory) -> None:
    package = make_package(SHOP_FILES)

    bean_set = BeanScanner(package, stereotypes=[Stereotype.CONTROLLER]).scan()

    assert _names(bean_set) == ["CatalogController"]


def test_scan_accepts_modules(make_package: PackageFactory) -> None:
    package = make_package(SHOP_FILES)
    module = __import__(f"{package}.repositories", fromlist=["ProductRepository"])

    bean_set = BeanScanner(module).scan()

    assert _names(bean_set) == ["ProductRepository"]


def test_scan_deduplicates_overlapping_packages(make_package: PackageFactory) -> None:
    package = make_package(SHOP_FILES)

    bean_set = BeanScanner(package, f"{package}.services").scan()

    assert len(bean_set) == 3


def test_scan_wraps_import_errors(make_package: PackageFactory) -> None:
    package = make_package(
        {
            "__init__.py": "",
            "broken.py": "raise RuntimeError('cannot import')\n",
        },
    )

    with pytest.raises(BeanwireScanError, match="broken") as exc_info:
        BeanScanner(package).scan()

    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_scan_of_missing_package_raises() -> None:
    with pytest.raises(BeanwireScanError):
        BeanScanner("beanwire_missing_package_for_tests").scan()
