from __future__ import annotations

from beanwire import controller
from shop.services import CatalogService


@controller
class CatalogController:
    def __init__(self, catalog: CatalogService) -> None:
        self.catalog = catalog
