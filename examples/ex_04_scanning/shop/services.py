from __future__ import annotations

from beanwire import service
from shop.repositories import ProductRepository


@service
class CatalogService:
    def __init__(self, products: ProductRepository) -> None:
        self.products = products

    def describe(self, product_id: str) -> str:
        return self.products.find(product_id) or "unknown"


class PriceFormatter:
    """Not a bean: it carries no stereotype."""
