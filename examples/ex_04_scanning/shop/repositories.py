from __future__ import annotations

from beanwire import repository


@repository
class ProductRepository:
    def __init__(self) -> None:
        self.products = {"1": "keyboard", "2": "mouse"}

    def find(self, product_id: str) -> str | None:
        return self.products.get(product_id)
