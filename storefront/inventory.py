"""The store's product catalogue and takings."""

from __future__ import annotations

from collections.abc import Iterator

from storefront.models import Product, StoreError

MAX_PRODUCTS = 100


class Inventory:
    """Products on sale and the profit earned from orders."""

    def __init__(self) -> None:
        self.products: list[Product] = []
        self.net_profit = 0.0
        self._next_id = 1

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __len__(self) -> int:
        return len(self.products)

    def add_product(self, name: str, price: float, quantity: int) -> Product:
        """Add a product under a fresh id and return it."""
        if len(self.products) >= MAX_PRODUCTS:
            raise StoreError("Product list is full.")
        product = Product(self._next_id, name, price, quantity)
        self._next_id += 1
        self.products.append(product)
        return product

    def find(self, product_id: int) -> Product:
        """Return the product with this id."""
        for product in self.products:
            if product.id == product_id:
                return product
        raise StoreError("Product not found.")

    def add_to_profit(self, amount: float) -> None:
        self.net_profit += amount