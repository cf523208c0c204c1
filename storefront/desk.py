"""Storefront desk: login, a product table for staff and a shopping session."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from storefront.models import Product, StoreError


class Role(enum.Enum):
    """Who a login belongs to."""

    ADMIN = "admin"
    CUSTOMER = "customer"


DEFAULT_ACCOUNTS: dict[tuple[str, str], Role] = {
    ("admin", "admin123"): Role.ADMIN,
    ("customer", "cust123"): Role.CUSTOMER,
}

SAMPLE_PRODUCTS: tuple[str, ...] = (
    "1. Laptop - $1000",
    "2. Phone - $500",
    "3. Keyboard - $50",
    "4. Mouse - $25",
)

VALID_COUPONS = frozenset({"WELCOME10", "SUMMER20"})
COUPON_DISCOUNT = 0.1
ORDER_SEPARATOR = "----------------------------"


def authenticate(email: str, password: str) -> Role:
    """Return the role of a known login."""
    role = DEFAULT_ACCOUNTS.get((email, password))
    if role is None:
        raise StoreError("Invalid credentials")
    return role


def _parse_float(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return 0.0


def _parse_int(value: object) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else 0
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


class ProductTable:
    """Staff table of products, numbered by row."""

    HEADERS = ("ID", "Name", "Price", "Quantity")

    def __init__(self) -> None:
        self.rows: list[Product] = []

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.rows)

    def add_product(self, name: object, price: object, quantity: object) -> Product:
        """Add a row from entered values; text that is not a number counts as 0."""
        name_text = str(name)
        price_value = _parse_float(price)
        quantity_value = _parse_int(quantity)
        if not name_text or price_value <= 0 or quantity_value <= 0:
            raise StoreError("Please enter valid name, price, and quantity.")
        product = Product(len(self.rows) + 1, name_text, price_value, quantity_value)
        self.rows.append(product)
        return product


class ShopSession:
    """A shopper's cart over a fixed catalogue, with orders kept in a text file."""

    def __init__(
        self,
        orders_path: str | os.PathLike[str] = "orders.txt",
        catalogue: Iterable[str] = SAMPLE_PRODUCTS,
    ) -> None:
        self.orders_path = Path(orders_path)
        self.catalogue = list(catalogue)
        self.cart: list[str] = []

    def add_to_cart(self, item: str | None) -> None:
        """Add a catalogue entry to the cart."""
        if item is None or item not in self.catalogue:
            raise StoreError("Please select a product to add.")
        self.cart.append(item)

    def place_order(self) -> list[str]:
        """Append the cart to the orders file, empty it and return what was ordered."""
        if not self.cart:
            raise StoreError("Your cart is empty!")
        lines = ["New Order:"]
        lines.extend(f"- {item}" for item in self.cart)
        lines.append(ORDER_SEPARATOR)
        try:
            with self.orders_path.open("a", encoding="utf-8") as handle:
                handle.write("\n".join(lines) + "\n")
        except OSError as exc:
            raise StoreError("Unable to save order to file.") from exc
        ordered = list(self.cart)
        self.cart.clear()
        return ordered

    def apply_coupon(self, code: str) -> float | None:
        """Return the discount for a known code; an empty code does nothing."""
        if not code:
            return None
        if code in VALID_COUPONS:
            return COUPON_DISCOUNT
        raise StoreError("Invalid or expired coupon.")

    def order_history(self) -> str:
        """Everything recorded in the orders file."""
        try:
            return self.orders_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError("Could not read order history.") from exc