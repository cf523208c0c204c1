"""Shopping actions available to a customer: browsing, cart, coupons, orders."""

from __future__ import annotations

import time
from collections.abc import Callable

from storefront.inventory import Inventory
from storefront.models import Coupon, Order, Product, StoreError

MAX_ORDERS = 50
MAX_COUPONS = 10
MAX_CART_ITEMS = 100
FIRST_ORDER_ID = 1000

_DAY = 24 * 60 * 60


class Customer:
    """A shopper working against a shared inventory."""

    def __init__(
        self, inventory: Inventory, clock: Callable[[], float] = time.time
    ) -> None:
        self.inventory = inventory
        self._clock = clock
        self.cart: list[Product] = []
        self.orders: list[Order] = []
        self.discount = 0.0
        now = clock()
        self.coupons: list[Coupon] = [
            Coupon("WELCOME10", 0.1, now + 30 * _DAY),
            Coupon("SUMMER20", 0.2, now + 15 * _DAY),
        ]

    def products(self) -> list[Product]:
        """All products currently on sale."""
        return list(self.inventory.products)

    def search(self, term: str) -> list[Product]:
        """Products whose name contains ``term`` (case-sensitive)."""
        return [p for p in self.inventory.products if term in p.name]

    def filter_by_price(self, min_price: float, max_price: float) -> list[Product]:
        return [
            p for p in self.inventory.products if min_price <= p.price <= max_price
        ]

    def filter_by_rating(self, min_rating: float) -> list[Product]:
        return [
            p for p in self.inventory.products if p.average_rating() >= min_rating
        ]

    def add_to_cart(self, product_id: int, quantity: int) -> None:
        """Put ``quantity`` units of a product in the cart, up to the cart's capacity."""
        product = self.inventory.find(product_id)
        if product.quantity < quantity:
            raise StoreError(f"Only {product.quantity} in stock.")
        room = MAX_CART_ITEMS - len(self.cart)
        self.cart.extend([product] * max(0, min(quantity, room)))

    def remove_from_cart(self, product_id: int) -> None:
        """Remove one unit of a product from the cart."""
        if not self.cart:
            raise StoreError("Cart is empty.")
        for index, item in enumerate(self.cart):
            if item.id == product_id:
                del self.cart[index]
                return
        raise StoreError("Product not in cart.")

    def cart_total(self) -> float:
        return sum(item.price for item in self.cart)

    def final_total(self) -> float:
        """Cart total after the applied discount."""
        return self.cart_total() * (1 - self.discount)

    def available_coupons(self) -> list[Coupon]:
        now = self._clock()
        return [c for c in self.coupons if c.is_valid(now)]

    def apply_coupon(self, code: str) -> Coupon:
        """Apply a valid coupon's discount to the next order."""
        now = self._clock()
        for coupon in self.coupons:
            if coupon.code == code and coupon.is_valid(now):
                self.discount = coupon.discount
                return coupon
        raise StoreError("Invalid or expired coupon.")

    def place_order(self, name: str, email: str, phone: str, address: str) -> Order:
        """Turn the cart into an order, reduce stock and book the profit."""
        if not self.cart:
            raise StoreError("Cart is empty.")
        stock = {p.id: p for p in self.inventory.products}
        for item in self.cart:
            stocked = stock.get(item.id)
            if stocked is not None:
                stocked.quantity -= 1
        if len(self.orders) >= MAX_ORDERS:
            raise StoreError("Order limit reached.")
        subtotal = self.cart_total()
        total = subtotal - subtotal * self.discount
        order = Order(
            order_id=FIRST_ORDER_ID + len(self.orders),
            items=list(self.cart),
            status="Processing",
            order_date=self._clock(),
            total=total,
        )
        self.inventory.add_to_profit(total)
        self.orders.append(order)
        self.cart.clear()
        self.discount = 0.0
        return order

    def track_order(self, order_id: int) -> Order:
        if not self.orders:
            raise StoreError("No orders to track.")
        for order in self.orders:
            if order.order_id == order_id:
                return order
        raise StoreError("Order not found.")

    def add_review(self, product_id: int, rating: int, review: str) -> None:
        """Review a product; the review is kept even if the rating is rejected."""
        product = self.inventory.find(product_id)
        product.add_review(review)
        product.add_rating(rating)