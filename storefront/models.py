"""Core store records: products, orders and coupons."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

MIN_RATING = 1
MAX_RATING = 5


class StoreError(Exception):
    """Raised when a store operation cannot be carried out."""


@dataclass
class Product:
    """An item for sale, with its customer ratings and reviews."""

    id: int
    name: str
    price: float
    quantity: int = 0
    ratings: list[int] = field(default_factory=list)
    reviews: list[str] = field(default_factory=list)

    def add_rating(self, rating: int) -> None:
        """Record a rating from 1 to 5."""
        if not MIN_RATING <= rating <= MAX_RATING:
            raise StoreError(
                "Invalid rating. Please enter a number between 1 and 5."
            )
        self.ratings.append(rating)

    def add_review(self, review: str) -> None:
        """Record a free-text review."""
        self.reviews.append(review)

    def average_rating(self) -> float:
        """Mean of all ratings, or 0 when there are none."""
        if not self.ratings:
            return 0.0
        return sum(self.ratings) / len(self.ratings)


@dataclass
class Order:
    """A placed order with its items and final total."""

    order_id: int = 0
    items: list[Product] = field(default_factory=list)
    status: str = "Processing"
    order_date: float = field(default_factory=time.time)
    total: float = 0.0

    @property
    def item_count(self) -> int:
        return len(self.items)

    def status_text(self) -> str:
        """Human-readable summary of the order's state."""
        return (
            f"Order ID: {self.order_id}\n"
            f"Status: {self.status}\n"
            f"Date: {time.ctime(self.order_date)}\n"
            f"Total: ${self.total:g}"
        )


@dataclass(frozen=True)
class Coupon:
    """A discount code valid until its expiry timestamp."""

    code: str
    discount: float
    expiry: float

    def is_valid(self, now: float | None = None) -> bool:
        """True while ``now`` (default: the current time) is before expiry."""
        if now is None:
            now = time.time()
        return now < self.expiry