"""A small online store: catalogue, cart, coupons, orders, reviews and a console menu."""

__version__ = "0.1.0"