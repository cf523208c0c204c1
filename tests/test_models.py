import time

import pytest

from storefront.models import Coupon, Order, Product, StoreError


def make_product():
    return Product(1, "Laptop", 1000.0, 3)


def test_average_rating_without_ratings_is_zero():
    assert make_product().average_rating() == 0


def test_average_rating_of_equal_ratings():
    product = make_product()
    product.add_rating(4)
    product.add_rating(4)
    assert product.average_rating() == 4
    assert product.ratings == [4, 4]


def test_average_rating_lies_between_extremes():
    product = make_product()
    for rating in (1, 5, 3, 2):
        product.add_rating(rating)
    assert 1 <= product.average_rating() <= 5


@pytest.mark.parametrize("rating", [0, 6, -1])
def test_out_of_range_rating_rejected(rating):
    product = make_product()
    with pytest.raises(StoreError):
        product.add_rating(rating)
    assert product.ratings == []


@pytest.mark.parametrize("rating", [1, 5])
def test_boundary_ratings_accepted(rating):
    product = make_product()
    product.add_rating(rating)
    assert product.ratings == [rating]


def test_reviews_kept_in_order():
    product = make_product()
    product.add_review("great")
    product.add_review("fine")
    assert product.reviews == ["great", "fine"]


def test_products_do_not_share_lists():
    first = make_product()
    second = make_product()
    first.add_review("only mine")
    assert second.reviews == []


def test_order_defaults():
    order = Order()
    assert order.status == "Processing"
    assert order.order_id == 0
    assert order.item_count == 0
    assert order.total == 0


def test_order_item_count_follows_items():
    order = Order(order_id=1000, items=[make_product(), make_product()])
    assert order.item_count == len(order.items)


def test_order_status_text_contents():
    stamp = time.time()
    order = Order(order_id=1000, status="Processing", order_date=stamp, total=25.0)
    text = order.status_text()
    assert "Order ID: 1000" in text
    assert "Status: Processing" in text
    assert time.ctime(stamp) in text
    assert text.endswith("Total: $25")


def test_coupon_valid_before_expiry():
    coupon = Coupon("WELCOME10", 0.1, 100.0)
    assert coupon.is_valid(50.0) is True


def test_coupon_invalid_at_and_after_expiry():
    coupon = Coupon("WELCOME10", 0.1, 100.0)
    assert coupon.is_valid(100.0) is False
    assert coupon.is_valid(150.0) is False


def test_coupon_uses_current_time_by_default():
    assert Coupon("SUMMER20", 0.2, time.time() + 3600).is_valid() is True
    assert Coupon("SUMMER20", 0.2, time.time() - 3600).is_valid() is False