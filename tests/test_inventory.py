import pytest

from storefront.inventory import MAX_PRODUCTS, Inventory
from storefront.models import StoreError


def test_add_product_keeps_fields():
    inventory = Inventory()
    product = inventory.add_product("Phone", 500.0, 7)
    assert (product.name, product.price, product.quantity) == ("Phone", 500.0, 7)
    assert list(inventory) == [product]


def test_ids_are_unique_and_increasing():
    inventory = Inventory()
    ids = [inventory.add_product(f"item{n}", 1.0, 1).id for n in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_find_returns_same_product():
    inventory = Inventory()
    inventory.add_product("Keyboard", 50.0, 2)
    mouse = inventory.add_product("Mouse", 25.0, 4)
    assert inventory.find(mouse.id) is mouse


def test_find_unknown_raises():
    inventory = Inventory()
    inventory.add_product("Keyboard", 50.0, 2)
    with pytest.raises(StoreError):
        inventory.find(-1)


def test_capacity_limit():
    inventory = Inventory()
    for n in range(MAX_PRODUCTS):
        inventory.add_product(f"item{n}", 1.0, 1)
    assert len(inventory) == MAX_PRODUCTS
    with pytest.raises(StoreError):
        inventory.add_product("overflow", 1.0, 1)
    assert len(inventory) == MAX_PRODUCTS


def test_profit_starts_at_zero_and_accumulates():
    inventory = Inventory()
    assert inventory.net_profit == 0
    inventory.add_to_profit(1000.0)
    inventory.add_to_profit(500.0)
    assert inventory.net_profit == pytest.approx(1000.0 + 500.0)