# storefront

A small online store. It keeps a product catalogue and the store's takings,
and lets a customer browse and search the catalogue, fill a cart, apply a
coupon, place and track orders, and leave ratings and reviews. It can be
driven from a terminal menu or used directly from Python.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The console store

```
storefront
```

The command takes no options other than `--help`. It opens a login menu:

```
Login as:
1. Admin
2. Customer
3. Exit
```

and asks for an e-mail and a password, which are checked against the
built-in accounts in `storefront.desk.DEFAULT_ACCOUNTS`. A customer login
opens the customer menu:

1. View products
2. Search products by name (case-sensitive, first word of the input)
3. Filter products by price range or minimum average rating
4. Add to cart
5. Remove from cart (one unit at a time)
6. View cart, with the discount and final total when a coupon is applied
7. Apply coupon
8. Place order
9. View order history
10. Track an order
11. Add a review
12. Exit

Every customer has two coupons: `WELCOME10` (10% off, valid for 30 days)
and `SUMMER20` (20% off, valid for 15 days). Order numbers start at 1000.
A cart holds up to 100 items and a customer may place up to 50 orders.
Refused requests and unreadable numbers are reported and the menu carries
on; the program ends at the exit choice or at end of input.

## Using it from Python

`storefront.models` holds the records:

- `Product(id, name, price, quantity=0)` with `add_rating(rating)` (1 to 5
  only), `add_review(review)` and `average_rating()` (0 when unrated).
- `Order` with `order_id`, `items`, `item_count`, `status`, `order_date`,
  `total` and `status_text()`.
- `Coupon(code, discount, expiry)` with `is_valid(now=None)`.
- `StoreError`, raised wherever the store refuses a request: an unknown
  product, more items than are in stock, an empty cart, an unknown or
  expired coupon, a rating out of range, a full catalogue or order list.

`storefront.inventory.Inventory` is the catalogue, up to 100 products:
`add_product(name, price, quantity)` gives each product the next id
starting at 1, `find(product_id)` looks one up, and `add_to_profit(amount)`
adds to `net_profit`. It can be iterated and has a length.

`storefront.customer.Customer(inventory, clock=time.time)` works against an
inventory: `products`, `search`, `filter_by_price`, `filter_by_rating`,
`add_to_cart`, `remove_from_cart`, `cart_total`, `final_total`,
`available_coupons`, `apply_coupon`, `place_order`, `track_order` and
`add_review`. Placing an order takes one unit of stock for every item in
the cart, adds the discounted total to the inventory's profit, and clears
the cart and the applied coupon. `add_review` keeps the review even when
the rating is rejected.

```python
from storefront.inventory import Inventory
from storefront.customer import Customer

inventory = Inventory()
laptop = inventory.add_product("Laptop", 1000.0, 5)
shopper = Customer(inventory)
shopper.add_to_cart(laptop.id, 2)
shopper.apply_coupon("WELCOME10")
order = shopper.place_order("Sam", "sam@example.com", "n/a", "Home")
print(order.order_id, order.total)   # 1000 1800.0
```

`storefront.cli.customer_menu(customer, read, write)` runs the customer
menu over any input and output callables, and `storefront.cli.main(argv)`
runs the whole console program.

## The desk model

`storefront.desk` models a simpler, screen-style store:

- `authenticate(email, password)` returns the account's `Role`
  (`ADMIN` or `CUSTOMER`) or raises `StoreError`.
- `ProductTable.add_product(name, price, quantity)` adds a row numbered
  from 1. Text that is not a number counts as 0; the name must not be
  empty and the price and quantity must be positive.
- `ShopSession(orders_path="orders.txt", catalogue=SAMPLE_PRODUCTS)` holds
  a cart of catalogue entries. `add_to_cart` accepts only entries in the
  catalogue, `place_order` appends the cart to the orders file and empties
  it, `order_history` reads that file back, and `apply_coupon` returns a
  10% discount for `WELCOME10` or `SUMMER20`, `None` for an empty code, and
  raises `StoreError` for anything else.

## What it does not do

- There is no admin menu in the console program. An admin login is
  accepted and acknowledged, but products cannot be added, listed or
  removed, and the net profit cannot be shown, from the terminal; the
  console store starts with an empty catalogue. Use `Inventory` from
  Python to stock it.
- Nothing is saved between runs of the console program; only the desk
  model's `ShopSession` writes its orders to a file.
- There are no graphical screens; the desk model is plain Python objects.