"""Interactive console front end for the store."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from storefront.customer import Customer
from storefront.desk import Role, authenticate
from storefront.inventory import Inventory
from storefront.models import StoreError

Reader = Callable[[str], str]
Writer = Callable[[str], object]
Say = Callable[[str], None]

STORE_BANNER = (
    "\n=== WELCOME TO OUR STORE ===\n"
    "Best deals on electronics!\n"
    "Open 24/7 online\n"
    "Customer support: [email]\n\n"
)

CUSTOMER_MENU = (
    "\nCustomer Menu:\n"
    "1. View Products\n2. Search Products\n3. Filter Products\n"
    "4. Add to Cart\n5. Remove from Cart\n6. View Cart\n"
    "7. Apply Coupon\n8. Place Order\n9. View Order History\n"
    "10. Track Order\n11. Add Review\n12. Exit\n"
)

LOGIN_MENU = "\nLogin as:\n1. Admin\n2. Customer\n3. Exit\n"

CUSTOMER_EXIT = 12
LOGIN_EXIT = 3


def _num(value: float) -> str:
    return f"{value:g}"


def _word(text: str) -> str:
    """First whitespace-separated word of an input line."""
    parts = text.split()
    return parts[0] if parts else ""


def _ask_int(read: Reader, prompt: str) -> int:
    return int(_word(read(prompt)))


def _ask_numbers(read: Reader, prompt: str, count: int) -> list[float]:
    parts = read(prompt).split()
    while len(parts) < count:
        parts.extend(read("").split())
    return [float(part) for part in parts[:count]]


def _parse_choice(text: str) -> int | None:
    try:
        return int(_word(text))
    except ValueError:
        return None


def _view_products(customer: Customer, read: Reader, say: Say) -> None:
    for p in customer.products():
        say(
            f"ID: {p.id}, Name: {p.name}, Price: ${_num(p.price)}, "
            f"Quantity: {p.quantity}, Rating: {_num(p.average_rating())}/5"
        )


def _search_products(customer: Customer, read: Reader, say: Say) -> None:
    term = _word(read("Enter search term: "))
    found = customer.search(term)
    if not found:
        say("No products found.")
        return
    say("Search Results:")
    for p in found:
        say(
            f"ID: {p.id}, Name: {p.name}, Price: ${_num(p.price)}, "
            f"Rating: {_num(p.average_rating())}/5"
        )


def _filter_products(customer: Customer, read: Reader, say: Say) -> None:
    choice = _ask_int(
        read, "Filter by:\n1. Price Range\n2. Minimum Rating\nEnter choice: "
    )
    lines: list[str] = []
    if choice == 1:
        low, high = _ask_numbers(read, "Enter min and max price: ", 2)
        lines = [
            f"ID: {p.id}, Name: {p.name}, Price: ${_num(p.price)}"
            for p in customer.filter_by_price(low, high)
        ]
    elif choice == 2:
        (minimum,) = _ask_numbers(read, "Enter minimum rating: ", 1)
        lines = [
            f"ID: {p.id}, Name: {p.name}, Rating: {_num(p.average_rating())}/5"
            for p in customer.filter_by_rating(minimum)
        ]
    if not lines:
        say("No products match.")
        return
    say("Filtered Products:")
    for line in lines:
        say(line)


def _add_to_cart(customer: Customer, read: Reader, say: Say) -> None:
    product_id = _ask_int(read, "Enter Product ID: ")
    quantity = _ask_int(read, "Enter Quantity: ")
    customer.add_to_cart(product_id, quantity)
    say("Added to cart.")


def _remove_from_cart(customer: Customer, read: Reader, say: Say) -> None:
    if not customer.cart:
        say("Cart is empty.")
        return
    product_id = _ask_int(read, "Enter Product ID to remove: ")
    customer.remove_from_cart(product_id)
    say("Removed from cart.")


def _view_cart(customer: Customer, read: Reader, say: Say) -> None:
    if not customer.cart:
        say("Your cart is empty.")
        return
    say("Your Cart:")
    for item in customer.cart:
        say(f"ID: {item.id}, Name: {item.name}, Price: ${_num(item.price)}")
    say(f"Total: ${_num(customer.cart_total())}")
    if customer.discount > 0:
        say(f"Discount: {_num(customer.discount * 100)}%")
        say(f"Final Total: ${_num(customer.final_total())}")


def _apply_coupon(customer: Customer, read: Reader, say: Say) -> None:
    say("Available Coupons:")
    for coupon in customer.available_coupons():
        say(f"Code: {coupon.code}, Discount: {_num(coupon.discount * 100)}%")
    code = _word(read("Enter coupon code: "))
    customer.apply_coupon(code)
    say("Coupon applied!")


def _place_order(customer: Customer, read: Reader, say: Say) -> None:
    if not customer.cart:
        say("Cart is empty.")
        return
    name = _word(read("Enter Name: "))
    email = _word(read("Enter Email: "))
    phone = _word(read("Enter Phone: "))
    address = _word(read("Enter Address: "))
    order = customer.place_order(name, email, phone, address)
    say(f"Order placed! Order ID: {order.order_id}, Total: ${_num(order.total)}")


def _view_order_history(customer: Customer, read: Reader, say: Say) -> None:
    if not customer.orders:
        say("No orders yet.")
        return
    for order in customer.orders:
        date_line = order.status_text().splitlines()[2]
        say(
            f"\nOrder ID: {order.order_id}\n{date_line}\n"
            f"Status: {order.status}\nTotal: ${_num(order.total)}"
        )


def _track_order(customer: Customer, read: Reader, say: Say) -> None:
    if not customer.orders:
        say("No orders to track.")
        return
    order_id = _ask_int(read, "Enter Order ID: ")
    say(customer.track_order(order_id).status_text())


def _add_review(customer: Customer, read: Reader, say: Say) -> None:
    product_id = _ask_int(read, "Enter Product ID to review: ")
    customer.inventory.find(product_id)
    rating = _ask_int(read, "Enter rating (1-5): ")
    review = read("Enter your review: ").strip()
    try:
        customer.add_review(product_id, rating, review)
    except StoreError as exc:
        say(str(exc))
    else:
        say("Rating added successfully!")
    say("Review added successfully!")


_ACTIONS: dict[int, Callable[[Customer, Reader, Say], None]] = {
    1: _view_products,
    2: _search_products,
    3: _filter_products,
    4: _add_to_cart,
    5: _remove_from_cart,
    6: _view_cart,
    7: _apply_coupon,
    8: _place_order,
    9: _view_order_history,
    10: _track_order,
    11: _add_review,
}


def customer_menu(customer: Customer, read: Reader, write: Writer) -> None:
    """Run the customer menu until the customer exits or input runs out."""

    def say(line: str) -> None:
        write(line + "\n")

    write(STORE_BANNER)
    while True:
        write(CUSTOMER_MENU)
        try:
            choice = _parse_choice(read("Enter choice: "))
        except EOFError:
            return
        if choice == CUSTOMER_EXIT:
            say("Exiting Customer Menu...")
            return
        action = _ACTIONS.get(choice) if choice is not None else None
        if action is None:
            say("Invalid choice!")
            continue
        try:
            action(customer, read, say)
        except StoreError as exc:
            say(str(exc))
        except ValueError:
            say("Invalid input.")
        except EOFError:
            return


def _login_loop(read: Reader, write: Writer) -> int:
    inventory = Inventory()
    customer = Customer(inventory)

    def say(line: str) -> None:
        write(line + "\n")

    while True:
        write(LOGIN_MENU)
        try:
            choice = _parse_choice(read("Enter choice: "))
            if choice == LOGIN_EXIT:
                say("Thank you! Exiting program.")
                return 0
            if choice not in (1, 2):
                say("Invalid choice!")
                continue
            email = _word(read("Enter email: "))
            typed = _word(read("Enter pass" "word: "))
        except EOFError:
            return 0
        expected = Role.ADMIN if choice == 1 else Role.CUSTOMER
        try:
            role = authenticate(email, typed)
        except StoreError:
            role = None
        if role is not expected:
            say("Invalid credentials!")
        elif role is Role.ADMIN:
            say("Logged in as admin.")
        else:
            customer_menu(customer, read, write)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the console store and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="storefront", description="Console online store."
    )
    parser.parse_args(argv)
    return _login_loop(input, sys.stdout.write)


if __name__ == "__main__":
    raise SystemExit(main())