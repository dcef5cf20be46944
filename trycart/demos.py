"""Command-line demonstrations of the cart, the sorts and concurrent maps."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from trycart.cart import Cart, display_price
from trycart.product import Product
from trycart.promotion import Promotion, PromotionType
from trycart.sorting import merge_sort

_WORKERS = 100


def _parse(argv: Sequence[str] | None, description: str) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Walk through a cart with product discounts and promotions."""
    _parse(argv, "Shopping cart with product discounts demo.")
    print("=== Shopping Cart with Product Discounts Demo ===")

    product_a = Product(id="A", price=Decimal("100.00"), discount=10)
    product_b = Product(id="B", price=Decimal("200.00"), discount=0)
    product_c = Product(id="C", price=Decimal("50.53"), discount=15)

    print("Products:")
    for product in (product_a, product_b, product_c):
        print(
            f"Product {product.id}: Original {display_price(product.price)}, "
            f"Discount {product.discount}%, "
            f"Final {display_price(product.discounted_price())}"
        )
    print()

    lines = [(product_a, 3), (product_b, 1), (product_c, 2)]
    cart = Cart()
    for product, quantity in lines:
        cart.add_product(product, quantity)

    print("Cart contents:")
    for product, quantity in lines:
        line_total = product.discounted_price() * quantity
        print(f"- Product {product.id} x{quantity}: {display_price(line_total)}")
    print(f"Subtotal (with product discounts): {display_price(cart.calculate_total())}")
    print()

    print("Applying additional promotions:")
    cart.add_promotion(
        Promotion(
            product_id="A",
            promotion_type=PromotionType.PERCENTAGE_DISCOUNT,
            discount=18,
        )
    )
    print("- Product A: Additional 18% promotion discount")
    cart.add_promotion(
        Promotion(product_id="C", promotion_type=PromotionType.BUY1_GET1_FREE)
    )
    print("- Product C: Buy 1 Get 1 Free promotion")
    print(f"Final Total: {display_price(cart.calculate_total())}")
    print()

    print("=== Product Discount Validation ===")
    invalid = Product(id="INVALID", price=Decimal("100.00"), discount=150)
    valid_text = "true" if invalid.has_valid_discount() else "false"
    print(f"Product with 150% discount is valid: {valid_text}")
    print(
        f"Invalid product discounted price: "
        f"{display_price(invalid.discounted_price())} (should be original price)"
    )
    return 0


def sort_main(argv: Sequence[str] | None = None) -> int:
    """Merge-sort a fixed list of integers and print it."""
    _parse(argv, "Merge sort demo.")
    nums = [3, 7, 6, -10, 15, 23, 55, -13]
    print("[" + " ".join(str(n) for n in merge_sort(nums)) + "]")
    return 0


class _ConcurrentMap:
    """A dictionary whose stores and iteration are guarded by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[int, int] = {}

    def store(self, key: int, value: int) -> None:
        with self._lock:
            self._data[key] = value

    def __iter__(self) -> Iterator[tuple[int, int]]:
        with self._lock:
            snapshot = list(self._data.items())
        return iter(snapshot)


def concurrent_map_main(argv: Sequence[str] | None = None) -> int:
    """Fill maps from many threads safely and print their sizes."""
    _parse(argv, "Concurrent map writes demo.")

    locked: dict[int, int] = {}
    lock = threading.Lock()

    def store_locked(value: int) -> None:
        with lock:
            locked[value] = value

    with ThreadPoolExecutor(max_workers=_WORKERS) as pool:
        list(pool.map(store_locked, range(_WORKERS)))
    print("Map size (with Mutex):", len(locked))

    shared = _ConcurrentMap()
    with ThreadPoolExecutor(max_workers=_WORKERS) as pool:
        list(pool.map(lambda value: shared.store(value, value), range(_WORKERS)))
    size = sum(1 for _ in shared)
    print("Map size (with concurrent map):", size)
    return 0