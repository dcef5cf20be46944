# trycart

A small shopping-cart library. Prices are exact `decimal.Decimal` values. Each product
has its own percentage discount, and promotions can be applied on top of that discount.

## Modules

- `trycart.product`: `Product(id, price, discount=0, description="")`. The class is a
  frozen dataclass. The price is converted to a `Decimal`.
  - `discounted_price()` applies the product's own discount. A discount of 0 or less, or
    above 100, leaves the price unchanged.
  - `has_valid_discount()` tells whether the discount lies between 0 and 100 inclusive.
- `trycart.promotion`: the `PromotionType` enum has three members:
  - `PERCENTAGE_DISCOUNT`
  - `BUY1_GET1_FREE`
  - `TOTAL_DISCOUNT`

  `Promotion(promotion_type=..., product_id="", discount=0, id="")` takes keyword
  arguments only. Its `calculate_price(price, qty)` works as follows:
  - A percentage promotion takes its discount off `price`, then multiplies by `qty`.
  - Buy-one-get-one-free charges for half of `qty`, rounded up.
  - Any other type returns 0.
- `trycart.cart`:
  - `Cart.add_product(product, quantity)` checks the product and the quantity. If either
    is invalid it raises `CartValidationError`, a subclass of `ValueError`. The message
    starts with `invalid product:` or `invalid quantity:`, and the cart is left
    unchanged. Adding a product that is already in the cart increases its quantity.
  - `Cart.add_promotion(promotion)` keeps the first promotion given for each product. A
    `TOTAL_DISCOUNT` promotion replaces any earlier total-discount promotion.
  - `Cart.calculate_total()` works in three steps. It applies each product's discount,
    then that product's promotion if it has one, then the total discount.
  - `display_price(price)` rounds half up to exactly two decimal places and returns a
    string.
  - `validate_product(product)` and `validate_quantity(quantity)` raise
    `CartValidationError` on bad input.
- `trycart.repository`:
  - `CartRepository` is an abstract interface with these methods: `create`,
    `get_by_id`, `get_by_user_id`, `update`, `delete` and `exists`.
  - `InMemoryCartRepository` is a thread-safe, in-memory implementation. It keeps one
    cart per user.
  - Failures raise subclasses of `CartRepositoryError`:
    - `CartNotFoundError`
    - `CartExistsError`, which carries the existing `cart_id`
    - `InvalidCartIdError`
    - `InvalidUserIdError`
  - `update` raises `ValueError` when the cart is `None`.
  - `CartData` holds a stored cart together with its owner and its timestamps.
  - `CartService` holds a `CartRepository`.
- `trycart.sorting`:
  - `merge_sort(nums)` returns a new sorted list.
  - `select_sort(nums)` sorts the list in place and returns it.
- `trycart.demos`: the functions behind the commands listed below.

## Installation

```
pip install .
```

## Example

```python
from decimal import Decimal

from trycart.cart import Cart, display_price
from trycart.product import Product
from trycart.promotion import Promotion, PromotionType

cart = Cart()
cart.add_product(Product(id="A", price=Decimal("100.00"), discount=10), 3)
display_price(cart.calculate_total())  # '270.00'

cart.add_promotion(
    Promotion(product_id="A", promotion_type=PromotionType.PERCENTAGE_DISCOUNT, discount=18)
)
display_price(cart.calculate_total())  # '221.40'
```

## Commands

```
trycart-demo             # walk through products, discounts and promotions in a cart
trycart-sort             # merge-sort a sample list and print it
trycart-concurrent-map   # fill maps from many threads and print their sizes
```

## What it does not do

- It has no HTTP API and no server.
- Carts are stored only in memory, so they are lost when the process ends.
- `CartService` holds a repository but has no operations of its own.

## Running the tests

```
pip install .[test]
pytest
```