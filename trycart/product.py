"""Products sold through the cart."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

_HUNDRED = Decimal(100)


def _as_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Product:
    """A product with a price and a percentage discount (0-100)."""

    id: str
    price: Decimal
    discount: int = 0
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", _as_decimal(self.price))

    def discounted_price(self) -> Decimal:
        """Return the price after the product's own discount.

        A discount outside 1..100 leaves the price unchanged.
        """
        if self.discount <= 0 or self.discount > 100:
            return self.price
        return self.price * (_HUNDRED - self.discount) / _HUNDRED

    def has_valid_discount(self) -> bool:
        """Tell whether the discount lies between 0 and 100 inclusive."""
        return 0 <= self.discount <= 100