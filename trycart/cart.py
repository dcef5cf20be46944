"""A shopping cart with product discounts and promotions."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext

from trycart.product import Product
from trycart.promotion import Promotion, PromotionType

_HUNDRED = Decimal(100)
_CENTS = Decimal("0.01")


class CartValidationError(ValueError):
    """Raised when a product or quantity cannot go into a cart."""


@dataclass
class CartItem:
    """A product and how many of it are in the cart."""

    product: Product
    quantity: int


@dataclass
class Cart:
    """Cart lines keyed by product id, with per-product and total promotions."""

    items: dict[str, CartItem] = field(default_factory=dict)
    promotions: dict[str, Promotion] = field(default_factory=dict)
    total_discount_promotion: Promotion | None = None

    def add_product(self, product: Product, quantity: int) -> None:
        """Add ``quantity`` of ``product``, merging with an existing line."""
        try:
            validate_product(product)
        except CartValidationError as exc:
            raise CartValidationError(f"invalid product: {exc}") from exc
        try:
            validate_quantity(quantity)
        except CartValidationError as exc:
            raise CartValidationError(f"invalid quantity: {exc}") from exc

        item = self.items.get(product.id)
        if item is not None:
            item.quantity += quantity
        else:
            self.items[product.id] = CartItem(product=product, quantity=quantity)

    def add_promotion(self, promotion: Promotion) -> None:
        """Register a promotion; the first one for a product wins."""
        if promotion.promotion_type is PromotionType.TOTAL_DISCOUNT:
            self.total_discount_promotion = promotion
            return
        self.promotions.setdefault(promotion.product_id, promotion)

    def calculate_total(self) -> Decimal:
        """Return the cart total after product discounts and promotions."""
        total = Decimal(0)
        for item in self.items.values():
            price = item.product.discounted_price()
            promo = self.promotions.get(item.product.id)
            if promo is None:
                total += price * item.quantity
            else:
                total += promo.calculate_price(price, item.quantity)

        if self.total_discount_promotion is not None:
            discount = self.total_discount_promotion.discount
            total = total * (_HUNDRED - discount) / _HUNDRED
        return total


def display_price(price: Decimal) -> str:
    """Format a price with exactly two decimal places."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(price.as_tuple().digits) + 4)
        rounded = price.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:f}"


def validate_product(product: Product) -> None:
    """Raise CartValidationError if the product's data is not acceptable."""
    if not product.id.strip():
        raise CartValidationError("product ID cannot be empty")
    if product.price < 0:
        raise CartValidationError("product price cannot be negative")
    if not product.has_valid_discount():
        raise CartValidationError("product discount must be between 0 and 100")


def validate_quantity(quantity: int) -> None:
    """Raise CartValidationError unless the quantity is positive."""
    if quantity <= 0:
        raise CartValidationError("quantity must be a positive integer")