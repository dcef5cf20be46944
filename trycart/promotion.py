"""Promotions that change what a cart line costs."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

_HUNDRED = Decimal(100)


class PromotionType(str, Enum):
    """The kinds of promotion a cart understands."""

    PERCENTAGE_DISCOUNT = "percentageDiscount"
    BUY1_GET1_FREE = "buy1Get1Free"
    TOTAL_DISCOUNT = "totalDiscount"


@dataclass(frozen=True, kw_only=True)
class Promotion:
    """A promotion on one product, or on the whole cart for TOTAL_DISCOUNT."""

    promotion_type: PromotionType
    product_id: str = ""
    discount: int = 0
    id: str = ""

    def calculate_price(self, price: Decimal, qty: int) -> Decimal:
        """Return what ``qty`` units at ``price`` cost under this promotion."""
        if self.promotion_type is PromotionType.PERCENTAGE_DISCOUNT:
            unit = price * (_HUNDRED - self.discount) / _HUNDRED
            return unit * qty
        if self.promotion_type is PromotionType.BUY1_GET1_FREE:
            paid_qty = -(-qty // 2)
            return price * paid_qty
        return Decimal(0)