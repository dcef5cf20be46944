"""Shopping cart with product discounts, promotions, an in-memory repository and sorts."""

__version__ = "0.1.0"

__all__ = ["cart", "demos", "product", "promotion", "repository", "sorting"]