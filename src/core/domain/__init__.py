"""
Domain models and value objects.

Contains the DiscountBreakdown value object.
"""

from src.core.domain.discount import DiscountBreakdown, discount_breakdown

__all__ = [
    "DiscountBreakdown",
    "discount_breakdown",
]
