"""
Core math modules

Чистые арифметические функции и примитив масштабного округления.
"""

# Rounding
from src.core.math.rounding import (
    HALF,
    LONG_MAX,
    LONG_MIN,
    ROUNDING_SCALE,
    round_half_up,
    round_to_scale,
)

# MathUtils
from src.core.math.math_utils import (
    EMPTY_AVERAGE,
    PERCENT_BASE,
    apply_discount,
    calculate_average,
    compute_average,
    discount_amount,
    find_maximum,
    max_of_three,
)

__all__ = [
    # Rounding — Constants
    "HALF",
    "LONG_MAX",
    "LONG_MIN",
    "ROUNDING_SCALE",
    # Rounding — Functions
    "round_half_up",
    "round_to_scale",
    # MathUtils — Constants
    "EMPTY_AVERAGE",
    "PERCENT_BASE",
    # MathUtils — Functions
    "apply_discount",
    "compute_average",
    "discount_amount",
    "max_of_three",
    # MathUtils — Aliases
    "calculate_average",
    "find_maximum",
]
