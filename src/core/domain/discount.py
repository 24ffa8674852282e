"""
DiscountBreakdown — Модель расчёта скидки

Immutable Pydantic модель, фиксирующая все промежуточные значения одного
вызова apply_discount: исходную цену, процент, размер скидки и итог.

Модель не ограничивает домен значений: отрицательная цена или процент
вне [0, 100] допустимы и обрабатываются арифметически.
"""

from pydantic import BaseModel, Field

from src.core.math.math_utils import apply_discount, discount_amount
from src.core.math.rounding import round_to_scale


class DiscountBreakdown(BaseModel):
    """Результат расчёта скидки (все денежные поля округлены до 2 знаков, кроме входов)."""

    price: float = Field(..., description="Исходная цена")
    discount_percent: float = Field(..., description="Скидка в процентах")
    discount_amount: float = Field(..., description="Размер скидки (округлён)")
    final_price: float = Field(..., description="Цена после скидки (округлена)")

    model_config = {"frozen": True}


def discount_breakdown(price: float, discount_percent: float) -> DiscountBreakdown:
    """
    Расчёт скидки с раскладкой по составляющим.

    Инвариант: final_price == apply_discount(price, discount_percent).

    Args:
        price: Исходная цена
        discount_percent: Скидка в процентах

    Returns:
        DiscountBreakdown

    Examples:
        >>> discount_breakdown(100.0, 10.0).final_price
        90.0
        >>> discount_breakdown(100.0, 10.0).discount_amount
        10.0
    """
    return DiscountBreakdown(
        price=price,
        discount_percent=discount_percent,
        discount_amount=round_to_scale(discount_amount(price, discount_percent)),
        final_price=apply_discount(price, discount_percent),
    )
