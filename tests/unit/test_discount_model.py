"""
Tests for DiscountBreakdown

Покрывает:
- Раскладку скидки по составляющим
- Согласованность с apply_discount
- Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import DiscountBreakdown, discount_breakdown
from src.core.math import apply_discount


class TestDiscountBreakdown:
    """Тесты для discount_breakdown"""

    def test_breakdown_fields(self) -> None:
        """Все составляющие расчёта"""
        breakdown = discount_breakdown(100.0, 10.0)
        assert breakdown.price == 100.0
        assert breakdown.discount_percent == 10.0
        assert breakdown.discount_amount == 10.0
        assert breakdown.final_price == 90.0

    @pytest.mark.parametrize(
        "price, percent",
        [
            (100.0, 10.0),
            (0.25, 50.0),
            (100.0, -10.0),
            (-100.0, 10.0),
            (59.99, 15.0),
        ],
    )
    def test_final_price_matches_apply_discount(self, price: float, percent: float) -> None:
        """Инвариант: final_price == apply_discount(price, percent)"""
        assert discount_breakdown(price, percent).final_price == apply_discount(price, percent)

    def test_negative_percent_accepted(self) -> None:
        """Домен не ограничивается"""
        breakdown = discount_breakdown(100.0, -10.0)
        assert breakdown.discount_amount == -10.0
        assert breakdown.final_price == 110.0

    def test_discount_amount_rounded(self) -> None:
        """discount_amount округляется до 2 знаков"""
        assert discount_breakdown(0.25, 50.0).discount_amount == 0.13

    def test_immutable(self) -> None:
        """DiscountBreakdown должен быть immutable (frozen=True)"""
        breakdown = discount_breakdown(100.0, 10.0)
        with pytest.raises(ValidationError):
            breakdown.final_price = 0.0

    def test_non_numeric_field_rejected(self) -> None:
        """Поля должны быть float"""
        with pytest.raises(ValidationError):
            DiscountBreakdown(
                price="not-a-number",
                discount_percent=10.0,
                discount_amount=10.0,
                final_price=90.0,
            )

    def test_model_dump(self) -> None:
        """Сериализация в dict"""
        assert discount_breakdown(100.0, 10.0).model_dump() == {
            "price": 100.0,
            "discount_percent": 10.0,
            "discount_amount": 10.0,
            "final_price": 90.0,
        }
