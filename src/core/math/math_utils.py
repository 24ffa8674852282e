"""
MathUtils — Average, Maximum, Discount

Набор чистых арифметических функций без состояния:
- compute_average: среднее арифметическое с округлением до 2 знаков
- max_of_three: максимум из трёх целых через попарное сравнение
- apply_discount: цена после скидки в процентах с округлением до 2 знаков

Функции не валидируют домен входов: отрицательные цены и проценты вне
[0, 100] обрабатываются арифметически. Пустой или отсутствующий вход
для среднего возвращает 0.0, исключения не выбрасываются.
"""

import logging
from typing import Final, Sequence

from src.core.math.rounding import ROUNDING_SCALE, round_to_scale

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Результат среднего для None или пустой последовательности
EMPTY_AVERAGE: Final[float] = 0.0

# База процентов: discount_percent / PERCENT_BASE → доля
PERCENT_BASE: Final[float] = 100.0


# =============================================================================
# AVERAGE
# =============================================================================


def compute_average(values: Sequence[float] | None) -> float:
    """
    Среднее арифметическое, округлённое до 2 знаков (half-up).

    Сумма накапливается последовательно слева направо обычным сложением
    float (не math.fsum), затем делится на количество элементов.

    Args:
        values: Последовательность float (может быть None или пустой)

    Returns:
        round_to_scale(sum(values) / len(values)) или EMPTY_AVERAGE

    Examples:
        >>> compute_average([1.0, 2.0, 3.0, 4.0])
        2.5
        >>> compute_average([1.0, 2.0, 2.0])
        1.67
        >>> compute_average([])
        0.0
        >>> compute_average(None)
        0.0
    """
    if values is None or len(values) == 0:
        logger.debug("compute_average: empty input, returning %s", EMPTY_AVERAGE)
        return EMPTY_AVERAGE

    total = 0.0
    for value in values:
        total += value

    average = total / len(values)
    return round_to_scale(average, ROUNDING_SCALE)


# =============================================================================
# MAXIMUM
# =============================================================================


def max_of_three(a: int, b: int, c: int) -> int:
    """
    Максимум из трёх целых: max(max(a, b), c).

    Examples:
        >>> max_of_three(1, 2, 3)
        3
        >>> max_of_three(-5, -1, -10)
        -1
    """
    result = max(a, b)
    result = max(result, c)
    return result


# =============================================================================
# DISCOUNT
# =============================================================================


def discount_amount(price: float, discount_percent: float) -> float:
    """Размер скидки без округления: price * (discount_percent / 100)."""
    return price * (discount_percent / PERCENT_BASE)


def apply_discount(price: float, discount_percent: float) -> float:
    """
    Цена после скидки, округлённая до 2 знаков (half-up).

    Формула:
        discount = price * (discount_percent / 100)
        final = round_to_scale(price - discount)

    Отрицательный процент увеличивает цену, процент > 100 даёт
    отрицательную цену. Валидация не выполняется.

    Args:
        price: Исходная цена
        discount_percent: Скидка в процентах (например 10.0 для 10%)

    Returns:
        Итоговая цена

    Examples:
        >>> apply_discount(100.0, 10.0)
        90.0
        >>> apply_discount(100.0, -10.0)
        110.0
    """
    final_price = price - discount_amount(price, discount_percent)
    return round_to_scale(final_price, ROUNDING_SCALE)


# =============================================================================
# ALIASES
# =============================================================================

# Имена, под которыми функции вызывает харнесс перевода
calculate_average = compute_average
find_maximum = max_of_three
