"""
Rounding — Scaled Half-Up Rounding

Модуль обеспечивает детерминированное округление денежных и средних значений
до фиксированного числа знаков после запятой:
- round_half_up: округление до целого, ничья (.5) → в сторону +inf
- round_to_scale: округление value * scale с обратным делением на scale

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ничья всегда округляется вверх: 2.5 → 3, -2.5 → -2
2. Промежуточное value + 0.5 не вычисляется (0.49999999999999994 → 0)
3. NaN → 0, ±Inf и значения вне 64-битного диапазона насыщаются до его границ
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# ROUNDING-ПАРАМЕТРЫ
# =============================================================================

# Множитель масштаба: 100 → два знака после запятой
ROUNDING_SCALE: Final[int] = 100

# Порог дробной части, начиная с которого округляем вверх
HALF: Final[float] = 0.5

# Границы 64-битного целого: результат округления насыщается до них
LONG_MIN: Final[int] = -(2**63)
LONG_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление до ближайшего целого, ничья → в сторону +inf.

    Отличается от встроенного round() (banker's rounding, ничья → к чётному)
    и от ROUND_HALF_UP в decimal (ничья → от нуля) поведением на
    отрицательных ничьих.

    Дробная часть value - floor(value) вычисляется точно для любого
    конечного double, поэтому сравнение с 0.5 не теряет точности.

    Результат ограничен 64-битным диапазоном [LONG_MIN, LONG_MAX]:
    NaN → 0, +inf → LONG_MAX, -inf → LONG_MIN.

    Args:
        value: Исходное значение

    Returns:
        Округлённое целое

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
        >>> round_half_up(2.4999)
        2
        >>> round_half_up(0.49999999999999994)
        0
        >>> round_half_up(float("nan"))
        0
    """
    if math.isnan(value):
        return 0
    if value == math.inf:
        return LONG_MAX
    if value == -math.inf:
        return LONG_MIN

    floor_value = math.floor(value)

    if value - floor_value >= HALF:
        floor_value += 1

    return min(max(floor_value, LONG_MIN), LONG_MAX)


def round_to_scale(value: float, scale: int = ROUNDING_SCALE) -> float:
    """
    Округление значения на масштабе scale.

    Формула: float(round_half_up(value * scale)) / scale

    Целое переводится в float до деления, поэтому NaN даёт 0.0,
    а +inf даёт float(LONG_MAX) / scale.

    Args:
        value: Значение для округления
        scale: Множитель масштаба (default: ROUNDING_SCALE, два знака)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если scale <= 0

    Examples:
        >>> round_to_scale(1.23456)
        1.23
        >>> round_to_scale(0.125)
        0.13
        >>> round_to_scale(-0.125)
        -0.12
        >>> round_to_scale(1.25, scale=10)
        1.3
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    return float(round_half_up(value * scale)) / scale
