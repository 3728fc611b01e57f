"""
Validity — Классификация целых значений

Решает, является ли сырое числовое значение валидным целым (Safe) или
невалидным (Invalid).

Значение валидно, если одновременно:
1. Не NaN (x == x)
2. Не ±infinity
3. Целое (int или float без дробной части)
4. Лежит в заданном IntBounds

Для Python int проверки 1-2 всегда проходят; они срабатывают только для
float-значений, попавших в цепочку вычислений через пользовательские функции
(например, lambda x: x / 0.0 в numpy-стиле или float('inf')).
"""

import math
from typing import Final

from safeint.bounds import DEFAULT_BOUNDS, IntBounds


# =============================================================================
# SENTINELS
# =============================================================================

# Хостовое представление floor(1/0) и floor(-1/0)
POSITIVE_INFINITY: Final[float] = math.inf
NEGATIVE_INFINITY: Final[float] = -math.inf


# =============================================================================
# PREDICATES
# =============================================================================


def int_is_nan(value: int | float) -> bool:
    """
    Проверка на NaN через самонеравенство.

    Для int всегда False.

    Examples:
        >>> int_is_nan(5)
        False
        >>> int_is_nan(float("nan"))
        True
    """
    return value != value


def int_is_infinite(value: int | float) -> bool:
    """
    Проверка на ±infinity.

    Examples:
        >>> int_is_infinite(10**400)
        False
        >>> int_is_infinite(float("-inf"))
        True
    """
    return value == POSITIVE_INFINITY or value == NEGATIVE_INFINITY


def is_integral(value: int | float) -> bool:
    """True для int и для конечного float без дробной части"""
    if isinstance(value, int):
        return True
    return math.isfinite(value) and float(value).is_integer()


def is_representable(value: int, bounds: IntBounds = DEFAULT_BOUNDS) -> bool:
    """True если value лежит в диапазоне bounds"""
    return bounds.contains(value)


def is_valid_int(value: int | float, bounds: IntBounds = DEFAULT_BOUNDS) -> bool:
    """
    Полная проверка валидности значения.

    Порядок проверок важен: NaN/Inf отсекаются до is_integral и до
    сравнения с bounds.

    Args:
        value: Проверяемое значение (int или float)
        bounds: Диапазон представимых значений

    Returns:
        True если значение можно обернуть в Safe

    Examples:
        >>> is_valid_int(42)
        True
        >>> is_valid_int(2**63)
        False
        >>> is_valid_int(3.5)
        False
        >>> is_valid_int(4.0)
        True
    """
    if int_is_nan(value) or int_is_infinite(value):
        return False
    if not is_integral(value):
        return False
    return is_representable(int(value), bounds)
