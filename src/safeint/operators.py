"""
Operators — Безопасная целочисленная арифметика

Контракт каждого оператора: ведёт себя как встроенный оператор, если оба
операнда валидны и операция определена; иначе возвращает INVALID. Никогда
не бросает исключений.

| Оператор  | Функция  | Невалиден, если                                   |
|-----------|----------|---------------------------------------------------|
| +         | safe_add | операнд Invalid, результат вне bounds             |
| -         | safe_sub | то же                                             |
| *         | safe_mul | то же                                             |
| //        | safe_div | делитель 0, операнд Invalid, результат вне bounds |
| %         | safe_mod | делитель 0, операнд Invalid                       |
| **        | safe_pow | показатель < 0, операнд Invalid, переполнение     |
| унарный - | safe_neg | операнд Invalid, результат вне bounds             |
| abs       | safe_abs | то же                                             |

Деление — floor division (округление к -infinity): -7 // 2 == -4.
Остаток — floor modulo (знак делителя), согласован с делением:
x == (x // y) * y + x % y.

Защитные проверки выполняются ДО встроенной операции, поэтому
ZeroDivisionError и вычисление гигантских степеней не происходят.
"""

import logging
import operator

from safeint.bounds import DEFAULT_BOUNDS, IntBounds
from safeint.combinators import and_then2, from_int, invalid, map2, map_
from safeint.safe_int import SafeInt

logger = logging.getLogger(__name__)


# =============================================================================
# ADDITIVE / MULTIPLICATIVE
# =============================================================================


def safe_add(x: SafeInt, y: SafeInt, bounds: IntBounds = DEFAULT_BOUNDS) -> SafeInt:
    """Сложение"""
    return map2(operator.add, x, y, bounds)


def safe_sub(x: SafeInt, y: SafeInt, bounds: IntBounds = DEFAULT_BOUNDS) -> SafeInt:
    """Вычитание"""
    return map2(operator.sub, x, y, bounds)


def safe_mul(x: SafeInt, y: SafeInt, bounds: IntBounds = DEFAULT_BOUNDS) -> SafeInt:
    """Умножение"""
    return map2(operator.mul, x, y, bounds)


# =============================================================================
# DIVISION
# =============================================================================


def safe_div(x: SafeInt, y: SafeInt, bounds: IntBounds = DEFAULT_BOUNDS) -> SafeInt:
    """
    Floor division с защитой от деления на ноль.

    Examples:
        >>> safe_div(from_int(7), from_int(2))
        Safe(value=3)
        >>> safe_div(from_int(-7), from_int(2))
        Safe(value=-4)
        >>> safe_div(from_int(5), from_int(0))
        Invalid()
    """

    def divide(a: int, b: int) -> SafeInt:
        if b == 0:
            logger.debug("safe_div: division by zero (%d // 0)", a)
            return invalid()
        return from_int(a // b, bounds)

    return and_then2(divide, x, y)


def safe_mod(x: SafeInt, y: SafeInt, bounds: IntBounds = DEFAULT_BOUNDS) -> SafeInt:
    """
    Floor modulo с явной защитой от нулевого делителя.

    Examples:
        >>> safe_mod(from_int(-7), from_int(3))
        Safe(value=2)
        >>> safe_mod(from_int(7), from_int(0))
        Invalid()
    """

    def modulo(a: int, b: int) -> SafeInt:
        if b == 0:
            logger.debug("safe_mod: modulo by zero (%d %% 0)", a)
            return invalid()
        return from_int(a % b, bounds)

    return and_then2(modulo, x, y)


# =============================================================================
# POWER
# =============================================================================


def _checked_pow(base: int, exponent: int, bounds: IntBounds) -> int | None:
    """
    Возведение в степень с ранним выходом при переполнении.

    Exponentiation by squaring; как только промежуточный модуль превышает
    границы, возвращается None. Основания 0, 1, -1 обрабатываются без цикла,
    поэтому огромные показатели не приводят к долгим вычислениям.

    Args:
        base: Основание
        exponent: Показатель (>= 0)
        bounds: Диапазон представимых значений

    Returns:
        base ** exponent или None при переполнении
    """
    if exponent == 0:
        return 1
    if base in (0, 1):
        return base
    if base == -1:
        return 1 if exponent % 2 == 0 else -1

    # Модуль результата выше limit означает переполнение
    limit = max(abs(bounds.min_value), bounds.max_value)
    result = 1
    square = base
    while True:
        if exponent & 1:
            result *= square
            if abs(result) > limit:
                return None
        exponent >>= 1
        if not exponent:
            return result
        square *= square
        if abs(square) > limit:
            # |base| >= 2, оставшийся показатель >= 1: результат выйдет за limit
            return None


def safe_pow(x: SafeInt, y: SafeInt, bounds: IntBounds = DEFAULT_BOUNDS) -> SafeInt:
    """
    Возведение в неотрицательную целую степень.

    Examples:
        >>> safe_pow(from_int(2), from_int(3))
        Safe(value=8)
        >>> safe_pow(from_int(2), from_int(-1))
        Invalid()
    """

    def power(base: int, exponent: int) -> SafeInt:
        if exponent < 0:
            logger.debug("safe_pow: negative exponent (%d ** %d)", base, exponent)
            return invalid()
        result = _checked_pow(base, exponent, bounds)
        if result is None:
            logger.debug(
                "safe_pow: %d ** %d overflows %s bounds", base, exponent, bounds.name
            )
            return invalid()
        return from_int(result, bounds)

    return and_then2(power, x, y)


# =============================================================================
# UNARY
# =============================================================================


def safe_neg(x: SafeInt, bounds: IntBounds = DEFAULT_BOUNDS) -> SafeInt:
    """Смена знака; -min_value переполняет знаковые bounds"""
    return map_(operator.neg, x, bounds)


def safe_abs(x: SafeInt, bounds: IntBounds = DEFAULT_BOUNDS) -> SafeInt:
    """Модуль; abs(min_value) переполняет знаковые bounds"""
    return map_(abs, x, bounds)
