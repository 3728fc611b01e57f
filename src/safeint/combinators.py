"""
Combinators — Конструирование, извлечение и комбинирование SafeInt

Модуль содержит:
- invalid / from_int: конструирование
- get: единственный санкционированный выход из домена SafeInt
- map_ / map2: применение обычных int-функций с повторной валидацией результата
- and_then / and_then2: монадический bind без повторной валидации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пользовательская функция никогда не вызывается с Invalid операндом
2. Результат map_/map2 всегда проходит через from_int (функции не обязаны
   знать о валидности)
3. and_then доверяет результату f: повторной валидации нет
4. Исключения из пользовательских функций пробрасываются без изменений
"""

import logging
from collections.abc import Callable

from safeint.bounds import DEFAULT_BOUNDS, IntBounds
from safeint.safe_int import INVALID, Invalid, Safe, SafeInt
from safeint.validity import is_valid_int

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTRUCTION & EXTRACTION
# =============================================================================


def invalid() -> SafeInt:
    """
    Невалидное значение.

    Используется в пользовательских правилах валидности внутри and_then.
    """
    return INVALID


def from_int(value: int | float, bounds: IntBounds = DEFAULT_BOUNDS) -> SafeInt:
    """
    Классификация сырого значения: Safe или Invalid.

    Args:
        value: int или float. Float допускается только как результат
            пользовательских функций; целый конечный float приводится к int.
        bounds: Диапазон представимых значений (default: DEFAULT_BOUNDS)

    Returns:
        Safe(int(value), bounds) если значение валидно, иначе INVALID

    Raises:
        TypeError: Если value не int/float (bool тоже отклоняется)

    Examples:
        >>> from_int(42)
        Safe(value=42)
        >>> from_int(float("nan"))
        Invalid()
        >>> from_int(2**63)
        Invalid()
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"from_int expects int or float, got {type(value).__name__}: {value!r}"
        )

    if not is_valid_int(value, bounds):
        logger.debug("Value %r is not a valid integer in %s bounds", value, bounds.name)
        return INVALID

    return Safe(int(value), bounds)


def get(si: SafeInt) -> int | None:
    """
    Извлечение значения на границе домена.

    Returns:
        Обёрнутое целое для Safe, None для Invalid
    """
    if isinstance(si, Safe):
        return si.value
    return None


# =============================================================================
# MAP
# =============================================================================


def map_(
    f: Callable[[int], int | float], si: SafeInt, bounds: IntBounds = DEFAULT_BOUNDS
) -> SafeInt:
    """
    Применение f к обёрнутому значению с повторной валидацией.

    Args:
        f: Обычная функция int -> int
        si: Операнд
        bounds: Диапазон для проверки результата

    Returns:
        from_int(f(value)) для Safe, INVALID для Invalid (f не вызывается)

    Examples:
        >>> map_(lambda x: x + 1, from_int(1))
        Safe(value=2)
        >>> map_(lambda x: x + 1, invalid())
        Invalid()
    """
    if isinstance(si, Invalid):
        return INVALID
    return from_int(f(si.value), bounds)


def map2(
    op: Callable[[int, int], int | float],
    x: SafeInt,
    y: SafeInt,
    bounds: IntBounds = DEFAULT_BOUNDS,
) -> SafeInt:
    """
    Применение бинарной функции, если оба операнда Safe.

    Returns:
        from_int(op(x, y)) или INVALID (op не вызывается)
    """
    if isinstance(x, Invalid) or isinstance(y, Invalid):
        return INVALID
    return from_int(op(x.value, y.value), bounds)


# =============================================================================
# AND THEN
# =============================================================================


def and_then(si: SafeInt, f: Callable[[int], SafeInt]) -> SafeInt:
    """
    Монадический bind.

    Точка расширения для собственных правил валидности. Результат f
    возвращается как есть, без повторной проверки.

    Args:
        si: Операнд
        f: Функция int -> SafeInt

    Returns:
        f(value) для Safe, INVALID для Invalid (f не вызывается)

    Raises:
        TypeError: Если f вернула не SafeInt

    Examples:
        >>> no_twos = lambda x: invalid() if x == 2 else from_int(x)
        >>> and_then(from_int(2), no_twos)
        Invalid()
        >>> and_then(from_int(3), no_twos)
        Safe(value=3)
    """
    if isinstance(si, Invalid):
        return INVALID

    result = f(si.value)
    if not isinstance(result, SafeInt):
        raise TypeError(
            f"and_then callback must return SafeInt, got {type(result).__name__}"
        )
    return result


def and_then2(
    f: Callable[[int, int], SafeInt], x: SafeInt, y: SafeInt
) -> SafeInt:
    """
    Последовательный двойной bind: сначала x, затем y.

    Короткое замыкание на первом Invalid; x проверяется раньше y.
    """
    return and_then(x, lambda a: and_then(y, lambda b: f(a, b)))
