"""
SafeInt — Целое значение с отслеживанием валидности

Immutable tagged value с двумя вариантами:
- Safe(value, bounds): конечное представимое целое и диапазон, в котором
  оно было проверено
- Invalid: результат запрещённой операции (деление на ноль, отрицательная
  степень, переполнение, NaN/Inf). Payload отсутствует.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. SafeInt никогда не бывает "частично валидным": любая операция с Invalid
   операндом возвращает Invalid
2. Значения неизменяемы и хешируемы, равенство по значению (bounds в
   сравнении не участвуют)
3. Единственный санкционированный выход из домена — get()

Операторы Python (+ - * // % ** унарный - abs) на SafeInt делегируют в
safeint.operators и всегда возвращают SafeInt. Результат проверяется по
bounds операндов:
- левый Safe операнд задаёт bounds; если он Invalid, берутся bounds правого
- plain int с любой стороны поднимается через from_int с bounds
  SafeInt-операнда
- если оба операнда Invalid, используется DEFAULT_BOUNDS (результат всё
  равно Invalid)

Examples:
    >>> from safeint import IntBounds, from_int
    >>> (from_int(7) // from_int(2)).get()
    3
    >>> (from_int(5) // 0).get() is None
    True
    >>> int8 = IntBounds.signed(8)
    >>> (from_int(100, bounds=int8) + 100).get() is None
    True
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from safeint.bounds import DEFAULT_BOUNDS, IntBounds


# =============================================================================
# TYPE
# =============================================================================


class SafeInt:
    """
    Базовый тип для Safe и Invalid.

    Raises:
        TypeError: При попытке инстанцировать SafeInt напрямую
    """

    def __new__(cls, *args, **kwargs):
        if cls is SafeInt:
            raise TypeError("SafeInt cannot be instantiated directly; use from_int or invalid")
        return super().__new__(cls)

    @property
    def bounds(self) -> IntBounds:
        """Диапазон, по которому проверяются операции над значением"""
        return DEFAULT_BOUNDS

    def get(self) -> int | None:
        """Обёрнутое целое или None для Invalid"""
        from safeint.combinators import get

        return get(self)

    def map(
        self, f: Callable[[int], int | float], bounds: IntBounds | None = None
    ) -> "SafeInt":
        """Метод-обёртка над combinators.map_ (default: bounds значения)"""
        from safeint.combinators import map_

        return map_(f, self, bounds=bounds if bounds is not None else self.bounds)

    def and_then(self, f: Callable[[int], "SafeInt"]) -> "SafeInt":
        """Метод-обёртка над combinators.and_then"""
        from safeint.combinators import and_then

        return and_then(self, f)

    # -------------------------------------------------------------------------
    # Python operators
    # -------------------------------------------------------------------------

    def _binary(self, other: object, name: str, reflected: bool = False):
        from safeint import operators

        rhs = _lift(other, self.bounds)
        if rhs is None:
            return NotImplemented
        op = getattr(operators, name)
        if reflected:
            return op(rhs, self, bounds=_operand_bounds(rhs, self))
        return op(self, rhs, bounds=_operand_bounds(self, rhs))

    def __add__(self, other):
        return self._binary(other, "safe_add")

    def __radd__(self, other):
        return self._binary(other, "safe_add", reflected=True)

    def __sub__(self, other):
        return self._binary(other, "safe_sub")

    def __rsub__(self, other):
        return self._binary(other, "safe_sub", reflected=True)

    def __mul__(self, other):
        return self._binary(other, "safe_mul")

    def __rmul__(self, other):
        return self._binary(other, "safe_mul", reflected=True)

    def __floordiv__(self, other):
        return self._binary(other, "safe_div")

    def __rfloordiv__(self, other):
        return self._binary(other, "safe_div", reflected=True)

    def __mod__(self, other):
        return self._binary(other, "safe_mod")

    def __rmod__(self, other):
        return self._binary(other, "safe_mod", reflected=True)

    def __pow__(self, other, modulo=None):
        # 3-аргументный pow(x, y, m) не поддерживается
        if modulo is not None:
            return NotImplemented
        return self._binary(other, "safe_pow")

    def __rpow__(self, other):
        return self._binary(other, "safe_pow", reflected=True)

    def __neg__(self) -> "SafeInt":
        from safeint.operators import safe_neg

        return safe_neg(self, bounds=self.bounds)

    def __abs__(self) -> "SafeInt":
        from safeint.operators import safe_abs

        return safe_abs(self, bounds=self.bounds)


@dataclass(frozen=True)
class Safe(SafeInt):
    """
    Валидное конечное целое.

    Прямое конструирование допустимо для доверенных значений; проверка
    диапазона выполняется только через from_int. bounds сохраняются для
    Python-операторов и не участвуют в сравнении и хешировании.

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
    """

    value: int
    bounds: IntBounds = field(default=DEFAULT_BOUNDS, compare=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"Safe value must be int, got {type(self.value).__name__}: {self.value!r}"
            )


@dataclass(frozen=True)
class Invalid(SafeInt):
    """Результат операции, не давшей конечного представимого целого"""


# Каноническое значение Invalid
INVALID: Final[Invalid] = Invalid()


# =============================================================================
# HELPERS
# =============================================================================


def _operand_bounds(left: SafeInt, right: SafeInt) -> IntBounds:
    """Bounds бинарной операции: левого Safe операнда, иначе правого"""
    if isinstance(left, Safe):
        return left.bounds
    return right.bounds


def _lift(other: object, bounds: IntBounds) -> SafeInt | None:
    """Поднятие операнда Python-оператора в SafeInt; None если тип не поддерживается"""
    if isinstance(other, SafeInt):
        return other
    if isinstance(other, bool):
        return None
    if isinstance(other, (int, float)):
        from safeint.combinators import from_int

        return from_int(other, bounds)
    return None
