"""
Тесты для combinators: конструирование, извлечение, map / and_then

Проверяет:
1. from_int / invalid / get
2. map_ и map2: повторная валидация, отсутствие вызова f на Invalid
3. and_then и and_then2: короткое замыкание и порядок проверки
4. Логирование отклонённых значений
"""

import logging
from fractions import Fraction

import pytest

from safeint.bounds import INT32_BOUNDS
from safeint.combinators import and_then, and_then2, from_int, get, invalid, map2, map_
from safeint.safe_int import INVALID, Safe


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def calls() -> list:
    """Журнал вызовов пользовательских функций"""
    return []


# =============================================================================
# CONSTRUCTION & EXTRACTION
# =============================================================================


class TestFromInt:
    """Тесты для from_int"""

    def test_valid_int(self) -> None:
        assert from_int(42) == Safe(42)
        assert from_int(-42) == Safe(-42)
        assert from_int(0) == Safe(0)

    def test_overflow_is_invalid(self) -> None:
        assert from_int(2**63) == INVALID
        assert from_int(-(2**63) - 1) == INVALID

    def test_custom_bounds(self) -> None:
        assert from_int(2**31, bounds=INT32_BOUNDS) == INVALID
        assert from_int(2**31 - 1, bounds=INT32_BOUNDS) == Safe(2**31 - 1)

    def test_nan_and_infinity_are_invalid(self) -> None:
        assert from_int(float("nan")) == INVALID
        assert from_int(float("inf")) == INVALID
        assert from_int(float("-inf")) == INVALID

    def test_whole_float_normalised_to_int(self) -> None:
        result = from_int(8.0)
        assert result == Safe(8)
        assert type(get(result)) is int

    def test_fractional_float_is_invalid(self) -> None:
        assert from_int(2.5) == INVALID

    def test_rejects_non_numeric(self) -> None:
        with pytest.raises(TypeError, match="from_int expects int or float"):
            from_int("5")

    def test_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            from_int(True)

    def test_rejects_other_real_types(self) -> None:
        with pytest.raises(TypeError, match="from_int expects int or float"):
            from_int(Fraction(3, 1))

    def test_keeps_bounds_on_result(self) -> None:
        assert from_int(7, bounds=INT32_BOUNDS).bounds == INT32_BOUNDS

    def test_rejection_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="safeint.combinators"):
            from_int(2**64)
        assert "not a valid integer in int64 bounds" in caplog.text


class TestGet:
    """Тесты для get и invalid"""

    def test_round_trip(self) -> None:
        assert get(from_int(123)) == 123

    def test_invalid_yields_none(self) -> None:
        assert get(invalid()) is None

    def test_invalid_is_canonical(self) -> None:
        assert invalid() is INVALID


# =============================================================================
# MAP
# =============================================================================


class TestMap:
    """Тесты для map_"""

    def test_applies_function(self) -> None:
        assert map_(lambda x: x * 3, from_int(4)) == Safe(12)

    def test_revalidates_result(self) -> None:
        assert map_(lambda x: x * 2, from_int(2**62)) == INVALID

    def test_revalidates_non_finite_result(self) -> None:
        assert map_(lambda x: float("inf"), from_int(1)) == INVALID

    def test_revalidates_with_custom_bounds(self) -> None:
        assert map_(lambda x: x + 1, from_int(2**31 - 1), bounds=INT32_BOUNDS) == INVALID

    def test_callback_returning_fraction_rejected(self) -> None:
        with pytest.raises(TypeError, match="from_int expects int or float"):
            map_(lambda x: Fraction(x, 1), from_int(3))

    def test_not_called_on_invalid(self, calls) -> None:
        assert map_(calls.append, invalid()) == INVALID
        assert calls == []

    def test_callback_exception_propagates(self) -> None:
        def boom(x: int) -> int:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            map_(boom, from_int(1))


class TestMap2:
    """Тесты для map2"""

    def test_applies_when_both_safe(self) -> None:
        assert map2(lambda a, b: a - b, from_int(10), from_int(3)) == Safe(7)

    def test_not_called_when_either_invalid(self, calls) -> None:
        def op(a: int, b: int) -> int:
            calls.append((a, b))
            return a + b

        assert map2(op, invalid(), from_int(1)) == INVALID
        assert map2(op, from_int(1), invalid()) == INVALID
        assert map2(op, invalid(), invalid()) == INVALID
        assert calls == []

    def test_revalidates_result(self) -> None:
        assert map2(lambda a, b: a * b, from_int(2**40), from_int(2**40)) == INVALID


# =============================================================================
# AND THEN
# =============================================================================


def reject_two(x: int):
    """Собственное правило валидности: литерал 2 невалиден"""
    if x == 2:
        return invalid()
    return from_int(x)


class TestAndThen:
    """Тесты для and_then"""

    def test_custom_validity_rule(self) -> None:
        assert and_then(from_int(2), reject_two) == INVALID
        assert and_then(from_int(3), reject_two) == Safe(3)

    def test_short_circuit(self, calls) -> None:
        def f(x: int):
            calls.append(x)
            return from_int(x)

        assert and_then(invalid(), f) == INVALID
        assert calls == []

    def test_result_not_revalidated(self) -> None:
        # Результат f доверенный: Safe вне int64 возвращается как есть
        assert and_then(from_int(1), lambda x: Safe(2**70)) == Safe(2**70)

    def test_callback_must_return_safe_int(self) -> None:
        with pytest.raises(TypeError, match="must return SafeInt"):
            and_then(from_int(1), lambda x: x + 1)


class TestAndThen2:
    """Тесты для and_then2"""

    def test_applies_when_both_safe(self) -> None:
        assert and_then2(lambda a, b: from_int(a * b), from_int(6), from_int(7)) == Safe(42)

    def test_short_circuits_on_either(self, calls) -> None:
        def f(a: int, b: int):
            calls.append((a, b))
            return from_int(a)

        assert and_then2(f, invalid(), from_int(1)) == INVALID
        assert and_then2(f, from_int(1), invalid()) == INVALID
        assert calls == []

    def test_passes_operands_in_order(self) -> None:
        order = []

        def f(a: int, b: int):
            order.append((a, b))
            return from_int(a - b)

        assert and_then2(f, from_int(5), from_int(3)) == Safe(2)
        assert order == [(5, 3)]
