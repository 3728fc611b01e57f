"""
IntBounds — Диапазон представимых целых чисел

Python int имеет произвольную точность и никогда не переполняется сам по себе.
Чтобы сохранить контракт "операция, не дающая конечного представимого целого,
возвращает Invalid", переполнение выражается явно: результат вне IntBounds
считается невалидным.

Модуль содержит:
- IntBounds: immutable Pydantic модель диапазона [min_value, max_value]
- Пресеты для типичных разрядностей (int32, int64, JS safe integer)
- DEFAULT_BOUNDS: диапазон по умолчанию для всех операций (signed int64)

Глобальной изменяемой конфигурации нет: каждая конструирующая операция
принимает bounds как keyword-параметр.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# MODEL
# =============================================================================


class IntBounds(BaseModel):
    """
    Замкнутый диапазон представимых целых [min_value, max_value].

    Attributes:
        name: Человекочитаемое имя диапазона (для логов и repr)
        min_value: Минимальное представимое значение (включительно)
        max_value: Максимальное представимое значение (включительно)
    """

    name: str = Field("custom", min_length=1, description="Имя диапазона")
    min_value: int = Field(..., description="Минимальное представимое значение")
    max_value: int = Field(..., description="Максимальное представимое значение")

    model_config = {"frozen": True, "strict": True}

    @field_validator("max_value")
    @classmethod
    def validate_max_greater_than_min(cls, v: int, info) -> int:
        """Проверка, что max_value > min_value"""
        if "min_value" in info.data:
            min_value = info.data["min_value"]
            if v <= min_value:
                raise ValueError(f"max_value {v} must be > min_value {min_value}")
        return v

    def contains(self, value: int) -> bool:
        """True если value лежит в [min_value, max_value]"""
        return self.min_value <= value <= self.max_value

    @classmethod
    def signed(cls, bits: int) -> "IntBounds":
        """
        Диапазон знакового целого в дополнительном коде.

        Args:
            bits: Разрядность (>= 2)

        Returns:
            IntBounds [-2**(bits-1), 2**(bits-1) - 1]

        Raises:
            ValueError: Если bits < 2

        Examples:
            >>> IntBounds.signed(8).min_value, IntBounds.signed(8).max_value
            (-128, 127)
        """
        if bits < 2:
            raise ValueError(f"bits must be >= 2, got {bits}")
        half = 1 << (bits - 1)
        return cls(name=f"int{bits}", min_value=-half, max_value=half - 1)


# =============================================================================
# PRESETS
# =============================================================================

# Знаковое 32-битное целое
INT32_BOUNDS: Final[IntBounds] = IntBounds.signed(32)

# Знаковое 64-битное целое
INT64_BOUNDS: Final[IntBounds] = IntBounds.signed(64)

# Целые, точно представимые в IEEE-754 double (Number.MAX_SAFE_INTEGER)
JS_SAFE_BOUNDS: Final[IntBounds] = IntBounds(
    name="js_safe",
    min_value=-(2**53 - 1),
    max_value=2**53 - 1,
)

# Диапазон по умолчанию для from_int и всех операторов
DEFAULT_BOUNDS: Final[IntBounds] = INT64_BOUNDS
