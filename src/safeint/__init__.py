"""
SafeInt — целые числа с отслеживанием валидности

Обёртка над int, не позволяющая невалидным состояниям (деление на ноль,
отрицательная степень, переполнение, NaN/Inf) молча распространяться по
цепочке вычислений. Вся арифметика возвращает SafeInt; значение извлекается
один раз, на границе, через get().
"""

# Bounds
from safeint.bounds import (
    DEFAULT_BOUNDS,
    INT32_BOUNDS,
    INT64_BOUNDS,
    JS_SAFE_BOUNDS,
    IntBounds,
)

# Type
from safeint.safe_int import (
    INVALID,
    Invalid,
    Safe,
    SafeInt,
)

# Validity
from safeint.validity import (
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    int_is_infinite,
    int_is_nan,
    is_valid_int,
)

# Combinators
from safeint.combinators import (
    and_then,
    from_int,
    get,
    invalid,
    map2,
    map_,
)

# Operators
from safeint.operators import (
    safe_abs,
    safe_add,
    safe_div,
    safe_mod,
    safe_mul,
    safe_neg,
    safe_pow,
    safe_sub,
)

__all__ = [
    # Bounds
    "DEFAULT_BOUNDS",
    "INT32_BOUNDS",
    "INT64_BOUNDS",
    "JS_SAFE_BOUNDS",
    "IntBounds",
    # Type
    "INVALID",
    "Invalid",
    "Safe",
    "SafeInt",
    # Validity
    "NEGATIVE_INFINITY",
    "POSITIVE_INFINITY",
    "int_is_infinite",
    "int_is_nan",
    "is_valid_int",
    # Combinators
    "and_then",
    "from_int",
    "get",
    "invalid",
    "map2",
    "map_",
    # Operators
    "safe_abs",
    "safe_add",
    "safe_div",
    "safe_mod",
    "safe_mul",
    "safe_neg",
    "safe_pow",
    "safe_sub",
]
