"""
Core math modules

Параметры точности, трансцендентные функции произвольной точности,
guard-функции предусловий и итеративное возведение в степень.
"""

# Preconditions
from src.core.math.preconditions import (
    # Exceptions
    InvalidArgumentViolation,
    InvalidStateViolation,
    NullArgumentViolation,
    ReciprocalViolation,
    # Guards
    check_argument,
    check_state,
    require_non_null,
)

# Context
from src.core.math.context import (
    # Precision
    ACOS_GUARD_DIGITS,
    BIG_E,
    BIG_PI,
    DECIMAL128,
    DEFAULT_MATH_CONTEXT,
    EXACT,
    LONG_MAX,
    LONG_MIN,
    # Transcendentals
    big_e,
    big_pi,
    decimal_acos,
    decimal_cos,
    decimal_sin,
    decimal_sqrt,
    # Utilities
    decimal_of_float,
    is_long,
    is_power_of_two,
    signum,
)

# Power
from src.core.math.power import power_by_squaring

__all__ = [
    # Preconditions — Exceptions
    "ReciprocalViolation",
    "NullArgumentViolation",
    "InvalidArgumentViolation",
    "InvalidStateViolation",
    # Preconditions — Guards
    "require_non_null",
    "check_argument",
    "check_state",
    # Context — Precision
    "DECIMAL128",
    "EXACT",
    "DEFAULT_MATH_CONTEXT",
    "ACOS_GUARD_DIGITS",
    "LONG_MIN",
    "LONG_MAX",
    "BIG_PI",
    "BIG_E",
    # Context — Transcendentals
    "big_pi",
    "big_e",
    "decimal_acos",
    "decimal_cos",
    "decimal_sin",
    "decimal_sqrt",
    # Context — Utilities
    "decimal_of_float",
    "is_long",
    "is_power_of_two",
    "signum",
    # Power
    "power_by_squaring",
]
