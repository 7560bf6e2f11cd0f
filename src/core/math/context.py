"""
Context — Параметры точности и арифметические примитивы произвольной точности

Модуль задаёт единые правила округления для всех числовых типов:
- DECIMAL128: фиксированная высокая точность (34 значащих цифры, HALF_EVEN)
- EXACT: неограниченная точность для точных +, -, *, целых степеней
- Трансцендентные функции (acos, cos, sin, pi) через mpmath
- Целочисленные утилиты (диапазон 64-bit, степень двойки)

ВАЖНО: операторы Decimal (+, -, *, унарный -) округляют по thread-local
контексту (28 цифр по умолчанию). Поэтому точные операции выполняются
только через EXACT.add / EXACT.multiply / Decimal.copy_negate и т.д.

Контексты — разделяемые константы, их нельзя модифицировать.
"""

import logging
import threading
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
)
from typing import Final

import mpmath

logger = logging.getLogger(__name__)

# Собственный MPContext на поток: точность mpmath не разделяется между потоками
_thread_state = threading.local()


# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Фиксированная высокая точность: IEEE 754 decimal128
# Используется для деления, sqrt, acos и конверсий в Decimal
DECIMAL128: Final[Context] = Context(
    prec=34,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
)

# Неограниченная точность: результат +, -, * и целых степеней всегда точен
# Нельзя использовать для деления или sqrt (результат может быть бесконечным)
EXACT: Final[Context] = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
)

# Контекст по умолчанию для операций без явного math_context
DEFAULT_MATH_CONTEXT: Final[Context] = DECIMAL128

# Дополнительные рабочие цифры для mpmath
ACOS_GUARD_DIGITS: Final[int] = 10

# Диапазон signed 64-bit integer
LONG_MIN: Final[int] = -(2**63)
LONG_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ (mpmath)
# =============================================================================


def _working_context(context: Context) -> mpmath.MPContext:
    """
    Контекст mpmath текущего потока с рабочей точностью context.

    Глобальный mpmath.mp общий для всех потоков и не используется.
    """
    ctx = getattr(_thread_state, "mp", None)
    if ctx is None:
        ctx = _thread_state.mp = mpmath.MPContext()
    ctx.dps = context.prec + ACOS_GUARD_DIGITS
    return ctx


def _to_decimal(ctx: mpmath.MPContext, value: mpmath.mpf, context: Context) -> Decimal:
    text = ctx.nstr(value, context.prec + ACOS_GUARD_DIGITS)
    return context.plus(Decimal(text))


def big_pi(context: Context = DEFAULT_MATH_CONTEXT) -> Decimal:
    """
    Число pi с точностью context.

    Args:
        context: Контекст округления

    Returns:
        pi, округлённое до context.prec значащих цифр
    """
    ctx = _working_context(context)
    return _to_decimal(ctx, +ctx.pi, context)


def decimal_sqrt(value: Decimal, context: Context = DEFAULT_MATH_CONTEXT) -> Decimal:
    """Квадратный корень Decimal с точностью context (value >= 0)."""
    return context.sqrt(value)


def decimal_acos(value: Decimal, context: Context = DEFAULT_MATH_CONTEXT) -> Decimal:
    """
    Арккосинус Decimal с точностью context.

    Аргумент, вышедший за [-1, 1] из-за округления (например real / abs
    при imaginary == 0), приводится к ближайшей границе.

    Args:
        value: Аргумент, ожидается в [-1, 1]
        context: Контекст округления

    Returns:
        acos(value) в радианах, в диапазоне [0, pi]

    Examples:
        >>> decimal_acos(Decimal(1)) == 0
        True
    """
    if value > 1 or value < -1:
        logger.debug("acos argument %s outside [-1, 1], clamped", value)
        value = max(min(value, Decimal(1)), Decimal(-1))

    ctx = _working_context(context)
    return _to_decimal(ctx, ctx.acos(ctx.mpf(str(value))), context)


def decimal_cos(value: Decimal, context: Context = DEFAULT_MATH_CONTEXT) -> Decimal:
    """Косинус Decimal с точностью context."""
    ctx = _working_context(context)
    return _to_decimal(ctx, ctx.cos(ctx.mpf(str(value))), context)


def decimal_sin(value: Decimal, context: Context = DEFAULT_MATH_CONTEXT) -> Decimal:
    """Синус Decimal с точностью context."""
    ctx = _working_context(context)
    return _to_decimal(ctx, ctx.sin(ctx.mpf(str(value))), context)


# Pi с точностью DECIMAL128
BIG_PI: Final[Decimal] = big_pi(DECIMAL128)


def big_e(context: Context = DEFAULT_MATH_CONTEXT) -> Decimal:
    """Число e с точностью context."""
    ctx = _working_context(context)
    return _to_decimal(ctx, +ctx.e, context)


# e с точностью DECIMAL128
BIG_E: Final[Decimal] = big_e(DECIMAL128)


# =============================================================================
# КОНВЕРСИИ И ЦЕЛОЧИСЛЕННЫЕ УТИЛИТЫ
# =============================================================================


def decimal_of_float(value: float) -> Decimal:
    """
    Конверсия float → Decimal через кратчайшее десятичное представление.

    В отличие от Decimal(value), не переносит двоичный шум:
    decimal_of_float(0.1) == Decimal('0.1').
    """
    return Decimal(repr(value))


def is_long(value: int) -> bool:
    """Проверка, что value помещается в signed 64-bit integer."""
    return LONG_MIN <= value <= LONG_MAX


def is_power_of_two(value: int) -> bool:
    """
    Проверка, что value — степень двойки (1, 2, 4, 8, ...).

    Examples:
        >>> is_power_of_two(4)
        True
        >>> is_power_of_two(-4)
        False
    """
    return value > 0 and value & (value - 1) == 0


def signum(value: int | float | Decimal) -> int:
    """Знак числа: -1, 0 или 1."""
    return (value > 0) - (value < 0)
