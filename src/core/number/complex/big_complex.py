"""
BigComplex — Комплексное число над Decimal произвольной точности

Immutable Pydantic модели:
- BigComplex: (real, imaginary) над decimal.Decimal
- BigPolarForm: (radial, angular) над decimal.Decimal

Правила точности:
- Без math_context: +, -, *, negate, conjugate точные (контекст EXACT);
  divide, invert, abs, argument округляются по DECIMAL128
- С math_context: каждая промежуточная операция округляется по нему

Отрицательный ноль Decimal('-0') приводится к Decimal('0') при создании,
поэтому структурное равенство не зависит от знака нуля.
"""

from decimal import Context, Decimal
from typing import ClassVar

from pydantic import field_validator

from src.core.math.context import (
    DEFAULT_MATH_CONTEXT,
    EXACT,
    decimal_acos,
    decimal_cos,
    decimal_sin,
    decimal_sqrt,
)
from src.core.math.power import power_by_squaring
from src.core.math.preconditions import check_argument, check_state, require_non_null
from src.core.number.complex.abstract_complex import AbstractComplex, AbstractPolarForm


def _positive_zero(value: Decimal) -> Decimal:
    if value.is_zero() and value.is_signed():
        return value.copy_abs()
    return value


# =============================================================================
# POLAR FORM
# =============================================================================


class BigPolarForm(AbstractPolarForm):
    """Полярная форма комплексного числа над Decimal."""

    radial: Decimal
    angular: Decimal

    @field_validator("radial", "angular")
    @classmethod
    def normalize_zero_sign(cls, v: Decimal) -> Decimal:
        return _positive_zero(v)

    def equals_by_comparing(self, other: "BigPolarForm") -> bool:
        require_non_null(other, "other")
        return self.radial == other.radial and self.angular == other.angular

    def to_big_complex(self, math_context: Context | None = None) -> "BigComplex":
        """
        Обратная конверсия: radial·cos(angular) + i·radial·sin(angular).

        Args:
            math_context: Контекст округления (default: DECIMAL128)
        """
        context = DEFAULT_MATH_CONTEXT if math_context is None else math_context
        re = context.multiply(self.radial, decimal_cos(self.angular, context))
        im = context.multiply(self.radial, decimal_sin(self.angular, context))
        return BigComplex(re, im)


# =============================================================================
# BIG COMPLEX
# =============================================================================


class BigComplex(AbstractComplex):
    """
    Комплексное число над Decimal.

    Все операции замкнуты внутри BigComplex. Каждая операция принимает
    необязательный math_context для управления округлением.
    """

    real: Decimal
    imaginary: Decimal

    ZERO: ClassVar["BigComplex"]
    ONE: ClassVar["BigComplex"]
    I: ClassVar["BigComplex"]
    MINUS_ONE: ClassVar["BigComplex"]
    MINUS_I: ClassVar["BigComplex"]
    IMAGINARY: ClassVar["BigComplex"]
    MINUS_IMAGINARY: ClassVar["BigComplex"]

    @field_validator("real", "imaginary")
    @classmethod
    def normalize_zero_sign(cls, v: Decimal) -> Decimal:
        return _positive_zero(v)

    @classmethod
    def of_real(cls, real: Decimal) -> "BigComplex":
        return cls(real, Decimal(0))

    @classmethod
    def of_imaginary(cls, imaginary: Decimal) -> "BigComplex":
        return cls(Decimal(0), imaginary)

    def is_invertible(self) -> bool:
        return self.does_not_equal_by_comparing(BigComplex.ZERO)

    def add(self, summand: "BigComplex", math_context: Context | None = None) -> "BigComplex":
        require_non_null(summand, "summand")
        context = EXACT if math_context is None else math_context
        return BigComplex(
            context.add(self.real, summand.real),
            context.add(self.imaginary, summand.imaginary),
        )

    def subtract(
        self, subtrahend: "BigComplex", math_context: Context | None = None
    ) -> "BigComplex":
        require_non_null(subtrahend, "subtrahend")
        context = EXACT if math_context is None else math_context
        return BigComplex(
            context.subtract(self.real, subtrahend.real),
            context.subtract(self.imaginary, subtrahend.imaginary),
        )

    def multiply(self, factor: "BigComplex", math_context: Context | None = None) -> "BigComplex":
        require_non_null(factor, "factor")
        context = EXACT if math_context is None else math_context
        re = context.subtract(
            context.multiply(self.real, factor.real),
            context.multiply(self.imaginary, factor.imaginary),
        )
        im = context.add(
            context.multiply(self.real, factor.imaginary),
            context.multiply(self.imaginary, factor.real),
        )
        return BigComplex(re, im)

    def divide(self, divisor: "BigComplex", math_context: Context | None = None) -> "BigComplex":
        require_non_null(divisor, "divisor")
        check_argument(
            divisor.is_invertible(),
            "divisor expected to be invertible but divisor = %s",
            divisor,
        )
        # Без math_context числители и знаменатель точные, деление округляется
        exact = EXACT if math_context is None else math_context
        context = DEFAULT_MATH_CONTEXT if math_context is None else math_context
        den = divisor.abs_pow2(math_context)
        re_num = exact.add(
            exact.multiply(self.real, divisor.real),
            exact.multiply(self.imaginary, divisor.imaginary),
        )
        im_num = exact.subtract(
            exact.multiply(self.imaginary, divisor.real),
            exact.multiply(self.real, divisor.imaginary),
        )
        return BigComplex(context.divide(re_num, den), context.divide(im_num, den))

    def pow(self, exponent: int, math_context: Context | None = None) -> "BigComplex":
        if exponent < 0:
            return self.pow(-exponent, math_context).invert(math_context)
        return power_by_squaring(
            self,
            exponent,
            BigComplex.ONE,
            lambda x, y: x.multiply(y, math_context),
        )

    def negate(self, math_context: Context | None = None) -> "BigComplex":
        context = EXACT if math_context is None else math_context
        return BigComplex(context.minus(self.real), context.minus(self.imaginary))

    def invert(self, math_context: Context | None = None) -> "BigComplex":
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        return BigComplex.ONE.divide(self, math_context)

    def abs(self, math_context: Context | None = None) -> Decimal:
        context = DEFAULT_MATH_CONTEXT if math_context is None else math_context
        return decimal_sqrt(self.abs_pow2(math_context), context)

    def conjugate(self, math_context: Context | None = None) -> "BigComplex":
        context = EXACT if math_context is None else math_context
        return BigComplex(self.real, context.minus(self.imaginary))

    def argument(self, math_context: Context | None = None) -> Decimal:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        context = DEFAULT_MATH_CONTEXT if math_context is None else math_context
        acos = decimal_acos(context.divide(self.real, self.abs(context)), context)
        return context.minus(acos) if self.imaginary < 0 else acos

    def abs_pow2(self, math_context: Context | None = None) -> Decimal:
        context = EXACT if math_context is None else math_context
        return context.add(
            context.multiply(self.real, self.real),
            context.multiply(self.imaginary, self.imaginary),
        )

    def to_big_integer(self) -> int:
        return int(self.real)

    def to_big_decimal(self) -> Decimal:
        return self.real

    def to_polar_form(self, math_context: Context | None = None) -> BigPolarForm:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        return BigPolarForm(self.abs(math_context), self.argument(math_context))

    def equals_by_comparing(self, other: "BigComplex") -> bool:
        require_non_null(other, "other")
        return self.real == other.real and self.imaginary == other.imaginary


BigComplex.ZERO = BigComplex.of_real(Decimal(0))
BigComplex.ONE = BigComplex.of_real(Decimal(1))
BigComplex.I = BigComplex.of_imaginary(Decimal(1))
BigComplex.MINUS_ONE = BigComplex.ONE.negate()
BigComplex.MINUS_I = BigComplex.I.negate()
BigComplex.IMAGINARY = BigComplex.I
BigComplex.MINUS_IMAGINARY = BigComplex.MINUS_I
