"""
Complex — Комплексное число над float

Immutable Pydantic модели:
- Complex: (real, imaginary) над 64-bit float
- PolarForm: (radial, angular) над 64-bit float

Точность ограничена IEEE 754 double; сравнения в equals_by_comparing
точные (без epsilon), как и у float ==.
"""

import math
from decimal import Decimal
from typing import ClassVar

from src.core.math.context import decimal_of_float
from src.core.math.power import power_by_squaring
from src.core.math.preconditions import check_argument, check_state, require_non_null
from src.core.number.complex.abstract_complex import AbstractComplex, AbstractPolarForm
from src.core.number.complex.big_complex import BigComplex


# =============================================================================
# POLAR FORM
# =============================================================================


class PolarForm(AbstractPolarForm):
    """Полярная форма комплексного числа над float."""

    radial: float
    angular: float

    def equals_by_comparing(self, other: "PolarForm") -> bool:
        require_non_null(other, "other")
        return self.radial == other.radial and self.angular == other.angular

    def to_complex(self) -> "Complex":
        """
        Обратная конверсия: radial·cos(angular) + i·radial·sin(angular).

        Результат совпадает с исходным числом с точностью до округления float.
        """
        return Complex(
            self.radial * math.cos(self.angular),
            self.radial * math.sin(self.angular),
        )


# =============================================================================
# COMPLEX
# =============================================================================


class Complex(AbstractComplex):
    """
    Комплексное число над float.

    Все операции замкнуты внутри Complex.
    """

    real: float
    imaginary: float

    ZERO: ClassVar["Complex"]
    ONE: ClassVar["Complex"]
    I: ClassVar["Complex"]
    MINUS_ONE: ClassVar["Complex"]
    MINUS_I: ClassVar["Complex"]
    IMAGINARY: ClassVar["Complex"]
    MINUS_IMAGINARY: ClassVar["Complex"]

    @classmethod
    def of_real(cls, real: float) -> "Complex":
        return cls(real, 0.0)

    @classmethod
    def of_imaginary(cls, imaginary: float) -> "Complex":
        return cls(0.0, imaginary)

    def is_invertible(self) -> bool:
        return self.does_not_equal_by_comparing(Complex.ZERO)

    def add(self, summand: "Complex") -> "Complex":
        require_non_null(summand, "summand")
        return Complex(self.real + summand.real, self.imaginary + summand.imaginary)

    def subtract(self, subtrahend: "Complex") -> "Complex":
        require_non_null(subtrahend, "subtrahend")
        return Complex(self.real - subtrahend.real, self.imaginary - subtrahend.imaginary)

    def multiply(self, factor: "Complex") -> "Complex":
        require_non_null(factor, "factor")
        re = self.real * factor.real - self.imaginary * factor.imaginary
        im = self.real * factor.imaginary + self.imaginary * factor.real
        return Complex(re, im)

    def divide(self, divisor: "Complex") -> "Complex":
        require_non_null(divisor, "divisor")
        check_argument(
            divisor.is_invertible(),
            "divisor expected to be invertible but divisor = %s",
            divisor,
        )
        den = divisor.real * divisor.real + divisor.imaginary * divisor.imaginary
        re = (self.real * divisor.real + self.imaginary * divisor.imaginary) / den
        im = (self.imaginary * divisor.real - self.real * divisor.imaginary) / den
        return Complex(re, im)

    def pow(self, exponent: int) -> "Complex":
        if exponent < 0:
            return self.pow(-exponent).invert()
        return power_by_squaring(self, exponent, Complex.ONE, Complex.multiply)

    def negate(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def invert(self) -> "Complex":
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        return Complex.ONE.divide(self)

    def abs(self) -> float:
        return math.sqrt(self.abs_pow2())

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imaginary)

    def argument(self) -> float:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        # Ограничение [-1, 1]: real / abs может превысить 1 на ulp
        acos = math.acos(max(-1.0, min(1.0, self.real / self.abs())))
        return -acos if self.imaginary < 0.0 else acos

    def abs_pow2(self) -> float:
        return self.real * self.real + self.imaginary * self.imaginary

    def to_big_integer(self) -> int:
        return int(self.to_big_decimal())

    def to_big_decimal(self) -> Decimal:
        return decimal_of_float(self.real)

    def to_big_complex(self) -> BigComplex:
        """Явное расширение до BigComplex (через кратчайшее десятичное представление)."""
        return BigComplex(decimal_of_float(self.real), decimal_of_float(self.imaginary))

    def to_polar_form(self) -> PolarForm:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        return PolarForm(self.abs(), self.argument())

    def equals_by_comparing(self, other: "Complex") -> bool:
        require_non_null(other, "other")
        return self.real == other.real and self.imaginary == other.imaginary

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)


Complex.ZERO = Complex.of_real(0.0)
Complex.ONE = Complex.of_real(1.0)
Complex.I = Complex.of_imaginary(1.0)
Complex.MINUS_ONE = Complex.of_real(-1.0)
Complex.MINUS_I = Complex.of_imaginary(-1.0)
Complex.IMAGINARY = Complex.I
Complex.MINUS_IMAGINARY = Complex.MINUS_I
