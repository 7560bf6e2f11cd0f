"""
Gaussian — Гауссовы целые числа (комплексные числа с целыми компонентами)

Immutable Pydantic модели:
- Gaussian: (real, imaginary) над signed 64-bit integer
- BigGaussian: (real, imaginary) над int произвольной точности

add, subtract, multiply, negate, conjugate замкнуты над целыми.
divide, pow, invert, argument, to_polar_form не замкнуты и возвращают
нецелый тип (промоушен):
- Gaussian → Complex / PolarForm (float)
- BigGaussian → BigComplex / BigPolarForm (Decimal, DECIMAL128)

Компонента Gaussian вне [-2**63, 2**63 - 1] отклоняется при создании,
в том числе если она получена в результате арифметики (переполнение).
"""

import logging
import math
from decimal import Decimal
from typing import ClassVar, FrozenSet

from src.core.math.context import DECIMAL128, decimal_acos, decimal_sqrt, is_long
from src.core.math.preconditions import check_argument, check_state, require_non_null
from src.core.number.complex.abstract_complex import AbstractComplex
from src.core.number.complex.big_complex import BigComplex, BigPolarForm
from src.core.number.complex.complex import Complex, PolarForm

logger = logging.getLogger(__name__)


# =============================================================================
# GAUSSIAN (64-bit)
# =============================================================================


class Gaussian(AbstractComplex):
    """Гауссово целое над signed 64-bit integer."""

    real: int
    imaginary: int

    ZERO: ClassVar["Gaussian"]
    ONE: ClassVar["Gaussian"]
    I: ClassVar["Gaussian"]
    MINUS_ONE: ClassVar["Gaussian"]
    MINUS_I: ClassVar["Gaussian"]
    IMAGINARY: ClassVar["Gaussian"]
    MINUS_IMAGINARY: ClassVar["Gaussian"]
    UNITS: ClassVar[FrozenSet["Gaussian"]]

    def __init__(self, real: int, imaginary: int) -> None:
        super().__init__(real, imaginary)
        # Диапазон проверяется после валидации типа pydantic
        check_argument(
            is_long(self.real), "real expected to fit in 64 bits but real = %s", self.real
        )
        check_argument(
            is_long(self.imaginary),
            "imaginary expected to fit in 64 bits but imaginary = %s",
            self.imaginary,
        )

    @classmethod
    def of_real(cls, real: int) -> "Gaussian":
        return cls(real, 0)

    @classmethod
    def of_imaginary(cls, imaginary: int) -> "Gaussian":
        return cls(0, imaginary)

    def is_invertible(self) -> bool:
        return self.does_not_equal_by_comparing(Gaussian.ZERO)

    def add(self, summand: "Gaussian") -> "Gaussian":
        require_non_null(summand, "summand")
        return Gaussian(self.real + summand.real, self.imaginary + summand.imaginary)

    def subtract(self, subtrahend: "Gaussian") -> "Gaussian":
        require_non_null(subtrahend, "subtrahend")
        return Gaussian(self.real - subtrahend.real, self.imaginary - subtrahend.imaginary)

    def multiply(self, factor: "Gaussian") -> "Gaussian":
        require_non_null(factor, "factor")
        re = self.real * factor.real - self.imaginary * factor.imaginary
        im = self.real * factor.imaginary + self.imaginary * factor.real
        return Gaussian(re, im)

    def divide(self, divisor: "Gaussian") -> Complex:
        require_non_null(divisor, "divisor")
        check_argument(
            divisor.is_invertible(),
            "divisor expected to be invertible but divisor = %s",
            divisor,
        )
        den = divisor.abs_pow2()
        re = (self.real * divisor.real + self.imaginary * divisor.imaginary) / den
        im = (self.imaginary * divisor.real - self.real * divisor.imaginary) / den
        return Complex(re, im)

    def pow(self, exponent: int) -> Complex:
        logger.debug("Gaussian.pow promotes %s to Complex", self)
        return self.to_complex().pow(exponent)

    def negate(self) -> "Gaussian":
        return Gaussian(-self.real, -self.imaginary)

    def invert(self) -> Complex:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        return Gaussian.ONE.divide(self)

    def abs(self) -> float:
        return math.sqrt(self.abs_pow2())

    def conjugate(self) -> "Gaussian":
        return Gaussian(self.real, -self.imaginary)

    def argument(self) -> float:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        acos = math.acos(max(-1.0, min(1.0, self.real / self.abs())))
        return -acos if self.imaginary < 0 else acos

    def abs_pow2(self) -> int:
        return self.real * self.real + self.imaginary * self.imaginary

    def to_big_integer(self) -> int:
        return self.real

    def to_big_decimal(self) -> Decimal:
        return Decimal(self.real)

    def to_complex(self) -> Complex:
        return Complex(float(self.real), float(self.imaginary))

    def to_big_gaussian(self) -> "BigGaussian":
        return BigGaussian(self.real, self.imaginary)

    def to_big_complex(self) -> BigComplex:
        return BigComplex(Decimal(self.real), Decimal(self.imaginary))

    def to_polar_form(self) -> PolarForm:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        return PolarForm(self.abs(), self.argument())

    def equals_by_comparing(self, other: "Gaussian") -> bool:
        require_non_null(other, "other")
        return self.real == other.real and self.imaginary == other.imaginary

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)


Gaussian.ZERO = Gaussian.of_real(0)
Gaussian.ONE = Gaussian.of_real(1)
Gaussian.I = Gaussian.of_imaginary(1)
Gaussian.MINUS_ONE = Gaussian.ONE.negate()
Gaussian.MINUS_I = Gaussian.I.negate()
Gaussian.IMAGINARY = Gaussian.I
Gaussian.MINUS_IMAGINARY = Gaussian.MINUS_I
Gaussian.UNITS = frozenset({Gaussian.ONE, Gaussian.I, Gaussian.MINUS_ONE, Gaussian.MINUS_I})


# =============================================================================
# BIG GAUSSIAN
# =============================================================================


class BigGaussian(AbstractComplex):
    """Гауссово целое над int произвольной точности."""

    real: int
    imaginary: int

    ZERO: ClassVar["BigGaussian"]
    ONE: ClassVar["BigGaussian"]
    I: ClassVar["BigGaussian"]
    MINUS_ONE: ClassVar["BigGaussian"]
    MINUS_I: ClassVar["BigGaussian"]
    IMAGINARY: ClassVar["BigGaussian"]
    MINUS_IMAGINARY: ClassVar["BigGaussian"]
    UNITS: ClassVar[FrozenSet["BigGaussian"]]

    @classmethod
    def of_real(cls, real: int) -> "BigGaussian":
        return cls(real, 0)

    @classmethod
    def of_imaginary(cls, imaginary: int) -> "BigGaussian":
        return cls(0, imaginary)

    def is_invertible(self) -> bool:
        return self.does_not_equal_by_comparing(BigGaussian.ZERO)

    def add(self, summand: "BigGaussian") -> "BigGaussian":
        require_non_null(summand, "summand")
        return BigGaussian(self.real + summand.real, self.imaginary + summand.imaginary)

    def subtract(self, subtrahend: "BigGaussian") -> "BigGaussian":
        require_non_null(subtrahend, "subtrahend")
        return BigGaussian(self.real - subtrahend.real, self.imaginary - subtrahend.imaginary)

    def multiply(self, factor: "BigGaussian") -> "BigGaussian":
        require_non_null(factor, "factor")
        re = self.real * factor.real - self.imaginary * factor.imaginary
        im = self.real * factor.imaginary + self.imaginary * factor.real
        return BigGaussian(re, im)

    def divide(self, divisor: "BigGaussian") -> BigComplex:
        require_non_null(divisor, "divisor")
        check_argument(
            divisor.is_invertible(),
            "divisor expected to be invertible but divisor = %s",
            divisor,
        )
        den = Decimal(divisor.abs_pow2())
        re = Decimal(self.real * divisor.real + self.imaginary * divisor.imaginary)
        im = Decimal(self.imaginary * divisor.real - self.real * divisor.imaginary)
        return BigComplex(DECIMAL128.divide(re, den), DECIMAL128.divide(im, den))

    def pow(self, exponent: int) -> BigComplex:
        logger.debug("BigGaussian.pow promotes %s to BigComplex", self)
        return self.to_big_complex().pow(exponent)

    def negate(self) -> "BigGaussian":
        return BigGaussian(-self.real, -self.imaginary)

    def invert(self) -> BigComplex:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        return BigGaussian.ONE.divide(self)

    def abs(self) -> Decimal:
        return decimal_sqrt(Decimal(self.abs_pow2()), DECIMAL128)

    def conjugate(self) -> "BigGaussian":
        return BigGaussian(self.real, -self.imaginary)

    def argument(self) -> Decimal:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        acos = decimal_acos(DECIMAL128.divide(Decimal(self.real), self.abs()), DECIMAL128)
        return DECIMAL128.minus(acos) if self.imaginary < 0 else acos

    def abs_pow2(self) -> int:
        return self.real * self.real + self.imaginary * self.imaginary

    def to_big_integer(self) -> int:
        return self.real

    def to_big_decimal(self) -> Decimal:
        return Decimal(self.real)

    def to_big_complex(self) -> BigComplex:
        return BigComplex(Decimal(self.real), Decimal(self.imaginary))

    def to_polar_form(self) -> BigPolarForm:
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        return BigPolarForm(self.abs(), self.argument())

    def equals_by_comparing(self, other: "BigGaussian") -> bool:
        require_non_null(other, "other")
        return self.real == other.real and self.imaginary == other.imaginary


BigGaussian.ZERO = BigGaussian.of_real(0)
BigGaussian.ONE = BigGaussian.of_real(1)
BigGaussian.I = BigGaussian.of_imaginary(1)
BigGaussian.MINUS_ONE = BigGaussian.ONE.negate()
BigGaussian.MINUS_I = BigGaussian.I.negate()
BigGaussian.IMAGINARY = BigGaussian.I
BigGaussian.MINUS_IMAGINARY = BigGaussian.MINUS_I
BigGaussian.UNITS = frozenset(
    {BigGaussian.ONE, BigGaussian.I, BigGaussian.MINUS_ONE, BigGaussian.MINUS_I}
)
