"""
Complex fields — Дескрипторы QuotientField для комплексных типов

Все операции делегируются методам самих типов:
- COMPLEX_QUOTIENT_FIELD: Complex → Complex, модуль float
- BIG_COMPLEX_QUOTIENT_FIELD: BigComplex → BigComplex, модуль Decimal
- GAUSSIAN_QUOTIENT_FIELD: Gaussian → частное Complex, модуль float
- BIG_GAUSSIAN_QUOTIENT_FIELD: BigGaussian → частное BigComplex, модуль Decimal
"""

from decimal import Decimal
from typing import Final

from src.core.field.quotient_field import QuotientField
from src.core.number.complex import BigComplex, BigGaussian, Complex, Gaussian


class ComplexQuotientField(QuotientField[Complex, Complex, float]):
    """Дескриптор для Complex."""

    __slots__ = ()

    def add(self, x: Complex, y: Complex) -> Complex:
        return x.add(y)

    def subtract(self, x: Complex, y: Complex) -> Complex:
        return x.subtract(y)

    def multiply(self, x: Complex, y: Complex) -> Complex:
        return x.multiply(y)

    def divide(self, x: Complex, y: Complex) -> Complex:
        return x.divide(y)

    def power(self, x: Complex, exponent: int) -> Complex:
        return x.pow(exponent)

    def negate(self, x: Complex) -> Complex:
        return x.negate()

    def equals_by_comparing(self, x: Complex, y: Complex) -> bool:
        return x.equals_by_comparing(y)

    def abs(self, x: Complex) -> float:
        return x.abs()

    @property
    def zero(self) -> Complex:
        return Complex.ZERO

    @property
    def one(self) -> Complex:
        return Complex.ONE


class BigComplexQuotientField(QuotientField[BigComplex, BigComplex, Decimal]):
    """Дескриптор для BigComplex (округление по умолчанию, без math_context)."""

    __slots__ = ()

    def add(self, x: BigComplex, y: BigComplex) -> BigComplex:
        return x.add(y)

    def subtract(self, x: BigComplex, y: BigComplex) -> BigComplex:
        return x.subtract(y)

    def multiply(self, x: BigComplex, y: BigComplex) -> BigComplex:
        return x.multiply(y)

    def divide(self, x: BigComplex, y: BigComplex) -> BigComplex:
        return x.divide(y)

    def power(self, x: BigComplex, exponent: int) -> BigComplex:
        return x.pow(exponent)

    def negate(self, x: BigComplex) -> BigComplex:
        return x.negate()

    def equals_by_comparing(self, x: BigComplex, y: BigComplex) -> bool:
        return x.equals_by_comparing(y)

    def abs(self, x: BigComplex) -> Decimal:
        return x.abs()

    @property
    def zero(self) -> BigComplex:
        return BigComplex.ZERO

    @property
    def one(self) -> BigComplex:
        return BigComplex.ONE


class GaussianQuotientField(QuotientField[Gaussian, Complex, float]):
    """Дескриптор для Gaussian; частное и степень — Complex."""

    __slots__ = ()

    def add(self, x: Gaussian, y: Gaussian) -> Gaussian:
        return x.add(y)

    def subtract(self, x: Gaussian, y: Gaussian) -> Gaussian:
        return x.subtract(y)

    def multiply(self, x: Gaussian, y: Gaussian) -> Gaussian:
        return x.multiply(y)

    def divide(self, x: Gaussian, y: Gaussian) -> Complex:
        return x.divide(y)

    def power(self, x: Gaussian, exponent: int) -> Complex:
        return x.pow(exponent)

    def negate(self, x: Gaussian) -> Gaussian:
        return x.negate()

    def equals_by_comparing(self, x: Gaussian, y: Gaussian) -> bool:
        return x.equals_by_comparing(y)

    def abs(self, x: Gaussian) -> float:
        return x.abs()

    @property
    def zero(self) -> Gaussian:
        return Gaussian.ZERO

    @property
    def one(self) -> Gaussian:
        return Gaussian.ONE


class BigGaussianQuotientField(QuotientField[BigGaussian, BigComplex, Decimal]):
    """Дескриптор для BigGaussian; частное и степень — BigComplex."""

    __slots__ = ()

    def add(self, x: BigGaussian, y: BigGaussian) -> BigGaussian:
        return x.add(y)

    def subtract(self, x: BigGaussian, y: BigGaussian) -> BigGaussian:
        return x.subtract(y)

    def multiply(self, x: BigGaussian, y: BigGaussian) -> BigGaussian:
        return x.multiply(y)

    def divide(self, x: BigGaussian, y: BigGaussian) -> BigComplex:
        return x.divide(y)

    def power(self, x: BigGaussian, exponent: int) -> BigComplex:
        return x.pow(exponent)

    def negate(self, x: BigGaussian) -> BigGaussian:
        return x.negate()

    def equals_by_comparing(self, x: BigGaussian, y: BigGaussian) -> bool:
        return x.equals_by_comparing(y)

    def abs(self, x: BigGaussian) -> Decimal:
        return x.abs()

    @property
    def zero(self) -> BigGaussian:
        return BigGaussian.ZERO

    @property
    def one(self) -> BigGaussian:
        return BigGaussian.ONE


COMPLEX_QUOTIENT_FIELD: Final[ComplexQuotientField] = ComplexQuotientField()
BIG_COMPLEX_QUOTIENT_FIELD: Final[BigComplexQuotientField] = BigComplexQuotientField()
GAUSSIAN_QUOTIENT_FIELD: Final[GaussianQuotientField] = GaussianQuotientField()
BIG_GAUSSIAN_QUOTIENT_FIELD: Final[BigGaussianQuotientField] = BigGaussianQuotientField()
