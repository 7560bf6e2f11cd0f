"""
Fraction — Дроби над целыми числами

Immutable Pydantic модели:
- Fraction: (numerator, denominator) над signed 64-bit integer,
  дескриптор LONG_QUOTIENT_FIELD
- BigFraction: (numerator, denominator) над int произвольной точности,
  дескриптор BIG_INTEGER_QUOTIENT_FIELD

Общая целочисленная канонизация (normalize, reduce, signum, dyadic)
реализована в IntegralFraction.

Компонента Fraction вне [-2**63, 2**63 - 1] отклоняется при создании,
в том числе если она получена в результате арифметики (переполнение).
"""

import itertools
import math
from decimal import Decimal
from typing import ClassVar, Iterator

from src.core.field import BIG_INTEGER_QUOTIENT_FIELD, LONG_QUOTIENT_FIELD, QuotientField
from src.core.math.context import DECIMAL128, is_long, is_power_of_two, signum
from src.core.math.preconditions import check_argument, require_non_null
from src.core.number.fraction.abstract_fraction import AbstractFraction


# =============================================================================
# INTEGRAL FRACTION
# =============================================================================


class IntegralFraction(AbstractFraction):
    """Канонизация и сравнение для дробей с целыми компонентами."""

    numerator: int
    denominator: int

    def is_dyadic(self) -> bool:
        return is_power_of_two(self.denominator)

    def is_irreducible(self) -> bool:
        return math.gcd(self.numerator, self.denominator) == 1

    def is_proper(self) -> bool:
        return abs(self.numerator) < abs(self.denominator)

    def signum(self) -> int:
        return signum(self.numerator) * signum(self.denominator)

    def normalize(self) -> "IntegralFraction":
        """
        Каноничный знак.

        Examples:
            1/-2 → -1/2, -1/-2 → 1/2, 0/-5 → ZERO
        """
        sign = self.signum()
        if sign < 0:
            if self.numerator > 0:
                return type(self)(-self.numerator, -self.denominator)
            return self
        if sign == 0:
            return type(self).ZERO
        return self.abs()

    def reduce(self) -> "IntegralFraction":
        """
        Сокращение на gcd; знаки компонент сохраняются.

        Examples:
            2/4 → 1/2, -2/-4 → -1/-2
        """
        gcd = math.gcd(self.numerator, self.denominator)
        return type(self)(self.numerator // gcd, self.denominator // gcd)

    def _signed_components(self) -> tuple[int, int]:
        """(numerator, denominator) со знаком на числителе, без создания дроби."""
        if self.denominator < 0:
            return -self.numerator, -self.denominator
        return self.numerator, self.denominator

    def _canonical_components(self) -> tuple[int, int]:
        """Компоненты normalize().reduce() как plain int (вне 64-bit допустимо)."""
        numerator, denominator = self._signed_components()
        if numerator == 0:
            return 0, 1
        gcd = math.gcd(numerator, denominator)
        return numerator // gcd, denominator // gcd

    def equivalent(self, other: "IntegralFraction") -> bool:
        """
        Одно и то же рациональное значение: 2/4 эквивалентно -1/-2.

        Сравниваются канонические компоненты, поэтому Fraction(1, LONG_MIN)
        сравнима, хотя её normalize() не помещается в 64 бита.
        """
        require_non_null(other, "other")
        return type(self) is type(other) and (
            self._canonical_components() == other._canonical_components()
        )

    def less_than_or_equal_to(self, other: "IntegralFraction") -> bool:
        require_non_null(other, "other")
        left_numerator, left_denominator = self._signed_components()
        right_numerator, right_denominator = other._signed_components()
        return left_numerator * right_denominator <= right_numerator * left_denominator

    def to_big_decimal(self) -> Decimal:
        return DECIMAL128.divide(Decimal(self.numerator), Decimal(self.denominator))


# =============================================================================
# FRACTION (64-bit)
# =============================================================================


class Fraction(IntegralFraction):
    """Дробь над signed 64-bit integer."""

    ZERO: ClassVar["Fraction"]
    ONE: ClassVar["Fraction"]

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        super().__init__(numerator, denominator)
        # Диапазон проверяется после валидации типа pydantic
        check_argument(
            is_long(self.numerator),
            "numerator expected to fit in 64 bits but numerator = %s",
            self.numerator,
        )
        check_argument(
            is_long(self.denominator),
            "denominator expected to fit in 64 bits but denominator = %s",
            self.denominator,
        )

    @classmethod
    def quotient_field(cls) -> QuotientField:
        return LONG_QUOTIENT_FIELD

    @classmethod
    def units(cls) -> Iterator["Fraction"]:
        """
        Бесконечная последовательность единичных дробей 1/1, 1/2, 1/3, ...

        Examples:
            >>> list(itertools.islice(Fraction.units(), 3))[-1]
            Fraction(numerator=1, denominator=3)
        """
        for denominator in itertools.count(1):
            yield cls.of_denominator(denominator)

    def to_big_fraction(self) -> "BigFraction":
        return BigFraction(self.numerator, self.denominator)


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)


# =============================================================================
# BIG FRACTION
# =============================================================================


class BigFraction(IntegralFraction):
    """Дробь над int произвольной точности."""

    ZERO: ClassVar["BigFraction"]
    ONE: ClassVar["BigFraction"]

    @classmethod
    def quotient_field(cls) -> QuotientField:
        return BIG_INTEGER_QUOTIENT_FIELD

    @classmethod
    def units(cls) -> Iterator["BigFraction"]:
        """Бесконечная последовательность единичных дробей 1/1, 1/2, 1/3, ..."""
        for denominator in itertools.count(1):
            yield cls.of_denominator(denominator)


BigFraction.ZERO = BigFraction(0)
BigFraction.ONE = BigFraction(1)
