"""
AbstractFraction — Базовая модель дроби, обобщённая по QuotientField

Immutable Pydantic модель (frozen=True): пара (numerator, denominator),
denominator != 0 (проверяется при создании).

Обобщённые операции (через дескриптор QuotientField):
- is_invertible, is_unit
- add, subtract, multiply, divide, pow, negate, invert, abs, expand, inc, dec

Операции конкретного представления (в подклассах):
- normalize, reduce, signum, is_dyadic, is_irreducible, is_proper
- less_than_or_equal_to, to_big_decimal

ВАЖНО: арифметика НЕ сокращает и НЕ нормализует результат.
1/2 + 3/4 = 10/8. Каноническая форма: normalize().reduce().
"""

from abc import abstractmethod
from decimal import Decimal
from typing import Any, ClassVar

from pydantic import BaseModel

from src.core.field import QuotientField
from src.core.math.power import power_by_squaring
from src.core.math.preconditions import check_argument, check_state, require_non_null
from src.core.number.complex import BigComplex, Complex


class AbstractFraction(BaseModel):
    """
    Базовая модель дроби.

    Подклассы задают тип элементов (аннотации numerator/denominator),
    дескриптор quotient_field() и константы ZERO / ONE.
    """

    model_config = {"frozen": True}

    ZERO: ClassVar[Any]
    ONE: ClassVar[Any]

    def __init__(self, numerator: Any, denominator: Any = 1) -> None:
        require_non_null(numerator, "numerator")
        require_non_null(denominator, "denominator")
        check_argument(
            denominator != 0,
            "denominator expected not to be 0 but denominator = %s",
            denominator,
        )
        super().__init__(numerator=numerator, denominator=denominator)

    @classmethod
    def of_numerator(cls, numerator: Any) -> Any:
        """Дробь numerator / 1."""
        return cls(numerator, cls.quotient_field().one)

    @classmethod
    def of_denominator(cls, denominator: Any) -> Any:
        """Дробь 1 / denominator."""
        return cls(cls.quotient_field().one, denominator)

    @classmethod
    @abstractmethod
    def quotient_field(cls) -> QuotientField:
        """Дескриптор арифметики типа элементов."""

    # -------------------------------------------------------------------------
    # Запросы состояния
    # -------------------------------------------------------------------------

    def is_invertible(self) -> bool:
        field = self.quotient_field()
        return not field.equals_by_comparing(self.numerator, field.zero)

    def is_not_invertible(self) -> bool:
        return not self.is_invertible()

    def is_unit(self) -> bool:
        field = self.quotient_field()
        return field.equals_by_comparing(self.numerator, field.one)

    def is_not_unit(self) -> bool:
        return not self.is_unit()

    @abstractmethod
    def is_dyadic(self) -> bool:
        """Знаменатель — степень двойки."""

    def is_not_dyadic(self) -> bool:
        return not self.is_dyadic()

    @abstractmethod
    def is_irreducible(self) -> bool:
        """gcd(|numerator|, |denominator|) == 1."""

    def is_reducible(self) -> bool:
        return not self.is_irreducible()

    @abstractmethod
    def is_proper(self) -> bool:
        """|numerator| < |denominator|."""

    def is_improper(self) -> bool:
        return not self.is_proper()

    @abstractmethod
    def signum(self) -> int:
        """Произведение знаков numerator и denominator: -1, 0 или 1."""

    # -------------------------------------------------------------------------
    # Арифметика через QuotientField
    # -------------------------------------------------------------------------

    def add(self, summand: Any) -> Any:
        """
        Сумма без сокращения.

        a/b + c/d = (d·a + b·c) / (b·d)
        """
        require_non_null(summand, "summand")
        field = self.quotient_field()
        num = field.add(
            field.multiply(summand.denominator, self.numerator),
            field.multiply(self.denominator, summand.numerator),
        )
        den = field.multiply(self.denominator, summand.denominator)
        return type(self)(num, den)

    def subtract(self, subtrahend: Any) -> Any:
        """Разность без сокращения: (d·a - b·c) / (b·d)."""
        require_non_null(subtrahend, "subtrahend")
        field = self.quotient_field()
        num = field.subtract(
            field.multiply(subtrahend.denominator, self.numerator),
            field.multiply(self.denominator, subtrahend.numerator),
        )
        den = field.multiply(self.denominator, subtrahend.denominator)
        return type(self)(num, den)

    def multiply(self, factor: Any) -> Any:
        require_non_null(factor, "factor")
        field = self.quotient_field()
        return type(self)(
            field.multiply(self.numerator, factor.numerator),
            field.multiply(self.denominator, factor.denominator),
        )

    def divide(self, divisor: Any) -> Any:
        """
        Частное: self · divisor.invert().

        Raises:
            NullArgumentViolation: Если divisor is None
            InvalidArgumentViolation: Если divisor не обратим
        """
        require_non_null(divisor, "divisor")
        check_argument(
            divisor.is_invertible(),
            "divisor expected to be invertible but divisor = %s",
            divisor,
        )
        return self.multiply(divisor.invert())

    def pow(self, exponent: int) -> Any:
        """
        Целая степень без сокращения.

        exponent == 0 → ONE; exponent < 0 → pow(-exponent).invert().
        Вычисляется итеративно (square-and-multiply).

        Raises:
            InvalidStateViolation: Если exponent < 0 и self не обратим
        """
        if exponent < 0:
            check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
            return self.pow(-exponent).invert()
        return power_by_squaring(self, exponent, type(self).ONE, type(self).multiply)

    def negate(self) -> Any:
        return type(self)(self.quotient_field().negate(self.numerator), self.denominator)

    def invert(self) -> Any:
        """
        Перестановка numerator и denominator.

        Raises:
            InvalidStateViolation: Если numerator == 0
        """
        check_state(self.is_invertible(), "this expected to be invertible but this = %s", self)
        return type(self)(self.denominator, self.numerator)

    def abs(self) -> Any:
        field = self.quotient_field()
        return type(self)(field.abs(self.numerator), field.abs(self.denominator))

    def expand(self, factor: Any) -> Any:
        """Расширение: (factor·numerator) / (factor·denominator)."""
        require_non_null(factor, "factor")
        field = self.quotient_field()
        return type(self)(
            field.multiply(factor, self.numerator),
            field.multiply(factor, self.denominator),
        )

    def inc(self) -> Any:
        return self.add(type(self).ONE)

    def dec(self) -> Any:
        return self.subtract(type(self).ONE)

    # -------------------------------------------------------------------------
    # Канонизация и сравнение
    # -------------------------------------------------------------------------

    @abstractmethod
    def normalize(self) -> Any:
        """
        Каноничный знак.

        - Отрицательное значение: знак на numerator, denominator > 0
        - Положительное значение: обе компоненты неотрицательны
        - Ноль: ZERO
        """

    @abstractmethod
    def reduce(self) -> Any:
        """Сокращение на gcd(numerator, denominator)."""

    def equivalent(self, other: Any) -> bool:
        """Одно и то же рациональное значение: 2/4 эквивалентно -1/-2."""
        require_non_null(other, "other")
        return self.normalize().reduce() == other.normalize().reduce()

    @abstractmethod
    def less_than_or_equal_to(self, other: Any) -> bool:
        """Сравнение по перекрёстному произведению компонент со знаком на числителе."""

    def greater_than_or_equal_to(self, other: Any) -> bool:
        require_non_null(other, "other")
        return not self.less_than_or_equal_to(other) or self.equivalent(other)

    def less_than(self, other: Any) -> bool:
        require_non_null(other, "other")
        return not self.greater_than_or_equal_to(other)

    def greater_than(self, other: Any) -> bool:
        require_non_null(other, "other")
        return not self.less_than_or_equal_to(other)

    def min(self, other: Any) -> Any:
        require_non_null(other, "other")
        return other if self.greater_than(other) else self

    def max(self, other: Any) -> Any:
        require_non_null(other, "other")
        return other if self.less_than(other) else self

    def compare_to(self, other: Any) -> int:
        """-1, 0 или 1; 0 для эквивалентных дробей."""
        require_non_null(other, "other")
        if self.less_than(other):
            return -1
        if self.greater_than(other):
            return 1
        return 0

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @abstractmethod
    def to_big_decimal(self) -> Decimal:
        """numerator / denominator с округлением DECIMAL128."""

    # Сужение через to_big_decimal(): не гарантируется точность
    def __int__(self) -> int:
        return int(self.to_big_decimal())

    def __float__(self) -> float:
        return float(self.to_big_decimal())

    def to_complex(self) -> Complex:
        return Complex.of_real(float(self))

    def to_big_complex(self) -> BigComplex:
        return BigComplex.of_real(self.to_big_decimal())

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Any:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent: int) -> Any:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> Any:
        return self.negate()

    def __abs__(self) -> Any:
        return self.abs()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.less_than_or_equal_to(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.greater_than_or_equal_to(other)
