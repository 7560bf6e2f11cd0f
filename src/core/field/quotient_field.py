"""
QuotientField — Дескрипторы арифметики для обобщённого кода

QuotientField[E, Q, A] — stateless таблица операций для типа элементов E:
- E: тип элементов (+, -, *, negate, zero, one)
- Q: тип частного и степени (для целых типов отличается от E)
- A: тип модуля

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Один экземпляр на числовой тип (модульные константы *_QUOTIENT_FIELD)
2. Никакого состояния: экземпляр разделяется всеми значениями типа
3. Никакой валидации аргументов внутри дескриптора (ответственность вызывающего)
4. equals_by_comparing — численное равенство, не структурное

Скалярные дескрипторы:
- DOUBLE_QUOTIENT_FIELD: float → float
- LONG_QUOTIENT_FIELD: 64-bit int → частное float
- BIG_INTEGER_QUOTIENT_FIELD: int → частное Decimal (DECIMAL128)
- BIG_DECIMAL_QUOTIENT_FIELD: Decimal → Decimal (DECIMAL128)
"""

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Final, Generic, TypeVar

from src.core.math.context import DECIMAL128, EXACT
from src.core.math.power import power_by_squaring

E = TypeVar("E")
Q = TypeVar("Q")
A = TypeVar("A")


# =============================================================================
# INTERFACE
# =============================================================================


class QuotientField(ABC, Generic[E, Q, A]):
    """
    Интерфейс дескриптора арифметики.

    Конкретные дескрипторы не хранят состояния (__slots__ = ()).
    """

    __slots__ = ()

    @abstractmethod
    def add(self, x: E, y: E) -> E: ...

    @abstractmethod
    def subtract(self, x: E, y: E) -> E: ...

    @abstractmethod
    def multiply(self, x: E, y: E) -> E: ...

    @abstractmethod
    def divide(self, x: E, y: E) -> Q: ...

    @abstractmethod
    def power(self, x: E, exponent: int) -> Q: ...

    @abstractmethod
    def negate(self, x: E) -> E: ...

    @abstractmethod
    def equals_by_comparing(self, x: E, y: E) -> bool: ...

    @abstractmethod
    def abs(self, x: E) -> A: ...

    @property
    @abstractmethod
    def zero(self) -> E: ...

    @property
    @abstractmethod
    def one(self) -> E: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# =============================================================================
# SCALAR FIELDS
# =============================================================================


class DoubleQuotientField(QuotientField[float, float, float]):
    """Дескриптор для float."""

    __slots__ = ()

    def add(self, x: float, y: float) -> float:
        return x + y

    def subtract(self, x: float, y: float) -> float:
        return x - y

    def multiply(self, x: float, y: float) -> float:
        return x * y

    def divide(self, x: float, y: float) -> float:
        return x / y

    def power(self, x: float, exponent: int) -> float:
        return math.pow(x, exponent)

    def negate(self, x: float) -> float:
        return -x

    def equals_by_comparing(self, x: float, y: float) -> bool:
        return x == y

    def abs(self, x: float) -> float:
        return abs(x)

    @property
    def zero(self) -> float:
        return 0.0

    @property
    def one(self) -> float:
        return 1.0


class LongQuotientField(QuotientField[int, float, int]):
    """
    Дескриптор для signed 64-bit integer.

    Частное и степень — float. Переполнение 64 бит не проверяется здесь:
    его отклоняет конструктор значения, получающего результат.
    """

    __slots__ = ()

    def add(self, x: int, y: int) -> int:
        return x + y

    def subtract(self, x: int, y: int) -> int:
        return x - y

    def multiply(self, x: int, y: int) -> int:
        return x * y

    def divide(self, x: int, y: int) -> float:
        return x / y

    def power(self, x: int, exponent: int) -> float:
        return float(x**exponent)

    def negate(self, x: int) -> int:
        return -x

    def equals_by_comparing(self, x: int, y: int) -> bool:
        return x == y

    def abs(self, x: int) -> int:
        return abs(x)

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1


class BigIntegerQuotientField(QuotientField[int, Decimal, int]):
    """
    Дескриптор для int произвольной точности.

    Частное — Decimal с округлением DECIMAL128; неотрицательная степень точная.
    """

    __slots__ = ()

    def add(self, x: int, y: int) -> int:
        return x + y

    def subtract(self, x: int, y: int) -> int:
        return x - y

    def multiply(self, x: int, y: int) -> int:
        return x * y

    def divide(self, x: int, y: int) -> Decimal:
        return DECIMAL128.divide(Decimal(x), Decimal(y))

    def power(self, x: int, exponent: int) -> Decimal:
        if exponent < 0:
            return DECIMAL128.divide(Decimal(1), Decimal(x ** -exponent))
        return Decimal(x**exponent)

    def negate(self, x: int) -> int:
        return -x

    def equals_by_comparing(self, x: int, y: int) -> bool:
        return x == y

    def abs(self, x: int) -> int:
        return abs(x)

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1


class BigDecimalQuotientField(QuotientField[Decimal, Decimal, Decimal]):
    """
    Дескриптор для Decimal.

    +, -, *, negate, abs и неотрицательная степень — точные (EXACT);
    деление и отрицательная степень — DECIMAL128.
    equals_by_comparing: Decimal('2.0') равно Decimal('2.00').
    """

    __slots__ = ()

    def add(self, x: Decimal, y: Decimal) -> Decimal:
        return EXACT.add(x, y)

    def subtract(self, x: Decimal, y: Decimal) -> Decimal:
        return EXACT.subtract(x, y)

    def multiply(self, x: Decimal, y: Decimal) -> Decimal:
        return EXACT.multiply(x, y)

    def divide(self, x: Decimal, y: Decimal) -> Decimal:
        return DECIMAL128.divide(x, y)

    def power(self, x: Decimal, exponent: int) -> Decimal:
        if exponent < 0:
            return DECIMAL128.divide(Decimal(1), self.power(x, -exponent))
        return power_by_squaring(x, exponent, Decimal(1), EXACT.multiply)

    def negate(self, x: Decimal) -> Decimal:
        return EXACT.minus(x)

    def equals_by_comparing(self, x: Decimal, y: Decimal) -> bool:
        return x.compare(y) == 0

    def abs(self, x: Decimal) -> Decimal:
        return EXACT.abs(x)

    @property
    def zero(self) -> Decimal:
        return Decimal(0)

    @property
    def one(self) -> Decimal:
        return Decimal(1)


# =============================================================================
# ЭКЗЕМПЛЯРЫ
# =============================================================================

DOUBLE_QUOTIENT_FIELD: Final[DoubleQuotientField] = DoubleQuotientField()
LONG_QUOTIENT_FIELD: Final[LongQuotientField] = LongQuotientField()
BIG_INTEGER_QUOTIENT_FIELD: Final[BigIntegerQuotientField] = BigIntegerQuotientField()
BIG_DECIMAL_QUOTIENT_FIELD: Final[BigDecimalQuotientField] = BigDecimalQuotientField()
