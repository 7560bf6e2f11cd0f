"""
AbstractComplex — Базовая модель комплексного числа и полярной формы

Immutable Pydantic модели (frozen=True):
- AbstractComplex: пара (real, imaginary) одного числового типа
- AbstractPolarForm: пара (radial, angular), angular в радианах (-pi, pi]

Два вида равенства AbstractComplex:
- == / hash: структурное равенство (точное совпадение полей;
  Decimal('1.0') и Decimal('1.00') структурно различны)
- equals_by_comparing: численное равенство (Decimal('1.0') ≈ Decimal('1.00'))

AbstractPolarForm: == совпадает с equals_by_comparing (численное равенство).

Арифметика реализуется в конкретных типах (Complex, BigComplex, Gaussian,
BigGaussian) без обращения к QuotientField.
"""

from abc import abstractmethod
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from src.core.math.preconditions import require_non_null


def _structural_key(value: Any) -> Any:
    """Ключ структурного равенства: Decimal сравнивается по (sign, digits, exponent)."""
    if isinstance(value, Decimal):
        return value.as_tuple()
    return value


# =============================================================================
# COMPLEX
# =============================================================================


class AbstractComplex(BaseModel):
    """
    Базовая модель комплексного числа.

    Операции, не замкнутые над целыми числами (divide, pow, invert,
    argument), в Gaussian-типах возвращают соответствующий нецелый тип.

    Все операции возвращают новый экземпляр.
    """

    model_config = {"frozen": True}

    def __init__(self, real: Any, imaginary: Any) -> None:
        super().__init__(
            real=require_non_null(real, "real"),
            imaginary=require_non_null(imaginary, "imaginary"),
        )

    # -------------------------------------------------------------------------
    # Абстрактные операции
    # -------------------------------------------------------------------------

    @abstractmethod
    def is_invertible(self) -> bool:
        """True если real != 0 или imaginary != 0 (по сравнению)."""

    @abstractmethod
    def add(self, summand: Any) -> Any: ...

    @abstractmethod
    def subtract(self, subtrahend: Any) -> Any: ...

    @abstractmethod
    def multiply(self, factor: Any) -> Any: ...

    @abstractmethod
    def divide(self, divisor: Any) -> Any:
        """
        Деление по формуле через сопряжённое.

        Raises:
            NullArgumentViolation: Если divisor is None
            InvalidArgumentViolation: Если divisor не обратим
        """

    @abstractmethod
    def pow(self, exponent: int) -> Any:
        """
        Целая степень.

        exponent > 0: произведение exponent множителей
        exponent < 0: pow(-exponent).invert()
        exponent == 0: мультипликативная единица типа результата
        """

    @abstractmethod
    def negate(self) -> Any: ...

    @abstractmethod
    def invert(self) -> Any:
        """
        1 / self.

        Raises:
            InvalidStateViolation: Если self не обратим
        """

    @abstractmethod
    def abs(self) -> Any:
        """Модуль: sqrt(real² + imaginary²)."""

    @abstractmethod
    def conjugate(self) -> Any: ...

    @abstractmethod
    def argument(self) -> Any:
        """
        Аргумент: acos(real / abs), со знаком минус при imaginary < 0.

        Raises:
            InvalidStateViolation: Если self не обратим
        """

    @abstractmethod
    def abs_pow2(self) -> Any:
        """real² + imaginary² в исходном типе (точно для целых и Decimal)."""

    @abstractmethod
    def to_big_integer(self) -> int: ...

    @abstractmethod
    def to_big_decimal(self) -> Decimal: ...

    @abstractmethod
    def to_polar_form(self) -> "AbstractPolarForm": ...

    @abstractmethod
    def equals_by_comparing(self, other: Any) -> bool: ...

    # -------------------------------------------------------------------------
    # Производные операции
    # -------------------------------------------------------------------------

    def is_not_invertible(self) -> bool:
        return not self.is_invertible()

    def does_not_equal_by_comparing(self, other: Any) -> bool:
        return not self.equals_by_comparing(other)

    # Числовые конверсии через действительную часть
    def __int__(self) -> int:
        return int(self.real)

    def __float__(self) -> float:
        return float(self.real)

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

    # -------------------------------------------------------------------------
    # Структурное равенство
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return _structural_key(self.real) == _structural_key(other.real) and _structural_key(
            self.imaginary
        ) == _structural_key(other.imaginary)

    def __hash__(self) -> int:
        return hash(
            (type(self).__name__, _structural_key(self.real), _structural_key(self.imaginary))
        )


# =============================================================================
# POLAR FORM
# =============================================================================


class AbstractPolarForm(BaseModel):
    """
    Базовая модель полярной формы (radial, angular).

    radial >= 0 и angular ∈ (-pi, pi], если форма получена из to_polar_form().
    """

    model_config = {"frozen": True}

    def __init__(self, radial: Any, angular: Any) -> None:
        super().__init__(
            radial=require_non_null(radial, "radial"),
            angular=require_non_null(angular, "angular"),
        )

    @abstractmethod
    def equals_by_comparing(self, other: Any) -> bool: ...

    def does_not_equal_by_comparing(self, other: Any) -> bool:
        return not self.equals_by_comparing(other)

    # Равенство полярной формы численное: 1.0 и 1.00 равны
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.equals_by_comparing(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.radial, self.angular))
