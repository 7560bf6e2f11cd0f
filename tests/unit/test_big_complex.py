"""
Тесты для модуля BigComplex (Decimal)

Проверяет:
1. Точность по умолчанию: точные +, -, *, округление DECIMAL128 для /, abs, argument
2. Явный math_context
3. Нормализацию отрицательного нуля
4. Структурное равенство (по представлению) vs численное (equals_by_comparing)
5. Полярную форму BigPolarForm и обратную конверсию
"""

from decimal import Context, Decimal

import pytest
from pydantic import ValidationError

from src.core.math.context import BIG_PI, DECIMAL128, EXACT
from src.core.math.preconditions import (
    InvalidArgumentViolation,
    InvalidStateViolation,
    NullArgumentViolation,
)
from src.core.number.complex import BigComplex, BigPolarForm

TOLERANCE = Decimal("1e-30")


def big(real: str | int, imaginary: str | int) -> BigComplex:
    return BigComplex(Decimal(real), Decimal(imaginary))


def assert_close(actual: BigComplex, expected: BigComplex) -> None:
    assert abs(actual.real - expected.real) < TOLERANCE
    assert abs(actual.imaginary - expected.imaginary) < TOLERANCE


# =============================================================================
# ТЕСТЫ СОЗДАНИЯ
# =============================================================================


class TestBigComplexCreation:
    """Тесты создания BigComplex"""

    def test_constants(self) -> None:
        assert BigComplex.ZERO.equals_by_comparing(big(0, 0))
        assert BigComplex.ONE.equals_by_comparing(big(1, 0))
        assert BigComplex.I.equals_by_comparing(big(0, 1))
        assert BigComplex.MINUS_ONE.equals_by_comparing(big(-1, 0))
        assert BigComplex.MINUS_I.equals_by_comparing(big(0, -1))

    def test_imaginary_aliases(self) -> None:
        assert BigComplex.IMAGINARY is BigComplex.I
        assert BigComplex.MINUS_IMAGINARY is BigComplex.MINUS_I

    def test_negative_zero_normalized(self) -> None:
        """Decimal('-0') хранится как Decimal('0')"""
        z = BigComplex(Decimal("-0"), Decimal("-0.00"))
        assert not z.real.is_signed()
        assert not z.imaginary.is_signed()
        assert BigComplex.MINUS_ONE.imaginary.is_signed() is False

    def test_none_component_rejected(self) -> None:
        with pytest.raises(NullArgumentViolation, match="imaginary"):
            BigComplex(Decimal(1), None)

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError, match="frozen"):
            BigComplex.ONE.real = Decimal(2)  # type: ignore


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestBigComplexArithmetic:
    """Тесты арифметики BigComplex"""

    def test_multiply(self) -> None:
        """(1+2i)(3+4i) = -5+10i, точно"""
        assert big(1, 2).multiply(big(3, 4)) == big(-5, 10)

    def test_divide(self) -> None:
        """(1+2i)/(3+4i) = 0.44+0.08i"""
        quotient = big(1, 2).divide(big(3, 4))
        assert quotient.equals_by_comparing(big("0.44", "0.08"))

    def test_exact_multiplication_keeps_all_digits(self) -> None:
        """Без math_context умножение не округляется"""
        x = big("1.23456789012345678901234567890123456789", 0)
        product = x.multiply(x)
        assert product.real == EXACT.multiply(x.real, x.real)
        assert len(product.real.as_tuple().digits) > 34

    def test_exact_addition(self) -> None:
        total = big("1e40", 0).add(big("1e-40", 0))
        assert total.subtract(big("1e40", 0)).equals_by_comparing(big("1e-40", 0))

    def test_division_rounds_by_decimal128(self) -> None:
        third = BigComplex.ONE.divide(big(3, 0))
        assert third.real == DECIMAL128.divide(Decimal(1), Decimal(3))

    def test_explicit_math_context(self) -> None:
        """math_context управляет округлением"""
        third = BigComplex.ONE.divide(big(3, 0), Context(prec=5))
        assert third.real == Decimal("0.33333")

    def test_math_context_applies_to_multiply(self) -> None:
        x = big("1.23456789", 0)
        product = x.multiply(x, Context(prec=4))
        assert product.real == Decimal("1.524")

    def test_divide_by_zero_rejected(self) -> None:
        with pytest.raises(InvalidArgumentViolation):
            BigComplex.ONE.divide(BigComplex.ZERO)

    def test_invert(self) -> None:
        assert BigComplex.I.invert().equals_by_comparing(BigComplex.MINUS_I)

    def test_invert_zero_rejected(self) -> None:
        with pytest.raises(InvalidStateViolation):
            BigComplex.ZERO.invert()

    @pytest.mark.parametrize("real, imaginary", [(1, 2), ("-3.5", "0.25"), (0, -7), ("0.001", 1000)])
    def test_multiply_by_inverse_is_one(self, real: str | int, imaginary: str | int) -> None:
        """z · z⁻¹ ≈ 1"""
        z = big(real, imaginary)
        assert_close(z.multiply(z.invert()), BigComplex.ONE)

    def test_negate_and_conjugate(self) -> None:
        assert big(1, 2).negate() == big(-1, -2)
        assert big(1, 2).conjugate() == big(1, -2)
        assert BigComplex.ZERO.negate() == BigComplex.ZERO

    def test_operators(self) -> None:
        z = big(1, 2)
        w = big(3, 4)
        assert z + w == big(4, 6)
        assert z - w == big(-2, -2)
        assert z * w == big(-5, 10)
        assert (z / w).equals_by_comparing(z.divide(w))
        assert -z == big(-1, -2)
        assert abs(w) == 5


# =============================================================================
# ТЕСТЫ СТЕПЕНИ
# =============================================================================


class TestBigComplexPow:
    """Тесты pow"""

    def test_zero_exponent_is_one(self) -> None:
        assert big(1, 2).pow(0) == BigComplex.ONE

    def test_square(self) -> None:
        """(1+i)^2 = 2i"""
        assert big(1, 1).pow(2).equals_by_comparing(big(0, 2))

    def test_negative_exponent(self) -> None:
        """(2i)^-2 = -1/4"""
        assert big(0, 2).pow(-2).equals_by_comparing(big("-0.25", 0))

    def test_exponent_additivity(self) -> None:
        """z^3 · z^4 = z^7 (точно без math_context)"""
        z = big("1.5", "-0.5")
        assert z.pow(3).multiply(z.pow(4)).equals_by_comparing(z.pow(7))


# =============================================================================
# ТЕСТЫ ПОЛЯРНОЙ ФОРМЫ
# =============================================================================


class TestBigComplexPolar:
    """Тесты abs, argument, to_polar_form"""

    def test_abs(self) -> None:
        assert big(3, 4).abs() == 5
        assert big(3, 4).abs_pow2() == 25

    def test_abs_precision(self) -> None:
        assert len(big(1, 1).abs().as_tuple().digits) == 34

    def test_argument(self) -> None:
        """arg(i) = pi/2, arg(-i) = -pi/2, arg(-1) = pi"""
        half_pi = DECIMAL128.divide(BIG_PI, Decimal(2))
        assert abs(BigComplex.I.argument() - half_pi) < TOLERANCE
        assert abs(BigComplex.MINUS_I.argument() + half_pi) < TOLERANCE
        assert abs(BigComplex.MINUS_ONE.argument() - BIG_PI) < TOLERANCE

    def test_argument_of_zero_rejected(self) -> None:
        with pytest.raises(InvalidStateViolation):
            BigComplex.ZERO.argument()

    def test_polar_form(self) -> None:
        """1+2i → (2.2360679..., 1.1071487...)"""
        polar = big(1, 2).to_polar_form()
        assert isinstance(polar, BigPolarForm)
        assert float(polar.radial) == pytest.approx(2.2360679774997896)
        assert float(polar.angular) == pytest.approx(1.1071487177940904)

    def test_polar_form_of_zero_rejected(self) -> None:
        with pytest.raises(InvalidStateViolation):
            BigComplex.ZERO.to_polar_form()

    @pytest.mark.parametrize("real, imaginary", [(1, 2), ("-3", "-0.5"), (0, 2), (-4, 0)])
    def test_polar_round_trip(self, real: str | int, imaginary: str | int) -> None:
        """to_polar_form().to_big_complex() ≈ z"""
        z = big(real, imaginary)
        assert_close(z.to_polar_form().to_big_complex(), z)

    def test_polar_form_with_math_context(self) -> None:
        polar = big(1, 2).to_polar_form(Context(prec=10))
        assert len(polar.radial.as_tuple().digits) == 10


class TestBigPolarForm:
    """Тесты BigPolarForm"""

    def test_equality_is_numeric(self) -> None:
        """Полярные формы равны при численном равенстве компонент"""
        a = BigPolarForm(Decimal("1.0"), Decimal("0.5"))
        b = BigPolarForm(Decimal("1.00"), Decimal("0.50"))
        assert a == b
        assert a.equals_by_comparing(b)
        assert hash(a) == hash(b)
        assert a != BigPolarForm(Decimal(1), Decimal("0.25"))

    def test_negative_zero_normalized(self) -> None:
        assert not BigPolarForm(Decimal(1), Decimal("-0")).angular.is_signed()


# =============================================================================
# ТЕСТЫ РАВЕНСТВА И КОНВЕРСИЙ
# =============================================================================


class TestBigComplexEquality:
    """Тесты структурного и численного равенства"""

    def test_structural_equality_distinguishes_scale(self) -> None:
        """1.0 и 1.00 структурно различны, численно равны"""
        a = big("1.0", 0)
        b = big("1.00", 0)
        assert a != b
        assert a.equals_by_comparing(b)

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(big(1, 0)) == hash(BigComplex.ONE)
        assert len({big(1, 2), big(1, 2), big("1.0", 2)}) == 2

    def test_conversions(self) -> None:
        z = big("2.75", 9)
        assert z.to_big_integer() == 2
        assert z.to_big_decimal() == Decimal("2.75")
        assert int(z) == 2
        assert float(z) == 2.75
