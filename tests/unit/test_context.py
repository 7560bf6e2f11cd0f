"""
Тесты для модулей Context и Power

Проверяет:
1. Параметры точности DECIMAL128 / EXACT
2. Трансцендентные функции произвольной точности (pi, e, acos, cos, sin)
3. Целочисленные утилиты (64-bit диапазон, степень двойки, signum)
4. Итеративное возведение в степень power_by_squaring
"""

import logging
import threading
from decimal import ROUND_HALF_EVEN, Context, Decimal

import mpmath
import pytest

from src.core.math.context import (
    BIG_E,
    BIG_PI,
    DECIMAL128,
    DEFAULT_MATH_CONTEXT,
    EXACT,
    LONG_MAX,
    LONG_MIN,
    big_pi,
    decimal_acos,
    decimal_cos,
    decimal_of_float,
    decimal_sin,
    decimal_sqrt,
    is_long,
    is_power_of_two,
    signum,
)
from src.core.math.power import power_by_squaring
from src.core.math.preconditions import InvalidArgumentViolation

# =============================================================================
# ТЕСТЫ ПАРАМЕТРОВ ТОЧНОСТИ
# =============================================================================


class TestPrecisionContexts:
    """Тесты контекстов округления"""

    def test_decimal128_parameters(self) -> None:
        """DECIMAL128: 34 цифры, HALF_EVEN"""
        assert DECIMAL128.prec == 34
        assert DECIMAL128.rounding == ROUND_HALF_EVEN

    def test_default_context_is_decimal128(self) -> None:
        assert DEFAULT_MATH_CONTEXT is DECIMAL128

    def test_exact_multiplication_keeps_all_digits(self) -> None:
        """EXACT не округляет произведение"""
        coefficient = 123456789012345678901234567890123456789
        x = Decimal(coefficient).scaleb(-38, EXACT)
        product = EXACT.multiply(x, x)

        assert len(product.as_tuple().digits) > 34
        assert product.as_tuple().digits == tuple(int(d) for d in str(coefficient * coefficient))
        assert product.as_tuple().exponent == -76

    def test_decimal128_division_rounds_to_34_digits(self) -> None:
        """Деление по DECIMAL128 даёт 34 значащих цифры"""
        third = DECIMAL128.divide(Decimal(1), Decimal(3))
        assert len(third.as_tuple().digits) == 34

    def test_long_bounds(self) -> None:
        assert LONG_MIN == -(2**63)
        assert LONG_MAX == 2**63 - 1


# =============================================================================
# ТЕСТЫ ТРАНСЦЕНДЕНТНЫХ ФУНКЦИЙ
# =============================================================================


class TestTranscendentals:
    """Тесты pi, e, sqrt, acos, cos, sin"""

    def test_big_pi_digits(self) -> None:
        """pi с 34 значащими цифрами"""
        assert BIG_PI == Decimal("3.141592653589793238462643383279503")

    def test_big_e_digits(self) -> None:
        """e с 34 значащими цифрами"""
        assert BIG_E == Decimal("2.718281828459045235360287471352662")

    def test_big_pi_custom_precision(self) -> None:
        """big_pi учитывает точность контекста"""
        assert big_pi(Context(prec=5)) == Decimal("3.1416")

    def test_decimal_sqrt_exact_square(self) -> None:
        assert decimal_sqrt(Decimal(25)) == 5

    def test_decimal_sqrt_precision(self) -> None:
        root = decimal_sqrt(Decimal(2))
        assert len(root.as_tuple().digits) == 34
        assert abs(root * root - 2) < Decimal("1e-32")

    def test_acos_of_one_is_zero(self) -> None:
        assert decimal_acos(Decimal(1)) == 0

    def test_acos_of_zero_is_half_pi(self) -> None:
        """acos(0) = pi / 2"""
        half_pi = DECIMAL128.divide(BIG_PI, Decimal(2))
        assert abs(decimal_acos(Decimal(0)) - half_pi) < Decimal("1e-32")

    def test_acos_of_minus_one_is_pi(self) -> None:
        assert abs(decimal_acos(Decimal(-1)) - BIG_PI) < Decimal("1e-32")

    def test_acos_clamps_out_of_range_argument(self, caplog: pytest.LogCaptureFixture) -> None:
        """Аргумент вне [-1, 1] приводится к границе с debug-записью"""
        caplog.set_level(logging.DEBUG, logger="src.core.math.context")

        assert decimal_acos(Decimal("1.0000000000000000000000000000000001")) == 0
        assert "clamped" in caplog.text

    def test_cos_and_sin_of_zero(self) -> None:
        assert decimal_cos(Decimal(0)) == 1
        assert decimal_sin(Decimal(0)) == 0

    def test_pythagorean_identity(self) -> None:
        """cos² + sin² = 1 с точностью DECIMAL128"""
        angle = Decimal("0.7")
        cos = decimal_cos(angle)
        sin = decimal_sin(angle)
        total = DECIMAL128.add(DECIMAL128.multiply(cos, cos), DECIMAL128.multiply(sin, sin))
        assert abs(total - 1) < Decimal("1e-32")


class TestTranscendentalsConcurrency:
    """Тесты независимости точности mpmath между потоками"""

    def test_global_mpmath_precision_untouched(self) -> None:
        """Вызовы не меняют глобальный mpmath.mp"""
        before = mpmath.mp.dps

        decimal_acos(Decimal("0.3"), Context(prec=80))
        big_pi(Context(prec=80))

        assert mpmath.mp.dps == before

    def test_concurrent_precisions_do_not_interfere(self) -> None:
        """Поток с низкой точностью не портит результаты потока с высокой"""
        high = Context(prec=60)
        low = Context(prec=5)
        expected = decimal_acos(Decimal("0.3"), high)
        stop = threading.Event()

        def low_precision_loop() -> None:
            while not stop.is_set():
                decimal_acos(Decimal("0.3"), low)
                decimal_cos(Decimal("0.3"), low)

        worker = threading.Thread(target=low_precision_loop)
        worker.start()
        try:
            results = [decimal_acos(Decimal("0.3"), high) for _ in range(2000)]
        finally:
            stop.set()
            worker.join()

        wrong = [r for r in results if r != expected]
        assert wrong == []


# =============================================================================
# ТЕСТЫ УТИЛИТ
# =============================================================================


class TestUtilities:
    """Тесты конверсий и целочисленных утилит"""

    def test_decimal_of_float_uses_shortest_repr(self) -> None:
        """0.1 → Decimal('0.1'), без двоичного шума"""
        assert decimal_of_float(0.1) == Decimal("0.1")
        assert decimal_of_float(0.1) != Decimal(0.1)

    @pytest.mark.parametrize(
        "value, expected",
        [(0, True), (2**63 - 1, True), (-(2**63), True), (2**63, False), (-(2**63) - 1, False)],
    )
    def test_is_long(self, value: int, expected: bool) -> None:
        assert is_long(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [(1, True), (2, True), (8, True), (1024, True), (0, False), (6, False), (-4, False)],
    )
    def test_is_power_of_two(self, value: int, expected: bool) -> None:
        assert is_power_of_two(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [(5, 1), (-3, -1), (0, 0), (2.5, 1), (Decimal("-0.1"), -1), (Decimal("-0"), 0)],
    )
    def test_signum(self, value: object, expected: int) -> None:
        assert signum(value) == expected


# =============================================================================
# ТЕСТЫ POWER
# =============================================================================


class TestPowerBySquaring:
    """Тесты для power_by_squaring"""

    def test_integer_power(self) -> None:
        assert power_by_squaring(3, 4, 1, lambda x, y: x * y) == 81

    def test_zero_exponent_returns_one(self) -> None:
        """Показатель 0 → переданная единица, без умножений"""
        calls = []

        def multiply(x: int, y: int) -> int:
            calls.append((x, y))
            return x * y

        assert power_by_squaring(7, 0, 1, multiply) == 1
        assert calls == []

    def test_negative_exponent_rejected(self) -> None:
        with pytest.raises(InvalidArgumentViolation, match="exponent"):
            power_by_squaring(2, -1, 1, lambda x, y: x * y)

    def test_logarithmic_number_of_multiplications(self) -> None:
        """O(log k) умножений"""
        calls = []

        def multiply(x: int, y: int) -> int:
            calls.append(1)
            return x * y

        assert power_by_squaring(2, 1000, 1, multiply) == 2**1000
        assert len(calls) <= 2 * (1000).bit_length()

    def test_large_exponent_without_recursion(self) -> None:
        """Глубина стека не зависит от показателя"""
        assert power_by_squaring(1, 10**18, 1, lambda x, y: x * y) == 1
