"""
Power — Итеративное возведение в целую степень

Общий алгоритм для всех числовых типов (complex, fraction):
- Square-and-multiply: O(log k) умножений, без рекурсии
- Глубина стека не зависит от показателя степени

Отрицательные показатели обрабатываются вызывающим кодом:
x^(-k) = (x^k).invert()
"""

from typing import Callable, TypeVar

from src.core.math.preconditions import check_argument

T = TypeVar("T")


def power_by_squaring(
    base: T,
    exponent: int,
    one: T,
    multiply: Callable[[T, T], T],
) -> T:
    """
    Возведение в неотрицательную целую степень.

    Args:
        base: Основание
        exponent: Показатель степени (>= 0)
        one: Мультипликативная единица типа результата
        multiply: Умножение (накопленный результат, множитель) → произведение

    Returns:
        base^exponent; при exponent == 0 возвращается one

    Raises:
        InvalidArgumentViolation: Если exponent < 0

    Examples:
        >>> power_by_squaring(3, 4, 1, lambda x, y: x * y)
        81
    """
    check_argument(exponent >= 0, "exponent >= 0 expected but exponent = %s", exponent)

    result = one
    while exponent > 0:
        if exponent & 1:
            result = multiply(result, base)
        exponent >>= 1
        # base^(2^k) не вычисляется сверх нужного: промежуточные значения ≤ результата
        if exponent:
            base = multiply(base, base)
    return result
