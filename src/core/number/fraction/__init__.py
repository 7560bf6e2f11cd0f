"""
Дроби над целыми числами.

- Fraction: signed 64-bit integer (LONG_QUOTIENT_FIELD)
- BigFraction: int произвольной точности (BIG_INTEGER_QUOTIENT_FIELD)

Арифметика не сокращает результат; каноническая форма — normalize().reduce().
"""

from src.core.number.fraction.abstract_fraction import AbstractFraction
from src.core.number.fraction.fraction import BigFraction, Fraction, IntegralFraction

__all__ = [
    # Base models
    "AbstractFraction",
    "IntegralFraction",
    # Concrete kinds
    "Fraction",
    "BigFraction",
]
