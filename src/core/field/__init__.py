"""
Quotient fields — дескрипторы арифметики для обобщённых алгоритмов.

Один stateless экземпляр на числовой тип. Используются AbstractFraction
для реализации +, -, *, negate, abs, expand независимо от типа элементов.
"""

from src.core.field.quotient_field import (
    BIG_DECIMAL_QUOTIENT_FIELD,
    BIG_INTEGER_QUOTIENT_FIELD,
    DOUBLE_QUOTIENT_FIELD,
    LONG_QUOTIENT_FIELD,
    BigDecimalQuotientField,
    BigIntegerQuotientField,
    DoubleQuotientField,
    LongQuotientField,
    QuotientField,
)
from src.core.field.complex_fields import (
    BIG_COMPLEX_QUOTIENT_FIELD,
    BIG_GAUSSIAN_QUOTIENT_FIELD,
    COMPLEX_QUOTIENT_FIELD,
    GAUSSIAN_QUOTIENT_FIELD,
    BigComplexQuotientField,
    BigGaussianQuotientField,
    ComplexQuotientField,
    GaussianQuotientField,
)

__all__ = [
    # Interface
    "QuotientField",
    # Scalar fields — Types
    "DoubleQuotientField",
    "LongQuotientField",
    "BigIntegerQuotientField",
    "BigDecimalQuotientField",
    # Scalar fields — Instances
    "DOUBLE_QUOTIENT_FIELD",
    "LONG_QUOTIENT_FIELD",
    "BIG_INTEGER_QUOTIENT_FIELD",
    "BIG_DECIMAL_QUOTIENT_FIELD",
    # Complex fields — Types
    "ComplexQuotientField",
    "BigComplexQuotientField",
    "GaussianQuotientField",
    "BigGaussianQuotientField",
    # Complex fields — Instances
    "COMPLEX_QUOTIENT_FIELD",
    "BIG_COMPLEX_QUOTIENT_FIELD",
    "GAUSSIAN_QUOTIENT_FIELD",
    "BIG_GAUSSIAN_QUOTIENT_FIELD",
]
