"""
Комплексные числа и полярные формы.

- Complex / PolarForm: float
- BigComplex / BigPolarForm: Decimal произвольной точности
- Gaussian: гауссовы целые над signed 64-bit integer (промоушен в Complex)
- BigGaussian: гауссовы целые над int (промоушен в BigComplex)
"""

from src.core.number.complex.abstract_complex import AbstractComplex, AbstractPolarForm
from src.core.number.complex.big_complex import BigComplex, BigPolarForm
from src.core.number.complex.complex import Complex, PolarForm
from src.core.number.complex.gaussian import BigGaussian, Gaussian

__all__ = [
    # Base models
    "AbstractComplex",
    "AbstractPolarForm",
    # Float
    "Complex",
    "PolarForm",
    # Decimal
    "BigComplex",
    "BigPolarForm",
    # Gaussian integers
    "Gaussian",
    "BigGaussian",
]
