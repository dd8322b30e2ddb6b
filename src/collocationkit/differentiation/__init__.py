"""Differentiation matrices on collocation points."""

from .lagrange import lagrange_derivative_coefficients
from .matrix import DifferentiationMatrix

__all__ = [
    "lagrange_derivative_coefficients",
    "DifferentiationMatrix",
]
