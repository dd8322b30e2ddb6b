"""Provides all collocationkit methods."""

from importlib.metadata import PackageNotFoundError, version

from collocationkit.collocation_kit import CollocationKit
from collocationkit.differentiation import (
    DifferentiationMatrix,
    lagrange_derivative_coefficients,
)
from collocationkit.exceptions import (
    CollocationError,
    DegenerateInputError,
    InvalidSizeError,
)
from collocationkit.points import (
    available_distributions,
    generate_collocation_points,
    register_distribution,
)

try:
    __version__ = version("collocationkit")
except PackageNotFoundError:
    pass

__all__ = [
    "CollocationKit",
    "DifferentiationMatrix",
    "lagrange_derivative_coefficients",
    "generate_collocation_points",
    "register_distribution",
    "available_distributions",
    "CollocationError",
    "DegenerateInputError",
    "InvalidSizeError",
]
