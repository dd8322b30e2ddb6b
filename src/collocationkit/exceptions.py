"""Exceptions raised by CollocationKit.

All of them derive from :class:`ValueError`, since every failure in this
package is caused by invalid input rather than by a transient condition.
"""

from __future__ import annotations

__all__ = [
    "CollocationError",
    "InvalidSizeError",
    "DegenerateInputError",
]


class CollocationError(ValueError):
    """Base class for invalid collocation input."""


class InvalidSizeError(CollocationError):
    """Raised when the number of collocation points is not a positive integer.

    Also raised when a point set is not one-dimensional, since its size is
    then not well defined.
    """


class DegenerateInputError(CollocationError):
    """Raised when a point set cannot produce a finite differentiation matrix.

    This covers duplicate points (which make a divisor of the Lagrange
    recurrence vanish), non-finite points, and matrices whose assembly
    overflowed because points nearly coincide.
    """
