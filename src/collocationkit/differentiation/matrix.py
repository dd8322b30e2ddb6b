"""Provides :class:`DifferentiationMatrix`."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from collocationkit.differentiation.lagrange import lagrange_derivative_coefficients
from collocationkit.utils.validate import validate_order, validate_points, validate_samples

__all__ = ["DifferentiationMatrix"]


class DifferentiationMatrix:
    """Lagrange differentiation matrix bundled with its collocation points.

    The matrix is meant to be applied from the right to row vectors of
    function samples: ``fx @ D`` approximates the derivative samples. The
    size ``n_c`` is validated once, when the matrix is built, and carried
    alongside the values.

    Attributes:
        size: Number of collocation points ``n_c``.
        points: Read-only array of the collocation points.
        values: Read-only ``(n_c, n_c)`` array of matrix entries.
    """

    def __init__(self, points: ArrayLike, values: ArrayLike) -> None:
        """Initialises the matrix from precomputed values.

        Most callers should use :meth:`from_points` instead.

        Args:
            points: The collocation points the matrix was built on.
            values: The ``(n_c, n_c)`` matrix entries.

        Raises:
            InvalidSizeError: If ``points`` is not a non-empty 1D array.
            DegenerateInputError: If ``points`` are repeated or not finite.
            ValueError: If ``values`` is not square of size ``n_c``.
        """
        pts = np.array(validate_points(points))
        vals = np.array(values, dtype=pts.dtype)
        if vals.shape != (pts.size, pts.size):
            raise ValueError(
                f"values must have shape ({pts.size}, {pts.size}); got {vals.shape}."
            )
        pts.flags.writeable = False
        vals.flags.writeable = False
        self.size = int(pts.size)
        self.points = pts
        self.values = vals

    @classmethod
    def from_points(cls, points: ArrayLike) -> DifferentiationMatrix:
        """Builds the differentiation matrix for a set of collocation points.

        Args:
            points: 1D array-like of pairwise-distinct finite points.

        Returns:
            The differentiation matrix.
        """
        pts = validate_points(points)
        return cls(pts, lagrange_derivative_coefficients(pts))

    @property
    def shape(self) -> tuple[int, int]:
        """Shape of the matrix, ``(n_c, n_c)``."""
        return self.values.shape

    @property
    def dtype(self) -> np.dtype:
        """Scalar type of the matrix entries."""
        return self.values.dtype

    def __array__(self, dtype: DTypeLike = None, copy: bool | None = None) -> NDArray[np.floating]:
        if dtype is None or np.dtype(dtype) == self.values.dtype:
            return self.values.copy() if copy else self.values
        if copy is False:
            raise ValueError(
                f"cannot convert {self.values.dtype} values to {np.dtype(dtype)} without a copy."
            )
        return self.values.astype(dtype)

    def __repr__(self) -> str:
        return f"DifferentiationMatrix(size={self.size}, dtype={self.dtype})"

    def apply(self, fx: ArrayLike) -> NDArray[np.floating]:
        """Differentiates sampled function values.

        Args:
            fx: Samples of shape ``(n_c,)``, or ``(m, n_c)`` for ``m``
                functions sampled at the same points.

        Returns:
            ``fx @ D``, the derivative samples, with the shape of ``fx``.

        Raises:
            ValueError: If the last axis of ``fx`` does not have length ``n_c``.
        """
        return validate_samples(fx, self.size) @ self.values

    def power(self, order: int) -> NDArray[np.floating]:
        """Returns the operator for the ``order``-th derivative.

        Since samples are multiplied from the left, ``fx @ D^order`` applies
        the first derivative ``order`` times. The result is exact for
        polynomials of degree at most ``n_c - 1``.

        Args:
            order: Non-negative derivative order. ``0`` gives the identity.

        Returns:
            The ``(n_c, n_c)`` matrix ``D^order``.

        Raises:
            ValueError: If ``order`` is not a non-negative integer.
        """
        return np.linalg.matrix_power(self.values, validate_order(order))
