"""Lagrange differentiation matrices for arbitrary collocation points.

For a set of distinct collocation points ``c`` this module computes the
matrix ``D`` with entries ``D[j, i] = L_j'(c[i])``, where ``L_j`` is the
Lagrange basis polynomial that equals one at ``c[j]`` and vanishes at every
other point. If ``fx`` holds the values of a function at the points,

    fx = [f(c[0]), ..., f(c[n_c - 1])]

then ``fx @ D`` approximates ``[f'(c[0]), ..., f'(c[n_c - 1])]`` and is exact
up to rounding whenever ``f`` is a polynomial of degree at most ``n_c - 1``.

Examples:
=========

Differentiating ``t**2`` on three uniform points::
>>> import numpy as np
>>> from collocationkit.differentiation.lagrange import lagrange_derivative_coefficients
>>> c = np.array([0.0, 0.5, 1.0])
>>> d = lagrange_derivative_coefficients(c)
>>> np.allclose(c**2 @ d, 2 * c)
True
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from collocationkit.logger import collocationkit_logger
from collocationkit.utils.validate import ensure_finite_matrix, validate_points

__all__ = [
    "point_differences",
    "lagrange_derivative_coefficients",
]


def point_differences(points: NDArray[np.floating]) -> NDArray[np.floating]:
    """Returns the matrix of pairwise differences ``dt[i, j] = points[i] - points[j]``."""
    return points[:, np.newaxis] - points[np.newaxis, :]


def lagrange_derivative_coefficients(points: ArrayLike) -> NDArray[np.floating]:
    """Computes the Lagrange differentiation matrix for a set of points.

    Row ``j`` holds the derivative of the ``j``-th Lagrange basis polynomial
    evaluated at every point. Each derivative is built with the product rule,
    one factor ``(t - c[k]) / (c[j] - c[k])`` at a time, keeping a running
    value and a running derivative of the partial product::

        derivative = (value + derivative * dt[i, k]) / dt[j, k]
        value      = value * dt[i, k] / dt[j, k]

    for every ``k != j`` in increasing order. The recurrence is evaluated for
    all columns ``i`` at once; every entry goes through the same sequence of
    floating point operations as the scalar recurrence, so results are
    bit-for-bit reproducible.

    Args:
        points: 1D array-like of ``n_c`` pairwise-distinct finite points. The
            points need not be sorted. Floating input keeps its dtype.

    Returns:
        The read-only ``(n_c, n_c)`` differentiation matrix. For ``n_c == 1``
        this is ``[[0.0]]``.

    Raises:
        InvalidSizeError: If ``points`` is not 1D or is empty.
        TypeError: If ``points`` are not real numbers.
        DegenerateInputError: If ``points`` has repeated or non-finite
            values, or if the assembled matrix is not finite.
    """
    c = validate_points(points)
    n_c = c.size
    collocationkit_logger.debug(
        "assembling %dx%d Lagrange differentiation matrix (dtype=%s)", n_c, n_c, c.dtype
    )

    dt = point_differences(c)
    coefficients = np.empty((n_c, n_c), dtype=c.dtype)
    # Overflow from nearly coincident points is reported by ensure_finite_matrix.
    with np.errstate(over="ignore", invalid="ignore"):
        for j in range(n_c):
            derivative = np.zeros(n_c, dtype=c.dtype)
            value = np.ones(n_c, dtype=c.dtype)
            for k in range(n_c):
                if k == j:
                    continue
                derivative = (value + derivative * dt[:, k]) / dt[j, k]
                value = value * dt[:, k] / dt[j, k]
            coefficients[j, :] = derivative

    ensure_finite_matrix(coefficients)
    coefficients.flags.writeable = False
    return coefficients
