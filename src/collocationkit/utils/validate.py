"""Validation utilities for CollocationKit."""

from __future__ import annotations

from numbers import Integral
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from collocationkit.exceptions import DegenerateInputError, InvalidSizeError

__all__ = [
    "validate_size",
    "resolve_dtype",
    "validate_points",
    "validate_domain",
    "validate_samples",
    "validate_order",
    "ensure_finite_matrix",
]


def validate_size(n_c: Any) -> int:
    """Validates the number of collocation points.

    Args:
        n_c: Candidate number of points. Must be an integer (``bool`` is
            rejected) and at least ``1``.

    Returns:
        ``n_c`` as a Python ``int``.

    Raises:
        InvalidSizeError: If ``n_c`` is not an integer or is smaller than ``1``.
    """
    if isinstance(n_c, bool) or not isinstance(n_c, Integral):
        raise InvalidSizeError(
            f"n_c must be a positive integer; got {n_c!r} of type {type(n_c).__name__}."
        )
    if n_c < 1:
        raise InvalidSizeError(f"n_c must be >= 1; got {n_c}.")
    return int(n_c)


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """Resolves a requested scalar type to a NumPy floating dtype.

    Args:
        dtype: Anything accepted by :class:`numpy.dtype`.

    Returns:
        The corresponding floating dtype.

    Raises:
        TypeError: If ``dtype`` is not a real floating type.
    """
    resolved = np.dtype(dtype)
    if not np.issubdtype(resolved, np.floating):
        raise TypeError(f"dtype must be a real floating type; got {resolved}.")
    return resolved


def validate_points(points: ArrayLike) -> NDArray[np.floating]:
    """Validates and converts a collocation point set into a NumPy array.

    Requirements:
      - ``points`` is 1D with at least one entry.
      - every entry is finite.
      - entries are pairwise distinct. They do not need to be sorted.

    Floating input keeps its dtype and integer input is converted to
    ``float64``. Complex, boolean and non-numeric input is rejected.

    Args:
        points: 1D array-like of collocation points.

    Returns:
        The point set as a 1D floating NumPy array.

    Raises:
        TypeError: If ``points`` are not real numbers.
        InvalidSizeError: If ``points`` is not 1D or is empty.
        DegenerateInputError: If ``points`` contains non-finite or repeated
            values.
    """
    arr = np.asarray(points)
    if np.issubdtype(arr.dtype, np.integer):
        arr = arr.astype(np.float64)
    elif not np.issubdtype(arr.dtype, np.floating):
        raise TypeError(f"points must be real numbers; got dtype={arr.dtype}.")

    if arr.ndim != 1:
        raise InvalidSizeError(f"points must be 1D; got ndim={arr.ndim}.")
    if arr.size < 1:
        raise InvalidSizeError("points must contain at least one value (n_c >= 1).")
    if not np.all(np.isfinite(arr)):
        bad = np.flatnonzero(~np.isfinite(arr))
        raise DegenerateInputError(
            f"points must be finite; non-finite values at indices {bad.tolist()}."
        )

    order = np.argsort(arr, kind="stable")
    repeated = np.flatnonzero(np.diff(arr[order]) == 0)
    if repeated.size:
        pairs = [(int(order[r]), int(order[r + 1])) for r in repeated]
        values = sorted({float(arr[order[r]]) for r in repeated})
        raise DegenerateInputError(
            "points must be pairwise distinct; "
            f"repeated values {values} at index pairs {pairs}."
        )

    return arr


def validate_domain(domain: ArrayLike) -> tuple[float, float]:
    """Validates an interval ``(t0, tf)`` onto which points are mapped.

    Args:
        domain: Pair of finite floats with ``t0 < tf``.

    Returns:
        The interval as a tuple of floats.

    Raises:
        ValueError: If ``domain`` is not a finite, non-empty interval.
    """
    arr = np.asarray(domain, dtype=float)
    if arr.shape != (2,):
        raise ValueError(f"domain must be a pair (t0, tf); got shape={arr.shape}.")
    if not np.all(np.isfinite(arr)):
        raise ValueError("domain must be finite.")
    t0, tf = float(arr[0]), float(arr[1])
    if not tf > t0:
        raise ValueError(f"domain must satisfy t0 < tf; got ({t0}, {tf}).")
    return t0, tf


def validate_samples(fx: ArrayLike, n_c: int) -> NDArray[np.floating]:
    """Validates function samples taken at ``n_c`` collocation points.

    Args:
        fx: Samples of shape ``(n_c,)`` or ``(m, n_c)``. Each row holds one
            function sampled at every collocation point.
        n_c: Number of collocation points.

    Returns:
        ``fx`` as a NumPy array.

    Raises:
        ValueError: If ``fx`` has the wrong number of dimensions or its last
            axis does not have length ``n_c``.
    """
    arr = np.asarray(fx)
    if arr.ndim not in (1, 2):
        raise ValueError(f"fx must be 1D or 2D; got ndim={arr.ndim}.")
    if arr.shape[-1] != n_c:
        raise ValueError(
            f"fx must have {n_c} samples along its last axis; got shape={arr.shape}."
        )
    return arr


def validate_order(order: Any) -> int:
    """Validates a derivative order.

    Args:
        order: Candidate order. Must be an integer (``bool`` is rejected) and
            at least ``0``.

    Returns:
        ``order`` as a Python ``int``.

    Raises:
        ValueError: If ``order`` is not a non-negative integer.
    """
    if isinstance(order, bool) or not isinstance(order, Integral) or order < 0:
        raise ValueError(f"order must be a non-negative integer; got {order!r}.")
    return int(order)


def ensure_finite_matrix(matrix: NDArray[np.floating]) -> NDArray[np.floating]:
    """Checks that an assembled differentiation matrix is finite.

    Args:
        matrix: Assembled matrix.

    Returns:
        ``matrix`` unchanged.

    Raises:
        DegenerateInputError: If any entry is NaN or infinite.
    """
    finite = np.isfinite(matrix)
    if not np.all(finite):
        rows, cols = np.nonzero(~finite)
        raise DegenerateInputError(
            "differentiation matrix has non-finite entries at "
            f"{list(zip(rows.tolist(), cols.tolist()))}; "
            "collocation points are too close together."
        )
    return matrix
