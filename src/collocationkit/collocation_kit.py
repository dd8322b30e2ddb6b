"""Provides the CollocationKit API.

This class is a lightweight front end that chains the two pieces of the
package: a collocation point distribution and the Lagrange differentiation
matrix built on it. You choose the number of points, a distribution by name
and, optionally, the interval the points should span.

Examples:
    Differentiating a sampled polynomial on the default unit interval:

        >>> import numpy as np
        >>> from collocationkit.collocation_kit import CollocationKit
        >>> ck = CollocationKit(3)
        >>> ck.points.tolist()
        [0.0, 0.5, 1.0]
        >>> np.allclose(ck.differentiate(ck.points**2), [0.0, 1.0, 2.0])
        True

    Radau points on a time interval, as used in direct collocation:

        >>> ck = CollocationKit(6, distribution="lgr", domain=(0.0, 10.0))
        >>> np.allclose(ck.differentiate(ck.evaluate(np.square)), 2 * ck.points)
        True

Notes:
    - Distribution names are case/spacing/punctuation insensitive; see
      ``collocationkit.points.available_distributions()``.
    - The differentiation matrix is built on first use and reused; the kit
      itself is immutable.
"""

from __future__ import annotations

from functools import cached_property
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from collocationkit.differentiation.matrix import DifferentiationMatrix
from collocationkit.points.distributions import generate_collocation_points
from collocationkit.utils.validate import (
    resolve_dtype,
    validate_domain,
    validate_order,
    validate_points,
    validate_samples,
    validate_size,
)


class CollocationKit:
    """Collocation points and their differentiation matrix on an interval.

    Attributes:
        n_c: Number of collocation points.
        distribution: Name of the point distribution, as given.
        domain: Interval ``(t0, tf)`` spanned by the points.
        dtype: Floating scalar type of points and matrix entries.
    """

    def __init__(
        self,
        n_c: int,
        *,
        distribution: str = "uniform",
        domain: ArrayLike = (0.0, 1.0),
        dtype: DTypeLike = np.float64,
    ) -> None:
        """Initialises the kit and validates its configuration.

        Args:
            n_c: Number of collocation points, at least ``1``.
            distribution: Name or alias of a registered point distribution.
            domain: Interval ``(t0, tf)`` with ``t0 < tf``. Normalized points
                ``tau`` in ``[0, 1]`` are mapped to ``t0 + (tf - t0) * tau``.
            dtype: Floating scalar type.

        Raises:
            InvalidSizeError: If ``n_c`` is not a positive integer.
            ValueError: If ``domain`` is not a finite non-empty interval or
                ``distribution`` is unknown.
            DegenerateInputError: If mapping onto ``domain`` makes points
                coincide.
            TypeError: If ``dtype`` is not a floating type.
        """
        self.n_c = validate_size(n_c)
        self.distribution = distribution
        self.domain = validate_domain(domain)
        self.dtype = resolve_dtype(dtype)
        self._normalized_points = generate_collocation_points(
            self.n_c, distribution, dtype=self.dtype
        )
        self._points = self._map_to_domain(self._normalized_points)

    def __repr__(self) -> str:
        return (
            f"CollocationKit(n_c={self.n_c}, distribution={self.distribution!r}, "
            f"domain={self.domain}, dtype={self.dtype})"
        )

    @property
    def normalized_points(self) -> NDArray[np.floating]:
        """Read-only collocation points on the normalized interval."""
        return self._normalized_points

    @property
    def points(self) -> NDArray[np.floating]:
        """Read-only collocation points mapped onto :attr:`domain`."""
        return self._points

    def _map_to_domain(self, tau: NDArray[np.floating]) -> NDArray[np.floating]:
        """Maps normalized points onto :attr:`domain` and checks they stay distinct.

        Raises:
            DegenerateInputError: If the mapping rounds distinct points to the
                same value, e.g. for a narrow domain far from the origin.
        """
        t0, tf = self.domain
        if (t0, tf) == (0.0, 1.0):
            return tau
        mapped = validate_points((t0 + (tf - t0) * tau).astype(self.dtype))
        mapped.flags.writeable = False
        return mapped

    @cached_property
    def differentiation_matrix(self) -> DifferentiationMatrix:
        """Differentiation matrix on :attr:`points`."""
        return DifferentiationMatrix.from_points(self.points)

    def evaluate(self, function: Callable[[NDArray[np.floating]], ArrayLike]) -> NDArray[np.floating]:
        """Samples a vectorized function at the collocation points.

        Args:
            function: Callable accepting the array of points and returning an
                array of the same length.

        Returns:
            The samples as a 1D array.

        Raises:
            ValueError: If ``function`` does not return one value per point.
        """
        fx = np.asarray(function(self.points))
        if fx.shape != (self.n_c,):
            raise ValueError(
                f"function must return shape ({self.n_c},); got {fx.shape}."
            )
        return fx

    def differentiate(self, fx: ArrayLike, order: int = 1) -> NDArray[np.floating]:
        """Differentiates function samples taken at :attr:`points`.

        Args:
            fx: Samples of shape ``(n_c,)`` or ``(m, n_c)``.
            order: Derivative order. ``1`` applies the matrix once; higher
                orders apply it repeatedly; ``0`` returns the samples.

        Returns:
            Derivative samples with the shape of ``fx``.

        Raises:
            ValueError: If ``fx`` has the wrong shape or ``order`` is not a
                non-negative integer.
        """
        order = validate_order(order)
        samples = validate_samples(fx, self.n_c)
        for _ in range(order):
            samples = self.differentiation_matrix.apply(samples)
        return samples
