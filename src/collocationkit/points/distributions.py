"""Collocation point distributions on the normalized interval ``[0, 1]``.

The default ``"uniform"`` distribution spaces the points linearly. It is a
placeholder: interpolation through equispaced nodes becomes badly conditioned
as the number of points grows (the Runge phenomenon), so production solvers
should pick one of the orthogonal-polynomial distributions instead.

Examples:
    Uniform points::

        >>> from collocationkit.points import generate_collocation_points
        >>> generate_collocation_points(5).tolist()
        [0.0, 0.25, 0.5, 0.75, 1.0]

    Legendre-Gauss-Radau points, as used in trajectory optimization::

        >>> tau = generate_collocation_points(4, "lgr")
        >>> float(tau[0]), bool(tau[-1] < 1.0)
        (0.0, True)

Adding distributions
--------------------
New distributions can be registered by calling ``register_distribution``
with a callable mapping ``n_c`` to ``n_c`` distinct points in ``[0, 1]``.

Notes:
    - Distribution names are case/spacing/punctuation insensitive.
    - For available canonical names at runtime, call
      ``available_distributions()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Mapping

import numpy as np
from numpy.typing import DTypeLike, NDArray
from scipy.special import roots_jacobi, roots_legendre

from collocationkit.logger import collocationkit_logger
from collocationkit.utils.types import PointDistribution
from collocationkit.utils.validate import resolve_dtype, validate_points, validate_size

__all__ = [
    "uniform_points",
    "chebyshev_lobatto_points",
    "legendre_gauss_lobatto_points",
    "legendre_gauss_radau_points",
    "legendre_gauss_points",
    "generate_collocation_points",
    "register_distribution",
    "available_distributions",
]

#: Above this size uniform nodes trigger an ill-conditioning warning.
UNIFORM_WARN_SIZE = 16


def uniform_points(n_c: int, dtype: DTypeLike = np.float64) -> NDArray[np.floating]:
    """Returns ``n_c`` linearly spaced points from ``0`` to ``1`` inclusive.

    The points are ``k / (n_c - 1)`` for ``k = 0, ..., n_c - 1``, computed in
    ``dtype``. For ``n_c == 1`` the single point is ``0``.
    """
    dtype = np.dtype(dtype)
    if n_c == 1:
        return np.zeros(1, dtype=dtype)
    return np.arange(n_c, dtype=dtype) / dtype.type(n_c - 1)


def chebyshev_lobatto_points(n_c: int, dtype: DTypeLike = np.float64) -> NDArray[np.floating]:
    """Returns the Chebyshev-Gauss-Lobatto points mapped to ``[0, 1]``.

    These are the extrema of the Chebyshev polynomial ``T_{n_c - 1}``,
    ``(1 - cos(pi k / (n_c - 1))) / 2``, ordered increasingly and computed
    in ``dtype``.
    """
    dtype = np.dtype(dtype)
    if n_c == 1:
        return np.zeros(1, dtype=dtype)
    pi = np.arccos(dtype.type(-1))
    k = np.arange(n_c, dtype=dtype)
    tau = (1 - np.cos(pi * k / dtype.type(n_c - 1))) / 2
    tau[0], tau[-1] = 0, 1
    return tau


# The Gauss rules below take their roots from scipy, which computes them in
# float64 whatever ``dtype`` is requested.


def legendre_gauss_lobatto_points(n_c: int, dtype: DTypeLike = np.float64) -> NDArray[np.floating]:
    """Returns the Legendre-Gauss-Lobatto points mapped to ``[0, 1]``.

    Both endpoints are included; the interior points are the zeros of
    ``P'_{n_c - 1}``, which coincide with the zeros of the Jacobi polynomial
    ``P^{(1, 1)}_{n_c - 2}``.
    """
    if n_c == 1:
        return np.zeros(1, dtype=dtype)
    if n_c == 2:
        return np.array([0.0, 1.0], dtype=dtype)
    interior, _ = roots_jacobi(n_c - 2, 1.0, 1.0)
    x = np.concatenate(([-1.0], np.sort(interior), [1.0]))
    return (0.5 * (x + 1.0)).astype(dtype)


def legendre_gauss_radau_points(n_c: int, dtype: DTypeLike = np.float64) -> NDArray[np.floating]:
    """Returns the (left) Legendre-Gauss-Radau points mapped to ``[0, 1)``.

    The left endpoint is included and the right one is not. The remaining
    points are the zeros of the Jacobi polynomial ``P^{(0, 1)}_{n_c - 1}``.
    """
    if n_c == 1:
        return np.zeros(1, dtype=dtype)
    interior, _ = roots_jacobi(n_c - 1, 0.0, 1.0)
    x = np.concatenate(([-1.0], np.sort(interior)))
    return (0.5 * (x + 1.0)).astype(dtype)


def legendre_gauss_points(n_c: int, dtype: DTypeLike = np.float64) -> NDArray[np.floating]:
    """Returns the Legendre-Gauss points (zeros of ``P_{n_c}``) mapped to ``(0, 1)``.

    For ``n_c == 1`` the single point is ``0``, like every other distribution.
    """
    if n_c == 1:
        return np.zeros(1, dtype=dtype)
    x, _ = roots_legendre(n_c)
    return (0.5 * (np.sort(x) + 1.0)).astype(dtype)


# These are the built-in distributions available in the package by default.
_DISTRIBUTION_SPECS: list[tuple[str, PointDistribution, list[str]]] = [
    ("uniform", uniform_points, ["linear", "equispaced"]),
    ("chebyshev", chebyshev_lobatto_points, ["chebyshev-gauss-lobatto", "cgl"]),
    ("legendre-gauss-lobatto", legendre_gauss_lobatto_points, ["lgl"]),
    ("legendre-gauss-radau", legendre_gauss_radau_points, ["lgr", "radau"]),
    ("legendre-gauss", legendre_gauss_points, ["lg", "gauss"]),
]

# Built-in distributions take the requested dtype; registered ones do not.
_BUILTIN_DISTRIBUTIONS = frozenset(func for _, func, _ in _DISTRIBUTION_SPECS)


def _norm(s: str) -> str:
    """Normalize a distribution name for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _distribution_maps() -> tuple[Mapping[str, PointDistribution], Mapping[str, str], tuple[str, ...]]:
    """Construct and cache lookup tables for point distributions.

    Returns:
        A tuple ``(func_map, canonical_map, canonical_names)`` where
        ``func_map`` maps normalized names and aliases to generators,
        ``canonical_map`` maps them to the canonical name used in log
        messages, and ``canonical_names`` lists the sorted canonical names.
    """
    func_map: dict[str, PointDistribution] = {}
    canonical_map: dict[str, str] = {}
    canonical: set[str] = set()
    for name, func, aliases in _DISTRIBUTION_SPECS:
        canonical.add(name)
        for key in (name, *aliases):
            func_map[_norm(key)] = func
            canonical_map[_norm(key)] = name
    return func_map, canonical_map, tuple(sorted(canonical))


def register_distribution(
    name: str,
    func: PointDistribution,
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new collocation point distribution.

    Registering under an existing name or alias replaces the previous entry.
    The lookup cache is cleared and rebuilt on the next lookup.

    Args:
        name: Canonical public name of the distribution.
        func: Callable mapping ``n_c`` to ``n_c`` distinct points, normally
            in ``[0, 1]``.
        aliases: Additional accepted spellings.

    Raises:
        TypeError: If ``func`` is not callable.
        ValueError: If ``name`` or an alias is empty after normalization.

    Example:
        >>> import numpy as np
        >>> from collocationkit.points import register_distribution
        >>> register_distribution(
        ...     "squared",
        ...     lambda n: np.linspace(0.0, 1.0, n) ** 2,
        ...     aliases=("quadratic",),
        ... )
    """
    if not callable(func):
        raise TypeError(f"func must be callable; got {type(func).__name__}.")
    alias_list = list(aliases)
    for key in (name, *alias_list):
        if not _norm(key):
            raise ValueError(f"invalid distribution name {key!r}.")

    keys = {_norm(k) for k in (name, *alias_list)}
    _DISTRIBUTION_SPECS[:] = [
        (n, f, [a for a in al if _norm(a) not in keys])
        for n, f, al in _DISTRIBUTION_SPECS
        if _norm(n) not in keys
    ]
    _DISTRIBUTION_SPECS.append((name, func, alias_list))
    _distribution_maps.cache_clear()


def available_distributions() -> tuple[str, ...]:
    """Return the canonical names of all registered distributions."""
    return _distribution_maps()[2]


def _resolve_distribution(distribution: str) -> tuple[str, PointDistribution]:
    """Looks up a distribution by name or alias.

    Args:
        distribution: Name or alias.

    Returns:
        The canonical name and the generating callable.

    Raises:
        ValueError: If the name is unknown.
    """
    func_map, canonical_map, canonical = _distribution_maps()
    key = _norm(distribution)
    if key not in func_map:
        opts = ", ".join(canonical)
        raise ValueError(f"Unknown distribution '{distribution}'. Choose one of {{{opts}}}.")
    return canonical_map[key], func_map[key]


def generate_collocation_points(
    n_c: int,
    distribution: str = "uniform",
    *,
    dtype: DTypeLike = np.float64,
) -> NDArray[np.floating]:
    """Generates ``n_c`` collocation points on the normalized interval.

    The result is deterministic and read-only: repeated calls with the same
    arguments return equal, independent arrays.

    Args:
        n_c: Number of points, at least ``1``.
        distribution: Name or alias of a registered distribution. Defaults to
            the ``"uniform"`` placeholder.
        dtype: Floating scalar type of the returned points.

    Returns:
        A read-only 1D array of ``n_c`` pairwise-distinct points.

    Raises:
        InvalidSizeError: If ``n_c`` is not a positive integer.
        TypeError: If ``dtype`` is not a floating type, or a registered
            distribution returns non-real points.
        ValueError: If ``distribution`` is unknown.
        DegenerateInputError: If a registered distribution returns repeated
            or non-finite points.
    """
    n_c = validate_size(n_c)
    dtype = resolve_dtype(dtype)
    name, func = _resolve_distribution(distribution)

    if name == "uniform" and n_c > UNIFORM_WARN_SIZE:
        collocationkit_logger.warning(
            "uniform collocation points with n_c=%d are ill-conditioned; "
            "consider a 'chebyshev' or Legendre-Gauss distribution.",
            n_c,
        )

    if func in _BUILTIN_DISTRIBUTIONS:
        raw = np.asarray(func(n_c, dtype=dtype))
    else:
        raw = np.asarray(func(n_c))
    if raw.shape != (n_c,):
        raise ValueError(
            f"distribution '{name}' returned shape {raw.shape}; expected ({n_c},)."
        )
    points = validate_points(np.array(validate_points(raw), dtype=dtype))
    points.flags.writeable = False
    return points
