"""Unit tests for the CollocationKit front end."""

from __future__ import annotations

import numpy as np
import pytest

from collocationkit import CollocationKit, DifferentiationMatrix
from collocationkit.exceptions import DegenerateInputError, InvalidSizeError


def test_default_kit_uses_uniform_unit_interval() -> None:
    """Tests defaults: uniform points on [0, 1]."""
    ck = CollocationKit(5)
    np.testing.assert_array_equal(ck.points, [0.0, 0.25, 0.5, 0.75, 1.0])
    np.testing.assert_array_equal(ck.normalized_points, ck.points)
    assert ck.domain == (0.0, 1.0)


def test_differentiate_square_on_three_points() -> None:
    """Tests the three point example end to end."""
    ck = CollocationKit(3)
    np.testing.assert_allclose(ck.differentiate([0.0, 0.25, 1.0]), [0.0, 1.0, 2.0], atol=1e-14)


def test_matrix_is_built_once() -> None:
    """Tests that the differentiation matrix is cached on the kit."""
    ck = CollocationKit(4, distribution="lgl")
    dm = ck.differentiation_matrix
    assert isinstance(dm, DifferentiationMatrix)
    assert ck.differentiation_matrix is dm


def test_domain_mapping() -> None:
    """Tests that points are mapped affinely onto the domain."""
    ck = CollocationKit(5, distribution="chebyshev", domain=(2.0, 6.0))
    np.testing.assert_allclose(ck.points, 2.0 + 4.0 * ck.normalized_points)
    assert ck.points[0] == 2.0
    assert ck.points[-1] == 6.0
    assert not ck.points.flags.writeable


def test_domain_scales_derivative() -> None:
    """Tests that derivatives on a stretched domain scale by 1 / (tf - t0)."""
    unit = CollocationKit(6, distribution="lgr")
    wide = CollocationKit(6, distribution="lgr", domain=(0.0, 10.0))
    fx = np.sin(unit.normalized_points)
    np.testing.assert_allclose(
        wide.differentiation_matrix.values,
        unit.differentiation_matrix.values / 10.0,
        rtol=1e-12,
        atol=1e-12,
    )
    np.testing.assert_allclose(wide.differentiate(fx), unit.differentiate(fx) / 10.0, atol=1e-12)


def test_evaluate_and_differentiate_polynomial() -> None:
    """Tests exactness of the kit on a polynomial over a shifted domain."""
    ck = CollocationKit(5, distribution="lgl", domain=(-1.0, 3.0))
    poly = np.polynomial.Polynomial([1.0, -2.0, 0.5, 0.25])
    fx = ck.evaluate(poly)
    np.testing.assert_allclose(ck.differentiate(fx), poly.deriv()(ck.points), atol=1e-11)
    np.testing.assert_allclose(
        ck.differentiate(fx, order=2), poly.deriv(2)(ck.points), atol=1e-10
    )


def test_differentiate_order_zero_returns_samples() -> None:
    """Tests that order 0 leaves the samples unchanged."""
    ck = CollocationKit(3)
    np.testing.assert_array_equal(ck.differentiate([1.0, 2.0, 3.0], order=0), [1.0, 2.0, 3.0])


def test_differentiate_rejects_bad_input() -> None:
    """Tests errors from differentiate."""
    ck = CollocationKit(3)
    with pytest.raises(ValueError, match="order"):
        ck.differentiate([1.0, 2.0, 3.0], order=-1)
    with pytest.raises(ValueError, match="samples"):
        ck.differentiate([1.0, 2.0], order=0)


def test_evaluate_rejects_wrong_length() -> None:
    """Tests that evaluate checks the function output."""
    ck = CollocationKit(3)
    with pytest.raises(ValueError, match="shape"):
        ck.evaluate(lambda t: np.sum(t))


@pytest.mark.parametrize("n_c", [0, -1, 1.5])
def test_invalid_size(n_c) -> None:
    """Tests that invalid sizes fail at construction."""
    with pytest.raises(InvalidSizeError):
        CollocationKit(n_c)


@pytest.mark.parametrize("domain", [(1.0, 1.0), (2.0, 0.0), (0.0, np.inf), (0.0, 1.0, 2.0)])
def test_invalid_domain(domain) -> None:
    """Tests that empty, reversed or non-finite domains fail at construction."""
    with pytest.raises(ValueError, match="domain"):
        CollocationKit(3, domain=domain)


def test_unknown_distribution() -> None:
    """Tests that unknown distributions fail at construction."""
    with pytest.raises(ValueError, match="Unknown distribution"):
        CollocationKit(3, distribution="nope")


def test_single_point_kit() -> None:
    """Tests the n_c = 1 kit."""
    ck = CollocationKit(1, domain=(5.0, 7.0))
    np.testing.assert_array_equal(ck.points, [5.0])
    np.testing.assert_array_equal(ck.differentiate([4.0]), [0.0])


def test_float32_kit() -> None:
    """Tests that the kit keeps the requested dtype."""
    ck = CollocationKit(4, distribution="lgl", dtype=np.float32)
    assert ck.points.dtype == np.float32
    assert ck.differentiation_matrix.dtype == np.float32


def test_repr() -> None:
    """Tests the repr."""
    ck = CollocationKit(3, distribution="lgr")
    assert repr(ck) == (
        "CollocationKit(n_c=3, distribution='lgr', domain=(0.0, 1.0), dtype=float64)"
    )


def test_domain_collapsing_points_fails_at_construction() -> None:
    """Tests that a narrow domain far from the origin cannot merge points."""
    with pytest.raises(DegenerateInputError, match="distinct"):
        CollocationKit(5, domain=(1e16, 1e16 + 2.0))


def test_float32_domain_collapsing_points_fails_at_construction() -> None:
    """Tests that float32 rounding of the mapped points is caught up front."""
    with pytest.raises(DegenerateInputError):
        CollocationKit(9, distribution="chebyshev", domain=(1e8, 1e8 + 1.0), dtype=np.float32)


def test_mapped_points_are_distinct_and_read_only() -> None:
    """Tests the mapped points on a well-conditioned shifted domain."""
    ck = CollocationKit(6, distribution="lgl", domain=(-3.0, 4.0))
    assert np.all(np.diff(ck.points) > 0)
    assert not ck.points.flags.writeable


@pytest.mark.parametrize("order", [1.5, True, "2", None])
def test_differentiate_rejects_non_integer_order(order) -> None:
    """Tests that the derivative order must be an integer."""
    ck = CollocationKit(3)
    with pytest.raises(ValueError, match="order"):
        ck.differentiate([1.0, 2.0, 3.0], order=order)
