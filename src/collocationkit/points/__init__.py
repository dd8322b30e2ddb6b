"""Collocation point distributions."""

from .distributions import (
    available_distributions,
    generate_collocation_points,
    register_distribution,
)

__all__ = [
    "generate_collocation_points",
    "register_distribution",
    "available_distributions",
]
