"""Utility functions for CollocationKit package."""

from .validate import (
    validate_points,
    validate_size,
)

__all__ = [
    "validate_points",
    "validate_size",
]
