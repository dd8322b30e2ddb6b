"""Shared typing aliases for CollocationKit."""

from __future__ import annotations

from typing import Callable, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

ArrayLike1D: TypeAlias = Sequence[float] | NDArray[np.floating]

PointDistribution: TypeAlias = Callable[[int], ArrayLike1D]
