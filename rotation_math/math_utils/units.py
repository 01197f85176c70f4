################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Angle conversions and numerical tolerances."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray


class Angle:
    """Angular unit conversions for user-facing inputs."""

    @staticmethod
    def deg2rad(degrees: float) -> float:
        """Convert a finite angle in degrees to radians."""
        value: NDArray[np.float64] = np.asarray(degrees, dtype=float)
        assert_finite(value, "degrees")
        return float(np.deg2rad(value))


class Tolerance:
    """Default tolerances for near-zero and near-unit checks."""

    # Magnitudes at or below this are treated as zero
    NORM_EPS: float = 1e-12
    # Determinants with magnitude at or below this are treated as singular
    DET_EPS: float = 1e-12
    # Allowed deviation of an axis magnitude from 1
    UNIT_AXIS_TOL: float = 1e-9
    # Absolute tolerance for approximate comparisons
    COMPARE_ATOL: float = 1e-9


def assert_finite(x: ArrayLike, name: str) -> None:
    """Raise ValueError when any entry of ``x`` is NaN or infinite."""
    if not np.all(np.isfinite(np.asarray(x, dtype=float))):
        raise ValueError(f"{name} must have finite entries")
