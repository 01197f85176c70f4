################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the rotation kernel and its demo."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import replace
from typing import Any

import numpy as np

from rotation_math.math_utils.rendering import DEFAULT_PRECISION
from rotation_math.math_utils.rendering import DEFAULT_WIDTH
from rotation_math.math_utils.units import Tolerance


# Magnitude at or below which a vector is treated as zero
TOLERANCE_NORM_EPS: float = Tolerance.NORM_EPS
# Determinant magnitude at or below which a matrix is singular
TOLERANCE_DET_EPS: float = Tolerance.DET_EPS
# Allowed deviation of a rotation axis magnitude from 1
TOLERANCE_UNIT_AXIS: float = Tolerance.UNIT_AXIS_TOL
# Absolute tolerance for approximate comparisons
TOLERANCE_COMPARE_ATOL: float = Tolerance.COMPARE_ATOL

# Significant digits when rendering values
DISPLAY_PRECISION: int = DEFAULT_PRECISION
# Minimum column width when rendering matrices
DISPLAY_WIDTH: int = DEFAULT_WIDTH

# Demo rotation angle in degrees
DEMO_ANGLE_DEG: float = 45.0
# Demo arbitrary rotation axis, normalized before use
DEMO_AXIS: np.ndarray = np.array([1.0, 1.0, 0.0], dtype=np.float64)
# Demo vector rotated about each axis
DEMO_VECTOR: np.ndarray = np.array([1.0, 1.0, 1.0], dtype=np.float64)


class LinalgParamsError(Exception):
    """Raised when parameter validation fails."""


def _as_float_array(value: Any, name: str) -> np.ndarray:
    """Coerce a value to a float64 numpy array with shape (3,)."""
    array: np.ndarray = np.asarray(value, dtype=np.float64)
    if array.shape != (3,):
        raise LinalgParamsError(f"{name} must have shape (3,)")
    if not np.all(np.isfinite(array)):
        raise LinalgParamsError(f"{name} must contain finite values")
    return array


def _require_positive(value: float, name: str) -> None:
    """Require a positive value."""
    if value <= 0.0:
        raise LinalgParamsError(f"{name} must be positive")


def _require_positive_int(value: int, name: str) -> None:
    """Require a positive integer value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LinalgParamsError(f"{name} must be an int")
    if value <= 0:
        raise LinalgParamsError(f"{name} must be positive")


@dataclass(frozen=True)
class ToleranceParams:
    """Numerical tolerances passed to kernel operations."""

    # Zero-magnitude threshold for normalize and projections
    norm_eps: float = TOLERANCE_NORM_EPS
    # Singular-determinant threshold for inverses
    det_eps: float = TOLERANCE_DET_EPS
    # Unit-axis tolerance for axis-angle rotations
    unit_axis_tol: float = TOLERANCE_UNIT_AXIS
    # Absolute tolerance for approximate comparisons
    compare_atol: float = TOLERANCE_COMPARE_ATOL


@dataclass(frozen=True)
class DisplayParams:
    """Rendering options for vectors and matrices."""

    # Significant digits
    precision: int = DISPLAY_PRECISION
    # Minimum matrix column width
    width: int = DISPLAY_WIDTH


@dataclass(frozen=True)
class DemoParams:
    """Inputs for the rotation demonstration."""

    # Rotation angle in degrees
    angle_deg: float = DEMO_ANGLE_DEG
    # Arbitrary rotation axis
    axis: np.ndarray = field(default_factory=lambda: DEMO_AXIS.copy())
    # Vector rotated by each constructor
    vector: np.ndarray = field(default_factory=lambda: DEMO_VECTOR.copy())

    def __post_init__(self) -> None:
        """Coerce axis and vector into float64 numpy arrays."""
        object.__setattr__(self, "axis", _as_float_array(self.axis, "demo.axis"))
        object.__setattr__(
            self, "vector", _as_float_array(self.vector, "demo.vector")
        )


@dataclass(frozen=True)
class LinalgParams:
    """Complete configuration tree."""

    tolerance: ToleranceParams
    display: DisplayParams
    demo: DemoParams

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameter tree."""
        return cls(
            tolerance=ToleranceParams(),
            display=DisplayParams(),
            demo=DemoParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_positive(self.tolerance.norm_eps, "tolerance.norm_eps")
        _require_positive(self.tolerance.det_eps, "tolerance.det_eps")
        _require_positive(self.tolerance.unit_axis_tol, "tolerance.unit_axis_tol")
        _require_positive(self.tolerance.compare_atol, "tolerance.compare_atol")

        _require_positive_int(self.display.precision, "display.precision")
        _require_positive_int(self.display.width, "display.width")

        if not np.isfinite(self.demo.angle_deg):
            raise LinalgParamsError("demo.angle_deg must be finite")
        if float(np.linalg.norm(self.demo.axis)) <= self.tolerance.norm_eps:
            raise LinalgParamsError("demo.axis must be non-zero")

    def replace(self, **namespace_overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses and numpy arrays into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    if isinstance(value, np.ndarray):
        return value.tolist()
    return value
