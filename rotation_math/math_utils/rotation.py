################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""
Rotation matrix constructors and checks.

Angles are in radians. A positive angle rotates counter-clockwise when
looking down the rotation axis toward the origin.

For a unit axis a, a vector v splits into ``project(v, a)``, which a
rotation leaves alone, and ``reject(v, a)``, which turns in the plane
spanned by ``reject(v, a)`` and ``cross(a, v)``::

    v' = project(v, a) + cos(theta) reject(v, a) + sin(theta) cross(a, v)

Written with matrices this is Rodrigues' formula::

    R = cos(theta) I + (1 - cos(theta)) outer(a) + sin(theta) mat_cross(a)

and, using ``K @ K == outer(a) - I`` for ``K = mat_cross(a)``::

    R = I + sin(theta) K + (1 - cos(theta)) K @ K
"""

from __future__ import annotations

import logging

import numpy as np

from rotation_math.math_utils.decomposition import mat_cross
from rotation_math.math_utils.decomposition import outer
from rotation_math.math_utils.errors import NonUnitAxisError
from rotation_math.math_utils.matrix import Matrix
from rotation_math.math_utils.matrix import Matrix2D
from rotation_math.math_utils.matrix import Matrix3D
from rotation_math.math_utils.units import Tolerance
from rotation_math.math_utils.units import assert_finite
from rotation_math.math_utils.vector import Vector3D
from rotation_math.math_utils.vector import magnitude


_LOG: logging.Logger = logging.getLogger(__name__)


def _cos_sin(theta: float) -> tuple[float, float]:
    angle: float = float(theta)
    assert_finite(angle, "theta")
    return float(np.cos(angle)), float(np.sin(angle))


def _require_unit_axis(axis: Vector3D, tol: float) -> None:
    if not isinstance(axis, Vector3D):
        raise TypeError("axis must be a Vector3D")
    assert_finite(axis.as_array(), "axis")
    norm: float = magnitude(axis)
    if abs(norm - 1.0) > tol:
        _LOG.debug("Rejecting rotation axis %s with magnitude %.12g", axis, norm)
        raise NonUnitAxisError(f"axis must have unit magnitude, got {norm:.12g}")


def make_rotation_2d(theta: float) -> Matrix2D:
    """Return the counter-clockwise rotation of the plane by ``theta``."""
    c, s = _cos_sin(theta)
    # fmt: off
    return Matrix2D.from_scalars(
        c, -s,
        s, c,
    )
    # fmt: on


def make_rotation_x(theta: float) -> Matrix3D:
    """Return the rotation by ``theta`` about the x axis."""
    c, s = _cos_sin(theta)
    # fmt: off
    return Matrix3D.from_scalars(
        1.0, 0.0, 0.0,
        0.0, c, -s,
        0.0, s, c,
    )
    # fmt: on


def make_rotation_y(theta: float) -> Matrix3D:
    """Return the rotation by ``theta`` about the y axis."""
    c, s = _cos_sin(theta)
    # fmt: off
    return Matrix3D.from_scalars(
        c, 0.0, s,
        0.0, 1.0, 0.0,
        -s, 0.0, c,
    )
    # fmt: on


def make_rotation_z(theta: float) -> Matrix3D:
    """Return the rotation by ``theta`` about the z axis."""
    c, s = _cos_sin(theta)
    # fmt: off
    return Matrix3D.from_scalars(
        c, -s, 0.0,
        s, c, 0.0,
        0.0, 0.0, 1.0,
    )
    # fmt: on


def make_rotation_axis_angle(
    theta: float,
    axis: Vector3D,
    tol: float = Tolerance.UNIT_AXIS_TOL,
) -> Matrix3D:
    """
    Return the rotation by ``theta`` about a unit ``axis``.

    The axis is not normalized here. An axis whose magnitude differs from 1
    by more than ``tol`` raises NonUnitAxisError.
    """
    _require_unit_axis(axis, tol)
    c, s = _cos_sin(theta)
    projection: Matrix = outer(axis)
    return Matrix3D() * c + projection * (1.0 - c) + mat_cross(axis) * s


def make_rotation_skew_form(
    theta: float,
    axis: Vector3D,
    tol: float = Tolerance.UNIT_AXIS_TOL,
) -> Matrix3D:
    """Return the axis-angle rotation written as I + sin K + (1 - cos) K @ K."""
    _require_unit_axis(axis, tol)
    c, s = _cos_sin(theta)
    K: Matrix3D = mat_cross(axis)
    return Matrix3D() + K * s + (K @ K) * (1.0 - c)


def is_orthogonal(m: Matrix, atol: float = Tolerance.COMPARE_ATOL) -> bool:
    """Check whether ``m @ m^T`` is the identity within ``atol``."""
    product: Matrix = m @ m.transpose()
    return product.allclose(type(m)(), atol)


def is_rotation(m: Matrix, atol: float = Tolerance.COMPARE_ATOL) -> bool:
    """Check whether ``m`` is orthogonal with determinant +1."""
    if not is_orthogonal(m, atol):
        return False
    return abs(m.determinant() - 1.0) <= atol


def rotation_angle(R: Matrix3D) -> float:
    """Return the rotation angle in [0, pi] of a 3D rotation matrix."""
    if not isinstance(R, Matrix3D):
        raise TypeError("R must be a Matrix3D")
    assert_finite(R.as_array(), "R")
    cos_theta: float = (R.trace() - 1.0) * 0.5
    cos_theta = float(np.clip(cos_theta, -1.0, 1.0))
    return float(np.arccos(cos_theta))
