################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Projection, rejection and the matrices behind them."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from rotation_math.math_utils.errors import DegenerateVectorError
from rotation_math.math_utils.matrix import Matrix
from rotation_math.math_utils.matrix import Matrix3D
from rotation_math.math_utils.matrix import matrix_type_for
from rotation_math.math_utils.units import Tolerance
from rotation_math.math_utils.units import assert_finite
from rotation_math.math_utils.vector import Vector
from rotation_math.math_utils.vector import Vector3D
from rotation_math.math_utils.vector import dot


VectorT = TypeVar("VectorT", bound=Vector)


def _squared_norm(a: Vector, eps: float) -> float:
    """Return ``dot(a, a)``, rejecting axes whose magnitude is at most eps."""
    assert_finite(a.as_array(), "a")
    denom: float = dot(a, a)
    if math.sqrt(denom) <= eps:
        raise DegenerateVectorError("a must have non-zero magnitude")
    return denom


def project(v: VectorT, a: VectorT, eps: float = Tolerance.NORM_EPS) -> VectorT:
    """Return the component of ``v`` parallel to ``a``."""
    assert_finite(v.as_array(), "v")
    denom: float = _squared_norm(a, eps)
    return a * (dot(v, a) / denom)


def reject(v: VectorT, a: VectorT, eps: float = Tolerance.NORM_EPS) -> VectorT:
    """Return the component of ``v`` orthogonal to ``a``."""
    return v - project(v, a, eps)


def outer(a: Vector) -> Matrix:
    """Return the outer product ``a a^T``, whose (i, j) entry is a[i] * a[j]."""
    vec: NDArray[np.float64] = a.as_array()
    return matrix_type_for(a)(np.outer(vec, vec))


def mat_cross(a: Vector3D) -> Matrix3D:
    """Return the skew-symmetric matrix K with ``K @ v == cross(a, v)``."""
    if not isinstance(a, Vector3D):
        raise TypeError("mat_cross is only defined for Vector3D")
    # fmt: off
    return Matrix3D.from_scalars(
        0.0, -a.z, a.y,
        a.z, 0.0, -a.x,
        -a.y, a.x, 0.0,
    )
    # fmt: on


def make_projection(a: Vector, eps: float = Tolerance.NORM_EPS) -> Matrix:
    """Return the matrix that projects vectors onto the line along ``a``."""
    denom: float = _squared_norm(a, eps)
    return outer(a) / denom


def make_rejection(a: Vector, eps: float = Tolerance.NORM_EPS) -> Matrix:
    """Return the matrix that removes the component along ``a``."""
    projection: Matrix = make_projection(a, eps)
    return type(projection)() - projection
