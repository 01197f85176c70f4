################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size vectors, matrices and rotation constructors."""

from rotation_math.math_utils.decomposition import make_projection
from rotation_math.math_utils.decomposition import make_rejection
from rotation_math.math_utils.decomposition import mat_cross
from rotation_math.math_utils.decomposition import outer
from rotation_math.math_utils.decomposition import project
from rotation_math.math_utils.decomposition import reject
from rotation_math.math_utils.errors import DegenerateVectorError
from rotation_math.math_utils.errors import LinalgError
from rotation_math.math_utils.errors import NonUnitAxisError
from rotation_math.math_utils.errors import SingularMatrixError
from rotation_math.math_utils.matrix import Matrix
from rotation_math.math_utils.matrix import Matrix2D
from rotation_math.math_utils.matrix import Matrix3D
from rotation_math.math_utils.matrix import Matrix4D
from rotation_math.math_utils.matrix import determinant
from rotation_math.math_utils.matrix import inverse
from rotation_math.math_utils.matrix import multiply
from rotation_math.math_utils.matrix import transpose
from rotation_math.math_utils.rotation import is_orthogonal
from rotation_math.math_utils.rotation import is_rotation
from rotation_math.math_utils.rotation import make_rotation_2d
from rotation_math.math_utils.rotation import make_rotation_axis_angle
from rotation_math.math_utils.rotation import make_rotation_skew_form
from rotation_math.math_utils.rotation import make_rotation_x
from rotation_math.math_utils.rotation import make_rotation_y
from rotation_math.math_utils.rotation import make_rotation_z
from rotation_math.math_utils.rotation import rotation_angle
from rotation_math.math_utils.vector import Vector
from rotation_math.math_utils.vector import Vector2D
from rotation_math.math_utils.vector import Vector3D
from rotation_math.math_utils.vector import Vector4D
from rotation_math.math_utils.vector import cross
from rotation_math.math_utils.vector import dot
from rotation_math.math_utils.vector import magnitude
from rotation_math.math_utils.vector import normalize


__all__ = [
    "DegenerateVectorError",
    "LinalgError",
    "Matrix",
    "Matrix2D",
    "Matrix3D",
    "Matrix4D",
    "NonUnitAxisError",
    "SingularMatrixError",
    "Vector",
    "Vector2D",
    "Vector3D",
    "Vector4D",
    "cross",
    "determinant",
    "dot",
    "inverse",
    "is_orthogonal",
    "is_rotation",
    "magnitude",
    "make_projection",
    "make_rejection",
    "make_rotation_2d",
    "make_rotation_axis_angle",
    "make_rotation_skew_form",
    "make_rotation_x",
    "make_rotation_y",
    "make_rotation_z",
    "mat_cross",
    "multiply",
    "normalize",
    "outer",
    "project",
    "reject",
    "rotation_angle",
    "transpose",
]
