################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Printed walkthrough of the rotation constructors."""

from __future__ import annotations

import logging
from typing import TextIO

from rotation_math.config.linalg_params import LinalgParams
from rotation_math.config.linalg_params import ToleranceParams
from rotation_math.math_utils.matrix import Matrix
from rotation_math.math_utils.matrix import Matrix2D
from rotation_math.math_utils.matrix import Matrix3D
from rotation_math.math_utils.rendering import format_matrix
from rotation_math.math_utils.rendering import format_scalar
from rotation_math.math_utils.rendering import format_vector
from rotation_math.math_utils.rotation import make_rotation_2d
from rotation_math.math_utils.rotation import make_rotation_axis_angle
from rotation_math.math_utils.rotation import make_rotation_x
from rotation_math.math_utils.rotation import make_rotation_y
from rotation_math.math_utils.rotation import make_rotation_z
from rotation_math.math_utils.units import Angle
from rotation_math.math_utils.vector import Vector
from rotation_math.math_utils.vector import Vector2D
from rotation_math.math_utils.vector import Vector3D
from rotation_math.math_utils.vector import normalize


_LOG: logging.Logger = logging.getLogger(__name__)


class RotationDemo:
    """Renders rotations of basis vectors and a sample vector."""

    def __init__(self, params: LinalgParams) -> None:
        params.validate()
        self._params: LinalgParams = params

    def run(self, out: TextIO) -> None:
        """Write the full walkthrough to ``out``."""
        theta: float = Angle.deg2rad(self._params.demo.angle_deg)
        _LOG.debug("Running rotation demo with theta=%g rad", theta)

        self._write_2d(out, theta)
        self._write_3d_basis(out, theta)
        self._write_3d_vector(out, theta)
        self._write_axis_angle(out, theta)

    def _vec(self, v: Vector) -> str:
        return format_vector(v, self._params.display.precision)

    def _mat(self, m: Matrix) -> str:
        return format_matrix(
            m.as_array().tolist(),
            self._params.display.precision,
            self._params.display.width,
        )

    def _scalar(self, value: float) -> str:
        return format_scalar(value, self._params.display.precision)

    def _write_2d(self, out: TextIO, theta: float) -> None:
        rot_2d: Matrix2D = make_rotation_2d(theta)
        out.write("In 2D\n-----\n")
        for name, e in (("e1", Vector2D(1.0, 0.0)), ("e2", Vector2D(0.0, 1.0))):
            out.write(f"{name} = {self._vec(e)}\n")
            out.write(f"R * {name} = {self._vec(rot_2d @ e)}\n")

    def _write_3d_basis(self, out: TextIO, theta: float) -> None:
        rot_z: Matrix3D = make_rotation_z(theta)
        out.write("In 3D\n-----\n")
        basis: tuple[tuple[str, Vector3D], ...] = (
            ("e1", Vector3D(1.0, 0.0, 0.0)),
            ("e2", Vector3D(0.0, 1.0, 0.0)),
            ("e3", Vector3D(0.0, 0.0, 1.0)),
        )
        for name, e in basis:
            out.write(f"{name} = {self._vec(e)}\n")
            out.write(f"Rz * {name} = {self._vec(rot_z @ e)}\n")

    def _write_3d_vector(self, out: TextIO, theta: float) -> None:
        v: Vector3D = Vector3D.from_array(self._params.demo.vector)
        out.write(f"v = {self._vec(v)}\n")
        out.write(f"Rx * v = {self._vec(make_rotation_x(theta) @ v)}\n")
        out.write(f"Ry * v = {self._vec(make_rotation_y(theta) @ v)}\n")
        out.write(f"Rz * v = {self._vec(make_rotation_z(theta) @ v)}\n")

    def _write_axis_angle(self, out: TextIO, theta: float) -> None:
        tolerance: ToleranceParams = self._params.tolerance
        v: Vector3D = Vector3D.from_array(self._params.demo.vector)
        axis: Vector3D = normalize(
            Vector3D.from_array(self._params.demo.axis), tolerance.norm_eps
        )
        R: Matrix3D = make_rotation_axis_angle(theta, axis, tolerance.unit_axis_tol)

        out.write(f"a = {self._vec(axis)}, theta = {self._scalar(theta)}\n")
        out.write(f"R = make_rotation_axis_angle(theta, a) =\n{self._mat(R)}\n")
        out.write(f"R * v = {self._vec(R @ v)}\n")
        out.write(f"Determinant(R) = {self._scalar(R.determinant())}\n")
        out.write(f"Inverse(R) =\n{self._mat(R.inverse(tolerance.det_eps))}\n")
        out.write(f"Transpose(R) =\n{self._mat(R.transpose())}\n")
