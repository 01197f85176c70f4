################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the fixed-size matrix types."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from rotation_math.math_utils.errors import SingularMatrixError
from rotation_math.math_utils.matrix import Matrix
from rotation_math.math_utils.matrix import Matrix2D
from rotation_math.math_utils.matrix import Matrix3D
from rotation_math.math_utils.matrix import Matrix4D
from rotation_math.math_utils.matrix import determinant
from rotation_math.math_utils.matrix import inverse
from rotation_math.math_utils.matrix import matrix_type_for
from rotation_math.math_utils.matrix import multiply
from rotation_math.math_utils.matrix import transpose
from rotation_math.math_utils.vector import Vector2D
from rotation_math.math_utils.vector import Vector3D
from rotation_math.math_utils.vector import Vector4D


MATRIX_TYPES: list[type[Matrix]] = [Matrix2D, Matrix3D, Matrix4D]


def _random_matrix(cls: type[Matrix], rng: np.random.Generator) -> Matrix:
    """Return a random matrix that is comfortably invertible."""
    data: NDArray[np.float64] = rng.normal(size=(cls.DIM, cls.DIM))
    # Diagonal dominance keeps the determinant away from zero
    data += np.eye(cls.DIM) * 2.0 * cls.DIM
    return cls(data)


@pytest.mark.parametrize("cls", MATRIX_TYPES)
def test_default_is_identity(cls: type[Matrix]) -> None:
    """Default construction yields the identity."""
    m: Matrix = cls()
    assert np.array_equal(m.as_array(), np.eye(cls.DIM))
    assert m == cls.identity()


@pytest.mark.parametrize("cls", MATRIX_TYPES)
def test_identity_determinant_and_inverse(cls: type[Matrix]) -> None:
    """The identity has determinant 1 and is its own inverse."""
    identity: Matrix = cls.identity()
    assert determinant(identity) == 1.0
    assert inverse(identity) == identity


def test_from_scalars_is_row_major() -> None:
    """Scalars are given row by row and M[i, j] is row i, column j."""
    m: Matrix3D = Matrix3D.from_scalars(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m[0, 1] == 2.0
    assert m[1, 0] == 4.0
    assert m[2, 2] == 9.0
    assert m.row(1) == Vector3D(4.0, 5.0, 6.0)
    assert m.column(1) == Vector3D(2.0, 5.0, 8.0)
    with pytest.raises(ValueError):
        Matrix3D.from_scalars(1, 2, 3)


def test_from_columns_images_of_basis() -> None:
    """Column j is the image of the j-th basis vector."""
    a: Vector3D = Vector3D(1.0, 2.0, 3.0)
    b: Vector3D = Vector3D(4.0, 5.0, 6.0)
    c: Vector3D = Vector3D(7.0, 8.0, 9.0)
    m: Matrix3D = Matrix3D.from_columns(a, b, c)
    assert m @ Vector3D(1.0, 0.0, 0.0) == a
    assert m @ Vector3D(0.0, 1.0, 0.0) == b
    assert m @ Vector3D(0.0, 0.0, 1.0) == c
    assert m[1, 0] == 2.0
    with pytest.raises(TypeError):
        Matrix3D.from_columns(a, b, Vector2D())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Matrix3D.from_columns(a, b)


def test_storage_is_owned() -> None:
    """Matrices copy their input and hand out copies."""
    data: NDArray[np.float64] = np.eye(2)
    m: Matrix2D = Matrix2D(data)
    data[0, 0] = 5.0
    assert m[0, 0] == 1.0
    out: NDArray[np.float64] = m.as_array()
    out[0, 0] = 7.0
    assert m[0, 0] == 1.0
    m[0, 1] = 3.0
    assert m.as_array()[0, 1] == 3.0


def test_bad_shape_rejected() -> None:
    """Data of the wrong shape is rejected."""
    with pytest.raises(ValueError):
        Matrix3D(np.eye(2))
    with pytest.raises(ValueError):
        Matrix4D.from_array([[1.0, 2.0], [3.0, 4.0]])


def test_matrix_vector_product() -> None:
    """Checks matrix-vector products in each dimension."""
    m2: Matrix2D = Matrix2D.from_scalars(1, 2, 3, 4)
    assert m2 @ Vector2D(1.0, 1.0) == Vector2D(3.0, 7.0)
    m4: Matrix4D = Matrix4D.from_scalars(*range(16))
    result: Vector4D = m4 @ Vector4D(1.0, 0.0, 0.0, 1.0)
    assert result == Vector4D(3.0, 11.0, 19.0, 27.0)
    assert multiply(m2, Vector2D(0.0, 1.0)) == Vector2D(2.0, 4.0)


def test_matrix_product_not_commutative() -> None:
    """Matrix products compose in operand order."""
    a: Matrix2D = Matrix2D.from_scalars(1, 2, 3, 4)
    b: Matrix2D = Matrix2D.from_scalars(0, 1, 1, 0)
    assert a @ b == Matrix2D.from_scalars(2, 1, 4, 3)
    assert b @ a == Matrix2D.from_scalars(3, 4, 1, 2)
    assert multiply(a, b) == a @ b


def test_matrix_product_associative() -> None:
    """Checks (AB)C == A(BC) within tolerance."""
    rng: np.random.Generator = np.random.default_rng(1)
    a: Matrix = _random_matrix(Matrix4D, rng)
    b: Matrix = _random_matrix(Matrix4D, rng)
    c: Matrix = _random_matrix(Matrix4D, rng)
    assert ((a @ b) @ c).allclose(a @ (b @ c), atol=1e-9)


def test_mixed_dimensions_rejected() -> None:
    """Products across dimensions are type errors."""
    with pytest.raises(TypeError):
        Matrix3D() @ Vector2D(1.0, 0.0)
    with pytest.raises(TypeError):
        Matrix3D() @ Matrix2D()
    with pytest.raises(TypeError):
        Matrix3D() + Matrix2D()  # type: ignore[operator]


def test_scalar_arithmetic() -> None:
    """Checks addition, subtraction and scaling."""
    a: Matrix2D = Matrix2D.from_scalars(1, 2, 3, 4)
    assert a + a == a * 2.0
    assert 2.0 * a == a * 2
    assert a - a == Matrix2D.zeros()
    assert -a == a * -1.0
    assert a / 2.0 == Matrix2D.from_scalars(0.5, 1.0, 1.5, 2.0)


def test_numpy_scalar_scaling() -> None:
    """Numpy scalars on either side keep the matrix type."""
    a: Matrix3D = Matrix3D()
    left: Matrix3D = np.float64(2.0) * a
    assert isinstance(left, Matrix3D)
    assert left == a * 2.0
    assert a * np.float64(0.5) == Matrix3D() / 2.0


def test_base_matrix_is_abstract() -> None:
    """Only the fixed-size subclasses can be constructed."""
    with pytest.raises(TypeError):
        Matrix()  # type: ignore[abstract]


@pytest.mark.parametrize("cls", MATRIX_TYPES)
def test_transpose_involution(cls: type[Matrix]) -> None:
    """Transposing twice gives back exactly the same matrix."""
    rng: np.random.Generator = np.random.default_rng(2)
    m: Matrix = cls(rng.normal(size=(cls.DIM, cls.DIM)))
    assert transpose(transpose(m)) == m
    assert np.array_equal(m.transpose().as_array(), m.as_array().T)


@pytest.mark.parametrize("cls", MATRIX_TYPES)
def test_determinant_matches_numpy(cls: type[Matrix]) -> None:
    """Closed-form determinants agree with numpy."""
    rng: np.random.Generator = np.random.default_rng(3)
    for _ in range(10):
        data: NDArray[np.float64] = rng.normal(size=(cls.DIM, cls.DIM))
        m: Matrix = cls(data)
        assert np.isclose(m.determinant(), np.linalg.det(data), atol=1e-9)


def test_determinant_closed_forms() -> None:
    """Checks determinants of hand-computed matrices."""
    assert Matrix2D.from_scalars(1, 2, 3, 4).determinant() == -2.0
    m3: Matrix3D = Matrix3D.from_scalars(2, 0, 1, 1, 3, 2, 1, 1, 2)
    assert m3.determinant() == pytest.approx(6.0)
    # fmt: off
    m4: Matrix4D = Matrix4D.from_scalars(
        1, 0, 2, -1,
        3, 0, 0, 5,
        2, 1, 4, -3,
        1, 0, 5, 0,
    )
    # fmt: on
    assert m4.determinant() == pytest.approx(30.0)


@pytest.mark.parametrize("cls", MATRIX_TYPES)
def test_inverse_roundtrip(cls: type[Matrix]) -> None:
    """Checks A @ inverse(A) is the identity."""
    rng: np.random.Generator = np.random.default_rng(4)
    for _ in range(10):
        m: Matrix = _random_matrix(cls, rng)
        inv: Matrix = inverse(m)
        assert (m @ inv).allclose(cls(), atol=1e-9)
        assert (inv @ m).allclose(cls(), atol=1e-9)
        assert np.allclose(inv.as_array(), np.linalg.inv(m.as_array()), atol=1e-9)


def test_inverse_of_singular_raises() -> None:
    """A matrix with a zero row cannot be inverted."""
    singular: Matrix3D = Matrix3D.from_scalars(1, 2, 3, 0, 0, 0, 4, 5, 6)
    with pytest.raises(SingularMatrixError):
        inverse(singular)
    with pytest.raises(SingularMatrixError):
        Matrix2D.from_scalars(1, 2, 2, 4).inverse()
    with pytest.raises(SingularMatrixError):
        Matrix4D.zeros().inverse()


def test_inverse_tolerance_configurable() -> None:
    """The singularity threshold is set by eps."""
    tiny: Matrix2D = Matrix2D.from_scalars(1e-4, 0.0, 0.0, 1e-4)
    assert tiny.inverse().allclose(Matrix2D() * 1e4, atol=1e-6)
    with pytest.raises(SingularMatrixError):
        tiny.inverse(eps=1e-6)


def test_trace_and_matrix_type_lookup() -> None:
    """Checks trace and the vector-to-matrix type mapping."""
    assert Matrix4D().trace() == 4.0
    assert matrix_type_for(Vector2D()) is Matrix2D
    assert matrix_type_for(Vector3D()) is Matrix3D
    assert matrix_type_for(Vector4D()) is Matrix4D


def test_display_form() -> None:
    """Each row is rendered on its own line."""
    text: str = str(Matrix2D.from_scalars(1, -2, 0.5, 0))
    lines: list[str] = text.split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("[ ")
    assert lines[0].endswith(" ]")
    assert lines[0].split()[1:3] == ["1", "-2"]
    assert lines[1].split()[1:3] == ["0.5", "0"]
