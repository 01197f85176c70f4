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
Fixed-size square matrix types for 2D, 3D and 4D space.

``M[i, j]`` is the entry in row i and column j. Column j is the image of
the j-th standard basis vector, so ``M.column(j) == M @ e_j``.

Determinants and inverses are written out in closed form for each
dimension. Inverses use the adjugate over the determinant and raise
:class:`SingularMatrixError` when the determinant is within ``eps`` of zero.
"""

from __future__ import annotations

import abc
import logging
import numbers
from dataclasses import dataclass
from typing import Any
from typing import ClassVar
from typing import Optional
from typing import TypeVar
from typing import cast

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray

from rotation_math.math_utils.errors import SingularMatrixError
from rotation_math.math_utils.rendering import format_matrix
from rotation_math.math_utils.units import Tolerance
from rotation_math.math_utils.vector import Vector
from rotation_math.math_utils.vector import Vector2D
from rotation_math.math_utils.vector import Vector3D
from rotation_math.math_utils.vector import Vector4D
from rotation_math.math_utils.vector import cross
from rotation_math.math_utils.vector import dot


MatrixT = TypeVar("MatrixT", bound="Matrix")

_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Matrix(abc.ABC):
    """Base class for the fixed-size square matrix types."""

    DIM: ClassVar[int] = 0
    VECTOR: ClassVar[type[Vector]] = Vector

    # Numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    data: Optional[NDArray[np.float64]] = None

    def __post_init__(self) -> None:
        """Copy the input into owned storage, defaulting to the identity."""
        mat: NDArray[np.float64]
        if self.data is None:
            mat = np.eye(self.DIM, dtype=float)
        else:
            mat = np.array(self.data, dtype=float)
            if mat.shape != (self.DIM, self.DIM):
                raise ValueError(f"data must have shape ({self.DIM}, {self.DIM})")
        self.data = mat

    @property
    def _m(self) -> NDArray[np.float64]:
        return cast(NDArray[np.float64], self.data)

    @classmethod
    def identity(cls: type[MatrixT]) -> MatrixT:
        """Return the identity matrix."""
        return cls()

    @classmethod
    def zeros(cls: type[MatrixT]) -> MatrixT:
        """Return the zero matrix."""
        return cls(np.zeros((cls.DIM, cls.DIM), dtype=float))

    @classmethod
    def from_array(cls: type[MatrixT], values: ArrayLike) -> MatrixT:
        """Create a matrix from a DIM x DIM array-like in row-major order."""
        return cls(np.asarray(values, dtype=float))

    @classmethod
    def from_scalars(cls: type[MatrixT], *values: float) -> MatrixT:
        """Create a matrix from DIM * DIM scalars given row by row."""
        if len(values) != cls.DIM * cls.DIM:
            raise ValueError(f"expected {cls.DIM * cls.DIM} scalars")
        return cls(np.array(values, dtype=float).reshape((cls.DIM, cls.DIM)))

    @classmethod
    def from_columns(cls: type[MatrixT], *columns: Vector) -> MatrixT:
        """Create a matrix whose columns are the given vectors."""
        cls._check_vectors(columns)
        return cls(np.column_stack([c.as_array() for c in columns]))

    @classmethod
    def from_rows(cls: type[MatrixT], *rows: Vector) -> MatrixT:
        """Create a matrix whose rows are the given vectors."""
        cls._check_vectors(rows)
        return cls(np.vstack([r.as_array() for r in rows]))

    @classmethod
    def _check_vectors(cls, vectors: tuple[Vector, ...]) -> None:
        if len(vectors) != cls.DIM:
            raise ValueError(f"expected {cls.DIM} vectors")
        for vec in vectors:
            if not isinstance(vec, cls.VECTOR):
                raise TypeError(f"expected {cls.VECTOR.__name__} entries")

    def as_array(self) -> NDArray[np.float64]:
        """Return a float64 copy of the entries."""
        return self._m.copy()

    def column(self, j: int) -> Vector:
        """Return column j as a vector."""
        return self.VECTOR.from_array(self._m[:, j])

    def row(self, i: int) -> Vector:
        """Return row i as a vector."""
        return self.VECTOR.from_array(self._m[i, :])

    def trace(self) -> float:
        """Return the sum of the diagonal entries."""
        return float(np.trace(self._m))

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return float(self._m[row, col])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self._m[row, col] = float(value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._m, cast(Matrix, other)._m))

    __hash__ = None  # type: ignore[assignment]

    def __add__(self: MatrixT, other: Any) -> MatrixT:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._m + other._m)

    def __sub__(self: MatrixT, other: Any) -> MatrixT:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self._m - other._m)

    def __neg__(self: MatrixT) -> MatrixT:
        return type(self)(-self._m)

    def __mul__(self: MatrixT, scalar: object) -> MatrixT:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return type(self)(self._m * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self: MatrixT, scalar: object) -> MatrixT:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return type(self)(self._m / float(scalar))

    def __matmul__(self, other: Any) -> Any:
        if type(other) is type(self):
            return type(self)(self._m @ other._m)
        if isinstance(other, self.VECTOR):
            return self.VECTOR.from_array(self._m @ other.as_array())
        return NotImplemented

    def __str__(self) -> str:
        return format_matrix(self._m.tolist())

    def transpose(self: MatrixT) -> MatrixT:
        """Return the transpose."""
        return type(self)(self._m.T)

    @abc.abstractmethod
    def determinant(self) -> float:
        """Return the determinant."""

    @abc.abstractmethod
    def inverse(self: MatrixT, eps: float = Tolerance.DET_EPS) -> MatrixT:
        """Return the inverse, raising SingularMatrixError if singular."""

    def allclose(self, other: Matrix, atol: float = Tolerance.COMPARE_ATOL) -> bool:
        """Check entrywise equality within an absolute tolerance."""
        if type(other) is not type(self):
            raise TypeError(
                f"matrices must have the same dimension, got {type(self).__name__} "
                f"and {type(other).__name__}"
            )
        return bool(np.allclose(self._m, other._m, rtol=0.0, atol=atol))


def _check_invertible(det: float, eps: float) -> None:
    if not np.isfinite(det) or abs(det) <= eps:
        _LOG.debug("Refusing to invert matrix with determinant %g", det)
        raise SingularMatrixError(f"matrix is singular (determinant {det:g})")


@dataclass(eq=False)
class Matrix2D(Matrix):
    """2x2 matrix acting on Vector2D."""

    DIM: ClassVar[int] = 2
    VECTOR: ClassVar[type[Vector]] = Vector2D

    def determinant(self) -> float:
        """Return ad - bc."""
        m: NDArray[np.float64] = self._m
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])

    def inverse(self, eps: float = Tolerance.DET_EPS) -> Matrix2D:
        """Return the inverse, raising SingularMatrixError if singular."""
        det: float = self.determinant()
        _check_invertible(det, eps)
        m: NDArray[np.float64] = self._m
        inv_det: float = 1.0 / det
        return Matrix2D.from_scalars(
            m[1, 1] * inv_det,
            -m[0, 1] * inv_det,
            -m[1, 0] * inv_det,
            m[0, 0] * inv_det,
        )


@dataclass(eq=False)
class Matrix3D(Matrix):
    """3x3 matrix acting on Vector3D."""

    DIM: ClassVar[int] = 3
    VECTOR: ClassVar[type[Vector]] = Vector3D

    def determinant(self) -> float:
        """Return the scalar triple product of the columns."""
        m: NDArray[np.float64] = self._m
        return float(
            m[0, 0] * (m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1])
            + m[0, 1] * (m[1, 2] * m[2, 0] - m[1, 0] * m[2, 2])
            + m[0, 2] * (m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0])
        )

    def inverse(self, eps: float = Tolerance.DET_EPS) -> Matrix3D:
        """
        Return the inverse, raising SingularMatrixError if singular.

        With columns a, b and c, the rows of the adjugate are ``b x c``,
        ``c x a`` and ``a x b``.
        """
        det: float = self.determinant()
        _check_invertible(det, eps)
        a: Vector3D = Vector3D.from_array(self._m[:, 0])
        b: Vector3D = Vector3D.from_array(self._m[:, 1])
        c: Vector3D = Vector3D.from_array(self._m[:, 2])
        inv_det: float = 1.0 / det
        return Matrix3D.from_rows(
            cross(b, c) * inv_det,
            cross(c, a) * inv_det,
            cross(a, b) * inv_det,
        )


@dataclass(eq=False)
class Matrix4D(Matrix):
    """4x4 matrix acting on Vector4D."""

    DIM: ClassVar[int] = 4
    VECTOR: ClassVar[type[Vector]] = Vector4D

    def minor(self, row: int, col: int) -> Matrix3D:
        """Return the 3x3 matrix left after deleting a row and a column."""
        rows: list[int] = [r for r in range(4) if r != row]
        cols: list[int] = [c for c in range(4) if c != col]
        return Matrix3D(self._m[np.ix_(rows, cols)])

    def determinant(self) -> float:
        """Return the cofactor expansion along the first row."""
        m: NDArray[np.float64] = self._m
        return float(
            m[0, 0] * self.minor(0, 0).determinant()
            - m[0, 1] * self.minor(0, 1).determinant()
            + m[0, 2] * self.minor(0, 2).determinant()
            - m[0, 3] * self.minor(0, 3).determinant()
        )

    def inverse(self, eps: float = Tolerance.DET_EPS) -> Matrix4D:
        """
        Return the inverse, raising SingularMatrixError if singular.

        The adjugate is assembled from the upper 3D parts a, b, c, d of the
        columns and the bottom row (x, y, z, w)::

            s = a x b    t = c x d
            u = y a - x b    v = w c - z d
            det = s . v + t . u
        """
        m: NDArray[np.float64] = self._m
        a: Vector3D = Vector3D.from_array(m[:3, 0])
        b: Vector3D = Vector3D.from_array(m[:3, 1])
        c: Vector3D = Vector3D.from_array(m[:3, 2])
        d: Vector3D = Vector3D.from_array(m[:3, 3])
        x: float = float(m[3, 0])
        y: float = float(m[3, 1])
        z: float = float(m[3, 2])
        w: float = float(m[3, 3])

        s: Vector3D = cross(a, b)
        t: Vector3D = cross(c, d)
        u: Vector3D = a * y - b * x
        v: Vector3D = c * w - d * z

        det: float = dot(s, v) + dot(t, u)
        _check_invertible(det, eps)
        inv_det: float = 1.0 / det
        s = s * inv_det
        t = t * inv_det
        u = u * inv_det
        v = v * inv_det

        r0: Vector3D = cross(b, v) + t * y
        r1: Vector3D = cross(v, a) - t * x
        r2: Vector3D = cross(d, u) + s * w
        r3: Vector3D = cross(u, c) - s * z

        # fmt: off
        return Matrix4D.from_scalars(
            r0.x, r0.y, r0.z, -dot(b, t),
            r1.x, r1.y, r1.z, dot(a, t),
            r2.x, r2.y, r2.z, -dot(d, s),
            r3.x, r3.y, r3.z, dot(c, s),
        )
        # fmt: on


_MATRIX_TYPES: dict[type[Vector], type[Matrix]] = {
    Vector2D: Matrix2D,
    Vector3D: Matrix3D,
    Vector4D: Matrix4D,
}


def matrix_type_for(v: Vector) -> type[Matrix]:
    """Return the matrix type that acts on vectors of the given type."""
    try:
        return _MATRIX_TYPES[type(v)]
    except KeyError:
        raise TypeError(f"unsupported vector type {type(v).__name__}") from None


def multiply(a: Matrix, b: Any) -> Any:
    """Return ``a @ b`` for a matrix or vector ``b`` of matching dimension."""
    return a @ b


def transpose(m: MatrixT) -> MatrixT:
    """Return the transpose of ``m``."""
    return m.transpose()


def determinant(m: Matrix) -> float:
    """Return the determinant of ``m``."""
    return m.determinant()


def inverse(m: MatrixT, eps: float = Tolerance.DET_EPS) -> MatrixT:
    """Return the inverse of ``m``, raising SingularMatrixError if singular."""
    return m.inverse(eps)
