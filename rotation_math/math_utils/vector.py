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
Fixed-size vector types for 2D, 3D and 4D space.

Vectors are small mutable value types. Components are reachable by name
(``v.x``) and by index (``v[0]``). Every arithmetic operation returns a new
vector, so callers can share instances freely as long as they do not assign
components.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from dataclasses import fields
from typing import Any
from typing import ClassVar
from typing import Iterator
from typing import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from rotation_math.math_utils.errors import DegenerateVectorError
from rotation_math.math_utils.rendering import format_vector
from rotation_math.math_utils.units import Tolerance
from rotation_math.math_utils.units import assert_finite


VectorT = TypeVar("VectorT", bound="Vector")


class Vector:
    """Base class for the fixed-size vector types."""

    DIM: ClassVar[int] = 0

    # Numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        """Coerce components to float."""
        for name in self._names():
            setattr(self, name, float(getattr(self, name)))

    @classmethod
    def _names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def from_array(
        cls: type[VectorT], values: Sequence[float] | NDArray[Any]
    ) -> VectorT:
        """Create a vector from a length-DIM sequence of numbers."""
        arr: NDArray[np.float64] = np.asarray(values, dtype=float)
        if arr.shape != (cls.DIM,):
            raise ValueError(f"values must have shape ({cls.DIM},)")
        return cls(*(float(c) for c in arr))

    def components(self) -> tuple[float, ...]:
        """Return the components in index order."""
        return tuple(getattr(self, name) for name in self._names())

    def as_array(self) -> NDArray[np.float64]:
        """Return a float64 copy of the components."""
        return np.array(self.components(), dtype=float)

    def __len__(self) -> int:
        return self.DIM

    def __iter__(self) -> Iterator[float]:
        return iter(self.components())

    def __getitem__(self, index: int) -> float:
        return self.components()[index]

    def __setitem__(self, index: int, value: float) -> None:
        name: str = self._names()[index]
        setattr(self, name, float(value))

    def __add__(self: VectorT, other: Any) -> VectorT:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self: VectorT, other: Any) -> VectorT:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __neg__(self: VectorT) -> VectorT:
        return type(self)(*(-a for a in self))

    def __mul__(self: VectorT, scalar: object) -> VectorT:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        s: float = float(scalar)
        return type(self)(*(a * s for a in self))

    __rmul__ = __mul__

    def __truediv__(self: VectorT, scalar: object) -> VectorT:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        s: float = float(scalar)
        return type(self)(*(a / s for a in self))

    def __str__(self) -> str:
        return format_vector(self.components())

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return magnitude(self)

    def normalized(self: VectorT, eps: float = Tolerance.NORM_EPS) -> VectorT:
        """Return the unit vector with the same direction."""
        return normalize(self, eps)

    def allclose(self, other: Vector, atol: float = Tolerance.COMPARE_ATOL) -> bool:
        """Check componentwise equality within an absolute tolerance."""
        _require_same_type(self, other)
        return bool(
            np.allclose(self.as_array(), other.as_array(), rtol=0.0, atol=atol)
        )


@dataclass
class Vector2D(Vector):
    """Vector in the plane."""

    DIM: ClassVar[int] = 2

    x: float = 0.0
    y: float = 0.0


@dataclass
class Vector3D(Vector):
    """Vector in 3D space."""

    DIM: ClassVar[int] = 3

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Vector4D(Vector):
    """Vector in 4D space, usually homogeneous coordinates."""

    DIM: ClassVar[int] = 4

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @property
    def xyz(self) -> Vector3D:
        """Return the first three components."""
        return Vector3D(self.x, self.y, self.z)


def _require_same_type(a: Vector, b: Vector) -> None:
    if type(a) is not type(b):
        raise TypeError(
            f"vectors must have the same dimension, got {type(a).__name__} "
            f"and {type(b).__name__}"
        )


def dot(a: Vector, b: Vector) -> float:
    """Return the dot product of two vectors of the same dimension."""
    _require_same_type(a, b)
    return math.fsum(x * y for x, y in zip(a, b))


def magnitude(v: Vector) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(dot(v, v))


def normalize(v: VectorT, eps: float = Tolerance.NORM_EPS) -> VectorT:
    """Return ``v`` scaled to unit length."""
    assert_finite(v.as_array(), "v")
    norm: float = magnitude(v)
    if norm <= eps:
        raise DegenerateVectorError("cannot normalize a zero-magnitude vector")
    return v / norm


def cross(a: Vector3D, b: Vector3D) -> Vector3D:
    """Return the right-handed cross product of two 3D vectors."""
    if not isinstance(a, Vector3D) or not isinstance(b, Vector3D):
        raise TypeError("cross product is only defined for Vector3D")
    return Vector3D(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )
