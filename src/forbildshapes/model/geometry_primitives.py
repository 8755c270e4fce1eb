"""
Geometric Primitives for the descriptor compiler.

Value types shared by the parser and the compiler: vectors, points, planes,
orientation frames and the affine transform between a primitive's canonical
frame and world space.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Union, TYPE_CHECKING
import math

import numpy as np

from forbildshapes.config import GEOMETRY_EPS
from forbildshapes.errors import DegenerateTransformError

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    @property
    def is_zero(self) -> bool:
        return self.magnitude <= GEOMETRY_EPS

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag <= GEOMETRY_EPS: return Vector(0.0, 0.0, 0.0)
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_array(cls, values: Union[Sequence[float], npt.NDArray[np.float64]]) -> Vector:
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def copy(self) -> Vector:
        return Vector(self.x, self.y, self.z)


@dataclass(frozen=True)
class Point:
    """A simple geometric point in 3D space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Vector or Point to a Point.")

    def with_component(self, index: int, value: float) -> Point:
        """Returns a copy with coordinate ``index`` (0, 1 or 2) replaced."""
        coords = [self.x, self.y, self.z]
        coords[index] = float(value)
        return Point(*coords)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_array(cls, values: Union[Sequence[float], npt.NDArray[np.float64]]) -> Point:
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)

    def copy(self) -> Point:
        return Point(self.x, self.y, self.z)


@dataclass(frozen=True)
class Plane:
    """
    An oriented plane given by an anchor point and a unit normal.

    The normal points out of the retained half-space: a point ``p`` lies on
    the kept side when ``normal . (p - anchor) <= 0``. Producers pass an
    already normalised normal so that copies stay bit-identical.
    """
    anchor: Point
    normal: Vector

    def __post_init__(self) -> None:
        if self.normal.is_zero:
            raise ValueError("Plane normal vector cannot be zero")

    def signed_distance(self, point: Point) -> float:
        return self.normal.dot(point - self.anchor)

    def signed_distances(self, points: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Vectorised ``signed_distance`` for an (N, 3) array of points."""
        pts = np.atleast_2d(np.asarray(points, dtype=np.float64))
        return (pts - self.anchor.to_array()) @ self.normal.to_array()

    def transformed(self, transform: AffineTransform) -> Plane:
        """
        Maps the plane through ``transform``.

        The anchor is mapped as a point; the normal is mapped with the
        inverse transpose of the linear part so the kept side is preserved.
        """
        anchor = transform.apply_point(self.anchor)
        normal = transform.inverse_linear().T @ self.normal.to_array()
        return Plane(anchor=anchor, normal=Vector.from_array(normal).normalize())

    def copy(self) -> Plane:
        return Plane(anchor=self.anchor.copy(), normal=self.normal.copy())


@dataclass(frozen=True)
class OrientationFrame:
    """Three axis vectors of a primitive's local frame, expressed in world space."""
    a_x: Vector
    a_y: Vector
    a_z: Vector


@dataclass(frozen=True, eq=False)
class AffineTransform:
    """
    ``x_world = linear @ x_local + translation``.

    Both arrays are stored write-protected; ``copy`` hands out fresh ones.
    """
    linear: npt.NDArray[np.float64]
    translation: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        linear = np.array(self.linear, dtype=np.float64)
        translation = np.array(self.translation, dtype=np.float64).reshape(3)
        if linear.shape != (3, 3):
            raise ValueError(f"Expected a 3x3 linear part, got {linear.shape}.")
        linear.setflags(write=False)
        translation.setflags(write=False)
        object.__setattr__(self, "linear", linear)
        object.__setattr__(self, "translation", translation)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return bool(
            np.array_equal(self.linear, other.linear)
            and np.array_equal(self.translation, other.translation)
        )

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(linear={self.linear.tolist()}, "
                f"translation={self.translation.tolist()})")

    @classmethod
    def identity(cls) -> AffineTransform:
        return cls(np.eye(3), np.zeros(3))

    @property
    def determinant(self) -> float:
        return float(np.linalg.det(self.linear))

    @property
    def is_invertible(self) -> bool:
        return abs(self.determinant) > GEOMETRY_EPS

    def inverse_linear(self) -> npt.NDArray[np.float64]:
        if not self.is_invertible:
            raise DegenerateTransformError(
                f"Linear part is singular (det={self.determinant:.3e})."
            )
        return np.linalg.inv(self.linear)

    def inverse(self) -> AffineTransform:
        inv = self.inverse_linear()
        return AffineTransform(inv, -inv @ self.translation)

    def apply_point(self, point: Point) -> Point:
        return Point.from_array(self.linear @ point.to_array() + self.translation)

    def apply_points(self, points: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Transforms an (N, 3) array of points."""
        pts = np.atleast_2d(np.asarray(points, dtype=np.float64))
        return pts @ self.linear.T + self.translation

    def apply_vector(self, vector: Vector) -> Vector:
        return Vector.from_array(self.linear @ vector.to_array())

    def copy(self) -> AffineTransform:
        return AffineTransform(self.linear.copy(), self.translation.copy())


def as_point(value: Union[Point, Sequence[float], npt.NDArray[np.float64]]) -> Point:
    """Accepts a Point or any 3-sequence of coordinates."""
    if isinstance(value, Point):
        return value
    return Point.from_array(value)


def optional_copy(vector: Optional[Vector]) -> Optional[Vector]:
    return vector.copy() if vector is not None else None
