"""
Primitive Shapes
================
The compiled, immutable primitive produced from one descriptor.

The cylinder family is a single value type tagged with ``PrimitiveKind``
rather than a class hierarchy: circular and elliptic cylinders only differ in
whether ``dx`` equals ``dy``, and share the transform and bounding machinery.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, List, Sequence, Tuple, Union, TYPE_CHECKING

import numpy as np

from forbildshapes.config import CONTAINMENT_TOL, ELLIPTIC_PREFIX
from forbildshapes.model.bounds import HalfSpaceBoundingCondition
from forbildshapes.model.geometry_primitives import AffineTransform, Plane, Point, Vector, as_point
from forbildshapes.model.attributes import ParsedAttributes

if TYPE_CHECKING:
    import numpy.typing as npt


class PrimitiveKind(StrEnum):
    CYLINDER = "cylinder"
    ELLIPTIC_CYLINDER = "elliptic_cylinder"

    @classmethod
    def from_type_name(cls, type_name: str) -> PrimitiveKind:
        if type_name.strip().lower().startswith(ELLIPTIC_PREFIX):
            return cls.ELLIPTIC_CYLINDER
        return cls.CYLINDER


@dataclass(frozen=True)
class CylinderExtents:
    """Half-extents across the axis (dx, dy) and half-length along it (dz)."""
    dx: float
    dy: float
    dz: float

    def copy(self) -> CylinderExtents:
        return CylinderExtents(self.dx, self.dy, self.dz)


@dataclass(frozen=True)
class CylinderPrimitive:
    """
    A positioned, bounded cylinder.

    In the canonical frame the solid is ``(x/dx)^2 + (y/dy)^2 <= 1`` and
    ``|z| <= dz``, clipped by every entry of ``bounds`` (also canonical frame).
    ``transform`` maps canonical coordinates to world coordinates.
    """
    kind: PrimitiveKind
    type_name: str
    extents: CylinderExtents
    attributes: ParsedAttributes
    transform: AffineTransform
    bounds: Tuple[HalfSpaceBoundingCondition, ...] = ()

    @property
    def dx(self) -> float:
        return self.extents.dx

    @property
    def dy(self) -> float:
        return self.extents.dy

    @property
    def dz(self) -> float:
        return self.extents.dz

    @property
    def origin(self) -> Point:
        return self.attributes.origin

    @property
    def axis(self) -> Vector:
        return self.attributes.axis

    def copy(self) -> CylinderPrimitive:
        """Independent copy; no mutable sub-object is shared with ``self``."""
        return CylinderPrimitive(
            kind=self.kind,
            type_name=self.type_name,
            extents=self.extents.copy(),
            attributes=self.attributes.copy(),
            transform=self.transform.copy(),
            bounds=tuple(b.copy() for b in self.bounds),
        )

    def world_bounding_planes(self) -> List[Plane]:
        """The local bounding planes mapped back to world space, in order."""
        return [b.transformed(self.transform).plane for b in self.bounds]

    def contains(self, point: Union[Point, Sequence[float]], tol: float = CONTAINMENT_TOL) -> bool:
        """Point-in-shape test for a world-space point."""
        return bool(self.contains_points(as_point(point).to_array(), tol=tol)[0])

    def contains_points(
        self,
        points: npt.NDArray[np.float64],
        tol: float = CONTAINMENT_TOL
    ) -> npt.NDArray[np.bool_]:
        """
        Vectorised point-in-shape test.

        Args:
            points: (N, 3) array of world-space points.
            tol: Slack applied to every inequality.

        Returns:
            Boolean array of shape (N,).
        """
        world = np.atleast_2d(np.asarray(points, dtype=np.float64))
        if self.dx <= 0.0 or self.dy <= 0.0:
            return np.zeros(len(world), dtype=bool)

        local = self.transform.inverse().apply_points(world)
        radial = (local[:, 0] / self.dx) ** 2 + (local[:, 1] / self.dy) ** 2
        inside = (radial <= 1.0 + tol) & (np.abs(local[:, 2]) <= self.dz + tol)
        for condition in self.bounds:
            inside &= condition.satisfied_mask(local, tol=tol)
        return inside

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready summary of the primitive."""
        return {
            "kind": self.kind.value,
            "type_name": self.type_name,
            "origin": list(self.origin.to_tuple()),
            "axis": list(self.axis.to_tuple()),
            "dx": self.dx,
            "dy": self.dy,
            "dz": self.dz,
            "transform": {
                "linear": self.transform.linear.tolist(),
                "translation": self.transform.translation.tolist(),
            },
            "bounds": [
                {
                    "anchor": list(b.plane.anchor.to_tuple()),
                    "normal": list(b.plane.normal.to_tuple()),
                }
                for b in self.bounds
            ],
        }
