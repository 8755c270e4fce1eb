"""
Primitive Attributes
====================
The accumulated geometric attributes of one primitive, before any transform
is built. The parser folds clauses into this value; the compiler reads it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from forbildshapes.config import DEFAULT_AXIS
from forbildshapes.model.geometry_primitives import Plane, Point, Vector, optional_copy


@dataclass(frozen=True)
class ParsedAttributes:
    """
    Everything known about a primitive's placement, size and clipping.

    Bounding planes are in world coordinates and in clause order.
    """
    origin: Point = field(default_factory=Point)
    dx: float = 0.0
    dy: float = 0.0
    dz: float = 0.0
    axis: Vector = field(default_factory=lambda: Vector(*DEFAULT_AXIS))
    a_x: Optional[Vector] = None
    a_y: Optional[Vector] = None
    bounding_planes: Tuple[Plane, ...] = ()

    @property
    def has_explicit_frame(self) -> bool:
        return self.a_x is not None or self.a_y is not None

    def copy(self) -> ParsedAttributes:
        return ParsedAttributes(
            origin=self.origin.copy(),
            dx=self.dx,
            dy=self.dy,
            dz=self.dz,
            axis=self.axis.copy(),
            a_x=optional_copy(self.a_x),
            a_y=optional_copy(self.a_y),
            bounding_planes=tuple(p.copy() for p in self.bounding_planes),
        )
