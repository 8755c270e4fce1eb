"""
Bounding Conditions
===================
Generic clipping conditions attached to a primitive in its local frame.

A primitive's volume is the canonical solid intersected with every bounding
condition. Conditions are kept as an ordered sequence; consumers may rely on
the order for early exits.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from forbildshapes.config import CONTAINMENT_TOL
from forbildshapes.model.geometry_primitives import AffineTransform, Plane, Point

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class HalfSpaceBoundingCondition:
    """Keeps the side of ``plane`` opposite to its normal."""
    plane: Plane

    def is_satisfied_by(self, point: Point, tol: float = CONTAINMENT_TOL) -> bool:
        return self.plane.signed_distance(point) <= tol

    def satisfied_mask(
        self,
        points: npt.NDArray[np.float64],
        tol: float = CONTAINMENT_TOL
    ) -> npt.NDArray[np.bool_]:
        """Boolean mask over an (N, 3) array of points."""
        return self.plane.signed_distances(points) <= tol

    def transformed(self, transform: AffineTransform) -> HalfSpaceBoundingCondition:
        return HalfSpaceBoundingCondition(self.plane.transformed(transform))

    def copy(self) -> HalfSpaceBoundingCondition:
        return HalfSpaceBoundingCondition(self.plane.copy())
