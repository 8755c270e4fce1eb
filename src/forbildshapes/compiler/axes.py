"""
Axis Resolution
===============
Default orientation from the type name, and completion of a partially given
local frame.
"""
from __future__ import annotations

import logging
from typing import Optional

from forbildshapes.config import AXIS_SUFFIXES, DEFAULT_AXIS
from forbildshapes.errors import AmbiguousFrameError
from forbildshapes.model.geometry_primitives import OrientationFrame, Vector

logger = logging.getLogger(__name__)


def resolve_type_axis(type_name: str) -> Vector:
    """
    Primary axis implied by the type name.

    ``Cylinder_x`` -> (1, 0, 0), ``Ellipt_Cyl_Y`` -> (0, 1, 0); names without a
    ``_x``/``_y``/``_z`` suffix get the default (0, 0, 1).
    """
    suffix = type_name.strip().lower()[-2:]
    return Vector(*AXIS_SUFFIXES.get(suffix, DEFAULT_AXIS))


def complete_triad(axis: Vector, a_x: Optional[Vector], a_y: Optional[Vector]) -> OrientationFrame:
    """
    Derive the missing frame vector from the one given and the primary axis.

    Args:
        axis: Primary axis, used as a_z.
        a_x: Explicit x axis of the local frame, or None.
        a_y: Explicit y axis of the local frame, or None.

    Returns:
        The frame (a_x, a_y, a_z) with ``a_y = a_x x a_z`` when only a_x is
        given, or ``a_x = a_y x a_z`` when only a_y is given. Operand order is
        fixed; swapping it flips the frame's handedness.

    Raises:
        AmbiguousFrameError: when both or neither of a_x / a_y are given.
    """
    a_z = axis
    if a_x is not None and a_y is None:
        a_y = a_x.cross(a_z)
    elif a_y is not None and a_x is None:
        a_x = a_y.cross(a_z)
    elif a_x is not None and a_y is not None:
        raise AmbiguousFrameError("Both a_x and a_y are given; supply only one of them.")
    else:
        raise AmbiguousFrameError("Neither a_x nor a_y is given; nothing to complete.")

    logger.debug(f"Completed frame a_x={a_x.to_tuple()}, a_y={a_y.to_tuple()}, a_z={a_z.to_tuple()}")
    return OrientationFrame(a_x=a_x, a_y=a_y, a_z=a_z)
