"""
Bounding Clause Translation
===========================
Turns inequality clauses into world-space half-space planes.

Planes are produced in world coordinates while the descriptor is being read;
moving them into the primitive's local frame happens once, after the final
transform is known (see ``compiler.assembler``).
"""
from __future__ import annotations

import logging
from typing import Dict, Tuple

from forbildshapes.model.geometry_primitives import Plane
from forbildshapes.parser.expressions import evaluate_plane

logger = logging.getLogger(__name__)

AXIS_UNITS: Dict[str, Tuple[int, int, int]] = {
    "x": (1, 0, 0),
    "y": (0, 1, 0),
    "z": (0, 0, 1),
}


def synthesize_axis_clause(axis_name: str, comparator: str, value: str) -> str:
    """
    Rewrites ``x > v`` style clauses as a plane clause.

    ``>`` uses the negative unit vector along the axis and ``<`` the positive
    one, e.g. ``("x", ">", "1")`` -> ``"r(-1, 0, 0) > 1"``.
    """
    sign = -1 if comparator.startswith(">") else 1
    nx, ny, nz = (sign * c for c in AXIS_UNITS[axis_name])
    return f"r({nx}, {ny}, {nz}) {comparator} {value}"


def translate_axis_bound(axis_name: str, comparator: str, value: str) -> Plane:
    """Plane for an axis-aligned clause (``x<v``, ``y>v``, ...)."""
    clause = synthesize_axis_clause(axis_name, comparator, value)
    logger.debug(f"Axis bound '{axis_name}{comparator}{value}' rewritten as '{clause}'")
    return evaluate_plane(clause)


def translate_radial_bound(clause: str) -> Plane:
    """Plane for a ``r(...) <op> v`` clause, evaluated from the text as written."""
    return evaluate_plane(clause)
