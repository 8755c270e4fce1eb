"""
Shape Assembly
==============
Entry point of the compiler: descriptor text in, ``CylinderPrimitive`` out.

Pipeline:
1. Split the header and pick the default axis from the type-name suffix.
2. Fold the clauses into ``ParsedAttributes`` (bounding planes in world space).
3. Build the canonical-to-world transform.
4. Move each bounding plane into the local frame with the inverse transform.

Any failure raises a ``ForbildError`` subclass; nothing is returned half-built.
"""
from __future__ import annotations

import logging

from forbildshapes.compiler.axes import resolve_type_axis
from forbildshapes.compiler.transform import build_transform
from forbildshapes.model.bounds import HalfSpaceBoundingCondition
from forbildshapes.model.geometry_primitives import AffineTransform
from forbildshapes.model.shapes import CylinderExtents, CylinderPrimitive, PrimitiveKind
from forbildshapes.model.attributes import ParsedAttributes
from forbildshapes.parser.clauses import RawDescriptor, interpret_clauses

logger = logging.getLogger(__name__)


def localize_bounds(
    attributes: ParsedAttributes,
    transform: AffineTransform
) -> tuple[HalfSpaceBoundingCondition, ...]:
    """World-space planes -> local half-space conditions, order preserved."""
    to_local = transform.inverse()
    return tuple(
        HalfSpaceBoundingCondition(plane.transformed(to_local))
        for plane in attributes.bounding_planes
    )


def assemble(type_name: str, attributes: ParsedAttributes) -> CylinderPrimitive:
    transform = build_transform(attributes)
    return CylinderPrimitive(
        kind=PrimitiveKind.from_type_name(type_name),
        type_name=type_name,
        extents=CylinderExtents(attributes.dx, attributes.dy, attributes.dz),
        attributes=attributes,
        transform=transform,
        bounds=localize_bounds(attributes, transform),
    )


def compile_cylinder(descriptor: str, *, strict: bool = False) -> CylinderPrimitive:
    """
    Compile one FORBILD cylinder descriptor.

    Args:
        descriptor: e.g. ``"Cylinder: x=0; y=0; z=0; r=5; l=10; axis(0,0,1)"``.
        strict: Reject unknown clauses instead of skipping them.

    Returns:
        The assembled, immutable primitive.

    Raises:
        MalformedDescriptorError: missing header or properties.
        AmbiguousFrameError: both a_x and a_y given.
        DegenerateTransformError: zero axis or singular frame.
        EvaluationError: a clause value could not be evaluated.
    """
    raw = RawDescriptor.parse(descriptor)
    initial = ParsedAttributes(axis=resolve_type_axis(raw.type_name))
    attributes = interpret_clauses(raw.properties, initial, strict=strict)
    primitive = assemble(raw.type_name, attributes)
    logger.debug(
        f"Compiled {primitive.type_name}: origin={primitive.origin.to_tuple()}, "
        f"extents=({primitive.dx}, {primitive.dy}, {primitive.dz}), bounds={len(primitive.bounds)}"
    )
    return primitive
