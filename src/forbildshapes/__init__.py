"""FORBILD cylinder descriptor compiler."""
from forbildshapes.compiler.assembler import compile_cylinder
from forbildshapes.errors import (
    AmbiguousFrameError,
    DegenerateTransformError,
    EvaluationError,
    ForbildError,
    MalformedDescriptorError,
)
from forbildshapes.model.shapes import CylinderPrimitive, PrimitiveKind

__all__ = [
    "compile_cylinder",
    "CylinderPrimitive",
    "PrimitiveKind",
    "ForbildError",
    "MalformedDescriptorError",
    "AmbiguousFrameError",
    "DegenerateTransformError",
    "EvaluationError",
]
