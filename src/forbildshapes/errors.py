"""
Compiler Errors
===============
Exception types raised while turning a descriptor into a primitive.

All of them derive from ``ForbildError`` (a ``ValueError``) so callers can
catch every construction failure with a single ``except`` clause. No
partially built primitive is ever returned when one of these is raised.
"""


class ForbildError(ValueError):
    """Base class for every descriptor compilation failure."""


class MalformedDescriptorError(ForbildError):
    """The descriptor has no ``TypeName:`` header or no properties."""


class AmbiguousFrameError(ForbildError):
    """Triad completion was asked for with both or neither of a_x / a_y."""


class DegenerateTransformError(ForbildError):
    """The orientation cannot produce an invertible transform."""


class EvaluationError(ForbildError):
    """A scalar, vector or plane sub-expression could not be evaluated."""
