"""
Transform Construction
======================
Builds the affine transform that carries a primitive's canonical frame
(centred at the origin, axis along +z) into world space.
"""
from __future__ import annotations

import logging

from forbildshapes.compiler.axes import complete_triad
from forbildshapes.errors import DegenerateTransformError
from forbildshapes.model.geometry_primitives import AffineTransform
from forbildshapes.model.geometry_utils import change_of_axes_matrix, rotation_aligning_z
from forbildshapes.model.attributes import ParsedAttributes

logger = logging.getLogger(__name__)


def build_transform(attributes: ParsedAttributes) -> AffineTransform:
    """
    Canonical-to-world transform for the parsed attributes.

    Two paths:
    1. Explicit frame (a_x or a_y given): complete the triad and use the
       change-of-axes matrix onto (a_x, a_y, a_z).
    2. Single axis: rotate canonical z onto the primary axis.

    The translation is the origin in both cases.

    Raises:
        AmbiguousFrameError: if both a_x and a_y were given.
        DegenerateTransformError: if the result is not invertible.
    """
    if attributes.has_explicit_frame:
        frame = complete_triad(attributes.axis, attributes.a_x, attributes.a_y)
        linear = change_of_axes_matrix(frame)
        logger.debug("Using explicit-frame path")
    else:
        linear = rotation_aligning_z(attributes.axis)
        logger.debug(f"Using single-axis path for axis {attributes.axis.to_tuple()}")

    transform = AffineTransform(linear, attributes.origin.to_array())
    if not transform.is_invertible:
        raise DegenerateTransformError(
            f"Transform for axis {attributes.axis.to_tuple()} is not invertible."
        )
    return transform
