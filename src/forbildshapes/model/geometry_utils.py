from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from forbildshapes.config import GEOMETRY_EPS
from forbildshapes.errors import DegenerateTransformError
from forbildshapes.model.geometry_primitives import OrientationFrame, Vector

if TYPE_CHECKING:
    from numpy import typing as npt


CANONICAL_Z = Vector(0.0, 0.0, 1.0)


def unit_array(vector: Vector, label: str = "vector") -> npt.NDArray[np.float64]:
    """
    Normalise ``vector`` into a numpy array.

    Raises:
        DegenerateTransformError: if the vector has (near) zero length.
    """
    arr = vector.to_array()
    norm = np.linalg.norm(arr)
    if norm <= GEOMETRY_EPS:
        raise DegenerateTransformError(f"The {label} {vector.to_tuple()} has zero length.")
    return arr / norm


def rotation_aligning_z(axis: Vector) -> npt.NDArray[np.float64]:
    """
    Rotation matrix that maps the canonical z axis onto ``axis``.

    Args:
        axis: Target direction (any non-zero length).

    Returns:
        A (3, 3) proper rotation ``R`` with ``R @ (0, 0, 1) == axis / |axis|``.

    Notes:
        - Uses Rodrigues' formula about ``z x axis``.
        - Parallel input returns the identity.
        - Anti-parallel input returns a 180 deg turn about the x axis, so the
          result is deterministic even though any in-plane axis would do.
    """
    target = unit_array(axis, "axis")
    z_hat = CANONICAL_Z.to_array()

    cos_a = float(np.dot(z_hat, target))
    if cos_a >= 1.0 - GEOMETRY_EPS:
        return np.eye(3)
    if cos_a <= -1.0 + GEOMETRY_EPS:
        return np.diag([1.0, -1.0, -1.0])

    k = np.cross(z_hat, target)
    sin_a = float(np.linalg.norm(k))
    k /= sin_a

    # Cross-product matrix of the rotation axis
    K = np.array([
        [0.0, -k[2], k[1]],
        [k[2], 0.0, -k[0]],
        [-k[1], k[0], 0.0],
    ])
    return np.eye(3) + sin_a * K + (1.0 - cos_a) * (K @ K)


def change_of_axes_matrix(frame: OrientationFrame) -> npt.NDArray[np.float64]:
    """
    Change-of-basis matrix from the canonical axes to ``frame``.

    Column ``i`` is the normalised frame axis ``i``, so the canonical unit
    vectors e_x, e_y, e_z are carried onto a_x, a_y, a_z. The frame is not
    orthogonalised; a left-handed triad yields a reflection, which is still a
    valid invertible transform.

    Raises:
        DegenerateTransformError: if an axis is zero or the axes are coplanar.
    """
    columns = [
        unit_array(frame.a_x, "frame axis a_x"),
        unit_array(frame.a_y, "frame axis a_y"),
        unit_array(frame.a_z, "frame axis a_z"),
    ]
    matrix = np.column_stack(columns)
    det = float(np.linalg.det(matrix))
    if abs(det) <= GEOMETRY_EPS:
        raise DegenerateTransformError(
            f"Frame axes are coplanar (det={det:.3e}); cannot build a transform."
        )
    return matrix
