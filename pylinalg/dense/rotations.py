"""
Rotation matrices (float64).

All rotations are right-handed: a positive angle turns axis i towards
axis j in givens_rotation(dim, i, j, angle).
"""

import numpy as np

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_index
from pylinalg.dense.matrix import Matrix


def givens_rotation(dim: int, i: int, j: int, angle: float) -> Matrix:
    """
    Identity of size dim with a rotation by `angle` in the (i, j) plane.

    Raises:
        IndexOutOfRangeError: If i or j is not in [0, dim)
        ValidationError: If i == j
    """
    i = check_index(i, dim, 'i')
    j = check_index(j, dim, 'j')
    if i == j:
        raise ValidationError(f"givens_rotation: plane axes must differ, got i = j = {i}")

    c = float(np.cos(angle))
    s = float(np.sin(angle))
    out = Matrix.id(dim)
    out[i, i] = c
    out[j, j] = c
    out[i, j] = -s
    out[j, i] = s
    return out


def rotation_2d(angle: float) -> Matrix:
    return givens_rotation(2, 0, 1, angle)


def rotation_x_3d(angle: float) -> Matrix:
    """Rotation about the x axis."""
    return givens_rotation(3, 1, 2, angle)


def rotation_y_3d(angle: float) -> Matrix:
    """Rotation about the y axis."""
    return givens_rotation(3, 2, 0, angle)


def rotation_z_3d(angle: float) -> Matrix:
    """Rotation about the z axis."""
    return givens_rotation(3, 0, 1, angle)
