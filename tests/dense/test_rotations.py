"""
Tests for rotation matrices.
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import IndexOutOfRangeError, ValidationError
from pylinalg.dense.matrix import Matrix
from pylinalg.dense.rotations import (
    givens_rotation,
    rotation_2d,
    rotation_x_3d,
    rotation_y_3d,
    rotation_z_3d,
)
from pylinalg.dense.vector import Vector


QUARTER_TURN = np.pi / 2


def _basis(i):
    return Vector.standard_basis(3, i)


class TestRotations:
    """Rotations are orthogonal, right-handed and compose by angle."""

    def test_2d_quarter_turn(self):
        result = rotation_2d(QUARTER_TURN).mul_vector(Vector([1, 0]))
        assert result.allclose(Vector([0, 1]))

    @pytest.mark.parametrize("rotation, source, target", [
        (rotation_x_3d, 1, 2),   # y -> z
        (rotation_y_3d, 2, 0),   # z -> x
        (rotation_z_3d, 0, 1),   # x -> y
    ])
    def test_3d_right_handed(self, rotation, source, target):
        result = rotation(QUARTER_TURN).mul_vector(_basis(source))
        assert result.allclose(_basis(target))

    @pytest.mark.parametrize("rotation", [rotation_x_3d, rotation_y_3d, rotation_z_3d])
    def test_orthogonal_with_unit_determinant(self, rotation):
        R = rotation(0.7)
        assert R.transpose().mul(R).allclose(Matrix.id(3))
        assert R.det() == pytest.approx(1.0)

    def test_composition_adds_angles(self):
        lhs = rotation_z_3d(0.3).mul(rotation_z_3d(0.4))
        assert lhs.allclose(rotation_z_3d(0.7))

    def test_inverse_is_negative_angle(self):
        assert rotation_x_3d(0.5).inverse().allclose(rotation_x_3d(-0.5))

    def test_givens_leaves_other_axes(self):
        G = givens_rotation(4, 1, 3, 0.9)
        assert G.mul_vector(Vector.standard_basis(4, 0)) == Vector.standard_basis(4, 0)
        assert G.mul_vector(Vector.standard_basis(4, 2)) == Vector.standard_basis(4, 2)

    def test_givens_same_axis_rejected(self):
        with pytest.raises(ValidationError, match="must differ"):
            givens_rotation(3, 1, 1, 0.5)

    def test_givens_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            givens_rotation(3, 0, 3, 0.5)
