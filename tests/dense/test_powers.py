"""
Tests for integer powers and the truncated matrix exponential.

Reference values for exp() come from scipy.linalg.expm.
"""

from fractions import Fraction
import math

import numpy as np
import pytest
from scipy.linalg import expm

from pylinalg.core.compute.tolerances import FP64_SERIES
from pylinalg.core.exceptions import DomainError, SingularMatrixError, ValidationError
from pylinalg.core.scalar import RATIONAL
from pylinalg.dense._powers import EXP_SERIES_TERMS
from pylinalg.dense.matrix import Matrix


# ═══════════════════════════════════════════════════════════════════════
# powi
# ═══════════════════════════════════════════════════════════════════════


class TestPowi:
    """Integer powers by repeated squaring; negative powers invert."""

    def test_shear_cubed(self):
        m = Matrix([[1, 1], [0, 1]])
        assert m.powi(3) == Matrix([[1, 3], [0, 1]])

    def test_scaled_identity_cubed(self):
        m = Matrix([[2, 0, 0], [0, 2, 0], [0, 0, 2]])
        assert m.powi(3) == Matrix([[8, 0, 0], [0, 8, 0], [0, 0, 8]])

    def test_zero_power_is_identity(self):
        assert Matrix([[1, 2], [2, 4]]).powi(0) == Matrix.id(2)

    def test_first_power(self, well_conditioned):
        assert well_conditioned.powi(1) == well_conditioned

    def test_fibonacci_exact(self):
        m = Matrix([[1, 1], [1, 0]], kind=RATIONAL)
        assert m.powi(10) == Matrix([[89, 55], [55, 34]], kind=RATIONAL)

    @pytest.mark.parametrize("power", [2, 5, 8, 13])
    def test_matches_numpy(self, rng, power):
        A = rng.standard_normal((3, 3)) / 2.0
        expected = np.linalg.matrix_power(A, power)
        np.testing.assert_allclose(Matrix(A).powi(power).to_array(), expected, rtol=1e-9, atol=1e-12)

    def test_exponent_sum_law(self, well_conditioned):
        lhs = well_conditioned.powi(5)
        rhs = well_conditioned.powi(2).mul(well_conditioned.powi(3))
        assert lhs.allclose(rhs)

    def test_negative_power_is_inverse(self, well_conditioned):
        assert well_conditioned.powi(-1).allclose(well_conditioned.inverse())

    def test_negative_power_law(self, well_conditioned):
        product = well_conditioned.powi(-3).mul(well_conditioned.powi(3))
        assert product.allclose(Matrix.id(4))

    def test_negative_power_of_singular(self):
        with pytest.raises(SingularMatrixError):
            Matrix([[1, 2], [2, 4]]).powi(-2)

    def test_non_square(self):
        with pytest.raises(DomainError, match="Cannot take powers of non-square matrix"):
            Matrix.zero(2, 3).powi(2)

    @pytest.mark.parametrize("power", [1.5, True, "2"])
    def test_non_integer_power(self, power):
        with pytest.raises(ValidationError, match="expected an integer"):
            Matrix.id(2).powi(power)

    def test_numpy_integer_power(self):
        assert Matrix([[2]]).powi(np.int64(3)) == Matrix([[8]])


# ═══════════════════════════════════════════════════════════════════════
# exp
# ═══════════════════════════════════════════════════════════════════════


class TestExp:
    """exp is the series truncated after the A^20 / 20! term."""

    def test_series_length(self):
        assert EXP_SERIES_TERMS == 20

    def test_zero_matrix(self):
        assert Matrix.zero(3, 3).exp() == Matrix.id(3)

    def test_diagonal(self):
        result = Matrix([[1, 0], [0, 2]]).exp()
        expected = Matrix([[np.e, 0], [0, np.exp(2.0)]])
        assert result.allclose(expected, tier=FP64_SERIES)

    def test_matches_scipy(self, rng):
        A = rng.standard_normal((4, 4)) * 0.3
        np.testing.assert_allclose(
            Matrix(A).exp().to_array(), expm(A),
            rtol=FP64_SERIES.rtol, atol=FP64_SERIES.atol,
        )

    def test_rotation_generator(self):
        theta = 0.5
        result = Matrix([[0, -theta], [theta, 0]]).exp()
        expected = Matrix([[np.cos(theta), -np.sin(theta)], [np.sin(theta), np.cos(theta)]])
        assert result.allclose(expected, tier=FP64_SERIES)

    def test_nilpotent_rational_exact(self):
        m = Matrix([[0, 1], [0, 0]], kind=RATIONAL)
        assert m.exp() == Matrix([[1, 1], [0, 1]], kind=RATIONAL)

    def test_rational_coefficients_exact(self):
        result = Matrix([[1]], kind=RATIONAL).exp()
        assert result.kind is RATIONAL
        assert result[0, 0] == sum(Fraction(1, math.factorial(k)) for k in range(21))

    def test_non_square(self):
        with pytest.raises(DomainError, match="Cannot exponentiate non-square matrix"):
            Matrix.zero(2, 3).exp()
