"""
Tests for the exception hierarchy.

Validates:
    - Inheritance: every library error is a LinalgError
    - Diagnostic attributes are stored
    - Message text survives str()
"""

import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    DomainError,
    IndexOutOfRangeError,
    LinalgError,
    NumericalError,
    ParseError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestHierarchy:
    """Every exception is catchable as LinalgError."""

    @pytest.mark.parametrize("exc_class", [
        ValidationError,
        DimensionError,
        ParseError,
        IndexOutOfRangeError,
        DomainError,
        NumericalError,
        SingularMatrixError,
    ])
    def test_subclass_of_linalg_error(self, exc_class):
        assert issubclass(exc_class, LinalgError)

    @pytest.mark.parametrize("exc_class", [
        DimensionError,
        ParseError,
        IndexOutOfRangeError,
    ])
    def test_input_errors_are_validation_errors(self, exc_class):
        assert issubclass(exc_class, ValidationError)

    def test_domain_error_is_not_validation_error(self):
        assert not issubclass(DomainError, ValidationError)

    def test_singular_is_numerical(self):
        assert issubclass(SingularMatrixError, NumericalError)

    def test_catch_as_base(self):
        with pytest.raises(LinalgError):
            raise SingularMatrixError("Matrix is not invertible")


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:
    """Diagnostic attributes are stored on the instance."""

    def test_dimension_error(self):
        e = DimensionError("shapes differ", operation='add', expected=(2, 2), actual=(2, 3))
        assert str(e) == "shapes differ"
        assert e.operation == 'add'
        assert e.expected == (2, 2)
        assert e.actual == (2, 3)

    def test_dimension_error_defaults(self):
        e = DimensionError("bad")
        assert e.operation is None
        assert e.expected is None
        assert e.actual is None

    def test_parse_error(self):
        e = ParseError("Unable to parse 'x'", token='x')
        assert e.token == 'x'

    def test_index_error(self):
        e = IndexOutOfRangeError("out of range", index=5, bound=3)
        assert e.index == 5
        assert e.bound == 3

    def test_domain_error(self):
        e = DomainError("Non-square matrix has no determinant", operation='det')
        assert e.operation == 'det'
        assert "determinant" in str(e)

    def test_singular_matrix_error(self):
        e = SingularMatrixError("singular", matrix_name='A', rank=1, expected_rank=2)
        assert e.matrix_name == 'A'
        assert e.rank == 1
        assert e.expected_rank == 2
