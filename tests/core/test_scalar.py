"""
Tests for scalar kinds.

Validates:
    - Identities and zero test per kind
    - Canonical formatting (integral floats without '.0', complex without parens)
    - Parsing, including ParseError on malformed text
    - Coercion and kind lookup
    - The Scalar protocol accepts Python's numeric types
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pylinalg.core.exceptions import ParseError, ValidationError
from pylinalg.core.protocols import Scalar
from pylinalg.core.scalar import (
    ALL_KINDS,
    COMPLEX128,
    DECIMAL,
    FLOAT64,
    RATIONAL,
    classify_array,
    kind_by_name,
)


# ═══════════════════════════════════════════════════════════════════════
# Identities
# ═══════════════════════════════════════════════════════════════════════


class TestIdentities:
    """zero and one are the identities of each kind."""

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda k: k.name)
    def test_zero_is_additive_identity(self, kind):
        x = kind.parse('3')
        assert x + kind.zero == x

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda k: k.name)
    def test_one_is_multiplicative_identity(self, kind):
        x = kind.parse('3')
        assert x * kind.one == x

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda k: k.name)
    def test_is_zero(self, kind):
        assert kind.is_zero(kind.zero)
        assert not kind.is_zero(kind.one)

    def test_sum_starts_from_zero(self):
        assert RATIONAL.sum([]) == Fraction(0)
        assert RATIONAL.sum([Fraction(1, 2), Fraction(1, 3)]) == Fraction(5, 6)

    def test_empty_fills_with_zero(self):
        out = RATIONAL.empty((2, 2))
        assert out.dtype == object
        assert all(v == Fraction(0) for v in out.flat)


# ═══════════════════════════════════════════════════════════════════════
# Formatting and parsing
# ═══════════════════════════════════════════════════════════════════════


class TestFormat:
    """Canonical text per kind."""

    def test_float_integral_drops_point_zero(self):
        assert FLOAT64.format(2.0) == '2'
        assert FLOAT64.format(-3.0) == '-3'

    def test_float_fraction(self):
        assert FLOAT64.format(0.5) == '0.5'

    def test_float_numpy_scalar(self):
        assert FLOAT64.format(np.float64(1.25)) == '1.25'

    def test_complex_drops_parentheses(self):
        assert COMPLEX128.format(1 + 2j) == '1+2j'
        assert COMPLEX128.format(2j) == '2j'

    def test_rational(self):
        assert RATIONAL.format(Fraction(-1, 3)) == '-1/3'
        assert RATIONAL.format(Fraction(4, 2)) == '2'

    def test_decimal(self):
        assert DECIMAL.format(Decimal('1.50')) == '1.50'


class TestParse:
    """Parsing per kind; malformed text raises ParseError."""

    def test_float(self):
        assert FLOAT64.parse('-1.5') == -1.5

    def test_complex(self):
        assert COMPLEX128.parse('1+2j') == 1 + 2j

    def test_rational(self):
        assert RATIONAL.parse('2/6') == Fraction(1, 3)

    def test_decimal(self):
        assert DECIMAL.parse('0.1') == Decimal('0.1')

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda k: k.name)
    def test_malformed_raises_parse_error(self, kind):
        with pytest.raises(ParseError) as exc_info:
            kind.parse('abc')
        assert exc_info.value.token == 'abc'

    def test_empty_raises_parse_error(self):
        with pytest.raises(ParseError):
            FLOAT64.parse('')

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda k: k.name)
    def test_format_parse_round_trip(self, kind):
        x = kind.parse('7')
        assert kind.parse(kind.format(x)) == x


# ═══════════════════════════════════════════════════════════════════════
# Coercion, lookup, classification
# ═══════════════════════════════════════════════════════════════════════


class TestCoerce:
    """Coercion into a kind and lookup by name."""

    def test_int_to_rational(self):
        value = RATIONAL.coerce(3)
        assert isinstance(value, Fraction)
        assert value == 3

    def test_int_to_float(self):
        assert isinstance(FLOAT64.coerce(3), float)

    def test_complex_to_float_fails(self):
        with pytest.raises(ValidationError, match="float64"):
            FLOAT64.coerce(1 + 2j)

    def test_kind_by_name(self):
        assert kind_by_name('rational') is RATIONAL
        assert kind_by_name('complex128') is COMPLEX128

    def test_kind_by_name_unknown(self):
        with pytest.raises(ValidationError, match="Unknown scalar kind"):
            kind_by_name('quaternion')

    def test_repr(self):
        assert repr(DECIMAL) == 'ScalarKind(decimal)'


class TestClassifyArray:
    """Object and empty arrays are classified by their elements."""

    def test_numpy_integers_in_object_array(self):
        arr = np.array([Fraction(1, 2), np.int64(3)], dtype=object)
        data, kind = classify_array(arr, 'x')
        assert kind is RATIONAL
        assert data[1] == Fraction(3)
        assert isinstance(data[1], Fraction)

    def test_object_complex(self):
        arr = np.array([1j, 2.0], dtype=object)
        data, kind = classify_array(arr, 'x')
        assert kind is COMPLEX128
        assert data.dtype == np.complex128

    def test_empty_object_array(self):
        _, kind = classify_array(np.array([], dtype=object), 'x')
        assert kind is FLOAT64

    def test_empty_array_takes_given_kind(self):
        data, kind = classify_array(np.empty((0, 2), dtype=object), 'x', RATIONAL)
        assert kind is RATIONAL
        assert data.shape == (0, 2)
        assert data.dtype == object

    def test_empty_kind_ignored_for_nonempty(self):
        _, kind = classify_array(np.array([1.0]), 'x', RATIONAL)
        assert kind is FLOAT64


class TestScalarProtocol:
    """Python's numeric types satisfy the Scalar protocol."""

    @pytest.mark.parametrize("value", [1.0, 1j, Fraction(1, 2), Decimal('1.5')])
    def test_python_numbers_satisfy_protocol(self, value):
        assert isinstance(value, Scalar)

    def test_string_does_not_satisfy_protocol(self):
        assert not isinstance('abc', Scalar)
