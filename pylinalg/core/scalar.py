"""
Scalar kinds: the element types a Matrix or Vector can hold.

Python's numeric types already provide the arithmetic half of the scalar
contract. A ScalarKind adds what the kernel needs on top of that: the
storage dtype, additive and multiplicative identities, a zero test,
summation, and the textual round trip used by the byte codec.

Registered kinds:
    FLOAT64     64-bit binary floating point (numpy float64)
    COMPLEX128  complex numbers (numpy complex128)
    RATIONAL    exact rationals (fractions.Fraction, object storage)
    DECIMAL     decimal floating point (decimal.Decimal, object storage)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Complex, Real
from typing import Any, Callable, Iterable
import numpy as np

from pylinalg.core.exceptions import ParseError, ValidationError


def _format_float(value: Any) -> str:
    """Shortest round-trip repr, with integral values written without '.0'."""
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    return text


def _format_complex(value: Any) -> str:
    text = repr(complex(value))
    if text.startswith('(') and text.endswith(')'):
        text = text[1:-1]
    return text


@dataclass(frozen=True)
class ScalarKind:
    """
    Capability record for one scalar type.

    Attributes:
        name: Identifier used in messages and reprs
        dtype: numpy dtype used for storage
        zero: Additive identity
        one: Multiplicative identity
        parser: Text -> scalar; raises ValueError/ArithmeticError on bad input
        formatter: Scalar -> canonical text
        converter: Coerces a Python number into this kind
        is_floating: True for real binary floating point (selects partial pivoting)
        is_inexact: True for kinds that support norm() and normalisation
        is_complex: True for complex kinds (inner product conjugates)
    """
    name: str
    dtype: np.dtype
    zero: Any
    one: Any
    parser: Callable[[str], Any]
    formatter: Callable[[Any], str]
    converter: Callable[[Any], Any]
    is_floating: bool = False
    is_inexact: bool = False
    is_complex: bool = False

    def is_zero(self, value: Any) -> bool:
        return bool(value == self.zero)

    def sum(self, values: Iterable[Any]) -> Any:
        """Sum a sequence of scalars, starting from zero."""
        total = self.zero
        for value in values:
            total = total + value
        return total

    def parse(self, text: str) -> Any:
        """
        Parse one textual scalar.

        Raises:
            ParseError: If text is not a valid literal of this kind
        """
        try:
            return self.parser(text)
        except (ValueError, ArithmeticError, TypeError) as e:
            raise ParseError(
                f"Unable to parse {text!r} as {self.name}", token=text
            ) from e

    def format(self, value: Any) -> str:
        return self.formatter(value)

    def coerce(self, value: Any) -> Any:
        """Convert a Python number to this kind (used for scale factors, fills)."""
        try:
            return self.converter(value)
        except (ValueError, ArithmeticError, TypeError) as e:
            raise ValidationError(
                f"Cannot convert {value!r} to {self.name}"
            ) from e

    def empty(self, shape: tuple[int, ...]) -> np.ndarray:
        """Array of the given shape filled with zero."""
        out = np.empty(shape, dtype=self.dtype)
        out.fill(self.zero)
        return out

    def __repr__(self) -> str:
        return f"ScalarKind({self.name})"


FLOAT64 = ScalarKind(
    name='float64',
    dtype=np.dtype(np.float64),
    zero=0.0,
    one=1.0,
    parser=float,
    formatter=_format_float,
    converter=float,
    is_floating=True,
    is_inexact=True,
)

COMPLEX128 = ScalarKind(
    name='complex128',
    dtype=np.dtype(np.complex128),
    zero=0j,
    one=1 + 0j,
    parser=complex,
    formatter=_format_complex,
    converter=complex,
    is_inexact=True,
    is_complex=True,
)

RATIONAL = ScalarKind(
    name='rational',
    dtype=np.dtype(object),
    zero=Fraction(0),
    one=Fraction(1),
    parser=Fraction,
    formatter=str,
    converter=Fraction,
)

# Decimal raises InvalidOperation (an ArithmeticError) on malformed literals
DECIMAL = ScalarKind(
    name='decimal',
    dtype=np.dtype(object),
    zero=Decimal(0),
    one=Decimal(1),
    parser=Decimal,
    formatter=str,
    converter=Decimal,
)

ALL_KINDS = (FLOAT64, COMPLEX128, RATIONAL, DECIMAL)


def kind_by_name(name: str) -> ScalarKind:
    """Look up a registered kind by its name."""
    for kind in ALL_KINDS:
        if kind.name == name:
            return kind
    names = [k.name for k in ALL_KINDS]
    raise ValidationError(f"Unknown scalar kind {name!r}. Must be one of {names}")


def classify_array(
    array: np.ndarray,
    name: str,
    empty_kind: ScalarKind | None = None,
) -> tuple[np.ndarray, ScalarKind]:
    """
    Determine the scalar kind of an array and convert it to the kind's storage.

    Booleans and integers are promoted to FLOAT64. Object arrays are
    classified by their elements.

    Args:
        array: Array to classify (any dtype)
        name: Parameter name for error messages
        empty_kind: Kind to report for an empty array, which has no elements
            to classify (the operands' kind for an arithmetic result)

    Returns:
        (array in the kind's storage dtype, kind)

    Raises:
        ValidationError: If elements are not a supported scalar type
    """
    if array.size == 0 and empty_kind is not None:
        return array.astype(empty_kind.dtype), empty_kind

    dtype = array.dtype

    if dtype == object:
        return _classify_objects(array, name)

    if np.issubdtype(dtype, np.complexfloating):
        return array.astype(np.complex128), COMPLEX128

    if np.issubdtype(dtype, np.number) or np.issubdtype(dtype, np.bool_):
        return array.astype(np.float64), FLOAT64

    raise ValidationError(
        f"{name}: non-numeric dtype {dtype}, expected numeric data"
    )


def _classify_objects(array: np.ndarray, name: str) -> tuple[np.ndarray, ScalarKind]:
    values = list(array.flat)
    if not values:
        return array.astype(np.float64), FLOAT64

    def _integral(v: Any) -> bool:
        return isinstance(v, (int, np.integer))

    if all(isinstance(v, Fraction) or _integral(v) for v in values):
        kind = RATIONAL
    elif all(isinstance(v, Decimal) or _integral(v) for v in values):
        kind = DECIMAL
    elif all(isinstance(v, Real) for v in values):
        return array.astype(np.float64), FLOAT64
    elif all(isinstance(v, Complex) for v in values):
        return array.astype(np.complex128), COMPLEX128
    else:
        type_names = sorted({type(v).__name__ for v in values})
        raise ValidationError(
            f"{name}: unsupported scalar types {type_names}"
        )

    converted = np.array(
        [kind.converter(int(v)) if _integral(v) else v for v in values],
        dtype=object,
    )
    return converted.reshape(array.shape), kind
