"""
Textual byte encoding of matrices, vectors and scalars.

Format (UTF-8):
    matrix   rows joined by ';', entries within a row joined by ','
    vector   entries joined by ','
    scalar   a single entry

Each entry is its kind's canonical text passed through truncate_zeroes(),
which cuts off long runs of zeros that binary floating point produces in
decimal expansions. Decoding parses each token with the kind's parser;
surrounding whitespace is ignored.
"""

from __future__ import annotations

import re
from typing import Any, Union

from pylinalg.core.exceptions import DimensionError, ParseError
from pylinalg.core.scalar import FLOAT64, ScalarKind
from pylinalg.dense.matrix import Matrix
from pylinalg.dense.vector import Vector

Buffer = Union[bytes, bytearray, memoryview, str]

ROW_SEPARATOR = ';'
ENTRY_SEPARATOR = ','
DECIMAL_SEPARATOR = '.'

# Length of a zero run after which a mantissa's fractional digits are cut
ZERO_RUN_LIMIT = 10

# Positional mantissa: digits, separator, digits. Signs, exponents and the
# imaginary-unit suffix lie outside the match and are never cut.
_MANTISSA = re.compile(r'\d*\.\d+')


def _cut_mantissa(mantissa: str) -> str:
    separator_seen = False
    nonzero_seen = False
    run = 0
    for i, ch in enumerate(mantissa):
        if ch == DECIMAL_SEPARATOR:
            separator_seen = True
            run = 0
        elif ch != '0':
            nonzero_seen = True
            run = 0
        elif separator_seen and nonzero_seen:
            run += 1
            if run == ZERO_RUN_LIMIT:
                return mantissa[:i + 1]
    return mantissa


def truncate_zeroes(text: str) -> str:
    """
    Cut each mantissa right after its first run of ZERO_RUN_LIMIT zeros.

    Zeros are only counted after the decimal separator, and only once a
    nonzero digit has appeared in that mantissa. A nonzero digit resets the
    run. Exponents ('e-05') and the second part of a complex number are
    kept, so only fractional noise is removed.

    Examples:
        >>> truncate_zeroes('0.1000000000000000055511151231257827')
        '0.10000000000'
        >>> truncate_zeroes('1.0000000000000002e-05')
        '1.0000000000e-05'
        >>> truncate_zeroes('0.30000000000000004+1j')
        '0.30000000000+1j'
        >>> truncate_zeroes('100000000000000000000')
        '100000000000000000000'
    """
    return _MANTISSA.sub(lambda m: _cut_mantissa(m.group()), text)


def _to_text(data: Buffer) -> str:
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode('utf-8')
    except UnicodeDecodeError as e:
        raise ParseError(f"Input is not valid UTF-8: {e}") from e


def _format_entry(value: Any, kind: ScalarKind) -> str:
    return truncate_zeroes(kind.format(value))


def _parse_entries(text: str, kind: ScalarKind) -> list[Any]:
    return [kind.parse(token.strip()) for token in text.split(ENTRY_SEPARATOR)]


# === Encoding ===

def encode_scalar(value: Any, kind: ScalarKind = FLOAT64) -> bytes:
    return _format_entry(value, kind).encode('utf-8')


def encode_vector(vector: Vector) -> bytes:
    kind = vector.kind
    text = ENTRY_SEPARATOR.join(_format_entry(v, kind) for v in vector)
    return text.encode('utf-8')


def encode_matrix(matrix: Matrix) -> bytes:
    kind = matrix.kind
    text = ROW_SEPARATOR.join(
        ENTRY_SEPARATOR.join(_format_entry(v, kind) for v in row)
        for row in matrix.to_list()
    )
    return text.encode('utf-8')


# === Decoding ===

def decode_vector(data: Buffer, kind: ScalarKind = FLOAT64) -> Vector:
    """
    Decode comma-separated entries into a Vector.

    Raises:
        ParseError: On malformed entries or invalid UTF-8
    """
    return Vector(_parse_entries(_to_text(data), kind), kind=kind)


def decode_matrix(data: Buffer, kind: ScalarKind = FLOAT64) -> Matrix:
    """
    Decode ';'-separated rows of ','-separated entries into a Matrix.

    Raises:
        ParseError: On malformed entries or invalid UTF-8
        DimensionError: If rows have different lengths
    """
    rows: list[list[Any]] = []
    width: int | None = None
    for row_text in _to_text(data).split(ROW_SEPARATOR):
        row = _parse_entries(row_text, kind)
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise DimensionError(
                f"Non-rectangular matrix: row {len(rows)} has {len(row)} "
                f"entries, expected {width}",
                operation='decode',
                expected=width,
                actual=len(row),
            )
        rows.append(row)
    return Matrix(rows, kind=kind)


def decode_int(data: Buffer) -> int:
    """
    Decode a signed integer.

    Raises:
        ParseError: If the text is not an integer literal
    """
    text = _to_text(data).strip()
    try:
        return int(text)
    except ValueError as e:
        raise ParseError(f"Unable to parse {text!r} as an integer", token=text) from e


def decode_index(data: Buffer) -> int:
    """
    Decode a non-negative integer index.

    Raises:
        ParseError: If the text is not a non-negative integer literal
    """
    value = decode_int(data)
    if value < 0:
        raise ParseError(f"Index must be non-negative, got {value}", token=str(value))
    return value
