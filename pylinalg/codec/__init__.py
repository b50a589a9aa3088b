"""
Textual byte codec for matrices, vectors and scalars.

Public API:
    encode_matrix, decode_matrix
    encode_vector, decode_vector
    encode_scalar, decode_int, decode_index
    truncate_zeroes
"""

from pylinalg.codec.text import (
    ZERO_RUN_LIMIT,
    decode_index,
    decode_int,
    decode_matrix,
    decode_vector,
    encode_matrix,
    encode_scalar,
    encode_vector,
    truncate_zeroes,
)

__all__ = [
    "ZERO_RUN_LIMIT",
    "decode_index",
    "decode_int",
    "decode_matrix",
    "decode_vector",
    "encode_matrix",
    "encode_scalar",
    "encode_vector",
    "truncate_zeroes",
]
