"""
pylinalg: generic dense linear algebra over pluggable scalar types.

Matrix and Vector value types with row reduction, determinant, inverse,
integer powers, a truncated matrix exponential and Householder QR, over
float64, complex128, rational and decimal entries. A textual byte codec
and an operation table expose the kernel to an external host.

Submodules:
    core: Scalar kinds, exceptions, validation, result envelope
    dense: Matrix, Vector and their algorithms
    codec: Textual byte encoding
    host: Byte-buffer operation table
"""

__version__ = "0.1.0"

from pylinalg import core
from pylinalg import dense
from pylinalg import codec
from pylinalg import host
from pylinalg.core import (
    FLOAT64,
    COMPLEX128,
    RATIONAL,
    DECIMAL,
    LinalgError,
    ValidationError,
    DimensionError,
    ParseError,
    IndexOutOfRangeError,
    DomainError,
    NumericalError,
    SingularMatrixError,
)
from pylinalg.dense import Matrix, Vector, qr_decomposition

__all__ = [
    "__version__",
    "core",
    "dense",
    "codec",
    "host",
    "FLOAT64",
    "COMPLEX128",
    "RATIONAL",
    "DECIMAL",
    "LinalgError",
    "ValidationError",
    "DimensionError",
    "ParseError",
    "IndexOutOfRangeError",
    "DomainError",
    "NumericalError",
    "SingularMatrixError",
    "Matrix",
    "Vector",
    "qr_decomposition",
]
