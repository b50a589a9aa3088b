"""
Core infrastructure for pylinalg.

This module provides the scalar contract, exception hierarchy, validation
and result envelope shared by the dense kernel, the codec and the host
operation table.

Key components:
    scalar: ScalarKind registry (float64, complex128, rational, decimal)
    protocols: Scalar arithmetic protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pylinalg.core.protocols import Scalar
from pylinalg.core.result import Result
from pylinalg.core.scalar import (
    ScalarKind,
    FLOAT64,
    COMPLEX128,
    RATIONAL,
    DECIMAL,
    ALL_KINDS,
    kind_by_name,
)
from pylinalg.core.exceptions import (
    LinalgError,
    ValidationError,
    DimensionError,
    ParseError,
    IndexOutOfRangeError,
    DomainError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Scalar",
    # Result
    "Result",
    # Scalar kinds
    "ScalarKind",
    "FLOAT64",
    "COMPLEX128",
    "RATIONAL",
    "DECIMAL",
    "ALL_KINDS",
    "kind_by_name",
    # Exceptions
    "LinalgError",
    "ValidationError",
    "DimensionError",
    "ParseError",
    "IndexOutOfRangeError",
    "DomainError",
    "NumericalError",
    "SingularMatrixError",
]
