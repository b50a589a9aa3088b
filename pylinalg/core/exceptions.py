"""
Exception hierarchy for pylinalg.

All exceptions inherit from LinalgError to allow catching any
library-specific error. Every shape, index, parse and domain failure is
raised as one of these, so callers at the host boundary can recover from
any of them and report the message text.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class LinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(LinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incorrect or inconsistent.

    Raised when matrix/vector shapes don't match what an operation needs,
    and when a matrix is not rectangular.

    Attributes:
        operation: Name of the operation that rejected its operands
        expected: Expected shape or dimension, if known
        actual: Actual shape or dimension, if known
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: object = None,
        actual: object = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class ParseError(ValidationError):
    """
    Textual input could not be parsed.

    Attributes:
        token: The offending token, if known
    """

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class IndexOutOfRangeError(ValidationError):
    """
    A row, column or entry index is out of range.

    Attributes:
        index: The rejected index
        bound: Exclusive upper bound the index had to satisfy
    """

    def __init__(self, message: str, index: int | None = None, bound: int | None = None):
        super().__init__(message)
        self.index = index
        self.bound = bound


class DomainError(LinalgError):
    """
    Operation is not defined for the given operands.

    Raised e.g. for the determinant of a non-square matrix or the cross
    product of 5-dimensional vectors.

    Attributes:
        operation: Name of the operation
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class NumericalError(LinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility but the echelon
    form has a zero in its last pivot position.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Rank, if computed
        expected_rank: Expected rank (the matrix dimension)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
