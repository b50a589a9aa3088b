"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except integer -> float64 promotion)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    DimensionError,
    DomainError,
    IndexOutOfRangeError,
    ValidationError,
)
from pylinalg.core.scalar import ScalarKind, classify_array


def check_array(
    values: ArrayLike,
    ndim: int,
    name: str,
) -> tuple[NDArray[Any], ScalarKind]:
    """
    Validate and convert input to a numpy array of a registered scalar kind.

    Accepts any array-like (nested lists, numpy arrays, Vectors). An empty
    input becomes an empty array of the requested dimensionality.

    Args:
        values: Input to validate
        ndim: Required number of dimensions (1 for vectors, 2 for matrices)
        name: Parameter name for error messages

    Returns:
        (copied array in the kind's storage dtype, scalar kind)

    Raises:
        DimensionError: If rows have different lengths or ndim is wrong
        ValidationError: If entries are not supported scalars
    """
    try:
        array = np.array(values)
    except ValueError as e:
        raise DimensionError(
            f"{name}: non-rectangular matrix ({e})", operation='construct'
        ) from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if array.size == 0 and array.ndim < ndim:
        array = array.reshape((0,) * ndim)

    check_ndim(array, ndim, name)
    return classify_array(array, name)


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: operand shapes differ ({left} vs {right})",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_inner_dims(left_cols: int, right_rows: int, operation: str) -> None:
    """
    Verify the inner dimensions of a product agree.

    Raises:
        DimensionError: If left_cols != right_rows
    """
    if left_cols != right_rows:
        raise DimensionError(
            f"{operation}: left operand has {left_cols} columns but right "
            f"operand has {right_rows} rows",
            operation=operation,
            expected=left_cols,
            actual=right_rows,
        )


def check_square(shape: tuple[int, int], message: str, operation: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (nrows, ncols)
        message: Error message (operation-specific wording)
        operation: Operation name recorded on the exception

    Raises:
        DomainError: If nrows != ncols
    """
    if shape[0] != shape[1]:
        raise DomainError(f"{message} (shape {shape})", operation=operation)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify an index is an integer in [0, bound).

    Args:
        index: Index to check
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is negative or >= bound
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer index, got {type(index).__name__}"
        )
    index = int(index)
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range for size {bound}",
            index=index,
            bound=bound,
        )
    return index
