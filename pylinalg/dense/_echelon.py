"""
Row reduction and the algorithms built directly on it.

Two echelon variants are provided and chosen explicitly by Matrix.echelon():

    echelon_generic         first nonzero entry as pivot, no stabilization;
                            meant for exact kinds (rational, decimal)
    echelon_partial_pivot   largest |entry| in the remaining column as pivot;
                            used for every float64 matrix

Both work on a private copy of the entries and return
(echelon-form Matrix, number of row swaps). Entries eliminated below a
pivot are set to exact zero.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.scalar import ScalarKind
from pylinalg.core.validation import check_square

if TYPE_CHECKING:
    from pylinalg.dense.matrix import Matrix


def _swap_rows(work: NDArray[Any], r1: int, r2: int) -> None:
    work[[r1, r2]] = work[[r2, r1]]


def _eliminate_below(work: NDArray[Any], prow: int, pcol: int, kind: ScalarKind) -> None:
    """Zero every entry below work[prow, pcol] by adding multiples of row prow."""
    pivot = work[prow, pcol]
    for i in range(prow + 1, work.shape[0]):
        entry = work[i, pcol]
        if kind.is_zero(entry):
            continue
        work[i, :] = work[i, :] + (-(entry / pivot)) * work[prow, :]
        work[i, pcol] = kind.zero


def echelon_generic(matrix: 'Matrix') -> tuple['Matrix', int]:
    """
    Row echelon form with naive pivoting.

    Walks the columns left to right. If the entry in the current pivot row
    is zero, the first nonzero entry below it is swapped up; if there is
    none the column is skipped. Entries below the pivot are then
    eliminated and the pivot row advances.
    """
    kind = matrix.kind
    work = matrix.to_array()
    rows, cols = work.shape
    prow = 0
    swaps = 0

    for pcol in range(cols):
        if prow >= rows:
            break
        if kind.is_zero(work[prow, pcol]):
            candidates = [
                i for i in range(prow + 1, rows) if not kind.is_zero(work[i, pcol])
            ]
            if not candidates:
                continue
            _swap_rows(work, prow, candidates[0])
            swaps += 1
        _eliminate_below(work, prow, pcol, kind)
        prow += 1

    return type(matrix)._from_storage(work, kind), swaps


def echelon_partial_pivot(matrix: 'Matrix') -> tuple['Matrix', int]:
    """
    Row echelon form with partial pivoting (numerically stable).

    At each pivot position the remaining part of the column is searched
    for the entry of largest absolute value, which is swapped into the
    pivot row before eliminating below it. An all-zero remaining column
    advances the column only.
    """
    kind = matrix.kind
    work = matrix.to_array()
    rows, cols = work.shape
    prow = 0
    pcol = 0
    swaps = 0

    while prow < rows and pcol < cols:
        magnitudes = np.abs(work[prow:, pcol])
        best = int(np.argmax(magnitudes))
        if magnitudes[best] == 0:
            pcol += 1
            continue

        best += prow
        if best != prow:
            _swap_rows(work, prow, best)
            swaps += 1

        _eliminate_below(work, prow, pcol, kind)
        prow += 1
        pcol += 1

    return type(matrix)._from_storage(work, kind), swaps


def reduced_echelon(matrix: 'Matrix') -> 'Matrix':
    """
    Reduced row echelon form.

    Starting from the echelon form, each row's pivot (first nonzero entry)
    is scaled to one and the entries above it are eliminated. Reduction
    stops at the first row without a pivot.
    """
    ref, _ = matrix.echelon()
    kind = ref.kind
    work = ref.to_array()
    rows, cols = work.shape
    pcol = 0

    for row in range(rows):
        while pcol < cols and kind.is_zero(work[row, pcol]):
            pcol += 1
        if pcol >= cols:
            break

        work[row, :] = work[row, :] * (kind.one / work[row, pcol])
        work[row, pcol] = kind.one

        for i in range(row):
            factor = work[i, pcol]
            if not kind.is_zero(factor):
                work[i, :] = work[i, :] - factor * work[row, :]
            work[i, pcol] = kind.zero
        pcol += 1

    return type(matrix)._from_storage(work, kind)


def det(matrix: 'Matrix') -> Any:
    """Product of the echelon diagonal, negated for an odd number of swaps."""
    check_square(matrix.shape, "Non-square matrix has no determinant", 'det')
    ref, swaps = matrix.echelon()
    kind = ref.kind
    determinant = kind.one if swaps % 2 == 0 else -kind.one
    for entry in ref.diagonal():
        determinant = determinant * entry
    return determinant


def is_invertible(matrix: 'Matrix') -> bool:
    """Square, with a nonzero last pivot in echelon form."""
    if not matrix.is_square():
        return False
    n = matrix.nrows()
    if n == 0:
        return True
    ref, _ = matrix.echelon()
    return not ref.kind.is_zero(ref[n - 1, n - 1])


def inverse(matrix: 'Matrix') -> 'Matrix':
    """Right half of RREF([A | I])."""
    check_square(matrix.shape, "Non-square matrix has no inverse", 'inverse')
    n = matrix.nrows()
    if not is_invertible(matrix):
        raise SingularMatrixError(
            "Matrix is not invertible",
            matrix_name='A',
            expected_rank=n,
        )
    identity = type(matrix).id(n, matrix.kind)
    reduced = matrix.augment_cols(identity).reduced_echelon()
    return type(matrix)._from_storage(reduced.to_array()[:, n:].copy(), reduced.kind)
