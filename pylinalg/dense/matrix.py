"""
Matrix: rectangular table of scalars, ordered by row.

A Matrix owns a private copy of its entries and is rectangular by
construction. Every operation returns a new Matrix; the only in-place
change is explicit item assignment on a matrix the caller owns.

All shape problems raise DimensionError, index problems raise
IndexOutOfRangeError, and operations that need a square matrix raise
DomainError. None of them leave the operands modified.
"""

from __future__ import annotations

from numbers import Number
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.tolerances import FP64, ToleranceTier
from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.protocols import Scalar
from pylinalg.core.scalar import FLOAT64, ScalarKind, classify_array
from pylinalg.core.validation import (
    check_array,
    check_index,
    check_inner_dims,
    check_same_shape,
    check_square,
)
from pylinalg.dense.vector import Vector, convert_storage, to_python_scalar
from pylinalg.dense import _echelon, _powers


class Matrix:
    """
    Dense matrix over a scalar kind.

    Construction:
        Matrix([[1, 2], [3, 4]])                    # float64
        Matrix([[Fraction(1, 2), 1], [0, 1]])       # rational
        Matrix([[1, 2], [3, 4]], kind=RATIONAL)
        Matrix.zero(2, 3), Matrix.id(3), Matrix.filled(2, 2, 0.5)

    Operators:
        a + b, a - b, -a        entrywise
        a * b, a @ b            matrix product (a * c scales by a scalar c)
        a @ v, a * v            matrix-vector product
        a[i, j]                 entry access / assignment
    """

    __slots__ = ('_data', '_kind')

    # Make numpy defer to our reflected operators (np.float64(2) * m)
    __array_ufunc__ = None

    def __init__(self, rows: ArrayLike, kind: ScalarKind | None = None):
        data, inferred = check_array(rows, 2, 'rows')
        if kind is not None and kind is not inferred:
            data = convert_storage(data, kind)
            inferred = kind
        self._data = data
        self._kind = inferred

    @classmethod
    def _from_storage(cls, data: NDArray[Any], kind: ScalarKind) -> Matrix:
        """Wrap an owned 2D array without validation."""
        out = cls.__new__(cls)
        out._data = data
        out._kind = kind
        return out

    @classmethod
    def _from_result(cls, data: NDArray[Any], empty_kind: ScalarKind | None = None) -> Matrix:
        """Wrap an arithmetic result, re-deriving its kind (empty_kind if it has no entries)."""
        data, kind = classify_array(data, 'result', empty_kind)
        return cls._from_storage(data, kind)

    # === Constructors ===

    @classmethod
    def filled(cls, rows: int, cols: int, value: Scalar, kind: ScalarKind | None = None) -> Matrix:
        """rows x cols matrix with every entry equal to value."""
        if kind is None:
            return cls._from_result(np.full((rows, cols), value))
        data = kind.empty((rows, cols))
        data.fill(kind.coerce(value))
        return cls._from_storage(data, kind)

    @classmethod
    def zero(cls, rows: int, cols: int, kind: ScalarKind = FLOAT64) -> Matrix:
        """rows x cols zero matrix."""
        return cls._from_storage(kind.empty((rows, cols)), kind)

    @classmethod
    def id(cls, dim: int, kind: ScalarKind = FLOAT64) -> Matrix:
        """dim x dim identity matrix."""
        data = kind.empty((dim, dim))
        for i in range(dim):
            data[i, i] = kind.one
        return cls._from_storage(data, kind)

    # === Shape / access ===

    @property
    def kind(self) -> ScalarKind:
        """Scalar kind of the entries."""
        return self._kind

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    def nrows(self) -> int:
        return self._data.shape[0]

    def ncols(self) -> int:
        return self._data.shape[1]

    def is_square(self) -> bool:
        return self.nrows() == self.ncols()

    def _entry_index(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(f"Matrix index must be (row, col), got {key!r}")
        return check_index(key[0], self.nrows(), 'row'), check_index(key[1], self.ncols(), 'col')

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = self._entry_index(key)
        return to_python_scalar(self._data[i, j])

    def __setitem__(self, key: tuple[int, int], value: Scalar) -> None:
        i, j = self._entry_index(key)
        self._data[i, j] = self._kind.coerce(value)

    def row(self, i: int) -> Vector:
        """Row i as a Vector."""
        i = check_index(i, self.nrows(), 'row')
        return Vector._from_storage(self._data[i, :].copy(), self._kind)

    def column(self, j: int) -> Vector:
        """Column j as a Vector."""
        j = check_index(j, self.ncols(), 'col')
        return Vector._from_storage(self._data[:, j].copy(), self._kind)

    def diagonal(self) -> list[Any]:
        n = min(self.shape)
        return [to_python_scalar(self._data[i, i]) for i in range(n)]

    def to_list(self) -> list[list[Any]]:
        return [[to_python_scalar(v) for v in row] for row in self._data]

    def to_array(self) -> NDArray[Any]:
        """Copy of the entries as a 2D numpy array."""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        data = self._data.copy()
        return data if dtype is None else data.astype(dtype)

    # === Elementwise arithmetic ===

    def add(self, rhs: Matrix) -> Matrix:
        """
        Entrywise sum.

        Raises:
            DimensionError: If shapes differ
        """
        check_same_shape(self.shape, rhs.shape, 'add')
        return Matrix._from_result(self._data + rhs._data, self._kind)

    def sub(self, rhs: Matrix) -> Matrix:
        """
        Entrywise difference.

        Raises:
            DimensionError: If shapes differ
        """
        check_same_shape(self.shape, rhs.shape, 'sub')
        return Matrix._from_result(self._data - rhs._data, self._kind)

    def neg(self) -> Matrix:
        return Matrix._from_storage(-self._data, self._kind)

    def scale(self, c: Scalar) -> Matrix:
        """Multiply every entry by the scalar c."""
        return Matrix._from_result(self._data * c, self._kind)

    def hadamard(self, rhs: Matrix) -> Matrix:
        """
        Entrywise (Hadamard) product.

        Raises:
            DimensionError: If shapes differ
        """
        check_same_shape(self.shape, rhs.shape, 'hadamard')
        return Matrix._from_result(self._data * rhs._data, self._kind)

    def mul(self, rhs: Matrix) -> Matrix:
        """
        Matrix product self * rhs.

        Raises:
            DimensionError: If self.ncols() != rhs.nrows()
        """
        check_inner_dims(self.ncols(), rhs.nrows(), 'mul')
        if self.ncols() == 0:
            return Matrix.zero(self.nrows(), rhs.ncols(), self._kind)
        return Matrix._from_result(self._data @ rhs._data, self._kind)

    def mul_vector(self, v: Vector) -> Vector:
        """
        Matrix-vector product self * v.

        Raises:
            DimensionError: If v.dim() != self.ncols()
        """
        if v.dim() != self.ncols():
            raise DimensionError(
                f"mul_vector: vector has dimension {v.dim()} but matrix has "
                f"{self.ncols()} columns",
                operation='mul_vector',
                expected=self.ncols(),
                actual=v.dim(),
            )
        if self.ncols() == 0:
            return Vector.zero(self.nrows(), self._kind)
        return Vector._from_result(self._data @ v.to_array(), self._kind)

    def transpose(self) -> Matrix:
        return Matrix._from_storage(self._data.T.copy(), self._kind)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Matrix:
        return self.neg()

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return self.mul(other)
        if isinstance(other, Vector):
            return self.mul_vector(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, (Matrix, Vector)):
            return self.__matmul__(other)
        if isinstance(other, Number):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, Number):
            return self.scale(other)
        return NotImplemented

    # === Structural predicates ===

    def _offdiagonal_mask(self) -> NDArray[np.bool_]:
        return ~np.eye(self.nrows(), dtype=bool)

    def is_symmetric(self) -> bool:
        """A[i][j] == A[j][i] for all i != j; False if non-square."""
        if not self.is_square():
            return False
        equal = np.asarray(self._data == self._data.T, dtype=bool)
        return bool(np.all(equal | ~self._offdiagonal_mask()))

    def is_skew_symmetric(self) -> bool:
        """A[i][j] == -A[j][i] for all i, j; False if non-square."""
        if not self.is_square():
            return False
        return bool(np.all(np.asarray(self._data == -self._data.T, dtype=bool)))

    def is_diagonal(self) -> bool:
        """Every off-diagonal entry is zero; False if non-square."""
        if not self.is_square():
            return False
        zero = np.asarray(self._data == self._kind.zero, dtype=bool)
        return bool(np.all(zero | ~self._offdiagonal_mask()))

    # === Row operations ===

    def rowswap(self, r1: int, r2: int) -> Matrix:
        """
        Copy with rows r1 and r2 exchanged.

        Raises:
            IndexOutOfRangeError: If either row does not exist
        """
        r1 = check_index(r1, self.nrows(), 'r1')
        r2 = check_index(r2, self.nrows(), 'r2')
        out = self._data.copy()
        out[[r1, r2]] = out[[r2, r1]]
        return Matrix._from_storage(out, self._kind)

    def rowscale(self, row: int, c: Scalar) -> Matrix:
        """
        Copy with row multiplied by c.

        Raises:
            IndexOutOfRangeError: If the row does not exist
        """
        row = check_index(row, self.nrows(), 'row')
        c = self._kind.coerce(c)
        out = self._data.copy()
        out[row, :] = out[row, :] * c
        return Matrix._from_storage(out, self._kind)

    def rowadd(self, r1: int, r2: int, c: Scalar) -> Matrix:
        """
        Copy with c times row r2 added into row r1.

        Raises:
            IndexOutOfRangeError: If either row does not exist
            ValidationError: If r1 == r2
        """
        r1 = check_index(r1, self.nrows(), 'r1')
        r2 = check_index(r2, self.nrows(), 'r2')
        if r1 == r2:
            raise ValidationError(f"rowadd: cannot add row {r1} to itself")
        c = self._kind.coerce(c)
        out = self._data.copy()
        out[r1, :] = out[r1, :] + c * out[r2, :]
        return Matrix._from_storage(out, self._kind)

    # === Block operations ===

    def submatrix(self, row: int, col: int) -> Matrix:
        """
        Copy with one row and one column removed.

        Raises:
            IndexOutOfRangeError: If the row or column does not exist
        """
        row = check_index(row, self.nrows(), 'row')
        col = check_index(col, self.ncols(), 'col')
        out = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix._from_storage(out, self._kind)

    def embed_matrix(self, other: Matrix, row: int, col: int) -> Matrix:
        """
        Copy with the block rooted at (row, col) overwritten by other.

        The caller guarantees that other fits inside self from (row, col).
        """
        out = self._data.copy()
        if out.dtype != other._data.dtype:
            out = out.astype(object)
        out[row:row + other.nrows(), col:col + other.ncols()] = other._data
        if out.dtype == self._data.dtype and other._kind is self._kind:
            return Matrix._from_storage(out, self._kind)
        return Matrix._from_result(out, self._kind)

    def augment_cols(self, right: Matrix) -> Matrix:
        """
        Horizontal concatenation [self | right].

        Raises:
            DimensionError: If the heights differ
        """
        if self.nrows() != right.nrows():
            raise DimensionError(
                "Cannot horizontally augment matrices of different heights "
                f"({self.nrows()} vs {right.nrows()})",
                operation='augment_cols',
                expected=self.nrows(),
                actual=right.nrows(),
            )
        return Matrix._from_result(np.hstack([self._data, right._data]), self._kind)

    def augment_rows(self, below: Matrix) -> Matrix:
        """
        Vertical concatenation of self above below.

        Raises:
            DimensionError: If the widths differ
        """
        if self.ncols() != below.ncols():
            raise DimensionError(
                "Cannot vertically augment matrices of different widths "
                f"({self.ncols()} vs {below.ncols()})",
                operation='augment_rows',
                expected=self.ncols(),
                actual=below.ncols(),
            )
        return Matrix._from_result(np.vstack([self._data, below._data]), self._kind)

    def trace(self) -> Any:
        """
        Sum of the diagonal entries.

        Raises:
            DomainError: If the matrix is not square
        """
        check_square(self.shape, "Cannot compute trace of non-square matrix", 'trace')
        return to_python_scalar(self._kind.sum(self._data[i, i] for i in range(self.nrows())))

    # === Row reduction and derived algorithms ===

    def echelon(self) -> tuple[Matrix, int]:
        """
        Row echelon form and the number of row swaps performed.

        float64 matrices use partial pivoting; all other kinds use the
        generic first-nonzero pivot.
        """
        if self._kind.is_floating:
            return _echelon.echelon_partial_pivot(self)
        return _echelon.echelon_generic(self)

    def reduced_echelon(self) -> Matrix:
        """Reduced row echelon form (pivots 1, zero above and below)."""
        return _echelon.reduced_echelon(self)

    def det(self) -> Any:
        """
        Determinant.

        Raises:
            DomainError: If the matrix is not square
        """
        return _echelon.det(self)

    def is_invertible(self) -> bool:
        return _echelon.is_invertible(self)

    def inverse(self) -> Matrix:
        """
        Inverse via RREF of [self | I].

        Raises:
            DomainError: If the matrix is not square
            SingularMatrixError: If the matrix is not invertible
        """
        return _echelon.inverse(self)

    def powi(self, power: int) -> Matrix:
        """
        Integer power by repeated squaring; negative powers invert first.

        Raises:
            DomainError: If the matrix is not square
            SingularMatrixError: If power < 0 and the matrix is not invertible
        """
        return _powers.powi(self, power)

    def exp(self) -> Matrix:
        """
        Matrix exponential, truncated after the A^20 / 20! term.

        Raises:
            DomainError: If the matrix is not square
        """
        return _powers.exp(self)

    def qr(self):
        """Householder QR decomposition; see pylinalg.dense.qr.qr_decomposition."""
        from pylinalg.dense.qr import qr_decomposition
        return qr_decomposition(self)

    # === Comparison / display ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(np.asarray(self._data == other._data, dtype=bool)))

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: Matrix, tier: ToleranceTier = FP64) -> bool:
        """Entrywise comparison within a tolerance tier."""
        if self.shape != other.shape:
            return False
        dtype = np.complex128 if (self._kind.is_complex or other._kind.is_complex) else np.float64
        return bool(np.allclose(
            self._data.astype(dtype), other._data.astype(dtype),
            rtol=tier.rtol, atol=tier.atol,
        ))

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r}, kind={self._kind.name})"

    def __str__(self) -> str:
        lines = [
            '[' + ', '.join(self._kind.format(v) for v in row) + ']'
            for row in self._data
        ]
        return '\n'.join(lines)
