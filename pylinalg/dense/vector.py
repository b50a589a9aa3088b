"""
Vector: fixed-length ordered tuple of scalars.

A Vector owns a private copy of its entries. Every operation returns a new
Vector (or Matrix); the only in-place change is explicit item assignment
on a vector the caller owns.
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.tolerances import FP64, ToleranceTier
from pylinalg.core.exceptions import DimensionError, DomainError, NumericalError
from pylinalg.core.protocols import Scalar
from pylinalg.core.scalar import FLOAT64, ScalarKind, classify_array
from pylinalg.core.validation import check_array, check_index, check_same_shape

if TYPE_CHECKING:
    from pylinalg.dense.matrix import Matrix


# Offset pairs (a, b) of the seven-dimensional cross product:
# (x × y)_i = Σ x[i+a] y[i+b] - x[i+b] y[i+a]   (indices mod 7)
CROSS_7D_OFFSETS = ((1, 3), (2, 6), (4, 5))


def to_python_scalar(value: Any) -> Any:
    """Unwrap numpy scalars to the matching Python number."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def convert_storage(data: NDArray[Any], kind: ScalarKind) -> NDArray[Any]:
    """
    Convert an already-classified array to another kind's storage.

    Raises:
        ValidationError: If an entry cannot be represented in `kind`
    """
    values = [kind.coerce(to_python_scalar(v)) for v in data.flat]
    out = np.empty(len(values), dtype=kind.dtype)
    out[:] = values
    return out.reshape(data.shape)


class Vector:
    """
    Fixed-length vector over a scalar kind.

    Construction:
        Vector([1.0, 2.0, 3.0])
        Vector([Fraction(1, 2), Fraction(1, 3)])
        Vector([1, 2], kind=RATIONAL)
        Vector.zero(3)
        Vector.standard_basis(3, 0)

    Arithmetic operators: +, - (binary and unary), scalar *.
    """

    __slots__ = ('_data', '_kind')

    # Make numpy defer to our reflected operators (np.float64(2) * v)
    __array_ufunc__ = None

    def __init__(self, entries: ArrayLike, kind: ScalarKind | None = None):
        data, inferred = check_array(entries, 1, 'entries')
        if kind is not None and kind is not inferred:
            data = convert_storage(data, kind)
            inferred = kind
        self._data = data
        self._kind = inferred

    @classmethod
    def _from_storage(cls, data: NDArray[Any], kind: ScalarKind) -> Vector:
        """Wrap an owned array without validation."""
        out = cls.__new__(cls)
        out._data = data
        out._kind = kind
        return out

    @classmethod
    def _from_result(cls, data: NDArray[Any], empty_kind: ScalarKind | None = None) -> Vector:
        """Wrap an arithmetic result, re-deriving its kind (empty_kind if it has no entries)."""
        data, kind = classify_array(data, 'result', empty_kind)
        return cls._from_storage(data, kind)

    # === Constructors ===

    @classmethod
    def zero(cls, dim: int, kind: ScalarKind = FLOAT64) -> Vector:
        """Vector of `dim` zeros."""
        return cls._from_storage(kind.empty((dim,)), kind)

    @classmethod
    def standard_basis(cls, dim: int, i: int, kind: ScalarKind = FLOAT64) -> Vector:
        """
        The i-th standard basis vector e_i of length `dim`.

        Raises:
            IndexOutOfRangeError: If i is not in [0, dim)
        """
        i = check_index(i, dim, 'i')
        data = kind.empty((dim,))
        data[i] = kind.one
        return cls._from_storage(data, kind)

    # === Properties / access ===

    @property
    def kind(self) -> ScalarKind:
        """Scalar kind of the entries."""
        return self._kind

    def dim(self) -> int:
        """Number of entries."""
        return self._data.shape[0]

    def __len__(self) -> int:
        return self.dim()

    def __iter__(self) -> Iterator[Any]:
        return (to_python_scalar(v) for v in self._data)

    def __getitem__(self, i: int) -> Any:
        i = check_index(i, self.dim(), 'index')
        return to_python_scalar(self._data[i])

    def __setitem__(self, i: int, value: Scalar) -> None:
        i = check_index(i, self.dim(), 'index')
        self._data[i] = self._kind.coerce(value)

    def to_list(self) -> list[Any]:
        return [to_python_scalar(v) for v in self._data]

    def to_array(self) -> NDArray[Any]:
        """Copy of the entries as a numpy array."""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        data = self._data.copy()
        return data if dtype is None else data.astype(dtype)

    # === Elementwise arithmetic ===

    def add(self, other: Vector) -> Vector:
        """
        Entrywise sum.

        Raises:
            DimensionError: If dimensions differ
        """
        check_same_shape(self._data.shape, other._data.shape, 'add')
        return Vector._from_result(self._data + other._data, self._kind)

    def sub(self, other: Vector) -> Vector:
        """
        Entrywise difference.

        Raises:
            DimensionError: If dimensions differ
        """
        check_same_shape(self._data.shape, other._data.shape, 'sub')
        return Vector._from_result(self._data - other._data, self._kind)

    def neg(self) -> Vector:
        return Vector._from_storage(-self._data, self._kind)

    def scale(self, c: Scalar) -> Vector:
        """Multiply every entry by the scalar c."""
        return Vector._from_result(self._data * c, self._kind)

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Vector:
        return self.neg()

    def __mul__(self, other: Any) -> Vector:
        if not isinstance(other, Number):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other: Any) -> Vector:
        if not isinstance(other, Number):
            return NotImplemented
        return self.scale(other)

    # === Conversions to Matrix ===

    def row_matrix(self) -> 'Matrix':
        """This vector as a 1 x n matrix."""
        from pylinalg.dense.matrix import Matrix
        return Matrix._from_storage(self._data.reshape(1, -1).copy(), self._kind)

    def column_matrix(self) -> 'Matrix':
        """This vector as an n x 1 matrix."""
        from pylinalg.dense.matrix import Matrix
        return Matrix._from_storage(self._data.reshape(-1, 1).copy(), self._kind)

    def outer_mul(self, other: Vector) -> 'Matrix':
        """Outer product: column_matrix(self) * row_matrix(other)."""
        return self.column_matrix().mul(other.row_matrix())

    # === Products ===

    def inner(self, other: Vector) -> Any:
        """
        Inner product.

        Plain dot product for real and exact kinds; for complex vectors the
        second operand is conjugated: Σ self[i] * conj(other[i]).

        Raises:
            DimensionError: If dimensions differ
        """
        check_same_shape(self._data.shape, other._data.shape, 'inner')
        rhs = other._data
        if self._kind.is_complex or other._kind.is_complex:
            rhs = np.conj(rhs)
        return to_python_scalar(self._kind.sum(self._data * rhs))

    def norm(self) -> float:
        """
        Euclidean norm (Hermitian norm for complex vectors).

        Raises:
            DomainError: If the entries are of an exact kind
        """
        if not self._kind.is_inexact:
            raise DomainError(
                f"norm requires float64 or complex128 entries, got {self._kind.name}",
                operation='norm',
            )
        return float(np.linalg.norm(self._data))

    def normalised(self) -> Vector:
        """
        Unit vector in the direction of self: scale(1 / norm()).

        Raises:
            NumericalError: If the vector is zero
        """
        length = self.norm()
        if length == 0.0:
            raise NumericalError("Cannot normalise the zero vector")
        return self.scale(1.0 / length)

    def cross_product(self, rhs: Vector) -> Vector:
        """
        Cross product, defined for dimensions 0, 1, 3 and 7.

        Dimension 0 and 1 give the zero vector of that dimension, 3 is the
        usual cross product, and 7 the seven-dimensional product built from
        the offset pairs (1, 3), (2, 6), (4, 5).

        Raises:
            DomainError: For any other pair of dimensions
        """
        n, m = self.dim(), rhs.dim()
        if n != m or n not in (0, 1, 3, 7):
            raise DomainError(
                f"Cross product is only defined for dimensions 0, 1, 3 and 7, "
                f"got {n} and {m}",
                operation='cross_product',
            )

        x, y = self._data, rhs._data
        if n == 3:
            entries = [
                x[1] * y[2] - x[2] * y[1],
                x[2] * y[0] - x[0] * y[2],
                x[0] * y[1] - x[1] * y[0],
            ]
        elif n == 7:
            entries = []
            for i in range(7):
                terms = [
                    x[(i + a) % 7] * y[(i + b) % 7] - x[(i + b) % 7] * y[(i + a) % 7]
                    for a, b in CROSS_7D_OFFSETS
                ]
                entries.append(self._kind.sum(terms))
        else:
            return Vector.zero(n, self._kind)

        out = np.empty(n, dtype=object)
        out[:] = [to_python_scalar(v) for v in entries]
        return Vector._from_result(out, self._kind)

    # === Comparison / display ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self._data.shape != other._data.shape:
            return False
        return bool(np.all(np.asarray(self._data == other._data, dtype=bool)))

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: Vector, tier: ToleranceTier = FP64) -> bool:
        """Entrywise comparison within a tolerance tier."""
        if self._data.shape != other._data.shape:
            return False
        dtype = np.complex128 if (self._kind.is_complex or other._kind.is_complex) else np.float64
        return bool(np.allclose(
            self._data.astype(dtype), other._data.astype(dtype),
            rtol=tier.rtol, atol=tier.atol,
        ))

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r}, kind={self._kind.name})"

    def __str__(self) -> str:
        return '[' + ', '.join(self._kind.format(v) for v in self._data) + ']'
