"""
QR decomposition by Householder reflections.

Each step reflects the leading column of the trailing submatrix onto the
first coordinate axis. The full-size reflectors P_0, ..., P_k are kept;
Q = P_0 P_1 ... P_k and R = P_k ... P_1 P_0 A. Reflectors are symmetric
and orthogonal, so no transposes are needed.
"""

from __future__ import annotations

from dataclasses import dataclass
import warnings
import numpy as np

from pylinalg.core.exceptions import DomainError
from pylinalg.core.scalar import FLOAT64
from pylinalg.dense.matrix import Matrix
from pylinalg.dense.vector import Vector


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x n)
        R: Upper triangular matrix (n x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: Matrix
    R: Matrix
    rank: int


def householder_reflector(v: Vector) -> Matrix:
    """
    Householder matrix P with P v = -sign(v[0]) ||v|| e1.

    u = v + sign(v[0]) ||v|| e1 is normalised and P = I - 2 u u^T. Taking
    sign(v[0]) rather than -sign(v[0]) keeps v[0] and the norm term from
    cancelling. A zero v[0] counts as positive. For a zero vector the
    reflector is the identity.

    Raises:
        DomainError: If v is not float64
    """
    if v.kind is not FLOAT64:
        raise DomainError(
            f"Householder reflectors require float64 entries, got {v.kind.name}",
            operation='householder',
        )
    dim = v.dim()
    identity = Matrix.id(dim)
    if dim == 0:
        return identity

    sign = float(np.copysign(1.0, v[0]))
    u = v.add(Vector.standard_basis(dim, 0).scale(sign * v.norm()))
    if u.norm() == 0.0:
        return identity
    n = u.normalised()
    return identity.sub(n.outer_mul(n).scale(2.0))


def _numerical_rank(R: Matrix) -> int:
    """Count R diagonal entries above max(shape) * eps * |R[0, 0]|."""
    diag_R = np.abs(np.array(R.diagonal(), dtype=np.float64))
    if len(diag_R) > 0 and diag_R[0] > 0:
        tol = max(R.shape) * np.finfo(np.float64).eps * diag_R[0]
        return int(np.sum(diag_R > tol))
    return 0


def qr_decomposition(matrix: Matrix) -> QRResult:
    """
    Householder QR decomposition A = QR.

    Accepts square and tall (nrows >= ncols) float64 matrices.

    Args:
        matrix: Matrix to decompose (n x p, n >= p)

    Returns:
        QRResult with Q (n x n), R (n x p) and numerical rank

    Raises:
        DomainError: If the matrix is not float64 or has more columns than rows
    """
    if matrix.kind is not FLOAT64:
        raise DomainError(
            f"QR decomposition requires float64 entries, got {matrix.kind.name}",
            operation='qr',
        )
    nrows, ncols = matrix.shape
    if ncols > nrows:
        raise DomainError(
            f"QR decomposition requires nrows >= ncols, got shape {matrix.shape}",
            operation='qr',
        )

    identity = Matrix.id(nrows)
    working = matrix
    reflectors: list[Matrix] = []

    for i in range(ncols):
        if i > 0:
            working = working.submatrix(0, 0)
        v = working.column(0)
        if v.norm() == 0.0:
            warnings.warn(
                f"QR: column {i} is zero on and below the diagonal; "
                f"matrix is rank-deficient",
                RuntimeWarning,
                stacklevel=2,
            )
        p = householder_reflector(v)
        reflectors.append(identity.embed_matrix(p, i, i))

        if i < ncols - 1:
            working = p.mul(working)

    Q = identity
    for p in reflectors:
        Q = Q.mul(p)

    R = identity
    for p in reversed(reflectors):
        R = R.mul(p)
    R = R.mul(matrix)

    return QRResult(Q=Q, R=R, rank=_numerical_rank(R))
