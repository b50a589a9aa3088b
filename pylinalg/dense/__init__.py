"""
Dense matrices and vectors over a pluggable scalar kind.

Public API:
    Vector, Matrix          - value types with arithmetic and predicates
    echelon_generic         - REF with first-nonzero pivoting (exact kinds)
    echelon_partial_pivot   - REF with partial pivoting (float64)
    qr_decomposition        - Householder QR
    householder_reflector   - single Householder matrix
    givens_rotation, rotation_2d, rotation_x_3d, rotation_y_3d, rotation_z_3d
"""

from pylinalg.dense.vector import Vector
from pylinalg.dense.matrix import Matrix
from pylinalg.dense._echelon import echelon_generic, echelon_partial_pivot
from pylinalg.dense._powers import EXP_SERIES_TERMS
from pylinalg.dense.qr import QRResult, householder_reflector, qr_decomposition
from pylinalg.dense.rotations import (
    givens_rotation,
    rotation_2d,
    rotation_x_3d,
    rotation_y_3d,
    rotation_z_3d,
)

__all__ = [
    "Vector",
    "Matrix",
    "echelon_generic",
    "echelon_partial_pivot",
    "EXP_SERIES_TERMS",
    "QRResult",
    "householder_reflector",
    "qr_decomposition",
    "givens_rotation",
    "rotation_2d",
    "rotation_x_3d",
    "rotation_y_3d",
    "rotation_z_3d",
]
