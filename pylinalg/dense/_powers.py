"""
Integer matrix powers and the truncated matrix exponential.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np
from scipy.special import factorial

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_square

if TYPE_CHECKING:
    from pylinalg.dense.matrix import Matrix


# Highest power kept in the exponential series: Σ_{k=0}^{20} A^k / k!
EXP_SERIES_TERMS = 20


def powi(matrix: 'Matrix', power: int) -> 'Matrix':
    """
    A^power by binary exponentiation.

    For negative powers the inverse is raised to |power|. The base is
    squared once per bit of |power| and multiplied into the accumulator
    whenever that bit is set.
    """
    if isinstance(power, bool) or not isinstance(power, (int, np.integer)):
        raise ValidationError(f"power: expected an integer, got {type(power).__name__}")
    check_square(matrix.shape, "Cannot take powers of non-square matrix", 'powi')

    power = int(power)
    base = matrix if power >= 0 else matrix.inverse()
    result = type(matrix).id(matrix.nrows(), matrix.kind)
    abs_power = abs(power)

    bit = 1
    while True:
        if abs_power & bit:
            result = result.mul(base)
        bit <<= 1
        if bit > abs_power:
            break
        base = base.mul(base)

    return result


def exp(matrix: 'Matrix') -> 'Matrix':
    """
    exp(A) ≈ Σ_{k=0}^{20} A^k / k!

    A fixed-length series, not a convergence-checked one. Coefficients are
    formed as one / k! in the matrix's own kind, so rational matrices get
    exact coefficients.
    """
    check_square(matrix.shape, "Cannot exponentiate non-square matrix", 'exp')
    kind = matrix.kind
    result = type(matrix).id(matrix.nrows(), kind)
    term = matrix

    for k in range(1, EXP_SERIES_TERMS + 1):
        result = result.add(term.scale(kind.one / factorial(k, exact=True)))
        term = term.mul(matrix)

    return result
