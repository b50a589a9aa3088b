"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the different algorithm paths:
- Exact kinds (rational): bitwise equality
- FP64 direct methods (inverse, det, QR): 1e-9
- FP64 truncated exponential series: relaxed, since the 20-term series
  is an approximation whose error grows with the matrix norm

Used by Matrix.allclose(), Vector.allclose() and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic, entries must compare equal',
)

FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='fp64',
    description='Double precision direct methods (inverse, det, QR)',
)

# The series is truncated after the k = 20 term; for ||A|| <= 1 the
# remainder is below 1/21!, so the tier is set by rounding, not truncation.
FP64_SERIES = ToleranceTier(
    rtol=1e-7,
    atol=1e-9,
    name='fp64_series',
    description='Double precision, truncated matrix exponential series',
)


def select_tolerance(kind_name: str, is_series: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a scalar kind and algorithm path."""
    if kind_name in ('rational',):
        return EXACT
    if is_series:
        return FP64_SERIES
    return FP64
