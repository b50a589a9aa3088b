"""
Core protocols for pylinalg.

These define structural interfaces that element types must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that float, complex, Fraction and Decimal qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only the arithmetic the kernel uses
    - Identities, zero test, parsing and formatting live on ScalarKind,
      since Python number types do not carry them as methods
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """
    Arithmetic half of the scalar capability contract.

    Any element stored in a Matrix or Vector must support these operations
    against other elements of the same kind. The in-place forms (+=, -=,
    *=, /=) fall back to these for immutable Python numbers.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __eq__(self, other: object) -> bool: ...
