"""
Generic result container for host-facing calls.

The Result class is the tagged success/failure envelope returned across
the byte boundary. A call either produces a value or an error message;
it never raises a library error to the host.

Design decisions:
    - Generic over the value payload P for type safety
    - info dict for flexible metadata (operation name, scalar kind)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result cannot be altered after the call
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

from pylinalg.core.exceptions import LinalgError

P = TypeVar('P')  # Value payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a single kernel call.

    Type Parameters:
        P: The payload type (bytes at the host boundary)

    Attributes:
        value: Payload on success, None on failure
        info: Structured metadata (operation, kind)
        timing: Execution timing breakdown, or None if not measured
        error: Human-readable failure message, or None on success
        error_type: Exception class name on failure
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(value=b'1,0;0,1', info={'operation': 'inverse'}, timing=None)
        >>> Result(value=None, info={'operation': 'det'}, timing=None,
        ...        error='Non-square matrix has no determinant',
        ...        error_type='DomainError')
    """
    value: P | None
    info: dict[str, Any]
    timing: dict[str, float] | None
    error: str | None = None
    error_type: str | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """True if the call succeeded."""
        return self.error is None

    def unwrap(self) -> P:
        """
        Return the payload, or raise the failure as a LinalgError.

        Raises:
            LinalgError: If the call failed
        """
        if self.error is not None:
            raise LinalgError(self.error)
        return self.value  # type: ignore[return-value]

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
