"""
Byte-buffer operation table for an external host.

Every exported operation takes one or more byte buffers and returns a
byte buffer. Matrix and vector arguments use the textual encoding of
pylinalg.codec.text; integer and index arguments are decimal text.

    call(name, *buffers)    -> bytes; raises LinalgError subclasses
    invoke(name, *buffers)  -> Result[bytes]; failures carry the message

Usage:
    >>> call('trace', b'1,2;3,4')
    b'5'
    >>> invoke('det', b'1,2,3').error
    'Non-square matrix has no determinant (shape (1, 3))'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable
import warnings

from pylinalg.codec.text import (
    Buffer,
    decode_index,
    decode_int,
    decode_matrix,
    decode_vector,
    encode_matrix,
    encode_scalar,
    encode_vector,
)
from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.exceptions import LinalgError, ValidationError
from pylinalg.core.result import Result
from pylinalg.core.scalar import FLOAT64, ScalarKind


@dataclass(frozen=True)
class Operation:
    """
    One entry of the operation table.

    Attributes:
        name: Exported operation name
        arguments: Argument decoders by name ('matrix', 'vector', 'int', 'index')
        compute: Function applied to the decoded arguments
        returns: Result encoder by name ('matrix', 'vector', 'scalar')
    """
    name: str
    arguments: tuple[str, ...]
    compute: Callable[..., Any]
    returns: str

    @property
    def arity(self) -> int:
        return len(self.arguments)


_DECODERS: dict[str, Callable[[Buffer, ScalarKind], Any]] = {
    'matrix': decode_matrix,
    'vector': decode_vector,
    'int': lambda data, kind: decode_int(data),
    'index': lambda data, kind: decode_index(data),
}

_ENCODERS: dict[str, Callable[[Any, ScalarKind], bytes]] = {
    'matrix': lambda value, kind: encode_matrix(value),
    'vector': lambda value, kind: encode_vector(value),
    'scalar': encode_scalar,
}


def _op(name: str, arguments: tuple[str, ...], compute: Callable[..., Any], returns: str) -> Operation:
    return Operation(name=name, arguments=arguments, compute=compute, returns=returns)


OPERATIONS: dict[str, Operation] = {op.name: op for op in (
    _op('add', ('matrix', 'matrix'), lambda a, b: a.add(b), 'matrix'),
    _op('sub', ('matrix', 'matrix'), lambda a, b: a.sub(b), 'matrix'),
    _op('mul', ('matrix', 'matrix'), lambda a, b: a.mul(b), 'matrix'),
    _op('neg', ('matrix',), lambda a: a.neg(), 'matrix'),
    _op('transpose', ('matrix',), lambda a: a.transpose(), 'matrix'),
    _op('REF', ('matrix',), lambda a: a.echelon()[0], 'matrix'),
    _op('RREF', ('matrix',), lambda a: a.reduced_echelon(), 'matrix'),
    _op('det', ('matrix',), lambda a: a.det(), 'scalar'),
    _op('trace', ('matrix',), lambda a: a.trace(), 'scalar'),
    _op('inverse', ('matrix',), lambda a: a.inverse(), 'matrix'),
    _op('exp', ('matrix',), lambda a: a.exp(), 'matrix'),
    _op('pow', ('matrix', 'int'), lambda a, p: a.powi(p), 'matrix'),
    _op('rowswap', ('matrix', 'index', 'index'), lambda a, r1, r2: a.rowswap(r1, r2), 'matrix'),
    _op('mul_vec', ('matrix', 'vector'), lambda a, v: a.mul_vector(v), 'vector'),
)}


def get_operation(name: str) -> Operation:
    """
    Look up an exported operation.

    Raises:
        ValidationError: If no operation has this name
    """
    if name not in OPERATIONS:
        raise ValidationError(
            f"Unknown operation: {name!r}. Available: {sorted(OPERATIONS)}"
        )
    return OPERATIONS[name]


def call(
    name: str,
    *buffers: Buffer,
    kind: ScalarKind = FLOAT64,
    timer: Timer | None = None,
) -> bytes:
    """
    Decode the arguments, run one operation and encode its result.

    Args:
        name: Operation name (see OPERATIONS)
        *buffers: Encoded arguments, one per declared argument
        kind: Scalar kind used to decode matrix/vector arguments
        timer: If given, 'decode', 'compute' and 'encode' sections are recorded

    Returns:
        Encoded result

    Raises:
        ValidationError: Unknown operation or wrong number of arguments
        LinalgError: Any error raised while decoding or computing
    """
    op = get_operation(name)
    if len(buffers) != op.arity:
        raise ValidationError(
            f"{name}: expected {op.arity} argument(s), got {len(buffers)}"
        )
    timer = timer if timer is not None else Timer()

    with timer.section('decode'):
        args = [_DECODERS[arg](buf, kind) for arg, buf in zip(op.arguments, buffers)]
    with timer.section('compute'):
        value = op.compute(*args)
    with timer.section('encode'):
        return _ENCODERS[op.returns](value, kind)


def invoke(name: str, *buffers: Buffer, kind: ScalarKind = FLOAT64) -> Result[bytes]:
    """
    Host entry point: like call(), but library errors become a failed Result.

    Warnings emitted during the call are captured on Result.warnings.
    """
    payload: bytes | None = None
    failure: LinalgError | None = None

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        with timed() as timer:
            try:
                payload = call(name, *buffers, kind=kind, timer=timer)
            except LinalgError as e:
                failure = e

    return Result(
        value=payload,
        info={'operation': name, 'kind': kind.name},
        timing=timer.result(),
        error=str(failure) if failure is not None else None,
        error_type=type(failure).__name__ if failure is not None else None,
        warnings=tuple(str(w.message) for w in caught),
    )
