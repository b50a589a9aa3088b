"""
Host call boundary: byte buffers in, byte buffer (or error) out.

Public API:
    call(name, *buffers)    - run one operation, raising on failure
    invoke(name, *buffers)  - run one operation, returning Result[bytes]
    OPERATIONS              - the exported operation table
"""

from pylinalg.host.operations import OPERATIONS, Operation, call, get_operation, invoke

__all__ = [
    "OPERATIONS",
    "Operation",
    "call",
    "get_operation",
    "invoke",
]
