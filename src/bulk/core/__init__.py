from .enums import ScanState
from .exceptions import (
    BulkCopyError,
    IllegalStateError,
    InvalidInputError,
    OutOfRangeError,
    QueryError,
)

__all__ = [
    "ScanState",
    "BulkCopyError",
    "InvalidInputError",
    "IllegalStateError",
    "OutOfRangeError",
    "QueryError",
]
