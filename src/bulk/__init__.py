from .core import (
    BulkCopyError,
    IllegalStateError,
    InvalidInputError,
    OutOfRangeError,
    QueryError,
    ScanState,
)
from .services import BufferedRowIterator, CopyStats, IntegerKeyPaginationContext, RowCopier

__all__ = [
    "BufferedRowIterator",
    "IntegerKeyPaginationContext",
    "RowCopier",
    "CopyStats",
    "ScanState",
    # Exceptions
    "BulkCopyError",
    "InvalidInputError",
    "IllegalStateError",
    "OutOfRangeError",
    "QueryError",
]
