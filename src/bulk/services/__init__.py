from .buffered_iterator import MAX_PAGE_SIZE, BufferedRowIterator
from .copier import CopyStats, RowCopier
from .key_pagination import IntegerKeyPaginationContext

__all__ = [
    "MAX_PAGE_SIZE",
    "BufferedRowIterator",
    "CopyStats",
    "RowCopier",
    "IntegerKeyPaginationContext",
]
