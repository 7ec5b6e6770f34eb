from __future__ import annotations

from collections.abc import Mapping

from src.bulk.core.exceptions import InvalidInputError
from src.bulk.ports.reader import Row
from src.bulk.ports.transform import RowTransform


def apply_transform(fn: RowTransform | None, row: Row) -> Row:
    if fn is None:
        return row

    res = fn(row)
    if not isinstance(res, Mapping):
        raise InvalidInputError(f"Row transform must return a mapping, got {type(res)}")
    return res
