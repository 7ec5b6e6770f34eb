from __future__ import annotations

import re
from typing import Any

from src.bulk.core.exceptions import InvalidInputError
from src.bulk.ports.reader import Row
from src.bulk.services.sql_ident import quote_ident

_DIGITS_RE = re.compile(r"[0-9]+")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_name(value: Any, *, what: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{what} must be a string, got {type(value).__name__}")
    if not value:
        raise InvalidInputError(f"{what} is empty")
    return value


class IntegerKeyPaginationContext:
    """
    Keyset pagination over an integer column.

    Every page is ``key > last_key ORDER BY key ASC LIMIT n``; the iterator
    feeds back each row it hands out so the next page resumes right after it.
    Table and column names are interpolated as-is and must be validated by
    the caller.
    """

    def __init__(self, table: str, key_column: str = "id", initial_key: int = 0) -> None:
        self._table = _require_name(table, what="Table name")
        self._key_column = _require_name(key_column, what="Key column name")
        if not _is_int(initial_key):
            raise InvalidInputError(
                f"Initial key must be an integer, got {initial_key!r}"
            )
        self._initial_key = initial_key
        self._last_key = initial_key

        self.reset()

    @property
    def table(self) -> str:
        return self._table

    @property
    def key_column(self) -> str:
        return self._key_column

    @property
    def initial_key(self) -> int:
        return self._initial_key

    @property
    def last_key(self) -> int:
        return self._last_key

    def reset(self) -> None:
        self._last_key = self._initial_key

    def get_query(self, limit: int) -> str:
        if not _is_int(limit) or limit < 1:
            raise InvalidInputError(f"Invalid limit provided: {limit!r}")

        key = quote_ident(self._key_column)
        return (
            f"SELECT * FROM {quote_ident(self._table)}"
            f" WHERE {key} > {int(self._last_key)}"
            f" ORDER BY {key} ASC"
            f" LIMIT {int(limit)}"
        )

    def record_last_seen(self, row: Row) -> None:
        if not row or self._key_column not in row:
            raise InvalidInputError(
                f"Row does not contain mandatory {self._key_column!r} field"
            )

        value = row[self._key_column]
        if _is_int(value):
            key = value
        elif isinstance(value, str) and _DIGITS_RE.fullmatch(value):
            key = int(value)
        else:
            raise InvalidInputError(
                f"Key {self._key_column!r} must be an integer or a digit string, got {value!r}"
            )

        # keys must strictly increase within a scan
        if key <= self._last_key:
            raise InvalidInputError(
                f"Invariant broken: {self._key_column}={key} is not greater than "
                f"last key {self._last_key}; source rows are not in ascending key order"
            )
        self._last_key = key

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(table={self._table!r}, "
            f"key_column={self._key_column!r}, last_key={self._last_key!r})"
        )
