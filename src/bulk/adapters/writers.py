from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncSession

from src.bulk.core.exceptions import InvalidInputError
from src.bulk.ports.reader import Row
from src.bulk.services.db_errors import translate_db_errors
from src.bulk.services.sql_ident import quote_ident, validate_sql_ident


def build_insert_sql(table: str, columns: list[str]) -> str:
    cols = ", ".join(quote_ident(validate_sql_ident(c, what="column name")) for c in columns)
    params = ", ".join(f":p{i}" for i in range(len(columns)))
    return f"INSERT INTO {quote_ident(table)} ({cols}) VALUES ({params})"


class SqlRowWriter:
    """Inserts rows one by one; row keys are column names, values are bound parameters."""

    def __init__(self, conn: AsyncConnection | AsyncSession, table: str) -> None:
        if not isinstance(table, str):
            raise InvalidInputError("Target table must be a string")
        if not table:
            raise InvalidInputError("Target table is empty")

        self._conn = conn
        self._table = validate_sql_ident(table, what="target table")

    @property
    def table(self) -> str:
        return self._table

    async def write(self, row: Row) -> None:
        if not row:
            raise InvalidInputError(f"Cannot insert an empty row into {self._table!r}")

        columns = list(row.keys())
        sql = build_insert_sql(self._table, columns)
        params = {f"p{i}": row[c] for i, c in enumerate(columns)}

        with translate_db_errors(sql):
            result = await self._conn.execute(text(sql), params)
            result.close()
