from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncSession

from src.bulk.ports.reader import Row
from src.bulk.services.db_errors import translate_db_errors

logger = logging.getLogger("bulk_copy")


class SqlRowSource:
    """Executes page queries through SQLAlchemy and returns plain dict rows."""

    def __init__(self, conn: AsyncConnection | AsyncSession) -> None:
        self._conn = conn

    async def fetch_all(self, query: str) -> list[Row]:
        with translate_db_errors(query):
            result = await self._conn.execute(text(query))
            try:
                # normalize SQLAlchemy RowMapping -> dict for stable downstream types
                rows: list[Row] = [dict(r) for r in result.mappings().all()]
            finally:
                result.close()

            # one transaction per page: the next page must not reuse this snapshot
            await self._conn.commit()

        logger.debug("query returned rows=%d sql=%s", len(rows), query)
        return rows
