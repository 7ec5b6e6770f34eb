from __future__ import annotations

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.bulk.adapters.sql_source import SqlRowSource
from src.bulk.adapters.transformers import load_row_transform
from src.bulk.adapters.writers import SqlRowWriter
from src.bulk.services.buffered_iterator import BufferedRowIterator
from src.bulk.services.copier import CopyStats, RowCopier
from src.bulk.services.key_pagination import IntegerKeyPaginationContext
from src.bulk.services.logctx import copy_prefix, scan_prefix
from src.config import Settings, get_settings

logger = logging.getLogger("bulk_copy")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] [bulk] %(message)s",
    )


def _make_engine(url: str) -> AsyncEngine:
    return create_async_engine(url, echo=False, pool_pre_ping=True, pool_recycle=1800)


async def run_copy(settings: Settings) -> CopyStats:
    """Один полный проход source_table -> target_table по настройкам."""
    source_engine = _make_engine(settings.source_url)
    target_engine = (
        source_engine if settings.same_database else _make_engine(str(settings.target_url))
    )

    transform = load_row_transform(settings.transform) if settings.transform else None

    ctx = IntegerKeyPaginationContext(
        settings.source_table,
        settings.key_column,
        settings.initial_key,
    )
    label = copy_prefix(
        source=scan_prefix(table=settings.source_table, key=settings.key_column),
        target=settings.target_table,
    )

    try:
        async with source_engine.connect() as src_conn, target_engine.begin() as dst_conn:
            iterator = BufferedRowIterator(SqlRowSource(src_conn), settings.page_size, ctx)
            writer = SqlRowWriter(dst_conn, settings.target_table)
            stats = await RowCopier(iterator, writer, label=label).copy(transform)
            logger.info("%s pages=%d last_key=%s", label, iterator.pages_fetched, ctx.last_key)
            return stats
    finally:
        await source_engine.dispose()
        if target_engine is not source_engine:
            await target_engine.dispose()


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Bulk copy starting up (env=%s)", settings.app_env)
    await run_copy(settings)


if __name__ == "__main__":
    asyncio.run(main())
