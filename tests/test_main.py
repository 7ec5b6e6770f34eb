import logging

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from src.bulk.adapters.sql_source import SqlRowSource
from src.bulk.core.exceptions import QueryError
from src.bulk.main import run_copy, setup_logging
from src.bulk.services.buffered_iterator import BufferedRowIterator
from src.bulk.services.key_pagination import IntegerKeyPaginationContext
from src.config.settings import Settings


async def _prepare(url: str, keys: list[int]) -> None:
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.execute(text("CREATE TABLE films (id INTEGER PRIMARY KEY, title TEXT)"))
        await conn.execute(text("CREATE TABLE film_copy (id INTEGER PRIMARY KEY, title TEXT)"))
        if keys:
            await conn.execute(
                text("INSERT INTO films (id, title) VALUES (:id, :title)"),
                [{"id": k, "title": f" film {k} "} for k in keys],
            )
    await engine.dispose()


async def _copied(url: str) -> list[tuple]:
    engine = create_async_engine(url)
    async with engine.connect() as conn:
        res = await conn.execute(text("SELECT id, title FROM film_copy ORDER BY id"))
        rows = [tuple(r) for r in res.all()]
    await engine.dispose()
    return rows


@pytest.mark.asyncio
async def test_run_copy_end_to_end(tmp_path, caplog):
    url = f"sqlite+aiosqlite:///{tmp_path / 'films.db'}"
    await _prepare(url, [1, 2, 3, 4, 5])

    settings = Settings(
        source_url=url,
        source_table="films",
        target_table="film_copy",
        page_size=2,
        transform="src.pipelines.python_tasks.normalize_title",
    )

    with caplog.at_level(logging.INFO, logger="bulk_copy"):
        stats = await run_copy(settings)

    assert stats.rows_read == 5
    assert stats.rows_written == 5
    assert await _copied(url) == [(k, f"Film {k}") for k in range(1, 6)]
    assert "pages=4 last_key=5" in caplog.text


@pytest.mark.asyncio
async def test_run_copy_missing_source_table(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'films.db'}"
    await _prepare(url, [])

    settings = Settings(source_url=url, source_table="missing", target_table="film_copy")

    with pytest.raises(QueryError):
        await run_copy(settings)


def test_setup_logging_accepts_lowercase_level():
    setup_logging("debug")


@pytest.mark.asyncio
async def test_scan_sees_rows_committed_by_other_connection(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'films.db'}"
    await _prepare(url, [1, 2, 3, 4, 5])

    engine = create_async_engine(url)
    try:
        async with engine.connect() as src_conn:
            ctx = IntegerKeyPaginationContext("films")
            it = BufferedRowIterator(SqlRowSource(src_conn), 2, ctx)
            await it.rewind()
            for _ in range(4):
                await it.advance()
            assert it.current()["id"] == 5
            assert src_conn.in_transaction() is False

            async with engine.begin() as other:
                await other.execute(text("INSERT INTO films (id, title) VALUES (6, 'late')"))

            await it.advance()
            assert it.current()["id"] == 6
    finally:
        await engine.dispose()
