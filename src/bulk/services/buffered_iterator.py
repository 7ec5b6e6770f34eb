from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from src.bulk.core.enums import ScanState
from src.bulk.core.exceptions import IllegalStateError, InvalidInputError, OutOfRangeError
from src.bulk.ports.pagination import PaginationContext
from src.bulk.ports.reader import Row, RowSource

logger = logging.getLogger("bulk_copy")

MAX_PAGE_SIZE = 1_000_000


class BufferedRowIterator:
    """
    Reads a table page by page and hands out rows one at a time.

    The iterator keeps exactly one page in memory. Each row that becomes
    current is reported to the pagination context, so when the page runs
    out the context already points at the last row handed out and the next
    query resumes strictly after it. An empty page ends the scan for good.

    Usage:
        it = BufferedRowIterator(source, 1000, IntegerKeyPaginationContext("films"))
        async for row in it:
            ...
    """

    def __init__(self, source: RowSource, page_size: int, context: PaginationContext) -> None:
        if not isinstance(page_size, int) or isinstance(page_size, bool):
            raise InvalidInputError(f"Page size must be an integer, got {page_size!r}")
        if page_size < 1 or page_size > MAX_PAGE_SIZE:
            raise InvalidInputError(
                f"Invalid page size provided, expected 1..{MAX_PAGE_SIZE}, got {page_size}"
            )

        self._source = source
        self._page_size = page_size
        self._ctx = context

        self._index = 0
        self._page_offset = 0
        self._page: list[Row] = []
        self._finished = False
        self._started = False
        self._pages_fetched = 0

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def context(self) -> PaginationContext:
        return self._ctx

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def state(self) -> ScanState:
        if not self._started:
            return ScanState.UNSTARTED
        if self._finished:
            return ScanState.EXHAUSTED
        return ScanState.ACTIVE

    async def _fetch_page(self) -> None:
        query = self._ctx.get_query(self._page_size)
        rows = await self._source.fetch_all(query)

        self._pages_fetched += 1
        self._page = []
        self._page_offset = 0

        if not rows:
            # all data has been read or the table is empty
            self._finished = True
            logger.debug(
                "page=%d empty, scan finished after %d rows", self._pages_fetched, self._index
            )
            return

        self._page = list(rows)
        logger.debug("page=%d fetched rows=%d", self._pages_fetched, len(self._page))
        self._ctx.record_last_seen(self._page[0])

    async def rewind(self) -> None:
        """Start the scan over from the context's initial key and load the first page."""
        self._index = 0
        self._page_offset = 0
        self._page = []
        self._finished = False
        self._started = True
        self._pages_fetched = 0

        self._ctx.reset()
        await self._fetch_page()

    def current(self) -> Row:
        if not self._started:
            raise IllegalStateError("Call to current before rewind")
        if self._finished:
            raise IllegalStateError("Call to current after end of data")
        return self._page[self._page_offset]

    async def advance(self) -> None:
        if not self._started:
            raise IllegalStateError("Call to advance before rewind")
        if self._finished:
            raise OutOfRangeError("Read after end of data")

        self._index += 1
        self._page_offset += 1
        if self._page_offset == len(self._page):
            await self._fetch_page()
        else:
            self._ctx.record_last_seen(self.current())

    def position(self) -> int:
        return self._index

    def has_more(self) -> bool:
        return not self._finished

    async def __aiter__(self) -> AsyncIterator[Row]:
        await self.rewind()
        while self.has_more():
            yield self.current()
            await self.advance()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(page_size={self._page_size}, "
            f"state={self.state.value}, position={self._index})"
        )
