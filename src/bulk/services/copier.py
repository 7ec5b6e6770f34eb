from __future__ import annotations

import logging
from collections.abc import AsyncIterable
from contextlib import aclosing, nullcontext
from dataclasses import dataclass

from src.bulk.ports.reader import Row
from src.bulk.ports.transform import RowTransform
from src.bulk.ports.writer import RowWriter
from src.bulk.services.transform import apply_transform

logger = logging.getLogger("bulk_copy")


@dataclass(frozen=True, slots=True)
class CopyStats:
    rows_read: int
    rows_written: int


class RowCopier:
    """Copies every row of an async row stream into a writer, one insert per row."""

    def __init__(
        self,
        source: AsyncIterable[Row],
        writer: RowWriter,
        *,
        label: str = "copy",
        log_every: int = 10_000,
    ) -> None:
        self._source = source
        self._writer = writer
        self._label = label
        self._log_every = log_every

    async def copy(self, transform: RowTransform | None = None) -> CopyStats:
        total_read = 0
        total_written = 0

        logger.info("%s start transform=%s", self._label, getattr(transform, "__name__", None))

        rows = aiter(self._source)
        # async generators are closed right away, also when a write fails
        guard = aclosing(rows) if hasattr(rows, "aclose") else nullcontext(rows)

        try:
            async with guard as stream:
                async for row in stream:
                    total_read += 1

                    out = apply_transform(transform, row)
                    await self._writer.write(out)
                    total_written += 1

                    if self._log_every and total_written % self._log_every == 0:
                        logger.info("%s progress written=%d", self._label, total_written)

        except Exception:
            logger.exception(
                "%s failed after read=%d written=%d", self._label, total_read, total_written
            )
            raise

        logger.info("%s done total_read=%d total_written=%d", self._label, total_read, total_written)
        return CopyStats(rows_read=total_read, rows_written=total_written)
