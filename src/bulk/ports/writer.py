from __future__ import annotations

from typing import Protocol

from src.bulk.ports.reader import Row


class RowWriter(Protocol):
    """Writer сохраняет одну строку в целевую таблицу."""

    async def write(self, row: Row) -> None:
        ...
