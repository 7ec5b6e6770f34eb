from __future__ import annotations

from typing import Mapping, Protocol, Sequence, Any


Row = Mapping[str, Any]


class RowSource(Protocol):
    """Source выполняет готовый SQL и возвращает все строки результата."""

    async def fetch_all(self, query: str) -> Sequence[Row]:
        """Вернуть строки страницы в порядке выдачи (пустой список - данных больше нет)."""
        ...
