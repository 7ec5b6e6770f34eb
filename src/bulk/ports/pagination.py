from __future__ import annotations

from typing import Protocol

from src.bulk.ports.reader import Row


class PaginationContext(Protocol):
    """Состояние одного прохода по таблице: где мы остановились и какой SQL нужен дальше."""

    def reset(self) -> None:
        """Вернуться к начальному ключу."""
        ...

    def get_query(self, limit: int) -> str:
        """SQL следующей страницы не длиннее limit строк."""
        ...

    def record_last_seen(self, row: Row) -> None:
        """Запомнить ключ строки, отданной потребителю."""
        ...
