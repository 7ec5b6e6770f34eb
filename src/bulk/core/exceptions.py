from __future__ import annotations


class BulkCopyError(Exception):
    """Базовая ошибка bulk-копирования."""


class InvalidInputError(BulkCopyError, ValueError):
    """Некорректный аргумент конструктора или метода."""


class IllegalStateError(BulkCopyError, RuntimeError):
    """Операция недопустима в текущем состоянии итератора."""


class OutOfRangeError(BulkCopyError, IndexError):
    """Попытка сдвинуть итератор за конец данных."""


class QueryError(BulkCopyError):
    """Ошибка источника строк: соединение, синтаксис, права доступа."""

    def __init__(
        self,
        message: str,
        *,
        query: str | None = None,
        original_error: Exception | None = None,
        disconnected: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.query = query
        self.original_error = original_error
        self.disconnected = disconnected
