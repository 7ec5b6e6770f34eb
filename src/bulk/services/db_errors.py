from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError

from src.bulk.core.exceptions import QueryError

_DISCONNECT_MARKERS = (
    "connection is closed",
    "connection was closed",
    "connection does not exist",
    "connection refused",
    "connect call failed",
    "no address associated with hostname",
    "lost connection",
    "server has gone away",
    "closed in the middle of operation",
)


def is_db_disconnect(exc: BaseException) -> bool:
    # SQLAlchemy wrappers
    if isinstance(exc, (OperationalError, InterfaceError)):
        return True
    if isinstance(exc, DBAPIError) and getattr(exc, "connection_invalidated", False):
        return True

    msg = str(exc).lower()
    if isinstance(exc, OSError):
        return any(m in msg for m in _DISCONNECT_MARKERS)

    return "no address associated with hostname" in msg


@contextmanager
def translate_db_errors(query: str | None = None) -> Generator[None, None, None]:
    """
    Converts driver and SQLAlchemy failures into QueryError.

    Usage:
        with translate_db_errors(query):
            await conn.execute(text(query))
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as exc:
        disconnected = is_db_disconnect(exc)
        kind = "connection lost" if disconnected else type(exc).__name__
        raise QueryError(
            f"Query failed ({kind}): {exc}",
            query=query,
            original_error=exc,
            disconnected=disconnected,
        ) from exc
