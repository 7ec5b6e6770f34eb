import re

from src.bulk.core.exceptions import InvalidInputError

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_$]*$")


def validate_sql_ident(name: str, *, what: str) -> str:
    if not isinstance(name, str):
        raise InvalidInputError(f"{what} must be a string, got {type(name).__name__}")
    n = name.strip()
    if not _IDENT_RE.fullmatch(n):
        raise InvalidInputError(
            f"Invalid {what}: {n!r}. " "Expected SQL identifier, e.g. 'film_id'"
        )
    return n


def quote_ident(name: str) -> str:
    # backtick quoting; callers validate names first
    return f"`{name}`"
