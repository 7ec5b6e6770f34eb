import re
from collections.abc import Callable

import pytest

_PAGE_RE = re.compile(
    r"^SELECT \* FROM `(?P<table>\w+)` WHERE `(?P<key>\w+)` > (?P<last>-?\d+)"
    r" ORDER BY `(?P=key)` ASC LIMIT (?P<limit>\d+)$"
)


class FakeTableSource:
    """In-memory table that answers the keyset page query."""

    def __init__(self, table: str, rows: list[dict], key: str = "id") -> None:
        self.table = table
        self.key = key
        self.rows = list(rows)
        self.queries: list[str] = []
        self.pages: list[list] = []
        self.before_fetch: Callable[["FakeTableSource"], None] | None = None

    def insert(self, row: dict) -> None:
        self.rows.append(row)

    async def fetch_all(self, query: str) -> list[dict]:
        if self.before_fetch is not None:
            self.before_fetch(self)

        self.queries.append(query)
        m = _PAGE_RE.match(query)
        assert m is not None, f"unexpected query: {query}"
        assert m["table"] == self.table
        assert m["key"] == self.key

        last = int(m["last"])
        limit = int(m["limit"])
        page = sorted(
            (r for r in self.rows if int(r[self.key]) > last),
            key=lambda r: int(r[self.key]),
        )[:limit]
        self.pages.append([r[self.key] for r in page])
        return [dict(r) for r in page]


def make_rows(*keys: int) -> list[dict]:
    return [{"id": k, "title": f"film-{k}"} for k in keys]


@pytest.fixture
def table_source() -> Callable[..., FakeTableSource]:
    def factory(*keys: int, table: str = "t") -> FakeTableSource:
        return FakeTableSource(table, make_rows(*keys))

    return factory
