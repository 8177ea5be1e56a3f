"""In-memory search, filter, sort and pagination for list views."""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class TableQuery:
    """What a table view asks for. ``page`` is 1-based."""

    search: str | None = None
    search_fields: Sequence[str] = ()
    filters: Mapping[str, Any] = field(default_factory=dict)
    sort_by: str | None = None
    sort_desc: bool = False
    page: int = 1
    page_size: int = 10


@dataclass
class TablePage(Generic[T]):
    items: list[T]
    total: int
    page: int
    pages: int
    page_size: int


def _read(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        value = row.get(name)
    else:
        value = getattr(row, name, None)
    if isinstance(value, Enum):
        return value.value
    return value


def _matches_search(row: Any, needle: str, fields: Sequence[str]) -> bool:
    for name in fields:
        value = _read(row, name)
        if value is not None and needle in str(value).lower():
            return True
    return False


def _matches_filters(row: Any, filters: Mapping[str, Any]) -> bool:
    for name, expected in filters.items():
        if expected is None:
            continue
        if isinstance(expected, Enum):
            expected = expected.value
        if _read(row, name) != expected:
            return False
    return True


def apply_table_query(rows: Sequence[T], query: TableQuery) -> TablePage[T]:
    """Run search → filters → sort → paginate over ``rows``.

    Rows whose sort key is ``None`` go last regardless of direction. A page
    past the end clamps to the last page.
    """
    selected = list(rows)

    needle = (query.search or "").strip().lower()
    if needle and query.search_fields:
        selected = [r for r in selected if _matches_search(r, needle, query.search_fields)]

    if query.filters:
        selected = [r for r in selected if _matches_filters(r, query.filters)]

    if query.sort_by:
        present = [r for r in selected if _read(r, query.sort_by) is not None]
        missing = [r for r in selected if _read(r, query.sort_by) is None]
        present.sort(key=lambda r: _sort_key(_read(r, query.sort_by)), reverse=query.sort_desc)
        selected = present + missing

    page_size = max(query.page_size, 1)
    total = len(selected)
    pages = math.ceil(total / page_size) if total else 0
    page = min(max(query.page, 1), max(pages, 1))
    start = (page - 1) * page_size
    return TablePage(
        items=selected[start : start + page_size],
        total=total,
        page=page,
        pages=pages,
        page_size=page_size,
    )


def _sort_key(value: Any) -> tuple[int, Any]:
    """Rank by kind first so values of different types never meet in a comparison."""
    if isinstance(value, (bool, int, float, Decimal)):
        return (0, value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (1, value.timestamp())
    if isinstance(value, date):
        return (2, value)
    if isinstance(value, str):
        return (3, value.lower())
    # Nested entities and lists sort by their text form.
    return (4, str(value))
