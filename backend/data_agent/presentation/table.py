"""Client-side table helpers: sorting, pagination and cell formatting.

Everything works on in-memory lists of uniform dicts; nothing here talks to
the API.
"""

from dataclasses import dataclass
from datetime import date, datetime
from functools import cmp_to_key
from math import ceil
from numbers import Number
from typing import Any, Dict, List, Optional, Sequence

PAGE_SIZE = 10
PAGE_WINDOW = 5

Record = Dict[str, Any]


@dataclass(frozen=True)
class SortState:
    field: Optional[str] = None
    direction: str = "asc"


@dataclass(frozen=True)
class Page:
    rows: List[Record]
    page: int
    total_pages: int
    start: int  # 1-based, 0 when empty
    end: int
    total: int


def columns_of(records: Sequence[Record]) -> List[str]:
    return list(records[0].keys()) if records else []


def is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def compare_values(a: Any, b: Any) -> int:
    if is_number(a) and is_number(b):
        return (a > b) - (a < b)
    a_str, b_str = str(a).lower(), str(b).lower()
    return (a_str > b_str) - (a_str < b_str)


def sort_records(records: Sequence[Record], field: Optional[str], direction: str = "asc") -> List[Record]:
    if direction not in ("asc", "desc"):
        raise ValueError(f"Unknown sort direction: {direction!r}")
    rows = list(records)
    if not field:
        return rows
    sign = 1 if direction == "asc" else -1
    key = cmp_to_key(lambda a, b: sign * compare_values(a.get(field), b.get(field)))
    return sorted(rows, key=key)


def toggle_sort(state: SortState, field: str) -> SortState:
    if state.field == field:
        return SortState(field, "desc" if state.direction == "asc" else "asc")
    return SortState(field, "asc")


def paginate(records: Sequence[Record], page: int = 1, page_size: int = PAGE_SIZE) -> Page:
    total = len(records)
    total_pages = max(1, ceil(total / page_size))
    page = min(max(1, page), total_pages)
    offset = (page - 1) * page_size
    rows = list(records[offset:offset + page_size])
    start = offset + 1 if rows else 0
    return Page(rows, page, total_pages, start, offset + len(rows), total)


def page_window(current: int, total_pages: int, size: int = PAGE_WINDOW) -> List[int]:
    """Page numbers to show around ``current`` (at most ``size`` of them)."""
    if total_pages <= size:
        return list(range(1, total_pages + 1))
    half = size // 2
    first = min(max(1, current - half), total_pages - size + 1)
    return list(range(first, first + size))


def format_cell(value: Any) -> str:
    if value is None:
        return "—"
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if is_number(value):
        if float(value).is_integer():
            return f"{int(value):,}"
        return f"{value:,.2f}"
    if isinstance(value, (datetime, date)):
        return value.strftime("%Y-%m-%d")
    return str(value)
