"""Tests for table sorting, pagination and formatting."""

from datetime import date

import pytest

from data_agent.presentation.table import (
    SortState, columns_of, format_cell, page_window, paginate, sort_records, toggle_sort,
)

ROWS = [
    {"label": "beta", "value": 10},
    {"label": "Alpha", "value": 2},
    {"label": "gamma", "value": 33.5},
]


def test_numeric_sort_both_directions():
    assert [r["value"] for r in sort_records(ROWS, "value", "asc")] == [2, 10, 33.5]
    assert [r["value"] for r in sort_records(ROWS, "value", "desc")] == [33.5, 10, 2]


def test_string_sort_is_case_insensitive():
    assert [r["label"] for r in sort_records(ROWS, "label")] == ["Alpha", "beta", "gamma"]


def test_mixed_values_fall_back_to_strings():
    rows = [{"v": 10}, {"v": "9"}, {"v": None}]
    assert [r["v"] for r in sort_records(rows, "v")] == [10, "9", None]


def test_no_field_keeps_order_and_input_untouched():
    original = list(ROWS)
    assert sort_records(ROWS, None) == ROWS
    sort_records(ROWS, "value", "desc")
    assert ROWS == original


def test_bad_direction():
    with pytest.raises(ValueError):
        sort_records(ROWS, "value", "sideways")


def test_toggle_sort():
    state = toggle_sort(SortState(), "value")
    assert state == SortState("value", "asc")
    state = toggle_sort(state, "value")
    assert state == SortState("value", "desc")
    assert toggle_sort(state, "label") == SortState("label", "asc")


def test_paginate_ten_per_page():
    rows = [{"i": i} for i in range(23)]
    page = paginate(rows, 3)
    assert page.total_pages == 3
    assert [r["i"] for r in page.rows] == [20, 21, 22]
    assert (page.start, page.end, page.total) == (21, 23, 23)


def test_paginate_clamps_page():
    rows = [{"i": i} for i in range(23)]
    assert paginate(rows, 99).page == 3
    assert paginate(rows, 0).page == 1


def test_paginate_empty():
    page = paginate([], 1)
    assert page.rows == []
    assert (page.total_pages, page.start, page.end) == (1, 0, 0)


def test_page_window():
    assert page_window(1, 3) == [1, 2, 3]
    assert page_window(1, 10) == [1, 2, 3, 4, 5]
    assert page_window(3, 10) == [1, 2, 3, 4, 5]
    assert page_window(6, 10) == [4, 5, 6, 7, 8]
    assert page_window(10, 10) == [6, 7, 8, 9, 10]
    assert page_window(9, 10) == [6, 7, 8, 9, 10]


def test_format_cell():
    assert format_cell(None) == "—"
    assert format_cell(True) == "Yes"
    assert format_cell(False) == "No"
    assert format_cell(2500000.0) == "2,500,000"
    assert format_cell(1234) == "1,234"
    assert format_cell(1234.5) == "1,234.50"
    assert format_cell(3.5) == "3.50"
    assert format_cell(date(2024, 3, 1)) == "2024-03-01"
    assert format_cell("Smart TVs") == "Smart TVs"


def test_columns_of():
    assert columns_of(ROWS) == ["label", "value"]
    assert columns_of([]) == []
