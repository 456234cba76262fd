"""
Unit tests for core.table.
Tests sorting, searching, display formatting and pagination bounds.
"""

from core.table import (
    SORT_ASC, SORT_DESC, ColumnSpec, TableState, apply_table_view,
    build_display_frame, collation_key, compare_values, filter_rows,
    format_currency, format_number, matches_search, name_of, page_bounds,
    parse_date, sort_rows, toggle_sort,
)
from config.constants import MISSING_VALUE, NO_DATA_TEXT


class TestToggleSort:
    """Test cases for sort state transitions."""

    def test_first_click_sorts_ascending(self):
        state = toggle_sort(TableState(), "name")
        assert state.sort_key == "name"
        assert state.sort_direction == SORT_ASC

    def test_same_column_flips_direction(self):
        state = toggle_sort(TableState(), "name")
        state = toggle_sort(state, "name")
        assert state.sort_direction == SORT_DESC
        state = toggle_sort(state, "name")
        assert state.sort_direction == SORT_ASC

    def test_new_column_resets_to_ascending(self):
        state = TableState(sort_key="name", sort_direction=SORT_DESC)
        state = toggle_sort(state, "value")
        assert state.sort_key == "value"
        assert state.sort_direction == SORT_ASC

    def test_search_term_survives_sort(self):
        state = toggle_sort(TableState(search_term="máy"), "name")
        assert state.search_term == "máy"


class TestCompareValues:
    """Test cases for the three-way comparator."""

    def test_strings_ignore_case_and_accents(self):
        assert collation_key("Điều hòa") == collation_key("dieu hoa")
        assert compare_values("apple", "Banana") < 0

    def test_numbers_compare_by_difference(self):
        assert compare_values(1, 2) < 0
        assert compare_values(35000000, 5000000) > 0
        assert compare_values(3, 3.0) == 0

    def test_mixed_types_tie(self):
        assert compare_values("10", 10) == 0
        assert compare_values(None, 5) == 0

    def test_bools_are_not_numbers(self):
        assert compare_values(True, False) == 0


class TestSortRows:
    """Test cases for sorting record lists."""

    def test_sorting_twice_reverses_order(self, views):
        devices = views.devices()
        ascending = sort_rows(devices, "name", SORT_ASC)
        descending = sort_rows(devices, "name", SORT_DESC)
        assert [d.id for d in descending] == [d.id for d in reversed(ascending)]

    def test_no_key_keeps_input_order(self, views):
        devices = views.devices()
        assert sort_rows(devices, None) == devices

    def test_sort_is_stable_for_ties(self):
        rows = [{"id": "a", "k": 1}, {"id": "b", "k": 1}, {"id": "c", "k": 0}]
        assert [r["id"] for r in sort_rows(rows, "k")] == ["c", "a", "b"]

    def test_does_not_mutate_input(self, views):
        devices = views.devices()
        before = [d.id for d in devices]
        sort_rows(devices, "value", SORT_DESC)
        assert [d.id for d in devices] == before

    def test_value_descending_puts_most_expensive_first(self, views):
        state = TableState(sort_key="value", sort_direction=SORT_DESC)
        rows = apply_table_view(views.devices(), state, "name")
        assert rows[0].id == "D005"
        assert rows[0].value == 35000000


class TestSearch:
    """Test cases for substring search."""

    def test_empty_term_returns_all_rows_in_sort_order(self, views):
        state = TableState(sort_key="name", sort_direction=SORT_DESC)
        rows = apply_table_view(views.devices(), state, "name")
        assert [r.id for r in rows] == [r.id for r in sort_rows(views.devices(), "name", SORT_DESC)]

    def test_search_is_case_insensitive(self, views):
        rows = filter_rows(views.devices(), "name", "máy in")
        assert [r.id for r in rows] == ["D002"]

    def test_unique_substring_returns_exactly_one_row(self, views):
        rows = filter_rows(views.devices(), "name", "Ricoh")
        assert [r.id for r in rows] == ["D005"]

    def test_numbers_match_plain_decimal_form(self):
        row = {"value": 5000000.0}
        assert matches_search(row, "value", "5000")
        assert not matches_search(row, "value", "5,000")

    def test_missing_field_never_matches(self):
        assert not matches_search({"name": None}, "name", "x")
        assert not matches_search({}, "name", "x")

    def test_no_search_field_matches_everything(self):
        assert matches_search({"name": "x"}, None, "zzz")


class TestDisplay:
    """Test cases for cell formatting and the display frame."""

    def test_format_number_and_currency(self):
        assert format_number(15000000) == "15,000,000"
        assert format_number(2.5) == "2.50"
        assert format_currency(35000000) == "35,000,000 VND"
        assert format_currency(None) == MISSING_VALUE

    def test_name_of_missing_reference(self):
        assert name_of(None) == MISSING_VALUE

    def test_parse_date(self):
        assert parse_date("2024-01-15").year == 2024
        assert parse_date("2024-01-15T10:00:00").day == 15
        assert parse_date("") is None
        assert parse_date("not a date") is None

    def test_placeholder_row_when_empty(self):
        columns = [ColumnSpec("Mã", "id"), ColumnSpec("Tên", "name")]
        frame, is_placeholder = build_display_frame([], columns)
        assert is_placeholder
        assert len(frame) == 1
        assert frame.iloc[0]["Mã"] == NO_DATA_TEXT

    def test_function_columns_render_and_none_becomes_placeholder(self, views):
        columns = [
            ColumnSpec("Mã", "id"),
            ColumnSpec("Giá trị", lambda d: format_currency(d.value), sortable=True, sort_field="value"),
            ColumnSpec("Ghi chú", lambda d: None),
        ]
        frame, is_placeholder = build_display_frame(views.devices()[:1], columns)
        assert not is_placeholder
        assert frame.iloc[0]["Giá trị"] == "15,000,000 VND"
        assert frame.iloc[0]["Ghi chú"] == MISSING_VALUE

    def test_function_column_sortable_only_with_sort_field(self):
        assert ColumnSpec("A", lambda r: r, sortable=True).sort_key is None
        assert ColumnSpec("A", lambda r: r, sortable=True, sort_field="value").sort_key == "value"
        assert ColumnSpec("A", "name").sort_key is None


class TestPageBounds:
    """Test cases for pagination clamping."""

    def test_first_page(self):
        assert page_bounds(60, 0, 25) == (0, 3, 0, 25)

    def test_last_page_is_partial(self):
        assert page_bounds(60, 2, 25) == (2, 3, 50, 60)

    def test_out_of_range_page_is_clamped(self):
        assert page_bounds(10, 7, 25) == (0, 1, 0, 10)

    def test_empty_has_one_page(self):
        assert page_bounds(0, 0, 25) == (0, 1, 0, 0)
