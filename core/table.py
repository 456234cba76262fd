"""
Table engine: column descriptors, sort/search state and row shaping.
Pure functions over record lists; components.data_table does the rendering.
"""

import unicodedata
from dataclasses import dataclass, replace
from datetime import date
from functools import cmp_to_key
from numbers import Number
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import pandas as pd

from config.constants import MISSING_VALUE, NO_DATA_TEXT

Accessor = Union[str, Callable[[Any], Any]]

SORT_ASC = "asc"
SORT_DESC = "desc"


@dataclass(frozen=True)
class ColumnSpec:
    """
    One table column.

    accessor is a field name or a function of the row. A function column
    is sortable only when it names the field to sort on via sort_field.
    """
    header: str
    accessor: Accessor
    sortable: bool = False
    sort_field: Optional[str] = None

    @property
    def sort_key(self) -> Optional[str]:
        if not self.sortable:
            return None
        if self.sort_field:
            return self.sort_field
        if isinstance(self.accessor, str):
            return self.accessor
        return None


@dataclass(frozen=True)
class TableState:
    sort_key: Optional[str] = None
    sort_direction: str = SORT_ASC
    search_term: str = ""


def toggle_sort(state: TableState, key: str) -> TableState:
    """Same column flips asc <-> desc; a new column starts ascending."""
    if state.sort_key == key:
        direction = SORT_DESC if state.sort_direction == SORT_ASC else SORT_ASC
        return replace(state, sort_direction=direction)
    return replace(state, sort_key=key, sort_direction=SORT_ASC)


# ============================================
# FIELD ACCESS
# ============================================
def get_field(row: Any, field: str) -> Any:
    if isinstance(row, dict):
        return row.get(field)
    return getattr(row, field, None)


def cell_value(row: Any, column: ColumnSpec) -> Any:
    if callable(column.accessor):
        return column.accessor(row)
    return get_field(row, column.accessor)


# ============================================
# COMPARISON
# ============================================
def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def collation_key(text: str) -> str:
    """Accent- and case-insensitive key: 'Điều hòa' and 'dieu hoa' collate together."""
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.replace("đ", "d")


def compare_values(a: Any, b: Any) -> int:
    """
    Three-way compare for table sorting.
    Strings collate, numbers compare by difference, anything else is a tie.
    """
    if isinstance(a, str) and isinstance(b, str):
        ka, kb = collation_key(a), collation_key(b)
        if ka != kb:
            return -1 if ka < kb else 1
        if a != b:
            return -1 if a < b else 1
        return 0
    if _is_number(a) and _is_number(b):
        diff = a - b
        return (diff > 0) - (diff < 0)
    return 0


def sort_rows(rows: Sequence[Any], key: Optional[str], direction: str = SORT_ASC) -> List[Any]:
    if not key:
        return list(rows)
    sign = -1 if direction == SORT_DESC else 1

    def compare(x, y):
        return sign * compare_values(get_field(x, key), get_field(y, key))

    return sorted(rows, key=cmp_to_key(compare))


# ============================================
# SEARCH
# ============================================
def format_plain_number(value: Number) -> str:
    """Plain decimal form: 5000000.0 -> '5000000', 2.5 -> '2.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def searchable_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if _is_number(value):
        return format_plain_number(value)
    return None


def matches_search(row: Any, field: Optional[str], term: str) -> bool:
    if not term or not field:
        return True
    text = searchable_text(get_field(row, field))
    if text is None:
        return False
    return term.casefold() in text.casefold()


def filter_rows(rows: Sequence[Any], field: Optional[str], term: str) -> List[Any]:
    return [row for row in rows if matches_search(row, field, term)]


def apply_table_view(rows: Sequence[Any], state: TableState, search_field: Optional[str] = None) -> List[Any]:
    """Sorted, then filtered; an empty term returns every row in sort order."""
    ordered = sort_rows(rows, state.sort_key, state.sort_direction)
    return filter_rows(ordered, search_field, state.search_term)


# ============================================
# DISPLAY
# ============================================
def format_number(value: Any) -> str:
    if not _is_number(value):
        return MISSING_VALUE
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def format_currency(value: Any) -> str:
    """15000000 -> '15,000,000 VND'."""
    if not _is_number(value):
        return MISSING_VALUE
    return f"{format_number(value)} VND"


def parse_date(value) -> Optional[date]:
    """ISO date (YYYY-MM-DD, time part ignored) or None when empty or malformed."""
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except (TypeError, ValueError):
        return None


def name_of(obj: Any) -> str:
    """Name of a joined reference, or the placeholder when it did not resolve."""
    name = getattr(obj, "name", None) if obj is not None else None
    return name if name else MISSING_VALUE


def build_display_frame(rows: Sequence[Any], columns: Sequence[ColumnSpec]) -> Tuple[pd.DataFrame, bool]:
    """
    DataFrame of rendered cells, one column per header.

    Returns (frame, is_placeholder). With no rows the frame holds a single
    "no data" row that callers must not treat as a record.
    """
    headers = [c.header for c in columns]
    if not rows:
        placeholder = {h: "" for h in headers}
        if headers:
            placeholder[headers[0]] = NO_DATA_TEXT
        return pd.DataFrame([placeholder], columns=headers), True

    records = []
    for row in rows:
        rendered = {}
        for column in columns:
            value = cell_value(row, column)
            rendered[column.header] = MISSING_VALUE if value is None else value
        records.append(rendered)
    return pd.DataFrame(records, columns=headers), False


def page_bounds(total: int, page: int, page_size: int) -> Tuple[int, int, int, int]:
    """
    Clamp a page index against a row count.
    Returns (page, total_pages, start, end) with end exclusive.
    """
    page_size = max(1, page_size)
    total_pages = max(1, (total + page_size - 1) // page_size)
    page = min(max(0, page), total_pages - 1)
    start = page * page_size
    end = min(start + page_size, total)
    return page, total_pages, start, end
