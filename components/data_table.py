"""
Generic data table component.
Search box, sortable column buttons, paginated st.dataframe with single-row
selection, and CSV/Excel export of the filtered rows. All row shaping is done
by core.table; this module only renders and keeps per-table state.
"""

from typing import Any, Callable, Optional, Sequence

import streamlit as st

from config.constants import FORM_LABELS
from components.feedback import get_badge_color
from core.data import get_pagination_state, paginate_dataframe, render_page_navigation, reset_pagination
from core.export import export_dataframe_to_csv, export_dataframe_to_excel
from core.table import (
    SORT_ASC, ColumnSpec, TableState, apply_table_view, build_display_frame, toggle_sort,
)

SORT_ARROWS = {SORT_ASC: "▲", "desc": "▼"}


# ============================================
# STATE
# ============================================
def get_table_state(key: str) -> TableState:
    state_key = f"table_state_{key}"
    if state_key not in st.session_state:
        st.session_state[state_key] = TableState()
    return st.session_state[state_key]


def set_table_state(key: str, state: TableState):
    st.session_state[f"table_state_{key}"] = state


def reset_table_selection(key: str):
    """Drop the dataframe's row selection by giving the widget a fresh key."""
    st.session_state[f"table_nonce_{key}"] = st.session_state.get(f"table_nonce_{key}", 0) + 1


def _on_sort_click(key: str, sort_key: str):
    set_table_state(key, toggle_sort(get_table_state(key), sort_key))
    reset_table_selection(key)


def _on_search_change(key: str):
    term = st.session_state.get(f"table_search_{key}", "")
    state = get_table_state(key)
    set_table_state(key, TableState(state.sort_key, state.sort_direction, term))
    reset_pagination(key)
    reset_table_selection(key)


# ============================================
# RENDER
# ============================================
def render_sort_controls(key: str, columns: Sequence[ColumnSpec], state: TableState):
    sortable = [c for c in columns if c.sort_key]
    if not sortable:
        return

    cols = st.columns([1.2] + [1] * len(sortable))
    with cols[0]:
        st.markdown("<div style='padding: 8px 0; color: #64748b; font-size: 0.85rem;'>Sắp xếp theo</div>", unsafe_allow_html=True)
    for i, column in enumerate(sortable, 1):
        is_active = state.sort_key == column.sort_key
        arrow = SORT_ARROWS[state.sort_direction] if is_active else "↕"
        with cols[i]:
            st.button(
                f"{column.header} {arrow}",
                key=f"sort_{key}_{column.sort_key}",
                on_click=_on_sort_click,
                args=(key, column.sort_key),
                type="primary" if is_active else "secondary",
                width="stretch",
            )


def render_data_table(
    key: str,
    rows: Sequence[Any],
    columns: Sequence[ColumnSpec],
    search_field: Optional[str] = None,
    on_row_click: Optional[Callable[[Any], None]] = None,
    export_name: Optional[str] = None,
    badge_columns: Sequence[str] = (),
) -> Optional[Any]:
    """
    Render rows under the given columns.

    Args:
        key: Unique table key; sort, search, page and selection state hang off it
        rows: Records to show (the table never mutates them)
        columns: Column descriptors
        search_field: Record field the search box matches against; no box when None
        on_row_click: Called with the selected record (never with the placeholder row)
        export_name: File/sheet base name; export buttons are hidden when None
        badge_columns: Headers whose cells are colored like status badges

    Returns:
        The selected record, or None
    """
    state = get_table_state(key)

    if search_field:
        st.text_input(
            "Tìm kiếm",
            value=state.search_term,
            key=f"table_search_{key}",
            placeholder=FORM_LABELS["search"],
            on_change=_on_search_change,
            args=(key,),
            label_visibility="collapsed",
        )
        state = get_table_state(key)

    render_sort_controls(key, columns, state)

    visible_rows = apply_table_view(rows, state, search_field)
    frame, is_placeholder = build_display_frame(visible_rows, columns)

    st.markdown(f"""
    <div style="display: flex; align-items: center; gap: 8px; padding: 8px 0;">
        <span style="font-size: 14px; color: #374151; font-weight: 500;">Hiển thị</span>
        <span style="font-size: 16px; color: #f97316; font-weight: 700;">{len(visible_rows)}</span>
        <span style="font-size: 14px; color: #6b7280;">/ {len(rows)} bản ghi</span>
    </div>
    """, unsafe_allow_html=True)

    if is_placeholder:
        st.dataframe(frame, hide_index=True, width="stretch", key=f"table_empty_{key}")
        return None

    page_frame = paginate_dataframe(frame, key)
    page = get_pagination_state(key)["page"]
    nonce = st.session_state.get(f"table_nonce_{key}", 0)

    event = st.dataframe(
        style_badges(page_frame, badge_columns),
        hide_index=True,
        width="stretch",
        on_select="rerun",
        selection_mode="single-row",
        key=f"table_{key}_{nonce}_{page}",
    )
    render_page_navigation(key)

    if export_name:
        render_export_buttons(key, frame, export_name)

    selected = None
    selected_positions = event.selection.rows if event is not None else []
    if selected_positions:
        position = selected_positions[0]
        if 0 <= position < len(page_frame):
            selected = visible_rows[page_frame.index[position]]
    if selected is not None and on_row_click:
        on_row_click(selected)
    return selected


def style_badges(frame, badge_columns: Sequence[str]):
    """Color status cells; returns the frame unchanged when there is nothing to color."""
    subset = [c for c in badge_columns if c in frame.columns]
    if not subset:
        return frame
    return frame.style.map(lambda v: f"color: {get_badge_color(v)}; font-weight: 600;", subset=subset)


def render_export_buttons(key: str, frame, export_name: str):
    col1, col2, col3 = st.columns([1, 1, 4])
    with col1:
        st.download_button(
            "⬇ CSV",
            data=export_dataframe_to_csv(frame),
            file_name=f"{export_name}.csv",
            mime="text/csv",
            key=f"export_csv_{key}",
            width="stretch",
        )
    with col2:
        st.download_button(
            "⬇ Excel",
            data=export_dataframe_to_excel(frame, export_name),
            file_name=f"{export_name}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            key=f"export_xlsx_{key}",
            width="stretch",
        )
