"""
Session data access and pagination utilities.
The record store lives in st.session_state, one copy of the seed per browser session.
"""
import logging
from typing import List, Optional

import pandas as pd
import streamlit as st

from config.constants import PAGINATION_CONFIG
from config.settings import DEFAULT_PAGE_SIZE
from core.joins import Denormalizer
from core.store import DataStore
from core.table import page_bounds

logger = logging.getLogger("DeviceCare")


# ============================================
# SESSION STORE
# ============================================
def init_data_store(force: bool = False) -> DataStore:
    """Create this session's store from the seed on first run (or when forced)."""
    if force or "data_store" not in st.session_state:
        st.session_state.data_store = DataStore.from_seed()
        st.session_state.data_views = Denormalizer(st.session_state.data_store)
        logger.info("Session data store initialized from seed")
    return st.session_state.data_store


def get_views() -> Denormalizer:
    init_data_store()
    return st.session_state.data_views


def safe_rerun():
    """Rerun the whole script; st.rerun() raises, so nothing after this call runs."""
    st.rerun()


# ============================================
# PAGINATION
# ============================================
# Per-table state: {"page": 0-based index, "page_size": rows, "total_pages": n}
def _default_page_size() -> int:
    options = PAGINATION_CONFIG["page_size_options"]
    return DEFAULT_PAGE_SIZE if DEFAULT_PAGE_SIZE in options else PAGINATION_CONFIG["default_page_size"]


def get_pagination_state(key: str) -> dict:
    state_key = f"page_state_{key}"
    if state_key not in st.session_state:
        st.session_state[state_key] = {"page": 0, "page_size": _default_page_size(), "total_pages": 1}
    return st.session_state[state_key]


def set_page(key: str, page: int):
    get_pagination_state(key)["page"] = max(0, page)


def _on_page_size_change(key: str):
    state = get_pagination_state(key)
    state["page_size"] = st.session_state[f"page_size_{key}"]
    state["page"] = 0


def paginate_dataframe(df: pd.DataFrame, key: str, show_controls: bool = True) -> pd.DataFrame:
    """
    Current page of a table's rows.

    The stored page is clamped against the row count first, so a search that
    shrinks the result never leaves the table on an empty page.
    """
    state = get_pagination_state(key)
    page, total_pages, start, end = page_bounds(len(df), state["page"], state["page_size"])
    state["page"], state["total_pages"] = page, total_pages

    if show_controls and len(df) > min(PAGINATION_CONFIG["page_size_options"]):
        render_pagination_controls(key, state, len(df), start, end)

    return df.iloc[start:end]


def render_pagination_controls(key: str, state: dict, total_records: int, start: int, end: int):
    """Page size picker plus the "rows x-y of n" caption."""
    options = PAGINATION_CONFIG["page_size_options"]
    size_col, info_col = st.columns([1, 4])

    with size_col:
        st.selectbox(
            "Số dòng mỗi trang",
            options=options,
            index=options.index(state["page_size"]) if state["page_size"] in options else 0,
            key=f"page_size_{key}",
            on_change=_on_page_size_change,
            args=(key,),
            label_visibility="collapsed",
        )

    with info_col:
        st.markdown(
            f"<div style='padding: 8px; color: #64748b; font-size: 0.85rem;'>"
            f"Dòng {start + 1}-{end} / {total_records} · Trang {state['page'] + 1}/{state['total_pages']}</div>",
            unsafe_allow_html=True,
        )


def page_number_window(total_pages: int, current_page: int, radius: int = 1) -> List[Optional[int]]:
    """
    Page indexes to offer as buttons, with None where pages are skipped.

    First and last pages are always shown, plus `radius` pages either side
    of the current one; near either end the first/last four are shown.
    """
    if total_pages <= 7:
        return list(range(total_pages))

    shown = {0, total_pages - 1}
    shown.update(range(max(0, current_page - radius), min(total_pages, current_page + radius + 1)))
    if current_page < 3:
        shown.update(range(4))
    if current_page > total_pages - 4:
        shown.update(range(total_pages - 4, total_pages))

    window: List[Optional[int]] = []
    previous = None
    for page in sorted(shown):
        if previous is not None and page - previous > 1:
            window.append(None)
        window.append(page)
        previous = page
    return window


def render_page_navigation(key: str):
    """Prev / numbered / next buttons under a table; nothing for a single page."""
    state = get_pagination_state(key)
    total_pages, current = state["total_pages"], state["page"]
    if total_pages <= 1:
        return

    window = page_number_window(total_pages, current)
    cols = st.columns([1.5, 1] + [0.6] * len(window) + [1, 1.5])

    with cols[1]:
        st.button("◀ Trước", key=f"pg_prev_{key}", on_click=set_page, args=(key, current - 1),
                  disabled=current == 0, width="stretch")

    for col, page in zip(cols[2:], window):
        with col:
            if page is None:
                st.markdown("<div style='text-align: center; padding: 8px; color: #9ca3af;'>…</div>",
                            unsafe_allow_html=True)
            else:
                st.button(str(page + 1), key=f"pg_{key}_{page}", on_click=set_page, args=(key, page),
                          type="primary" if page == current else "secondary", width="stretch")

    with cols[len(window) + 2]:
        st.button("Sau ▶", key=f"pg_next_{key}", on_click=set_page, args=(key, current + 1),
                  disabled=current >= total_pages - 1, width="stretch")


def reset_pagination(key: str):
    """Back to the first page, e.g. after the search term changes."""
    state_key = f"page_state_{key}"
    if state_key in st.session_state:
        st.session_state[state_key]["page"] = 0
