"""
Parameterized CRUD page.
Every entity page is a PageConfig rendered by render_crud_page: header with an
add button, searchable/sortable table, selected-record panel with edit and
delete, the add/edit dialog and the delete confirmation.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

import streamlit as st

from config.constants import FORM_LABELS, MISSING_VALUE, STATUS_BADGE_TONES
from config.settings import SIMULATED_LATENCY_SECONDS
from components.confirmation import (
    clear_action_confirmation, get_pending_action, init_action_confirmation,
    render_confirmation_dialog, request_action_confirmation,
)
from components.data_table import render_data_table, reset_table_selection
from components.feedback import queue_toast, render_status_badge
from components.form_dialog import MODE_CREATE, MODE_EDIT, open_form_dialog
from components.loading import busy
from core.data import safe_rerun
from core.ids import suggest_next_id
from core.schema import EntitySchema
from core.table import ColumnSpec, cell_value
from services.record_service import delete_record
from views.context import AppContext

logger = logging.getLogger("DeviceCare")


@dataclass
class PageConfig:
    """
    Everything that differs between entity pages.

    detail_renderer, when set, is drawn under the selected-record panel
    (e.g. invoice line items and the pay action).
    """
    title: str
    schema: EntitySchema
    columns: List[ColumnSpec]
    search_field: Optional[str] = None
    subtitle: str = ""
    badge_columns: Sequence[str] = field(default_factory=tuple)
    detail_renderer: Optional[Callable[[AppContext, object], None]] = None

    @property
    def entity(self) -> str:
        return self.schema.entity


# ============================================
# SELECTION
# ============================================
def select_record(entity: str, record_id: str):
    st.session_state.selected_record = {"entity": entity, "id": record_id}


def get_selected_id(entity: str) -> Optional[str]:
    selection = st.session_state.get("selected_record")
    if selection and selection.get("entity") == entity:
        return selection.get("id")
    return None


def clear_selection(entity: str):
    if get_selected_id(entity) is not None:
        st.session_state.pop("selected_record", None)
    reset_table_selection(entity)


# ============================================
# RENDER
# ============================================
def render_page_header(config: PageConfig, store) -> None:
    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown(f'<p class="main-header">{config.title}</p>', unsafe_allow_html=True)
        if config.subtitle:
            st.caption(config.subtitle)
    with col2:
        st.markdown("<div style='height: 12px;'></div>", unsafe_allow_html=True)
        if st.button(f"＋ {FORM_LABELS['add']}", key=f"add_{config.entity}", type="primary", width="stretch"):
            schema = config.schema
            open_form_dialog(
                f"{FORM_LABELS['add']} {schema.label}",
                schema, store, mode=MODE_CREATE,
                defaults={"id": suggest_next_id(schema.id_prefix, store.repo(config.entity).ids())},
            )


def render_record_panel(ctx: AppContext, config: PageConfig, record) -> None:
    """Summary of the selected record with its edit/delete actions."""
    schema = config.schema

    with st.container(border=True):
        st.markdown(f"**{schema.label.capitalize()} {record.id}**")

        cols = st.columns(3)
        for i, column in enumerate(config.columns):
            value = cell_value(record, column)
            if value is None or value == "":
                value = MISSING_VALUE
            with cols[i % 3]:
                if column.header in config.badge_columns or value in STATUS_BADGE_TONES:
                    st.markdown(f"<small style='color:#64748b'>{column.header}</small><br>{render_status_badge(str(value))}", unsafe_allow_html=True)
                else:
                    st.markdown(f"<small style='color:#64748b'>{column.header}</small><br>{value}", unsafe_allow_html=True)

        st.markdown("<div style='height: 8px;'></div>", unsafe_allow_html=True)
        b1, b2, spacer = st.columns([1, 1, 4])
        with b1:
            if st.button(f"✏️ {FORM_LABELS['edit']}", key=f"edit_{config.entity}_{record.id}", width="stretch"):
                open_form_dialog(
                    f"{FORM_LABELS['edit']} {schema.label}",
                    schema, ctx.store, mode=MODE_EDIT, record=record,
                )
        with b2:
            if st.button(f"🗑 {FORM_LABELS['delete']}", key=f"delete_{config.entity}_{record.id}", width="stretch"):
                request_action_confirmation("delete", config.entity, record.id, schema.label)

        pending = get_pending_action("delete", config.entity)
        if pending and pending["record_id"] == record.id:
            confirmed, cancelled = render_confirmation_dialog()
            if confirmed:
                with busy(f"delete_{config.entity}", delay=SIMULATED_LATENCY_SECONDS):
                    result = delete_record(ctx.store, config.entity, record.id)
                clear_action_confirmation()
                clear_selection(config.entity)
                queue_toast(result.message, result.success)
                safe_rerun()
            elif cancelled:
                safe_rerun()

    if config.detail_renderer is not None:
        config.detail_renderer(ctx, record)


def render_crud_page(ctx: AppContext, config: PageConfig) -> None:
    """Render one entity page from its config."""
    init_action_confirmation()
    render_page_header(config, ctx.store)

    rows = ctx.views.full(config.entity)
    selected = render_data_table(
        key=config.entity,
        rows=rows,
        columns=config.columns,
        search_field=config.search_field,
        on_row_click=lambda row: select_record(config.entity, row.id),
        export_name=config.entity,
        badge_columns=config.badge_columns,
    )

    if selected is None:
        if get_selected_id(config.entity) is not None:
            st.session_state.pop("selected_record", None)
        return

    # Re-read through the views so the panel never shows a pre-edit copy
    record = ctx.views.get(config.entity, get_selected_id(config.entity))
    if record is None:
        clear_selection(config.entity)
        return

    render_record_panel(ctx, config, record)
