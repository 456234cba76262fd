"""
Modal add/edit form for any schema-described entity.

The dialog is opened by calling open_form_dialog() in the run where the
triggering button was clicked. Interactions inside it rerun only the dialog;
a successful save queues a toast and reruns the whole app, which closes it.
A failed save leaves it open with an error toast.
"""

from datetime import date
from typing import Callable, Optional

import streamlit as st

from config.constants import FORM_LABELS
from config.settings import SIMULATED_LATENCY_SECONDS
from components.feedback import notify, queue_toast
from components.loading import busy, is_loading
from core.data import safe_rerun
from core.errors import ActionResult
from core.schema import EntitySchema, FieldSpec
from core.table import parse_date
from services.record_service import create_record, record_to_values, update_record

MODE_CREATE = "create"
MODE_EDIT = "edit"


# ============================================
# SUBMISSION
# ============================================
def submit_form(store, schema: EntitySchema, values: dict, mode: str = MODE_CREATE,
                record_id: str = None) -> ActionResult:
    """Validate and apply a form submission; nothing is mutated when validation fails."""
    if mode == MODE_EDIT:
        return update_record(store, schema.entity, record_id, values)
    return create_record(store, schema.entity, values)


def initial_values(schema: EntitySchema, record=None, defaults: dict = None) -> dict:
    """Form values prefilled from a record (edit) or defaults (create)."""
    values = {f.name: "" for f in schema.fields}
    if defaults:
        values.update(defaults)
    if record is not None:
        flat = record_to_values(record)
        values.update({name: flat[name] for name in values if name in flat})
    return values


# ============================================
# INPUTS
# ============================================
def _select_options(spec: FieldSpec, store) -> tuple:
    """(values, labels) for a select; the leading "" is the unselected choice."""
    if spec.source:
        records = store.repo(spec.source).list()
        values = [""] + [r.id for r in records]
        labels = {"": FORM_LABELS["select_placeholder"]}
        labels.update({r.id: f"{r.name} ({r.id})" for r in records})
    else:
        values = [""] + list(spec.options)
        labels = {"": FORM_LABELS["select_placeholder"]}
        labels.update({o: o for o in spec.options})
    return values, labels


def render_field(spec: FieldSpec, value, store, key: str, disabled: bool = False):
    label = f"{spec.label} *" if spec.required else spec.label

    if spec.kind == "select":
        options, labels = _select_options(spec, store)
        if value and value not in options:
            # Dangling reference: keep it selectable so an edit does not silently drop it
            options.append(value)
            labels[value] = f"{value} (N/A)"
        index = options.index(value) if value in options else 0
        return st.selectbox(label, options, index=index, format_func=lambda v: labels.get(v, v),
                            key=key, disabled=disabled)

    if spec.kind == "date":
        picked = st.date_input(label, value=parse_date(value), key=key, disabled=disabled, format="YYYY-MM-DD")
        return picked.isoformat() if isinstance(picked, date) else ""

    if spec.kind == "textarea":
        return st.text_area(label, value=str(value or ""), key=key, disabled=disabled)

    if spec.kind == "number":
        text = "" if value in ("", None) else str(value)
        return st.text_input(label, value=text, key=key, disabled=disabled, placeholder="0")

    return st.text_input(label, value=str(value or ""), key=key, disabled=disabled)


# ============================================
# DIALOG
# ============================================
def _render_form_body(form_key: str, schema: EntitySchema, store, mode: str, values: dict,
                      record_id: Optional[str], on_submit: Optional[Callable[[dict], ActionResult]]):
    loading_key = f"form_{form_key}"

    with st.form(form_key, border=False):
        submitted_values = {}
        left, right = st.columns(2)
        for i, spec in enumerate(schema.fields):
            with left if i % 2 == 0 else right:
                submitted_values[spec.name] = render_field(
                    spec, values.get(spec.name), store,
                    key=f"{form_key}_{spec.name}",
                    disabled=(mode == MODE_EDIT and spec.name == "id"),
                )

        col1, col2 = st.columns(2)
        with col1:
            cancelled = st.form_submit_button(FORM_LABELS["cancel"], width="stretch")
        with col2:
            saved = st.form_submit_button(
                FORM_LABELS["save"], type="primary", width="stretch",
                disabled=is_loading(loading_key),
            )

    if cancelled:
        safe_rerun()

    if saved:
        # Simulated round-trip applies to edits only; creates are immediate
        delay = SIMULATED_LATENCY_SECONDS if mode == MODE_EDIT else 0
        with busy(loading_key, delay=delay):
            if on_submit is not None:
                result = on_submit(submitted_values)
            else:
                result = submit_form(store, schema, submitted_values, mode, record_id)

        if result.success:
            queue_toast(result.message, True)
            safe_rerun()
        else:
            notify(result.message, False)


def open_form_dialog(title: str, schema: EntitySchema, store, mode: str = MODE_CREATE,
                     record=None, defaults: dict = None, on_submit=None, key: str = None):
    """
    Open the add/edit dialog.

    Args:
        title: Dialog title
        schema: Entity schema driving the inputs and validation
        store: DataStore to validate against and mutate
        mode: MODE_CREATE or MODE_EDIT
        record: Record being edited (flat or full view)
        defaults: Prefill for create mode (e.g. a suggested id)
        on_submit: Optional override returning an ActionResult
        key: Form key; defaults to "<entity>_<mode>_<id>"
    """
    values = initial_values(schema, record, defaults)
    record_id = record.id if record is not None else None
    form_key = key or f"{schema.entity}_{mode}_{record_id or 'new'}"

    dialog = st.dialog(title, width="large")(_render_form_body)
    dialog(form_key, schema, store, mode, values, record_id, on_submit)
