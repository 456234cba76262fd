"""Invoices page: invoice table plus line items and payment for the selected invoice."""

import streamlit as st

from config.constants import MISSING_VALUE
from config.settings import SIMULATED_LATENCY_SECONDS
from components.data_table import render_data_table
from components.empty_states import render_empty_state
from components.feedback import queue_toast, render_action_button, render_status_badge
from components.form_dialog import MODE_CREATE, open_form_dialog
from components.loading import busy
from core.data import safe_rerun
from core.ids import suggest_next_id
from core.schema import INVOICE_DETAIL_SCHEMA, INVOICE_SCHEMA
from core.table import ColumnSpec, format_currency, format_number, name_of
from services.invoice_service import (
    add_invoice_detail, details_total, invoice_status_label, pay_invoice,
)
from views.context import AppContext
from views.crud_page import PageConfig, render_crud_page


def _repair_label(invoice) -> str:
    repair = invoice.repair
    if repair is None:
        return MISSING_VALUE
    return f"{repair.id} - {name_of(repair.device)}"


COLUMNS = [
    ColumnSpec("Mã", "id", sortable=True),
    ColumnSpec("Ngày lập", "date", sortable=True),
    ColumnSpec("Nội dung", "content"),
    ColumnSpec("Tổng tiền", lambda i: format_currency(i.total), sortable=True, sort_field="total"),
    ColumnSpec("Phiếu sửa chữa", _repair_label),
    ColumnSpec("Trạng thái", lambda i: invoice_status_label(i.paid)),
]

DETAIL_COLUMNS = [
    ColumnSpec("Mã", "id", sortable=True),
    ColumnSpec("Hạng mục", "name", sortable=True),
    ColumnSpec("Số lượng", lambda d: format_number(d.quantity), sortable=True, sort_field="quantity"),
    ColumnSpec("Đơn giá", lambda d: format_currency(d.unit_price), sortable=True, sort_field="unit_price"),
    ColumnSpec("Thành tiền", lambda d: format_currency(d.total), sortable=True, sort_field="total"),
]


def render_payment(ctx: AppContext, invoice) -> None:
    loading_key = f"pay_{invoice.id}"
    col1, col2 = st.columns([1, 3])
    with col1:
        clicked = render_action_button(
            "Thanh toán",
            key=f"pay_invoice_{invoice.id}",
            loading_key=loading_key,
            disabled=invoice.paid,
        )
    with col2:
        st.markdown(render_status_badge(invoice_status_label(invoice.paid)), unsafe_allow_html=True)

    if clicked:
        with busy(loading_key, delay=SIMULATED_LATENCY_SECONDS):
            result = pay_invoice(ctx.store, invoice.id)
        queue_toast(result.message, result.success)
        safe_rerun()


def render_invoice_details(ctx: AppContext, invoice) -> None:
    st.markdown('<div class="section-title">Chi tiết hóa đơn</div>', unsafe_allow_html=True)
    render_payment(ctx, invoice)

    if not invoice.details:
        render_empty_state("no_invoice_details", show_action=False)
    else:
        render_data_table(
            key=f"invoice_details_{invoice.id}",
            rows=invoice.details,
            columns=DETAIL_COLUMNS,
            export_name=f"invoice_{invoice.id}_details",
        )
        st.markdown(
            f"**Tổng chi tiết:** {format_currency(details_total(invoice.details))}"
            f" &nbsp;·&nbsp; **Tổng hóa đơn:** {format_currency(invoice.total)}",
            unsafe_allow_html=True,
        )

    if st.button("＋ Thêm hạng mục", key=f"add_detail_{invoice.id}"):
        store = ctx.store
        open_form_dialog(
            f"Thêm chi tiết cho hóa đơn {invoice.id}",
            INVOICE_DETAIL_SCHEMA,
            store,
            mode=MODE_CREATE,
            defaults={
                "id": suggest_next_id(INVOICE_DETAIL_SCHEMA.id_prefix, store.invoice_details.ids()),
                "invoice_id": invoice.id,
            },
            on_submit=lambda values: add_invoice_detail(store, invoice.id, values),
            key=f"invoice_detail_{invoice.id}",
        )


CONFIG = PageConfig(
    title="Hóa đơn",
    subtitle="Hóa đơn sửa chữa và thanh toán",
    schema=INVOICE_SCHEMA,
    columns=COLUMNS,
    search_field="content",
    badge_columns=("Trạng thái",),
    detail_renderer=render_invoice_details,
)


def render(ctx: AppContext) -> None:
    render_crud_page(ctx, CONFIG)
