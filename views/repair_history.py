"""Repair history page."""

from core.schema import REPAIR_HISTORY_SCHEMA
from core.table import ColumnSpec, name_of
from views.context import AppContext
from views.crud_page import PageConfig, render_crud_page

COLUMNS = [
    ColumnSpec("Mã", "id", sortable=True),
    ColumnSpec("Ghi chú", "notes", sortable=True),
    ColumnSpec("Thiết bị", lambda h: name_of(h.device)),
    ColumnSpec("Nhân viên", lambda h: name_of(h.employee)),
    ColumnSpec("Loại hợp đồng", lambda h: name_of(h.contract_type)),
]

CONFIG = PageConfig(
    title="Lịch sử sửa chữa",
    schema=REPAIR_HISTORY_SCHEMA,
    columns=COLUMNS,
    search_field="notes",
)


def render(ctx: AppContext) -> None:
    render_crud_page(ctx, CONFIG)
