"""Repairs page."""

from core.schema import REPAIR_SCHEMA
from core.table import ColumnSpec, format_currency, name_of
from views.context import AppContext
from views.crud_page import PageConfig, render_crud_page

COLUMNS = [
    ColumnSpec("Mã", "id", sortable=True),
    ColumnSpec("Thiết bị", lambda r: name_of(r.device)),
    ColumnSpec("Ngày sửa chữa", "repair_date", sortable=True),
    ColumnSpec("Ghi chú", "notes"),
    ColumnSpec("Chi phí", lambda r: format_currency(r.cost), sortable=True, sort_field="cost"),
    ColumnSpec("Loại hợp đồng", lambda r: name_of(r.contract_type)),
    ColumnSpec("Nhân viên", lambda r: name_of(r.employee)),
    ColumnSpec("Nhà cung cấp", lambda r: name_of(r.supplier)),
    ColumnSpec("Trạng thái", "status", sortable=True),
]

CONFIG = PageConfig(
    title="Sửa chữa",
    subtitle="Phiếu sửa chữa thiết bị",
    schema=REPAIR_SCHEMA,
    columns=COLUMNS,
    search_field="notes",
    badge_columns=("Trạng thái",),
)


def render(ctx: AppContext) -> None:
    render_crud_page(ctx, CONFIG)
