"""Devices page."""

from core.schema import DEVICE_SCHEMA
from core.table import ColumnSpec, format_currency, name_of
from views.context import AppContext
from views.crud_page import PageConfig, render_crud_page

COLUMNS = [
    ColumnSpec("Mã", "id", sortable=True),
    ColumnSpec("Tên thiết bị", "name", sortable=True),
    ColumnSpec("Giá trị", lambda d: format_currency(d.value), sortable=True, sort_field="value"),
    ColumnSpec("Ngày mua", "purchase_date", sortable=True),
    ColumnSpec("Loại", lambda d: name_of(d.device_type)),
    ColumnSpec("Vị trí", lambda d: name_of(d.device_location)),
    ColumnSpec("Trạng thái", lambda d: name_of(d.device_status)),
    ColumnSpec("Người sử dụng", lambda d: name_of(d.employee)),
]

CONFIG = PageConfig(
    title="Thiết bị",
    subtitle="Danh sách thiết bị, giá trị và người sử dụng",
    schema=DEVICE_SCHEMA,
    columns=COLUMNS,
    search_field="name",
    badge_columns=("Trạng thái",),
)


def render(ctx: AppContext) -> None:
    render_crud_page(ctx, CONFIG)
