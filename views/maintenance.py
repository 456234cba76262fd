"""Maintenance page."""

from core.schema import MAINTENANCE_SCHEMA
from core.table import ColumnSpec, name_of
from views.context import AppContext
from views.crud_page import PageConfig, render_crud_page

COLUMNS = [
    ColumnSpec("Mã", "id", sortable=True),
    ColumnSpec("Thiết bị", lambda m: name_of(m.device)),
    ColumnSpec("Ngày bảo trì", "date", sortable=True),
    ColumnSpec("Tần suất", "frequency"),
    ColumnSpec("Nội dung", "content"),
    ColumnSpec("Trạng thái", "status", sortable=True),
]

CONFIG = PageConfig(
    title="Bảo trì",
    subtitle="Lịch bảo trì định kỳ của thiết bị",
    schema=MAINTENANCE_SCHEMA,
    columns=COLUMNS,
    search_field="content",
    badge_columns=("Trạng thái",),
)


def render(ctx: AppContext) -> None:
    render_crud_page(ctx, CONFIG)
