"""Inventory check page."""

from core.schema import INVENTORY_SCHEMA
from core.table import ColumnSpec, name_of
from views.context import AppContext
from views.crud_page import PageConfig, render_crud_page

COLUMNS = [
    ColumnSpec("Mã", "id", sortable=True),
    ColumnSpec("Thiết bị", lambda i: name_of(i.device)),
    ColumnSpec("Ngày kiểm kê", "check_date", sortable=True),
    ColumnSpec("Tình trạng", "condition", sortable=True),
]

CONFIG = PageConfig(
    title="Kiểm kê",
    schema=INVENTORY_SCHEMA,
    columns=COLUMNS,
    search_field="id",
    badge_columns=("Tình trạng",),
)


def render(ctx: AppContext) -> None:
    render_crud_page(ctx, CONFIG)
