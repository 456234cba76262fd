"""Employees page."""

from core.schema import EMPLOYEE_SCHEMA
from core.table import ColumnSpec, name_of
from views.context import AppContext
from views.crud_page import PageConfig, render_crud_page

COLUMNS = [
    ColumnSpec("Mã", "id", sortable=True),
    ColumnSpec("Họ tên", "name", sortable=True),
    ColumnSpec("Số điện thoại", "phone"),
    ColumnSpec("Email", "email", sortable=True),
    ColumnSpec("Chức vụ", lambda e: name_of(e.position)),
    ColumnSpec("Phòng ban", lambda e: name_of(e.department)),
]

CONFIG = PageConfig(
    title="Nhân viên",
    schema=EMPLOYEE_SCHEMA,
    columns=COLUMNS,
    search_field="name",
)


def render(ctx: AppContext) -> None:
    render_crud_page(ctx, CONFIG)
