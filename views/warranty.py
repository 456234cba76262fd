"""Warranty page."""

from datetime import date
from typing import Optional

from core.schema import WARRANTY_SCHEMA
from core.table import ColumnSpec, name_of
from services.dashboard_service import warranty_status_label
from views.context import AppContext
from views.crud_page import PageConfig, render_crud_page


def build_config(today: Optional[date] = None) -> PageConfig:
    """Status depends on the current date, so the columns are built per render."""
    columns = [
        ColumnSpec("Mã", "id", sortable=True),
        ColumnSpec("Thiết bị", lambda w: name_of(w.device)),
        ColumnSpec("Nhà cung cấp", lambda w: name_of(w.supplier)),
        ColumnSpec("Ngày bắt đầu", "start_date", sortable=True),
        ColumnSpec("Ngày kết thúc", "end_date", sortable=True),
        ColumnSpec("Điều kiện", "conditions"),
        ColumnSpec("Trạng thái", lambda w: warranty_status_label(w.end_date, today)),
    ]
    return PageConfig(
        title="Bảo hành",
        subtitle="Thời hạn và điều kiện bảo hành theo thiết bị",
        schema=WARRANTY_SCHEMA,
        columns=columns,
        search_field="conditions",
        badge_columns=("Trạng thái",),
    )


def render(ctx: AppContext) -> None:
    render_crud_page(ctx, build_config(ctx.today))
