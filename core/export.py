"""
Table export utilities.
CSV and formatted Excel downloads of whatever rows a table currently shows.
"""

from io import BytesIO

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

# Styling constants
HEADER_FILL = PatternFill(start_color="F97316", end_color="F97316", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF", size=11)
HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center", wrap_text=True)
CELL_BORDER = Border(
    left=Side(style='thin', color='D1D5DB'),
    right=Side(style='thin', color='D1D5DB'),
    top=Side(style='thin', color='D1D5DB'),
    bottom=Side(style='thin', color='D1D5DB')
)
MAX_COLUMN_WIDTH = 50

# Excel sheet titles: max 31 chars, no []:*?/\
_INVALID_SHEET_CHARS = set('[]:*?/\\')


def safe_sheet_title(title: str) -> str:
    cleaned = "".join("_" if ch in _INVALID_SHEET_CHARS else ch for ch in (title or "Sheet"))
    return cleaned[:31] or "Sheet"


def export_dataframe_to_excel(df: pd.DataFrame, sheet_name: str = "Data") -> BytesIO:
    """
    Write a DataFrame to a formatted workbook.

    Args:
        df: Rows to export, columns in display order
        sheet_name: Worksheet title

    Returns:
        BytesIO buffer positioned at the start of the .xlsx file
    """
    wb = Workbook()
    ws = wb.active
    ws.title = safe_sheet_title(sheet_name)

    columns = [str(c) for c in df.columns]

    # Header row
    for col_idx, col_name in enumerate(columns, 1):
        cell = ws.cell(row=1, column=col_idx, value=col_name)
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT
        cell.alignment = HEADER_ALIGNMENT
        cell.border = CELL_BORDER

    # Data rows
    for row_idx, row_data in enumerate(df.itertuples(index=False, name=None), 2):
        for col_idx, value in enumerate(row_data, 1):
            if value is not None and pd.isna(value):
                value = None
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            cell.border = CELL_BORDER
            cell.alignment = Alignment(vertical="center")

    # Auto-adjust column widths
    for col_idx, col_name in enumerate(columns, 1):
        max_length = len(col_name)
        for row_idx in range(2, len(df) + 2):
            cell_value = ws.cell(row=row_idx, column=col_idx).value
            if cell_value is not None:
                max_length = max(max_length, len(str(cell_value)))
        column_letter = ws.cell(row=1, column=col_idx).column_letter
        ws.column_dimensions[column_letter].width = min(max_length + 2, MAX_COLUMN_WIDTH)

    # Freeze header row
    ws.freeze_panes = "A2"

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output


def export_dataframe_to_csv(df: pd.DataFrame) -> bytes:
    """UTF-8 CSV with BOM so spreadsheet apps keep Vietnamese characters intact."""
    return df.to_csv(index=False).encode("utf-8-sig")
