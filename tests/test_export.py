"""
Unit tests for core.export.
"""

import pandas as pd
from openpyxl import load_workbook

from core.export import export_dataframe_to_csv, export_dataframe_to_excel, safe_sheet_title


def sample_frame():
    return pd.DataFrame([
        {"Mã": "D001", "Tên thiết bị": "Máy tính văn phòng 01", "Giá trị": "15,000,000 VND"},
        {"Mã": "D002", "Tên thiết bị": "Máy in HP L1234", "Giá trị": "5,000,000 VND"},
    ])


class TestExcelExport:
    """Test cases for the formatted workbook."""

    def test_headers_and_rows(self):
        wb = load_workbook(export_dataframe_to_excel(sample_frame(), "devices"))
        ws = wb.active
        assert ws.title == "devices"
        assert [c.value for c in ws[1]] == ["Mã", "Tên thiết bị", "Giá trị"]
        assert ws["B3"].value == "Máy in HP L1234"
        assert ws.max_row == 3

    def test_header_styling_and_frozen_row(self):
        ws = load_workbook(export_dataframe_to_excel(sample_frame())).active
        assert ws["A1"].font.bold
        assert ws["A1"].fill.fgColor.rgb.endswith("F97316")
        assert ws.freeze_panes == "A2"

    def test_sheet_title_is_sanitized(self):
        title = safe_sheet_title("invoice/IV001:details" * 3)
        assert len(title) <= 31
        assert "/" not in title and ":" not in title


class TestCsvExport:
    """Test cases for CSV download."""

    def test_utf8_bom_and_content(self):
        data = export_dataframe_to_csv(sample_frame())
        assert data.startswith(b"\xef\xbb\xbf")
        assert "Máy in HP L1234" in data.decode("utf-8-sig")
