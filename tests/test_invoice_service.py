"""
Unit tests for services.invoice_service.
Tests invoice payment and line items.
"""

from services.invoice_service import (
    add_invoice_detail, build_payment_note, details_total, invoice_status_label,
    pay_invoice,
)


class TestPayInvoice:
    """Test cases for paying invoices."""

    def test_pay_appends_repair_history(self, store, views):
        result = pay_invoice(store, "IV001")
        assert result.success
        assert result.message == "Đã thanh toán hóa đơn IV001"

        history = result.data
        assert history.id == "RH005"
        assert history.notes == (
            "Thanh toán hóa đơn: IV001. Nội dung: Thanh toán sửa chữa máy tính. Tổng tiền: 500,000 VND"
        )
        assert history.device_id == "D001"
        assert history.employee_id == "E001"
        assert history.contract_type_id == "3"
        assert store.repair_histories.exists("RH005")
        assert views.get("invoices", "IV001").paid is True

    def test_pay_twice_rejected(self, store):
        pay_invoice(store, "IV001")
        result = pay_invoice(store, "IV001")
        assert not result.success
        assert result.message == "Hóa đơn IV001 đã được thanh toán"
        assert len(store.repair_histories) == 4

    def test_missing_repair_pays_without_history(self, store):
        store.repairs.delete("R002")
        result = pay_invoice(store, "IV002")
        assert result.success
        assert "không tìm thấy thông tin sửa chữa" in result.message
        assert store.is_invoice_paid("IV002")
        assert len(store.repair_histories) == 3

    def test_unknown_invoice(self, store):
        result = pay_invoice(store, "IV404")
        assert not result.success
        assert not store.is_invoice_paid("IV404")

    def test_note_format(self, views):
        invoice = views.get("invoices", "IV004")
        assert build_payment_note(invoice).endswith("Tổng tiền: 1,000,000 VND")

    def test_status_labels(self):
        assert invoice_status_label(True) == "Đã thanh toán"
        assert invoice_status_label(False) == "Chưa thanh toán"


class TestInvoiceDetails:
    """Test cases for invoice line items."""

    def test_add_detail_suggests_id_and_computes_total(self, store, views):
        result = add_invoice_detail(store, "IV002", {"name": "Trục cuốn giấy", "quantity": "2", "unit_price": "100000"})
        assert result.success
        detail = store.invoice_details.get("ID005")
        assert detail.invoice_id == "IV002"
        assert detail.total == 200000

        invoice = views.get("invoices", "IV002")
        assert details_total(invoice.details) == 500000
        assert invoice.total == 300000

    def test_add_detail_requires_name(self, store):
        result = add_invoice_detail(store, "IV002", {"quantity": "1", "unit_price": "1"})
        assert not result.success
        assert len(store.invoice_details) == 4
