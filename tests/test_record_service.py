"""
Unit tests for services.record_service.
Tests validation, coercion and create/update/delete results.
"""

import pytest

from services.record_service import (
    create_record, delete_record, parse_number, record_to_values, update_record,
    validate_values,
)
from core.errors import RecordValidationError
from core.schema import DEVICE_SCHEMA


def new_device(**overrides):
    values = {
        "id": "D006",
        "name": "Laptop Dell Latitude",
        "value": "20,000,000",
        "purchase_date": "2024-01-10",
        "device_type_id": "1",
        "device_location_id": "1",
        "device_status_id": "1",
        "employee_id": "",
    }
    values.update(overrides)
    return values


class TestParseNumber:
    """Test cases for numeric form input."""

    def test_integral_values_become_int(self):
        assert parse_number("15000000") == 15000000
        assert parse_number("1,500") == 1500
        assert parse_number(2.0) == 2

    def test_decimal_values(self):
        assert parse_number(" 1.5 ") == 1.5

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf", True])
    def test_rejects_non_numbers(self, raw):
        with pytest.raises(ValueError):
            parse_number(raw)


class TestValidateValues:
    """Test cases for schema validation."""

    def test_missing_required_field(self):
        with pytest.raises(RecordValidationError) as exc_info:
            validate_values(DEVICE_SCHEMA, new_device(name="  "))
        assert exc_info.value.message == "Vui lòng điền đầy đủ thông tin thiết bị"
        assert exc_info.value.fields == ["name"]

    def test_blank_number_defaults_to_zero(self):
        cleaned = validate_values(DEVICE_SCHEMA, new_device(value=""))
        assert cleaned["value"] == 0

    def test_strings_are_stripped(self):
        cleaned = validate_values(DEVICE_SCHEMA, new_device(name="  Laptop  "))
        assert cleaned["name"] == "Laptop"


class TestCreateRecord:
    """Test cases for creating records."""

    def test_valid_create_is_retrievable_with_joined_references(self, store, views):
        result = create_record(store, "devices", new_device())
        assert result.success
        assert result.message == "Thêm thiết bị mới thành công"
        assert len(store.devices) == 6

        device = views.get("devices", "D006")
        assert device.value == 20000000
        assert device.device_type.name == "Máy tính"
        assert device.employee is None

    def test_duplicate_id_rejected(self, store):
        result = create_record(store, "devices", new_device(id="D001"))
        assert not result.success
        assert result.message == "Mã thiết bị đã tồn tại"
        assert len(store.devices) == 5
        assert store.devices.get("D001").name == "Máy tính văn phòng 01"

    def test_missing_required_rejected(self, store):
        result = create_record(store, "devices", new_device(device_type_id=""))
        assert not result.success
        assert result.data == {"fields": ["device_type_id"]}
        assert len(store.devices) == 5

    def test_non_numeric_rejected(self, store):
        result = create_record(store, "devices", new_device(value="hai mươi triệu"))
        assert not result.success
        assert result.message == "Giá trị (VND) phải là một số"
        assert len(store.devices) == 5

    def test_line_total_is_derived(self, store):
        result = create_record(store, "invoice_details", {
            "id": "ID005", "name": "Ốc vít", "quantity": "4", "unit_price": "2500", "invoice_id": "IV001",
        })
        assert result.success
        assert store.invoice_details.get("ID005").total == 10000


class TestUpdateRecord:
    """Test cases for editing records."""

    def test_update_replaces_record(self, store, views):
        values = record_to_values(views.get("devices", "D002"))
        values["name"] = "Máy in HP M404"
        result = update_record(store, "devices", "D002", values)
        assert result.success
        assert result.message == "Cập nhật thông tin thiết bị thành công"
        assert views.get("devices", "D002").name == "Máy in HP M404"
        assert store.devices.ids() == ["D001", "D002", "D003", "D004", "D005"]

    def test_id_is_not_editable(self, store):
        values = record_to_values(store.devices.get("D002"))
        values["id"] = "D777"
        update_record(store, "devices", "D002", values)
        assert store.devices.exists("D002")
        assert not store.devices.exists("D777")

    def test_unknown_record(self, store):
        result = update_record(store, "devices", "D404", new_device(id="D404"))
        assert not result.success
        assert result.message == "Không tìm thấy thiết bị D404"

    def test_invalid_update_leaves_record_untouched(self, store):
        values = record_to_values(store.devices.get("D002"))
        values["name"] = ""
        result = update_record(store, "devices", "D002", values)
        assert not result.success
        assert store.devices.get("D002").name == "Máy in HP L1234"


class TestDeleteRecord:
    """Test cases for deleting records."""

    def test_delete_does_not_cascade(self, store, views):
        result = delete_record(store, "devices", "D001")
        assert result.success
        assert result.message == "Xóa thiết bị thành công"
        maintenance = views.get("maintenances", "M001")
        assert maintenance.device_id == "D001"
        assert maintenance.device is None

    def test_delete_unknown(self, store):
        result = delete_record(store, "devices", "D404")
        assert not result.success
        assert len(store.devices) == 5


class TestRecordToValues:
    """Test cases for flattening full views."""

    def test_nested_fields_are_dropped(self, views):
        values = record_to_values(views.get("devices", "D001"))
        assert values["device_type_id"] == "1"
        assert "device_type" not in values
        assert "employee" not in values
