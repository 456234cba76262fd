"""
Unit tests for the pure parts of components.form_dialog.
"""

from components.form_dialog import MODE_CREATE, MODE_EDIT, initial_values, submit_form
from core.schema import DEVICE_SCHEMA, MAINTENANCE_SCHEMA


class TestInitialValues:
    """Test cases for form prefill."""

    def test_create_uses_defaults(self):
        values = initial_values(DEVICE_SCHEMA, defaults={"id": "D006"})
        assert values["id"] == "D006"
        assert values["name"] == ""
        assert set(values) == {f.name for f in DEVICE_SCHEMA.fields}

    def test_edit_prefills_from_full_record(self, views):
        values = initial_values(DEVICE_SCHEMA, record=views.get("devices", "D003"))
        assert values["name"] == "Máy scan Canon S5678"
        assert values["device_status_id"] == "2"
        assert "device_status" not in values


class TestSubmitForm:
    """Test cases for form submission."""

    def test_create_mode(self, store):
        values = initial_values(MAINTENANCE_SCHEMA, defaults={"id": "M006"})
        values.update({"date": "2024-05-01", "device_id": "D002", "status": "chưa bảo trì"})
        result = submit_form(store, MAINTENANCE_SCHEMA, values, MODE_CREATE)
        assert result.success
        assert store.maintenances.get("M006").device_id == "D002"

    def test_failed_create_mutates_nothing(self, store):
        values = initial_values(MAINTENANCE_SCHEMA, defaults={"id": "M006"})
        result = submit_form(store, MAINTENANCE_SCHEMA, values, MODE_CREATE)
        assert not result.success
        assert result.message == "Vui lòng điền đầy đủ thông tin bảo trì"
        assert len(store.maintenances) == 5

    def test_edit_mode(self, store, views):
        values = initial_values(MAINTENANCE_SCHEMA, record=views.get("maintenances", "M003"))
        values["status"] = "đã bảo trì"
        result = submit_form(store, MAINTENANCE_SCHEMA, values, MODE_EDIT, "M003")
        assert result.success
        assert store.maintenances.get("M003").status == "đã bảo trì"
