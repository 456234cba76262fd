"""
Unit tests for core.joins.
Tests that foreign keys resolve to nested records or None, and view caching.
"""

from core.joins import (
    Denormalizer, full_devices, full_employees, full_invoices, index_by_id, lookup,
)
from core.models import Device, DeviceType, Employee, Invoice


class TestIndexing:
    """Test cases for id indexing helpers."""

    def test_first_duplicate_wins(self):
        first, second = DeviceType("1", "A"), DeviceType("1", "B")
        assert index_by_id([first, second])["1"] is first

    def test_empty_key_is_none(self):
        index = index_by_id([DeviceType("", "blank")])
        assert lookup(index, "") is None
        assert lookup(index, None) is None


class TestBaseJoiners:
    """Test cases for employees and devices."""

    def test_every_matching_key_is_populated(self, store):
        devices = full_devices(
            store.devices.list(), store.device_types.list(), store.device_locations.list(),
            store.device_statuses.list(), store.employees.list(),
        )
        for device in devices:
            assert device.device_type is not None
            assert device.device_type.id == device.device_type_id
            assert device.device_location.id == device.device_location_id
            assert device.device_status.id == device.device_status_id
            assert device.employee.id == device.employee_id

    def test_dangling_key_is_none(self, store):
        orphan = Device("D999", "Orphan", 1, "2024-01-01", "99", "1", "1", "E999")
        [device] = full_devices([orphan], store.device_types.list(), store.device_locations.list(),
                                store.device_statuses.list(), store.employees.list())
        assert device.device_type is None
        assert device.employee is None
        assert device.device_location.name == "Phòng IT"

    def test_flat_fields_are_preserved(self, store):
        employees = full_employees(store.employees.list(), store.positions.list(), store.departments.list())
        first = employees[0]
        assert first.id == "E001"
        assert first.email == "nguyenvana@example.com"
        assert first.position.name == "Nhân viên"
        assert first.department.name == "IT"

    def test_optional_empty_reference_is_none(self, store):
        loner = Employee("E100", "No Dept", "0", "x@example.com")
        [employee] = full_employees([loner], store.positions.list(), store.departments.list())
        assert employee.position is None
        assert employee.department is None


class TestDependentJoiners:
    """Test cases for joins built on full devices and employees."""

    def test_repair_nests_full_device(self, views):
        repair = next(r for r in views.repairs() if r.id == "R001")
        assert repair.device.name == "Máy tính văn phòng 01"
        assert repair.device.device_type.name == "Máy tính"
        assert repair.employee.department.name == "IT"
        assert repair.contract_type.name == "Sửa chữa"
        assert repair.supplier.name == "Công ty TNHH ABC"

    def test_invoice_collects_its_details(self, views):
        invoice = next(i for i in views.invoices() if i.id == "IV004")
        assert sorted(d.id for d in invoice.details) == ["ID002", "ID003"]
        assert invoice.repair.id == "R004"
        assert invoice.paid is False

    def test_invoice_paid_flag(self, views):
        invoices = full_invoices(
            [Invoice("IV9", "2024-01-01", "x", 0, "R404")], views.repairs(), [], paid_ids=["IV9"],
        )
        assert invoices[0].paid is True
        assert invoices[0].repair is None
        assert invoices[0].details == []

    def test_warranty_and_history_references(self, views):
        warranty = next(w for w in views.warranties() if w.id == "W002")
        assert warranty.device.id == "D002"
        assert warranty.supplier.name == "Công ty CP XYZ"
        history = next(h for h in views.repair_histories() if h.id == "RH004")
        assert history.contract_type.name == "Thay thế"
        assert history.employee.name == "Phạm Thị D"


class TestDenormalizer:
    """Test cases for the cached view layer."""

    def test_cache_reused_until_store_changes(self, store):
        views = Denormalizer(store)
        first = views.devices()
        assert views.devices() is first
        store.device_types.update(DeviceType("1", "Laptop"))
        refreshed = views.devices()
        assert refreshed is not first
        assert refreshed[0].device_type.name == "Laptop"

    def test_deleted_reference_becomes_none(self, store, views):
        store.employees.delete("E001")
        device = views.get("devices", "D001")
        assert device.employee is None

    def test_full_falls_back_to_reference_lists(self, views):
        assert [s.id for s in views.full("suppliers")] == ["1", "2", "3"]

    def test_get_unknown_id(self, views):
        assert views.get("devices", "D404") is None
