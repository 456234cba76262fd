"""
Unit tests for services.dashboard_service.
"""

from datetime import date

from services.dashboard_service import (
    get_dashboard_stats, get_devices_by_status, get_pending_maintenances,
    get_pending_repairs, is_warranty_expired, warranty_status_label,
)
from config.constants import DASHBOARD_CARDS, MISSING_VALUE
from core.models import Device


class TestWarrantyExpiry:
    """Test cases for warranty state."""

    def test_end_date_before_today_is_expired(self):
        assert is_warranty_expired("2025-02-28", date(2025, 3, 1))

    def test_end_date_today_is_still_valid(self):
        assert not is_warranty_expired("2025-03-01", date(2025, 3, 1))

    def test_unparseable_date_is_not_expired(self):
        assert not is_warranty_expired("", date(2025, 3, 1))

    def test_labels(self):
        assert warranty_status_label("2024-01-15", date(2025, 3, 1)) == "Hết hạn"
        assert warranty_status_label("2026-04-05", date(2025, 3, 1)) == "Còn hiệu lực"


class TestDashboardStats:
    """Test cases for dashboard counts."""

    def test_seed_counts(self, views, today):
        stats = get_dashboard_stats(views, today)
        assert stats == {
            "devices": 5,
            "maintenances": 5,
            "maintenances_pending": 2,
            "inventories": 5,
            "employees": 5,
            "repairs": 5,
            "repairs_pending": 2,
            "invoices": 3,
            "warranties": 5,
            "warranties_expired": 2,
            "repair_histories": 3,
        }

    def test_every_card_has_a_stat(self, views, today):
        stats = get_dashboard_stats(views, today)
        for stat_key, _label, _route in DASHBOARD_CARDS:
            assert stat_key in stats

    def test_counts_follow_mutations(self, store, views, today):
        store.devices.delete("D001")
        assert get_dashboard_stats(views, today)["devices"] == 4


class TestPendingLists:
    """Test cases for pending maintenance and repair lists."""

    def test_pending_maintenances(self, views):
        assert get_pending_maintenances(views) == [
            {"id": "M003", "device_name": "Máy scan Canon S5678", "date": "2023-08-10"},
            {"id": "M005", "device_name": "Máy photocopy Ricoh", "date": "2023-10-12"},
        ]

    def test_pending_repairs_use_repair_date(self, views):
        pending = get_pending_repairs(views)
        assert [p["id"] for p in pending] == ["R003", "R005"]
        assert pending[0]["date"] == "2023-09-20"

    def test_limit(self, views):
        assert len(get_pending_maintenances(views, limit=1)) == 1

    def test_missing_device_shows_placeholder(self, store, views):
        store.devices.delete("D003")
        assert get_pending_maintenances(views)[0]["device_name"] == MISSING_VALUE


class TestDevicesByStatus:
    """Test cases for the status breakdown."""

    def test_counts_in_status_order(self, views):
        counts = get_devices_by_status(views)
        assert list(counts.items()) == [("Đang sử dụng", 3), ("Bảo trì", 1), ("Sửa chữa", 1)]

    def test_unknown_status_last(self, store, views):
        store.devices.create(Device("D006", "X", 0, "", "1", "1", "99"))
        counts = get_devices_by_status(views)
        assert list(counts)[-1] == MISSING_VALUE
        assert counts[MISSING_VALUE] == 1
