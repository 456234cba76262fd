"""
Unit tests for core.store.
Tests repository mutation rules and store versioning.
"""

import pytest

from core.errors import DuplicateIdError, RecordNotFoundError, RecordValidationError
from core.models import DeviceType, Maintenance
from core.store import DataStore, InMemoryRepository


class TestInMemoryRepository:
    """Test cases for a single entity repository."""

    def setup_method(self):
        """Set up test fixtures."""
        self.repo = InMemoryRepository("device_types", [DeviceType("1", "A"), DeviceType("2", "B")])

    def test_list_returns_copy(self):
        records = self.repo.list()
        records.append(DeviceType("3", "C"))
        assert len(self.repo) == 2

    def test_create_appends_and_bumps_version(self):
        self.repo.create(DeviceType("3", "C"))
        assert self.repo.ids() == ["1", "2", "3"]
        assert self.repo.version == 1

    def test_duplicate_create_rejected_without_mutation(self):
        with pytest.raises(DuplicateIdError):
            self.repo.create(DeviceType("1", "Again"))
        assert len(self.repo) == 2
        assert self.repo.get("1").name == "A"
        assert self.repo.version == 0

    def test_blank_id_rejected(self):
        with pytest.raises(RecordValidationError):
            self.repo.create(DeviceType("", "Blank"))

    def test_update_replaces_in_place(self):
        self.repo.update(DeviceType("1", "Renamed"))
        assert self.repo.ids() == ["1", "2"]
        assert self.repo.get("1").name == "Renamed"

    def test_update_unknown_id(self):
        with pytest.raises(RecordNotFoundError):
            self.repo.update(DeviceType("9", "Nope"))

    def test_delete(self):
        assert self.repo.delete("1") is True
        assert self.repo.ids() == ["2"]
        assert self.repo.delete("1") is False
        assert self.repo.version == 1


class TestDataStore:
    """Test cases for the session store."""

    def test_from_seed_loads_every_entity(self, store):
        assert len(store.devices) == 5
        assert len(store.invoices) == 3
        assert "repair_histories" in store.entities

    def test_sessions_do_not_share_records(self):
        first, second = DataStore.from_seed(), DataStore.from_seed()
        first.maintenances.create(Maintenance("M006", "2024-01-01", "3 tháng", "x", "chưa bảo trì", "D001"))
        assert len(first.maintenances) == 6
        assert len(second.maintenances) == 5

    def test_unknown_entity(self, store):
        with pytest.raises(RecordNotFoundError):
            store.repo("printers")
        with pytest.raises(AttributeError):
            store.printers

    def test_version_changes_on_mutation_and_payment(self, store):
        before = store.version
        store.devices.delete("D001")
        after_delete = store.version
        assert after_delete != before
        store.mark_invoice_paid("IV001")
        assert store.version != after_delete
        assert store.is_invoice_paid("IV001")
        assert not store.is_invoice_paid("IV002")
