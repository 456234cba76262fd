"""
In-memory record store.
Each entity type lives in its own repository holding a flat list of records.
Every mutation replaces the whole list and bumps a version counter, which
core.joins uses to know when derived views are stale.
"""

import logging
from typing import Dict, Generic, Iterable, List, Optional, Set, TypeVar

from core.errors import DuplicateIdError, RecordNotFoundError, RecordValidationError

logger = logging.getLogger("DeviceCare")

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """
    List-backed repository keyed by the record's ``id`` attribute.

    - list(): current records in insertion order (a copy)
    - create(): rejects duplicate ids before mutating
    - update(): replace-by-id, unknown ids are an error
    - delete(): filter-by-id, no cascade
    """

    def __init__(self, entity: str, records: Iterable[T] = ()) -> None:
        self.entity = entity
        self._records: List[T] = list(records)
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> List[T]:
        return list(self._records)

    def ids(self) -> List[str]:
        return [r.id for r in self._records]

    def get(self, record_id: str) -> Optional[T]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def exists(self, record_id: str) -> bool:
        return self.get(record_id) is not None

    def create(self, record: T) -> T:
        if not record.id:
            raise RecordValidationError("Record id is required", self.entity, fields=["id"])
        if self.exists(record.id):
            raise DuplicateIdError(f"{self.entity} {record.id} already exists", self.entity, record.id)
        self._records = [*self._records, record]
        self._version += 1
        return record

    def update(self, record: T) -> T:
        if not self.exists(record.id):
            raise RecordNotFoundError(f"{self.entity} {record.id} not found", self.entity, record.id)
        self._records = [record if r.id == record.id else r for r in self._records]
        self._version += 1
        return record

    def delete(self, record_id: str) -> bool:
        """Remove the record; returns False when nothing matched."""
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) == len(self._records):
            return False
        self._records = remaining
        self._version += 1
        return True


class DataStore:
    """All repositories for one session, keyed by entity name (see core.seed.SEED_DATA)."""

    def __init__(self, repositories: Dict[str, InMemoryRepository]) -> None:
        self._repositories = repositories
        # Paid state belongs to the session, not to the Invoice schema
        self.paid_invoice_ids: Set[str] = set()
        self._paid_version = 0

    @classmethod
    def from_seed(cls, seed: Dict[str, list] = None) -> "DataStore":
        if seed is None:
            from core.seed import SEED_DATA
            seed = SEED_DATA
        return cls({name: InMemoryRepository(name, records) for name, records in seed.items()})

    def repo(self, entity: str) -> InMemoryRepository:
        try:
            return self._repositories[entity]
        except KeyError:
            raise RecordNotFoundError(f"Unknown entity: {entity}", entity) from None

    def __getattr__(self, name: str) -> InMemoryRepository:
        # store.devices, store.repairs, ...
        repositories = self.__dict__.get("_repositories", {})
        if name in repositories:
            return repositories[name]
        raise AttributeError(name)

    @property
    def entities(self) -> List[str]:
        return list(self._repositories)

    @property
    def version(self) -> tuple:
        """Combined version; changes whenever any repository or paid state changes."""
        return tuple(r.version for r in self._repositories.values()) + (self._paid_version,)

    def mark_invoice_paid(self, invoice_id: str) -> None:
        self.paid_invoice_ids = self.paid_invoice_ids | {invoice_id}
        self._paid_version += 1

    def is_invoice_paid(self, invoice_id: str) -> bool:
        return invoice_id in self.paid_invoice_ids
