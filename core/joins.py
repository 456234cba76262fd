"""
Denormalization joiners.

Each joiner takes flat records plus the lists they reference and returns
"full" copies with the referenced objects attached. A foreign key that is
empty or points at nothing leaves the nested field as None.

Reference lists are indexed once per call, so every join is a single pass.
Denormalizer caches the results per store version so full devices and
employees are built once and reused by every dependent join.
"""

from typing import Dict, Iterable, List, Optional, TypeVar

from core.models import (
    ContractType, Department, Device, DeviceLocation, DeviceStatus, DeviceType,
    Employee, FullDevice, FullEmployee, FullInventory, FullInvoice,
    FullMaintenance, FullRepair, FullRepairHistory, FullWarranty, Inventory,
    Invoice, InvoiceDetail, Maintenance, Position, Repair, RepairHistory,
    Supplier, Warranty,
)

T = TypeVar("T")


def index_by_id(records: Iterable[T]) -> Dict[str, T]:
    """Map id -> record. On duplicate ids the first record wins, like a linear find."""
    index: Dict[str, T] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


def lookup(index: Dict[str, T], key: Optional[str]) -> Optional[T]:
    if not key:
        return None
    return index.get(key)


def _fields(record) -> dict:
    return dict(record.__dict__)


# ============================================
# BASE JOINERS
# ============================================
def full_employees(employees: Iterable[Employee], positions: Iterable[Position],
                   departments: Iterable[Department]) -> List[FullEmployee]:
    by_position = index_by_id(positions)
    by_department = index_by_id(departments)
    return [
        FullEmployee(
            **_fields(e),
            position=lookup(by_position, e.position_id),
            department=lookup(by_department, e.department_id),
        )
        for e in employees
    ]


def full_devices(devices: Iterable[Device], device_types: Iterable[DeviceType],
                 device_locations: Iterable[DeviceLocation], device_statuses: Iterable[DeviceStatus],
                 employees: Iterable[Employee]) -> List[FullDevice]:
    by_type = index_by_id(device_types)
    by_location = index_by_id(device_locations)
    by_status = index_by_id(device_statuses)
    by_employee = index_by_id(employees)
    return [
        FullDevice(
            **_fields(d),
            device_type=lookup(by_type, d.device_type_id),
            device_location=lookup(by_location, d.device_location_id),
            device_status=lookup(by_status, d.device_status_id),
            employee=lookup(by_employee, d.employee_id),
        )
        for d in devices
    ]


# ============================================
# DEPENDENT JOINERS (take already-joined devices/employees)
# ============================================
def full_maintenances(maintenances: Iterable[Maintenance], devices: Iterable[FullDevice]) -> List[FullMaintenance]:
    by_device = index_by_id(devices)
    return [FullMaintenance(**_fields(m), device=lookup(by_device, m.device_id)) for m in maintenances]


def full_inventories(inventories: Iterable[Inventory], devices: Iterable[FullDevice]) -> List[FullInventory]:
    by_device = index_by_id(devices)
    return [FullInventory(**_fields(i), device=lookup(by_device, i.device_id)) for i in inventories]


def full_repairs(repairs: Iterable[Repair], contract_types: Iterable[ContractType],
                 devices: Iterable[FullDevice], employees: Iterable[FullEmployee],
                 suppliers: Iterable[Supplier]) -> List[FullRepair]:
    by_contract = index_by_id(contract_types)
    by_device = index_by_id(devices)
    by_employee = index_by_id(employees)
    by_supplier = index_by_id(suppliers)
    return [
        FullRepair(
            **_fields(r),
            contract_type=lookup(by_contract, r.contract_type_id),
            device=lookup(by_device, r.device_id),
            employee=lookup(by_employee, r.employee_id),
            supplier=lookup(by_supplier, r.supplier_id),
        )
        for r in repairs
    ]


def full_invoices(invoices: Iterable[Invoice], repairs: Iterable[FullRepair],
                  details: Iterable[InvoiceDetail], paid_ids: Iterable[str] = ()) -> List[FullInvoice]:
    by_repair = index_by_id(repairs)
    details_by_invoice: Dict[str, List[InvoiceDetail]] = {}
    for detail in details:
        details_by_invoice.setdefault(detail.invoice_id, []).append(detail)
    paid = set(paid_ids)
    return [
        FullInvoice(
            **_fields(inv),
            repair=lookup(by_repair, inv.repair_id),
            details=list(details_by_invoice.get(inv.id, [])),
            paid=inv.id in paid,
        )
        for inv in invoices
    ]


def full_warranties(warranties: Iterable[Warranty], devices: Iterable[FullDevice],
                    suppliers: Iterable[Supplier]) -> List[FullWarranty]:
    by_device = index_by_id(devices)
    by_supplier = index_by_id(suppliers)
    return [
        FullWarranty(
            **_fields(w),
            device=lookup(by_device, w.device_id),
            supplier=lookup(by_supplier, w.supplier_id),
        )
        for w in warranties
    ]


def full_repair_histories(histories: Iterable[RepairHistory], contract_types: Iterable[ContractType],
                          employees: Iterable[FullEmployee], devices: Iterable[FullDevice]) -> List[FullRepairHistory]:
    by_contract = index_by_id(contract_types)
    by_employee = index_by_id(employees)
    by_device = index_by_id(devices)
    return [
        FullRepairHistory(
            **_fields(h),
            contract_type=lookup(by_contract, h.contract_type_id),
            employee=lookup(by_employee, h.employee_id),
            device=lookup(by_device, h.device_id),
        )
        for h in histories
    ]


# ============================================
# VERSIONED CACHE
# ============================================
class Denormalizer:
    """
    Full views over a DataStore, recomputed only when the store version moves.

    Usage:
        views = Denormalizer(store)
        views.devices()      # list[FullDevice]
        views.get("repairs", "R001")
    """

    def __init__(self, store) -> None:
        self.store = store
        self._cache: Dict[str, list] = {}
        self._cache_version = None

    def _cached(self, name: str, build) -> list:
        version = self.store.version
        if version != self._cache_version:
            self._cache = {}
            self._cache_version = version
        if name not in self._cache:
            self._cache[name] = build()
        return self._cache[name]

    def employees(self) -> List[FullEmployee]:
        s = self.store
        return self._cached("employees", lambda: full_employees(
            s.employees.list(), s.positions.list(), s.departments.list()))

    def devices(self) -> List[FullDevice]:
        s = self.store
        return self._cached("devices", lambda: full_devices(
            s.devices.list(), s.device_types.list(), s.device_locations.list(),
            s.device_statuses.list(), s.employees.list()))

    def maintenances(self) -> List[FullMaintenance]:
        return self._cached("maintenances", lambda: full_maintenances(
            self.store.maintenances.list(), self.devices()))

    def inventories(self) -> List[FullInventory]:
        return self._cached("inventories", lambda: full_inventories(
            self.store.inventories.list(), self.devices()))

    def repairs(self) -> List[FullRepair]:
        s = self.store
        return self._cached("repairs", lambda: full_repairs(
            s.repairs.list(), s.contract_types.list(), self.devices(),
            self.employees(), s.suppliers.list()))

    def invoices(self) -> List[FullInvoice]:
        s = self.store
        return self._cached("invoices", lambda: full_invoices(
            s.invoices.list(), self.repairs(), s.invoice_details.list(), s.paid_invoice_ids))

    def warranties(self) -> List[FullWarranty]:
        s = self.store
        return self._cached("warranties", lambda: full_warranties(
            s.warranties.list(), self.devices(), s.suppliers.list()))

    def repair_histories(self) -> List[FullRepairHistory]:
        s = self.store
        return self._cached("repair_histories", lambda: full_repair_histories(
            s.repair_histories.list(), s.contract_types.list(), self.employees(), self.devices()))

    JOINED_ENTITIES = (
        "employees", "devices", "maintenances", "inventories",
        "repairs", "invoices", "warranties", "repair_histories",
    )

    def full(self, entity: str) -> list:
        """Full view list for an entity; reference entities are returned as stored."""
        if entity in self.JOINED_ENTITIES:
            return getattr(self, entity)()
        return self.store.repo(entity).list()

    def get(self, entity: str, record_id: str):
        for record in self.full(entity):
            if record.id == record_id:
                return record
        return None
