"""
Record types for Device Care.
Flat records mirror the canonical schema; "full" records add the nested
references resolved by core.joins. All records are immutable value objects,
edits go through dataclasses.replace().
"""

from dataclasses import dataclass, field
from typing import List, Optional


# ============================================
# REFERENCE ENTITIES
# ============================================
@dataclass(frozen=True)
class DeviceType:
    id: str
    name: str


@dataclass(frozen=True)
class DeviceLocation:
    id: str
    name: str


@dataclass(frozen=True)
class DeviceStatus:
    id: str
    name: str


@dataclass(frozen=True)
class Department:
    id: str
    name: str


@dataclass(frozen=True)
class Position:
    id: str
    name: str


@dataclass(frozen=True)
class ContractType:
    id: str
    name: str


@dataclass(frozen=True)
class Supplier:
    id: str
    name: str
    address: str = ""
    phone: str = ""
    email: str = ""
    contact_person: str = ""


# ============================================
# CORE ENTITIES (flat, foreign keys only)
# ============================================
@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    phone: str
    email: str
    position_id: str = ""
    department_id: str = ""


@dataclass(frozen=True)
class Device:
    id: str
    name: str
    value: float
    purchase_date: str
    device_type_id: str
    device_location_id: str
    device_status_id: str
    employee_id: str = ""


@dataclass(frozen=True)
class Maintenance:
    id: str
    date: str
    frequency: str
    content: str
    status: str
    device_id: str


@dataclass(frozen=True)
class Inventory:
    id: str
    check_date: str
    condition: str
    device_id: str


@dataclass(frozen=True)
class Repair:
    id: str
    repair_date: str
    notes: str
    status: str
    cost: float
    contract_type_id: str
    device_id: str
    employee_id: str
    supplier_id: str


@dataclass(frozen=True)
class InvoiceDetail:
    id: str
    name: str
    quantity: float
    unit_price: float
    total: float
    invoice_id: str


@dataclass(frozen=True)
class Invoice:
    id: str
    date: str
    content: str
    total: float
    repair_id: str


@dataclass(frozen=True)
class Warranty:
    id: str
    start_date: str
    end_date: str
    conditions: str
    device_id: str
    supplier_id: str


@dataclass(frozen=True)
class RepairHistory:
    id: str
    notes: str
    contract_type_id: str
    employee_id: str
    device_id: str


# ============================================
# FULL (DENORMALIZED) VIEWS
# ============================================
# Nested fields are None when the foreign key is empty or dangling.
@dataclass(frozen=True)
class FullEmployee(Employee):
    position: Optional[Position] = None
    department: Optional[Department] = None


@dataclass(frozen=True)
class FullDevice(Device):
    device_type: Optional[DeviceType] = None
    device_location: Optional[DeviceLocation] = None
    device_status: Optional[DeviceStatus] = None
    employee: Optional[Employee] = None


@dataclass(frozen=True)
class FullMaintenance(Maintenance):
    device: Optional[FullDevice] = None


@dataclass(frozen=True)
class FullInventory(Inventory):
    device: Optional[FullDevice] = None


@dataclass(frozen=True)
class FullRepair(Repair):
    contract_type: Optional[ContractType] = None
    device: Optional[FullDevice] = None
    employee: Optional[FullEmployee] = None
    supplier: Optional[Supplier] = None


@dataclass(frozen=True)
class FullInvoice(Invoice):
    repair: Optional[FullRepair] = None
    details: List[InvoiceDetail] = field(default_factory=list)
    paid: bool = False


@dataclass(frozen=True)
class FullWarranty(Warranty):
    device: Optional[FullDevice] = None
    supplier: Optional[Supplier] = None


@dataclass(frozen=True)
class FullRepairHistory(RepairHistory):
    contract_type: Optional[ContractType] = None
    employee: Optional[FullEmployee] = None
    device: Optional[FullDevice] = None
