"""
Entity schemas: form fields, required fields and id prefixes per editable entity.
Shared by the record service (validation, coercion) and the form dialog (inputs).
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple, Type

from config.constants import (
    ENTITY_LABELS, INVENTORY_CONDITIONS, MAINTENANCE_FREQUENCIES,
    MAINTENANCE_STATUSES, REPAIR_STATUSES,
)
from core.models import (
    Device, Employee, Inventory, Invoice, InvoiceDetail, Maintenance, Repair,
    RepairHistory, Warranty,
)

@dataclass(frozen=True)
class FieldSpec:
    """
    One form input.

    kind "select" takes its choices either from a fixed ``options`` list or
    from another entity's records (``source``, e.g. "device_types").
    """
    name: str
    label: str
    kind: str = "text"
    required: bool = False
    options: Tuple[str, ...] = ()
    source: Optional[str] = None


@dataclass(frozen=True)
class EntitySchema:
    entity: str
    record_type: Type
    id_prefix: str
    fields: Tuple[FieldSpec, ...] = field(default_factory=tuple)
    # Fills fields computed from the coerced form values (e.g. line totals)
    derive: Optional[Callable[[dict], dict]] = None

    @property
    def label(self) -> str:
        return ENTITY_LABELS.get(self.entity, self.entity)

    @property
    def required_fields(self) -> List[str]:
        return [f.name for f in self.fields if f.required]

    @property
    def number_fields(self) -> List[str]:
        return [f.name for f in self.fields if f.kind == "number"]

    def get_field(self, name: str) -> Optional[FieldSpec]:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None


def _line_total(values: dict) -> dict:
    return {"total": values.get("quantity", 0) * values.get("unit_price", 0)}


# ============================================
# SCHEMAS
# ============================================
DEVICE_SCHEMA = EntitySchema("devices", Device, "D", (
    FieldSpec("id", "Mã thiết bị", required=True),
    FieldSpec("name", "Tên thiết bị", required=True),
    FieldSpec("value", "Giá trị (VND)", "number"),
    FieldSpec("purchase_date", "Ngày mua", "date"),
    FieldSpec("device_type_id", "Loại thiết bị", "select", required=True, source="device_types"),
    FieldSpec("device_location_id", "Vị trí", "select", required=True, source="device_locations"),
    FieldSpec("device_status_id", "Trạng thái", "select", required=True, source="device_statuses"),
    FieldSpec("employee_id", "Người sử dụng", "select", source="employees"),
))

EMPLOYEE_SCHEMA = EntitySchema("employees", Employee, "E", (
    FieldSpec("id", "Mã nhân viên", required=True),
    FieldSpec("name", "Họ tên", required=True),
    FieldSpec("phone", "Số điện thoại", required=True),
    FieldSpec("email", "Email", required=True),
    FieldSpec("position_id", "Chức vụ", "select", source="positions"),
    FieldSpec("department_id", "Phòng ban", "select", source="departments"),
))

MAINTENANCE_SCHEMA = EntitySchema("maintenances", Maintenance, "M", (
    FieldSpec("id", "Mã bảo trì", required=True),
    FieldSpec("date", "Ngày bảo trì", "date", required=True),
    FieldSpec("frequency", "Tần suất", "select", options=tuple(MAINTENANCE_FREQUENCIES)),
    FieldSpec("content", "Nội dung", "textarea"),
    FieldSpec("status", "Trạng thái", "select", options=tuple(MAINTENANCE_STATUSES)),
    FieldSpec("device_id", "Thiết bị", "select", required=True, source="devices"),
))

INVENTORY_SCHEMA = EntitySchema("inventories", Inventory, "I", (
    FieldSpec("id", "Mã kiểm kê", required=True),
    FieldSpec("check_date", "Ngày kiểm kê", "date", required=True),
    FieldSpec("condition", "Tình trạng", "select", required=True, options=tuple(INVENTORY_CONDITIONS)),
    FieldSpec("device_id", "Thiết bị", "select", required=True, source="devices"),
))

REPAIR_SCHEMA = EntitySchema("repairs", Repair, "R", (
    FieldSpec("id", "Mã sửa chữa", required=True),
    FieldSpec("repair_date", "Ngày sửa chữa", "date", required=True),
    FieldSpec("notes", "Ghi chú", "textarea"),
    FieldSpec("status", "Trạng thái", "select", options=tuple(REPAIR_STATUSES)),
    FieldSpec("cost", "Chi phí (VND)", "number"),
    FieldSpec("contract_type_id", "Loại hợp đồng", "select", source="contract_types"),
    FieldSpec("device_id", "Thiết bị", "select", required=True, source="devices"),
    FieldSpec("employee_id", "Nhân viên", "select", required=True, source="employees"),
    FieldSpec("supplier_id", "Nhà cung cấp", "select", source="suppliers"),
))

INVOICE_SCHEMA = EntitySchema("invoices", Invoice, "IV", (
    FieldSpec("id", "Mã hóa đơn", required=True),
    FieldSpec("date", "Ngày lập", "date", required=True),
    FieldSpec("content", "Nội dung", "textarea"),
    FieldSpec("total", "Tổng tiền (VND)", "number"),
    FieldSpec("repair_id", "Phiếu sửa chữa", "select", required=True, source="repairs"),
))

INVOICE_DETAIL_SCHEMA = EntitySchema("invoice_details", InvoiceDetail, "ID", (
    FieldSpec("id", "Mã chi tiết", required=True),
    FieldSpec("name", "Tên hạng mục", required=True),
    FieldSpec("quantity", "Số lượng", "number", required=True),
    FieldSpec("unit_price", "Đơn giá (VND)", "number", required=True),
    FieldSpec("invoice_id", "Hóa đơn", "select", required=True, source="invoices"),
), derive=_line_total)

WARRANTY_SCHEMA = EntitySchema("warranties", Warranty, "W", (
    FieldSpec("id", "Mã bảo hành", required=True),
    FieldSpec("start_date", "Ngày bắt đầu", "date", required=True),
    FieldSpec("end_date", "Ngày kết thúc", "date", required=True),
    FieldSpec("conditions", "Điều kiện bảo hành", "textarea"),
    FieldSpec("device_id", "Thiết bị", "select", required=True, source="devices"),
    FieldSpec("supplier_id", "Nhà cung cấp", "select", required=True, source="suppliers"),
))

REPAIR_HISTORY_SCHEMA = EntitySchema("repair_histories", RepairHistory, "RH", (
    FieldSpec("id", "Mã lịch sử", required=True),
    FieldSpec("notes", "Ghi chú", "textarea", required=True),
    FieldSpec("contract_type_id", "Loại hợp đồng", "select", source="contract_types"),
    FieldSpec("employee_id", "Nhân viên", "select", required=True, source="employees"),
    FieldSpec("device_id", "Thiết bị", "select", required=True, source="devices"),
))

SCHEMAS: Dict[str, EntitySchema] = {
    s.entity: s for s in (
        DEVICE_SCHEMA, EMPLOYEE_SCHEMA, MAINTENANCE_SCHEMA, INVENTORY_SCHEMA,
        REPAIR_SCHEMA, INVOICE_SCHEMA, INVOICE_DETAIL_SCHEMA, WARRANTY_SCHEMA,
        REPAIR_HISTORY_SCHEMA,
    )
}


def get_schema(entity: str) -> EntitySchema:
    return SCHEMAS[entity]
