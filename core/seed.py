"""
Seed dataset loaded into every new session.
Pure data; DataStore.from_seed() copies these lists into fresh repositories.
"""

from core.models import (
    ContractType, Department, Device, DeviceLocation, DeviceStatus, DeviceType,
    Employee, Inventory, Invoice, InvoiceDetail, Maintenance, Position, Repair,
    RepairHistory, Supplier, Warranty,
)

# ============================================
# REFERENCE DATA
# ============================================
DEVICE_TYPES = [
    DeviceType("1", "Máy tính"),
    DeviceType("2", "Máy in"),
    DeviceType("3", "Máy scan"),
    DeviceType("4", "Máy photocopy"),
    DeviceType("5", "Điều hòa"),
]

DEVICE_LOCATIONS = [
    DeviceLocation("1", "Phòng IT"),
    DeviceLocation("2", "Phòng kế toán"),
    DeviceLocation("3", "Phòng nhân sự"),
    DeviceLocation("4", "Phòng giám đốc"),
    DeviceLocation("5", "Phòng họp"),
]

DEVICE_STATUSES = [
    DeviceStatus("1", "Đang sử dụng"),
    DeviceStatus("2", "Bảo trì"),
    DeviceStatus("3", "Sửa chữa"),
    DeviceStatus("4", "Không sử dụng"),
    DeviceStatus("5", "Thanh lý"),
]

DEPARTMENTS = [
    Department("1", "IT"),
    Department("2", "Kế toán"),
    Department("3", "Nhân sự"),
    Department("4", "Kinh doanh"),
    Department("5", "Ban giám đốc"),
]

POSITIONS = [
    Position("1", "Trưởng phòng"),
    Position("2", "Phó phòng"),
    Position("3", "Nhân viên"),
    Position("4", "Giám đốc"),
    Position("5", "Phó giám đốc"),
]

SUPPLIERS = [
    Supplier("1", "Công ty TNHH ABC", address="Hà Nội", phone="0987654321",
             email="abc@example.com", contact_person="Nguyễn Văn A"),
    Supplier("2", "Công ty CP XYZ", address="Hồ Chí Minh", phone="0123456789",
             email="xyz@example.com", contact_person="Trần Thị B"),
    Supplier("3", "Công ty TNHH DEF", address="Đà Nẵng", phone="0369852147",
             email="def@example.com", contact_person="Lê Văn C"),
]

CONTRACT_TYPES = [
    ContractType("1", "Bảo hành"),
    ContractType("2", "Bảo trì"),
    ContractType("3", "Sửa chữa"),
    ContractType("4", "Thay thế"),
]

# ============================================
# CORE DATA
# ============================================
EMPLOYEES = [
    Employee("E001", "Nguyễn Văn A", "0987654321", "nguyenvana@example.com", position_id="3", department_id="1"),
    Employee("E002", "Trần Thị B", "0123456789", "tranthib@example.com", position_id="3", department_id="2"),
    Employee("E003", "Lê Văn C", "0369852147", "levanc@example.com", position_id="1", department_id="3"),
    Employee("E004", "Phạm Thị D", "0258741369", "phamthid@example.com", position_id="4", department_id="5"),
    Employee("E005", "Hoàng Văn E", "0741852963", "hoangvane@example.com", position_id="2", department_id="4"),
]

DEVICES = [
    Device("D001", "Máy tính văn phòng 01", 15000000, "2023-01-15", "1", "1", "1", "E001"),
    Device("D002", "Máy in HP L1234", 5000000, "2023-02-20", "2", "2", "1", "E002"),
    Device("D003", "Máy scan Canon S5678", 3000000, "2023-03-10", "3", "3", "2", "E003"),
    Device("D004", "Máy điều hòa Panasonic", 12000000, "2023-04-05", "5", "4", "1", "E004"),
    Device("D005", "Máy photocopy Ricoh", 35000000, "2023-05-12", "4", "5", "3", "E005"),
]

MAINTENANCES = [
    Maintenance("M001", "2023-06-15", "3 tháng", "Bảo trì định kỳ máy tính", "đã bảo trì", "D001"),
    Maintenance("M002", "2023-07-20", "6 tháng", "Bảo trì định kỳ máy in", "đã bảo trì", "D002"),
    Maintenance("M003", "2023-08-10", "12 tháng", "Bảo trì hệ thống scan", "chưa bảo trì", "D003"),
    Maintenance("M004", "2023-09-05", "6 tháng", "Vệ sinh điều hòa", "đã bảo trì", "D004"),
    Maintenance("M005", "2023-10-12", "3 tháng", "Bảo trì máy photocopy", "chưa bảo trì", "D005"),
]

INVENTORIES = [
    Inventory("I001", "2023-06-30", "tốt", "D001"),
    Inventory("I002", "2023-07-31", "tốt", "D002"),
    Inventory("I003", "2023-08-31", "bảo trì", "D003"),
    Inventory("I004", "2023-09-30", "tốt", "D004"),
    Inventory("I005", "2023-10-31", "sửa chữa", "D005"),
]

REPAIRS = [
    Repair("R001", "2023-07-10", "Thay bàn phím máy tính", "đã sửa chữa", 500000, "3", "D001", "E001", "1"),
    Repair("R002", "2023-08-15", "Sửa lỗi kẹt giấy máy in", "đã sửa chữa", 300000, "3", "D002", "E002", "2"),
    Repair("R003", "2023-09-20", "Thay nguồn máy scan", "chưa sửa chữa", 800000, "3", "D003", "E003", "3"),
    Repair("R004", "2023-10-25", "Nạp gas điều hòa", "đã sửa chữa", 1000000, "4", "D004", "E004", "1"),
    Repair("R005", "2023-11-30", "Thay trống máy photocopy", "chưa sửa chữa", 2500000, "4", "D005", "E005", "2"),
]

INVOICE_DETAILS = [
    InvoiceDetail("ID001", "Bàn phím Logitech", 1, 500000, 500000, "IV001"),
    InvoiceDetail("ID002", "Công nạp gas điều hòa", 1, 500000, 500000, "IV004"),
    InvoiceDetail("ID003", "Gas điều hòa R32", 1, 500000, 500000, "IV004"),
    InvoiceDetail("ID004", "Công sửa chữa", 1, 300000, 300000, "IV002"),
]

INVOICES = [
    Invoice("IV001", "2023-07-11", "Thanh toán sửa chữa máy tính", 500000, "R001"),
    Invoice("IV002", "2023-08-16", "Thanh toán sửa chữa máy in", 300000, "R002"),
    Invoice("IV004", "2023-10-26", "Thanh toán nạp gas điều hòa", 1000000, "R004"),
]

WARRANTIES = [
    Warranty("W001", "2023-01-15", "2024-01-15", "Bảo hành 12 tháng từ ngày mua", "D001", "1"),
    Warranty("W002", "2023-02-20", "2025-02-20", "Bảo hành 24 tháng từ ngày mua", "D002", "2"),
    Warranty("W003", "2023-03-10", "2025-03-10", "Bảo hành 24 tháng từ ngày mua", "D003", "3"),
    Warranty("W004", "2023-04-05", "2026-04-05", "Bảo hành 36 tháng từ ngày mua", "D004", "1"),
    Warranty("W005", "2023-05-12", "2025-05-12", "Bảo hành 24 tháng từ ngày mua", "D005", "2"),
]

REPAIR_HISTORIES = [
    RepairHistory("RH001", "Thay bàn phím máy tính", "3", "E001", "D001"),
    RepairHistory("RH002", "Sửa lỗi kẹt giấy máy in", "3", "E002", "D002"),
    RepairHistory("RH004", "Nạp gas điều hòa", "4", "E004", "D004"),
]

# Entity key -> seed list, consumed by DataStore.from_seed()
SEED_DATA = {
    "device_types": DEVICE_TYPES,
    "device_locations": DEVICE_LOCATIONS,
    "device_statuses": DEVICE_STATUSES,
    "departments": DEPARTMENTS,
    "positions": POSITIONS,
    "suppliers": SUPPLIERS,
    "contract_types": CONTRACT_TYPES,
    "employees": EMPLOYEES,
    "devices": DEVICES,
    "maintenances": MAINTENANCES,
    "inventories": INVENTORIES,
    "repairs": REPAIRS,
    "invoices": INVOICES,
    "invoice_details": INVOICE_DETAILS,
    "warranties": WARRANTIES,
    "repair_histories": REPAIR_HISTORIES,
}
