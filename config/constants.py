"""
Centralized configuration constants for Device Care.
Pure data, no runtime dependencies.
"""

# ============================================
# DISPLAY PLACEHOLDERS
# ============================================
MISSING_VALUE = "N/A"
NO_DATA_TEXT = "Không có dữ liệu"

# ============================================
# PERFORMANCE & PAGINATION CONFIGURATION
# ============================================
PAGINATION_CONFIG = {
    "default_page_size": 25,
    "page_size_options": [10, 25, 50, 100],
}

# ============================================
# STATUS VOCABULARY
# ============================================
MAINTENANCE_STATUSES = ["đã bảo trì", "chưa bảo trì"]
MAINTENANCE_PENDING = "chưa bảo trì"

REPAIR_STATUSES = ["đã sửa chữa", "chưa sửa chữa"]
REPAIR_PENDING = "chưa sửa chữa"

INVENTORY_CONDITIONS = ["tốt", "hỏng", "bảo trì", "sửa chữa"]

MAINTENANCE_FREQUENCIES = ["1 tháng", "3 tháng", "6 tháng", "12 tháng"]

INVOICE_STATUS_LABELS = {
    True: "Đã thanh toán",
    False: "Chưa thanh toán",
}

WARRANTY_STATUS_LABELS = {
    True: "Hết hạn",
    False: "Còn hiệu lực",
}

# Badge color per status value; anything unlisted renders grey
BADGE_COLORS = {
    "green": "#22c55e",
    "amber": "#f59e0b",
    "red": "#ef4444",
    "grey": "#64748b",
}

STATUS_BADGE_TONES = {
    "đã bảo trì": "green",
    "đã sửa chữa": "green",
    "tốt": "green",
    "Đã thanh toán": "green",
    "Còn hiệu lực": "green",
    "chưa bảo trì": "amber",
    "chưa sửa chữa": "amber",
    "bảo trì": "amber",
    "Chưa thanh toán": "amber",
    "hỏng": "red",
    "sửa chữa": "red",
    "Hết hạn": "red",
}

# ============================================
# ENTITY LABELS (used in messages: "Thêm <label> mới thành công")
# ============================================
ENTITY_LABELS = {
    "devices": "thiết bị",
    "employees": "nhân viên",
    "maintenances": "bảo trì",
    "inventories": "kiểm kê",
    "repairs": "sửa chữa",
    "invoices": "hóa đơn",
    "invoice_details": "chi tiết hóa đơn",
    "warranties": "bảo hành",
    "repair_histories": "lịch sử sửa chữa",
}

MESSAGES = {
    "error_title": "Lỗi",
    "success_title": "Thành công",
    "required": "Vui lòng điền đầy đủ thông tin {label}",
    "duplicate": "Mã {label} đã tồn tại",
    "not_numeric": "{field} phải là một số",
    "not_found": "Không tìm thấy {label} {record_id}",
    "created": "Thêm {label} mới thành công",
    "updated": "Cập nhật thông tin {label} thành công",
    "deleted": "Xóa {label} thành công",
    "invoice_paid": "Đã thanh toán hóa đơn {invoice_id}",
    "invoice_already_paid": "Hóa đơn {invoice_id} đã được thanh toán",
    "invoice_paid_no_repair": "Đã thanh toán hóa đơn {invoice_id} nhưng không tìm thấy thông tin sửa chữa",
    "invoice_history_note": "Thanh toán hóa đơn: {invoice_id}. Nội dung: {content}. Tổng tiền: {total} VND",
}

FORM_LABELS = {
    "save": "Lưu",
    "cancel": "Hủy",
    "busy": "Đang xử lý...",
    "add": "Thêm mới",
    "edit": "Chỉnh sửa",
    "delete": "Xóa",
    "confirm_delete_title": "Xác nhận xóa",
    "confirm_delete_body": "Bạn có chắc chắn muốn xóa {label} {record_id}? Thao tác này không thể hoàn tác.",
    "confirm": "Xác nhận",
    "search": "Tìm kiếm...",
    "select_placeholder": "-- Chọn --",
}

# ============================================
# NAVIGATION
# ============================================
DEFAULT_PAGE = "dashboard"
PAGE_QUERY_PARAM = "page"

# Sidebar menu; "key" is the route slug mirrored in ?page=
MENU_GROUPS = {
    "TỔNG QUAN": [
        {"name": "Tổng quan", "icon": "▣", "key": "dashboard"},
    ],
    "THIẾT BỊ": [
        {"name": "Thiết bị", "icon": "▢", "key": "devices"},
        {"name": "Bảo trì", "icon": "⚙", "key": "maintenance"},
        {"name": "Kiểm kê", "icon": "☰", "key": "inventory"},
        {"name": "Bảo hành", "icon": "◈", "key": "warranty"},
    ],
    "SỬA CHỮA": [
        {"name": "Sửa chữa", "icon": "⟲", "key": "repairs"},
        {"name": "Hóa đơn", "icon": "₫", "key": "invoices"},
        {"name": "Lịch sử sửa chữa", "icon": "◷", "key": "repair-history"},
    ],
    "NHÂN SỰ": [
        {"name": "Nhân viên", "icon": "◉", "key": "employees"},
    ],
}

# ============================================
# DASHBOARD
# ============================================
DASHBOARD_LIST_LIMIT = 5

# (stat key, label, route)
DASHBOARD_CARDS = [
    ("devices", "Thiết bị", "devices"),
    ("maintenances", "Bảo trì", "maintenance"),
    ("maintenances_pending", "Chưa bảo trì", "maintenance"),
    ("inventories", "Kiểm kê", "inventory"),
    ("employees", "Nhân viên", "employees"),
    ("repairs", "Sửa chữa", "repairs"),
    ("repairs_pending", "Chưa sửa chữa", "repairs"),
    ("invoices", "Hóa đơn", "invoices"),
    ("warranties", "Bảo hành", "warranty"),
    ("warranties_expired", "Bảo hành hết hạn", "warranty"),
    ("repair_histories", "Lịch sử sửa chữa", "repair-history"),
]

STATUS_CHART_COLORS = ["#22c55e", "#f59e0b", "#ef4444", "#3b82f6", "#64748b"]
