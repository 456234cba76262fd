"""
Dashboard statistics: service layer.
Counts, pending work lists and the per-status device breakdown, computed from
the full views so device names resolve the same way as on the tables.
"""

from collections import Counter
from datetime import date
from typing import Dict, List

from config.constants import (
    DASHBOARD_LIST_LIMIT, MAINTENANCE_PENDING, MISSING_VALUE, REPAIR_PENDING,
    WARRANTY_STATUS_LABELS,
)
from core.table import parse_date


def is_warranty_expired(end_date, today: date = None) -> bool:
    """Expired when end_date is strictly before today; unparseable dates are not expired."""
    end = parse_date(end_date)
    if end is None:
        return False
    return end < (today or date.today())


def warranty_status_label(end_date, today: date = None) -> str:
    return WARRANTY_STATUS_LABELS[is_warranty_expired(end_date, today)]


def get_dashboard_stats(views, today: date = None) -> Dict[str, int]:
    """Counts keyed like config.constants.DASHBOARD_CARDS."""
    maintenances = views.maintenances()
    repairs = views.repairs()
    warranties = views.warranties()
    return {
        "devices": len(views.devices()),
        "maintenances": len(maintenances),
        "maintenances_pending": sum(1 for m in maintenances if m.status == MAINTENANCE_PENDING),
        "inventories": len(views.inventories()),
        "employees": len(views.employees()),
        "repairs": len(repairs),
        "repairs_pending": sum(1 for r in repairs if r.status == REPAIR_PENDING),
        "invoices": len(views.invoices()),
        "warranties": len(warranties),
        "warranties_expired": sum(1 for w in warranties if is_warranty_expired(w.end_date, today)),
        "repair_histories": len(views.repair_histories()),
    }


def _device_name(record) -> str:
    device = getattr(record, "device", None)
    return device.name if device is not None and device.name else MISSING_VALUE


def get_pending_maintenances(views, limit: int = DASHBOARD_LIST_LIMIT) -> List[dict]:
    pending = [m for m in views.maintenances() if m.status == MAINTENANCE_PENDING]
    return [{"id": m.id, "device_name": _device_name(m), "date": m.date} for m in pending[:limit]]


def get_pending_repairs(views, limit: int = DASHBOARD_LIST_LIMIT) -> List[dict]:
    pending = [r for r in views.repairs() if r.status == REPAIR_PENDING]
    return [{"id": r.id, "device_name": _device_name(r), "date": r.repair_date} for r in pending[:limit]]


def get_devices_by_status(views) -> Dict[str, int]:
    """Device count per status name, in the order statuses are defined; unknown statuses last."""
    counts = Counter(
        d.device_status.name if d.device_status is not None else MISSING_VALUE
        for d in views.devices()
    )
    ordered = {}
    for status in views.store.device_statuses.list():
        if counts.get(status.name):
            ordered[status.name] = counts[status.name]
    if counts.get(MISSING_VALUE):
        ordered[MISSING_VALUE] = counts[MISSING_VALUE]
    return ordered
