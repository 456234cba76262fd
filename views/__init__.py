"""
Pages package for Device Care.
Each module exposes a render(ctx: AppContext) function.
"""

from views.dashboard import render as render_dashboard
from views.devices import render as render_devices
from views.maintenance import render as render_maintenance
from views.inventory import render as render_inventory
from views.warranty import render as render_warranty
from views.repairs import render as render_repairs
from views.invoices import render as render_invoices
from views.repair_history import render as render_repair_history
from views.employees import render as render_employees
from views.not_found import render as render_not_found

# Map route slugs (the ?page= value) to their render functions
PAGE_REGISTRY = {
    "dashboard": render_dashboard,
    "devices": render_devices,
    "maintenance": render_maintenance,
    "inventory": render_inventory,
    "warranty": render_warranty,
    "repairs": render_repairs,
    "invoices": render_invoices,
    "repair-history": render_repair_history,
    "employees": render_employees,
}
