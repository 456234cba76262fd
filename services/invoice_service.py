"""
Invoice payment and line items: service layer.
Paying an invoice marks it paid in the store and appends a repair history
entry derived from the invoice's repair.
"""

import logging

from config.constants import INVOICE_STATUS_LABELS, MESSAGES
from core.errors import ActionResult
from core.ids import suggest_next_id
from core.models import RepairHistory
from core.schema import get_schema
from core.table import format_number
from services.record_service import create_record

logger = logging.getLogger("DeviceCare")


def invoice_status_label(paid: bool) -> str:
    return INVOICE_STATUS_LABELS[bool(paid)]


def build_payment_note(invoice) -> str:
    return MESSAGES["invoice_history_note"].format(
        invoice_id=invoice.id,
        content=invoice.content,
        total=format_number(invoice.total),
    )


def pay_invoice(store, invoice_id: str) -> ActionResult:
    """
    Mark an unpaid invoice paid.

    A RepairHistory is appended when the invoice's repair still exists;
    otherwise the invoice is paid without one and the message says so.
    """
    invoice = store.invoices.get(invoice_id)
    if invoice is None:
        label = get_schema("invoices").label
        return ActionResult(False, MESSAGES["not_found"].format(label=label, record_id=invoice_id))
    if store.is_invoice_paid(invoice_id):
        return ActionResult(False, MESSAGES["invoice_already_paid"].format(invoice_id=invoice_id))

    repair = store.repairs.get(invoice.repair_id) if invoice.repair_id else None
    store.mark_invoice_paid(invoice_id)

    if repair is None:
        logger.info(f"Invoice paid without repair | INVOICE={invoice_id} | REPAIR={invoice.repair_id}")
        return ActionResult(True, MESSAGES["invoice_paid_no_repair"].format(invoice_id=invoice_id))

    history = RepairHistory(
        id=suggest_next_id("RH", store.repair_histories.ids()),
        notes=build_payment_note(invoice),
        contract_type_id=repair.contract_type_id,
        employee_id=repair.employee_id,
        device_id=repair.device_id,
    )
    store.repair_histories.create(history)
    logger.info(f"Invoice paid | INVOICE={invoice_id} | HISTORY={history.id}")
    return ActionResult(True, MESSAGES["invoice_paid"].format(invoice_id=invoice_id), history)


def add_invoice_detail(store, invoice_id: str, values: dict) -> ActionResult:
    """Add a line item to an invoice; total is quantity * unit_price."""
    values = dict(values)
    values["invoice_id"] = invoice_id
    if not values.get("id"):
        values["id"] = suggest_next_id("ID", store.invoice_details.ids())
    return create_record(store, "invoice_details", values)


def details_total(details) -> float:
    return sum(d.total for d in details)
