"""Invoice Handlers — create_invoice, update_invoice, delete_invoice.

Invariants:
    - No statement is issued unless the form validated
    - Persisted amount is always round(amount * 100)
    - create/update: revalidate + Redirect only after the statement committed
    - delete: revalidate only after the statement committed, never redirects
    - DatabaseError becomes a fixed ActionMessage; driver detail is not surfaced

Design Decisions:
    - Invoice id generated here (UUID4) on create: inserts stay portable across
      PostgreSQL and SQLite without a server-side default
    - Clock and id factory injected: tests pin the date and id without patching
    - prev_state accepted and ignored: the form framework passes the previous
      result back on every submission
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping
from uuid import uuid4

from dashboard.core.action_results import (
    ActionMessage, ActionResult, FormErrors, Redirect,
)
from dashboard.core.domain_types import INVOICES_VIEW_PATH, InvoiceId
from dashboard.core.errors import DatabaseError
from dashboard.core.form_schemas import InvoiceForm, validate_form
from dashboard.core.gateway_protocols import Revalidator, SqlGateway
from dashboard.core.invoice_rules import to_minor_units

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Create Invoice."
CREATE_FAILED_MESSAGE = "Database Error: Failed to Create Invoice."
UPDATE_FAILED_MESSAGE = "Database Error: Failed to Update Invoice"
DELETE_FAILED_MESSAGE = "Database Error: Failed to Delete Invoice"

INSERT_INVOICE = (
    "INSERT INTO invoices (id, customer_id, amount, status, date) "
    "VALUES (:id, :customer_id, :amount, :status, :date)"
)
UPDATE_INVOICE = (
    "UPDATE invoices "
    "SET customer_id = :customer_id, amount = :amount, status = :status "
    "WHERE id = :id"
)
DELETE_INVOICE = "DELETE FROM invoices WHERE id = :id"


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _invoice_form_input(form: Mapping[str, Any]) -> dict:
    return {
        "customerId": form.get("customerId"),
        "amount": form.get("amount"),
        "status": form.get("status"),
    }


class InvoiceHandlers:
    """Invoice mutation actions."""

    def __init__(
        self,
        db: SqlGateway,
        revalidator: Revalidator,
        new_id: Callable[[], str] = lambda: str(uuid4()),
        today: Callable[[], date] = _utc_today,
    ):
        self.db = db
        self.revalidator = revalidator
        self.new_id = new_id
        self.today = today

    async def create_invoice(
        self, form: Mapping[str, Any], prev_state: ActionResult = None,
    ) -> ActionResult:
        """Validate, insert a new invoice dated today, then redirect to the list."""
        validated = validate_form(
            InvoiceForm, _invoice_form_input(form), MISSING_FIELDS_MESSAGE,
        )
        if isinstance(validated, FormErrors):
            return validated

        invoice_id = InvoiceId(self.new_id())
        try:
            await self.db.execute(INSERT_INVOICE, {
                "id": invoice_id,
                "customer_id": validated.customer_id,
                "amount": to_minor_units(validated.amount),
                "status": validated.status.value,
                "date": self.today(),
            })
        except DatabaseError as e:
            logger.warning(
                f"Invoice insert failed: {e.message}",
                extra={"action": "create_invoice", "error_code": e.code},
            )
            return ActionMessage(CREATE_FAILED_MESSAGE)

        logger.info(
            "Invoice created",
            extra={"action": "create_invoice", "invoice_id": invoice_id},
        )
        await self.revalidator.revalidate(INVOICES_VIEW_PATH)
        return Redirect(INVOICES_VIEW_PATH)

    async def update_invoice(
        self,
        invoice_id: InvoiceId,
        form: Mapping[str, Any],
        prev_state: ActionResult = None,
    ) -> ActionResult:
        """Validate and overwrite customer, amount and status. Date is untouched."""
        validated = validate_form(
            InvoiceForm, _invoice_form_input(form), MISSING_FIELDS_MESSAGE,
        )
        if isinstance(validated, FormErrors):
            return validated

        try:
            await self.db.execute(UPDATE_INVOICE, {
                "id": invoice_id,
                "customer_id": validated.customer_id,
                "amount": to_minor_units(validated.amount),
                "status": validated.status.value,
            })
        except DatabaseError as e:
            logger.warning(
                f"Invoice update failed: {e.message}",
                extra={
                    "action": "update_invoice", "error_code": e.code,
                    "invoice_id": invoice_id,
                },
            )
            return ActionMessage(UPDATE_FAILED_MESSAGE)

        await self.revalidator.revalidate(INVOICES_VIEW_PATH)
        return Redirect(INVOICES_VIEW_PATH)

    async def delete_invoice(self, invoice_id: InvoiceId) -> ActionResult:
        """Delete by id. Zero matched rows still counts as success."""
        try:
            await self.db.execute(DELETE_INVOICE, {"id": invoice_id})
        except DatabaseError as e:
            logger.warning(
                f"Invoice delete failed: {e.message}",
                extra={
                    "action": "delete_invoice", "error_code": e.code,
                    "invoice_id": invoice_id,
                },
            )
            return ActionMessage(DELETE_FAILED_MESSAGE)

        await self.revalidator.revalidate(INVOICES_VIEW_PATH)
        return None
