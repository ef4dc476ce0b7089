"""Invoice Routes — form posts for invoice mutations plus the cached invoices view.

Invariants:
    - POST bodies are form-encoded; field names match the dashboard form
    - Mutations go through InvoiceHandlers only
    - GET reads through ViewCache under INVOICES_VIEW_PATH, so every successful
      mutation is visible on the next read

Design Decisions:
    - Update uses POST /{invoice_id}: HTML forms cannot send PUT
    - request.form() is a starlette FormData: a repeated key yields its last
      value through .get(), which is what the handlers read
    - Database failures on mutations map to 503, matching DatabaseError.http_status
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.api.action_responses import to_http_response
from dashboard.api.deps import get_invoice_handlers, get_view_cache
from dashboard.core.domain_types import INVOICES_VIEW_PATH, InvoiceId
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.view_cache import ViewCache
from dashboard.models.invoice import Invoice
from dashboard.schemas.invoice import InvoiceList, InvoiceSummary
from dashboard.services.handle_invoices import InvoiceHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


@router.get("", response_model=InvoiceList)
async def list_invoices(
    db: AsyncSession = Depends(get_db),
    cache: ViewCache = Depends(get_view_cache),
):
    """Invoices view, newest first. Served from cache until revalidated."""
    async def load() -> dict:
        result = await db.execute(
            select(Invoice).order_by(Invoice.date.desc(), Invoice.id),
        )
        return InvoiceList(invoices=[
            InvoiceSummary.model_validate(row)
            for row in result.scalars().all()
        ]).model_dump(mode="json")

    return await cache.get_or_load(INVOICES_VIEW_PATH, load)


@router.post("")
async def create_invoice(
    request: Request,
    handlers: InvoiceHandlers = Depends(get_invoice_handlers),
):
    form = await request.form()
    result = await handlers.create_invoice(form)
    return to_http_response(
        result, failure_status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@router.post("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    request: Request,
    handlers: InvoiceHandlers = Depends(get_invoice_handlers),
):
    form = await request.form()
    result = await handlers.update_invoice(InvoiceId(invoice_id), form)
    return to_http_response(
        result, failure_status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: str,
    handlers: InvoiceHandlers = Depends(get_invoice_handlers),
):
    result = await handlers.delete_invoice(InvoiceId(invoice_id))
    return to_http_response(
        result, failure_status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )
