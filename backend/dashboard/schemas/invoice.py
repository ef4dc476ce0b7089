"""Invoice Schemas — public shape of the invoices listing."""

import datetime

from pydantic import BaseModel, ConfigDict

from dashboard.core.domain_types import InvoiceStatus


class InvoiceSummary(BaseModel):
    """One row of the invoices view. amount stays in minor units."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: datetime.date


class InvoiceList(BaseModel):
    invoices: list[InvoiceSummary]
