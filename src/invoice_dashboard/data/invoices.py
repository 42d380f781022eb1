"""
Invoice fetchers for the dashboard pages.

Amounts stay in cents except `fetch_invoice_by_id`, which returns dollars
for the edit form.
"""

import math
from typing import List, Optional

from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.data._errors import fetch_errors
from invoice_dashboard.definitions import (
    InvoiceForm,
    InvoicesTable,
    LatestInvoice,
    LatestInvoiceRaw,
)
from invoice_dashboard.utils.formatting import format_currency

ITEMS_PER_PAGE = 6


def fetch_latest_invoices(backend: BackendAPI) -> List[LatestInvoice]:
    latest_invoices: List[LatestInvoice] = []
    with fetch_errors("Failed to fetch the latest invoices"):
        rows = [LatestInvoiceRaw.model_validate(row) for row in backend.latest_invoices()]
        latest_invoices = [
            LatestInvoice(**row.model_dump(exclude={"amount"}), amount=format_currency(row.amount))
            for row in rows
        ]
    return latest_invoices


def fetch_filtered_invoices(backend: BackendAPI, query: str, current_page: int) -> List[InvoicesTable]:
    """One page of invoices matching `query`. Pages start at 1."""
    data: List[InvoicesTable] = []
    offset = (current_page - 1) * ITEMS_PER_PAGE
    with fetch_errors("Failed to fetch invoices"):
        rows = backend.filter_invoices(query, page=current_page, limit=ITEMS_PER_PAGE, offset=offset)
        data = [InvoicesTable.model_validate(row) for row in rows]
    return data


def fetch_invoices_pages(backend: BackendAPI, query: str) -> int:
    """Number of pages needed to list every invoice matching `query`."""
    total_pages = 0
    with fetch_errors("Failed to fetch total number of invoices"):
        count = backend.count_filtered_invoices(query)
        total_pages = math.ceil(float(count or 0) / ITEMS_PER_PAGE)
    return total_pages


def fetch_invoice_by_id(backend: BackendAPI, invoice_id: str) -> Optional[InvoiceForm]:
    invoice: Optional[InvoiceForm] = None
    with fetch_errors("Failed to fetch invoice"):
        invoice = InvoiceForm.model_validate(backend.get_invoice(invoice_id))
        # cents -> dollars for the edit form
        invoice.amount = invoice.amount / 100
    return invoice
