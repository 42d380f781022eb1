"""
Dashboard Router - view-models for the signed-in dashboard pages
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query

from invoice_dashboard import data
from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.utils.formatting import generate_pagination
from api.schemas.dashboard import (
    CustomersPage,
    DashboardOverview,
    InvoiceCreatePage,
    InvoiceEditPage,
    InvoicesPage,
)
from api.dependencies import get_backend

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=DashboardOverview)
def overview(backend: BackendAPI = Depends(get_backend)) -> DashboardOverview:
    """Revenue chart, latest invoices and summary cards."""
    return DashboardOverview(
        revenue=data.fetch_revenue(backend),
        latest_invoices=data.fetch_latest_invoices(backend),
        cards=data.fetch_card_data(backend),
    )


@router.get("/invoices", response_model=InvoicesPage)
def invoices(
    query: str = Query("", description="Search invoices"),
    page: int = Query(1, ge=1, description="Page number"),
    backend: BackendAPI = Depends(get_backend)
) -> InvoicesPage:
    total_pages = data.fetch_invoices_pages(backend, query)
    return InvoicesPage(
        query=query,
        current_page=page,
        total_pages=total_pages,
        pagination=generate_pagination(page, total_pages),
        invoices=data.fetch_filtered_invoices(backend, query, page),
    )


@router.get("/invoices/create", response_model=InvoiceCreatePage)
def create_invoice_page(backend: BackendAPI = Depends(get_backend)) -> InvoiceCreatePage:
    return InvoiceCreatePage(customers=data.fetch_customers(backend))


@router.get("/invoices/{invoice_id}/edit", response_model=InvoiceEditPage)
def edit_invoice_page(invoice_id: str, backend: BackendAPI = Depends(get_backend)) -> InvoiceEditPage:
    invoice = data.fetch_invoice_by_id(backend, invoice_id)
    if invoice is None:
        logger.info(f"Invoice {invoice_id} not found")
        raise HTTPException(status_code=404, detail="Invoice not found")
    return InvoiceEditPage(invoice=invoice, customers=data.fetch_customers(backend))


@router.get("/customers", response_model=CustomersPage)
def customers(
    query: str = Query("", description="Search customers"),
    backend: BackendAPI = Depends(get_backend)
) -> CustomersPage:
    return CustomersPage(query=query, customers=data.fetch_filtered_customers(backend, query))
