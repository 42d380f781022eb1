"""
Invoices Router - pass-through of invoice queries to the backend

The caller's Authorization header is forwarded unchanged.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from invoice_dashboard.adapters.backend import BackendAPI
from api.dependencies import get_forwarding_backend
from api.services.proxy_service import proxy_json

router = APIRouter()


@router.get("/invoices/latest")
def latest_invoices(backend: BackendAPI = Depends(get_forwarding_backend)) -> Response:
    return proxy_json(backend.latest_invoices, "the latest invoices")


@router.get("/invoices/filtered")
def filtered_invoices(
    page: str = Query("1", description="Current page"),
    query: str = Query("", description="Search query"),
    limit: str = Query("6", description="Page size"),
    offset: str = Query("0", description="Offset of the first invoice"),
    backend: BackendAPI = Depends(get_forwarding_backend)
) -> Response:
    """Invoices matching `query`; paging parameters are forwarded as given."""
    return proxy_json(
        lambda: backend.filter_invoices(query, page=page, limit=limit, offset=offset),
        "the filtered invoices",
    )


@router.get("/invoices/{invoice_id}")
def get_invoice(invoice_id: str, backend: BackendAPI = Depends(get_forwarding_backend)) -> Response:
    return proxy_json(lambda: backend.get_invoice(invoice_id), f"invoice with id {invoice_id}")
