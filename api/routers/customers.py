"""
Customers Router - pass-through of customer listings to the backend
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from invoice_dashboard.adapters.backend import BackendAPI
from api.dependencies import get_forwarding_backend
from api.services.proxy_service import proxy_json

router = APIRouter()


@router.get("/customers")
def list_customers(backend: BackendAPI = Depends(get_forwarding_backend)) -> Response:
    """All customers, as returned by the backend."""
    return proxy_json(backend.list_customers, "customers")
