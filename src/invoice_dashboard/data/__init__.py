"""
Dashboard data fetchers.

Each fetcher calls one or more backend endpoints and reshapes the result
into a view-model. Authorization failures redirect to sign-out; any other
failure is logged and an empty default is returned.
"""

from .cards import fetch_card_data
from .customers import fetch_customers, fetch_filtered_customers
from .invoices import (
    ITEMS_PER_PAGE,
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoices_pages,
    fetch_latest_invoices,
)
from .revenues import fetch_revenue

__all__ = [
    "ITEMS_PER_PAGE",
    "fetch_card_data",
    "fetch_customers",
    "fetch_filtered_customers",
    "fetch_filtered_invoices",
    "fetch_invoice_by_id",
    "fetch_invoices_pages",
    "fetch_latest_invoices",
    "fetch_revenue",
]
