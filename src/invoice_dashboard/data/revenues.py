from typing import List

from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.data._errors import fetch_errors
from invoice_dashboard.definitions import Revenue


def fetch_revenue(backend: BackendAPI) -> List[Revenue]:
    """Monthly revenue for the dashboard chart."""
    data: List[Revenue] = []
    with fetch_errors("Failed to fetch revenue data"):
        data = [Revenue.model_validate(row) for row in backend.revenues()]
    return data
