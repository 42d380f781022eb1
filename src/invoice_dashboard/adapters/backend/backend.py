# Endpoint catalogue of the external backend API
from invoice_dashboard.adapters.backend.client import BackendAPIClient
from typing import Any, Dict, List, Optional
import logging


logger = logging.getLogger(__name__)

class BackendAPI():
    """Wrapper class for backend API interactions"""
    def __init__(self, client: Optional[BackendAPIClient] = None, access_token: Optional[str] = None):
        self._client: BackendAPIClient = client or BackendAPIClient(access_token=access_token)

    @classmethod
    def forwarding(cls, authorization: Optional[str]) -> "BackendAPI":
        """Client that forwards the caller's Authorization header verbatim"""
        return cls(BackendAPIClient(authorization=authorization))

    # ---- customers ----

    def list_customers(self) -> List[Dict[str, Any]]:
        return self._client.get('customers') or []

    def filter_customers(self, query: str) -> List[Dict[str, Any]]:
        return self._client.get('customers/filtered', params={'query': query}) or []

    def count_customers(self) -> Any:
        return self._client.get('customers/count')

    # ---- invoices ----

    def get_invoice(self, invoice_id: str) -> Dict[str, Any]:
        return self._client.get(f'invoices/{invoice_id}')

    def filter_invoices(self, query: str, page: int, limit: int, offset: int) -> List[Dict[str, Any]]:
        params = {'page': page, 'query': query, 'limit': limit, 'offset': offset}
        return self._client.get('invoices/filtered', params=params) or []

    def latest_invoices(self) -> List[Dict[str, Any]]:
        return self._client.get('invoices/latest') or []

    def count_invoices(self) -> Any:
        return self._client.get('invoices/count')

    def invoice_status_totals(self) -> Dict[str, Any]:
        """Sums of paid and pending amounts, in cents: {"paid": .., "pending": ..}"""
        return self._client.get('invoices/statusCount') or {}

    def count_filtered_invoices(self, query: str) -> Any:
        return self._client.get('invoices/pages', params={'query': query})

    def create_invoice(self, customer_id: str, amount_cents: int, status: str) -> Any:
        body = {'customer_id': customer_id, 'amount': amount_cents, 'status': status}
        return self._client.post('invoices', json=body)

    def update_invoice(self, invoice_id: str, customer_id: str, amount_cents: int, status: str) -> Any:
        body = {'customer_id': customer_id, 'amount': amount_cents, 'status': status}
        return self._client.patch(f'invoices/{invoice_id}', json=body)

    def delete_invoice(self, invoice_id: str) -> Any:
        return self._client.delete(f'invoices/{invoice_id}')

    # ---- revenue ----

    def revenues(self) -> List[Dict[str, Any]]:
        return self._client.get('revenues') or []

    # ---- auth ----

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self._client.post('login', json={'email': email, 'password': password}) or {}

    def signup(self, email: Optional[str], password: Optional[str], name: Optional[str]) -> Any:
        return self._client.post('signup', json={'email': email, 'password': password, 'name': name})

    def verify_token(self, token: str) -> Any:
        return self._client.post('token/verify', json={'token': token})

    def refresh_token(self, refresh_token: str) -> Dict[str, Any]:
        return self._client.post('token/refresh', json={'refresh_token': refresh_token}) or {}

    def close(self) -> None:
        self._client.close()
