from typing import List

from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.data._errors import fetch_errors
from invoice_dashboard.definitions import (
    CustomerField,
    CustomersTableType,
    FormattedCustomersTable,
)
from invoice_dashboard.utils.formatting import format_currency


def fetch_customers(backend: BackendAPI) -> List[CustomerField]:
    """All customers as (id, name) options, ordered by the backend."""
    data: List[CustomerField] = []
    with fetch_errors("Failed to fetch all customers"):
        data = [CustomerField.model_validate(row) for row in backend.list_customers()]
    return data


def fetch_filtered_customers(backend: BackendAPI, query: str) -> List[FormattedCustomersTable]:
    """
    Customers matching `query`, with their pending and paid totals
    formatted as currency.
    """
    customers: List[FormattedCustomersTable] = []
    with fetch_errors("Failed to fetch customer table"):
        rows = [CustomersTableType.model_validate(row) for row in backend.filter_customers(query)]
        customers = [
            FormattedCustomersTable(
                **row.model_dump(exclude={"total_pending", "total_paid"}),
                total_pending=format_currency(row.total_pending),
                total_paid=format_currency(row.total_paid),
            )
            for row in rows
        ]
    return customers
