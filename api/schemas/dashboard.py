"""
Dashboard API Schemas - Response models for the dashboard pages

Each model bundles the view-models one dashboard page needs.
"""

from typing import List, Union
from pydantic import BaseModel, Field

from invoice_dashboard.definitions import (
    CardData,
    CustomerField,
    FormattedCustomersTable,
    InvoiceForm,
    InvoicesTable,
    LatestInvoice,
    Revenue,
)


class DashboardOverview(BaseModel):
    """Overview page: chart, latest invoices and summary cards"""

    revenue: List[Revenue] = Field(..., description="Monthly revenue")
    latest_invoices: List[LatestInvoice] = Field(..., description="Most recent invoices")
    cards: CardData = Field(..., description="Summary card values")


class InvoicesPage(BaseModel):
    """One page of the invoice table"""

    query: str = Field(..., description="Search query")
    current_page: int = Field(..., ge=1, description="Current page (1-based)")
    total_pages: int = Field(..., ge=0, description="Pages matching the query")
    pagination: List[Union[int, str]] = Field(..., description="Page numbers to display, '...' for gaps")
    invoices: List[InvoicesTable] = Field(..., description="Invoices on this page")


class InvoiceCreatePage(BaseModel):
    customers: List[CustomerField] = Field(..., description="Customer options")


class InvoiceEditPage(BaseModel):
    invoice: InvoiceForm = Field(..., description="Invoice being edited, amount in dollars")
    customers: List[CustomerField] = Field(..., description="Customer options")


class CustomersPage(BaseModel):
    query: str = Field(..., description="Search query")
    customers: List[FormattedCustomersTable] = Field(..., description="Matching customers")
