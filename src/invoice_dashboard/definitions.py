"""
Dashboard data definitions.

Shapes follow the backend API contract. Amounts coming from the backend are
integer cents; the `Formatted*`/`LatestInvoice` variants carry display strings.
"""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict

InvoiceStatus = Literal["pending", "paid"]


class BackendModel(BaseModel):
    """Base for backend payloads: unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class CustomerField(BackendModel):
    id: str
    name: str


class CustomersTableType(BackendModel):
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: int
    total_paid: int


class FormattedCustomersTable(BackendModel):
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


class InvoiceForm(BackendModel):
    id: str
    customer_id: str
    amount: float
    status: InvoiceStatus


class InvoicesTable(BackendModel):
    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: str
    amount: int
    status: InvoiceStatus


class LatestInvoiceRaw(BackendModel):
    id: str
    name: str
    image_url: str
    email: str
    amount: int


class LatestInvoice(BackendModel):
    id: str
    name: str
    image_url: str
    email: str
    amount: str


class Revenue(BackendModel):
    month: str
    revenue: int


class InvoiceStatusTotals(BackendModel):
    """Sums of paid and pending invoice amounts, in cents."""

    paid: Optional[float] = None
    pending: Optional[float] = None


class CardData(BaseModel):
    number_of_customers: int = 0
    number_of_invoices: int = 0
    total_paid_invoices: str = "$0.00"
    total_pending_invoices: str = "$0.00"


class AuthorizedUser(BaseModel):
    """User returned by the credentials provider after a successful login."""

    email: str
    name: Optional[str] = None
    access_token: str
    refresh_token: Optional[str] = None


class SessionUser(BaseModel):
    email: Optional[str] = None
    name: Optional[str] = None


class Session(BaseModel):
    user: SessionUser
    expires: str
    access_token: Optional[str] = None
    error: Optional[str] = None
