"""
Server actions behind the dashboard forms.

Invoice actions validate the submitted form, call the backend with the
session's access token and either redirect back to the invoice list or
return an ActionState describing what went wrong. A 401/403 from the backend
always ends the session.
"""

import logging
import math
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.auth.session import AuthSession
from invoice_dashboard.errors import (
    BackendError,
    ConfigurationError,
    LOGIN_PATH,
    RedirectRequired,
    SIGN_OUT_PATH,
    SignInError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

INVOICES_PATH = "/dashboard/invoices"
DELETED_INVOICE_MESSAGE = "Deleted Invoice"

FIELD_MESSAGES: Dict[str, str] = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}


class InvoiceFormData(BaseModel):
    """Validated invoice form. Amount is in dollars as typed by the user."""

    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(..., alias="customerId")
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    status: Literal["pending", "paid"]

    @field_validator("amount")
    @classmethod
    def _cents_fit(cls, value: float) -> float:
        if not math.isfinite(value * 100):
            raise ValueError("amount is too large")
        return value

    @property
    def amount_in_cents(self) -> int:
        return round(self.amount * 100)


class ActionState(BaseModel):
    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None


def validate_invoice_form(form: Mapping[str, Any]) -> Tuple[Optional[InvoiceFormData], Dict[str, List[str]]]:
    """Parse the invoice form, returning per-field messages on failure."""
    try:
        data = InvoiceFormData.model_validate({
            "customerId": form.get("customerId"),
            "amount": form.get("amount"),
            "status": form.get("status"),
        })
        return data, {}
    except ValidationError as e:
        field_errors: Dict[str, List[str]] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "form"
            message = FIELD_MESSAGES.get(field, error["msg"])
            if message not in field_errors.setdefault(field, []):
                field_errors[field].append(message)
        return None, field_errors


def _save_invoice(backend: BackendAPI, form: Mapping[str, Any], invoice_id: Optional[str] = None) -> ActionState:
    verb = "Create" if invoice_id is None else "Update"
    validated, field_errors = validate_invoice_form(form)
    if validated is None:
        return ActionState(errors=field_errors, message=f"Missing Fields. Failed to {verb} Invoice.")

    try:
        if invoice_id is None:
            backend.create_invoice(validated.customer_id, validated.amount_in_cents, validated.status)
        else:
            backend.update_invoice(invoice_id, validated.customer_id, validated.amount_in_cents, validated.status)
    except UnauthorizedError:
        raise RedirectRequired(SIGN_OUT_PATH)
    except BackendError as e:
        logger.error(f"{verb} invoice failed: {e}")
        return ActionState(message=f"Error: Failed to {verb} Invoice.")
    except (ConfigurationError, requests.RequestException, ValueError) as e:
        logger.error(f"{verb} invoice failed: {e}")
        return ActionState(message=f"Database Error: Failed to {verb} Invoice.")

    logger.info(f"{verb}d invoice {invoice_id or ''}".rstrip())
    raise RedirectRequired(INVOICES_PATH)


def create_invoice(backend: BackendAPI, form: Mapping[str, Any]) -> ActionState:
    """Create an invoice; redirects to the invoice list on success."""
    return _save_invoice(backend, form)


def update_invoice(backend: BackendAPI, invoice_id: str, form: Mapping[str, Any]) -> ActionState:
    """Update an invoice; redirects to the invoice list on success."""
    return _save_invoice(backend, form, invoice_id=invoice_id)


def delete_invoice(backend: BackendAPI, invoice_id: str) -> ActionState:
    try:
        backend.delete_invoice(invoice_id)
    except UnauthorizedError:
        raise RedirectRequired(SIGN_OUT_PATH)
    except BackendError as e:
        logger.error(f"Delete invoice {invoice_id} failed: {e}")
        return ActionState(message="Error: Failed to Delete Invoice.")
    except (ConfigurationError, requests.RequestException, ValueError) as e:
        logger.error(f"Delete invoice {invoice_id} failed: {e}")
        return ActionState(message="Database Error: Failed to Delete Invoice.")

    logger.info(f"Deleted invoice {invoice_id}")
    return ActionState(message=DELETED_INVOICE_MESSAGE)


def authenticate(auth_session: AuthSession, form: Mapping[str, Any]) -> Tuple[Optional[str], Optional[str]]:
    """
    Sign in with the login form.

    Returns:
        (session cookie value, None) on success, (None, error message) otherwise
    """
    try:
        return auth_session.sign_in(form), None
    except SignInError as e:
        if e.kind == SignInError.CREDENTIALS_SIGNIN:
            return None, "Invalid credentials."
        logger.error(f"Sign-in failed: {e}")
        return None, "Something went wrong."


def sign_up(backend: BackendAPI, form: Mapping[str, Any]) -> str:
    """Register a new user; redirects to the login page on success."""
    try:
        backend.signup(form.get("email"), form.get("password"), form.get("name"))
    except UnauthorizedError:
        raise RedirectRequired(SIGN_OUT_PATH)
    except (BackendError, ConfigurationError, requests.RequestException, ValueError) as e:
        logger.error(f"Sign-up failed: {e}")
        return "Error: Failed to sign up."
    raise RedirectRequired(LOGIN_PATH)
