"""
Invoice Actions Router - form posts that create, update and delete invoices

Successful create/update redirect to the invoice list (303). Failures answer
400 with the action state so the form can show the messages.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Form, Response

from invoice_dashboard import actions
from invoice_dashboard.actions import ActionState
from invoice_dashboard.adapters.backend import BackendAPI
from api.dependencies import get_backend

router = APIRouter()


def _invoice_form(
    customer_id: Optional[str] = Form(None, alias="customerId"),
    amount: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
) -> dict:
    return {"customerId": customer_id, "amount": amount, "status": status}


@router.post("/invoices", response_model=ActionState)
def create_invoice(
    response: Response,
    form: dict = Depends(_invoice_form),
    backend: BackendAPI = Depends(get_backend)
) -> ActionState:
    state = actions.create_invoice(backend, form)
    # a successful action redirects, so a returned state is a failure
    response.status_code = 400
    return state


@router.post("/invoices/{invoice_id}", response_model=ActionState)
def update_invoice(
    invoice_id: str,
    response: Response,
    form: dict = Depends(_invoice_form),
    backend: BackendAPI = Depends(get_backend)
) -> ActionState:
    state = actions.update_invoice(backend, invoice_id, form)
    response.status_code = 400
    return state


@router.post("/invoices/{invoice_id}/delete", response_model=ActionState)
def delete_invoice(
    invoice_id: str,
    response: Response,
    backend: BackendAPI = Depends(get_backend)
) -> ActionState:
    state = actions.delete_invoice(backend, invoice_id)
    if state.message != actions.DELETED_INVOICE_MESSAGE:
        response.status_code = 400
    return state
