"""
Credentials provider: exchanges an email/password pair for backend tokens.
"""

import logging
from typing import Any, Mapping, Optional

import requests
from pydantic import BaseModel, EmailStr, Field, ValidationError

from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.definitions import AuthorizedUser
from invoice_dashboard.errors import BackendError, SignInError

logger = logging.getLogger(__name__)


class Credentials(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


def authorize(backend: BackendAPI, credentials: Mapping[str, Any]) -> Optional[AuthorizedUser]:
    """
    Validate the submitted credentials and log in against the backend.

    Returns None for malformed credentials or a 4xx from the login endpoint.
    Server errors and network failures raise SignInError(CallbackRouteError).
    """
    try:
        parsed = Credentials.model_validate(
            {"email": credentials.get("email"), "password": credentials.get("password")}
        )
    except ValidationError:
        logger.info("Invalid credentials")
        return None

    try:
        data = backend.login(parsed.email, parsed.password)
    except BackendError as e:
        if e.status_code is not None and 400 <= e.status_code < 500:
            logger.info("Invalid credentials")
            return None
        raise SignInError(SignInError.CALLBACK_ROUTE_ERROR, str(e)) from e
    except (requests.RequestException, ValueError) as e:
        raise SignInError(SignInError.CALLBACK_ROUTE_ERROR, str(e)) from e

    try:
        return AuthorizedUser(
            email=data.get("email") or parsed.email,
            name=data.get("name"),
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
        )
    except (KeyError, ValidationError) as e:
        logger.error(f"Login response without an access token: {e}")
        raise SignInError(SignInError.CALLBACK_ROUTE_ERROR, "Malformed login response") from e
