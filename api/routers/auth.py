"""
Auth Router - sign-in, sign-up, sign-out and session introspection
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse, RedirectResponse, Response

from invoice_dashboard import actions
from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.auth.session import AuthSession
from invoice_dashboard.definitions import Session
from invoice_dashboard.errors import LOGIN_PATH
from api.schemas.auth import AuthErrorResponse, SessionResponse
from api.dependencies import get_auth_session, get_public_backend, get_session
from api.services.session_service import clear_session_cookie, safe_redirect_target, set_session_cookie

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", responses={401: {"model": AuthErrorResponse}})
def login(
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    redirect_to: Optional[str] = Form(None, alias="redirectTo"),
    auth: AuthSession = Depends(get_auth_session)
) -> Response:
    """
    Sign in with email and password.

    On success the session cookie is set and the client is redirected to
    `redirectTo` (or the dashboard).
    """
    cookie, error = actions.authenticate(auth, {"email": email, "password": password})
    if error is not None:
        return JSONResponse(AuthErrorResponse(message=error).model_dump(), status_code=401)

    response = RedirectResponse(safe_redirect_target(redirect_to), status_code=303)
    set_session_cookie(response, auth, cookie)
    return response


@router.post("/signup", responses={400: {"model": AuthErrorResponse}})
def signup(
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    name: Optional[str] = Form(None),
    backend: BackendAPI = Depends(get_public_backend)
) -> Response:
    """Register a user with the backend, then send them to the login page."""
    error = actions.sign_up(backend, {"email": email, "password": password, "name": name})
    return JSONResponse(AuthErrorResponse(message=error).model_dump(), status_code=400)


@router.api_route("/sign-out", methods=["GET", "POST"])
def sign_out(auth: AuthSession = Depends(get_auth_session)) -> Response:
    response = RedirectResponse(LOGIN_PATH, status_code=303)
    clear_session_cookie(response, auth)
    return response


@router.get("/api/auth/session", response_model=Optional[SessionResponse])
def read_session(session: Optional[Session] = Depends(get_session)) -> Optional[SessionResponse]:
    """Current session without backend tokens, or null when signed out."""
    if session is None:
        return None
    return SessionResponse(user=session.user, expires=session.expires, error=session.error)
