"""
API Dependencies - session resolution and backend clients for FastAPI routes

Three flavours of backend client are handed to routes:
- session-bound: bearer token taken from the signed-in user's session
- forwarding: the caller's Authorization header is passed through verbatim
- public: no credentials (sign-up)
"""

import logging
from typing import Iterator, Optional

from fastapi import Depends, Header, Request, Response

from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.auth.session import AuthSession, get_access_token
from invoice_dashboard.definitions import Session
from invoice_dashboard.errors import LOGIN_PATH, RedirectRequired
from api.services.session_service import set_session_cookie

logger = logging.getLogger(__name__)


def get_auth_session() -> AuthSession:
    """
    FastAPI dependency to access the auth session manager.

    Usage in routers:
        @router.post("/example")
        def example(auth: AuthSession = Depends(get_auth_session)):
            cookie = auth.sign_in(form)
            ...
    """
    return AuthSession()


def get_session(
    request: Request,
    response: Response,
    auth: AuthSession = Depends(get_auth_session),
) -> Optional[Session]:
    """
    Resolve the current session from its cookie, running the token
    verify/refresh chain. A changed token is re-issued on the response.
    """
    session, refreshed_cookie = auth.auth(request.cookies.get(auth.cookie_name))
    if refreshed_cookie:
        logger.debug("Re-issuing refreshed session cookie")
        set_session_cookie(response, auth, refreshed_cookie)
        # a RedirectRequired raised later builds its own response
        request.state.refreshed_session = (auth, refreshed_cookie)
    return session


def require_session(session: Optional[Session] = Depends(get_session)) -> Session:
    """Dashboard routes are for signed-in users only."""
    if session is None:
        raise RedirectRequired(LOGIN_PATH)
    return session


def get_backend(session: Session = Depends(require_session)) -> Iterator[BackendAPI]:
    """Backend client authenticated with the session's access token."""
    backend = BackendAPI(access_token=get_access_token(session))
    try:
        yield backend
    finally:
        backend.close()


def get_forwarding_backend(authorization: Optional[str] = Header(None)) -> Iterator[BackendAPI]:
    """Backend client that forwards the incoming Authorization header."""
    backend = BackendAPI.forwarding(authorization)
    try:
        yield backend
    finally:
        backend.close()


def get_public_backend() -> Iterator[BackendAPI]:
    backend = BackendAPI()
    try:
        yield backend
    finally:
        backend.close()
