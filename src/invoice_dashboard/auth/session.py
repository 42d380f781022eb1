"""
Session management on top of the credentials provider.

The session lives in a signed cookie holding the backend access and refresh
tokens. Every time the session is read, the JWT callback checks the access
token with the backend (`/token/verify`) and, if it is no longer valid,
exchanges the refresh token for a new one (`/token/refresh`). When both fail
the access token is dropped and the session carries
`error="RefreshAccessTokenError"`, which sends the user to sign-out on the
next data request.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import requests

from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.auth.credentials import authorize
from invoice_dashboard.auth.tokens import decode_session_token, encode_session_token
from invoice_dashboard.definitions import AuthorizedUser, Session, SessionUser
from invoice_dashboard.errors import (
    BackendError,
    ConfigurationError,
    RedirectRequired,
    SIGN_OUT_PATH,
    SignInError,
)
from invoice_dashboard.settings import AuthSettings, get_settings

logger = logging.getLogger(__name__)

REFRESH_ACCESS_TOKEN_ERROR = "RefreshAccessTokenError"
_REGISTERED_CLAIMS = ("iat", "exp")


class AuthSession:
    """Credentials sign-in plus the jwt/session callback chain."""

    def __init__(
        self,
        settings: Optional[AuthSettings] = None,
        backend_factory: Optional[Callable[[], BackendAPI]] = None,
    ):
        self.settings = settings or get_settings().auth
        self._backend_factory = backend_factory or BackendAPI

    @property
    def cookie_name(self) -> str:
        return self.settings.cookie_name

    @property
    def max_age(self) -> int:
        return self.settings.session_max_age_seconds

    def _secret(self) -> str:
        return self.settings.secret.get_secret_value()

    # ---- callbacks ----

    def jwt_callback(self, token: Dict[str, Any], user: Optional[AuthorizedUser] = None) -> Dict[str, Any]:
        """
        Build or refresh the session token.

        On sign-in `user` is given and its tokens are copied onto the token.
        Otherwise the stored access token is verified and refreshed if needed.
        """
        if user:
            token.update({
                "email": user.email,
                "name": user.name,
                "access_token": user.access_token,
                "refresh_token": user.refresh_token,
            })
            token.pop("error", None)
            return token

        if not token.get("access_token"):
            return token
        return self._refresh_access_token(token)

    def session_callback(self, session: Session, token: Mapping[str, Any]) -> Session:
        session.access_token = token.get("access_token")
        session.error = token.get("error")
        return session

    def _refresh_access_token(self, token: Dict[str, Any]) -> Dict[str, Any]:
        backend = self._backend_factory()
        try:
            try:
                backend.verify_token(token["access_token"])
                return token
            except (BackendError, requests.RequestException, ValueError) as e:
                logger.info(f"Access token rejected by backend, refreshing: {e}")

            refresh_token = token.get("refresh_token")
            if refresh_token:
                try:
                    data = backend.refresh_token(refresh_token)
                    if data.get("access_token"):
                        token["access_token"] = data["access_token"]
                        token["refresh_token"] = data.get("refresh_token") or refresh_token
                        token.pop("error", None)
                        logger.info("Access token refreshed")
                        return token
                    logger.warning("Refresh response without an access token")
                except (BackendError, requests.RequestException, ValueError) as e:
                    logger.warning(f"Failed to refresh access token: {e}")
        finally:
            backend.close()

        token.pop("access_token", None)
        token["error"] = REFRESH_ACCESS_TOKEN_ERROR
        return token

    # ---- public API ----

    def sign_in(self, credentials: Mapping[str, Any]) -> str:
        """
        Authenticate with email/password and return the session cookie value.

        Raises:
            SignInError: CredentialsSignin for rejected credentials,
                CallbackRouteError for anything else
        """
        try:
            backend = self._backend_factory()
        except ConfigurationError as e:
            raise SignInError(SignInError.CALLBACK_ROUTE_ERROR, str(e)) from e

        try:
            user = authorize(backend, credentials)
        finally:
            backend.close()
        if user is None:
            raise SignInError(SignInError.CREDENTIALS_SIGNIN)

        token = self.jwt_callback({}, user)
        logger.info(f"Signed in {user.email}")
        return encode_session_token(token, self._secret(), self.max_age)

    def auth(self, cookie: Optional[str]) -> Tuple[Optional[Session], Optional[str]]:
        """
        Resolve the session from its cookie value.

        Returns the session (None when absent, tampered with or expired) and
        a new cookie value when the token changed and must be re-issued.
        """
        if not cookie:
            return None, None
        claims = decode_session_token(cookie, self._secret())
        if claims is None:
            return None, None

        expires_at = claims.get("exp")
        token = {k: v for k, v in claims.items() if k not in _REGISTERED_CLAIMS}
        before = (token.get("access_token"), token.get("refresh_token"), token.get("error"))

        token = self.jwt_callback(token)

        new_cookie = None
        if (token.get("access_token"), token.get("refresh_token"), token.get("error")) != before:
            now = datetime.now(timezone.utc)
            new_cookie = encode_session_token(token, self._secret(), self.max_age, now_utc=now)
            expires_at = now.timestamp() + self.max_age

        session = Session(
            user=SessionUser(email=token.get("email"), name=token.get("name")),
            expires=datetime.fromtimestamp(expires_at, tz=timezone.utc).isoformat(),
        )
        return self.session_callback(session, token), new_cookie


def get_access_token(session: Optional[Session]) -> str:
    """The backend access token of the session, or a redirect to sign-out."""
    token = session.access_token if session else None
    if not token:
        raise RedirectRequired(SIGN_OUT_PATH)
    return token
