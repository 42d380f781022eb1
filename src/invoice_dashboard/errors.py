"""
Error types shared by the backend adapter, data fetchers, actions and routes.

Two failure kinds matter to callers: an authorization failure from the
backend (401/403, ends the user's session) and everything else.
"""

from typing import Optional

SIGN_OUT_PATH = "/sign-out"
LOGIN_PATH = "/login"


class BackendError(Exception):
    """Backend answered with a non-2xx status other than 401/403."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UnauthorizedError(BackendError):
    """Backend rejected the bearer token (401 or 403)."""

    def __init__(self, message: str = "Access token is missing, invalid or expired.", status_code: int = 401):
        super().__init__(message, status_code)


class ConfigurationError(RuntimeError):
    pass


class RedirectRequired(Exception):
    """Raised to abort the current request and send the client elsewhere."""

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location


class SignInError(Exception):
    """Credentials sign-in failed. `kind` mirrors the auth error type."""

    CREDENTIALS_SIGNIN = "CredentialsSignin"
    CALLBACK_ROUTE_ERROR = "CallbackRouteError"

    def __init__(self, kind: str, message: Optional[str] = None):
        super().__init__(message or kind)
        self.kind = kind
