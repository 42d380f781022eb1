"""
Session Service - session cookie handling for the auth routes
"""

from fastapi import Response

from invoice_dashboard.auth.session import AuthSession


def set_session_cookie(response: Response, auth: AuthSession, value: str) -> None:
    response.set_cookie(
        key=auth.cookie_name,
        value=value,
        max_age=auth.max_age,
        httponly=True,
        samesite="lax",
        secure=auth.settings.secure_cookie,
        path="/",
    )


def clear_session_cookie(response: Response, auth: AuthSession) -> None:
    response.delete_cookie(key=auth.cookie_name, path="/")


def safe_redirect_target(target: str | None, default: str = "/dashboard") -> str:
    """Only same-site absolute paths are accepted as post-login targets."""
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return default
