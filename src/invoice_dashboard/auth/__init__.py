"""Credentials authentication and session handling."""

from .credentials import authorize
from .session import AuthSession, get_access_token

__all__ = ["AuthSession", "authorize", "get_access_token"]
