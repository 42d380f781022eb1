"""
Auth API Schemas - sign-in and sign-up responses
"""

from typing import Optional
from pydantic import BaseModel, Field

from invoice_dashboard.definitions import SessionUser


class AuthErrorResponse(BaseModel):
    """Returned when sign-in or sign-up does not redirect"""

    message: str = Field(..., description="Error shown next to the form")


class SessionResponse(BaseModel):
    """Public view of the session (backend tokens are not exposed)"""

    user: SessionUser
    expires: str
    error: Optional[str] = Field(None, description="Set when the access token could not be refreshed")
