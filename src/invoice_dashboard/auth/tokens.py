from datetime import datetime, timedelta, timezone
from typing import Any, Optional, cast

from jose import JWTError, jwt

ALGORITHM = "HS256"


def encode_session_token(
    claims: dict[str, Any],
    secret: str,
    max_age_seconds: int,
    now_utc: Optional[datetime] = None,
) -> str:
    """
    Sign the session claims into a JWT suitable for the session cookie.

    Args:
        claims: Session token claims (user fields and backend tokens)
        secret: Signing key
        max_age_seconds: Lifetime of the session
        now_utc: Current UTC time (for testing/determinism)
    """
    to_encode = claims.copy()
    current_time = now_utc if now_utc is not None else datetime.now(timezone.utc)
    to_encode.update({
        "iat": current_time,
        "exp": current_time + timedelta(seconds=max_age_seconds),
    })
    encoded: str = jwt.encode(to_encode, secret, algorithm=ALGORITHM)
    return encoded


def decode_session_token(token: str, secret: str) -> Optional[dict[str, Any]]:
    """Claims of a valid, unexpired session token, or None."""
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
        return cast(dict[str, Any], payload)
    except JWTError:
        return None
