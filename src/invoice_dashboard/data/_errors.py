import logging
from contextlib import contextmanager
from typing import Iterator

import requests
from pydantic import ValidationError

from invoice_dashboard.errors import (
    BackendError,
    ConfigurationError,
    RedirectRequired,
    SIGN_OUT_PATH,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


@contextmanager
def fetch_errors(description: str) -> Iterator[None]:
    """
    Error policy for dashboard fetchers.

    An authorization failure ends the session with a redirect to sign-out.
    Any other backend, network or payload failure is logged and suppressed,
    so the caller falls through to its empty default.
    """
    try:
        yield
    except UnauthorizedError:
        raise RedirectRequired(SIGN_OUT_PATH)
    except (BackendError, ConfigurationError, requests.RequestException, ValidationError, ValueError, TypeError) as e:
        logger.error(f"Error: {description}: {e}")
