"""
Proxy Service - passes backend JSON through to the caller

Maps backend failures onto plain-text error responses:
- 401/403 from the backend: same status, "Unauthorized: <reason>"
- any other backend status: 500, "Error: <description> with status: <n>"
- anything else: 500
"""

import logging
from typing import Any, Callable

import requests
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from invoice_dashboard.errors import BackendError, UnauthorizedError

logger = logging.getLogger(__name__)


def proxy_json(fetch: Callable[[], Any], description: str) -> Response:
    """
    Run `fetch` against the backend and wrap its result in a response.

    Args:
        fetch: Zero-argument callable performing the backend request
        description: What was fetched, used in error messages

    Returns:
        JSONResponse with the backend payload, or a PlainTextResponse error
    """
    try:
        data = fetch()
        return JSONResponse(data)

    except UnauthorizedError as e:
        return PlainTextResponse(f"Unauthorized: {e}", status_code=e.status_code or 401)

    except BackendError as e:
        return PlainTextResponse(
            f"Error: Failed to fetch {description} with status: {e.status_code}",
            status_code=500,
        )

    except (requests.RequestException, ValueError) as e:
        logger.error(f"Proxy request for {description} failed: {e}")
        return PlainTextResponse(f"Error: Failed to fetch {description}: {e}", status_code=500)

    except Exception as e:
        logger.error(f"Proxy request for {description} failed: {e}", exc_info=True)
        return PlainTextResponse("An unknown error occurred.", status_code=500)
