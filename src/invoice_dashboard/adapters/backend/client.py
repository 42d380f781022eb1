import logging, requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from typing import Any, Optional
import certifi  # Mozilla's CA bundle for SSL certificate verification

from invoice_dashboard.errors import BackendError, UnauthorizedError
from invoice_dashboard.settings import get_api_url, get_settings

logger = logging.getLogger(__name__)

UNAUTHORIZED_STATUSES = (401, 403)


class BackendAPIClient:
    def __init__(self,
                api_url: Optional[str] = None,
                access_token: Optional[str] = None,
                authorization: Optional[str] = None,
                session: Optional[requests.Session] = None):
        """
        Initializes a requests.Session with:
            - JSON content-type/accept headers
            - Authorization header, either `Bearer <access_token>` or a
              forwarded raw header value
            - HTTPAdapter retrying connection errors on idempotent GETs
        """
        cfg = get_settings()
        self.api_url = (api_url or get_api_url()).rstrip("/")
        self.timeout = cfg.backend.timeout_seconds
        self.verify = certifi.where() if cfg.verify_ssl else False

        self.session = session or requests.Session()
        retry_strategy = Retry(
            total=cfg.backend.max_retries,
            connect=cfg.backend.max_retries,
            read=0,
            status=0,
            backoff_factor=0.5,
            allowed_methods=frozenset(["GET"]),
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        if access_token:
            self.session.headers["Authorization"] = f"Bearer {access_token}"
        elif authorization:
            self.session.headers["Authorization"] = authorization

    def _handle_response(self, resp: requests.Response) -> Any:
        """
        Check the status and parse the JSON body.

        Returns:
            Parsed JSON data, or None for an empty body

        Raises:
            UnauthorizedError: For 401/403
            BackendError: For any other non-2xx status
            ValueError: If the body is not valid JSON
        """
        if resp.status_code in UNAUTHORIZED_STATUSES:
            logger.warning(f"HTTP {resp.status_code} from {resp.url}")
            raise UnauthorizedError(status_code=resp.status_code)

        if resp.status_code < 200 or resp.status_code >= 300:
            logger.error(f"HTTP {resp.status_code} error for {resp.url}: {resp.text[:200]}")
            raise BackendError(f"Backend responded with status: {resp.status_code}", resp.status_code)

        if not resp.content:
            return None

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Invalid JSON response from {resp.url}: {resp.text[:200]}...")
            raise ValueError(f"Invalid JSON response: {e}")

    def request(self, method: str, path: str, params: Optional[dict] = None, json: Any = None) -> Any:
        url = f"{self.api_url}/{path.lstrip('/')}"
        logger.debug(f"{method} {url} params={params}")
        resp = self.session.request(
            method, url, params=params, json=json, timeout=self.timeout, verify=self.verify
        )
        return self._handle_response(resp)

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def patch(self, path: str, json: Any = None) -> Any:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def close(self) -> None:
        self.session.close()
