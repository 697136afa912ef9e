"""HTTP client for the transcript/summary/quiz backend"""

import logging
from typing import Any, Dict, NamedTuple, Optional
import requests

from ..config import config
from ..errors import NetworkError, UpstreamError

logger = logging.getLogger(__name__)


class BackendResponse(NamedTuple):
    """Raw backend answer: status code and decoded JSON body"""

    status_code: int
    payload: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def error_message(payload: Any, fallback: str) -> str:
    """Pick a human-readable message out of an error body

    The backend reports failures as `detail`; our own proxy uses `error`.
    """
    if not isinstance(payload, dict):
        return fallback
    for key in ("detail", "error"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
        if isinstance(value, dict) and value.get("message"):
            return str(value["message"])
    return fallback


class BackendClient:
    """Client for the external backend service"""

    ENDPOINTS = ("transcript", "summary", "quiz")

    FALLBACK_MESSAGES = {
        "transcript": "Failed to fetch transcript",
        "summary": "Failed to fetch summary",
        "quiz": "Failed to fetch quiz",
    }

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize backend client

        Args:
            base_url: Backend base URL. If not provided, uses config.
            timeout: Request timeout in seconds. If not provided, uses config.
        """
        self.base_url = (base_url or config.backend_url).rstrip("/")
        self.timeout = timeout or config.request_timeout_seconds

    def forward(self, endpoint: str, params: Dict[str, str]) -> BackendResponse:
        """Call a backend endpoint and return its status and body untouched

        Args:
            endpoint: One of ENDPOINTS
            params: Query parameters

        Returns:
            BackendResponse with the decoded JSON as sent (non-JSON bodies decode to an empty dict)

        Raises:
            ValueError: If endpoint is unknown
            NetworkError: If no response was received
        """
        if endpoint not in self.ENDPOINTS:
            raise ValueError(f"Unknown backend endpoint: {endpoint}")

        url = f"{self.base_url}/{endpoint}"
        logger.info(f"Fetching {endpoint} for {params}")

        try:
            response = requests.get(
                url,
                params=params,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Backend request to {url} failed: {e}")
            raise NetworkError() from e

        try:
            payload = response.json()
        except ValueError:
            logger.debug(f"Non-JSON body from {url} (status {response.status_code})")
            payload = {}

        return BackendResponse(status_code=response.status_code, payload=payload)

    def get_json(self, endpoint: str, params: Dict[str, str]) -> Dict[str, Any]:
        """Call a backend endpoint and return the JSON body of a successful response

        Raises:
            UpstreamError: If the backend returned a non-success status
            NetworkError: If no response was received
        """
        response = self.forward(endpoint, params)

        if not response.ok:
            message = error_message(response.payload, self.FALLBACK_MESSAGES[endpoint])
            logger.warning(f"Backend {endpoint} returned {response.status_code}: {message}")
            raise UpstreamError(message, status_code=response.status_code)

        if not isinstance(response.payload, dict):
            return {"data": response.payload}
        return response.payload
