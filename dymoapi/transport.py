"""Blocking JSON-over-HTTP transport for the Dymo API."""

from typing import Any, Dict, Optional

import requests

from .config import DEFAULT_TIMEOUT, SDK_HEADERS
from .exceptions import APIError, RateLimitError, TransportError
from .logging import get_logger

logger = get_logger(__name__)


class Transport:
    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def _headers(self, token: Optional[str]) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", **SDK_HEADERS}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def post(
        self, path: str, body: Dict[str, Any], token: Optional[str] = None
    ) -> Dict[str, Any]:
        """POST a JSON body and return the decoded JSON object."""
        return self._request("POST", path, token=token, json=body)

    def get(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """GET with query parameters and return the decoded JSON object."""
        return self._request("GET", path, token=None, params=params)

    def _request(
        self, method: str, path: str, token: Optional[str], **kwargs: Any
    ) -> Dict[str, Any]:
        url = self.base_url + path
        logger.debug("dymo_request", method=method, path=path)
        try:
            r = self._session.request(
                method, url, headers=self._headers(token), timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            raise TransportError(f"HTTP error: {e}") from e

        if r.status_code == 429:
            raise RateLimitError("Rate limit exceeded.", status_code=r.status_code)
        if r.status_code >= 400:
            raise APIError(
                f"API request failed with status code: {r.status_code}",
                status_code=r.status_code,
            )

        try:
            data = r.json()
        except ValueError as e:
            raise APIError(
                f"API returned a non-JSON body: {e}", status_code=r.status_code
            ) from e
        if not isinstance(data, dict):
            raise APIError(
                "API returned an unexpected JSON payload.", status_code=r.status_code
            )
        return data
