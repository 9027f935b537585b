"""Shared HTTP transport utilities for REST adapters.

This module provides a thin wrapper around ``requests.Session`` so adapter
implementations share timeout policy, transport retry behavior, and API-key
header construction.

Dependencies:
    - ``requests`` for network I/O.
    - ``storeadmin.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``storeadmin.adapters.resource_rest.ResourceRestAdapter``.
    - Used only inside adapter layer methods; use cases interact through ports.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from storeadmin.adapters.api_errors import ApiError, ApiTimeoutError

_log = logging.getLogger(__name__)


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
        retries: Number of retry attempts after the initial GET request.
            POST, PATCH and DELETE are always sent once.
    """
    request_timeout_s: int = 10
    retries: int = 0


class RetryingSession:
    """Shared requests wrapper with API-key headers and a GET retry loop.

    This class is transport-only. Callers provide endpoint URLs and decide how
    to map non-2xx responses into use-case errors.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(self, accept: str = "application/json", json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": accept}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def get(self, url: str, *, timeout: Optional[int] = None) -> requests.Response:
        return self._send("GET", url, timeout=timeout, retries=self.cfg.retries)

    def post(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        return self._send("POST", url, json_body=json_body, timeout=timeout)

    def patch(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        return self._send("PATCH", url, json_body=json_body, timeout=timeout)

    def delete(self, url: str, *, timeout: Optional[int] = None) -> requests.Response:
        return self._send("DELETE", url, timeout=timeout)

    def _send(
        self,
        method: str,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
        retries: int = 0,
    ) -> requests.Response:
        """Send one request, retrying only timeout/connectivity failures.

        Writes pass no ``retries``: a timed out write may already have been
        applied by the server.

        Raises:
            ApiTimeoutError: If all attempts fail with timeout/connection errors.
            ApiError: For any other ``requests`` failure.
        """
        context = f"{method} {url}"
        data = None if json_body is None else json.dumps(json_body)
        last_err: ApiTimeoutError | None = None
        attempts = max(0, retries) + 1
        for attempt in range(attempts):
            try:
                return self.session.request(
                    method,
                    url,
                    data=data,
                    headers=self._headers(json_body=json_body is not None),
                    timeout=timeout or self.cfg.request_timeout_s,
                )
            except (req_exc.Timeout, req_exc.ConnectionError):
                _log.debug("%s failed (attempt %d/%d)", context, attempt + 1, attempts)
                last_err = ApiTimeoutError(f"Timeout contacting {url}", context=context)
            except req_exc.RequestException as exc:
                raise ApiError(str(exc), context=context) from exc
        raise last_err


__all__ = ["HttpConfig", "RetryingSession"]
