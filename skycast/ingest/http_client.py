"""JSON-over-HTTP transport with status mapping and retry on throttling."""

import logging
import time
from collections.abc import Mapping
from typing import Any

import httpx

from skycast.ingest.errors import ErrorKind, NetworkError, kind_for_status

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "skycast/0.1.0"
RETRY_STATUSES = (429, 503)


def as_query_params(params: Mapping[str, Any]) -> dict[str, str]:
    """Stringify query parameters, dropping ones that are None."""
    return {key: str(value) for key, value in params.items() if value is not None}


class HttpClient:
    def __init__(
        self,
        timeout: float = 30.0,
        max_retries: int = 2,
        retry_base_delay: float = 1.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay
        self.user_agent = user_agent

    def get_json(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET an endpoint and decode its JSON body.

        Retries on 429/503 and transport errors with exponential backoff.
        Every failure surfaces as a NetworkError.
        """
        url = _validate_endpoint(endpoint)
        query = as_query_params(params or {})
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=query, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "Request error for %s, retrying in %.1fs: %s", endpoint, delay, e
                    )
                    time.sleep(delay)
                    continue
                logger.error("Request to %s failed: %s", endpoint, e)
                raise NetworkError(ErrorKind.UNKNOWN, str(e)) from e

            if resp.status_code in RETRY_STATUSES and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "%s returned %d, retrying in %.1fs (attempt %d/%d)",
                    endpoint, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue
            return _decode(resp, endpoint)

        # range() always yields at least one attempt
        raise AssertionError("unreachable")


def _validate_endpoint(endpoint: str) -> httpx.URL:
    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError) as e:
        raise NetworkError(ErrorKind.BAD_URL, f"Invalid endpoint: {endpoint!r}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise NetworkError(ErrorKind.BAD_URL, f"Invalid endpoint: {endpoint!r}")
    return url


def _decode(resp: httpx.Response, endpoint: str) -> Any:
    kind = kind_for_status(resp.status_code)
    if kind is not None:
        logger.error("%s returned HTTP %d", endpoint, resp.status_code)
        raise NetworkError(
            kind, f"HTTP {resp.status_code} from {endpoint}", resp.status_code
        )
    try:
        return resp.json()
    except ValueError as e:
        raise NetworkError(
            ErrorKind.DECODING_ERROR, f"Malformed JSON from {endpoint}", resp.status_code
        ) from e
