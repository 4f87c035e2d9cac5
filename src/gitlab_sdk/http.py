"""HTTP client wrapping httpx with auth headers, rate limiting, and retry."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from gitlab_sdk.errors import GitLabHTTPError, GitLabNetworkError
from gitlab_sdk.rate_limit import RateLimiter

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://gitlab.com"
API_PATH = "/api/v4"

_MAX_RETRIES = 3
_BASE_RETRY_DELAY = 1.0
_RETRYABLE_STATUSES = {500, 502, 503, 504}

_TOKEN_TYPES = ("private", "oauth", "job")


def api_base_url(base_url: str) -> str:
    """Return ``base_url`` with the ``/api/v4`` suffix GitLab serves the REST API under."""
    base = base_url.rstrip("/")
    if not base.endswith(API_PATH):
        base += API_PATH
    return base


class HTTPClient:
    """Async HTTP client for the GitLab REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        *,
        token_type: str = "private",
        timeout: float = 30.0,
    ) -> None:
        if token_type not in _TOKEN_TYPES:
            raise ValueError(f"token_type must be one of {', '.join(_TOKEN_TYPES)}, got {token_type!r}")
        self.base_url = api_base_url(base_url)
        self._token = token
        self.token_type = token_type
        self._rate_limiter = RateLimiter()
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
        )

    @property
    def token(self) -> str | None:
        return self._token

    @token.setter
    def token(self, value: str | None) -> None:
        self._token = value

    def _headers(self) -> dict[str, str]:
        h: dict[str, str] = {"Accept": "application/json"}
        if not self._token:
            return h
        if self.token_type == "oauth":
            h["Authorization"] = f"Bearer {self._token}"
        elif self.token_type == "job":
            h["JOB-TOKEN"] = self._token
        else:
            h["PRIVATE-TOKEN"] = self._token
        return h

    def _retry_delay(self, response: httpx.Response) -> float:
        retry_after = response.headers.get("retry-after")
        if retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass
        bucket = self._rate_limiter.bucket
        if bucket is not None and bucket.remaining <= 0:
            delay = bucket.reset - time.time()
            if delay > 0:
                return delay
        return _BASE_RETRY_DELAY

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        sudo: int | str | None = None,
    ) -> httpx.Response:
        """Make an API request with rate-limit awareness and 429/5xx retry."""
        merged_headers = self._headers()
        if headers:
            merged_headers.update(headers)
        if sudo is not None:
            merged_headers["Sudo"] = str(sudo)

        for attempt in range(_MAX_RETRIES):
            await self._rate_limiter.wait_if_needed()

            log.debug("%s %s (attempt %d)", method, path, attempt + 1)
            try:
                response = await self._client.request(
                    method,
                    path,
                    json=json,
                    params=params,
                    headers=merged_headers,
                )
            except httpx.TransportError as exc:
                raise GitLabNetworkError(str(exc)) from exc

            self._rate_limiter.update_from_response(response)

            if response.status_code == 429:
                if attempt < _MAX_RETRIES - 1:
                    delay = self._retry_delay(response)
                    log.warning("Rate limited on %s %s, retrying in %.2fs", method, path, delay)
                    await asyncio.sleep(delay)
                    continue
                raise GitLabHTTPError.from_response(response)

            if response.status_code in _RETRYABLE_STATUSES:
                if attempt < _MAX_RETRIES - 1:
                    delay = _BASE_RETRY_DELAY * (2 ** attempt)
                    log.warning(
                        "%s %s returned %d, retrying in %.2fs",
                        method, path, response.status_code, delay,
                    )
                    await asyncio.sleep(delay)
                    continue
                raise GitLabHTTPError.from_response(response)

            if response.status_code >= 400:
                raise GitLabHTTPError.from_response(response)

            return response

        # Should not reach here, but just in case
        raise GitLabHTTPError.from_response(response)  # type: ignore[possibly-undefined]

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", path, **kwargs)

    async def close(self) -> None:
        await self._client.aclose()
