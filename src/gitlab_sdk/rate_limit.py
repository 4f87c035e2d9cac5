"""Header-driven rate-limit tracker for the GitLab ``RateLimit-*`` headers."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass

import httpx

from gitlab_sdk.response import int_header


# ---------------------------------------------------------------------------
# Bucket info parsed from response headers
# ---------------------------------------------------------------------------

@dataclass
class BucketInfo:
    limit: int = 0
    remaining: int = 0
    reset: float = 0.0  # unix timestamp


# ---------------------------------------------------------------------------
# Rate-limit store
# ---------------------------------------------------------------------------

class RateLimiter:
    """Tracks the per-user API limit from response headers and pre-emptively waits.

    GitLab applies its authenticated API limit across all endpoints, so a
    single bucket is kept per client.
    """

    def __init__(self) -> None:
        self._bucket: BucketInfo | None = None
        self._lock = asyncio.Lock()

    @property
    def bucket(self) -> BucketInfo | None:
        return self._bucket

    def update_from_response(self, response: httpx.Response) -> None:
        """Update bucket info from RateLimit-* headers."""
        headers = response.headers
        limit = int_header(headers, "ratelimit-limit")
        if limit is None:
            return
        self._bucket = BucketInfo(
            limit=limit,
            remaining=int_header(headers, "ratelimit-remaining") or 0,
            reset=float(int_header(headers, "ratelimit-reset") or 0),
        )

    async def wait_if_needed(self) -> None:
        """Sleep if the bucket is exhausted."""
        bucket = self._bucket
        if bucket is None:
            return
        if bucket.remaining > 0:
            return
        delay = bucket.reset - time.time()
        if delay > 0:
            async with self._lock:
                # Re-check after acquiring lock
                bucket = self._bucket
                if bucket and bucket.remaining <= 0:
                    delay = bucket.reset - time.time()
                    if delay > 0:
                        await asyncio.sleep(delay)
