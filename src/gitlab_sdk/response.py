"""Response metadata returned alongside decoded payloads."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx


def int_header(headers: httpx.Headers, name: str) -> int | None:
    value = headers.get(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass
class PageInfo:
    """Offset pagination headers (``X-Page`` and friends) plus the ``next`` link."""

    page: int | None = None
    per_page: int | None = None
    next_page: int | None = None
    prev_page: int | None = None
    total: int | None = None
    total_pages: int | None = None
    next_link: str | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> PageInfo:
        headers = response.headers
        next_link = response.links.get("next", {}).get("url")
        return cls(
            page=int_header(headers, "x-page"),
            per_page=int_header(headers, "x-per-page"),
            next_page=int_header(headers, "x-next-page"),
            prev_page=int_header(headers, "x-prev-page"),
            total=int_header(headers, "x-total"),
            total_pages=int_header(headers, "x-total-pages"),
            next_link=next_link,
        )


@dataclass
class Response:
    """Status, headers and pagination of a completed API call."""

    status: int
    headers: httpx.Headers
    page_info: PageInfo = field(default_factory=PageInfo)
    raw: httpx.Response | None = field(default=None, repr=False)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> Response:
        return cls(
            status=response.status_code,
            headers=response.headers,
            page_info=PageInfo.from_response(response),
            raw=response,
        )
