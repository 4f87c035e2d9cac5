"""Async iterator for GitLab offset (page number) pagination."""

from __future__ import annotations

from typing import Any, AsyncIterator, TypeVar

from pydantic import BaseModel

from gitlab_sdk.http import HTTPClient
from gitlab_sdk.response import PageInfo

T = TypeVar("T", bound=BaseModel)


class PaginatedIterator(AsyncIterator[T]):
    """Yields items across page-numbered API responses.

    Expects JSON array bodies and follows the ``X-Next-Page`` header until
    it is empty.
    """

    def __init__(
        self,
        http: HTTPClient,
        path: str,
        model: type[T],
        *,
        params: dict[str, Any] | None = None,
        per_page: int = 20,
        headers: dict[str, str] | None = None,
        sudo: int | str | None = None,
    ) -> None:
        self._http = http
        self._path = path
        self._model = model
        self._params = dict(params) if params else {}
        self._per_page = per_page
        self._headers = headers
        self._sudo = sudo
        self._buffer: list[T] = []
        self._next_page: int | None = 1
        self._exhausted = False

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        if self._buffer:
            return self._buffer.pop(0)
        if self._exhausted:
            raise StopAsyncIteration
        await self._fetch_page()
        if not self._buffer:
            raise StopAsyncIteration
        return self._buffer.pop(0)

    async def _fetch_page(self) -> None:
        params = {**self._params, "page": self._next_page, "per_page": self._per_page}
        r = await self._http.get(self._path, params=params, headers=self._headers, sudo=self._sudo)
        items = r.json()
        self._buffer = [self._model.model_validate(item) for item in items]
        self._next_page = PageInfo.from_response(r).next_page
        if not self._next_page or not items:
            self._exhausted = True

    async def flatten(self) -> list[T]:
        """Consume the full iterator into a list."""
        result: list[T] = []
        async for item in self:
            result.append(item)
        return result
