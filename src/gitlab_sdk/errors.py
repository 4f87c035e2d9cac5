"""SDK exception hierarchy."""

from __future__ import annotations

from typing import Any

import httpx

from gitlab_sdk.models.errors import ErrorResponse
from gitlab_sdk.response import Response


class GitLabError(Exception):
    """Base class for every error raised by the SDK."""


class InvalidIDError(GitLabError, TypeError):
    """Raised when an identifier has a type the endpoint cannot accept."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"invalid ID type {value!r}, the ID must be an int or a string")


class GitLabHTTPError(GitLabError):
    """Raised when the GitLab API returns a non-2xx response."""

    def __init__(
        self,
        status: int,
        message: str = "",
        error: ErrorResponse | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.message = message or f"HTTP {status}"
        self.error = error
        self.response = response
        self.metadata = Response.from_httpx(response) if response is not None else None
        target = ""
        if response is not None:
            try:
                target = f" {response.request.method} {response.request.url}"
            except RuntimeError:
                # responses built by hand carry no request
                pass
        super().__init__(f"[{status}]{target}: {self.message}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> GitLabHTTPError:
        """Build from an httpx response, attempting to parse the error body."""
        error: ErrorResponse | None = None
        message = ""
        try:
            body = response.json()
            if isinstance(body, dict):
                error = ErrorResponse.model_validate(body)
                message = error.flatten()
        except ValueError:
            message = response.text.strip()
        return cls(status=response.status_code, message=message, error=error, response=response)


class GitLabNetworkError(GitLabError):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
