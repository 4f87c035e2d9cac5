from __future__ import annotations

from typing import Any

from gitlab_sdk.models.base import GitLabModel


class ErrorResponse(GitLabModel):
    """GitLab error body.

    ``message`` is a string for most endpoints, a list for some, and a
    mapping of field name to messages for validation failures.
    """

    message: Any = None
    error: str | None = None
    error_description: str | None = None

    def flatten(self) -> str:
        if self.message is not None:
            return _flatten(self.message)
        if self.error_description:
            return f"{self.error}: {self.error_description}" if self.error else self.error_description
        return self.error or ""


def _flatten(value: Any) -> str:
    if isinstance(value, dict):
        parts = [f"{key}: {_flatten(value[key])}" for key in sorted(value)]
        return "{" + ", ".join(parts) + "}"
    if isinstance(value, list):
        return "[" + ", ".join(_flatten(v) for v in value) + "]"
    return str(value)
