"""High-level GitLab client composing the HTTP transport and API groups."""

from __future__ import annotations

import os
from typing import Any

from gitlab_sdk.http import DEFAULT_BASE_URL, HTTPClient


class Client:
    """Top-level SDK client.

    Usage::

        async with Client("https://gitlab.example.com", token="glpat-...") as client:
            roles, resp = await client.member_roles.list("my-group")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        *,
        token_type: str = "private",
        timeout: float = 30.0,
    ) -> None:
        self.http = HTTPClient(base_url, token, token_type=token_type, timeout=timeout)

        # Lazily populated API groups
        self._member_roles: Any = None

    @classmethod
    def from_env(cls, *, timeout: float = 30.0) -> Client:
        """Build a client from ``GITLAB_URL``, ``GITLAB_TOKEN`` and ``GITLAB_TOKEN_TYPE``."""
        return cls(
            os.environ.get("GITLAB_URL", DEFAULT_BASE_URL),
            os.environ.get("GITLAB_TOKEN") or None,
            token_type=os.environ.get("GITLAB_TOKEN_TYPE", "private"),
            timeout=timeout,
        )

    # --- API group properties ---

    @property
    def member_roles(self) -> Any:
        if self._member_roles is None:
            from gitlab_sdk.api.member_roles import MemberRolesAPI
            self._member_roles = MemberRolesAPI(self.http)
        return self._member_roles

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
