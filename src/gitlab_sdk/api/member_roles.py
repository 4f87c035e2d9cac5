"""Member roles API methods.

GitLab API docs: https://docs.gitlab.com/ee/api/member_roles.html
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from gitlab_sdk.ids import parse_id, parse_int_id, path_escape
from gitlab_sdk.models.member_roles import CreateMemberRoleOptions, MemberRole
from gitlab_sdk.pagination import PaginatedIterator
from gitlab_sdk.response import Response

if TYPE_CHECKING:
    from gitlab_sdk.http import HTTPClient

log = logging.getLogger(__name__)


def _group_path(group: int | str) -> str:
    return f"groups/{path_escape(parse_id(group))}/member_roles"


def _page_params(page: int | None, per_page: int | None) -> dict[str, Any] | None:
    params: dict[str, Any] = {}
    if page is not None:
        params["page"] = page
    if per_page is not None:
        params["per_page"] = per_page
    return params or None


class MemberRolesAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    # --- Group member roles ---

    async def list(
        self,
        group: int | str,
        *,
        page: int | None = None,
        per_page: int | None = None,
        headers: dict[str, str] | None = None,
        sudo: int | str | None = None,
    ) -> tuple[list[MemberRole], Response]:
        """List the member roles of a group."""
        return await self._list(_group_path(group), page, per_page, headers, sudo)

    def iter(
        self,
        group: int | str,
        *,
        per_page: int = 20,
        headers: dict[str, str] | None = None,
        sudo: int | str | None = None,
    ) -> PaginatedIterator[MemberRole]:
        return PaginatedIterator(
            self._http, _group_path(group), MemberRole,
            per_page=per_page, headers=headers, sudo=sudo,
        )

    async def create(
        self,
        group: int | str,
        options: CreateMemberRoleOptions | None = None,
        *,
        headers: dict[str, str] | None = None,
        sudo: int | str | None = None,
        **fields: Any,
    ) -> tuple[MemberRole, Response]:
        """Add a member role to a group.

        Pass either a :class:`CreateMemberRoleOptions` or its fields as
        keyword arguments::

            role, resp = await client.member_roles.create(
                "my-org", name="Auditor", base_access_level=AccessLevel.REPORTER,
                read_vulnerability=True,
            )
        """
        return await self._create(_group_path(group), options, fields, headers, sudo)

    async def delete(
        self,
        group: int | str,
        member_role_id: int,
        *,
        headers: dict[str, str] | None = None,
        sudo: int | str | None = None,
    ) -> Response:
        """Remove a member role from a group."""
        path = f"{_group_path(group)}/{parse_int_id(member_role_id)}"
        return await self._delete(path, headers, sudo)

    # --- Instance member roles (self-managed only) ---

    async def list_instance(
        self,
        *,
        page: int | None = None,
        per_page: int | None = None,
        headers: dict[str, str] | None = None,
        sudo: int | str | None = None,
    ) -> tuple[list[MemberRole], Response]:
        return await self._list("member_roles", page, per_page, headers, sudo)

    async def create_instance(
        self,
        options: CreateMemberRoleOptions | None = None,
        *,
        headers: dict[str, str] | None = None,
        sudo: int | str | None = None,
        **fields: Any,
    ) -> tuple[MemberRole, Response]:
        return await self._create("member_roles", options, fields, headers, sudo)

    async def delete_instance(
        self,
        member_role_id: int,
        *,
        headers: dict[str, str] | None = None,
        sudo: int | str | None = None,
    ) -> Response:
        return await self._delete(f"member_roles/{parse_int_id(member_role_id)}", headers, sudo)

    # --- Shared request plumbing ---

    async def _list(
        self,
        path: str,
        page: int | None,
        per_page: int | None,
        headers: dict[str, str] | None,
        sudo: int | str | None,
    ) -> tuple[list[MemberRole], Response]:
        r = await self._http.get(
            path, params=_page_params(page, per_page), headers=headers, sudo=sudo
        )
        roles = [MemberRole.model_validate(item) for item in r.json()]
        return roles, Response.from_httpx(r)

    async def _create(
        self,
        path: str,
        options: CreateMemberRoleOptions | None,
        fields: dict[str, Any],
        headers: dict[str, str] | None,
        sudo: int | str | None,
    ) -> tuple[MemberRole, Response]:
        if options is None:
            options = CreateMemberRoleOptions(**fields)
        elif fields:
            raise TypeError("pass either an options object or keyword fields, not both")
        log.debug("Creating member role %r at %s", options.name, path)
        r = await self._http.post(path, json=options.to_payload(), headers=headers, sudo=sudo)
        return MemberRole.model_validate(r.json()), Response.from_httpx(r)

    async def _delete(
        self,
        path: str,
        headers: dict[str, str] | None,
        sudo: int | str | None,
    ) -> Response:
        log.debug("Deleting member role at %s", path)
        r = await self._http.delete(path, headers=headers, sudo=sudo)
        return Response.from_httpx(r)
