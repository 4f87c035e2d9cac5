from __future__ import annotations

from typing import Any

from pydantic import Field, model_serializer

from gitlab_sdk.models.base import GitLabModel
from gitlab_sdk.models.enums import AccessLevel

# Wire keys of the permission flags, in API order. Two of them are singular
# on the wire while the python fields are plural.
PERMISSION_KEYS: tuple[str, ...] = (
    "admin_cicd_variables",
    "admin_compliance_framework",
    "admin_group_member",
    "admin_merge_request",
    "admin_push_rules",
    "admin_terraform_state",
    "admin_vulnerability",
    "admin_web_hook",
    "archive_project",
    "manage_deploy_tokens",
    "manage_group_access_tokens",
    "manage_merge_request_settings",
    "manage_project_access_tokens",
    "manage_security_policy_link",
    "read_code",
    "read_runners",
    "read_dependency",
    "read_vulnerability",
    "remove_group",
    "remove_project",
)


class MemberRole(GitLabModel):
    """A custom role scoped to a group (or to the instance when ``group_id`` is None)."""

    id: int
    name: str
    description: str = ""
    group_id: int | None = None
    base_access_level: AccessLevel
    admin_cicd_variables: bool = False
    admin_compliance_framework: bool = False
    admin_group_members: bool = Field(default=False, alias="admin_group_member")
    admin_merge_requests: bool = Field(default=False, alias="admin_merge_request")
    admin_push_rules: bool = False
    admin_terraform_state: bool = False
    admin_vulnerability: bool = False
    admin_web_hook: bool = False
    archive_project: bool = False
    manage_deploy_tokens: bool = False
    manage_group_access_tokens: bool = False
    manage_merge_request_settings: bool = False
    manage_project_access_tokens: bool = False
    manage_security_policy_link: bool = False
    read_code: bool = False
    read_runners: bool = False
    read_dependency: bool = False
    read_vulnerability: bool = False
    remove_group: bool = False
    remove_project: bool = False

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        for key in list(data):
            if key in _OMIT_WHEN_EMPTY and not data[key]:
                del data[key]
        return data

    @property
    def enabled_permissions(self) -> list[str]:
        """Wire keys of every flag set on this role."""
        return [
            key for key in PERMISSION_KEYS
            if getattr(self, _FIELD_BY_KEY[key])
        ]


class CreateMemberRoleOptions(GitLabModel):
    """Payload for creating a member role.

    Flags left as ``None`` are not sent; ``False`` is sent explicitly.
    """

    name: str
    base_access_level: AccessLevel
    description: str | None = None
    admin_cicd_variables: bool | None = None
    admin_compliance_framework: bool | None = None
    admin_group_members: bool | None = Field(default=None, alias="admin_group_member")
    admin_merge_requests: bool | None = Field(default=None, alias="admin_merge_request")
    admin_push_rules: bool | None = None
    admin_terraform_state: bool | None = None
    admin_vulnerability: bool | None = None
    admin_web_hook: bool | None = None
    archive_project: bool | None = None
    manage_deploy_tokens: bool | None = None
    manage_group_access_tokens: bool | None = None
    manage_merge_request_settings: bool | None = None
    manage_project_access_tokens: bool | None = None
    manage_security_policy_link: bool | None = None
    read_code: bool | None = None
    read_runners: bool | None = None
    read_dependency: bool | None = None
    read_vulnerability: bool | None = None
    remove_group: bool | None = None
    remove_project: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


_FIELD_BY_KEY: dict[str, str] = {
    (info.alias or name): name
    for name, info in MemberRole.model_fields.items()
    if (info.alias or name) in PERMISSION_KEYS
}

_OMIT_WHEN_EMPTY: frozenset[str] = frozenset(
    {"description", *PERMISSION_KEYS, *_FIELD_BY_KEY.values()}
)
