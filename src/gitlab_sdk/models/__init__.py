"""SDK request and response models."""

from gitlab_sdk.models.base import GitLabModel
from gitlab_sdk.models.enums import AccessLevel
from gitlab_sdk.models.errors import ErrorResponse
from gitlab_sdk.models.member_roles import (
    PERMISSION_KEYS,
    CreateMemberRoleOptions,
    MemberRole,
)

__all__ = [
    "GitLabModel",
    "AccessLevel",
    "ErrorResponse",
    # member roles
    "PERMISSION_KEYS",
    "CreateMemberRoleOptions",
    "MemberRole",
]
