"""GitLab SDK — async Python client for the GitLab member roles API."""

from gitlab_sdk.client import Client
from gitlab_sdk.errors import GitLabError, GitLabHTTPError, GitLabNetworkError, InvalidIDError
from gitlab_sdk.models import AccessLevel, CreateMemberRoleOptions, MemberRole
from gitlab_sdk.response import PageInfo, Response

__all__ = [
    "AccessLevel",
    "Client",
    "CreateMemberRoleOptions",
    "GitLabError",
    "GitLabHTTPError",
    "GitLabNetworkError",
    "InvalidIDError",
    "MemberRole",
    "PageInfo",
    "Response",
]
