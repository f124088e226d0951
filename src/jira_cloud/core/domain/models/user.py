"""User DTOs beyond the shared `User` shape."""

from __future__ import annotations

from pydantic import Field

from jira_cloud.core.domain.models.base import JiraModel, PageScheme
from jira_cloud.core.domain.models.common import Group, User


class UserGroupList(JiraModel):
    size: int | None = None
    items: list[Group] = Field(default_factory=list)
    max_results: int | None = None


class UserDetail(User):
    """`GET user` with optional `groups` / `applicationRoles` expansions."""

    key: str | None = None
    name: str | None = None
    groups: UserGroupList | None = None
    application_roles: dict | None = None
    expand: str | None = None


class UserGroup(JiraModel):
    name: str | None = None
    group_id: str | None = None
    self_url: str | None = Field(default=None, alias="self")


class UserSearchPage(PageScheme[User]):
    pass


class UserPayload(JiraModel):
    email_address: str | None = None
    display_name: str | None = None
    notification: bool | None = None
    products: list[str] | None = None
