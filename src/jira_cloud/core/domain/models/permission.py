"""Permission, permission scheme and grant DTOs."""

from __future__ import annotations

from pydantic import Field

from jira_cloud.core.domain.models.base import JiraModel
from jira_cloud.core.domain.models.common import Scope


class Permission(JiraModel):
    key: str | None = None
    name: str | None = None
    type: str | None = None
    description: str | None = None


class PermissionPage(JiraModel):
    """`GET permissions` answers with a map keyed by permission key."""

    permissions: dict[str, Permission] = Field(default_factory=dict)


class BulkProjectPermissions(JiraModel):
    issues: list[int] | None = None
    projects: list[int] | None = None
    permissions: list[str] = Field(default_factory=list)


class PermissionCheckPayload(JiraModel):
    global_permissions: list[str] | None = None
    account_id: str | None = None
    project_permissions: list[BulkProjectPermissions] | None = None


class BulkProjectPermissionGrant(JiraModel):
    permission: str | None = None
    issues: list[int] | None = None
    projects: list[int] | None = None


class PermissionGrants(JiraModel):
    project_permissions: list[BulkProjectPermissionGrant] = Field(default_factory=list)
    global_permissions: list[str] = Field(default_factory=list)


class PermittedProject(JiraModel):
    id: int | None = None
    key: str | None = None


class PermittedProjects(JiraModel):
    projects: list[PermittedProject] = Field(default_factory=list)


class PermissionGrantHolder(JiraModel):
    type: str | None = None
    parameter: str | None = None
    expand: str | None = None
    value: str | None = None


class PermissionGrant(JiraModel):
    id: int | None = None
    self_url: str | None = Field(default=None, alias="self")
    holder: PermissionGrantHolder | None = None
    permission: str | None = None


class PermissionGrantPayload(JiraModel):
    holder: PermissionGrantHolder | None = None
    permission: str | None = None


class PermissionSchemeGrants(JiraModel):
    permissions: list[PermissionGrant] = Field(default_factory=list)
    expand: str | None = None


class PermissionScheme(JiraModel):
    expand: str | None = None
    id: int | None = None
    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    description: str | None = None
    scope: Scope | None = None
    permissions: list[PermissionGrant] | None = None


class PermissionSchemePage(JiraModel):
    permission_schemes: list[PermissionScheme] = Field(default_factory=list)
