"""Project, project role and project version DTOs."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from jira_cloud.core.domain.models.base import AvatarURLs, JiraModel, PageScheme
from jira_cloud.core.domain.models.common import ProjectCategory, Scope, User
from jira_cloud.core.domain.models.issue import IssueTypeReference


class ProjectInsight(JiraModel):
    total_issue_count: int | None = None
    last_issue_update_time: str | None = None


class VersionOperation(JiraModel):
    id: str | None = None
    style_class: str | None = None
    label: str | None = None
    href: str | None = None
    weight: int | None = None


class VersionIssuesStatus(JiraModel):
    unmapped: int | None = None
    to_do: int | None = None
    in_progress: int | None = None
    done: int | None = None


class Version(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    description: str | None = None
    name: str | None = None
    archived: bool | None = None
    released: bool | None = None
    release_date: str | None = None
    start_date: str | None = None
    overdue: bool | None = None
    user_release_date: str | None = None
    project_id: int | None = None
    operations: list[VersionOperation] | None = None
    issues_status_for_fix_version: VersionIssuesStatus | None = None


class VersionPage(PageScheme[Version]):
    pass


class VersionSearchOptions(JiraModel):
    order_by: str = ""
    query: str = ""
    status: str = ""
    expand: list[str] = Field(default_factory=list)


class VersionPayload(JiraModel):
    name: str | None = None
    description: str | None = None
    project_id: int | None = None
    archived: bool | None = None
    released: bool | None = None
    release_date: str | None = None
    start_date: str | None = None


class VersionCustomFieldUsage(JiraModel):
    field_name: str | None = None
    custom_field_id: int | None = None
    issue_count_with_version_in_custom_field: int | None = None


class VersionIssueCounts(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    issues_fixed_count: int | None = None
    issues_affected_count: int | None = None
    issue_count_with_custom_fields_showing_version: int | None = None
    custom_field_usage: list[VersionCustomFieldUsage] | None = None


class VersionUnresolvedIssuesCount(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    issues_unresolved_count: int | None = None
    issues_count: int | None = None


class Project(JiraModel):
    expand: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = None
    description: str | None = None
    url: str | None = None
    email: str | None = None
    assignee_type: str | None = None
    name: str | None = None
    project_type_key: str | None = None
    simplified: bool | None = None
    style: str | None = None
    favourite: bool | None = None
    is_private: bool | None = None
    uuid: str | None = None
    lead: User | None = None
    components: list[dict[str, Any]] | None = None
    issue_types: list[IssueTypeReference] | None = None
    versions: list[Version] | None = None
    roles: dict[str, str] | None = None
    avatar_urls: AvatarURLs | None = None
    project_keys: list[str] | None = None
    insight: ProjectInsight | None = None
    project_category: ProjectCategory | None = None
    deleted: bool | None = None
    retention_till_date: str | None = None
    deleted_date: str | None = None
    deleted_by: User | None = None
    archived: bool | None = None
    archived_date: str | None = None
    archived_by: User | None = None


class ProjectSearchPage(PageScheme[Project]):
    pass


class ProjectSearchOptions(JiraModel):
    order_by: str = ""
    ids: list[int] = Field(default_factory=list)
    keys: list[str] = Field(default_factory=list)
    query: str = ""
    type_keys: list[str] = Field(default_factory=list)
    category_id: int = 0
    action: str = ""
    status: list[str] = Field(default_factory=list)
    expand: list[str] = Field(default_factory=list)
    properties: list[str] = Field(default_factory=list)
    property_query: str = ""


class ProjectPayload(JiraModel):
    key: str | None = None
    name: str | None = None
    description: str | None = None
    lead_account_id: str | None = None
    url: str | None = None
    project_type_key: str | None = None
    project_template_key: str | None = None
    assignee_type: str | None = None
    avatar_id: int | None = None
    category_id: int | None = None
    notification_scheme: int | None = None
    field_configuration_scheme: int | None = None
    issue_security_scheme: int | None = None
    permission_scheme: int | None = None
    issue_type_scheme: int | None = None
    issue_type_screen_scheme: int | None = None
    workflow_scheme: int | None = None


class ProjectUpdatePayload(JiraModel):
    key: str | None = None
    name: str | None = None
    description: str | None = None
    lead_account_id: str | None = None
    url: str | None = None
    assignee_type: str | None = None
    avatar_id: int | None = None
    category_id: int | None = None
    issue_security_scheme: int | None = None
    notification_scheme: int | None = None
    permission_scheme: int | None = None


class NewProjectCreated(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: int | None = None
    key: str | None = None


class StatusCategory(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: int | None = None
    key: str | None = None
    color_name: str | None = None
    name: str | None = None


class ProjectStatusDetails(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    description: str | None = None
    icon_url: str | None = None
    name: str | None = None
    id: str | None = None
    status_category: StatusCategory | None = None


class ProjectStatusPage(JiraModel):
    """Statuses available to one issue type of a project."""

    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    subtask: bool | None = None
    statuses: list[ProjectStatusDetails] = Field(default_factory=list)


class RoleActor(JiraModel):
    id: int | None = None
    display_name: str | None = None
    type: str | None = None
    name: str | None = None
    avatar_url: str | None = None
    actor_user: dict[str, Any] | None = None
    actor_group: dict[str, Any] | None = None


class ProjectRole(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    id: int | None = None
    description: str | None = None
    actors: list[RoleActor] | None = None
    scope: Scope | None = None
    translated_name: str | None = None
    current_user_role: bool | None = None
    admin: bool | None = None
    role_configurable: bool | None = None
    default: bool | None = None


class ProjectRoleDetail(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    id: int | None = None
    description: str | None = None
    admin: bool | None = None
    default: bool | None = None
    role_configurable: bool | None = None
    translated_name: str | None = None
    scope: Scope | None = None
