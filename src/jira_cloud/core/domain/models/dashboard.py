"""Dashboard DTOs."""

from __future__ import annotations

from pydantic import Field

from jira_cloud.core.domain.models.base import JiraModel, PageScheme
from jira_cloud.core.domain.models.common import Group, ProjectReference, User


class SharePermission(JiraModel):
    id: int | None = None
    type: str | None = None
    project: ProjectReference | None = None
    role: dict | None = None
    group: Group | None = None
    user: User | None = None


class Dashboard(JiraModel):
    id: str | None = None
    is_favourite: bool | None = None
    name: str | None = None
    description: str | None = None
    owner: User | None = None
    popularity: int | None = None
    rank: int | None = None
    self_url: str | None = Field(default=None, alias="self")
    share_permissions: list[SharePermission] | None = None
    edit_permissions: list[SharePermission] | None = None
    view: str | None = None
    is_writable: bool | None = None
    system_dashboard: bool | None = None


class DashboardPage(JiraModel):
    """Legacy listing returned by `GET dashboard` (`dashboards`, `prev`, `next`)."""

    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    prev: str | None = None
    next: str | None = None
    dashboards: list[Dashboard] = Field(default_factory=list)


class DashboardSearchPage(PageScheme[Dashboard]):
    pass


class DashboardPayload(JiraModel):
    name: str | None = None
    description: str | None = None
    share_permissions: list[SharePermission] | None = None
    edit_permissions: list[SharePermission] | None = None


class DashboardSearchOptions(JiraModel):
    dashboard_name: str = ""
    owner_account_id: str = ""
    group_permission_name: str = ""
    order_by: str = ""
    expand: list[str] = Field(default_factory=list)
