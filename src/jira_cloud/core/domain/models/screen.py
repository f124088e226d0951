"""Screen DTOs."""

from __future__ import annotations

from pydantic import Field

from jira_cloud.core.domain.models.base import JiraModel, PageScheme
from jira_cloud.core.domain.models.common import Scope


class ScreenTab(JiraModel):
    id: int | None = None
    name: str | None = None


class ScreenWithTab(JiraModel):
    """A screen as listed by `field/{id}/screens`."""

    id: int | None = None
    name: str | None = None
    description: str | None = None
    tab: ScreenTab | None = None


class ScreenFieldPage(PageScheme[ScreenWithTab]):
    pass


class Screen(JiraModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    scope: Scope | None = None


class ScreenSearchPage(PageScheme[Screen]):
    pass


class ScreenSearchOptions(JiraModel):
    ids: list[int] = Field(default_factory=list)
    query_string: str = ""
    scope: list[str] = Field(default_factory=list)
    order_by: str = ""


class AvailableScreenField(JiraModel):
    id: str | None = None
    name: str | None = None
