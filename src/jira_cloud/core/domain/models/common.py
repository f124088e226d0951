"""DTOs shared by several API areas (users, groups, scopes, async tasks)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from jira_cloud.core.domain.models.base import AvatarURLs, JiraModel


class User(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    account_id: str | None = None
    account_type: str | None = None
    email_address: str | None = None
    avatar_urls: AvatarURLs | None = None
    display_name: str | None = None
    active: bool | None = None
    time_zone: str | None = None
    locale: str | None = None


class Group(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    group_id: str | None = None


class ProjectCategory(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None


class ProjectReference(JiraModel):
    """Minimal project shape embedded in other resources."""

    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = None
    name: str | None = None
    project_type_key: str | None = None
    simplified: bool | None = None
    avatar_urls: AvatarURLs | None = None
    project_category: ProjectCategory | None = None


class Scope(JiraModel):
    type: str | None = None
    project: ProjectReference | None = None


class TaskScheme(JiraModel):
    """Reference to an asynchronous task returned with HTTP 303."""

    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None


class TaskDetail(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    description: str | None = None
    status: str | None = None
    message: str | None = None
    result: Any = None
    submitted_by: int | None = None
    progress: int | None = None
    elapsed_runtime: int | None = None
    submitted: int | None = None
    started: int | None = None
    finished: int | None = None
    last_update: int | None = None
