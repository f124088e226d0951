"""Issue link, link type, priority and resolution DTOs."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from jira_cloud.core.domain.models.base import JiraModel


class Priority(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    status_color: str | None = None
    icon_url: str | None = None
    is_default: bool | None = None


class Resolution(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None


class IssueTypeReference(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    subtask: bool | None = None
    hierarchy_level: int | None = None


class IssueLinkType(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    inward: str | None = None
    outward: str | None = None


class IssueLinkTypeSearch(JiraModel):
    issue_link_types: list[IssueLinkType] = Field(default_factory=list)


class LinkedIssueFields(JiraModel):
    summary: str | None = None
    status: dict[str, Any] | None = None
    priority: Priority | None = None
    issue_type: IssueTypeReference | None = Field(default=None, alias="issuetype")


class LinkedIssue(JiraModel):
    self_url: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = None
    fields: LinkedIssueFields | None = None


class IssueLink(JiraModel):
    id: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    type: IssueLinkType | None = None
    inward_issue: LinkedIssue | None = None
    outward_issue: LinkedIssue | None = None


class IssueLinkFields(JiraModel):
    issue_links: list[IssueLink] = Field(default_factory=list, alias="issuelinks")


class IssueLinkPage(JiraModel):
    """An issue fetched with `fields=issuelinks`."""

    expand: str | None = None
    id: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    key: str | None = None
    fields: IssueLinkFields | None = None


class LinkPayload(JiraModel):
    """Body of `POST issueLink`.

    `comment` is passed through untouched: v3 expects an ADF document body,
    v2 a plain string body.
    """

    type: IssueLinkType | None = None
    inward_issue: LinkedIssue | None = None
    outward_issue: LinkedIssue | None = None
    comment: dict[str, Any] | None = None
