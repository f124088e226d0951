"""Server information DTO."""

from __future__ import annotations

from pydantic import Field

from jira_cloud.core.domain.models.base import JiraModel


class HealthCheck(JiraModel):
    name: str | None = None
    description: str | None = None
    passed: bool | None = None


class ServerInformation(JiraModel):
    base_url: str | None = Field(default=None, alias="baseUrl")
    version: str | None = None
    version_numbers: list[int] | None = None
    deployment_type: str | None = None
    build_number: int | None = None
    build_date: str | None = None
    server_time: str | None = None
    scm_info: str | None = None
    server_title: str | None = None
    health_checks: list[HealthCheck] | None = None
