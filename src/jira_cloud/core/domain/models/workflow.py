"""Classic workflow DTOs."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from jira_cloud.core.domain.models.base import JiraModel, PageScheme


class WorkflowPublishedID(JiraModel):
    name: str | None = None
    entity_id: str | None = None


class WorkflowTransitionScreen(JiraModel):
    id: str | None = None
    properties: dict[str, Any] | None = None


class WorkflowTransitionRule(JiraModel):
    type: str | None = None
    configuration: Any = None


class WorkflowTransitionRules(JiraModel):
    conditions: list[WorkflowTransitionRule] | None = None
    validators: list[WorkflowTransitionRule] | None = None
    post_functions: list[WorkflowTransitionRule] | None = None


class WorkflowTransition(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    from_: list[str] | None = Field(default=None, alias="from")
    to: str | None = None
    type: str | None = None
    screen: WorkflowTransitionScreen | None = None
    rules: WorkflowTransitionRules | None = None


class WorkflowStatusProperties(JiraModel):
    issue_editable: bool | None = None


class WorkflowStatus(JiraModel):
    id: str | None = None
    name: str | None = None
    properties: WorkflowStatusProperties | None = None


class Workflow(JiraModel):
    id: WorkflowPublishedID | None = None
    transitions: list[WorkflowTransition] | None = None
    statuses: list[WorkflowStatus] | None = None
    description: str | None = None
    is_default: bool | None = None


class WorkflowPage(PageScheme[Workflow]):
    pass


class WorkflowSearchOptions(JiraModel):
    workflow_name: list[str] = Field(default_factory=list)
    expand: list[str] = Field(default_factory=list)
    query_string: str = ""
    order_by: str = ""
    is_active: bool = False


class WorkflowCondition(JiraModel):
    conditions: list["WorkflowCondition"] | None = None
    configuration: Any = None
    operator: str | None = None
    type: str | None = None


class WorkflowTransitionRulesPayload(JiraModel):
    conditions: WorkflowCondition | None = None
    post_functions: list[WorkflowTransitionRule] | None = None
    validators: list[WorkflowTransitionRule] | None = None


class WorkflowTransitionPayload(JiraModel):
    name: str | None = None
    description: str | None = None
    from_: list[str] | None = Field(default=None, alias="from")
    to: str | None = None
    type: str | None = None
    rules: WorkflowTransitionRulesPayload | None = None
    screen: WorkflowTransitionScreen | None = None
    properties: dict[str, Any] | None = None


class WorkflowPayload(JiraModel):
    name: str | None = None
    description: str | None = None
    statuses: list[WorkflowTransitionScreen] | None = None
    transitions: list[WorkflowTransitionPayload] | None = None


class WorkflowCreated(JiraModel):
    name: str | None = None
    entity_id: str | None = None
