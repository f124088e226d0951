"""Issue field and field configuration DTOs."""

from __future__ import annotations

from pydantic import Field

from jira_cloud.core.domain.models.base import JiraModel, PageScheme


class FieldSchema(JiraModel):
    type: str | None = None
    items: str | None = None
    system: str | None = None
    custom: str | None = None
    custom_id: int | None = None


class FieldLastUsed(JiraModel):
    type: str | None = None
    value: str | None = None


class FieldScope(JiraModel):
    type: str | None = None
    project: dict | None = None


class IssueField(JiraModel):
    id: str | None = None
    key: str | None = None
    name: str | None = None
    custom: bool | None = None
    orderable: bool | None = None
    navigable: bool | None = None
    searchable: bool | None = None
    clause_names: list[str] | None = None
    scope: FieldScope | None = None
    schema_: FieldSchema | None = Field(default=None, alias="schema")
    description: str | None = None
    is_locked: bool | None = None
    searcher_key: str | None = None
    screens_count: int | None = None
    contexts_count: int | None = None
    last_used: FieldLastUsed | None = None


class FieldSearchPage(PageScheme[IssueField]):
    pass


class FieldSearchOptions(JiraModel):
    types: list[str] = Field(default_factory=list)
    ids: list[str] = Field(default_factory=list)
    query: str = ""
    order_by: str = ""
    expand: list[str] = Field(default_factory=list)


class CustomFieldPayload(JiraModel):
    name: str | None = None
    description: str | None = None
    field_type: str | None = Field(default=None, alias="type")
    searcher_key: str | None = None


class FieldConfiguration(JiraModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    is_default: bool | None = None


class FieldConfigurationPage(PageScheme[FieldConfiguration]):
    pass


class FieldConfigurationItem(JiraModel):
    id: str | None = None
    description: str | None = None
    is_hidden: bool | None = None
    is_required: bool | None = None
    renderer: str | None = None


class FieldConfigurationItemPage(PageScheme[FieldConfigurationItem]):
    pass


class FieldConfigurationItemPayload(JiraModel):
    field_configuration_items: list[FieldConfigurationItem] = Field(default_factory=list)


class FieldConfigurationScheme(JiraModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None


class FieldConfigurationSchemePage(PageScheme[FieldConfigurationScheme]):
    pass


class FieldConfigurationIssueTypeItem(JiraModel):
    field_configuration_scheme_id: str | None = None
    issue_type_id: str | None = None
    field_configuration_id: str | None = None


class FieldConfigurationIssueTypeItemPage(PageScheme[FieldConfigurationIssueTypeItem]):
    pass


class FieldConfigurationSchemeProject(JiraModel):
    project_ids: list[str] | None = None
    field_configuration_scheme: FieldConfigurationScheme | None = None


class FieldConfigurationSchemeProjectPage(PageScheme[FieldConfigurationSchemeProject]):
    pass


class FieldConfigurationSchemeAssignPayload(JiraModel):
    field_configuration_scheme_id: str | None = None
    project_id: str | None = None


class FieldConfigurationToIssueTypeMapping(JiraModel):
    issue_type_id: str | None = None
    field_configuration_id: str | None = None


class FieldConfigurationToIssueTypeMappingPayload(JiraModel):
    mappings: list[FieldConfigurationToIssueTypeMapping] = Field(default_factory=list)

