"""Field configurations, their items and field configuration schemes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from jira_cloud.adapters.query import paginated
from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import (
    NoFieldConfigurationIDError,
    NoFieldConfigurationNameError,
    NoFieldConfigurationSchemeIDError,
    NoFieldConfigurationSchemeNameError,
    NoIssueTypesError,
    NoPayloadError,
    NoProjectIDsError,
)
from jira_cloud.core.domain.models import (
    FieldConfiguration,
    FieldConfigurationIssueTypeItemPage,
    FieldConfigurationItemPage,
    FieldConfigurationItemPayload,
    FieldConfigurationPage,
    FieldConfigurationScheme,
    FieldConfigurationSchemeAssignPayload,
    FieldConfigurationSchemePage,
    FieldConfigurationSchemeProjectPage,
    FieldConfigurationToIssueTypeMappingPayload,
)
from jira_cloud.core.domain.response import ResponseScheme
from jira_cloud.core.interfaces.connector import JiraConnector


def _named(name: str, description: str) -> dict[str, Any]:
    payload: dict[str, Any] = {"name": name}
    if description:
        payload["description"] = description
    return payload


class FieldConfigurationService(Service):
    def __init__(self, client: JiraConnector) -> None:
        super().__init__(client)
        self.item = FieldConfigurationItemService(client)
        self.scheme = FieldConfigurationSchemeService(client)

    async def gets(
        self,
        ids: Sequence[int] | None = None,
        is_default: bool = False,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[FieldConfigurationPage, ResponseScheme]:
        params = paginated(start_at, max_results)
        params.append(("isDefault", is_default))
        params.extend(("id", field_configuration_id) for field_configuration_id in ids or ())
        return await self._fetch("GET", self._endpoint("fieldconfiguration", params), FieldConfigurationPage)

    async def create(self, name: str, description: str = "") -> tuple[FieldConfiguration, ResponseScheme]:
        if not name:
            raise NoFieldConfigurationNameError()
        return await self._fetch(
            "POST", self._endpoint("fieldconfiguration"), FieldConfiguration, _named(name, description)
        )

    async def update(self, field_configuration_id: int, name: str, description: str = "") -> ResponseScheme:
        if not field_configuration_id:
            raise NoFieldConfigurationIDError()
        if not name:
            raise NoFieldConfigurationNameError()
        return await self._execute(
            "PUT", self._endpoint(f"fieldconfiguration/{field_configuration_id}"), _named(name, description)
        )

    async def delete(self, field_configuration_id: int) -> ResponseScheme:
        if not field_configuration_id:
            raise NoFieldConfigurationIDError()
        return await self._execute("DELETE", self._endpoint(f"fieldconfiguration/{field_configuration_id}"))


class FieldConfigurationItemService(Service):
    """Per-field settings (hidden, required, renderer) of a field configuration."""

    async def gets(
        self, field_configuration_id: int, start_at: int = 0, max_results: int = 50
    ) -> tuple[FieldConfigurationItemPage, ResponseScheme]:
        if not field_configuration_id:
            raise NoFieldConfigurationIDError()
        endpoint = self._endpoint(
            f"fieldconfiguration/{field_configuration_id}/fields", paginated(start_at, max_results)
        )
        return await self._fetch("GET", endpoint, FieldConfigurationItemPage)

    async def update(self, field_configuration_id: int, payload: FieldConfigurationItemPayload) -> ResponseScheme:
        if not field_configuration_id:
            raise NoFieldConfigurationIDError()
        if payload is None:
            raise NoPayloadError()
        return await self._execute(
            "PUT", self._endpoint(f"fieldconfiguration/{field_configuration_id}/fields"), payload
        )


class FieldConfigurationSchemeService(Service):
    async def gets(
        self, ids: Sequence[int] | None = None, start_at: int = 0, max_results: int = 50
    ) -> tuple[FieldConfigurationSchemePage, ResponseScheme]:
        params = paginated(start_at, max_results)
        params.extend(("id", scheme_id) for scheme_id in ids or ())
        return await self._fetch(
            "GET", self._endpoint("fieldconfigurationscheme", params), FieldConfigurationSchemePage
        )

    async def create(self, name: str, description: str = "") -> tuple[FieldConfigurationScheme, ResponseScheme]:
        if not name:
            raise NoFieldConfigurationSchemeNameError()
        return await self._fetch(
            "POST", self._endpoint("fieldconfigurationscheme"), FieldConfigurationScheme, _named(name, description)
        )

    async def mapping(
        self, scheme_ids: Sequence[int] | None = None, start_at: int = 0, max_results: int = 50
    ) -> tuple[FieldConfigurationIssueTypeItemPage, ResponseScheme]:
        """Issue type to field configuration mappings, optionally for some schemes."""

        params = paginated(start_at, max_results)
        params.extend(("fieldConfigurationSchemeId", scheme_id) for scheme_id in scheme_ids or ())
        return await self._fetch(
            "GET", self._endpoint("fieldconfigurationscheme/mapping", params), FieldConfigurationIssueTypeItemPage
        )

    async def project(
        self, project_ids: Sequence[int], start_at: int = 0, max_results: int = 50
    ) -> tuple[FieldConfigurationSchemeProjectPage, ResponseScheme]:
        """Field configuration schemes used by the given projects."""

        if not project_ids:
            raise NoProjectIDsError()
        params = paginated(start_at, max_results)
        params.extend(("projectId", project_id) for project_id in project_ids)
        return await self._fetch(
            "GET", self._endpoint("fieldconfigurationscheme/project", params), FieldConfigurationSchemeProjectPage
        )

    async def assign(self, payload: FieldConfigurationSchemeAssignPayload) -> ResponseScheme:
        if payload is None:
            raise NoPayloadError()
        return await self._execute("PUT", self._endpoint("fieldconfigurationscheme/project"), payload)

    async def update(self, scheme_id: int, name: str, description: str = "") -> ResponseScheme:
        if not scheme_id:
            raise NoFieldConfigurationSchemeIDError()
        if not name:
            raise NoFieldConfigurationSchemeNameError()
        return await self._execute(
            "PUT", self._endpoint(f"fieldconfigurationscheme/{scheme_id}"), _named(name, description)
        )

    async def delete(self, scheme_id: int) -> ResponseScheme:
        if not scheme_id:
            raise NoFieldConfigurationSchemeIDError()
        return await self._execute("DELETE", self._endpoint(f"fieldconfigurationscheme/{scheme_id}"))

    async def link(self, scheme_id: int, payload: FieldConfigurationToIssueTypeMappingPayload) -> ResponseScheme:
        """Map issue types to field configurations within a scheme."""

        if not scheme_id:
            raise NoFieldConfigurationSchemeIDError()
        if payload is None:
            raise NoPayloadError()
        return await self._execute("PUT", self._endpoint(f"fieldconfigurationscheme/{scheme_id}/mapping"), payload)

    async def unlink(self, scheme_id: int, issue_type_ids: Sequence[str]) -> ResponseScheme:
        if not scheme_id:
            raise NoFieldConfigurationSchemeIDError()
        if not issue_type_ids:
            raise NoIssueTypesError()
        return await self._execute(
            "POST",
            self._endpoint(f"fieldconfigurationscheme/{scheme_id}/mapping/delete"),
            {"issueTypeIds": list(issue_type_ids)},
        )
