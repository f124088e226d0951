"""Issue fields: `rest/api/{v}/field`."""

from __future__ import annotations

from jira_cloud.adapters.query import paginated
from jira_cloud.adapters.services.base import Service
from jira_cloud.adapters.services.field_configuration import FieldConfigurationService
from jira_cloud.core.domain.errors import NoFieldIDError, NoPayloadError
from jira_cloud.core.domain.models import (
    CustomFieldPayload,
    FieldSearchOptions,
    FieldSearchPage,
    IssueField,
    TaskScheme,
)
from jira_cloud.core.domain.response import ResponseScheme
from jira_cloud.core.interfaces.connector import JiraConnector


class FieldService(Service):
    def __init__(self, client: JiraConnector) -> None:
        super().__init__(client)
        self.configuration = FieldConfigurationService(client)

    async def gets(self) -> tuple[list[IssueField], ResponseScheme]:
        return await self._fetch("GET", self._endpoint("field"), list[IssueField])

    async def create(self, payload: CustomFieldPayload) -> tuple[IssueField, ResponseScheme]:
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("POST", self._endpoint("field"), IssueField, payload)

    async def search(
        self,
        options: FieldSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[FieldSearchPage, ResponseScheme]:
        params = paginated(start_at, max_results)
        if options is not None:
            if options.expand:
                params.append(("expand", ",".join(options.expand)))
            if options.types:
                params.append(("type", ",".join(options.types)))
            if options.ids:
                params.append(("id", ",".join(options.ids)))
            if options.order_by:
                params.append(("orderBy", options.order_by))
            if options.query:
                params.append(("query", options.query))
        return await self._fetch("GET", self._endpoint("field/search", params), FieldSearchPage)

    async def delete(self, field_id: str) -> tuple[TaskScheme, ResponseScheme]:
        """Delete a custom field; Jira runs it as an asynchronous task."""

        if not field_id:
            raise NoFieldIDError()
        return await self._fetch("DELETE", self._endpoint(f"field/{field_id}"), TaskScheme)
