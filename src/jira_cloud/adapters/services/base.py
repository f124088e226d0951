"""Shared plumbing for the REST services."""

from __future__ import annotations

from typing import Any

from jira_cloud.adapters.query import Pairs, with_query
from jira_cloud.core.domain.response import ResponseScheme
from jira_cloud.core.interfaces.connector import JiraConnector


class Service:
    """Base class: one instance per group of endpoints, sharing the client."""

    def __init__(self, client: JiraConnector) -> None:
        self._client = client

    def _endpoint(self, path: str, params: Pairs | None = None) -> str:
        endpoint = f"rest/api/{self._client.api_version}/{path}"
        if params is None:
            return endpoint
        return with_query(endpoint, params)

    async def _fetch(self, method: str, endpoint: str, result_type: Any, payload: Any = None) -> tuple[Any, ResponseScheme]:
        request = self._client.new_request(method, endpoint, payload)
        return await self._client.call(request, result_type)

    async def _execute(self, method: str, endpoint: str, payload: Any = None) -> ResponseScheme:
        request = self._client.new_request(method, endpoint, payload)
        _, response = await self._client.call(request)
        return response
