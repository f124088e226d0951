"""Contract between the services and the HTTP client.

Services only need two things from the client: build a request for an
endpoint and send it.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx

from jira_cloud.core.domain.response import ResponseScheme


@runtime_checkable
class JiraConnector(Protocol):
    """Minimal surface a service depends on."""

    api_version: str

    def new_request(self, method: str, endpoint: str, payload: Any = None) -> httpx.Request:
        """Build a request for `endpoint` (relative to the site)."""

        ...

    async def call(self, request: httpx.Request, result_type: Any = None) -> tuple[Any, ResponseScheme]:
        """Send `request`; decode the body into `result_type` when given."""

        ...
