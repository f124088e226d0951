"""Server information."""

from __future__ import annotations

from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.models import ServerInformation
from jira_cloud.core.domain.response import ResponseScheme


class ServerService(Service):
    async def info(self) -> tuple[ServerInformation, ResponseScheme]:
        return await self._fetch("GET", self._endpoint("serverInfo"), ServerInformation)
