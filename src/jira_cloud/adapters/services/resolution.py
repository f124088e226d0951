"""Issue resolutions."""

from __future__ import annotations

from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import NoResolutionIDError
from jira_cloud.core.domain.models import Resolution
from jira_cloud.core.domain.response import ResponseScheme


class ResolutionService(Service):
    async def gets(self) -> tuple[list[Resolution], ResponseScheme]:
        return await self._fetch("GET", self._endpoint("resolution"), list[Resolution])

    async def get(self, resolution_id: str) -> tuple[Resolution, ResponseScheme]:
        if not resolution_id:
            raise NoResolutionIDError()
        return await self._fetch("GET", self._endpoint(f"resolution/{resolution_id}"), Resolution)
