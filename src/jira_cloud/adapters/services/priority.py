"""Issue priorities."""

from __future__ import annotations

from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import NoPriorityIDError
from jira_cloud.core.domain.models import Priority
from jira_cloud.core.domain.response import ResponseScheme


class PriorityService(Service):
    async def gets(self) -> tuple[list[Priority], ResponseScheme]:
        return await self._fetch("GET", self._endpoint("priority"), list[Priority])

    async def get(self, priority_id: str) -> tuple[Priority, ResponseScheme]:
        if not priority_id:
            raise NoPriorityIDError()
        return await self._fetch("GET", self._endpoint(f"priority/{priority_id}"), Priority)
