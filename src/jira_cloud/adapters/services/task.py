"""Long-running asynchronous tasks."""

from __future__ import annotations

from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import NoTaskIDError
from jira_cloud.core.domain.models import TaskDetail
from jira_cloud.core.domain.response import ResponseScheme


class TaskService(Service):
    async def get(self, task_id: str) -> tuple[TaskDetail, ResponseScheme]:
        if not task_id:
            raise NoTaskIDError()
        return await self._fetch("GET", self._endpoint(f"task/{task_id}"), TaskDetail)

    async def cancel(self, task_id: str) -> ResponseScheme:
        """Request cancellation; Jira answers 202 Accepted."""

        if not task_id:
            raise NoTaskIDError()
        return await self._execute("POST", self._endpoint(f"task/{task_id}/cancel"))
