"""Classic workflows: `rest/api/{v}/workflow`."""

from __future__ import annotations

from jira_cloud.adapters.query import paginated
from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import NoPayloadError, NoWorkflowIDError, NoWorkflowNameError
from jira_cloud.core.domain.models import WorkflowCreated, WorkflowPage, WorkflowPayload, WorkflowSearchOptions
from jira_cloud.core.domain.response import ResponseScheme


class WorkflowService(Service):
    async def gets(
        self,
        options: WorkflowSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[WorkflowPage, ResponseScheme]:
        """Paginated workflow search.

        When options are given `isActive` is always sent, so pass
        `is_active=True` to restrict the listing to active workflows.
        """

        params = paginated(start_at, max_results)
        if options is not None:
            params.append(("isActive", options.is_active))
            params.extend(("workflowName", name) for name in options.workflow_name)
            if options.query_string:
                params.append(("queryString", options.query_string))
            if options.order_by:
                params.append(("orderBy", options.order_by))
            if options.expand:
                params.append(("expand", ",".join(options.expand)))
        return await self._fetch("GET", self._endpoint("workflow/search", params), WorkflowPage)

    async def create(self, payload: WorkflowPayload) -> tuple[WorkflowCreated, ResponseScheme]:
        if payload is None:
            raise NoPayloadError()
        if not payload.name:
            raise NoWorkflowNameError()
        return await self._fetch("POST", self._endpoint("workflow"), WorkflowCreated, payload)

    async def delete(self, workflow_id: str) -> ResponseScheme:
        """Delete an inactive workflow by its entity ID."""

        if not workflow_id:
            raise NoWorkflowIDError()
        return await self._execute("DELETE", self._endpoint(f"workflow/{workflow_id}"))
