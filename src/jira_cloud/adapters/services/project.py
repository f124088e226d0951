"""Projects: `rest/api/{v}/project`."""

from __future__ import annotations

from collections.abc import Sequence

from jira_cloud.adapters.query import paginated
from jira_cloud.adapters.services.base import Service
from jira_cloud.adapters.services.project_role import ProjectRoleService
from jira_cloud.adapters.services.project_version import ProjectVersionService
from jira_cloud.core.domain.errors import NoPayloadError, NoProjectIDOrKeyError
from jira_cloud.core.domain.models import (
    NewProjectCreated,
    Project,
    ProjectPayload,
    ProjectSearchOptions,
    ProjectSearchPage,
    ProjectStatusPage,
    ProjectUpdatePayload,
    TaskScheme,
)
from jira_cloud.core.domain.response import ResponseScheme
from jira_cloud.core.interfaces.connector import JiraConnector


class ProjectService(Service):
    def __init__(self, client: JiraConnector) -> None:
        super().__init__(client)
        self.role = ProjectRoleService(client)
        self.version = ProjectVersionService(client)

    async def create(self, payload: ProjectPayload) -> tuple[NewProjectCreated, ResponseScheme]:
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("POST", self._endpoint("project"), NewProjectCreated, payload)

    async def search(
        self,
        options: ProjectSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[ProjectSearchPage, ResponseScheme]:
        """Paginated project search.

        `ids` and `keys` are sent as repeated parameters; `type_keys`,
        `status`, `properties` and `expand` as comma-separated values.
        """

        params = paginated(start_at, max_results)
        if options is not None:
            if options.expand:
                params.append(("expand", ",".join(options.expand)))
            params.extend(("id", project_id) for project_id in options.ids)
            params.extend(("keys", key) for key in options.keys)
            if options.order_by:
                params.append(("orderBy", options.order_by))
            if options.query:
                params.append(("query", options.query))
            if options.type_keys:
                params.append(("typeKey", ",".join(options.type_keys)))
            if options.category_id:
                params.append(("categoryId", options.category_id))
            if options.action:
                params.append(("action", options.action))
            if options.status:
                params.append(("status", ",".join(options.status)))
            if options.properties:
                params.append(("properties", ",".join(options.properties)))
            if options.property_query:
                params.append(("propertyQuery", options.property_query))
        return await self._fetch("GET", self._endpoint("project/search", params), ProjectSearchPage)

    async def get(self, project_key_or_id: str, expand: Sequence[str] | None = None) -> tuple[Project, ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        params = [("expand", ",".join(expand))] if expand else []
        return await self._fetch("GET", self._endpoint(f"project/{project_key_or_id}", params), Project)

    async def update(self, project_key_or_id: str, payload: ProjectUpdatePayload) -> tuple[Project, ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("PUT", self._endpoint(f"project/{project_key_or_id}"), Project, payload)

    async def delete(self, project_key_or_id: str, enable_undo: bool = True) -> ResponseScheme:
        """Delete a project; with `enable_undo` it goes to the recycle bin."""

        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        endpoint = self._endpoint(f"project/{project_key_or_id}", [("enableUndo", enable_undo)])
        return await self._execute("DELETE", endpoint)

    async def delete_asynchronously(self, project_key_or_id: str) -> tuple[TaskScheme, ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        return await self._fetch("POST", self._endpoint(f"project/{project_key_or_id}/delete"), TaskScheme)

    async def archive(self, project_key_or_id: str) -> ResponseScheme:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        return await self._execute("POST", self._endpoint(f"project/{project_key_or_id}/archive"))

    async def restore(self, project_key_or_id: str) -> tuple[Project, ResponseScheme]:
        """Restore a project from the recycle bin or the archive."""

        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        return await self._fetch("POST", self._endpoint(f"project/{project_key_or_id}/restore"), Project)

    async def statuses(self, project_key_or_id: str) -> tuple[list[ProjectStatusPage], ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        return await self._fetch(
            "GET", self._endpoint(f"project/{project_key_or_id}/statuses"), list[ProjectStatusPage]
        )
