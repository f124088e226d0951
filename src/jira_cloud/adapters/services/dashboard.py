"""Dashboards: `rest/api/{v}/dashboard`."""

from __future__ import annotations

from jira_cloud.adapters.query import paginated
from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import NoDashboardIDError, NoPayloadError
from jira_cloud.core.domain.models import (
    Dashboard,
    DashboardPage,
    DashboardPayload,
    DashboardSearchOptions,
    DashboardSearchPage,
)
from jira_cloud.core.domain.response import ResponseScheme


class DashboardService(Service):
    async def gets(
        self, start_at: int = 0, max_results: int = 50, filter: str = ""
    ) -> tuple[DashboardPage, ResponseScheme]:
        """List dashboards; `filter` is `favourite` or `my`."""

        params = paginated(start_at, max_results)
        if filter:
            params.append(("filter", filter))
        return await self._fetch("GET", self._endpoint("dashboard", params), DashboardPage)

    async def create(self, payload: DashboardPayload) -> tuple[Dashboard, ResponseScheme]:
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("POST", self._endpoint("dashboard"), Dashboard, payload)

    async def search(
        self,
        options: DashboardSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[DashboardSearchPage, ResponseScheme]:
        """Search dashboards by owner, name or group share."""

        params = paginated(start_at, max_results)
        if options is not None:
            if options.owner_account_id:
                params.append(("accountId", options.owner_account_id))
            if options.dashboard_name:
                params.append(("dashboardName", options.dashboard_name))
            if options.group_permission_name:
                params.append(("groupname", options.group_permission_name))
            if options.order_by:
                params.append(("orderBy", options.order_by))
            if options.expand:
                params.append(("expand", ",".join(options.expand)))
        return await self._fetch("GET", self._endpoint("dashboard/search", params), DashboardSearchPage)

    async def get(self, dashboard_id: str) -> tuple[Dashboard, ResponseScheme]:
        if not dashboard_id:
            raise NoDashboardIDError()
        return await self._fetch("GET", self._endpoint(f"dashboard/{dashboard_id}"), Dashboard)

    async def delete(self, dashboard_id: str) -> ResponseScheme:
        if not dashboard_id:
            raise NoDashboardIDError()
        return await self._execute("DELETE", self._endpoint(f"dashboard/{dashboard_id}"))

    async def copy(self, dashboard_id: str, payload: DashboardPayload) -> tuple[Dashboard, ResponseScheme]:
        if not dashboard_id:
            raise NoDashboardIDError()
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("POST", self._endpoint(f"dashboard/{dashboard_id}/copy"), Dashboard, payload)

    async def update(self, dashboard_id: str, payload: DashboardPayload) -> tuple[Dashboard, ResponseScheme]:
        if not dashboard_id:
            raise NoDashboardIDError()
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("PUT", self._endpoint(f"dashboard/{dashboard_id}"), Dashboard, payload)
