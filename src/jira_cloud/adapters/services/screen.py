"""Screens: `rest/api/{v}/screens`."""

from __future__ import annotations

from typing import Any

from jira_cloud.adapters.query import paginated
from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import NoFieldIDError, NoScreenIDError, NoScreenNameError
from jira_cloud.core.domain.models import (
    AvailableScreenField,
    Screen,
    ScreenFieldPage,
    ScreenSearchOptions,
    ScreenSearchPage,
)
from jira_cloud.core.domain.response import ResponseScheme


class ScreenService(Service):
    async def fields(
        self, field_id: str, start_at: int = 0, max_results: int = 50
    ) -> tuple[ScreenFieldPage, ResponseScheme]:
        """Screens (and tabs) that contain `field_id`."""

        if not field_id:
            raise NoFieldIDError()
        endpoint = self._endpoint(f"field/{field_id}/screens", paginated(start_at, max_results))
        return await self._fetch("GET", endpoint, ScreenFieldPage)

    async def gets(
        self,
        options: ScreenSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[ScreenSearchPage, ResponseScheme]:
        params = paginated(start_at, max_results)
        if options is not None:
            params.extend(("id", screen_id) for screen_id in options.ids)
            if options.query_string:
                params.append(("queryString", options.query_string))
            params.extend(("scope", scope) for scope in options.scope)
            if options.order_by:
                params.append(("orderBy", options.order_by))
        return await self._fetch("GET", self._endpoint("screens", params), ScreenSearchPage)

    async def create(self, name: str, description: str = "") -> tuple[Screen, ResponseScheme]:
        if not name:
            raise NoScreenNameError()
        payload: dict[str, Any] = {"name": name}
        if description:
            payload["description"] = description
        return await self._fetch("POST", self._endpoint("screens"), Screen, payload)

    async def add_to_default(self, field_id: str) -> ResponseScheme:
        """Add a field to the default tab of the default screen."""

        if not field_id:
            raise NoFieldIDError()
        return await self._execute("POST", self._endpoint(f"screens/addToDefault/{field_id}"))

    async def update(self, screen_id: int, name: str = "", description: str = "") -> tuple[Screen, ResponseScheme]:
        if not screen_id:
            raise NoScreenIDError()
        payload: dict[str, Any] = {}
        if name:
            payload["name"] = name
        if description:
            payload["description"] = description
        return await self._fetch("PUT", self._endpoint(f"screens/{screen_id}"), Screen, payload)

    async def delete(self, screen_id: int) -> ResponseScheme:
        if not screen_id:
            raise NoScreenIDError()
        return await self._execute("DELETE", self._endpoint(f"screens/{screen_id}"))

    async def available(self, screen_id: int) -> tuple[list[AvailableScreenField], ResponseScheme]:
        """Fields that can still be added to the screen."""

        if not screen_id:
            raise NoScreenIDError()
        return await self._fetch(
            "GET", self._endpoint(f"screens/{screen_id}/availableFields"), list[AvailableScreenField]
        )
