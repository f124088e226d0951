"""Users: `rest/api/{v}/user`."""

from __future__ import annotations

from collections.abc import Sequence

from jira_cloud.adapters.query import paginated
from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import NoAccountIDError, NoAccountIDsError, NoPayloadError
from jira_cloud.core.domain.models import User, UserDetail, UserGroup, UserPayload, UserSearchPage
from jira_cloud.core.domain.response import ResponseScheme


class UserService(Service):
    async def get(self, account_id: str, expand: Sequence[str] | None = None) -> tuple[UserDetail, ResponseScheme]:
        if not account_id:
            raise NoAccountIDError()
        params = [("accountId", account_id)]
        if expand:
            params.append(("expand", ",".join(expand)))
        return await self._fetch("GET", self._endpoint("user", params), UserDetail)

    async def create(self, payload: UserPayload) -> tuple[UserDetail, ResponseScheme]:
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("POST", self._endpoint("user"), UserDetail, payload)

    async def delete(self, account_id: str) -> ResponseScheme:
        if not account_id:
            raise NoAccountIDError()
        return await self._execute("DELETE", self._endpoint("user", [("accountId", account_id)]))

    async def find(
        self, account_ids: Sequence[str], start_at: int = 0, max_results: int = 50
    ) -> tuple[UserSearchPage, ResponseScheme]:
        """Bulk lookup by account ID."""

        if not account_ids:
            raise NoAccountIDsError()
        params = paginated(start_at, max_results)
        params.extend(("accountId", account_id) for account_id in account_ids)
        return await self._fetch("GET", self._endpoint("user/bulk", params), UserSearchPage)

    async def groups(self, account_id: str) -> tuple[list[UserGroup], ResponseScheme]:
        if not account_id:
            raise NoAccountIDError()
        return await self._fetch(
            "GET", self._endpoint("user/groups", [("accountId", account_id)]), list[UserGroup]
        )

    async def gets(self, start_at: int = 0, max_results: int = 50) -> tuple[list[User], ResponseScheme]:
        """All users, including app and inactive accounts."""

        return await self._fetch("GET", self._endpoint("users/search", paginated(start_at, max_results)), list[User])
