"""Permissions, permission schemes and permission grants."""

from __future__ import annotations

from collections.abc import Sequence

from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import (
    NoPayloadError,
    NoPermissionGrantIDError,
    NoPermissionKeysError,
    NoPermissionSchemeIDError,
)
from jira_cloud.core.domain.models import (
    PermissionCheckPayload,
    PermissionGrant,
    PermissionGrantPayload,
    PermissionGrants,
    PermissionPage,
    PermissionScheme,
    PermissionSchemeGrants,
    PermissionSchemePage,
    PermittedProjects,
)
from jira_cloud.core.domain.response import ResponseScheme
from jira_cloud.core.interfaces.connector import JiraConnector


def _expand(expand: Sequence[str] | None) -> list[tuple[str, str]]:
    return [("expand", ",".join(expand))] if expand else []


class PermissionService(Service):
    def __init__(self, client: JiraConnector) -> None:
        super().__init__(client)
        self.scheme = PermissionSchemeService(client)

    async def gets(self) -> tuple[PermissionPage, ResponseScheme]:
        """Every permission known to the instance, global and project."""

        return await self._fetch("GET", self._endpoint("permissions"), PermissionPage)

    async def check(self, payload: PermissionCheckPayload) -> tuple[PermissionGrants, ResponseScheme]:
        """Which of the requested global and project permissions a user holds."""

        if payload is None:
            raise NoPayloadError()
        return await self._fetch("POST", self._endpoint("permissions/check"), PermissionGrants, payload)

    async def projects(self, permissions: Sequence[str]) -> tuple[PermittedProjects, ResponseScheme]:
        """Projects where the current user holds all of `permissions`."""

        if not permissions:
            raise NoPermissionKeysError()
        return await self._fetch(
            "POST",
            self._endpoint("permissions/project"),
            PermittedProjects,
            {"permissions": list(permissions)},
        )


class PermissionSchemeService(Service):
    def __init__(self, client: JiraConnector) -> None:
        super().__init__(client)
        self.grant = PermissionSchemeGrantService(client)

    async def gets(self) -> tuple[PermissionSchemePage, ResponseScheme]:
        return await self._fetch("GET", self._endpoint("permissionscheme"), PermissionSchemePage)

    async def get(
        self, permission_scheme_id: int, expand: Sequence[str] | None = None
    ) -> tuple[PermissionScheme, ResponseScheme]:
        if not permission_scheme_id:
            raise NoPermissionSchemeIDError()
        endpoint = self._endpoint(f"permissionscheme/{permission_scheme_id}", _expand(expand))
        return await self._fetch("GET", endpoint, PermissionScheme)

    async def create(self, payload: PermissionScheme) -> tuple[PermissionScheme, ResponseScheme]:
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("POST", self._endpoint("permissionscheme"), PermissionScheme, payload)

    async def update(
        self, permission_scheme_id: int, payload: PermissionScheme
    ) -> tuple[PermissionScheme, ResponseScheme]:
        if not permission_scheme_id:
            raise NoPermissionSchemeIDError()
        if payload is None:
            raise NoPayloadError()
        return await self._fetch(
            "PUT", self._endpoint(f"permissionscheme/{permission_scheme_id}"), PermissionScheme, payload
        )

    async def delete(self, permission_scheme_id: int) -> ResponseScheme:
        if not permission_scheme_id:
            raise NoPermissionSchemeIDError()
        return await self._execute("DELETE", self._endpoint(f"permissionscheme/{permission_scheme_id}"))


class PermissionSchemeGrantService(Service):
    async def create(
        self, permission_scheme_id: int, payload: PermissionGrantPayload
    ) -> tuple[PermissionGrant, ResponseScheme]:
        if not permission_scheme_id:
            raise NoPermissionSchemeIDError()
        if payload is None:
            raise NoPayloadError()
        return await self._fetch(
            "POST", self._endpoint(f"permissionscheme/{permission_scheme_id}/permission"), PermissionGrant, payload
        )

    async def gets(
        self, permission_scheme_id: int, expand: Sequence[str] | None = None
    ) -> tuple[PermissionSchemeGrants, ResponseScheme]:
        if not permission_scheme_id:
            raise NoPermissionSchemeIDError()
        endpoint = self._endpoint(f"permissionscheme/{permission_scheme_id}/permission", _expand(expand))
        return await self._fetch("GET", endpoint, PermissionSchemeGrants)

    async def get(
        self, permission_scheme_id: int, permission_grant_id: int, expand: Sequence[str] | None = None
    ) -> tuple[PermissionGrant, ResponseScheme]:
        if not permission_scheme_id:
            raise NoPermissionSchemeIDError()
        if not permission_grant_id:
            raise NoPermissionGrantIDError()
        endpoint = self._endpoint(
            f"permissionscheme/{permission_scheme_id}/permission/{permission_grant_id}", _expand(expand)
        )
        return await self._fetch("GET", endpoint, PermissionGrant)

    async def delete(self, permission_scheme_id: int, permission_grant_id: int) -> ResponseScheme:
        if not permission_scheme_id:
            raise NoPermissionSchemeIDError()
        if not permission_grant_id:
            raise NoPermissionGrantIDError()
        return await self._execute(
            "DELETE", self._endpoint(f"permissionscheme/{permission_scheme_id}/permission/{permission_grant_id}")
        )
