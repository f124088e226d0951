"""Project roles.

`GET project/{key}/role` returns `{"Developers": "https://.../role/10002"}`;
callers almost always want the numeric role IDs, so `gets` resolves them
with `extract_role_ids`.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import (
    JiraDecodeError,
    NoProjectIDOrKeyError,
    NoProjectRoleIDError,
    NoProjectRoleNameError,
)
from jira_cloud.core.domain.models import ProjectRole, ProjectRoleDetail
from jira_cloud.core.domain.response import ResponseScheme

_ROLE_ID = re.compile(r"[+-]?[0-9]+")


def extract_role_ids(roles: Mapping[str, Any]) -> dict[str, int]:
    """Map each role name to the integer in the last path segment of its URL.

    Raises:
        JiraDecodeError: a URL is not a string or its last segment is not an integer.
    """

    extracted: dict[str, int] = {}
    for name, link in roles.items():
        if not isinstance(link, str):
            raise JiraDecodeError(f"role {name!r}: expected a URL string, got {type(link).__name__}")
        segment = urlsplit(link).path.split("/")[-1]
        if not _ROLE_ID.fullmatch(segment):
            raise JiraDecodeError(f"role {name!r}: {segment!r} is not a role id")
        extracted[name] = int(segment)
    return extracted


class ProjectRoleService(Service):
    async def gets(self, project_key_or_id: str) -> tuple[dict[str, int], ResponseScheme]:
        """Role name to role ID for one project."""

        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        request = self._client.new_request("GET", self._endpoint(f"project/{project_key_or_id}/role"))
        _, response = await self._client.call(request)

        try:
            raw = json.loads(response.bytes)
        except ValueError as exc:
            raise JiraDecodeError(f"unable to decode response body: {exc}", response) from exc
        if not isinstance(raw, dict):
            raise JiraDecodeError("expected a JSON object of role URLs", response)

        try:
            return extract_role_ids(raw), response
        except JiraDecodeError as exc:
            raise JiraDecodeError(str(exc), response) from exc

    async def get(self, project_key_or_id: str, role_id: int) -> tuple[ProjectRole, ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        if not role_id:
            raise NoProjectRoleIDError()
        return await self._fetch("GET", self._endpoint(f"project/{project_key_or_id}/role/{role_id}"), ProjectRole)

    async def details(self, project_key_or_id: str) -> tuple[list[ProjectRoleDetail], ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        return await self._fetch(
            "GET", self._endpoint(f"project/{project_key_or_id}/roledetails"), list[ProjectRoleDetail]
        )

    async def global_roles(self) -> tuple[list[ProjectRole], ResponseScheme]:
        """Every project role defined on the instance."""

        return await self._fetch("GET", self._endpoint("role"), list[ProjectRole])

    async def create(self, name: str, description: str = "") -> tuple[ProjectRole, ResponseScheme]:
        if not name:
            raise NoProjectRoleNameError()
        payload: dict[str, Any] = {"name": name}
        if description:
            payload["description"] = description
        return await self._fetch("POST", self._endpoint("role"), ProjectRole, payload)
