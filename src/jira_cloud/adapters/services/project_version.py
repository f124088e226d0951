"""Project versions."""

from __future__ import annotations

from collections.abc import Sequence

from jira_cloud.adapters.query import paginated
from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import (
    NoPayloadError,
    NoProjectIDError,
    NoProjectIDOrKeyError,
    NoVersionIDError,
    NoVersionNameError,
)
from jira_cloud.core.domain.models import (
    Version,
    VersionIssueCounts,
    VersionPage,
    VersionPayload,
    VersionSearchOptions,
    VersionUnresolvedIssuesCount,
)
from jira_cloud.core.domain.response import ResponseScheme


class ProjectVersionService(Service):
    async def gets(self, project_key_or_id: str) -> tuple[list[Version], ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        return await self._fetch("GET", self._endpoint(f"project/{project_key_or_id}/versions"), list[Version])

    async def search(
        self,
        project_key_or_id: str,
        options: VersionSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[VersionPage, ResponseScheme]:
        if not project_key_or_id:
            raise NoProjectIDOrKeyError()
        params = paginated(start_at, max_results)
        if options is not None:
            if options.expand:
                params.append(("expand", ",".join(options.expand)))
            if options.query:
                params.append(("query", options.query))
            if options.status:
                params.append(("status", options.status))
            if options.order_by:
                params.append(("orderBy", options.order_by))
        return await self._fetch(
            "GET", self._endpoint(f"project/{project_key_or_id}/version", params), VersionPage
        )

    async def create(self, payload: VersionPayload) -> tuple[Version, ResponseScheme]:
        if payload is None:
            raise NoPayloadError()
        if not payload.name:
            raise NoVersionNameError()
        if not payload.project_id:
            raise NoProjectIDError()
        return await self._fetch("POST", self._endpoint("version"), Version, payload)

    async def get(self, version_id: str, expand: Sequence[str] | None = None) -> tuple[Version, ResponseScheme]:
        if not version_id:
            raise NoVersionIDError()
        params = [("expand", ",".join(expand))] if expand else []
        return await self._fetch("GET", self._endpoint(f"version/{version_id}", params), Version)

    async def update(self, version_id: str, payload: VersionPayload) -> tuple[Version, ResponseScheme]:
        if not version_id:
            raise NoVersionIDError()
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("PUT", self._endpoint(f"version/{version_id}"), Version, payload)

    async def merge(self, version_id: str, move_issues_to: str) -> ResponseScheme:
        """Move every issue of `version_id` to `move_issues_to` and delete it."""

        if not version_id or not move_issues_to:
            raise NoVersionIDError()
        return await self._execute("PUT", self._endpoint(f"version/{version_id}/mergeto/{move_issues_to}"))

    async def related_issue_counts(self, version_id: str) -> tuple[VersionIssueCounts, ResponseScheme]:
        if not version_id:
            raise NoVersionIDError()
        return await self._fetch(
            "GET", self._endpoint(f"version/{version_id}/relatedIssueCounts"), VersionIssueCounts
        )

    async def unresolved_issue_count(self, version_id: str) -> tuple[VersionUnresolvedIssuesCount, ResponseScheme]:
        if not version_id:
            raise NoVersionIDError()
        return await self._fetch(
            "GET", self._endpoint(f"version/{version_id}/unresolvedIssueCount"), VersionUnresolvedIssuesCount
        )
