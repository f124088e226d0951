"""Issue links and issue link types."""

from __future__ import annotations

from jira_cloud.adapters.services.base import Service
from jira_cloud.core.domain.errors import (
    NoIssueKeyOrIDError,
    NoIssueLinkIDError,
    NoLinkTypeIDError,
    NoPayloadError,
)
from jira_cloud.core.domain.models import (
    IssueLink,
    IssueLinkPage,
    IssueLinkType,
    IssueLinkTypeSearch,
    LinkPayload,
)
from jira_cloud.core.domain.response import ResponseScheme
from jira_cloud.core.interfaces.connector import JiraConnector


class IssueLinkService(Service):
    def __init__(self, client: JiraConnector) -> None:
        super().__init__(client)
        self.type = IssueLinkTypeService(client)

    async def create(self, payload: LinkPayload) -> ResponseScheme:
        """Link two issues. Jira answers 201 with an empty body."""

        if payload is None:
            raise NoPayloadError()
        return await self._execute("POST", self._endpoint("issueLink"), payload)

    async def get(self, link_id: str) -> tuple[IssueLink, ResponseScheme]:
        if not link_id:
            raise NoIssueLinkIDError()
        return await self._fetch("GET", self._endpoint(f"issueLink/{link_id}"), IssueLink)

    async def gets(self, issue_key_or_id: str) -> tuple[IssueLinkPage, ResponseScheme]:
        """All links of one issue (the issue fetched with `fields=issuelinks`)."""

        if not issue_key_or_id:
            raise NoIssueKeyOrIDError()
        endpoint = self._endpoint(f"issue/{issue_key_or_id}", [("fields", "issuelinks")])
        return await self._fetch("GET", endpoint, IssueLinkPage)

    async def delete(self, link_id: str) -> ResponseScheme:
        if not link_id:
            raise NoIssueLinkIDError()
        return await self._execute("DELETE", self._endpoint(f"issueLink/{link_id}"))


class IssueLinkTypeService(Service):
    async def gets(self) -> tuple[IssueLinkTypeSearch, ResponseScheme]:
        return await self._fetch("GET", self._endpoint("issueLinkType"), IssueLinkTypeSearch)

    async def get(self, link_type_id: str) -> tuple[IssueLinkType, ResponseScheme]:
        if not link_type_id:
            raise NoLinkTypeIDError()
        return await self._fetch("GET", self._endpoint(f"issueLinkType/{link_type_id}"), IssueLinkType)

    async def create(self, payload: IssueLinkType) -> tuple[IssueLinkType, ResponseScheme]:
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("POST", self._endpoint("issueLinkType"), IssueLinkType, payload)

    async def update(self, link_type_id: str, payload: IssueLinkType) -> tuple[IssueLinkType, ResponseScheme]:
        if not link_type_id:
            raise NoLinkTypeIDError()
        if payload is None:
            raise NoPayloadError()
        return await self._fetch("PUT", self._endpoint(f"issueLinkType/{link_type_id}"), IssueLinkType, payload)

    async def delete(self, link_type_id: str) -> ResponseScheme:
        if not link_type_id:
            raise NoLinkTypeIDError()
        return await self._execute("DELETE", self._endpoint(f"issueLinkType/{link_type_id}"))
