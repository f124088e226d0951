"""Async Jira Cloud client.

`JiraClient` owns the `httpx.AsyncClient`, the site URL and the credentials.
Every service builds its requests with `new_request` and sends them with
`call`, which is where status checking and JSON decoding happen.

Why a single client object:
- Services never touch httpx; they only see `new_request` and `call`.
- Credentials and the User-Agent live in `AuthenticationService` and can be
  changed after construction.
- Every failure leaves this module as a `JiraError` subclass.
"""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any
from urllib.parse import urljoin

import httpx
from pydantic import TypeAdapter, ValidationError

from jira_cloud.adapters.http_client import build_async_client
from jira_cloud.adapters.services import (
    DashboardService,
    IssueService,
    PermissionService,
    ProjectService,
    ScreenService,
    ServerService,
    TaskService,
    UserService,
    WorkflowService,
)
from jira_cloud.core.config import SUPPORTED_API_VERSIONS, JiraSettings
from jira_cloud.core.domain.errors import (
    InvalidAPIVersionError,
    JiraDecodeError,
    JiraRequestError,
    JiraTransportError,
    NoSiteError,
)
from jira_cloud.core.domain.models.base import JiraModel
from jira_cloud.core.domain.response import ResponseScheme

logger = logging.getLogger(__name__)


class AuthenticationService:
    """Credentials and User-Agent applied to every request."""

    def __init__(self) -> None:
        self.mail: str = ""
        self.token: str = ""
        self.bearer_token: str = ""
        self.user_agent: str = ""

    def set_basic_auth(self, mail: str, token: str) -> None:
        self.mail = mail
        self.token = token

    def set_bearer_token(self, token: str) -> None:
        self.bearer_token = token

    def set_user_agent(self, agent: str) -> None:
        self.user_agent = agent

    @property
    def has_basic_auth(self) -> bool:
        return bool(self.mail) and bool(self.token)

    def headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"
        elif self.has_basic_auth:
            raw = f"{self.mail}:{self.token}".encode()
            headers["Authorization"] = "Basic " + base64.b64encode(raw).decode("ascii")
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _dump_payload(payload: Any) -> Any:
    if isinstance(payload, JiraModel):
        return payload.to_payload()
    if isinstance(payload, Mapping):
        return {key: _dump_payload(value) for key, value in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [_dump_payload(item) for item in payload]
    return payload


class JiraClient:
    """Entry point: holds the transport and exposes every service.

    Usage::

        async with JiraClient("https://your-domain.atlassian.net") as client:
            client.auth.set_basic_auth("me@example.com", "api-token")
            dashboards, response = await client.dashboard.gets()
    """

    def __init__(
        self,
        site: str,
        *,
        settings: JiraSettings | None = None,
        api_version: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not site:
            raise NoSiteError()

        settings = settings or JiraSettings(_env_file=None)
        api_version = str(api_version or settings.api_version)
        if api_version not in SUPPORTED_API_VERSIONS:
            raise InvalidAPIVersionError()

        if not site.endswith("/"):
            site += "/"

        self.site = site
        self.api_version = api_version
        self.settings = settings
        self._owns_http = http_client is None
        self.http = http_client or build_async_client(settings, transport=transport)

        self.auth = AuthenticationService()
        if settings.user_agent:
            self.auth.set_user_agent(settings.user_agent)
        if settings.has_bearer_token:
            self.auth.set_bearer_token(settings.bearer_token.get_secret_value())
        elif settings.has_basic_auth:
            self.auth.set_basic_auth(settings.mail, settings.token.get_secret_value())

        self.dashboard = DashboardService(self)
        self.issue = IssueService(self)
        self.permission = PermissionService(self)
        self.project = ProjectService(self)
        self.screen = ScreenService(self)
        self.server = ServerService(self)
        self.task = TaskService(self)
        self.user = UserService(self)
        self.workflow = WorkflowService(self)

    @classmethod
    def from_settings(
        cls,
        settings: JiraSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "JiraClient":
        """Build a client from `JiraSettings` (environment / `.env`)."""

        settings = settings or JiraSettings()
        return cls(settings.site, settings=settings, transport=transport)

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    def new_request(self, method: str, endpoint: str, payload: Any = None) -> httpx.Request:
        """Build a request for `endpoint`, resolved against the site.

        Payloads are serialised as JSON: pydantic models by alias without
        `None` fields, mappings and lists as given.
        """

        url = urljoin(self.site, endpoint)
        headers = {"Accept": "application/json"}
        content: bytes | None = None
        if payload is not None:
            content = json.dumps(_dump_payload(payload)).encode("utf-8")
            headers["Content-Type"] = "application/json"
        headers.update(self.auth.headers())
        return self.http.build_request(method, url, headers=headers, content=content)

    async def call(self, request: httpx.Request, result_type: Any = None) -> tuple[Any, ResponseScheme]:
        """Send `request` and decode the body into `result_type`.

        Returns `(result, envelope)`; `result` is `None` when no type is given.

        Raises:
            JiraTransportError: the request could not be delivered.
            JiraRequestError: non-2xx status.
            JiraDecodeError: the body does not decode into `result_type`.
        """

        logger.debug("%s %s", request.method, request.url)
        if self.http.is_closed:
            raise JiraTransportError(f"{request.method} {request.url}: client is closed")
        try:
            response = await self.http.send(request)
        except httpx.HTTPError as exc:
            raise JiraTransportError(f"{request.method} {request.url}: {exc}") from exc

        envelope = ResponseScheme.from_httpx(response)
        if not envelope.ok:
            logger.warning(
                "%s %s answered with status %d", envelope.method, envelope.endpoint, envelope.code
            )
            raise JiraRequestError(envelope)

        if result_type is None:
            return None, envelope

        try:
            result = _adapter(result_type).validate_json(envelope.bytes)
        except ValidationError as exc:
            raise JiraDecodeError(f"unable to decode response body: {exc}", envelope) from exc
        return result, envelope
