"""Shared pytest fixtures: a JiraClient wired to an httpx.MockTransport."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from _pytest.config import Config

from jira_cloud import JiraClient, JiraSettings

SITE = "https://ctreminiom.atlassian.net"


class Route:
    """Canned answer for every request, recording what was sent."""

    def __init__(self, status: int = 200, body: Any = None, content: bytes | None = None) -> None:
        self.status = status
        self.body = body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status, content=self.content)
        if self.body is None:
            return httpx.Response(self.status)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last.content)


def make_settings(**overrides: Any) -> JiraSettings:
    values: dict[str, Any] = {
        "site": SITE,
        "mail": "example@atlassian.net",
        "token": "api-token",
        "bearer_token": "",
        "api_version": "3",
    }
    values.update(overrides)
    return JiraSettings(_env_file=None, **values)


def make_client(handler: Callable[[httpx.Request], httpx.Response], **settings: Any) -> JiraClient:
    resolved = make_settings(**settings)
    return JiraClient(resolved.site, settings=resolved, transport=httpx.MockTransport(handler))


@pytest.fixture
def jira() -> Callable[..., tuple[JiraClient, Route]]:
    """Factory: `client, route = jira(status=200, body={...})`."""

    def factory(
        status: int = 200,
        body: Any = None,
        *,
        content: bytes | None = None,
        api_version: str = "3",
    ) -> tuple[JiraClient, Route]:
        route = Route(status, body, content)
        return make_client(route, api_version=api_version), route

    return factory


@pytest.fixture
def client_for() -> Callable[..., JiraClient]:
    """Factory for a client answering through an arbitrary handler."""

    return make_client


def pytest_configure(config: Config) -> None:
    config.addinivalue_line("markers", "unit: pure functions, no I/O")
    config.addinivalue_line("markers", "cli: command line tests")
