"""httpx wrapper.

Why a wrapper:
- One place for the timeout, `Accept` header and redirect policy, so every
  `JiraClient` talks to the API the same way.
- Tests inject an `httpx.MockTransport` here instead of patching httpx.

Per-request headers (credentials, User-Agent) belong to
`AuthenticationService`, not to this client.
"""

from __future__ import annotations

import httpx

from jira_cloud.core.config import JiraSettings


def build_async_client(
    settings: JiraSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the client's defaults.

    Redirects are followed: asynchronous Jira operations answer with
    `303 See Other` pointing at the task resource, which is fetched in turn.
    """

    settings = settings or JiraSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={"Accept": "application/json"},
        transport=transport,
    )
