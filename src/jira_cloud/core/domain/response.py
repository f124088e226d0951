"""Response envelope returned next to every decoded result."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass
class ResponseScheme:
    """Raw HTTP response plus the bits callers usually look at."""

    response: httpx.Response
    code: int
    endpoint: str
    method: str
    bytes: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "ResponseScheme":
        return cls(
            response=response,
            code=response.status_code,
            endpoint=str(response.request.url),
            method=response.request.method,
            bytes=response.content,
            headers=dict(response.headers),
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300

    @property
    def text(self) -> str:
        return self.bytes.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.bytes)
