"""Base classes shared by every Jira DTO.

Jira speaks camelCase JSON and omits keys freely, so:
- every field is optional;
- aliases are generated from the snake_case field names;
- unknown keys are ignored so new API fields never break decoding;
- payloads are dumped by alias without `None` values (the JSON `omitempty`).
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

T = TypeVar("T")


class JiraModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PageScheme(JiraModel, Generic[T]):
    """Offset-paginated listing (`startAt` / `maxResults` / `values`)."""

    self_url: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int | None = None
    start_at: int | None = None
    total: int | None = None
    is_last: bool | None = None
    values: list[T] = Field(default_factory=list)


class AvatarURLs(JiraModel):
    px16: str | None = Field(default=None, alias="16x16")
    px24: str | None = Field(default=None, alias="24x24")
    px32: str | None = Field(default=None, alias="32x32")
    px48: str | None = Field(default=None, alias="48x48")
