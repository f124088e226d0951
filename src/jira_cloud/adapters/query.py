"""Query-string encoding.

Jira endpoints take plain `key=value` pairs. Pairs are emitted sorted by key
(stable, so repeated keys keep their insertion order), spaces become `+` and
reserved characters are percent-encoded (`,` becomes `%2C`).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote_plus, urlencode

Pairs = Iterable[tuple[str, Any]]


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_params(pairs: Pairs | Mapping[str, Any]) -> str:
    """Encode `pairs` into a query string (without the leading `?`).

    `None` values are skipped; booleans become `true` / `false`.
    """

    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    cleaned = [(key, _format_value(value)) for key, value in items if value is not None]
    cleaned.sort(key=lambda pair: pair[0])
    return urlencode(cleaned, quote_via=quote_plus)


def with_query(endpoint: str, pairs: Pairs | Mapping[str, Any]) -> str:
    """Append the encoded `pairs` to `endpoint` when there are any."""

    query = encode_params(pairs)
    if not query:
        return endpoint
    return f"{endpoint}?{query}"


def paginated(start_at: int, max_results: int) -> list[tuple[str, Any]]:
    return [("startAt", start_at), ("maxResults", max_results)]
