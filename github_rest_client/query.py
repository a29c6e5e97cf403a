"""Query-string helpers."""

from typing import Mapping
from urllib.parse import quote


def build_query_string(params: Mapping[str, str | None]) -> str:
    """Encode params as a query string, skipping None and empty values.

    Keys and values are percent-encoded; entries keep the mapping's order.
    """
    return "&".join(
        f"{quote(key, safe='')}={quote(value, safe='')}"
        for key, value in params.items()
        if value
    )


def pagination_params(
    since: str | None = None,
    per_page: str | None = None,
    page: str | None = None,
) -> dict[str, str | None]:
    return {"since": since, "per_page": per_page, "page": page}


def with_query(path: str, params: Mapping[str, str | None]) -> str:
    """Append the encoded params to path, leaving it bare when nothing survives."""
    query = build_query_string(params)
    return f"{path}?{query}" if query else path
