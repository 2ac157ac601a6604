from __future__ import annotations
from typing import Any

import httpx

from billboi.core.config import settings


def fetch_json(
    path: str,
    params: dict[str, Any] | None = None,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Any:
    """GET ``path`` under the API base URL with the credential attached and return the decoded body."""
    query = dict(params or {})
    query["api-key"] = settings.nyt_api_key
    headers = {"User-Agent": f"{settings.app_name}/0.1", "Accept": "application/json"}
    with httpx.Client(
        base_url=settings.nyt_api_base_url.rstrip("/") + "/",
        timeout=timeout if timeout is not None else settings.request_timeout_seconds,
        follow_redirects=True,
        headers=headers,
        transport=transport,
    ) as client:
        resp = client.get(path.lstrip("/"), params=query)
        resp.raise_for_status()
        return resp.json()
