"""Base class for typed REST resources.

A resource knows its base path and forwards every call through the injected
:class:`~syncboard.core.client.ApiClient`, wrapping the returned body in the
declared :class:`~syncboard.core.schemas.ApiResponse` shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from syncboard.core.client import ApiClient, api_client
from syncboard.core.schemas import ApiResponse
from syncboard.util.query import ParamValue, build_url_with_params

R = TypeVar("R", bound=ApiResponse)


class Resource:
    """One backend resource family rooted at ``base_path``."""

    base_path: str = ""

    def __init__(self, client: ApiClient | None = None) -> None:
        self.client = client if client is not None else api_client

    def path(self, *segments: Any, params: Mapping[str, ParamValue] | None = None) -> str:
        """Join *segments* under ``base_path`` and append *params*.

        With ``base_path = "/syncs"``, ``path(12, "sync_runs", params={"page": 2})``
        gives ``/syncs/12/sync_runs?page=2``.
        """
        url = "/".join([self.base_path, *(str(s) for s in segments)])
        if params:
            url = build_url_with_params(url, params)
        return url

    async def _request(
        self,
        shape: type[R],
        url: str,
        method: str = "get",
        data: Any = None,
        options: dict[str, Any] | None = None,
    ) -> R:
        body = await self.client.fetch(url, method=method, data=data, options=options)
        return shape.from_body(body)
