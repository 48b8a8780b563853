"""Facade bundling every endpoint resource over one shared client."""

from __future__ import annotations

from typing import Any

from syncboard.connectors.api import ConnectorsResource
from syncboard.core.client import ApiClient, api_client
from syncboard.models.api import ModelsResource
from syncboard.reports.api import ReportsResource
from syncboard.syncs.api import SyncsResource


class SyncboardApi:
    """Entry point for dashboard code::

        api = SyncboardApi()
        syncs = await api.syncs.fetch_syncs(page=2, per_page=5)

    Pass an explicit :class:`ApiClient` to point at another backend or to use
    a fake transport; otherwise the process-wide client is shared.
    """

    def __init__(self, client: ApiClient | None = None) -> None:
        self.client = client if client is not None else api_client
        self.connectors = ConnectorsResource(self.client)
        self.models = ModelsResource(self.client)
        self.syncs = SyncsResource(self.client)
        self.reports = ReportsResource(self.client)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "SyncboardApi":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
