"""Sync, sync-run and catalog discovery endpoints."""

from __future__ import annotations

from syncboard.core.resource import Resource
from syncboard.syncs.schemas import (
    DiscoverResponse,
    SyncListResponse,
    SyncResponse,
    SyncRunListResponse,
    SyncRunResponse,
)
from syncboard.util.query import build_url_with_params


class SyncsResource(Resource):
    base_path = "/syncs"

    async def get_catalog(self, connector_id: str, refresh: bool = False) -> DiscoverResponse:
        """Discover the streams and columns a connector exposes.

        ``refresh=True`` asks the backend to skip its cached catalog.  The
        flag is always sent.
        """
        url = build_url_with_params(f"/connectors/{connector_id}/discover", {"refresh": refresh})
        return await self._request(DiscoverResponse, url)

    async def fetch_syncs(self, page: int = 1, per_page: int = 10) -> SyncListResponse:
        url = self.path(params={"page": page, "per_page": per_page})
        return await self._request(SyncListResponse, url)

    async def get_sync_by_id(self, sync_id: str) -> SyncResponse:
        return await self._request(SyncResponse, self.path(sync_id))

    async def get_sync_runs_by_sync_id(
        self,
        sync_id: str,
        page: int = 1,
        per_page: int = 10,
    ) -> SyncRunListResponse:
        url = self.path(sync_id, "sync_runs", params={"page": page, "per_page": per_page})
        return await self._request(SyncRunListResponse, url)

    async def get_sync_run_by_id(self, sync_id: str, sync_run_id: str) -> SyncRunResponse:
        return await self._request(SyncRunResponse, self.path(sync_id, "sync_runs", sync_run_id))
