"""Connector endpoints: list, inspect and delete workspace connectors."""

from __future__ import annotations

from syncboard.connectors.schemas import (
    ConnectorInfoResponse,
    ConnectorListResponse,
    ConnectorType,
)
from syncboard.core.resource import Resource


class ConnectorsResource(Resource):
    base_path = "/connectors"

    async def get_user_connectors(
        self,
        connector_type: ConnectorType,
        page: int = 1,
        per_page: int = 10,
    ) -> ConnectorListResponse:
        """Return one page of the workspace's source or destination connectors."""
        url = self.path(params={"type": connector_type, "page": page, "per_page": per_page})
        return await self._request(ConnectorListResponse, url)

    async def get_all_connectors(self) -> ConnectorListResponse:
        """Return every connector, without filters."""
        return await self._request(ConnectorListResponse, self.path())

    async def get_connector_info(self, connector_id: str) -> ConnectorInfoResponse:
        return await self._request(ConnectorInfoResponse, self.path(connector_id))

    async def delete_connector(self, connector_id: str) -> ConnectorInfoResponse:
        return await self._request(ConnectorInfoResponse, self.path(connector_id), method="delete")
