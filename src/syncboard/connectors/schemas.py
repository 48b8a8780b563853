"""Pydantic v2 schemas for connector endpoints."""

from datetime import datetime
from typing import Any, Literal

from syncboard.core.schemas import ApiResponse, BackendModel

ConnectorType = Literal["source", "destination"]


class ConnectorAttributes(BackendModel):
    name: str | None = None
    icon: str | None = None
    connector_type: ConnectorType | None = None
    connector_category: str | None = None
    description: str | None = None
    configuration: dict[str, Any] = {}
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Connector(BackendModel):
    id: str
    type: str
    attributes: ConnectorAttributes


ConnectorListResponse = ApiResponse[list[Connector]]
ConnectorInfoResponse = ApiResponse[Connector]
