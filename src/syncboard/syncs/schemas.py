"""Pydantic v2 schemas for syncs, sync runs and catalog discovery."""

from datetime import datetime
from enum import Enum

from syncboard.core.schemas import ApiResponse, BackendModel


# ---------------------------------------------------------------------------
# Catalog discovery
# ---------------------------------------------------------------------------

class StreamProperty(BackendModel):
    type: str | list[str]


class StreamJsonSchema(BackendModel):
    type: str | None = None
    properties: dict[str, StreamProperty] = {}


class CatalogStream(BackendModel):
    name: str
    json_schema: StreamJsonSchema
    supported_sync_modes: list[str] = []


class Catalog(BackendModel):
    streams: list[CatalogStream] = []


class CatalogDiscoveryAttributes(BackendModel):
    catalog: Catalog
    connector_id: int | None = None


class CatalogDiscovery(BackendModel):
    id: str
    type: str
    attributes: CatalogDiscoveryAttributes


# ---------------------------------------------------------------------------
# Syncs
# ---------------------------------------------------------------------------

class SyncRunStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELED = "canceled"


class SyncAttributes(BackendModel):
    name: str | None = None
    status: str | None = None
    source_id: int | None = None
    destination_id: int | None = None
    schedule_type: str | None = None
    sync_interval: int | None = None
    sync_interval_unit: str | None = None
    stream_name: str | None = None
    sync_mode: str | None = None
    cursor_field: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Sync(BackendModel):
    id: str
    type: str
    attributes: SyncAttributes


class SyncRunAttributes(BackendModel):
    sync_id: int
    status: SyncRunStatus
    total_rows: int = 0
    successful_rows: int = 0
    failed_rows: int = 0
    started_at: datetime | None = None
    finished_at: datetime | None = None
    duration: float | None = None
    error_message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SyncRun(BackendModel):
    """One execution of a sync, owned by ``attributes.sync_id``."""

    id: str
    type: str
    attributes: SyncRunAttributes


DiscoverResponse = ApiResponse[CatalogDiscovery]
SyncListResponse = ApiResponse[list[Sync]]
SyncResponse = ApiResponse[Sync]
SyncRunListResponse = ApiResponse[list[SyncRun]]
SyncRunResponse = ApiResponse[SyncRun]
