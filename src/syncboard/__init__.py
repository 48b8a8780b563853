"""Typed async client for the connectors / models / syncs / reports backend."""

from syncboard.api import SyncboardApi
from syncboard.connectors.api import ConnectorsResource
from syncboard.connectors.schemas import (
    Connector,
    ConnectorInfoResponse,
    ConnectorListResponse,
)
from syncboard.core.client import ApiClient, api_client, api_fetch, create_api_client
from syncboard.core.schemas import ApiError, ApiResponse, Links, RequestMethod
from syncboard.models.api import ModelsResource
from syncboard.models.schemas import (
    ALL_DATA_MODELS,
    ALL_DATA_MODELS_WITHOUT_DYNAMIC_SQL,
    Field,
    Model,
    ModelAttributes,
)
from syncboard.reports.api import ReportsResource
from syncboard.reports.schemas import (
    Report,
    ReportDataPoint,
    ReportMetric,
    ReportTimePeriod,
)
from syncboard.syncs.api import SyncsResource
from syncboard.syncs.schemas import (
    Catalog,
    CatalogStream,
    DiscoverResponse,
    Sync,
    SyncRun,
    SyncRunStatus,
)
from syncboard.util.logging import setup_logging
from syncboard.util.query import build_url_with_params

__all__ = [
    "ALL_DATA_MODELS",
    "ALL_DATA_MODELS_WITHOUT_DYNAMIC_SQL",
    "ApiClient",
    "ApiError",
    "ApiResponse",
    "Catalog",
    "CatalogStream",
    "Connector",
    "ConnectorInfoResponse",
    "ConnectorListResponse",
    "ConnectorsResource",
    "DiscoverResponse",
    "Field",
    "Links",
    "Model",
    "ModelAttributes",
    "ModelsResource",
    "Report",
    "ReportDataPoint",
    "ReportMetric",
    "ReportTimePeriod",
    "ReportsResource",
    "RequestMethod",
    "Sync",
    "SyncRun",
    "SyncRunStatus",
    "SyncboardApi",
    "SyncsResource",
    "api_client",
    "api_fetch",
    "build_url_with_params",
    "create_api_client",
    "setup_logging",
]
