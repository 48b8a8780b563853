"""Pydantic v2 schemas for data models and query execution."""

from datetime import datetime

from syncboard.core.schemas import ApiResponse, BackendModel

# Model kinds accepted by the ``query_type`` filter of ``GET /models``
ALL_DATA_MODELS = (
    "raw_sql,dbt,soql,table_selector,dynamic_sql,unstructured,vector_search,semistructured"
)
ALL_DATA_MODELS_WITHOUT_DYNAMIC_SQL = (
    "raw_sql,dbt,soql,table_selector,unstructured,semistructured"
)

# One result row: column name -> scalar value
Field = dict[str, str | int | float | bool | None]


class ModelConnector(BackendModel):
    id: str
    name: str | None = None
    icon: str | None = None


class ModelAttributes(BackendModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    query: str
    query_type: str | None = None
    primary_key: str | None = None
    icon: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    connector: ModelConnector


class Model(BackendModel):
    """A saved query; ``attributes.query`` runs against ``attributes.connector``."""

    id: str
    type: str
    attributes: ModelAttributes


class QuerySourcePayload(BackendModel):
    query: str


ModelListResponse = ApiResponse[list[Model]]
ModelResponse = ApiResponse[Model]
QuerySourceResponse = ApiResponse[list[Field]]
