"""Model endpoints and query execution against connectors."""

from __future__ import annotations

from syncboard.core.resource import Resource
from syncboard.core.schemas import ApiError
from syncboard.models.schemas import (
    ALL_DATA_MODELS,
    ModelListResponse,
    ModelResponse,
    QuerySourcePayload,
    QuerySourceResponse,
)


class ModelsResource(Resource):
    base_path = "/models"

    async def query_source(self, connector_id: str, query: str) -> QuerySourceResponse:
        """Run *query* against a connector and return the result rows.

        This is the primary way dashboards fetch data.
        """
        payload = QuerySourcePayload(query=query)
        return await self._request(
            QuerySourceResponse,
            f"/connectors/{connector_id}/query_source",
            method="post",
            data=payload.model_dump(),
        )

    async def get_all_models(
        self,
        type: str = ALL_DATA_MODELS,
        page: int = 1,
        per_page: int = 10,
    ) -> ModelListResponse:
        """Return one page of models whose query type is in the comma list *type*."""
        url = self.path(params={"page": page, "per_page": per_page, "query_type": type})
        return await self._request(ModelListResponse, url)

    async def get_model_by_id(self, model_id: str) -> ModelResponse:
        return await self._request(ModelResponse, self.path(model_id))

    async def execute_model(self, model_id: str) -> QuerySourceResponse:
        """Fetch a model and run its query against the model's connector.

        When the lookup yields no model, a 404 envelope is returned and the
        query is never sent.
        """
        model_response = await self.get_model_by_id(model_id)

        if model_response.data is None:
            return QuerySourceResponse(
                status=404,
                errors=[ApiError(status=404, title="Not Found", detail="Model not found")],
            )

        attributes = model_response.data.attributes
        return await self.query_source(attributes.connector.id, attributes.query)
