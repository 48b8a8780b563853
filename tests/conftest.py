"""Shared pytest fixtures for syncboard client tests.

Three kinds of fake backend are provided:

* ``backend`` -- an in-memory FastAPI application mimicking the real REST
  backend, mounted through ``httpx.ASGITransport`` so requests never leave
  the process.  Every request it receives is recorded on ``backend.state.requests``.
* ``make_client`` -- builds an ``ApiClient`` around an ``httpx.MockTransport``
  handler, for tests that need full control over the raw response or need the
  transport itself to fail.
* ``live_backend`` -- the same FastAPI application served by uvicorn on a
  localhost socket, for tests that need real HTTP/1.1 framing and real
  connection pooling.
"""

from __future__ import annotations

import threading
import time
from typing import Any, AsyncGenerator, Callable, Generator

import httpx
import pytest
import uvicorn
from fastapi import APIRouter, Body, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from syncboard.api import SyncboardApi
from syncboard.core.client import ApiClient
from syncboard.settings import Settings

API_HOST = "http://backend.test"


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

def connector_payload(connector_id: str, connector_type: str = "source") -> dict:
    return {
        "id": connector_id,
        "type": "connectors",
        "attributes": {
            "name": f"connector-{connector_id}",
            "icon": "postgres.svg",
            "connector_type": connector_type,
            "connector_category": "Data Warehouse",
            "description": "Warehouse connection",
            "configuration": {"host": "db.internal", "port": 5432},
            "created_at": "2024-05-01T10:00:00Z",
            "updated_at": "2024-05-02T10:00:00Z",
        },
    }


def model_payload(model_id: str, connector_id: str = "c-1") -> dict:
    return {
        "id": model_id,
        "type": "models",
        "attributes": {
            "id": model_id,
            "name": "Active users",
            "description": "Users active in the last day",
            "query": "SELECT id, email FROM users WHERE active = true",
            "query_type": "raw_sql",
            "primary_key": "id",
            "icon": "table.svg",
            "created_at": "2024-05-01T10:00:00Z",
            "updated_at": "2024-05-01T10:00:00Z",
            "connector": {"id": connector_id, "name": "warehouse", "icon": "postgres.svg"},
        },
    }


def sync_payload(sync_id: str) -> dict:
    return {
        "id": sync_id,
        "type": "syncs",
        "attributes": {
            "name": "users to crm",
            "status": "healthy",
            "source_id": 1,
            "destination_id": 2,
            "schedule_type": "interval",
            "sync_interval": 1,
            "sync_interval_unit": "hours",
            "stream_name": "users",
            "sync_mode": "incremental",
            "cursor_field": "updated_at",
            "created_at": "2024-05-01T10:00:00Z",
            "updated_at": "2024-05-01T10:00:00Z",
        },
    }


def sync_run_payload(sync_id: str, run_id: str, status: str = "success") -> dict:
    return {
        "id": run_id,
        "type": "sync_runs",
        "attributes": {
            "sync_id": int(sync_id),
            "status": status,
            "total_rows": 10,
            "successful_rows": 9,
            "failed_rows": 1,
            "started_at": "2024-05-01T10:00:00Z",
            "finished_at": None,
            "duration": None,
            "error_message": None,
            "created_at": "2024-05-01T10:00:00Z",
            "updated_at": "2024-05-01T10:00:00Z",
        },
    }


def not_found(detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"errors": [{"status": 404, "title": "Not Found", "detail": detail}]},
    )


CONNECTORS = {
    "c-1": connector_payload("c-1", "source"),
    "c-2": connector_payload("c-2", "destination"),
}
MODELS = {"m-1": model_payload("m-1", "c-1")}
SYNCS = {"12": sync_payload("12")}
SYNC_RUNS = {
    "12": {
        "100": sync_run_payload("12", "100", "success"),
        "101": sync_run_payload("12", "101", "failed"),
    }
}
ROWS = {"c-1": [{"id": 1, "email": "a@example.com"}, {"id": 2, "email": None}]}


# ---------------------------------------------------------------------------
# Fake backend
# ---------------------------------------------------------------------------

def create_backend() -> FastAPI:
    """Build the fake REST backend served under ``/api/v1``."""
    app = FastAPI()
    app.state.requests = []
    router = APIRouter(prefix="/api/v1")

    @app.middleware("http")
    async def record(request: Request, call_next):
        app.state.requests.append(
            {
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query,
                "headers": dict(request.headers),
            }
        )
        return await call_next(request)

    @router.get("/connectors")
    def list_connectors(
        type: str | None = None,
        page: int = 1,
        per_page: int = 10,
    ):
        items = [c for c in CONNECTORS.values() if type is None or c["attributes"]["connector_type"] == type]
        return {
            "data": items[(page - 1) * per_page : page * per_page],
            "links": {
                "first": "/connectors?page=1",
                "last": "/connectors?page=1",
                "next": None,
                "prev": None,
                "self": f"/connectors?page={page}",
            },
        }

    @router.get("/connectors/{connector_id}")
    def get_connector(connector_id: str):
        if connector_id not in CONNECTORS:
            return not_found("Connector not found")
        return {"data": CONNECTORS[connector_id]}

    @router.delete("/connectors/{connector_id}")
    def delete_connector(connector_id: str):
        if connector_id not in CONNECTORS:
            return not_found("Connector not found")
        return {"data": CONNECTORS[connector_id]}

    @router.post("/connectors/{connector_id}/query_source")
    def query_source(connector_id: str, payload: dict = Body(...)):
        if connector_id not in ROWS:
            return not_found("Connector not found")
        return {"data": ROWS[connector_id], "query": payload["query"]}

    @router.get("/connectors/{connector_id}/discover")
    def discover(connector_id: str, refresh: bool):
        return {
            "data": {
                "id": "cat-1",
                "type": "catalogs",
                "attributes": {
                    "connector_id": 1,
                    "refreshed": refresh,
                    "catalog": {
                        "streams": [
                            {
                                "name": "users",
                                "json_schema": {
                                    "type": "object",
                                    "properties": {
                                        "id": {"type": "integer"},
                                        "email": {"type": ["string", "null"]},
                                    },
                                },
                                "supported_sync_modes": ["full_refresh", "incremental"],
                            }
                        ]
                    },
                },
            }
        }

    @router.get("/models")
    def list_models(page: int = 1, per_page: int = 10, query_type: str = ""):
        return {"data": list(MODELS.values())}

    @router.get("/models/{model_id}")
    def get_model(model_id: str):
        if model_id not in MODELS:
            return not_found("Model not found")
        return {"data": MODELS[model_id]}

    @router.get("/syncs")
    def list_syncs(page: int = 1, per_page: int = 10):
        return {"data": list(SYNCS.values())}

    @router.get("/syncs/{sync_id}")
    def get_sync(sync_id: str):
        if sync_id not in SYNCS:
            return not_found("Sync not found")
        return {"data": SYNCS[sync_id]}

    @router.get("/syncs/{sync_id}/sync_runs")
    def list_sync_runs(sync_id: str, page: int = 1, per_page: int = 10):
        return {"data": list(SYNC_RUNS.get(sync_id, {}).values())}

    @router.get("/syncs/{sync_id}/sync_runs/{run_id}")
    def get_sync_run(sync_id: str, run_id: str):
        run = SYNC_RUNS.get(sync_id, {}).get(run_id)
        if run is None:
            return not_found("Sync run not found")
        return {"data": run}

    @router.get("/reports")
    def report(
        type: str,
        metric: str = "all",
        time_period: str = "one_week",
        connector_ids: list[int] = Query(default=[], alias="connector_ids[]"),
    ):
        point = {
            "time_slice": "2024-05-01T00:00:00Z",
            "total_count": 3,
            "failed_count": 1,
            "success_count": 2,
        }
        return {
            "data": {
                "sync_run_triggered": [point],
                "total_sync_run_rows": [dict(point, total_count=300)],
            },
            "connector_ids": connector_ids,
        }

    app.include_router(router)
    return app


# ---------------------------------------------------------------------------
# Settings and clients
# ---------------------------------------------------------------------------

@pytest.fixture()
def settings() -> Settings:
    """Settings isolated from the process environment."""
    return Settings(API_HOST=API_HOST, WORKSPACE_ID="ws-1", API_TOKEN="token-1", _env_file=None)


@pytest.fixture()
def backend() -> FastAPI:
    return create_backend()


@pytest.fixture()
def live_backend(backend: FastAPI) -> Generator[str, None, None]:
    """Serve the fake backend with uvicorn on a real localhost socket.

    Yields the host URL to use as ``API_HOST``.
    """
    server = uvicorn.Server(
        uvicorn.Config(backend, host="127.0.0.1", port=0, log_level="warning", lifespan="off")
    )
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            raise RuntimeError("uvicorn did not start")
        time.sleep(0.01)

    host, port = server.servers[0].sockets[0].getsockname()[:2]
    yield f"http://{host}:{port}"

    server.should_exit = True
    thread.join(timeout=5)


@pytest.fixture()
async def api(backend: FastAPI, settings: Settings) -> AsyncGenerator[SyncboardApi, None]:
    """A ``SyncboardApi`` wired to the fake backend."""
    client = ApiClient(settings=settings, transport=httpx.ASGITransport(app=backend))
    async with SyncboardApi(client) as facade:
        yield facade


@pytest.fixture()
async def make_client(settings: Settings) -> AsyncGenerator[Callable[..., ApiClient], None]:
    """Factory building clients around an ``httpx.MockTransport`` handler.

    The handler receives the outgoing ``httpx.Request``; every request is
    also appended to ``client.sent`` for inspection.
    """
    created: list[ApiClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **options: Any) -> ApiClient:
        sent: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        client = ApiClient(
            settings=settings,
            transport=httpx.MockTransport(_record),
            default_options=options,
        )
        client.sent = sent
        created.append(client)
        return client

    yield _make

    for client in created:
        await client.aclose()
