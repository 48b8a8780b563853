"""
Syncboard Client - HTTP client and fetch dispatcher

Wraps a single ``httpx.AsyncClient`` pointed at ``{API_HOST}/api/v1``.
Every outgoing request is stamped with the workspace and auth headers taken
from the live settings object.  Responses with a non-2xx status are handed
back like any other response; only transport failures (no response at all)
raise, as ``httpx.TransportError`` subclasses.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from syncboard.core.schemas import RequestMethod
from syncboard.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

API_VERSION = "/api/v1"


def get_request_headers(settings: Settings) -> dict[str, str]:
    """Return the headers sent with every request, built from *settings*.

    Header values may not end in whitespace on the wire, so an empty token
    yields ``Bearer`` rather than ``Bearer ``.
    """
    return {
        "Workspace-Id": settings.WORKSPACE_ID.strip(),
        "Authorization": f"Bearer {settings.API_TOKEN}".strip(),
        "Accept": "*/*",
        "Content-Type": "application/json",
    }


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class ApiClient:
    """Configured HTTP client shared by all endpoint resources.

    Args:
        settings: Configuration read on each request.  Defaults to the
            process-wide ``syncboard.settings.settings``.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` or
            ``httpx.ASGITransport`` for tests.
        default_options: Request keyword arguments applied to every call
            (``timeout``, ``params``, ``headers`` ...).  Per-call options
            passed to :meth:`fetch` win over these.

    Pooled connections belong to the event loop that opened them.  When a
    call arrives on a different loop (e.g. each call wrapped in its own
    ``asyncio.run``), the pool is discarded and a fresh one is opened, so
    one instance can serve the whole process.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        default_options: dict[str, Any] | None = None,
    ) -> None:
        self.settings = settings if settings is not None else default_settings
        self.default_options: dict[str, Any] = dict(default_options or {})
        self._transport = transport
        self._loop: asyncio.AbstractEventLoop | None = None
        self._http = self._open()

    def _open(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=f"{self.settings.API_HOST.rstrip('/')}{API_VERSION}",
            transport=self._transport,
            timeout=None,
            event_hooks={"request": [self._inject_headers]},
        )

    def _bind_loop(self) -> httpx.AsyncClient:
        loop = asyncio.get_running_loop()
        if self._loop is None:
            self._loop = loop
        elif self._loop is not loop:
            logger.debug("Event loop changed; opening a new connection pool")
            self._http = self._open()
            self._loop = loop
        return self._http

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    async def _inject_headers(self, request: httpx.Request) -> None:
        request.headers.update(get_request_headers(self.settings))
        logger.debug("%s %s", request.method, request.url)

    async def fetch(
        self,
        url: str,
        method: RequestMethod = "get",
        data: Any = None,
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded response body.

        ``get`` and ``delete`` send no body; ``post``, ``put`` and ``patch``
        send *data* as JSON.  Any other *method* is treated as ``get``.

        Returns the JSON body, the raw text when the body is not JSON, or
        ``None`` when it is empty.  Status code and headers are discarded,
        so an error reply from the backend comes back as its error body.

        Raises:
            httpx.TransportError: When no response was received.
        """
        config = {**self.default_options, **(options or {})}

        http = self._bind_loop()
        verb = method.lower()
        if verb == "post":
            response = await http.post(url, json=data, **config)
        elif verb == "put":
            response = await http.put(url, json=data, **config)
        elif verb == "delete":
            response = await http.delete(url, **config)
        elif verb == "patch":
            response = await http.patch(url, json=data, **config)
        else:
            response = await http.get(url, **config)

        return _decode_body(response)

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_api_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    **default_options: Any,
) -> ApiClient:
    """Build an :class:`ApiClient`; see the class for argument details."""
    return ApiClient(settings=settings, transport=transport, default_options=default_options)


# Process-wide client used when no other is injected
api_client = create_api_client()


async def api_fetch(
    url: str,
    method: RequestMethod = "get",
    data: Any = None,
    options: dict[str, Any] | None = None,
    client: ApiClient | None = None,
) -> Any:
    """Dispatch through *client*, or the process-wide ``api_client``."""
    client = client if client is not None else api_client
    return await client.fetch(url, method=method, data=data, options=options)
