from __future__ import annotations

import logging
from typing import Any, NamedTuple

import httpx

from .config_types import ClientConfig
from .errors import NetworkError
from .request import RequestDescriptor

logger = logging.getLogger(__name__)


class ApiResponse(NamedTuple):
    error: Exception | None
    response: httpx.Response | None
    data: Any

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None

    @property
    def ok(self) -> bool:
        return self.error is None and self.response is not None and self.response.status_code < 400


def _parse_body(r: httpx.Response) -> Any:
    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        return None


def _client_kwargs(cfg: ClientConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.api_root.rstrip("/"),
        "timeout": cfg.timeout_s,
        "headers": {"User-Agent": cfg.user_agent, "Accept": "application/json"},
        "follow_redirects": True,
    }


def _network_error(req: RequestDescriptor, exc: httpx.RequestError) -> ApiResponse:
    logger.debug("%s %s failed: %s", req.method, req.url, exc)
    err = NetworkError(str(exc) or exc.__class__.__name__)
    err.__cause__ = exc
    return ApiResponse(err, None, None)


class Transport:
    def __init__(self, cfg: ClientConfig, transport: httpx.BaseTransport | None = None):
        self._client = httpx.Client(transport=transport, **_client_kwargs(cfg))

    def close(self) -> None:
        self._client.close()

    def send(self, req: RequestDescriptor) -> ApiResponse:
        logger.debug("%s %s", req.method, req.url)
        try:
            r = self._client.request(req.method, req.url, json=req.body, headers=req.headers)
        except httpx.RequestError as e:
            return _network_error(req, e)
        logger.debug("%s %s -> %s", req.method, req.url, r.status_code)
        return ApiResponse(None, r, _parse_body(r))


class AsyncTransport:
    def __init__(self, cfg: ClientConfig, transport: httpx.AsyncBaseTransport | None = None):
        self._client = httpx.AsyncClient(transport=transport, **_client_kwargs(cfg))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, req: RequestDescriptor) -> ApiResponse:
        logger.debug("%s %s", req.method, req.url)
        try:
            r = await self._client.request(req.method, req.url, json=req.body, headers=req.headers)
        except httpx.RequestError as e:
            return _network_error(req, e)
        logger.debug("%s %s -> %s", req.method, req.url, r.status_code)
        return ApiResponse(None, r, _parse_body(r))
