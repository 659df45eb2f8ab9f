from __future__ import annotations

import json

import httpx
import pytest
from realworld_client import RealWorldClient

from realworld_cli import config, http


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    monkeypatch.delenv(config.ENV_API_ROOT, raising=False)
    return tmp_path


class FakeApi:
    """Canned responses keyed by ``(method, path)``; records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, payload=None) -> None:
        self.routes[(method, path)] = httpx.Response(status, json=payload if payload is not None else {})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"errors": {"route": ["not found"]}})
        return route

    def body(self, index: int = -1):
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_api(config_dir, monkeypatch) -> FakeApi:
    api = FakeApi()

    def _client(cfg):
        return RealWorldClient(cfg, transport=httpx.MockTransport(api.handler))

    monkeypatch.setattr(http, "RealWorldClient", _client)
    return api
