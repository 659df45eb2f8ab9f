from __future__ import annotations

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest


class _EchoHandler(BaseHTTPRequestHandler):
    """Reflect the request back so tests can assert on its shape."""

    def _echo(self) -> None:
        data = {
            "url": self.path,
            "method": self.command,
            "headers": {k.lower(): v for k, v in self.headers.items()},
        }
        length = int(self.headers.get("Content-Length") or 0)
        raw = self.rfile.read(length) if length else b""
        if raw:
            data["body"] = json.loads(raw)
        payload = json.dumps(data).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = do_POST = do_PUT = do_DELETE = _echo

    def log_message(self, format, *args) -> None:
        return None


@pytest.fixture(scope="session")
def echo_server():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    try:
        yield f"http://{host}:{port}/api"
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def anyio_backend():
    return "asyncio"
