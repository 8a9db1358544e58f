"""Shared fixtures for the echo round-trip tests."""

from __future__ import annotations

import os
import threading
from collections.abc import Iterator

import httpx
import pytest
from httpx import codes
from pytest_httpx import HTTPXMock

from pizza_httpx import DefaultConfig

from echo import EchoHandler, EchoServer, echo_text


def _echo_callback(request: httpx.Request) -> httpx.Response:
    return httpx.Response(codes.OK, text=echo_text(request))


@pytest.fixture
def echo_mock(httpx_mock: HTTPXMock) -> HTTPXMock:
    """Answer every intercepted request with its own text rendering."""
    httpx_mock.add_callback(_echo_callback, is_reusable=True)
    return httpx_mock


@pytest.fixture(scope="module")
def echo_server() -> Iterator[DefaultConfig]:
    """Run a real echo server and yield defaults pointing at it."""
    port = int(os.environ.get("ECHO_PORT", "0"))
    server = EchoServer(("127.0.0.1", port), EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, bound_port = server.server_address[:2]
        yield DefaultConfig(authority=f"http://{host}:{bound_port}")
    finally:
        server.shutdown()
        server.server_close()
