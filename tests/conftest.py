"""
Pytest fixtures for the update check tests.

Test imports use the src/ packages via `pythonpath = ["src"]` (see pyproject.toml).
HTTP never leaves the process: clients are built on `httpx.MockTransport`.
"""

import json
import os
from typing import Callable

import httpx
import pytest

from adapters.http_client import build_client
from core.config import AppSettings


# ═══════════════════════════════════════════════════════════════════════════════
# Feed Payloads
# ═══════════════════════════════════════════════════════════════════════════════

RELEASE_2_0_0 = {"tag_name": "2.0.0", "html_url": "https://x/2.0.0"}


@pytest.fixture
def feed_2_0_0():
    """Single-entry feed whose newest release is 2.0.0."""
    return [dict(RELEASE_2_0_0)]


@pytest.fixture
def github_feed():
    """Realistic newest-first feed with extra GitHub fields."""
    return [
        {
            "id": 3,
            "tag_name": "1.4.0",
            "name": "v1.4.0",
            "html_url": "https://github.com/khakers/modmail-viewer/releases/tag/1.4.0",
            "draft": False,
            "prerelease": False,
            "assets": [],
        },
        {
            "id": 2,
            "tag_name": "1.3.1",
            "html_url": "https://github.com/khakers/modmail-viewer/releases/tag/1.3.1",
        },
    ]


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


def json_handler(payload, status_code: int = 200, seen: list | None = None):
    """MockTransport handler returning `payload` as JSON, recording requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return handler


def refused_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("[Errno 111] Connection refused", request=request)


@pytest.fixture
def make_client() -> Callable[..., httpx.Client]:
    """Build an app-configured client on top of a MockTransport handler."""
    clients: list[httpx.Client] = []

    def factory(handler) -> httpx.Client:
        client = build_client(AppSettings(), transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


# ═══════════════════════════════════════════════════════════════════════════════
# Environment Isolation
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """No stray MODMAIL_VIEWER_* variables or project .env leak into tests."""
    for name in list(os.environ):
        if name.upper().startswith("MODMAIL_VIEWER_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
