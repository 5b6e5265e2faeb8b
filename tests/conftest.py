"""Pytest configuration and shared fixtures.

This file ensures that:
- `src/` is importable
- every test gets an `SdkManager` whose HTTP client is backed by
  `httpx.MockTransport`, so no request leaves the process
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

# Ensure src directory is in path for imports
repo_root = Path(__file__).parent.parent
src_path = repo_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from aps_sdk.sdk_manager import ApsSettings, SdkManager  # noqa: E402

BASE = "https://developer.api.autodesk.com"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_response(status: int, payload: Any, headers: dict[str, str] | None = None) -> httpx.Response:
    return httpx.Response(status, json=payload, headers=headers)


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content.decode())


@pytest.fixture
def make_sdk() -> Callable[[Handler], tuple[SdkManager, RecordingTransport]]:
    """Build an `SdkManager` whose client answers through ``handler``."""

    def _make(handler: Handler) -> tuple[SdkManager, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport)
        return SdkManager(ApsSettings(base_address=BASE), client=client), transport

    return _make
