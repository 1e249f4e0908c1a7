"""
Pytest configuration for postboard.

Provides fixtures for:
- Settings isolated from the developer's environment and .env files
- Sample records in domain and wire form
- httpx mock transports for the remote provider
"""

from __future__ import annotations

import os
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import PostRecord


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop POSTBOARD_* variables so tests never depend on the host shell."""
    for key in list(os.environ):
        if key.upper().startswith("POSTBOARD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, http_timeout_seconds=2.0, log_level="DEBUG")


@pytest.fixture
def sample_records() -> list[PostRecord]:
    return [
        PostRecord(owner_id=7, id=30, title="gamma", body="third"),
        PostRecord(owner_id=3, id=10, title="alpha", body="first"),
        PostRecord(owner_id=5, id=20, title="beta", body="second"),
    ]


@pytest.fixture
def sample_payload() -> list[dict[str, Any]]:
    return [
        {"userId": 1, "id": 1, "title": "sunt aut facere", "body": "quia et suscipit"},
        {"userId": 1, "id": 2, "title": "qui est esse", "body": "est rerum tempore"},
    ]


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """
    Build a MockTransport that records every request it receives.

    `calls` is exposed on the returned transport for assertions.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        calls: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return handler(request)

        transport = httpx.MockTransport(recording)
        transport.calls = calls  # type: ignore[attr-defined]
        return transport

    return factory
