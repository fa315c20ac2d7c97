"""Shared pytest fixtures and configuration for the tuido test suite.

Guidelines
----------
* No internet access in any test.
* The Sync API is replaced by ``httpx.MockTransport`` at the infra boundary.
* Core tests use mocked providers and stores — no side effects.
* Filesystem tests stay inside ``tmp_path``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest

Responder = Callable[[httpx.Request, dict[str, Any]], httpx.Response]


class FakeSyncApi:
    """In-memory stand-in for the Todoist Sync endpoint.

    Every request is recorded.  By default ``user`` requests are answered
    with :attr:`user_payload` and command requests with an ``ok`` status
    for each command uuid; set :attr:`responder` to override.
    """

    def __init__(self, user_payload: dict[str, Any] | None = None) -> None:
        self.user_payload: dict[str, Any] = user_payload or {"inbox_project_id": "123"}
        self.requests: list[httpx.Request] = []
        self.responder: Responder | None = None

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.content)
        if self.responder is not None:
            return self.responder(request, body)
        if "user" in body["resource_types"]:
            return httpx.Response(200, json={"full_sync": True, "user": self.user_payload})
        return httpx.Response(
            200,
            json={"sync_status": {cmd["uuid"]: "ok" for cmd in body["commands"]}},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def sync_api() -> FakeSyncApi:
    return FakeSyncApi()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A fresh tuido data directory holding a valid credentials file."""
    directory = tmp_path / "tuido"
    directory.mkdir()
    (directory / "client_auth.toml").write_text('api_key = "secret-key"\n', encoding="utf-8")
    return directory


@pytest.fixture(autouse=True)
def _reset_tuido_logger() -> Iterator[None]:
    """Drop handlers installed by ``main`` so they never outlive a test."""
    yield
    logger = logging.getLogger("tuido")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
