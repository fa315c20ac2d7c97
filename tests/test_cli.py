"""End-to-end tests for the CLI flow (cli/app.py).

The Sync API is simulated with ``httpx.MockTransport`` passed through
``main(..., transport=...)``; every run uses a scratch ``--local-dir``.

Coverage:
* First run fetches and caches the profile; second run is offline.
* ``--add`` posts the command and prints a confirmation on success.
* A failed add prints no confirmation, warns on stderr, exits 0.
* Fatal config/cache/network errors reach the error boundary.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

from tuido.cli import app as app_module
from tuido.cli import exit_codes
from tuido.cli.app import cli, main
from tuido.exceptions import CacheError, ConfigError, NetworkError

SYNC_URL = "https://sync.test/sync/v9/sync"


def _argv(data_dir: Path, *extra: str) -> list[str]:
    return ["--local-dir", str(data_dir), "--sync-url", SYNC_URL, *extra]


def _cache_file(data_dir: Path) -> Path:
    return data_dir / "data" / "user.json"


# ---------------------------------------------------------------------------
# Profile caching
# ---------------------------------------------------------------------------

class TestUserCaching:
    def test_first_run_creates_cache(
        self, data_dir: Path, sync_api: Any, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(_argv(data_dir), transport=sync_api.transport)

        assert code == exit_codes.SUCCESS
        assert len(sync_api.requests) == 1
        assert sync_api.bodies[0]["resource_types"] == ["user"]
        assert json.loads(_cache_file(data_dir).read_text()) == {"inbox_project_id": "123"}

        out, err = capsys.readouterr()
        assert out.strip().splitlines()[-1] == "Bye!"
        assert "Storing user data in" in err

    def test_second_run_is_offline(self, data_dir: Path, sync_api: Any) -> None:
        main(_argv(data_dir), transport=sync_api.transport)
        main(_argv(data_dir, "--add", "Buy milk"), transport=sync_api.transport)

        assert len(sync_api.requests) == 2
        assert sync_api.bodies[1]["resource_types"] == []
        assert sync_api.bodies[1]["commands"][0]["args"]["project_id"] == "123"

    def test_run_without_add_makes_no_call_once_cached(
        self, data_dir: Path, sync_api: Any,
    ) -> None:
        main(_argv(data_dir), transport=sync_api.transport)
        main(_argv(data_dir), transport=sync_api.transport)
        assert len(sync_api.requests) == 1

    def test_refresh_refetches(self, data_dir: Path, sync_api: Any) -> None:
        main(_argv(data_dir), transport=sync_api.transport)
        sync_api.user_payload = {"inbox_project_id": "456"}

        main(_argv(data_dir, "--refresh"), transport=sync_api.transport)

        assert len(sync_api.requests) == 2
        assert json.loads(_cache_file(data_dir).read_text())["inbox_project_id"] == "456"

    def test_bearer_header_uses_stored_key(self, data_dir: Path, sync_api: Any) -> None:
        main(_argv(data_dir), transport=sync_api.transport)
        assert sync_api.requests[0].headers["Authorization"] == "Bearer secret-key"
        assert str(sync_api.requests[0].url) == SYNC_URL


# ---------------------------------------------------------------------------
# Adding a todo
# ---------------------------------------------------------------------------

class TestAddTodo:
    def test_success_prints_confirmation(
        self, data_dir: Path, sync_api: Any, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(_argv(data_dir, "--add", "Buy milk"), transport=sync_api.transport)

        assert code == exit_codes.SUCCESS
        command = sync_api.bodies[-1]["commands"][0]
        assert command["args"] == {"project_id": "123", "content": "Buy milk"}

        out, _ = capsys.readouterr()
        assert "Todo 'Buy milk' added to inbox." in out
        assert out.strip().splitlines()[-1] == "Bye!"

    def test_text_is_printed_verbatim(
        self, data_dir: Path, sync_api: Any, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(_argv(data_dir, "-a", "[urgent] call :phone: mum"), transport=sync_api.transport)
        out, _ = capsys.readouterr()
        assert "Todo '[urgent] call :phone: mum' added to inbox." in out

    def test_http_failure_is_soft(
        self, data_dir: Path, sync_api: Any, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(_argv(data_dir), transport=sync_api.transport)
        capsys.readouterr()
        sync_api.responder = lambda request, body: httpx.Response(500, text="boom")

        code = main(_argv(data_dir, "--add", "Buy milk"), transport=sync_api.transport)

        assert code == exit_codes.SUCCESS
        out, err = capsys.readouterr()
        assert "added to inbox" not in out
        assert out.strip() == "Bye!"
        assert "not added" in err

    def test_transport_failure_is_soft(
        self, data_dir: Path, sync_api: Any, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(_argv(data_dir), transport=sync_api.transport)
        capsys.readouterr()

        def refuse(request: httpx.Request, body: dict[str, Any]) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        sync_api.responder = refuse
        code = main(_argv(data_dir, "-a", "Buy milk"), transport=sync_api.transport)

        assert code == exit_codes.SUCCESS
        out, err = capsys.readouterr()
        assert out.strip() == "Bye!"
        assert "connection refused" in err

    def test_rejected_command_is_soft(
        self, data_dir: Path, sync_api: Any, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(_argv(data_dir), transport=sync_api.transport)
        capsys.readouterr()

        def reject(request: httpx.Request, body: dict[str, Any]) -> httpx.Response:
            uuid = body["commands"][0]["uuid"]
            return httpx.Response(200, json={"sync_status": {uuid: {"error": "Project not found"}}})

        sync_api.responder = reject
        main(_argv(data_dir, "-a", "Buy milk"), transport=sync_api.transport)

        out, err = capsys.readouterr()
        assert "added to inbox" not in out
        assert "Project not found" in err


# ---------------------------------------------------------------------------
# Fatal errors
# ---------------------------------------------------------------------------

class TestFatalErrors:
    def test_missing_credentials(self, tmp_path: Path, sync_api: Any) -> None:
        with pytest.raises(ConfigError):
            main(_argv(tmp_path), transport=sync_api.transport)
        assert sync_api.requests == []

    def test_corrupt_cache(self, data_dir: Path, sync_api: Any) -> None:
        _cache_file(data_dir).parent.mkdir()
        _cache_file(data_dir).write_text("{oops")
        with pytest.raises(CacheError):
            main(_argv(data_dir), transport=sync_api.transport)
        assert sync_api.requests == []

    def test_fetch_transport_failure(self, data_dir: Path, sync_api: Any) -> None:
        def refuse(request: httpx.Request, body: dict[str, Any]) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        sync_api.responder = refuse
        with pytest.raises(NetworkError):
            main(_argv(data_dir), transport=sync_api.transport)
        assert not _cache_file(data_dir).exists()


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _patch_main(self, monkeypatch: pytest.MonkeyPatch, exc: BaseException) -> None:
        def boom(*args: Any, **kwargs: Any) -> int:
            raise exc

        monkeypatch.setattr(app_module, "main", boom)

    def test_known_error_exits_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        self._patch_main(monkeypatch, ConfigError("no file", hint="create it"))
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        _, err = capsys.readouterr()
        assert "Error: no file" in err
        assert "Hint: create it" in err

    def test_non_utf8_credentials_exit_one(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        (tmp_path / "client_auth.toml").write_bytes(b'api_key = "\xff\xfe"\n')
        monkeypatch.setattr(sys, "argv", ["tuido", "--local-dir", str(tmp_path)])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert "not UTF-8" in capsys.readouterr().err

    def test_keyboard_interrupt_exits_130(self, monkeypatch: pytest.MonkeyPatch) -> None:
        self._patch_main(monkeypatch, KeyboardInterrupt())
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error_exits_two(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        self._patch_main(monkeypatch, RuntimeError("kaboom"))
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err

    def test_success_exits_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(app_module, "main", lambda: exit_codes.SUCCESS)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Diagnostic logging
# ---------------------------------------------------------------------------

class TestVerboseLogging:
    def test_verbose_logs_requests_without_key(
        self, data_dir: Path, sync_api: Any, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(_argv(data_dir, "--verbose"), transport=sync_api.transport)
        _, err = capsys.readouterr()
        assert "Posting sync request" in err
        assert "secret-key" not in err

    def test_quiet_by_default(
        self, data_dir: Path, sync_api: Any, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(_argv(data_dir), transport=sync_api.transport)
        _, err = capsys.readouterr()
        assert "Posting sync request" not in err
