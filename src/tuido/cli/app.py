"""CLI application entry point for tuido.

This module is the **sole error boundary** for the entire application.
It catches :class:`~tuido.exceptions.TuidoError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  services and infrastructure adapters.
* ``print()`` is forbidden outside the CLI layer; the console proxies
  are used exclusively.
* The one locally handled failure is adding the to-do: it is reported
  as a warning and the run still ends with ``Bye!`` and exit code 0.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import httpx

from tuido.cli import exit_codes
from tuido.cli.console import console, err_console
from tuido.cli.logging_setup import configure_logging
from tuido.core.models import User
from tuido.core.sync_service import SyncService
from tuido.core.user_service import UserService
from tuido.exceptions import NetworkError, ResponseError, TuidoError
from tuido.infra.config_loader import load_api_key
from tuido.infra.http_sync_provider import HttpxSyncProvider
from tuido.infra.paths import default_data_dir
from tuido.infra.user_store import JsonUserStore
from tuido.settings import DEFAULT_SYNC_URL, AppSettings
from tuido.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    ``--sync-url`` and ``--local-dir`` are hidden overrides meant for
    testing against a local endpoint and a scratch directory.
    """
    parser = argparse.ArgumentParser(
        prog="tuido",
        description="Minimal Todoist client: add a to-do to your inbox.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-a",
        "--add",
        dest="add_todo",
        metavar="TODO",
        default=None,
        help="Add a new todo to the inbox.",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Fetch the user profile again and overwrite the local cache.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print diagnostic logging to stderr.",
    )
    parser.add_argument(
        "--sync-url",
        default=DEFAULT_SYNC_URL,
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "--local-dir",
        type=Path,
        default=None,
        help=argparse.SUPPRESS,
    )
    return parser


def _resolve_settings(args: argparse.Namespace) -> AppSettings:
    data_dir: Path = args.local_dir if args.local_dir is not None else default_data_dir()
    return AppSettings(data_dir=data_dir, sync_url=args.sync_url)


# ---------------------------------------------------------------------------
# Command flow
# ---------------------------------------------------------------------------

async def _add_todo(sync_service: SyncService, user: User, text: str) -> None:
    """Add *text* to the inbox; failures are reported but never raised."""
    try:
        await sync_service.add_item(user.inbox_project_id, text)
    except (NetworkError, ResponseError) as exc:
        err_console.print(f"Warning: todo was not added. {exc}", markup=False)
        return
    console.print(f"Todo '{text}' added to inbox.", markup=False)


async def _run(
    args: argparse.Namespace,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Load credentials, resolve the user, optionally add a to-do.

    Flow:
    1. Resolve the data directory and load the API key.
    2. Load the cached user profile, or fetch and cache it.
    3. If ``--add`` was given, add the to-do to the inbox project.
    """
    settings = _resolve_settings(args)
    api_key = load_api_key(settings)

    provider = HttpxSyncProvider(settings.sync_url, api_key, transport=transport)
    sync_service = SyncService(provider)
    user_service = UserService(
        JsonUserStore(settings.user_cache_path),
        sync_service,
        on_status=lambda message: err_console.print(message, markup=False),
    )

    user = await user_service.get_user(refresh=args.refresh)

    if args.add_todo is not None:
        await _add_todo(sync_service, user, args.add_todo)

    console.print("Bye!")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Run the tuido CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    transport:
        Optional httpx transport for every Sync API request.  Accepting
        *argv* and *transport* enables deterministic testing without
        monkeypatching or network access.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    return asyncio.run(_run(args, transport=transport))


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TuidoError as exc:
        err_console.print(f"Error: {exc}", markup=False)
        if exc.hint:
            err_console.print(f"Hint: {exc.hint}", markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            markup=False,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
