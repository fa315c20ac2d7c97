"""httpx backed implementation of :class:`~tuido.core.protocols.SyncProvider`.

This module is the **only** place in the codebase that sends Sync API
requests.  All httpx exceptions are caught here and re-raised as typed
:class:`~tuido.exceptions.TuidoError` subclasses — nothing raw escapes
the infrastructure boundary.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from tuido.exceptions import NetworkError, ResponseError
from tuido.version import __version__

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS: float = 30.0


class HttpxSyncProvider:
    """Concrete :class:`SyncProvider` posting envelopes with ``httpx.AsyncClient``.

    Usage::

        provider = HttpxSyncProvider(settings.sync_url, api_key)
        raw = await provider.post({"sync_token": "*", ...})

    Parameters
    ----------
    sync_url:
        Sync API endpoint every envelope is posted to.
    api_key:
        Bearer credential sent in the ``Authorization`` header.
    transport:
        Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        sync_url: str,
        api_key: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._sync_url: str = sync_url
        self._api_key: str = api_key
        self._transport: httpx.AsyncBaseTransport | None = transport

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(REQUEST_TIMEOUT_SECONDS),
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "User-Agent": f"tuido/{__version__}",
            },
        )

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    async def post(self, body: dict[str, Any]) -> dict[str, Any]:
        """POST *body* as JSON and return the decoded response object.

        Raises
        ------
        NetworkError
            When the request could not be sent or no response arrived.
        ResponseError
            For non-2xx statuses and bodies that are not a JSON object.
        """
        try:
            async with self._build_client() as client:
                response = await client.post(self._sync_url, json=body)
        except httpx.InvalidURL as exc:
            raise NetworkError(
                f"Invalid Sync API URL: {self._sync_url}",
                hint="Check the --sync-url value.",
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(
                f"Could not reach the Sync API: {exc}",
                hint="Check your network connection and try again.",
            ) from exc

        logger.debug("Sync API answered %s", response.status_code)

        if not response.is_success:
            raise ResponseError(
                f"Sync API returned HTTP {response.status_code}.",
                hint=_status_hint(response.status_code),
                status_code=response.status_code,
            )

        try:
            data: Any = response.json()
        except ValueError as exc:
            raise ResponseError(
                "Sync API returned a body that is not valid JSON.",
                status_code=response.status_code,
            ) from exc

        if not isinstance(data, dict):
            raise ResponseError(
                "Sync API returned an unexpected data structure.",
                status_code=response.status_code,
            )
        return data


def _status_hint(status_code: int) -> str | None:
    if status_code in (401, 403):
        return "The API key in the credentials file may be invalid or revoked."
    if status_code == 429:
        return "Too many requests; wait a moment before trying again."
    return None
