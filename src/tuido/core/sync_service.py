"""Core sync service — builds command envelopes and interprets responses.

This service delegates the actual HTTP exchange to a
:class:`~tuido.core.protocols.SyncProvider` injected at construction
time.  It is responsible for:

* Building the ``user`` fetch and ``item_add`` envelopes.
* Generating the per-command ``temp_id`` / ``uuid`` pair.
* Turning raw response objects into domain models.
* Ensuring only :class:`~tuido.exceptions.TuidoError` subclasses escape.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from typing import Any

from tuido.core.models import AddItemArgs, AddItemCommand, SyncRequest, SyncResponse, User
from tuido.core.protocols import SyncProvider
from tuido.exceptions import NetworkError, ResponseError, TuidoError

logger = logging.getLogger(__name__)

USER_RESOURCE: str = "user"


def _new_id() -> str:
    return str(uuid.uuid4())


class SyncService:
    """Stateless service exposing the two Sync API operations tuido uses.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`SyncProvider` protocol.
    id_factory:
        Callable returning a fresh unique identifier string.  Defaults
        to random UUID4 values.
    """

    def __init__(
        self,
        provider: SyncProvider,
        *,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._provider: SyncProvider = provider
        self._id_factory: Callable[[], str] = id_factory

    # ------------------------------------------------------------------
    # Envelope construction (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def build_get_user_request() -> SyncRequest:
        return SyncRequest(resource_types=(USER_RESOURCE,))

    def build_add_item_request(self, project_id: str, content: str) -> SyncRequest:
        """Build an envelope carrying exactly one ``item_add`` command."""
        command = AddItemCommand(
            args=AddItemArgs(project_id=project_id, content=content),
            temp_id=self._id_factory(),
            uuid=self._id_factory(),
        )
        return SyncRequest(commands=(command,))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get_user(self) -> User:
        """Fetch the user profile.

        Raises
        ------
        NetworkError
            When the request cannot be delivered.
        ResponseError
            When the response carries no usable ``user`` object.
        """
        response = await self._sync(self.build_get_user_request())
        if response.user is None:
            raise ResponseError(
                "Sync API response did not include the requested user profile.",
            )
        return response.user

    async def add_item(self, project_id: str, content: str) -> SyncResponse:
        """Add a to-do with *content* to the project *project_id*.

        Raises
        ------
        NetworkError
            When the request cannot be delivered.
        ResponseError
            When the API rejects the request or the command.
        """
        request = self.build_add_item_request(project_id, content)
        response = await self._sync(request)

        command_uuid = request.commands[0].uuid
        status = response.sync_status.get(command_uuid)
        if status is not None and status != "ok":
            raise ResponseError(f"Todoist rejected the new item: {_describe(status)}")

        logger.debug("Command %s accepted", command_uuid)
        return response

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    async def _sync(self, request: SyncRequest) -> SyncResponse:
        """Call the provider and ensure only our exceptions escape."""
        body = request.to_dict()
        logger.debug(
            "Posting sync request: resource_types=%s commands=%d",
            body["resource_types"],
            len(body["commands"]),
        )
        try:
            raw = await self._provider.post(body)
        except TuidoError:
            raise
        except Exception as exc:
            raise NetworkError(f"Unexpected sync provider error: {exc}") from exc

        try:
            return SyncResponse.from_dict(raw)
        except ValueError as exc:
            raise ResponseError(f"Malformed Sync API response: {exc}") from exc


def _describe(status: Any) -> str:
    """Render a ``sync_status`` entry, which is either ``"ok"`` or an error object."""
    if isinstance(status, dict):
        error = status.get("error")
        if error:
            return str(error)
    return str(status)
