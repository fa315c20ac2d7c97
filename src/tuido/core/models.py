"""Domain models for tuido.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and conversion to and from the plain dicts
exchanged with the Sync API and the local cache.  They carry zero I/O
and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

FULL_SYNC_TOKEN: str = "*"
"""Sync token requesting the full state; tuido never syncs incrementally."""

ITEM_ADD: str = "item_add"


# ---------------------------------------------------------------------------
# User profile
# ---------------------------------------------------------------------------

_OPTIONAL_USER_FIELDS: tuple[str, ...] = ("id", "full_name", "email", "timezone")


@dataclass(frozen=True, slots=True)
class User:
    """The subset of the remote user profile tuido keeps."""

    inbox_project_id: str
    """Identifier of the account's default inbox project."""

    id: str | None = None
    full_name: str | None = None
    email: str | None = None
    timezone: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        """Build a :class:`User` from a decoded JSON object.

        Unknown keys are ignored.  Raises ``ValueError`` when the inbox
        project id is missing or any kept field is not a string.
        """
        inbox_project_id = data.get("inbox_project_id")
        if not isinstance(inbox_project_id, str):
            raise ValueError("'inbox_project_id' must be a string")

        optional: dict[str, str | None] = {}
        for name in _OPTIONAL_USER_FIELDS:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"'{name}' must be a string")
            optional[name] = value

        return cls(inbox_project_id=inbox_project_id, **optional)

    def to_dict(self) -> dict[str, str]:
        """Serialise to a JSON-ready dict, omitting unset fields."""
        data = {"inbox_project_id": self.inbox_project_id}
        for name in _OPTIONAL_USER_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AddItemArgs:
    project_id: str
    content: str


@dataclass(frozen=True, slots=True)
class AddItemCommand:
    """A single ``item_add`` command.

    ``temp_id`` and ``uuid`` are generated per command; the API uses them
    to map the new item and to deduplicate retried commands.
    """

    args: AddItemArgs
    temp_id: str
    uuid: str
    type: str = ITEM_ADD

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "args": {
                "project_id": self.args.project_id,
                "content": self.args.content,
            },
            "temp_id": self.temp_id,
            "uuid": self.uuid,
        }


# ---------------------------------------------------------------------------
# Envelope and response
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SyncRequest:
    """Command envelope posted to the Sync API."""

    resource_types: tuple[str, ...] = ()
    commands: tuple[AddItemCommand, ...] = ()
    sync_token: str = FULL_SYNC_TOKEN

    def to_dict(self) -> dict[str, Any]:
        return {
            "sync_token": self.sync_token,
            "resource_types": list(self.resource_types),
            "commands": [command.to_dict() for command in self.commands],
        }


@dataclass(frozen=True, slots=True)
class SyncResponse:
    """Parsed Sync API response.

    ``user`` is only present when the request asked for the ``user``
    resource type.
    """

    user: User | None = None
    sync_token: str | None = None
    full_sync: bool | None = None
    sync_status: dict[str, Any] = field(default_factory=dict)
    temp_id_mapping: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SyncResponse:
        """Parse a decoded response object.

        Raises ``ValueError`` when a present ``user`` field does not have
        the :class:`User` shape.
        """
        raw_user = data.get("user")
        user: User | None = None
        if raw_user is not None:
            if not isinstance(raw_user, dict):
                raise ValueError("'user' must be an object")
            user = User.from_dict(raw_user)

        sync_status = data.get("sync_status")
        temp_id_mapping = data.get("temp_id_mapping")
        sync_token = data.get("sync_token")
        full_sync = data.get("full_sync")

        return cls(
            user=user,
            sync_token=sync_token if isinstance(sync_token, str) else None,
            full_sync=full_sync if isinstance(full_sync, bool) else None,
            sync_status=dict(sync_status) if isinstance(sync_status, dict) else {},
            temp_id_mapping=(
                dict(temp_id_mapping) if isinstance(temp_id_mapping, dict) else {}
            ),
        )
