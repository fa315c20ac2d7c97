"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from tuido.core.models import User


class SyncProvider(Protocol):
    """Contract for Sync API transports.

    Any object that implements :meth:`post` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    async def post(self, body: dict[str, Any]) -> dict[str, Any]:
        """Send one command envelope and return the decoded response object.

        Implementations must map all backend-specific exceptions to
        :class:`~tuido.exceptions.TuidoError` subclasses.

        Raises
        ------
        NetworkError
            When the request cannot be delivered.
        ResponseError
            When the response has an error status or is not a JSON object.
        """
        ...  # pragma: no cover


class UserStore(Protocol):
    """Contract for the local user-profile cache."""

    @property
    def path(self) -> Path:
        """Where the profile is stored (used for status messages)."""
        ...  # pragma: no cover

    def exists(self) -> bool:
        ...  # pragma: no cover

    def load(self) -> User:
        """Return the cached profile.

        Raises
        ------
        CacheError
            When the cache is unreadable or malformed.
        """
        ...  # pragma: no cover

    def save(self, user: User) -> None:
        """Persist *user*, creating parent directories as needed.

        Raises
        ------
        CacheError
            When the cache cannot be written.
        """
        ...  # pragma: no cover
