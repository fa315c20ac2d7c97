"""Core user service — resolves the user profile, cache first.

The profile is fetched from the Sync API at most once and then served
from the local store for every later invocation.  The cache is never
refreshed automatically; only an explicit ``refresh=True`` re-fetches.

Guarantees
----------
* No direct filesystem or network access — both go through injected
  collaborators.
* A corrupt cache is an error, never a silent re-fetch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from tuido.core.models import User
from tuido.core.protocols import UserStore
from tuido.core.sync_service import SyncService

logger = logging.getLogger(__name__)


class UserService:
    """Combine the local :class:`UserStore` with :class:`SyncService`.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`UserStore` protocol.
    sync_service:
        Used only when the store holds no profile (or on refresh).
    on_status:
        Optional callable receiving human-readable progress messages.
    """

    def __init__(
        self,
        store: UserStore,
        sync_service: SyncService,
        *,
        on_status: Callable[[str], None] | None = None,
    ) -> None:
        self._store: UserStore = store
        self._sync_service: SyncService = sync_service
        self._on_status: Callable[[str], None] | None = on_status

    async def get_user(self, *, refresh: bool = False) -> User:
        """Return the cached profile, fetching and storing it if absent.

        Raises
        ------
        CacheError
            When the cache exists but is malformed, or cannot be written.
        NetworkError, ResponseError
            When the remote fetch fails.
        """
        if not refresh and self._store.exists():
            logger.debug("Using cached user profile at %s", self._store.path)
            return self._store.load()

        self._status("Fetching user data…")
        user = await self._sync_service.get_user()

        self._status(f"Storing user data in '{self._store.path}'.")
        self._store.save(user)
        return user

    def _status(self, message: str) -> None:
        if self._on_status is not None:
            self._on_status(message)
