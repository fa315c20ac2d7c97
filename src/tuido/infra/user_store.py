"""Infrastructure: JSON file backed :class:`~tuido.core.protocols.UserStore`.

The profile is stored pretty-printed at ``<data-dir>/data/user.json``.
Writes are not atomic; an interrupted write leaves a corrupt cache that
:meth:`JsonUserStore.load` reports as a :class:`CacheError`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tuido.core.models import User
from tuido.exceptions import CacheError

_DELETE_HINT = "Delete the file to fetch the profile again."


class JsonUserStore:
    """Read and write the cached :class:`User` profile."""

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> User:
        """Parse the cached profile.

        Raises
        ------
        CacheError
            If the file cannot be read, is not JSON, or lacks the
            :class:`User` shape.
        """
        try:
            raw: Any = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise CacheError(f"Could not read user cache {self._path}: {exc}") from exc
        except ValueError as exc:
            raise CacheError(
                f"User cache {self._path} is not valid JSON: {exc}",
                hint=_DELETE_HINT,
            ) from exc

        if not isinstance(raw, dict):
            raise CacheError(
                f"User cache {self._path} does not contain a JSON object.",
                hint=_DELETE_HINT,
            )

        try:
            return User.from_dict(raw)
        except ValueError as exc:
            raise CacheError(
                f"User cache {self._path} is malformed: {exc}",
                hint=_DELETE_HINT,
            ) from exc

    def save(self, user: User) -> None:
        """Write *user* as pretty-printed JSON, creating directories first."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(user.to_dict(), indent=2) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise CacheError(f"Could not write user cache {self._path}: {exc}") from exc
