"""Application settings with defaults.

The Sync API endpoint and the fixed file names live here rather than as
literals scattered across adapters, so that tests and the hidden CLI
override flags can point tuido at another endpoint or directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SYNC_URL: str = "https://api.todoist.com/sync/v9/sync"
"""Production Todoist Sync API endpoint."""


@dataclass(frozen=True, slots=True)
class AppSettings:
    """Immutable runtime configuration for a single tuido invocation."""

    data_dir: Path
    """Per-user application directory holding credentials and cache."""

    sync_url: str = DEFAULT_SYNC_URL
    auth_file_name: str = "client_auth.toml"
    cache_dir_name: str = "data"
    user_file_name: str = "user.json"

    @property
    def auth_path(self) -> Path:
        """Location of the TOML credentials file."""
        return self.data_dir / self.auth_file_name

    @property
    def cache_dir(self) -> Path:
        return self.data_dir / self.cache_dir_name

    @property
    def user_cache_path(self) -> Path:
        """Location of the cached user profile."""
        return self.cache_dir / self.user_file_name
