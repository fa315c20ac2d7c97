"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem and the Todoist
Sync API.  Every raw third-party exception must be caught here and
re-raised as a :class:`~tuido.exceptions.TuidoError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from tuido.infra.config_loader import load_api_key
from tuido.infra.http_sync_provider import HttpxSyncProvider
from tuido.infra.paths import default_data_dir
from tuido.infra.user_store import JsonUserStore

__all__: list[str] = [
    "HttpxSyncProvider",
    "JsonUserStore",
    "default_data_dir",
    "load_api_key",
]
