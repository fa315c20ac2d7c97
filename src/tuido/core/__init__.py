"""Core / service layer — domain models and Sync API orchestration.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or network I/O; adapters are injected.
* No imports from ``cli`` or ``infra``.
"""

from tuido.core.models import (
    AddItemArgs,
    AddItemCommand,
    SyncRequest,
    SyncResponse,
    User,
)
from tuido.core.protocols import SyncProvider, UserStore
from tuido.core.sync_service import SyncService
from tuido.core.user_service import UserService

__all__: list[str] = [
    "AddItemArgs",
    "AddItemCommand",
    "SyncProvider",
    "SyncRequest",
    "SyncResponse",
    "SyncService",
    "User",
    "UserService",
    "UserStore",
]
