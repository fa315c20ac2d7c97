"""Custom exception hierarchy for tuido.

All exceptions that cross layer boundaries must inherit from
:class:`TuidoError`.  Raw third-party exceptions (e.g. from httpx or
``tomllib``) must NEVER propagate beyond the infrastructure layer — they
must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
TuidoError
├── ConfigError
├── CacheError
├── NetworkError
├── ResponseError
└── EnvironmentError
"""

from __future__ import annotations


class TuidoError(Exception):
    """Base exception for all tuido errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Local files -----------------------------------------------------------

class ConfigError(TuidoError):
    """Raised when the credentials file is missing, unreadable or malformed."""


class CacheError(TuidoError):
    """Raised when the cached user profile cannot be read or written."""


# --- Sync API --------------------------------------------------------------

class NetworkError(TuidoError):
    """Raised when a request to the Sync API fails at the transport level."""


class ResponseError(TuidoError):
    """Raised when the Sync API answers with an unexpected status or body."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code: int | None = status_code


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TuidoError):
    """Raised when a required runtime dependency is not available."""
