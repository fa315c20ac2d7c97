"""Infrastructure: read the API key from the TOML credentials file.

The file lives at ``<data-dir>/client_auth.toml`` and must contain a
single string field::

    api_key = "0123456789abcdef"

Rules
-----
* Read only — the file is never created or rewritten.
* Any failure is a :class:`~tuido.exceptions.ConfigError`.
"""

from __future__ import annotations

import tomllib

from tuido.exceptions import ConfigError
from tuido.settings import AppSettings

API_KEY_FIELD: str = "api_key"


def _example_hint(settings: AppSettings) -> str:
    return f'Create {settings.auth_path} containing:\n    {API_KEY_FIELD} = "<your Todoist API token>"'


def load_api_key(settings: AppSettings) -> str:
    """Return the API key stored in the credentials file.

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, not UTF-8 TOML, or does not
        hold a non-empty string ``api_key``.
    """
    path = settings.auth_path

    try:
        with path.open("rb") as fh:
            document = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(
            f"Credentials file not found: {path}",
            hint=_example_hint(settings),
        ) from exc
    except OSError as exc:
        raise ConfigError(f"Could not read credentials file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Credentials file {path} is not valid TOML: {exc}",
            hint=_example_hint(settings),
        ) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(
            f"Credentials file {path} is not UTF-8 text: {exc}",
            hint=_example_hint(settings),
        ) from exc

    api_key = document.get(API_KEY_FIELD)
    if not isinstance(api_key, str) or not api_key.strip():
        raise ConfigError(
            f"Credentials file {path} has no '{API_KEY_FIELD}' string.",
            hint=_example_hint(settings),
        )
    return api_key
