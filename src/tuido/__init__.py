"""tuido — minimal command-line client for the Todoist Sync API.

Caches the user's profile locally and adds to-dos to the inbox.
"""

from tuido.version import __version__

__all__: list[str] = ["__version__"]
