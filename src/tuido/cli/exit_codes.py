"""Process exit codes returned by :func:`tuido.cli.app.cli`.

A failed ``--add`` is not an error exit: the run reports the failure on
stderr and still ends with :data:`SUCCESS`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The run reached ``Bye!``, whether or not the to-do was added."""

GENERAL_ERROR: int = 1
"""Credentials, cache or profile fetch failed with a TuidoError."""

UNEXPECTED_ERROR: int = 2
"""A bug: an exception outside the TuidoError hierarchy."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
