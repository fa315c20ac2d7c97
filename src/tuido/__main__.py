"""Allow ``python -m tuido`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m tuido`` behaves identically to the ``tuido`` console
script.
"""

from __future__ import annotations

from tuido.cli.app import cli

if __name__ == "__main__":
    cli()
