"""Allow ``python -m fairdesk`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m fairdesk`` behaves identically to the ``fairdesk``
console script.
"""

from __future__ import annotations

from fairdesk.cli.app import cli

if __name__ == "__main__":
    cli()
