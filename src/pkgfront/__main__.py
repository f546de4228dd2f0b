"""Allow ``python -m pkgfront`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m pkgfront`` behaves identically to the ``pkg`` console script.
"""

from __future__ import annotations

from pkgfront.cli.app import cli

if __name__ == "__main__":
    cli()
