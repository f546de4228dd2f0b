"""CLI application entry point for ``pkg``.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pkgfront.exceptions.PkgError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No subcommand logic lives here: the first token is resolved by the
  :class:`~pkgfront.cli.dispatcher.Dispatcher` and the work is done by
  the subcommand it selects.
* The dispatcher does not parse options: everything after the first
  token belongs to the subcommand.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pkgfront.cli import exit_codes
from pkgfront.cli.commands import build_registry
from pkgfront.cli.console import console
from pkgfront.cli.dispatcher import Dispatcher
from pkgfront.cli.help import ManPageRenderer
from pkgfront.cli.reporter import ConsoleEventReporter
from pkgfront.config import Settings
from pkgfront.core.handle import PackageHandle
from pkgfront.core.protocols import DocumentationRenderer
from pkgfront.exceptions import CommandUnavailableError, PkgError
from pkgfront.logging_config import configure_logging


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def build_dispatcher(
    settings: Settings,
    *,
    renderer: DocumentationRenderer | None = None,
) -> Dispatcher:
    """Acquire a handle, register the console event callback, build the table."""
    handle = PackageHandle(settings=settings)
    handle.set_event_callback(ConsoleEventReporter())

    if renderer is None:
        renderer = ManPageRenderer(settings.manpager)

    return Dispatcher(build_registry(renderer), handle)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``pkg`` CLI.

    Parameters
    ----------
    argv:
        Explicit argument list, program name excluded.  When ``None``
        (default), ``sys.argv[1:]`` is used.  Accepting *argv* enables
        deterministic testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    settings = Settings.from_env()
    configure_logging(settings.log_level)

    return build_dispatcher(settings).run(argv)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PkgError as exc:
        console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            console.print(f"Hint: {exc.hint}", style="yellow")
        if isinstance(exc, CommandUnavailableError):
            sys.exit(exit_codes.UNAVAILABLE)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
