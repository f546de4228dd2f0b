"""Console rendering of package lifecycle events.

This module bridges the core :class:`~pkgfront.core.events.EventReporter`
callback slot with the terminal.  The library layers only emit typed
events; everything the user sees about them is decided here.

Design
------
* :class:`ConsoleEventReporter` is the callable registered on the handle.
* Only two kinds produce output: install-begin (stdout) and
  archive-error (stderr).
* Every other kind, including kinds added after this module was
  written, is ignored and reported as handled.
"""

from __future__ import annotations

from pkgfront.cli.console import console, out
from pkgfront.core.events import OK, ArchiveError, Event, InstallBegin, archive_error_string
from pkgfront.core.models import PackageField


class ConsoleEventReporter:
    """Callable event sink that prints human-readable progress lines.

    Usage::

        handle = PackageHandle()
        handle.set_event_callback(ConsoleEventReporter())
    """

    def __call__(self, event: Event) -> int:
        if isinstance(event, InstallBegin):
            self._handle_install_begin(event)
        elif isinstance(event, ArchiveError):
            self._handle_archive_error(event)
        return OK

    # ------------------------------------------------------------------
    # Internal handlers
    # ------------------------------------------------------------------

    @staticmethod
    def _handle_install_begin(event: InstallBegin) -> None:
        out.print(f"Installing {event.package.get(PackageField.NAME)}")

    @staticmethod
    def _handle_archive_error(event: ArchiveError) -> None:
        detail = archive_error_string(event.error)
        console.print(f"archive error on {event.path}: {detail}")
