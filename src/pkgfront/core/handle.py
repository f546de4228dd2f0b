"""Package-system handle and its per-dispatch binding.

The handle is the runtime context a subcommand works against: it owns the
:class:`~pkgfront.core.events.EventReporter` (and the settings the front
end was started with).  Subcommands do not receive it as a parameter;
they read it with :func:`current_handle` while a dispatch is running.

Binding uses :mod:`contextvars`, so two dispatches in the same process
(for example two tests) never see each other's reporter.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from contextvars import ContextVar
from dataclasses import dataclass, field

from pkgfront.config import Settings
from pkgfront.core.events import Event, EventCallback, EventReporter
from pkgfront.exceptions import PkgError


@dataclass(slots=True)
class PackageHandle:
    """Runtime state shared by the front end and the running subcommand."""

    settings: Settings = field(default_factory=Settings)
    reporter: EventReporter = field(default_factory=EventReporter)

    def set_event_callback(self, callback: EventCallback) -> None:
        """Register *callback* as this handle's single event sink."""
        self.reporter.register(callback)

    def emit(self, event: Event) -> int:
        """Shortcut for ``handle.reporter.emit(event)``."""
        return self.reporter.emit(event)


_current: ContextVar[PackageHandle | None] = ContextVar("pkgfront_handle", default=None)


def current_handle() -> PackageHandle:
    """Return the handle bound to the running dispatch.

    Raises
    ------
    PkgError
        When called outside :func:`bind_handle`.
    """
    handle = _current.get()
    if handle is None:
        raise PkgError(
            "No package handle is active.",
            hint="Subcommands must run through the pkg dispatcher.",
        )
    return handle


@contextlib.contextmanager
def bind_handle(handle: PackageHandle) -> Iterator[PackageHandle]:
    """Make *handle* the current handle for the duration of the block."""
    token = _current.set(handle)
    try:
        yield handle
    finally:
        _current.reset(token)
