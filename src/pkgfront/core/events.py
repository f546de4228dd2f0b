"""Lifecycle events and the reporter that delivers them.

Library code (archive extraction, install sequencing) announces what it
is doing by emitting one of the typed events below through an
:class:`EventReporter`.  The reporter forwards each event to a single
registered callback; presentation lives entirely in that callback.

Design
------
* Each event kind is its own frozen dataclass with typed fields, tagged
  by a :class:`EventKind` class attribute.
* Callbacks must ignore kinds they do not know about; the enumeration
  grows without the front end changing.
* Payloads are borrowed: a callback must not keep references to an
  event after it returns.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import ClassVar, Protocol

from pkgfront.core.models import Package

logger = logging.getLogger(__name__)

OK: int = 0
"""Status returned by callbacks that handled (or ignored) an event."""


class EventKind(enum.Enum):
    INSTALL_BEGIN = "install-begin"
    INSTALL_FINISHED = "install-finished"
    DEINSTALL_BEGIN = "deinstall-begin"
    DEINSTALL_FINISHED = "deinstall-finished"
    ARCHIVE_ERROR = "archive-error"


# ---------------------------------------------------------------------------
# Event family
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Event:
    """Base class for every lifecycle notification."""

    kind: ClassVar[EventKind | None] = None


@dataclass(frozen=True, slots=True)
class InstallBegin(Event):
    kind: ClassVar[EventKind | None] = EventKind.INSTALL_BEGIN

    package: Package


@dataclass(frozen=True, slots=True)
class InstallFinished(Event):
    kind: ClassVar[EventKind | None] = EventKind.INSTALL_FINISHED

    package: Package


@dataclass(frozen=True, slots=True)
class DeinstallBegin(Event):
    kind: ClassVar[EventKind | None] = EventKind.DEINSTALL_BEGIN

    package: Package


@dataclass(frozen=True, slots=True)
class DeinstallFinished(Event):
    kind: ClassVar[EventKind | None] = EventKind.DEINSTALL_FINISHED

    package: Package


@dataclass(frozen=True, slots=True)
class ArchiveError(Event):
    """An archive could not be read or extracted."""

    kind: ClassVar[EventKind | None] = EventKind.ARCHIVE_ERROR

    path: str
    """Path of the archive being processed."""

    error: BaseException
    """Error raised by the archive library."""


def archive_error_string(error: BaseException) -> str:
    """Return the human-readable detail of an archive-library error.

    ``OSError`` subclasses report ``strerror`` when set; anything else
    uses ``str(error)``.  An empty message falls back to the class name.
    """
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    message = str(error).strip()
    return message or type(error).__name__


# ---------------------------------------------------------------------------
# Callback slot
# ---------------------------------------------------------------------------

class EventCallback(Protocol):
    """Contract for event sinks registered on an :class:`EventReporter`."""

    def __call__(self, event: Event) -> int:
        """Handle *event* and return a status (``0`` for success)."""
        ...  # pragma: no cover


def _ignore(event: Event) -> int:
    return OK


class EventReporter:
    """Holds the one active callback and forwards events to it.

    Usage::

        reporter = EventReporter()
        reporter.register(ConsoleEventReporter())
        reporter.emit(InstallBegin(Package(name="foo")))
    """

    def __init__(self, callback: EventCallback | None = None) -> None:
        self._callback: EventCallback = callback if callback is not None else _ignore

    @property
    def callback(self) -> EventCallback:
        return self._callback

    def register(self, callback: EventCallback) -> None:
        """Install *callback*, replacing any previous one."""
        self._callback = callback

    def emit(self, event: Event) -> int:
        """Deliver *event* synchronously and return the callback's status.

        With no callback registered this is a no-op returning ``0``.
        The emitter is free to ignore the returned status.
        """
        status = self._callback(event)
        if status != OK:
            logger.debug("event callback returned %s for %s", status, type(event).__name__)
        return status
