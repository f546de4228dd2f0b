"""Core layer: command table, resolution and event delivery.

Rules
-----
* No ``print()`` calls and no console rendering.
* No imports from ``cli``.
* Resolution is pure and deterministic.
"""

from pkgfront.core.events import (
    ArchiveError,
    DeinstallBegin,
    DeinstallFinished,
    Event,
    EventCallback,
    EventKind,
    EventReporter,
    InstallBegin,
    InstallFinished,
    archive_error_string,
)
from pkgfront.core.handle import PackageHandle, bind_handle, current_handle
from pkgfront.core.models import (
    Ambiguous,
    CommandEntry,
    CommandRegistry,
    NotFound,
    Package,
    PackageField,
    ResolutionResult,
    Resolved,
)
from pkgfront.core.protocols import DocumentationRenderer, Subcommand
from pkgfront.core.resolver import resolve

__all__: list[str] = [
    "Ambiguous",
    "ArchiveError",
    "CommandEntry",
    "CommandRegistry",
    "DeinstallBegin",
    "DeinstallFinished",
    "DocumentationRenderer",
    "Event",
    "EventCallback",
    "EventKind",
    "EventReporter",
    "InstallBegin",
    "InstallFinished",
    "NotFound",
    "Package",
    "PackageField",
    "PackageHandle",
    "ResolutionResult",
    "Resolved",
    "Subcommand",
    "archive_error_string",
    "bind_handle",
    "current_handle",
    "resolve",
]
