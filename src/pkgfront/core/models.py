"""Domain models for pkgfront.

All models are **frozen** dataclasses: immutable value objects.  The
command table is built once at startup and never mutated; resolution
results are transient values produced per invocation.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from pkgfront.exceptions import RegistryError

CommandHandler = Callable[[Sequence[str]], int]
"""Subcommand entry point: receives ``argv`` (command name first), returns an exit status."""

UsagePrinter = Callable[[], None]
"""Prints a subcommand's short usage text."""


# ---------------------------------------------------------------------------
# Command table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandEntry:
    """One named subcommand in the command table."""

    name: str
    """Name typed on the command line.  Unique, case-sensitive, non-empty."""

    handler: CommandHandler
    """Invoked with the remaining arguments once the name is resolved."""

    usage: UsagePrinter
    """Prints the short usage text for this subcommand."""


# ---------------------------------------------------------------------------
# Resolution results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Resolved:
    """The token identifies exactly one entry."""

    entry: CommandEntry


@dataclass(frozen=True, slots=True)
class NotFound:
    """The token matches no entry, exactly or by prefix."""

    token: str


@dataclass(frozen=True, slots=True)
class Ambiguous:
    """The token is a prefix of two or more entries.

    ``matches`` preserves registry order.
    """

    token: str
    matches: tuple[CommandEntry, ...]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.matches)


ResolutionResult = Resolved | NotFound | Ambiguous


class CommandRegistry:
    """Immutable, ordered collection of :class:`CommandEntry` values.

    Insertion order is also the display order used by usage listings.

    Raises
    ------
    RegistryError
        If an entry has an empty name or two entries share a name.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[CommandEntry]) -> None:
        collected = tuple(entries)
        seen: set[str] = set()
        for entry in collected:
            if not entry.name:
                raise RegistryError("Command names must not be empty.")
            if entry.name in seen:
                raise RegistryError(f"Duplicate command name: '{entry.name}'.")
            seen.add(entry.name)
        self._entries: tuple[CommandEntry, ...] = collected

    @property
    def entries(self) -> tuple[CommandEntry, ...]:
        return self._entries

    def names(self) -> tuple[str, ...]:
        """Return command names in registry order."""
        return tuple(entry.name for entry in self._entries)

    def get(self, name: str) -> CommandEntry | None:
        """Exact-match lookup.  No prefix abbreviation."""
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self._entries)

    def __repr__(self) -> str:
        return f"CommandRegistry({list(self.names())!r})"


# ---------------------------------------------------------------------------
# Package reference carried by lifecycle events
# ---------------------------------------------------------------------------

class PackageField(enum.Enum):
    """Fields readable through :meth:`Package.get`."""

    NAME = "name"
    VERSION = "version"
    ORIGIN = "origin"


@dataclass(frozen=True, slots=True)
class Package:
    """Minimal package reference passed to event callbacks."""

    name: str
    version: str = ""
    origin: str | None = None

    def get(self, field: PackageField) -> str | None:
        """Field accessor keyed by :class:`PackageField`."""
        value: str | None = getattr(self, field.value)
        return value
