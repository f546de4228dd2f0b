"""Custom exception hierarchy for pkgfront.

Every error condition that reaches the CLI error boundary must be a
subclass of :class:`PkgError` so that :func:`pkgfront.cli.app.cli` can
render a clean message instead of a stack trace.

Command-line usage mistakes (unknown or ambiguous command, misuse of
``help``) are *not* exceptions: the dispatcher renders them and returns
:data:`~pkgfront.cli.exit_codes.USAGE` directly.

Hierarchy
---------
PkgError
├── RegistryError
├── CommandUnavailableError
├── DocumentationError
└── EnvironmentError
"""

from __future__ import annotations


class PkgError(Exception):
    """Base exception for all pkgfront errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command table ---------------------------------------------------------

class RegistryError(PkgError):
    """Raised when a command table is built with empty or duplicate names."""


class CommandUnavailableError(PkgError):
    """Raised when a registered subcommand has no installed implementation."""

    def __init__(
        self,
        command: str,
        message: str | None = None,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            message or f"'{command}' is not available in this installation.",
            hint=hint,
        )
        self.command: str = command


# --- Documentation ---------------------------------------------------------

class DocumentationError(PkgError):
    """Raised when the documentation viewer cannot be started at all."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PkgError):
    """Raised when a required runtime dependency is not available."""
