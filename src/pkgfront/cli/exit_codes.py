"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
Usage and availability codes follow ``sysexits.h``.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: command completed without error."""

GENERAL_ERROR: int = 1
"""A known PkgError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

USAGE: int = 64
"""No command, unknown or ambiguous command, or misuse of ``help`` (EX_USAGE)."""

UNAVAILABLE: int = 69
"""The subcommand is registered but no implementation is installed (EX_UNAVAILABLE)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
