"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that external collaborators must satisfy.
Any object implementing the methods with the right signatures satisfies
a protocol structurally, with no explicit inheritance required.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class DocumentationRenderer(Protocol):
    """Contract for long-form command documentation viewers."""

    def render(self, command: str) -> int:
        """Display the documentation for *command*.

        Returns the viewer's exit status.  A non-zero status is reported
        but never turned into a dispatch failure.

        Raises
        ------
        DocumentationError
            When the viewer cannot be started at all.
        """
        ...  # pragma: no cover


class Subcommand(Protocol):
    """Contract for subcommand implementations loaded as plugins.

    ``usage`` is optional on plugins; the loader supplies a generic one
    when it is missing.
    """

    def run(self, argv: Sequence[str]) -> int:
        """Execute the subcommand.  ``argv[0]`` is the subcommand name."""
        ...  # pragma: no cover

    def usage(self) -> None:
        """Print the subcommand's short usage text."""
        ...  # pragma: no cover
