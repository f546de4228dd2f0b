"""``pkg help``: command documentation lookup.

``pkg help <command>`` hands the command's manual page to an external
viewer.  The lookup is by exact name only; abbreviations accepted by the
dispatcher are not accepted here.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence

from pkgfront.cli import exit_codes
from pkgfront.cli.usage import PROG, print_help_usage, print_invalid_command
from pkgfront.config import DEFAULT_MANPAGER, MANPAGER_ENV
from pkgfront.core.models import CommandRegistry
from pkgfront.core.protocols import DocumentationRenderer
from pkgfront.exceptions import DocumentationError

logger = logging.getLogger(__name__)

HELP_COMMAND: str = "help"


class ManPageRenderer:
    """Concrete :class:`DocumentationRenderer` that runs a man-page viewer.

    The page for command ``info`` is ``pkg-info``.
    """

    def __init__(self, manpager: str = DEFAULT_MANPAGER) -> None:
        self._argv: list[str] = shlex.split(manpager) or [DEFAULT_MANPAGER]

    @staticmethod
    def page_name(command: str) -> str:
        return f"{PROG}-{command}"

    def render(self, command: str) -> int:
        argv = [*self._argv, self.page_name(command)]
        logger.debug("running documentation viewer: %s", argv)
        try:
            completed = subprocess.run(argv, check=False)
        except OSError as exc:
            raise DocumentationError(
                f"Cannot run documentation viewer '{self._argv[0]}': {exc}",
                hint=f"Set {MANPAGER_ENV} to an installed viewer (default: {DEFAULT_MANPAGER}).",
            ) from exc
        return completed.returncode


class HelpCommand:
    """The ``help`` entry of the command table.

    The registry it lists is attached after the table is built, because
    the table contains this command too.
    """

    def __init__(
        self,
        renderer: DocumentationRenderer,
        registry: CommandRegistry | None = None,
    ) -> None:
        self._renderer = renderer
        self._registry = registry

    def bind(self, registry: CommandRegistry) -> HelpCommand:
        self._registry = registry
        return self

    @property
    def registry(self) -> CommandRegistry:
        if self._registry is None:
            raise RuntimeError("HelpCommand used before a registry was bound.")
        return self._registry

    def usage(self) -> None:
        print_help_usage(self.registry.names())

    def run(self, argv: Sequence[str]) -> int:
        """Execute ``help``; ``argv[0]`` is ``"help"`` itself.

        Returns
        -------
        int
            :data:`exit_codes.SUCCESS` once the viewer has been run,
            :data:`exit_codes.USAGE` for a missing, extra, self-referencing
            or unknown command name.
        """
        if len(argv) != 2 or argv[1] == HELP_COMMAND:
            self.usage()
            return exit_codes.USAGE

        name = argv[1]
        entry = self.registry.get(name)
        if entry is None:
            print_invalid_command(name)
            return exit_codes.USAGE

        status = self._renderer.render(entry.name)
        if status != 0:
            logger.warning("documentation viewer exited with status %d for '%s'", status, name)
        return exit_codes.SUCCESS
