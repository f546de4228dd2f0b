"""Turn a resolved (or unresolved) command token into an exit status.

The dispatcher owns the command table and the package handle.  It
calls exactly one handler per invocation; when the token cannot be
resolved it prints a diagnostic and returns :data:`exit_codes.USAGE`
without calling anything.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pkgfront.cli import exit_codes
from pkgfront.cli.usage import print_ambiguous, print_usage
from pkgfront.core.handle import PackageHandle, bind_handle
from pkgfront.core.models import Ambiguous, CommandRegistry, ResolutionResult, Resolved
from pkgfront.core.resolver import resolve

logger = logging.getLogger(__name__)


class Dispatcher:
    """Resolve command tokens against a registry and run the handler.

    Parameters
    ----------
    registry:
        The command table.  Injected, never global.
    handle:
        Package handle made current (see
        :func:`~pkgfront.core.handle.current_handle`) while a handler
        runs.  A fresh handle with a no-op reporter is used when omitted.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        handle: PackageHandle | None = None,
    ) -> None:
        self._registry = registry
        self._handle = handle if handle is not None else PackageHandle()

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def handle(self) -> PackageHandle:
        return self._handle

    def list_names(self) -> tuple[str, ...]:
        """Return command names in registry order."""
        return self._registry.names()

    def resolve(self, token: str) -> ResolutionResult:
        return resolve(self._registry, token)

    def dispatch(self, token: str, remaining_args: Sequence[str]) -> int:
        """Run the command *token* names with *remaining_args*.

        The handler receives ``[name, *remaining_args]`` where ``name`` is
        the full registered name, even when *token* was an abbreviation.
        Its status is returned unchanged.
        """
        result = self.resolve(token)

        if isinstance(result, Resolved):
            entry = result.entry
            logger.debug("'%s' resolved to '%s'", token, entry.name)
            with bind_handle(self._handle):
                status: int = entry.handler([entry.name, *remaining_args])
            logger.debug("'%s' exited with status %s", entry.name, status)
            return status

        if isinstance(result, Ambiguous):
            logger.debug("'%s' is ambiguous: %s", token, ", ".join(result.names))
            print_ambiguous(token, result.names)
            return exit_codes.USAGE

        logger.debug("'%s' matches no command", token)
        print_usage(self.list_names())
        return exit_codes.USAGE

    def run(self, argv: Sequence[str]) -> int:
        """Dispatch a full argument list (program name excluded)."""
        if not argv:
            print_usage(self.list_names())
            return exit_codes.USAGE
        return self.dispatch(argv[0], argv[1:])
