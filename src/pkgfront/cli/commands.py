"""Subcommand table and lazy plugin loading.

The subcommands themselves (``add``, ``create``, ...) are implemented
outside this package and published under the ``pkgfront.commands``
entry-point group.  Each entry point is named after its subcommand and
must load an object with ``run(argv) -> int`` and, optionally,
``usage() -> None``.

Plugins are imported only when their command is dispatched or its usage
is requested, so listing commands never imports subcommand code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from importlib.metadata import entry_points
from pkgfront.cli.help import HELP_COMMAND, HelpCommand
from pkgfront.cli.usage import print_generic_usage
from pkgfront.core.models import CommandEntry, CommandRegistry
from pkgfront.core.protocols import DocumentationRenderer, Subcommand
from pkgfront.exceptions import CommandUnavailableError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP: str = "pkgfront.commands"

COMMAND_NAMES: tuple[str, ...] = (
    "add",
    "create",
    "delete",
    HELP_COMMAND,
    "info",
    "register",
    "repo",
    "update",
    "upgrade",
    "version",
    "which",
)
"""Every command in display order.  ``help`` is built in; the rest are plugins."""

PluginLoader = Callable[[str], Subcommand | None]


def load_entry_point(name: str) -> Subcommand | None:
    """Load the ``pkgfront.commands`` entry point called *name*, or ``None``."""
    for ep in entry_points(group=ENTRY_POINT_GROUP):
        if ep.name == name:
            logger.debug("loading subcommand '%s' from %s", name, ep.value)
            return ep.load()
    return None


class PluginCommand:
    """Deferred binding between a command name and its plugin.

    The plugin is looked up on first use and cached.
    """

    def __init__(self, name: str, loader: PluginLoader = load_entry_point) -> None:
        self.name = name
        self._loader = loader
        self._plugin: Subcommand | None = None

    def _find(self) -> Subcommand | None:
        if self._plugin is None:
            self._plugin = self._loader(self.name)
        return self._plugin

    def _require(self) -> Subcommand:
        plugin = self._find()
        if plugin is None or not callable(getattr(plugin, "run", None)):
            raise CommandUnavailableError(
                self.name,
                hint=(
                    f"Install a package that provides the '{self.name}' entry point"
                    f" in the '{ENTRY_POINT_GROUP}' group."
                ),
            )
        return plugin

    def run(self, argv: Sequence[str]) -> int:
        status: int = self._require().run(argv)
        return status

    def usage(self) -> None:
        plugin = self._find()
        plugin_usage = getattr(plugin, "usage", None)
        if callable(plugin_usage):
            plugin_usage()
        else:
            print_generic_usage(self.name)


def build_registry(
    renderer: DocumentationRenderer,
    *,
    loader: PluginLoader = load_entry_point,
    names: Sequence[str] = COMMAND_NAMES,
) -> CommandRegistry:
    """Build the command table in *names* order.

    ``help`` (when listed) is served by :class:`HelpCommand` using
    *renderer*; every other name becomes a :class:`PluginCommand`.
    """
    help_command = HelpCommand(renderer)
    entries: list[CommandEntry] = []
    for name in names:
        if name == HELP_COMMAND:
            entries.append(CommandEntry(name, help_command.run, help_command.usage))
        else:
            plugin = PluginCommand(name, loader)
            entries.append(CommandEntry(name, plugin.run, plugin.usage))

    registry = CommandRegistry(entries)
    help_command.bind(registry)
    return registry
