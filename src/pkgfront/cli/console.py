"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so the
dispatch path (usage listings, diagnostics, event lines) keeps working
when Rich is not installed.  Text is always passed through verbatim:
markup, emoji codes and highlighting are disabled and colour comes only
from the ``style`` argument, so the plain fallback prints the same text
(Rich only expands the tab that indents listed names).
"""

from __future__ import annotations

import sys
from typing import Any

from pkgfront.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False, soft_wrap=True, emoji=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = True) -> None:
		self._stderr = stderr

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, style=style, markup=False)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, usage listings and error lines."""

out = _ConsoleProxy(stderr=False)
"""Regular progress output."""
