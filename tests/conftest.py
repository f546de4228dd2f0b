"""Shared pytest fixtures and configuration for the pkgfront test suite.

Guidelines
----------
* No real ``man`` invocation: documentation goes through a fake renderer.
* Subcommand plugins are replaced by in-memory recorders.
* Tests must not depend on installed entry points or OS state.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from pkgfront.cli.commands import COMMAND_NAMES, build_registry
from pkgfront.cli.dispatcher import Dispatcher
from pkgfront.core.handle import PackageHandle, current_handle
from pkgfront.core.models import CommandEntry, CommandRegistry


class RecordingPlugin:
    """Stand-in subcommand that remembers how it was called."""

    def __init__(self, name: str, status: int = 0) -> None:
        self.name = name
        self.status = status
        self.calls: list[list[str]] = []
        self.handles: list[PackageHandle] = []
        self.usage_calls = 0

    def run(self, argv: Sequence[str]) -> int:
        self.calls.append(list(argv))
        self.handles.append(current_handle())
        return self.status

    def usage(self) -> None:
        self.usage_calls += 1


class FakeRenderer:
    """DocumentationRenderer double that records rendered commands."""

    def __init__(self, status: int = 0) -> None:
        self.status = status
        self.rendered: list[str] = []

    def render(self, command: str) -> int:
        self.rendered.append(command)
        return self.status


@pytest.fixture
def plugins() -> dict[str, RecordingPlugin]:
    return {name: RecordingPlugin(name) for name in COMMAND_NAMES if name != "help"}


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def registry(plugins: dict[str, RecordingPlugin], renderer: FakeRenderer) -> CommandRegistry:
    """The full ``pkg`` command table wired to recorders."""
    return build_registry(renderer, loader=plugins.get)


@pytest.fixture
def dispatcher(registry: CommandRegistry) -> Dispatcher:
    return Dispatcher(registry)


def make_entry(name: str, status: int = 0) -> CommandEntry:
    """Entry whose handler returns *status* and does nothing else."""

    def handler(argv: Sequence[Any]) -> int:
        return status

    def usage() -> None:
        return None

    return CommandEntry(name, handler, usage)


def make_registry(*names: str) -> CommandRegistry:
    return CommandRegistry(make_entry(name) for name in names)
