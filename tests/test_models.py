"""Tests for domain models (core/models.py).

Covers command-table invariants, frozen records and the package field
accessor used by event rendering.
"""

from __future__ import annotations

import pytest

from conftest import make_entry, make_registry
from pkgfront.core.models import (
    Ambiguous,
    CommandEntry,
    CommandRegistry,
    Package,
    PackageField,
    Resolved,
)
from pkgfront.exceptions import RegistryError


# ---------------------------------------------------------------------------
# CommandEntry
# ---------------------------------------------------------------------------

class TestCommandEntry:
    def test_frozen(self) -> None:
        entry = make_entry("add")
        with pytest.raises(AttributeError):
            entry.name = "remove"  # type: ignore[misc]

    def test_handler_is_callable(self) -> None:
        entry = make_entry("add", status=3)
        assert entry.handler(["add"]) == 3


# ---------------------------------------------------------------------------
# CommandRegistry
# ---------------------------------------------------------------------------

class TestCommandRegistry:
    def test_preserves_order(self) -> None:
        registry = make_registry("which", "add", "info")
        assert registry.names() == ("which", "add", "info")

    def test_len_iter_contains(self) -> None:
        registry = make_registry("add", "info")
        assert len(registry) == 2
        assert [e.name for e in registry] == ["add", "info"]
        assert "info" in registry
        assert "inf" not in registry

    def test_get_is_exact(self) -> None:
        registry = make_registry("add", "info")
        assert registry.get("info") is registry.entries[1]
        assert registry.get("in") is None

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(RegistryError, match="Duplicate"):
            make_registry("add", "info", "add")

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(RegistryError, match="empty"):
            CommandRegistry([make_entry("")])

    def test_names_differing_in_case_are_distinct(self) -> None:
        registry = make_registry("add", "Add")
        assert registry.names() == ("add", "Add")

    def test_entries_is_tuple(self) -> None:
        registry = make_registry("add")
        assert isinstance(registry.entries, tuple)

    def test_accepts_generator(self) -> None:
        entries: list[CommandEntry] = [make_entry("a"), make_entry("b")]
        registry = CommandRegistry(e for e in entries)
        assert registry.names() == ("a", "b")


# ---------------------------------------------------------------------------
# Resolution results
# ---------------------------------------------------------------------------

class TestResults:
    def test_ambiguous_names(self) -> None:
        a, b = make_entry("update"), make_entry("upgrade")
        result = Ambiguous(token="up", matches=(a, b))
        assert result.names == ("update", "upgrade")

    def test_resolved_equality(self) -> None:
        entry = make_entry("add")
        assert Resolved(entry) == Resolved(entry)


# ---------------------------------------------------------------------------
# Package
# ---------------------------------------------------------------------------

class TestPackage:
    def test_field_accessor(self) -> None:
        pkg = Package(name="foo", version="1.2", origin="misc/foo")
        assert pkg.get(PackageField.NAME) == "foo"
        assert pkg.get(PackageField.VERSION) == "1.2"
        assert pkg.get(PackageField.ORIGIN) == "misc/foo"

    def test_defaults(self) -> None:
        pkg = Package(name="foo")
        assert pkg.version == ""
        assert pkg.origin is None

    def test_frozen(self) -> None:
        pkg = Package(name="foo")
        with pytest.raises(AttributeError):
            pkg.name = "bar"  # type: ignore[misc]
