"""Tests for event delivery (core/events.py) and rendering (cli/reporter.py).

Coverage:
* The reporter forwards to the single registered callback; last wins.
* Emitting with no callback is a silent success.
* Callback statuses are returned to the emitter unchanged.
* The console callback renders install-begin and archive-error only.
"""

from __future__ import annotations

import tarfile
from dataclasses import dataclass

import pytest

from pkgfront.cli.reporter import ConsoleEventReporter
from pkgfront.core.events import (
    OK,
    ArchiveError,
    DeinstallBegin,
    DeinstallFinished,
    Event,
    EventKind,
    EventReporter,
    InstallBegin,
    InstallFinished,
    archive_error_string,
)
from pkgfront.core.handle import PackageHandle
from pkgfront.core.models import Package


@dataclass(frozen=True)
class _FutureEvent(Event):
    """An event kind the console reporter was not written for."""

    detail: str = "later"


# ---------------------------------------------------------------------------
# EventReporter
# ---------------------------------------------------------------------------

class TestEventReporter:
    def test_no_callback_is_noop(self) -> None:
        assert EventReporter().emit(InstallBegin(Package("foo"))) == OK

    def test_forwards_event(self) -> None:
        seen: list[Event] = []

        def sink(event: Event) -> int:
            seen.append(event)
            return OK

        reporter = EventReporter()
        reporter.register(sink)
        event = InstallBegin(Package("foo"))
        reporter.emit(event)
        assert seen == [event]

    def test_last_registration_wins(self) -> None:
        first: list[Event] = []
        second: list[Event] = []
        reporter = EventReporter(lambda e: first.append(e) or OK)
        reporter.register(lambda e: second.append(e) or OK)
        reporter.emit(InstallFinished(Package("foo")))
        assert first == []
        assert len(second) == 1

    def test_status_passed_back(self) -> None:
        reporter = EventReporter(lambda e: 5)
        assert reporter.emit(DeinstallBegin(Package("foo"))) == 5

    def test_callback_property(self) -> None:
        def sink(event: Event) -> int:
            return OK

        reporter = EventReporter()
        reporter.register(sink)
        assert reporter.callback is sink

    def test_handle_shortcuts(self) -> None:
        seen: list[Event] = []
        handle = PackageHandle()
        handle.set_event_callback(lambda e: seen.append(e) or OK)
        handle.emit(DeinstallFinished(Package("foo")))
        assert len(seen) == 1

    def test_handles_have_separate_reporters(self) -> None:
        assert PackageHandle().reporter is not PackageHandle().reporter


# ---------------------------------------------------------------------------
# Event family
# ---------------------------------------------------------------------------

class TestEventKinds:
    @pytest.mark.parametrize(
        ("event_cls", "kind"),
        [
            (InstallBegin, EventKind.INSTALL_BEGIN),
            (InstallFinished, EventKind.INSTALL_FINISHED),
            (DeinstallBegin, EventKind.DEINSTALL_BEGIN),
            (DeinstallFinished, EventKind.DEINSTALL_FINISHED),
            (ArchiveError, EventKind.ARCHIVE_ERROR),
        ],
    )
    def test_kind_tags(self, event_cls: type[Event], kind: EventKind) -> None:
        assert event_cls.kind is kind

    def test_events_are_frozen(self) -> None:
        event = InstallBegin(Package("foo"))
        with pytest.raises(AttributeError):
            event.package = Package("bar")  # type: ignore[misc]


class TestArchiveErrorString:
    def test_uses_message(self) -> None:
        assert archive_error_string(tarfile.ReadError("truncated header")) == "truncated header"

    def test_oserror_uses_strerror(self) -> None:
        err = FileNotFoundError(2, "No such file or directory", "/tmp/x.pkg")
        assert archive_error_string(err) == "No such file or directory"

    def test_empty_message_falls_back_to_class_name(self) -> None:
        assert archive_error_string(tarfile.CompressionError()) == "CompressionError"


# ---------------------------------------------------------------------------
# ConsoleEventReporter
# ---------------------------------------------------------------------------

class TestConsoleEventReporter:
    def test_install_begin(self, capsys: pytest.CaptureFixture[str]) -> None:
        status = ConsoleEventReporter()(InstallBegin(Package(name="foo", version="1.0")))
        assert status == OK
        captured = capsys.readouterr()
        assert captured.out == "Installing foo\n"
        assert captured.err == ""

    def test_archive_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        event = ArchiveError(path="/var/cache/foo.pkg", error=tarfile.ReadError("bad checksum"))
        assert ConsoleEventReporter()(event) == OK
        captured = capsys.readouterr()
        assert captured.err == "archive error on /var/cache/foo.pkg: bad checksum\n"
        assert captured.out == ""

    @pytest.mark.parametrize(
        "event",
        [
            InstallFinished(Package("foo")),
            DeinstallBegin(Package("foo")),
            DeinstallFinished(Package("foo")),
            _FutureEvent(),
            Event(),
        ],
    )
    def test_other_kinds_are_silent(
        self, event: Event, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert ConsoleEventReporter()(event) == OK
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_brackets_in_names_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleEventReporter()(InstallBegin(Package(name="py[bold]lib")))
        assert capsys.readouterr().out == "Installing py[bold]lib\n"

    def test_emoji_codes_are_not_replaced(self, capsys: pytest.CaptureFixture[str]) -> None:
        reporter = ConsoleEventReporter()
        reporter(InstallBegin(Package(name="foo:smile:bar")))
        reporter(ArchiveError(path="/var/cache/a:cat:b.pkg", error=OSError("bad")))
        captured = capsys.readouterr()
        assert captured.out == "Installing foo:smile:bar\n"
        assert captured.err == "archive error on /var/cache/a:cat:b.pkg: bad\n"

    def test_through_handle(self, capsys: pytest.CaptureFixture[str]) -> None:
        handle = PackageHandle()
        handle.set_event_callback(ConsoleEventReporter())
        assert handle.emit(InstallBegin(Package("foo"))) == OK
        assert "Installing foo" in capsys.readouterr().out
