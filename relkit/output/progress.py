"""Spinner stream for long-running release steps.

A progress stream shows a live spinner while commands run and leaves a
trail of status lines behind it. ``RichProgress`` drives a Rich status
spinner; ``MockProgress`` records events for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Protocol

if TYPE_CHECKING:
    from rich.console import Console
    from rich.status import Status

__all__ = ["MockProgress", "ProgressEvent", "ProgressProtocol", "RichProgress"]

ProgressKind = Literal["start", "info", "succeed", "fail", "stop"]


class ProgressProtocol(Protocol):
    def start(self, text: str) -> None:
        """Show the spinner with an initial status line."""
        ...

    def info(self, text: str) -> None:
        """Persist an informational status line and keep spinning."""
        ...

    def succeed(self, text: str) -> None:
        """Persist a success line."""
        ...

    def fail(self, text: str) -> None:
        """Persist a failure line and stop the spinner."""
        ...

    def stop(self) -> None:
        """Remove the spinner."""
        ...


class RichProgress:
    """Progress stream backed by ``rich.status.Status``."""

    def __init__(self, console: Console | None = None) -> None:
        if console is None:
            from rich.console import Console

            console = Console(highlight=False)
        self._console = console
        self._status: Status | None = None

    def start(self, text: str) -> None:
        self.stop()
        self._status = self._console.status(text, spinner="dots")
        self._status.start()

    def info(self, text: str) -> None:
        self._emit("[blue]i[/blue]", text)

    def succeed(self, text: str) -> None:
        self._emit("[green]✔[/green]", text)

    def fail(self, text: str) -> None:
        self._emit("[red]✖[/red]", text)
        self.stop()

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def _emit(self, symbol: str, text: str) -> None:
        from rich.markup import escape

        self._console.print(f"{symbol} {escape(text)}")
        if self._status is not None:
            self._status.update(text)


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    kind: ProgressKind
    text: str


def _empty_events() -> list[ProgressEvent]:
    return []


@dataclass
class MockProgress:
    """Progress stream that records events for testing."""

    events: list[ProgressEvent] = field(default_factory=_empty_events)

    def start(self, text: str) -> None:
        self.events.append(ProgressEvent("start", text))

    def info(self, text: str) -> None:
        self.events.append(ProgressEvent("info", text))

    def succeed(self, text: str) -> None:
        self.events.append(ProgressEvent("succeed", text))

    def fail(self, text: str) -> None:
        self.events.append(ProgressEvent("fail", text))

    def stop(self) -> None:
        self.events.append(ProgressEvent("stop", ""))

    def texts(self, kind: ProgressKind) -> list[str]:
        return [e.text for e in self.events if e.kind == kind]
