"""Console output for the release flow.

Release code talks to ``ConsoleProtocol`` only. Labeled lines ("OK",
"error:", "warning:", "info:") carry the outcome of a step; plain lines echo
command output. ``RichConsole`` is what the CLI uses and ``MockConsole``
records lines for assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]


class Style(Enum):
    DEFAULT = auto()
    DIM = auto()
    BOLD = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Prefix and Rich style of each labeled line.
LABELS: dict[Style, tuple[str, str]] = {
    Style.SUCCESS: ("OK", "green"),
    Style.ERROR: ("error:", "red bold"),
    Style.WARNING: ("warning:", "yellow"),
    Style.INFO: ("info:", "cyan"),
}

_RICH_STYLES: dict[Style, str] = {
    Style.DEFAULT: "",
    Style.DIM: "dim",
    Style.BOLD: "bold",
}


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a line verbatim; square brackets are not markup."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def newline(self) -> None: ...


class RichConsole:
    """Console writing to stdout through ``rich``."""

    def __init__(self, *, stderr: bool = False) -> None:
        from rich.console import Console

        self._console = Console(stderr=stderr, highlight=False)

    @property
    def rich(self) -> Console:
        """The wrapped Rich console, shared with the progress spinner."""
        return self._console

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._console.print(message, style=_RICH_STYLES.get(style, ""), markup=False)

    def success(self, message: str) -> None:
        self._labeled(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._labeled(Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._labeled(Style.WARNING, message)

    def info(self, message: str) -> None:
        self._labeled(Style.INFO, message)

    def newline(self) -> None:
        self._console.print()

    def _labeled(self, style: Style, message: str) -> None:
        from rich.text import Text

        label, rich_style = LABELS[style]
        self._console.print(Text.assemble((label, rich_style), f" {message}"))


@dataclass(frozen=True, slots=True)
class OutputRecord:
    message: str
    style: Style


def _no_records() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Records every line instead of printing it."""

    outputs: list[OutputRecord] = field(default_factory=_no_records)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self._labeled(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._labeled(Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._labeled(Style.WARNING, message)

    def info(self, message: str) -> None:
        self._labeled(Style.INFO, message)

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    def _labeled(self, style: Style, message: str) -> None:
        label, _ = LABELS[style]
        self.outputs.append(OutputRecord(f"{label} {message}", style))

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style is Style.ERROR for o in self.outputs)

    def has_success(self) -> bool:
        return any(o.style is Style.SUCCESS for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]

    def clear(self) -> None:
        self.outputs.clear()
