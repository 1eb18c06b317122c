"""Arrow-key picker for the version prompt.

Draws a small menu below the cursor with plain ANSI escapes and reads raw
keys from the terminal (termios on POSIX, msvcrt on Windows). Callers must
check ``is_interactive_terminal()`` first and fall back to a numbered
prompt when input is piped.
"""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

Key = Literal["up", "down", "enter", "cancel", "other"]

HELP_LINE = "Up/Down + Enter, q: cancel"

_ENTER = ("\r", "\n")
_CANCEL = ("q", "Q", "\x03")
# Second byte after the Windows arrow prefix, third byte after ESC [ on POSIX.
_WIN_ARROWS: dict[str, Key] = {"H": "up", "P": "down"}
_ANSI_ARROWS: dict[str, Key] = {"A": "up", "B": "down"}


@dataclass(frozen=True, slots=True)
class SelectorOption:
    value: str
    detail: str | None = None

    @property
    def label(self) -> str:
        return self.value if self.detail is None else f"{self.value}  {self.detail}"


@dataclass(frozen=True, slots=True)
class SelectorResult:
    action: Literal["select", "cancel"]
    value: str | None
    index: int


def is_interactive_terminal() -> bool:
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def _use_color() -> bool:
    if not is_interactive_terminal() or os.getenv("NO_COLOR") is not None:
        return False
    return os.getenv("TERM", "").lower() != "dumb"


def _sgr(text: str, codes: str) -> str:
    return f"\x1b[{codes}m{text}\x1b[0m" if _use_color() else text


def _classify(ch: str) -> Key | None:
    if ch in _ENTER:
        return "enter"
    if ch in _CANCEL:
        return "cancel"
    return None


def _read_key_windows() -> Key:
    import msvcrt

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return _WIN_ARROWS.get(msvcrt.getwch(), "other")
    return _classify(ch) or "other"


def _read_key_posix() -> Key:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch == "\x1b":
            # A bare ESC (or an unknown sequence) cancels.
            if sys.stdin.read(1) != "[":
                return "cancel"
            return _ANSI_ARROWS.get(sys.stdin.read(1), "cancel")
        return _classify(ch) or "other"
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_key() -> Key:
    return _read_key_windows() if os.name == "nt" else _read_key_posix()


def _fit(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    if width <= 3:
        return text[: max(width, 0)]
    return text[: width - 3] + "..."


def render_lines(*, title: str, options: Sequence[SelectorOption], index: int) -> list[str]:
    """One frame of the menu: title, one line per option, help line."""
    columns = shutil.get_terminal_size((80, 24)).columns
    width = max(40, min(100, columns)) - 4

    lines = [_sgr(title, "1;96")]
    for i, option in enumerate(options):
        text = _fit(option.label, width)
        lines.append(_sgr(f"> {text}", "1;36") if i == index else f"  {text}")
    lines.append(_sgr(HELP_LINE, "2;37"))
    return lines


def select_one(
    *,
    title: str,
    options: Sequence[SelectorOption],
    initial_index: int = 0,
) -> SelectorResult:
    """Let the operator pick one option; q, Ctrl-C or ESC cancels.

    Raises:
        ValueError: ``options`` is empty.
        RuntimeError: stdin or stdout is not a terminal.
    """
    if not options:
        raise ValueError("selector requires at least one option")
    if not is_interactive_terminal():
        raise RuntimeError("interactive selector requires a TTY")

    index = min(max(initial_index, 0), len(options) - 1)
    height = 0

    while True:
        if height:
            # Cursor back to the first line of the previous frame, then clear below.
            sys.stdout.write(f"\x1b[{height}F\x1b[J")
        frame = render_lines(title=title, options=options, index=index)
        sys.stdout.write("\n".join(frame) + "\n")
        sys.stdout.flush()
        height = len(frame)

        match _read_key():
            case "up":
                index = (index - 1) % len(options)
            case "down":
                index = (index + 1) % len(options)
            case "enter":
                return SelectorResult(action="select", value=options[index].value, index=index)
            case "cancel":
                return SelectorResult(action="cancel", value=None, index=index)
            case _:
                pass
