from __future__ import annotations

from collections.abc import Sequence

import typer

from relkit.cli.selector import SelectorOption, is_interactive_terminal, select_one
from relkit.output.console import ConsoleProtocol, Style


class TyperPrompter:
    """Terminal prompts for the release flow.

    The version choice uses the arrow-key selector on a TTY and falls back
    to a numbered prompt when input is piped.
    """

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def confirm(self, message: str) -> bool:
        return typer.confirm(message, default=True)

    def choose(self, message: str, choices: Sequence[str]) -> str:
        if not choices:
            raise ValueError("choose requires at least one choice")

        if is_interactive_terminal():
            picked = select_one(
                title=message,
                options=[SelectorOption(value=c) for c in choices],
            )
            if picked.action == "cancel" or picked.value is None:
                raise typer.Abort()
            return picked.value

        self._console.print(message)
        for i, choice in enumerate(choices, start=1):
            self._console.print(f"{i:2}. {choice}", Style.DIM)

        while True:
            raw = typer.prompt("Pick version number", default="1")
            try:
                idx = int(raw)
            except ValueError:
                self._console.error("invalid number")
                continue
            if idx < 1 or idx > len(choices):
                self._console.error("out of range")
                continue
            return choices[idx - 1]

    def text(self, message: str, default: str) -> str:
        return str(typer.prompt(message, default=default))
