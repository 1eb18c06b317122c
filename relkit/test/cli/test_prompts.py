from __future__ import annotations

from collections.abc import Iterator

import pytest
import typer

from relkit.cli import prompts
from relkit.cli.prompts import TyperPrompter
from relkit.cli.selector import SelectorResult
from relkit.output.console import MockConsole

CHOICES = ("1.4.3", "1.5.0", "2.0.0")


def _answers(monkeypatch: pytest.MonkeyPatch, *values: str) -> list[str]:
    asked: list[str] = []
    it: Iterator[str] = iter(values)

    def fake_prompt(text: str, default: str | None = None, **_: object) -> str:
        asked.append(text)
        return next(it)

    monkeypatch.setattr(prompts.typer, "prompt", fake_prompt)
    return asked


@pytest.fixture(autouse=True)
def _piped_input(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(prompts, "is_interactive_terminal", lambda: False)


def test_choose_numbered_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    console = MockConsole()
    _answers(monkeypatch, "2")

    picked = TyperPrompter(console).choose("Choose a release version", CHOICES)

    assert picked == "1.5.0"
    assert console.messages == [
        "Choose a release version",
        " 1. 1.4.3",
        " 2. 1.5.0",
        " 3. 2.0.0",
    ]


def test_choose_reprompts_on_bad_input(monkeypatch: pytest.MonkeyPatch) -> None:
    console = MockConsole()
    asked = _answers(monkeypatch, "abc", "7", "3")

    picked = TyperPrompter(console).choose("Choose a release version", CHOICES)

    assert picked == "2.0.0"
    assert len(asked) == 3
    assert console.find("invalid number")
    assert console.find("out of range")


def test_choose_requires_choices() -> None:
    with pytest.raises(ValueError):
        TyperPrompter(MockConsole()).choose("Choose a release version", ())


def test_choose_uses_selector_on_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(prompts, "is_interactive_terminal", lambda: True)
    monkeypatch.setattr(
        prompts,
        "select_one",
        lambda *, title, options: SelectorResult(
            action="select", value=options[2].value, index=2
        ),
    )

    assert TyperPrompter(MockConsole()).choose("Choose a release version", CHOICES) == "2.0.0"


def test_choose_cancel_on_tty_aborts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(prompts, "is_interactive_terminal", lambda: True)
    monkeypatch.setattr(
        prompts,
        "select_one",
        lambda *, title, options: SelectorResult(action="cancel", value=None, index=0),
    )

    with pytest.raises(typer.Abort):
        TyperPrompter(MockConsole()).choose("Choose a release version", CHOICES)


def test_text_passes_default(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str | None] = []

    def fake_prompt(text: str, default: str | None = None, **_: object) -> str:
        seen.append(default)
        return "beta"

    monkeypatch.setattr(prompts.typer, "prompt", fake_prompt)

    assert TyperPrompter(MockConsole()).text("Input a release tag", default="v1.5.0") == "beta"
    assert seen == ["v1.5.0"]


def test_confirm_defaults_to_yes(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[bool] = []

    def fake_confirm(text: str, default: bool = False, **_: object) -> bool:
        seen.append(default)
        return default

    monkeypatch.setattr(prompts.typer, "confirm", fake_confirm)

    assert TyperPrompter(MockConsole()).confirm("ready?") is True
    assert seen == [True]
