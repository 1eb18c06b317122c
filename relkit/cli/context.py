from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relkit.cli.prompts import TyperPrompter
from relkit.core.errors import ErrorCode
from relkit.output.console import ConsoleProtocol, RichConsole, Style
from relkit.output.progress import ProgressProtocol, RichProgress
from relkit.platform.process import DryRunRunner, ProcessRunner, SubprocessRunner
from relkit.release.prompter import PrompterProtocol


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    console: ConsoleProtocol
    progress: ProgressProtocol
    prompter: PrompterProtocol
    runner: ProcessRunner


def resolve_root(cwd: Path | None) -> Path:
    try:
        root = (cwd or Path.cwd()).expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --cwd: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.FAILURE))

    if not root.is_dir():
        typer.echo(f"error: not a directory: {root}", err=True)
        raise typer.Exit(code=int(ErrorCode.FAILURE))
    return root


def build_context(*, cwd: Path | None = None, dry_run: bool = False) -> CLIContext:
    root = resolve_root(cwd)
    console = RichConsole()

    runner: ProcessRunner = SubprocessRunner()
    if dry_run:
        console.warning("dry run: git and npm commands that change anything are only printed")
        runner = DryRunRunner(runner, echo=lambda msg: console.print(msg, Style.DIM))

    return CLIContext(
        root=root,
        console=console,
        progress=RichProgress(console.rich),
        prompter=TyperPrompter(console),
        runner=runner,
    )
