from __future__ import annotations

from pathlib import Path

import typer

from relkit import __version__
from relkit.cli.context import build_context, resolve_root
from relkit.core.errors import ErrorCode
from relkit.core.result import Err
from relkit.output.console import RichConsole, Style
from relkit.release.orchestrator import exit_code_for
from relkit.release.service import load_release_context, run_release


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    """Cut an npm package release: bump, changelog, tag, push, publish."""


@app.command()
def release(
    cwd: Path | None = typer.Option(None, "--cwd", help="Project root (default: current dir)"),
    before_release: str | None = typer.Option(
        None,
        "--before-release",
        help="Shell command that must succeed before prompting",
    ),
    loose_versions: bool = typer.Option(
        False,
        "--loose-versions",
        help="Accept multi-digit version components (e.g. 1.12.3)",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print mutating commands only"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Echo every command"),
) -> None:
    """Confirm, pick the next version, and release."""
    ctx = build_context(cwd=cwd, dry_run=dry_run)

    result = run_release(
        root=ctx.root,
        runner=ctx.runner,
        prompter=ctx.prompter,
        console=ctx.console,
        progress=ctx.progress,
        before_release=before_release,
        loose_versions=True if loose_versions else None,
        verbose=verbose,
    )

    code = exit_code_for(result)
    if not code.is_success:
        raise typer.Exit(code=int(code))


@app.command("next")
def next_versions(
    cwd: Path | None = typer.Option(None, "--cwd", help="Project root (default: current dir)"),
    loose_versions: bool = typer.Option(
        False,
        "--loose-versions",
        help="Accept multi-digit version components (e.g. 1.12.3)",
    ),
) -> None:
    """Show the current version and the next patch/minor/major candidates."""
    root = resolve_root(cwd)
    console = RichConsole()

    loaded = load_release_context(root=root, loose_versions=True if loose_versions else None)
    if isinstance(loaded, Err):
        console.error(loaded.error.message)
        if loaded.error.hint:
            console.print(loaded.error.hint, Style.DIM)
        raise typer.Exit(code=int(ErrorCode.FAILURE))

    versions = loaded.value.versions
    console.print(f"{loaded.value.manifest.name} {versions.current}", Style.BOLD)
    for kind, candidate in zip(("patch", "minor", "major"), versions.choices, strict=True):
        console.print(f"  {kind:<5} {candidate}")


def main() -> None:
    app()
