"""relkit: interactive release helper for npm packages.

Usage from Python:

    import relkit

    exit_code = relkit.cut_release(before_release="npm test")
"""

from __future__ import annotations

from pathlib import Path

__version__ = "0.1.0"

__all__ = ["__version__", "cut_release"]


def cut_release(
    cwd: Path | str | None = None,
    *,
    before_release: object = None,
    loose_versions: bool | None = None,
    verbose: bool = False,
) -> int:
    """Run one interactive release of the project in ``cwd``.

    ``before_release`` may be a callable, an awaitable or a shell command
    string. Returns the process exit code (0 when published or canceled,
    1 on failure or when a prompt is aborted).
    """
    import typer

    from relkit.cli.prompts import TyperPrompter
    from relkit.core.errors import ErrorCode
    from relkit.output.console import RichConsole
    from relkit.output.progress import RichProgress
    from relkit.platform.process import SubprocessRunner
    from relkit.release.orchestrator import exit_code_for
    from relkit.release.service import run_release

    root = Path(cwd) if cwd is not None else Path.cwd()
    console = RichConsole()
    try:
        result = run_release(
            root=root.resolve(),
            runner=SubprocessRunner(),
            prompter=TyperPrompter(console),
            console=console,
            progress=RichProgress(console.rich),
            before_release=before_release,
            loose_versions=loose_versions,
            verbose=verbose,
        )
    except typer.Abort:
        console.error("Aborted")
        return int(ErrorCode.FAILURE)
    return int(exit_code_for(result))
