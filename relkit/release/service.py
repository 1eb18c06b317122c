from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relkit.core.config import ReleaseConfig, load_release_config
from relkit.core.manifest import PackageManifest, load_manifest
from relkit.core.result import Err, Ok, Result
from relkit.output.console import ConsoleProtocol, Style
from relkit.output.progress import ProgressProtocol
from relkit.platform.process import ProcessRunner
from relkit.release.errors import ReleaseError
from relkit.release.hooks import resolve_hook
from relkit.release.orchestrator import ReleaseOptions, ReleaseOrchestrator
from relkit.release.prompter import PrompterProtocol
from relkit.release.semver import InvalidVersionFormat, NextVersions, compute_next_versions
from relkit.release.session import ReleaseOutcome


@dataclass(frozen=True, slots=True)
class ReleaseContext:
    """Everything read from disk before a release starts."""

    manifest: PackageManifest
    config: ReleaseConfig
    versions: NextVersions


def load_release_context(
    *,
    root: Path,
    loose_versions: bool | None = None,
) -> Result[ReleaseContext, ReleaseError]:
    """Read package.json and the config once, then compute the candidates.

    Args:
        root: Project directory holding package.json
        loose_versions: Overrides the configured version pattern when set
    """
    manifest = load_manifest(root).map_err(
        lambda e: ReleaseError(kind="manifest_invalid", message=e.message)
    )
    if isinstance(manifest, Err):
        return manifest

    config = load_release_config(manifest.value).map_err(
        lambda e: ReleaseError(kind="config_invalid", message=e.message)
    )
    if isinstance(config, Err):
        return config

    loose = config.value.loose_versions if loose_versions is None else loose_versions
    try:
        versions = compute_next_versions(manifest.value.version, loose=loose)
    except InvalidVersionFormat as e:
        return Err(
            ReleaseError(
                kind="invalid_version",
                message=str(e),
                hint=None if loose else "Set loose_versions = true to allow multi-digit parts",
            )
        )

    return Ok(ReleaseContext(manifest=manifest.value, config=config.value, versions=versions))


def run_release(
    *,
    root: Path,
    runner: ProcessRunner,
    prompter: PrompterProtocol,
    console: ConsoleProtocol,
    progress: ProgressProtocol,
    before_release: object = None,
    loose_versions: bool | None = None,
    verbose: bool = False,
) -> Result[ReleaseOutcome, ReleaseError]:
    """Load the project at ``root`` and run one release attempt.

    ``before_release`` takes any hook shape (callable, awaitable, command
    string); when None the configured command, if any, is used.
    """
    loaded = load_release_context(root=root, loose_versions=loose_versions)
    if isinstance(loaded, Err):
        console.error(loaded.error.message)
        if loaded.error.hint:
            console.print(loaded.error.hint, Style.DIM)
        return loaded
    ctx = loaded.value

    hook_value = before_release if before_release is not None else ctx.config.before_release
    try:
        hook = resolve_hook(hook_value)
    except TypeError as e:
        console.error(str(e))
        return Err(ReleaseError(kind="invalid_input", message=str(e)))

    orchestrator = ReleaseOrchestrator(
        manifest=ctx.manifest,
        versions=ctx.versions,
        options=ReleaseOptions(before_release=hook, verbose=verbose),
        runner=runner,
        prompter=prompter,
        console=console,
        progress=progress,
    )
    return orchestrator.run()
