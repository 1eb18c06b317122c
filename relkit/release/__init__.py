"""Release flow: version candidates, preflight, hook and the ordered steps."""

from __future__ import annotations

from .errors import ReleaseError
from .hooks import AwaitableHook, BeforeReleaseHook, CallbackHook, NoHook, ShellHook, resolve_hook
from .orchestrator import ReleaseOptions, ReleaseOrchestrator, exit_code_for
from .preflight import DEFAULT_PREFLIGHT_TASKS, PreflightTask, run_preflight
from .semver import InvalidVersionFormat, NextVersions, SemVer, compute_next_versions
from .service import ReleaseContext, load_release_context, run_release
from .session import ReleaseOutcome, ReleaseSession

__all__ = [
    "AwaitableHook",
    "BeforeReleaseHook",
    "CallbackHook",
    "DEFAULT_PREFLIGHT_TASKS",
    "InvalidVersionFormat",
    "NextVersions",
    "NoHook",
    "PreflightTask",
    "ReleaseContext",
    "ReleaseError",
    "ReleaseOptions",
    "ReleaseOrchestrator",
    "ReleaseOutcome",
    "ReleaseSession",
    "SemVer",
    "ShellHook",
    "compute_next_versions",
    "exit_code_for",
    "load_release_context",
    "resolve_hook",
    "run_preflight",
    "run_release",
]
