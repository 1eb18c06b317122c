"""Repository checks that must pass before anything is mutated.

Each task is an external command plus a predicate over its stdout. All
tasks run concurrently and are joined before the verdict; a single failing
task fails the whole preflight.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.platform.process import ProcessRunner
from relkit.release.errors import ReleaseError

__all__ = [
    "CheckResult",
    "CheckStatus",
    "DEFAULT_PREFLIGHT_TASKS",
    "PreflightTask",
    "check_task",
    "run_preflight",
]


class CheckStatus(Enum):
    OK = auto()
    ERROR = auto()


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of one preflight task.

    Attributes:
        name: Short identifier of the task (e.g. "git-repo")
        status: Whether the task passed
        message: "ok", or the task's error log line
        hint: Captured stderr of a failed command, if any
    """

    name: str
    status: CheckStatus
    message: str
    hint: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == CheckStatus.OK

    @classmethod
    def success(cls, name: str, message: str = "ok") -> CheckResult:
        return cls(name=name, status=CheckStatus.OK, message=message)

    @classmethod
    def error(cls, name: str, message: str, hint: str | None = None) -> CheckResult:
        return cls(name=name, status=CheckStatus.ERROR, message=message, hint=hint)


@dataclass(frozen=True, slots=True)
class PreflightTask:
    name: str
    command: tuple[str, ...]
    check: Callable[[str], bool]
    errorlog: str


def _is_git_project(stdout: str) -> bool:
    return "fatal" not in stdout


def _has_remote(stdout: str) -> bool:
    return len(stdout.strip()) > 0


DEFAULT_PREFLIGHT_TASKS: tuple[PreflightTask, ...] = (
    PreflightTask(
        name="git-repo",
        command=("git", "status"),
        check=_is_git_project,
        errorlog="Cannot find a git project!",
    ),
    PreflightTask(
        name="git-remote",
        command=("git", "remote", "-v"),
        check=_has_remote,
        errorlog="No remote repository!",
    ),
)


def check_task(task: PreflightTask, *, runner: ProcessRunner, cwd: Path) -> CheckResult:
    """Run one task; it passes on exit status 0 with an accepted stdout."""
    result = runner.run(task.command, cwd=cwd)
    if isinstance(result, Err):
        hint = result.error.stderr.strip() or None
        return CheckResult.error(task.name, task.errorlog, hint=hint)
    if not task.check(result.value):
        return CheckResult.error(task.name, task.errorlog)
    return CheckResult.success(task.name)


def run_preflight(
    tasks: Sequence[PreflightTask],
    *,
    runner: ProcessRunner,
    cwd: Path,
) -> Result[tuple[CheckResult, ...], ReleaseError]:
    """Run every task concurrently and require all of them to pass.

    Every task is waited for, even after one has failed. The reported
    failure is the first failing task in ``tasks`` order.

    Returns:
        Ok(results) when all tasks pass, Err(ReleaseError) naming the
        first failing task's error log otherwise.
    """
    if not tasks:
        return Ok(())

    with ThreadPoolExecutor(max_workers=len(tasks), thread_name_prefix="preflight") as pool:
        futures = [pool.submit(check_task, task, runner=runner, cwd=cwd) for task in tasks]
        results = tuple(f.result() for f in futures)

    for r in results:
        if not r.ok:
            return Err(ReleaseError(kind="preflight_failed", message=r.message, hint=r.hint))
    return Ok(results)
