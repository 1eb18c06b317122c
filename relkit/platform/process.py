"""Running git, npm and hook commands.

Every command comes back as ``Ok(stdout)`` or ``Err(ProcessError)``; a
non-zero exit is a value, not an exception. The release flow only sees
``ProcessRunner``, so tests and ``--dry-run`` can swap the executor:

    match runner.run(("git", "remote", "-v"), cwd=root):
        case Ok(remotes):
            ...
        case Err(error):
            console.print(error.stderr)
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from relkit.core.result import Err, Ok, Result

__all__ = [
    "DryRunRunner",
    "ProcessError",
    "ProcessRunner",
    "SubprocessRunner",
    "format_command",
    "run",
    "run_shell",
]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that exited non-zero, timed out, or could not start.

    ``command`` is the argv, or a one-item tuple holding a shell command
    line. ``returncode`` is -1 when the process never produced an exit
    status; ``stderr`` then holds the reason.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        head = " ".join(self.command[:3])
        more = " ..." if len(self.command) > 3 else ""
        return f"{head}{more} failed (exit {self.returncode})"


def format_command(cmd: Sequence[str]) -> str:
    """Render argv the way a user would type it."""
    return shlex.join(cmd)


def _execute(
    args: list[str] | str,
    *,
    command: tuple[str, ...],
    cwd: Path,
    env: dict[str, str] | None,
    timeout: float | None,
    shell: bool,
) -> Result[str, ProcessError]:
    try:
        proc = subprocess.run(
            args,
            cwd=str(cwd),
            env=env,
            shell=shell,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        return Err(
            ProcessError(
                command=command,
                returncode=-1,
                stdout=e.stdout if isinstance(e.stdout, str) else "",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(ProcessError(command=command, returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=command,
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run(
    cmd: Sequence[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Run argv without a shell and capture its output.

    ``env`` replaces the inherited environment when given; ``timeout`` is in
    seconds. Exit status 0 yields ``Ok(stdout)``, anything else ``Err``.
    """
    argv = list(cmd)
    return _execute(argv, command=tuple(argv), cwd=cwd, env=env, timeout=timeout, shell=False)


def run_shell(
    command: str,
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Execute a command line through the system shell.

    Used for user-supplied hooks such as ``npm run build && npm test``.
    """
    return _execute(command, command=(command,), cwd=cwd, env=env, timeout=timeout, shell=True)


class ProcessRunner(Protocol):
    """Executes external commands on behalf of the release flow."""

    def run(self, cmd: Sequence[str], *, cwd: Path) -> Result[str, ProcessError]: ...

    def run_shell(self, command: str, *, cwd: Path) -> Result[str, ProcessError]: ...


class SubprocessRunner:
    """Runs commands for real."""

    def __init__(self, env: dict[str, str] | None = None) -> None:
        self._env = env

    def run(self, cmd: Sequence[str], *, cwd: Path) -> Result[str, ProcessError]:
        return run(cmd, cwd=cwd, env=self._env)

    def run_shell(self, command: str, *, cwd: Path) -> Result[str, ProcessError]:
        return run_shell(command, cwd=cwd, env=self._env)


_READ_ONLY_PREFIXES: tuple[tuple[str, ...], ...] = (
    ("git", "status"),
    ("git", "remote"),
    ("git", "log"),
    ("git", "rev-parse"),
)


class DryRunRunner:
    """Runner that only executes read-only git commands.

    Everything else is reported through ``echo`` and treated as a success.
    Shell hooks still run.
    """

    def __init__(self, inner: ProcessRunner, echo: Callable[[str], None]) -> None:
        self._inner = inner
        self._echo = echo

    def run(self, cmd: Sequence[str], *, cwd: Path) -> Result[str, ProcessError]:
        argv = tuple(cmd)
        if any(argv[: len(prefix)] == prefix for prefix in _READ_ONLY_PREFIXES):
            return self._inner.run(argv, cwd=cwd)
        self._echo(f"[dry-run] {format_command(argv)}")
        return Ok("")

    def run_shell(self, command: str, *, cwd: Path) -> Result[str, ProcessError]:
        return self._inner.run_shell(command, cwd=cwd)
