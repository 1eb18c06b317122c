"""The optional before-release hook.

A hook can be given as a callable, an awaitable, or a shell command line.
``resolve_hook`` turns whatever the caller passed into one tagged variant
and ``run_hook`` executes it, so the rest of the flow only sees
``Result[None, ReleaseError]``.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.output.console import ConsoleProtocol
from relkit.platform.process import ProcessRunner
from relkit.release.errors import ReleaseError

__all__ = [
    "AwaitableHook",
    "BeforeReleaseHook",
    "CallbackHook",
    "HOOK_GUIDANCE",
    "NoHook",
    "ShellHook",
    "resolve_hook",
    "run_hook",
]

HOOK_GUIDANCE = "Please check your beforeRelease task"


@dataclass(frozen=True, slots=True)
class NoHook:
    pass


@dataclass(frozen=True, slots=True)
class CallbackHook:
    fn: Callable[[], object]


@dataclass(frozen=True, slots=True)
class AwaitableHook:
    awaitable: Awaitable[object]


@dataclass(frozen=True, slots=True)
class ShellHook:
    command: str


type BeforeReleaseHook = NoHook | CallbackHook | AwaitableHook | ShellHook


def resolve_hook(value: object) -> BeforeReleaseHook:
    """Classify a user-supplied hook.

    ``None`` and blank strings mean no hook.

    Raises:
        TypeError: ``value`` is none of the supported shapes.
    """
    match value:
        case None:
            return NoHook()
        case NoHook() | CallbackHook() | AwaitableHook() | ShellHook():
            return value
        case str():
            command = value.strip()
            return ShellHook(command) if command else NoHook()
        case _ if inspect.isawaitable(value):
            return AwaitableHook(value)
        case _ if callable(value):
            return CallbackHook(value)
        case _:
            raise TypeError(
                f"beforeRelease must be a callable, an awaitable or a command string, "
                f"got {type(value).__name__}"
            )


async def _await(awaitable: Awaitable[object]) -> object:
    return await awaitable


def _wait_for(awaitable: Awaitable[object]) -> Result[None, ReleaseError]:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        running = False
    else:
        running = True

    try:
        if running:
            # A second loop cannot run on this thread; drive it on a worker.
            with ThreadPoolExecutor(max_workers=1) as pool:
                pool.submit(asyncio.run, _await(awaitable)).result()
        else:
            asyncio.run(_await(awaitable))
    except Exception as e:
        return Err(
            ReleaseError(kind="hook_failed", message=HOOK_GUIDANCE, hint=f"rejected: {e!r}")
        )
    return Ok(None)


def run_hook(
    hook: BeforeReleaseHook,
    *,
    runner: ProcessRunner,
    cwd: Path,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    """Run ``hook`` to completion.

    A callback whose return value is awaitable (an ``async def`` function)
    is awaited as well. A shell command's stdout is echoed on success and
    its stderr on failure.
    """
    match hook:
        case NoHook():
            return Ok(None)

        case CallbackHook(fn=fn):
            try:
                returned = fn()
            except Exception as e:
                return Err(
                    ReleaseError(kind="hook_failed", message=HOOK_GUIDANCE, hint=f"raised: {e!r}")
                )
            if inspect.isawaitable(returned):
                return _wait_for(returned)
            return Ok(None)

        case AwaitableHook(awaitable=awaitable):
            return _wait_for(awaitable)

        case ShellHook(command=command):
            result = runner.run_shell(command, cwd=cwd)
            if isinstance(result, Err):
                console.print(result.error.stderr.rstrip())
                console.newline()
                return Err(
                    ReleaseError(
                        kind="hook_failed",
                        message=HOOK_GUIDANCE,
                        hint=f"`{command}` exited with status {result.error.returncode}",
                    )
                )
            if result.value.strip():
                console.print(result.value.rstrip())
            return Ok(None)
