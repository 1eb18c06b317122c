"""Release sequencing.

States, in order::

    init -> pass_check -> [before_release] -> start_release -> execute

``execute`` ends in one of three outcomes: ``published``, ``push_failed``
or ``canceled`` (the latter is produced by ``start_release`` when the
operator declines). Errors from preflight or the hook end the run early.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from pathlib import Path

from relkit.core.errors import ErrorCode
from relkit.core.manifest import PackageManifest
from relkit.core.result import Err, Ok, Result
from relkit.output.console import ConsoleProtocol, Style
from relkit.output.progress import ProgressProtocol
from relkit.platform.process import ProcessError, ProcessRunner, format_command
from relkit.release.errors import ReleaseError
from relkit.release.fsm import StepOutcome, advance, finish, run_state_machine
from relkit.release.hooks import BeforeReleaseHook, NoHook, run_hook
from relkit.release.preflight import DEFAULT_PREFLIGHT_TASKS, PreflightTask, run_preflight
from relkit.release.prompter import PrompterProtocol
from relkit.release.semver import NextVersions
from relkit.release.session import ReleaseOutcome, ReleaseSession, default_tag, new_session
from relkit.release.steps import Command, ReleaseCommands

__all__ = ["ReleaseOptions", "ReleaseOrchestrator", "exit_code_for"]

StepResult = Result[StepOutcome[ReleaseSession, ReleaseOutcome], ReleaseError]


@dataclass(frozen=True, slots=True)
class ReleaseOptions:
    before_release: BeforeReleaseHook = NoHook()
    preflight_tasks: tuple[PreflightTask, ...] = DEFAULT_PREFLIGHT_TASKS
    verbose: bool = False


class ReleaseOrchestrator:
    def __init__(
        self,
        *,
        manifest: PackageManifest,
        versions: NextVersions,
        options: ReleaseOptions,
        runner: ProcessRunner,
        prompter: PrompterProtocol,
        console: ConsoleProtocol,
        progress: ProgressProtocol,
    ) -> None:
        self._manifest = manifest
        self._versions = versions
        self._options = options
        self._runner = runner
        self._prompter = prompter
        self._console = console
        self._progress = progress

    @property
    def cwd(self) -> Path:
        return self._manifest.root

    def run(self) -> Result[ReleaseOutcome, ReleaseError]:
        return run_state_machine(
            initial_state=new_session(),
            get_step=lambda s: s.step,
            handlers={
                "init": self._init,
                "pass_check": self._pass_check,
                "before_release": self._before_release,
                "start_release": self._start_release,
                "execute": self._execute,
            },
            on_transition=self._trace,
        )

    # Steps

    def _init(self, session: ReleaseSession) -> StepResult:
        checked = run_preflight(self._options.preflight_tasks, runner=self._runner, cwd=self.cwd)
        if isinstance(checked, Err):
            self._report(checked.error)
            return checked
        return Ok(advance(replace(session, step="pass_check")))

    def _pass_check(self, session: ReleaseSession) -> StepResult:
        if isinstance(self._options.before_release, NoHook):
            return Ok(advance(replace(session, step="start_release")))
        return Ok(advance(replace(session, step="before_release")))

    def _before_release(self, session: ReleaseSession) -> StepResult:
        done = run_hook(
            self._options.before_release,
            runner=self._runner,
            cwd=self.cwd,
            console=self._console,
        )
        if isinstance(done, Err):
            self._report(done.error)
            return done
        return Ok(advance(replace(session, step="start_release")))

    def _start_release(self, session: ReleaseSession) -> StepResult:
        ready = self._prompter.confirm(
            f"Current version: {self._manifest.version}, "
            "Please confirm if all ready to release ?"
        )
        if not ready:
            self._console.info("Canceled release")
            return Ok(finish("canceled"))

        version = self._prompter.choose("Choose a release version", self._versions.choices)
        if version not in self._versions.choices:
            return Err(
                ReleaseError(
                    kind="invalid_input",
                    message=f"not a release candidate: {version}",
                    hint=f"Expected one of {', '.join(self._versions.choices)}",
                )
            )

        fallback = default_tag(version)
        tag = self._prompter.text("Input a release tag", default=fallback).strip() or fallback
        return Ok(advance(replace(session, step="execute", version=version, tag=tag)))

    def _execute(self, session: ReleaseSession) -> StepResult:
        if session.version is None or session.tag is None:
            return Err(ReleaseError(kind="invalid_input", message="no release version selected"))

        commands = ReleaseCommands(version=session.version, tag=session.tag)
        progress = self._progress

        progress.start(f'Start to release "{self._manifest.name} {session.version}"')

        progress.info("Create a release commit ...")
        self._run_unchecked(commands.build_commit())
        self._run_unchecked([commands.version_bump()])

        progress.info("Update CHANGELOG ...")
        self._run_unchecked(commands.changelog())

        progress.info("Publishing ....")
        self._run_unchecked([commands.create_tag()])

        pushed = self._run(commands.push_tag())
        if isinstance(pushed, Err):
            progress.fail("Failed to release to GitHub, please see the error message above.")
            return Ok(finish("push_failed"))

        progress.succeed("Released to GitHub successfully")
        progress.info("Release to NPM ....")
        self._run_unchecked(commands.publish())
        progress.stop()

        self._console.success("Release finished")
        return Ok(finish("published"))

    # Helpers

    def _run(self, cmd: Command) -> Result[str, ProcessError]:
        if self._options.verbose:
            self._console.print(f"$ {format_command(cmd)}", Style.DIM)

        result = self._runner.run(cmd, cwd=self.cwd)
        match result:
            case Err(error):
                for stream in (error.stdout, error.stderr):
                    if stream.strip():
                        self._console.print(stream.rstrip())
            case Ok(stdout):
                if self._options.verbose and stdout.strip():
                    self._console.print(stdout.rstrip(), Style.DIM)
        return result

    def _run_unchecked(self, cmds: Sequence[Command]) -> None:
        for cmd in cmds:
            self._run(cmd)

    def _report(self, error: ReleaseError) -> None:
        self._console.error(error.message)
        if error.hint:
            self._console.print(error.hint, Style.DIM)

    def _trace(self, previous: ReleaseSession, current: ReleaseSession) -> None:
        if self._options.verbose:
            self._console.print(f"{previous.step} -> {current.step}", Style.DIM)


def exit_code_for(result: Result[ReleaseOutcome, ReleaseError]) -> ErrorCode:
    """Map a finished release to the process exit code.

    ``published`` and ``canceled`` succeed; a rejected tag push and every
    error fail.
    """
    match result:
        case Ok("published") | Ok("canceled"):
            return ErrorCode.OK
        case _:
            return ErrorCode.FAILURE
