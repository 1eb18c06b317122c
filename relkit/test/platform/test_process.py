"""Tests for relkit.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from relkit.core.result import Err, Ok
from relkit.platform.process import (
    DryRunRunner,
    ProcessError,
    SubprocessRunner,
    format_command,
    run,
    run_shell,
)

PY = sys.executable


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(("git", "status"), 128, "", "fatal: not a git repository")
        assert str(error) == "git status failed (exit 128)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(("git", "push", "origin", "refs/tags/v1.5.0"), 1, "", "")
        assert str(error) == "git push origin ... failed (exit 1)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "print('hello')"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "hello" in result.value

    def test_failure_keeps_output(self, tmp_path: Path) -> None:
        result = run(
            [PY, "-c", "import sys; print('out'); sys.stderr.write('bad'); sys.exit(3)"],
            cwd=tmp_path,
        )

        assert isinstance(result, Err)
        assert result.error.returncode == 3
        assert "out" in result.error.stdout
        assert "bad" in result.error.stderr

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert result.error.stderr

    def test_uses_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("{}")

        result = run([PY, "-c", "import os; print(os.listdir('.'))"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "package.json" in result.value

    def test_timeout(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "import time; time.sleep(10)"], cwd=tmp_path, timeout=0.1)

        assert isinstance(result, Err)
        assert "timed out" in result.error.stderr


class TestRunShell:
    def test_shell_features(self, tmp_path: Path) -> None:
        result = run_shell("echo one && echo two", cwd=tmp_path)

        assert isinstance(result, Ok)
        assert result.value.split() == ["one", "two"]

    def test_failure(self, tmp_path: Path) -> None:
        result = run_shell("exit 7", cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 7
        assert result.error.command == ("exit 7",)


def test_subprocess_runner_delegates(tmp_path: Path) -> None:
    runner = SubprocessRunner()

    assert runner.run([PY, "-c", "print(1)"], cwd=tmp_path) == Ok("1\n")
    assert isinstance(runner.run_shell("exit 1", cwd=tmp_path), Err)


def test_format_command_quotes_arguments() -> None:
    assert format_command(["git", "commit", "-m", "[build] v1.5.0"]) == (
        "git commit -m '[build] v1.5.0'"
    )


class TestDryRunRunner:
    def test_read_only_commands_run(self, tmp_path: Path) -> None:
        calls: list[tuple[str, ...]] = []

        class Inner:
            def run(self, cmd: object, *, cwd: Path) -> Ok[str]:
                calls.append(tuple(cmd))  # type: ignore[arg-type]
                return Ok("origin")

            def run_shell(self, command: str, *, cwd: Path) -> Ok[str]:
                return Ok("hooked")

        echoed: list[str] = []
        runner = DryRunRunner(Inner(), echo=echoed.append)

        assert runner.run(["git", "remote", "-v"], cwd=tmp_path) == Ok("origin")
        assert runner.run(["git", "tag", "v1.5.0"], cwd=tmp_path) == Ok("")
        assert runner.run_shell("npm test", cwd=tmp_path) == Ok("hooked")

        assert calls == [("git", "remote", "-v")]
        assert echoed == ["[dry-run] git tag v1.5.0"]
