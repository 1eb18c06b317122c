from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from relkit.test.fakes import GIT_REMOTE_OK, GIT_STATUS_OK, FakeRunner, ScriptedPrompter

@pytest.fixture
def runner() -> FakeRunner:
    r = FakeRunner()
    r.outputs[("git", "status")] = GIT_STATUS_OK
    r.outputs[("git", "remote", "-v")] = GIT_REMOTE_OK
    return r


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


def write_manifest(root: Path, **fields: object) -> Path:
    data: dict[str, object] = {"name": "widget", "version": "1.4.2"}
    data.update(fields)
    path = root / "package.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    write_manifest(tmp_path)
    return tmp_path


@pytest.fixture
def write_package_json() -> Callable[..., Path]:
    return write_manifest
