"""Command lines issued while cutting a release.

Commit subjects match those of earlier releases, misspelled "CHANGLOG"
included.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CHANGELOG_FILE", "CHANGELOG_PRESET", "Command", "ReleaseCommands"]

Command = tuple[str, ...]

CHANGELOG_BIN = "node_modules/.bin/conventional-changelog"
CHANGELOG_PRESET = "angular"
CHANGELOG_FILE = "CHANGELOG.md"
REMOTE = "origin"


@dataclass(frozen=True, slots=True)
class ReleaseCommands:
    """Commands for releasing ``version`` under the operator's ``tag``."""

    version: str
    tag: str

    @property
    def git_tag(self) -> str:
        return f"v{self.version}"

    def build_commit(self) -> tuple[Command, ...]:
        return (
            ("git", "add", "-A"),
            ("git", "commit", "-m", f"[build] {self.git_tag}"),
        )

    def version_bump(self) -> Command:
        return (
            "npm",
            "--no-git-tag-version",
            "version",
            self.version,
            "--message",
            f"[release] {self.version} {self.tag}",
        )

    def changelog(self) -> tuple[Command, ...]:
        return (
            (CHANGELOG_BIN, "-p", CHANGELOG_PRESET, "-i", CHANGELOG_FILE, "-s"),
            ("git", "add", "."),
            ("git", "commit", "-m", f"chore: update CHANGLOG {self.version}"),
        )

    def create_tag(self) -> Command:
        return ("git", "tag", self.git_tag)

    def push_tag(self) -> Command:
        return ("git", "push", REMOTE, f"refs/tags/{self.git_tag}")

    def publish(self) -> tuple[Command, ...]:
        # The release tag is not forwarded to `npm publish` (dist-tag) yet.
        return (
            ("git", "push"),
            ("npm", "publish"),
        )
