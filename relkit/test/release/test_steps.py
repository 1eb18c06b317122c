from __future__ import annotations

from relkit.release.steps import ReleaseCommands


def test_release_commands() -> None:
    commands = ReleaseCommands(version="1.5.0", tag="v1.5.0")

    assert commands.git_tag == "v1.5.0"
    assert commands.build_commit() == (
        ("git", "add", "-A"),
        ("git", "commit", "-m", "[build] v1.5.0"),
    )
    assert commands.version_bump() == (
        "npm",
        "--no-git-tag-version",
        "version",
        "1.5.0",
        "--message",
        "[release] 1.5.0 v1.5.0",
    )
    assert commands.changelog() == (
        (
            "node_modules/.bin/conventional-changelog",
            "-p",
            "angular",
            "-i",
            "CHANGELOG.md",
            "-s",
        ),
        ("git", "add", "."),
        ("git", "commit", "-m", "chore: update CHANGLOG 1.5.0"),
    )
    assert commands.create_tag() == ("git", "tag", "v1.5.0")
    assert commands.push_tag() == ("git", "push", "origin", "refs/tags/v1.5.0")
    assert commands.publish() == (("git", "push"), ("npm", "publish"))


def test_custom_tag_only_changes_bump_message() -> None:
    commands = ReleaseCommands(version="2.0.0", tag="next")

    assert commands.version_bump()[-1] == "[release] 2.0.0 next"
    assert commands.create_tag() == ("git", "tag", "v2.0.0")
    assert commands.push_tag() == ("git", "push", "origin", "refs/tags/v2.0.0")
    assert commands.publish() == (("git", "push"), ("npm", "publish"))
