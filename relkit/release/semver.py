from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

ReleaseBump = Literal["patch", "minor", "major"]

# One digit per component: "1.2.3" is accepted, "1.12.3" is not.
_STRICT_RE = re.compile(r"(\d)\.(\d)\.(\d)", re.ASCII)
_LOOSE_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)", re.ASCII)


class InvalidVersionFormat(ValueError):
    """The version string is not MAJOR.MINOR.PATCH."""

    def __init__(self, version: str, *, loose: bool = False) -> None:
        expected = "MAJOR.MINOR.PATCH" if loose else "D.D.D (one digit per component)"
        super().__init__(f"Invalid version: {version!r} (expected {expected})")
        self.version = version


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_tag(self) -> str:
        return f"v{self}"

    def bump(self, kind: ReleaseBump) -> SemVer:
        match kind:
            case "major":
                return SemVer(self.major + 1, 0, 0)
            case "minor":
                return SemVer(self.major, self.minor + 1, 0)
            case "patch":
                return SemVer(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump kind: {kind}")


@dataclass(frozen=True, slots=True)
class NextVersions:
    """The three release candidates derived from one current version."""

    current: SemVer
    patch: SemVer
    minor: SemVer
    major: SemVer

    @property
    def choices(self) -> tuple[str, str, str]:
        """Candidate strings, always ordered patch, minor, major."""
        return (str(self.patch), str(self.minor), str(self.major))


def parse_version(text: str, *, loose: bool = False) -> SemVer:
    """Parse a package version.

    Raises:
        InvalidVersionFormat: ``text`` does not match the accepted pattern.
    """
    m = (_LOOSE_RE if loose else _STRICT_RE).fullmatch(text)
    if m is None:
        raise InvalidVersionFormat(text, loose=loose)
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def compute_next_versions(current: str, *, loose: bool = False) -> NextVersions:
    """Compute the patch, minor and major candidates for ``current``.

    Each candidate is bumped from ``current``, never from another
    candidate.

    Raises:
        InvalidVersionFormat: ``current`` does not match the accepted pattern.
    """
    base = parse_version(current, loose=loose)
    return NextVersions(
        current=base,
        patch=base.bump("patch"),
        minor=base.bump("minor"),
        major=base.bump("major"),
    )
