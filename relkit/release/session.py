from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseStep = Literal["init", "pass_check", "before_release", "start_release", "execute"]
ReleaseOutcome = Literal["published", "push_failed", "canceled"]


@dataclass(frozen=True, slots=True)
class ReleaseSession:
    """State of one release attempt.

    ``version`` and ``tag`` stay None until the operator answers the
    prompts in ``start_release``; ``execute`` reads them.
    """

    step: ReleaseStep
    version: str | None = None
    tag: str | None = None


def new_session() -> ReleaseSession:
    return ReleaseSession(step="init")


def default_tag(version: str) -> str:
    return f"v{version}"
