from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class PrompterProtocol(Protocol):
    """Asks the operator questions; every call blocks until answered."""

    def confirm(self, message: str) -> bool:
        """Yes/no question."""
        ...

    def choose(self, message: str, choices: Sequence[str]) -> str:
        """Single choice among ``choices``; returns the chosen item."""
        ...

    def text(self, message: str, default: str) -> str:
        """Free-text answer, ``default`` when left empty."""
        ...
