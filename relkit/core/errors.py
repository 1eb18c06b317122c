"""Process exit codes.

A release either ends cleanly (published or canceled by the operator) or
fails. Every failure exits with the same code so shell callers only need to
test for non-zero.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for relkit commands.

    - 0: Success (released, or canceled by the operator)
    - 1: Failure (preflight, before-release hook, bad version, tag push)
    """

    OK = 0
    FAILURE = 1

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
