"""Platform abstraction layer."""

from .process import (
    DryRunRunner,
    ProcessError,
    ProcessRunner,
    SubprocessRunner,
    format_command,
    run,
    run_shell,
)

__all__ = [
    "DryRunRunner",
    "ProcessError",
    "ProcessRunner",
    "SubprocessRunner",
    "format_command",
    "run",
    "run_shell",
]
