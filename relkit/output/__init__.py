"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)
from .progress import (
    MockProgress,
    ProgressEvent,
    ProgressProtocol,
    RichProgress,
)

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
    "MockProgress",
    "ProgressEvent",
    "ProgressProtocol",
    "RichProgress",
]
