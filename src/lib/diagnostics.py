"""
Diagnostics sinks for directive side effects

The scanner reports what directives configure (debug flag, assembly
references, namespaces, output file) to an injected sink instead of printing.
The CLI uses LogDiagnostics; tests use RecordingDiagnostics.
"""

from typing import List, Protocol, Tuple

from .log import LOG


class Diagnostics(Protocol):
    """Anything that accepts diagnostic messages at a verbosity level"""

    def report(self, message: str, level: int = 1) -> None:
        ...


class LogDiagnostics:
    """Forward diagnostics to the context-aware LOG()"""

    def report(self, message: str, level: int = 1) -> None:
        LOG(message, level=level)


class RecordingDiagnostics:
    """
    Keep diagnostics in memory

    Attributes:
        records: (level, message) pairs in the order they were reported
    """

    def __init__(self) -> None:
        self.records: List[Tuple[int, str]] = []

    def report(self, message: str, level: int = 1) -> None:
        self.records.append((level, message))

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self.records]
