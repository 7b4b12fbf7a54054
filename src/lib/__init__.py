"""
simplet4 - T4-style template transformer

Compiles text templates into a generated C# program that renders them.
"""

__version__ = "1.0.0"

from .scanner import Scanner
from .serializer import ProgramSerializer
from .engine import Engine
from .directives import DirectiveRegistry
from .diagnostics import LogDiagnostics, RecordingDiagnostics
from .errors import (
    TransformError,
    TemplateSyntaxError,
    UnterminatedBlockError,
    UnterminatedQuotedValueError,
    MalformedDirectiveError,
    MissingOutputDirectiveError,
    SourceOpenError,
    OutputOpenError,
)
from .log import LOG, state_connectToLogger

__all__ = [
    "Scanner",
    "ProgramSerializer",
    "Engine",
    "DirectiveRegistry",
    "LogDiagnostics",
    "RecordingDiagnostics",
    "TransformError",
    "TemplateSyntaxError",
    "UnterminatedBlockError",
    "UnterminatedQuotedValueError",
    "MalformedDirectiveError",
    "MissingOutputDirectiveError",
    "SourceOpenError",
    "OutputOpenError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
