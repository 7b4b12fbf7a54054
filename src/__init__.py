"""
simplet4 - T4-style template transformer

Compiles text templates (literal text mixed with <# #> blocks) into a
generated C# program that writes the rendered output when run.
"""

__version__ = "1.0.0"

from .lib import Scanner, ProgramSerializer, Engine, DirectiveRegistry, TransformError, LOG, state_connectToLogger

__all__ = [
    "Scanner",
    "ProgramSerializer",
    "Engine",
    "DirectiveRegistry",
    "TransformError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
