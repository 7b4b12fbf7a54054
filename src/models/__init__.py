"""
Models package for simplet4

Contains data structures and type definitions for the transformation pipeline.
"""

from .state import ProgramState, pipeline
from .blocks import Mode, BlockKind, Block, Directive
from .program import RawCode, EmitLiteral, EmitExpression, Fragment, ScanResult
from .scan import ScanState
from .directives import DirectiveSpec, PropertyHandler

__all__ = [
    "ProgramState",
    "pipeline",
    "Mode",
    "BlockKind",
    "Block",
    "Directive",
    "RawCode",
    "EmitLiteral",
    "EmitExpression",
    "Fragment",
    "ScanResult",
    "ScanState",
    "DirectiveSpec",
    "PropertyHandler",
]
