"""
Block, directive and mode models

Transient structures produced by the scanner while it walks a template.
None of these outlive a single scan.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class Mode(Enum):
    """
    Generation mode of the scan

    Decides which code region receives mode-routed fragments (text runs and
    expression blocks). Class-feature blocks switch to CLASS_FEATURE,
    standard control blocks switch back to SCRIPT.
    """
    SCRIPT = "script"
    CLASS_FEATURE = "classFeature"


class BlockKind(Enum):
    """
    Kinds of template blocks

    The kind of a <# ... #> block is decided by the character right after
    the opening marker. Literal text between blocks is a TEXT block.
    """
    DIRECTIVE = "directive"                # <#@ name key="value" #>
    EXPRESSION = "expression"              # <#= expr #>
    CLASS_FEATURE = "classFeature"         # <#+ code #>
    STANDARD_CONTROL = "standardControl"   # <# code #>
    TEXT = "text"                          # everything else

    @classmethod
    def discriminator_classify(cls, char: Optional[str]) -> "BlockKind":
        """Block kind for the character following '<#'"""
        return BLOCK_DISCRIMINATORS.get(char, cls.STANDARD_CONTROL)


BLOCK_DISCRIMINATORS = {
    '@': BlockKind.DIRECTIVE,
    '=': BlockKind.EXPRESSION,
    '+': BlockKind.CLASS_FEATURE,
}


@dataclass
class Block:
    """
    A classified unit of the template

    Attributes:
        kind: What the block is
        body: Captured text between the markers (markers excluded). For TEXT
              blocks the body is already escaped (every '"' doubled).
        line_number: Template line on which the block started

    Example:
        "<#= 1+1 #>" at line 3:
        Block(kind=BlockKind.EXPRESSION, body=" 1+1 ", line_number=3)
    """
    kind: BlockKind
    body: str
    line_number: int = 1


@dataclass
class Directive:
    """
    A parsed <#@ ... #> directive

    Properties are kept in source order; repeated keys are kept as well.

    Example:
        '<#@ import namespace="System.IO" #>'
        Directive(name="import", properties=[("namespace", "System.IO")])
    """
    name: str
    properties: List[Tuple[str, str]] = field(default_factory=list)
    line_number: int = 1
