"""
Mode-routed code assembler

Turns classified blocks into fragments and appends them to the two code
regions held by a ScanState:

    Block kind          Region                 Mode afterwards
    TEXT                by current mode        unchanged
    EXPRESSION          by current mode        unchanged
    CLASS_FEATURE       classFeature (fixed)   CLASS_FEATURE
    STANDARD_CONTROL    script (fixed)         SCRIPT

Directive blocks never reach the assembler; the scanner hands them to the
DirectiveRegistry.
"""

from ..models.blocks import Block, BlockKind, Mode
from ..models.program import RawCode, EmitLiteral, EmitExpression
from ..models.scan import ScanState


def text_assemble(state: ScanState, escaped_text: str) -> None:
    """Append an emit-literal instruction to the region of the current mode"""
    state.region_get(state.mode).append(EmitLiteral(escaped_text))


def expression_assemble(state: ScanState, expression: str) -> None:
    """Append an emit-expression instruction to the region of the current mode"""
    state.region_get(state.mode).append(EmitExpression(expression.strip()))


def classFeature_assemble(state: ScanState, code: str) -> None:
    """Append class-level code and switch to CLASS_FEATURE mode"""
    state.class_feature.append(RawCode(code))
    state.mode = Mode.CLASS_FEATURE


def control_assemble(state: ScanState, code: str) -> None:
    """Append entry-routine code and switch back to SCRIPT mode"""
    state.script.append(RawCode(code))
    state.mode = Mode.SCRIPT


def block_assemble(state: ScanState, block: Block) -> None:
    """
    Route a classified block into the scan state

    Args:
        state: State of the running scan
        block: Block of any kind except DIRECTIVE

    Raises:
        ValueError: For DIRECTIVE blocks, which carry no code
    """
    if block.kind is BlockKind.TEXT:
        text_assemble(state, block.body)
    elif block.kind is BlockKind.EXPRESSION:
        expression_assemble(state, block.body)
    elif block.kind is BlockKind.CLASS_FEATURE:
        classFeature_assemble(state, block.body)
    elif block.kind is BlockKind.STANDARD_CONTROL:
        control_assemble(state, block.body)
    else:
        raise ValueError(f"{block.kind.value} blocks are not assembled into code")
