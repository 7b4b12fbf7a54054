"""
Single-pass template scanner

Walks a template once, telling literal text apart from <# ... #> blocks,
classifying each block by the character after '<#' and handing it on:

    <#@ name key="value" ... #>   directive  -> DirectiveRegistry
    <#= expression #>             expression -> assembler (mode-routed)
    <#+ code #>                   class code -> assembler (sets CLASS_FEATURE)
    <# code #>                    control    -> assembler (sets SCRIPT)
    anything else                 text       -> assembler (mode-routed)

Whitespace after every block and text run is skipped, so the gaps between
blocks do not turn into empty Write() calls.

Example:
    >>> result = Scanner(io.StringIO('<#@ output extension="txt" #>Hi'),
    ...                  template_path="Report.tt").scan()
    >>> result.output_path, result.script
    ('Report.txt', [EmitLiteral(text='Hi')])
"""

import io
from typing import List, Optional, TextIO, Tuple, Type

from ..config import AppSettings
from ..models.blocks import Block, BlockKind, Directive
from ..models.program import ScanResult
from ..models.scan import ScanState
from .assembler import block_assemble
from .cursor import CharacterCursor
from .diagnostics import Diagnostics, LogDiagnostics
from .directives import DirectiveRegistry
from .errors import (
    MalformedDirectiveError,
    TemplateSyntaxError,
    UnterminatedBlockError,
    UnterminatedQuotedValueError,
)
from .literals import verbatim_escape
from .log import LOG


BLOCK_START = ('<', '#')
BLOCK_END = ('#', '>')


class Scanner:
    """
    Scanner and block classifier for simplet4 templates

    Handles:
    - Block start/end marker detection with one character of lookahead
    - Directive property parsing (name="value", no escapes in values)
    - Quote doubling inside literal text
    - Mode tracking through an explicit ScanState
    """

    def __init__(
        self,
        stream: TextIO,
        template_path: str = "",
        diagnostics: Optional[Diagnostics] = None,
        registry: Optional[DirectiveRegistry] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        """
        Initialize scanner over a text stream

        Args:
            stream: Template characters (open file or io.StringIO)
            template_path: Template path, used by the output directive and
                           in error messages
            diagnostics: Sink for directive diagnostics (defaults to LOG)
            registry: Directive registry (defaults to the built-ins)
            settings: Settings handed to a default registry
        """
        self.cursor = CharacterCursor(stream)
        self.state = ScanState(template_path=template_path)
        self.diagnostics = diagnostics or LogDiagnostics()
        self.registry = registry or DirectiveRegistry(settings)

    @classmethod
    def text_scan(cls, text: str, template_path: str = "", **kwargs) -> ScanResult:
        """Scan an in-memory template"""
        return cls(io.StringIO(text), template_path=template_path, **kwargs).scan()

    def scan(self) -> ScanResult:
        """
        Scan the whole stream

        Returns:
            ScanResult with usings, output path, both regions and final mode

        Raises:
            UnterminatedBlockError: A block has no '#>' before end of input
            UnterminatedQuotedValueError: A property value is not closed
            MalformedDirectiveError: A directive property is not name="value"
        """
        cursor = self.cursor
        cursor.advance()

        while not cursor.atEnd():
            line_number, column = cursor.line_number, cursor.column
            if self.blockStart_consume():
                self.block_read(line_number, column)
            else:
                self.block_handle(self.text_read())

            cursor.whitespace_skip()

        LOG(
            f"Scanned {len(self.state.script)} script and "
            f"{len(self.state.class_feature)} class feature fragments",
            level=2,
        )
        return self.state.result_make()

    def blockStart_consume(self) -> bool:
        """Consume '<#' if the cursor is on it"""
        return self.marker_consume(*BLOCK_START)

    def blockEnd_consume(self) -> bool:
        """Consume '#>' if the cursor is on it"""
        return self.marker_consume(*BLOCK_END)

    def marker_consume(self, first: str, second: str) -> bool:
        if self.cursor.pair_matches(first, second):
            self.cursor.advance()
            self.cursor.advance()
            return True
        return False

    def block_read(self, line_number: int, column: int) -> None:
        """
        Classify and process the block whose '<#' was just consumed

        Dispatches on the discriminator character. For standard control
        blocks the discriminator belongs to the body and is not consumed.

        Args:
            line_number: Line of the opening '<#'
            column: Column of the opening '<#'
        """
        kind = BlockKind.discriminator_classify(self.cursor.current)

        if kind is BlockKind.DIRECTIVE:
            self.cursor.advance()
            directive = self.directive_read(line_number)
            self.registry.directive_apply(directive, self.state, self.diagnostics)
            return

        if kind is not BlockKind.STANDARD_CONTROL:
            self.cursor.advance()

        body = self.body_read(line_number, column)
        self.block_handle(Block(kind=kind, body=body, line_number=line_number))

    def block_handle(self, block: Block) -> None:
        LOG(
            f"{block.kind.value} block at line {block.line_number} "
            f"({self.state.mode.value} mode)",
            level=3,
        )
        block_assemble(self.state, block)

    def body_read(self, line_number: int, column: int) -> str:
        """
        Capture a block body up to (not including) '#>'

        The body is copied unchanged since it is spliced in as code.

        Args:
            line_number: Line of the opening '<#'
            column: Column of the opening '<#'

        Raises:
            UnterminatedBlockError: If input ends before '#>', located at
                the opening '<#'
        """
        chars: List[str] = []

        while not self.cursor.atEnd():
            if self.blockEnd_consume():
                return ''.join(chars)
            chars.append(self.cursor.current)
            self.cursor.advance()

        raise self.error_make(
            UnterminatedBlockError,
            "Unterminated block: missing '#>'",
            line_number=line_number,
            column=column,
        )

    def text_read(self) -> Block:
        """
        Capture literal text up to the next '<#' or end of input

        Every '"' is doubled so the text can sit inside a verbatim string
        literal. The '<#' that ends the run is left for the scan loop.
        """
        line_number = self.cursor.line_number
        chars: List[str] = []

        while not self.cursor.atEnd():
            if self.cursor.pair_matches(*BLOCK_START):
                break
            chars.append(self.cursor.current)
            self.cursor.advance()

        return Block(kind=BlockKind.TEXT, body=verbatim_escape(''.join(chars)), line_number=line_number)

    def directive_read(self, line_number: int) -> Directive:
        """
        Read a directive name and its properties up to '#>'

        Args:
            line_number: Line of the opening '<#@'

        Returns:
            Directive with properties in source order
        """
        self.cursor.whitespace_skip()
        directive = Directive(name=self.identifier_read(), line_number=line_number)
        self.cursor.whitespace_skip()

        while not self.blockEnd_consume():
            directive.properties.append(self.property_read(directive.name))

        return directive

    def property_read(self, directive_name: str) -> Tuple[str, str]:
        """
        Read one name="value" property and the whitespace after it

        Raises:
            UnterminatedBlockError: Input ends where a property should start
            MalformedDirectiveError: Missing name, '=' or opening quote
            UnterminatedQuotedValueError: Missing closing quote
        """
        if self.cursor.atEnd():
            raise self.error_make(UnterminatedBlockError, f"Unterminated directive '{directive_name}': missing '#>'")

        name = self.identifier_read()
        if not name:
            raise self.error_make(
                MalformedDirectiveError,
                f"Expected property name in directive '{directive_name}', "
                f"found {self.current_describe()}",
            )

        self.cursor.whitespace_skip()
        self.expected_consume('=', f"after property '{name}'")
        self.cursor.whitespace_skip()
        value = self.quotedValue_read(name)
        self.cursor.whitespace_skip()

        return name, value

    def quotedValue_read(self, property_name: str) -> str:
        """
        Read a "..." value; the value cannot contain '"'

        Raises:
            MalformedDirectiveError: No opening quote
            UnterminatedQuotedValueError: No closing quote before end of input
        """
        self.expected_consume('"', f"to open the value of '{property_name}'")

        chars: List[str] = []
        while self.cursor.current != '"':
            if self.cursor.atEnd():
                raise self.error_make(
                    UnterminatedQuotedValueError,
                    f"Unterminated value of property '{property_name}': missing closing '\"'",
                )
            chars.append(self.cursor.current)
            self.cursor.advance()

        self.cursor.advance()  # closing quote
        return ''.join(chars)

    def identifier_read(self) -> str:
        """Read a run of letters (possibly empty)"""
        chars: List[str] = []
        while self.cursor.current_isLetter():
            chars.append(self.cursor.current)
            self.cursor.advance()
        return ''.join(chars)

    def expected_consume(self, char: str, context: str) -> None:
        if self.cursor.atEnd():
            raise self.error_make(UnterminatedBlockError, f"Unterminated directive: expected '{char}' {context}")
        if self.cursor.current != char:
            raise self.error_make(
                MalformedDirectiveError,
                f"Expected '{char}' {context}, found {self.current_describe()}",
            )
        self.cursor.advance()

    def current_describe(self) -> str:
        if self.cursor.atEnd():
            return "end of input"
        return repr(self.cursor.current)

    def error_make(
        self,
        error_class: Type[TemplateSyntaxError],
        message: str,
        line_number: Optional[int] = None,
        column: Optional[int] = None,
    ) -> TemplateSyntaxError:
        """
        Build a TemplateSyntaxError subclass located at the cursor position,
        or at line_number/column when given

        Callers raise the returned exception:
            raise self.error_make(UnterminatedBlockError, "...")
        """
        return error_class(
            message,
            template_path=self.state.template_path,
            line_number=self.cursor.line_number if line_number is None else line_number,
            column=self.cursor.column if column is None else column,
        )
