"""
Exceptions raised while transforming a template

Every fatal condition derives from TransformError so callers (the CLI) can
catch one type. Scan errors carry the template position.
"""

from typing import Optional


class TransformError(Exception):
    """Base class for fatal transformation errors"""


class TemplateSyntaxError(TransformError):
    """
    Malformed template structure found while scanning

    Attributes:
        message: Human-readable description
        template_path: Template being scanned (may be empty for in-memory text)
        line_number: 1-based line where the problem was detected
        column: 1-based column where the problem was detected

    Example str():
        Unterminated block: missing '#>'
        Report.tt: line 3, column 1
    """

    def __init__(
        self,
        message: str,
        template_path: str = "",
        line_number: int = 0,
        column: int = 0,
    ) -> None:
        self.message = message
        self.template_path = template_path
        self.line_number = line_number
        self.column = column
        super().__init__(self.detail_format())

    def detail_format(self) -> str:
        where = f"line {self.line_number}, column {self.column}"
        if self.template_path:
            where = f"{self.template_path}: {where}"
        return f"{self.message}\n{where}"


class UnterminatedBlockError(TemplateSyntaxError):
    """A <# block reached end of input before its '#>' marker"""


class UnterminatedQuotedValueError(TemplateSyntaxError):
    """A directive property value has no closing quote before end of input"""


class MalformedDirectiveError(TemplateSyntaxError):
    """A directive property is not of the form name="value" """


class MissingOutputDirectiveError(TransformError):
    """The template never set an output path with <#@ output extension=... #>"""

    def __init__(self, template_path: str = "") -> None:
        self.template_path = template_path
        super().__init__(
            f"Template '{template_path}' has no output directive "
            f"(<#@ output extension=\"...\" #>)"
        )


class SourceOpenError(TransformError):
    """The template file could not be opened or read"""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        message = f"Cannot read template '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class OutputOpenError(TransformError):
    """The generated program file could not be written"""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        message = f"Cannot write generated program '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
