"""
Generated-program fragment models

A code region is an ordered list of fragments. Each fragment knows how to
render itself as a piece of the generated C# program.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .blocks import Mode


@dataclass(frozen=True)
class RawCode:
    """
    Verbatim code from a control or class-feature block

    Spliced into the generated program exactly as written in the template.
    """
    code: str

    def render(self, writer_name: str, indent: str) -> str:
        return self.code


@dataclass(frozen=True)
class EmitLiteral:
    """
    Instruction that writes literal template text

    Attributes:
        text: Text already escaped for a verbatim string literal
              (every '"' doubled)

    Example:
        EmitLiteral('say ""hi"" now').render("_writer", "")
        -> _writer.Write(@"say ""hi"" now");
    """
    text: str

    def render(self, writer_name: str, indent: str) -> str:
        return f'{indent}{writer_name}.Write(@"{self.text}");\n'


@dataclass(frozen=True)
class EmitExpression:
    """
    Instruction that writes the value of an expression block

    Example:
        EmitExpression("1+1").render("_writer", "        ")
        -> '        _writer.Write(1+1);\\n'
    """
    expression: str

    def render(self, writer_name: str, indent: str) -> str:
        return f'{indent}{writer_name}.Write({self.expression});\n'


Fragment = Union[RawCode, EmitLiteral, EmitExpression]


@dataclass
class ScanResult:
    """
    Everything a completed scan hands to the serializer

    Attributes:
        template_path: Path of the scanned template (as given)
        usings: Namespaces from import directives, in encounter order
        output_path: Path the generated program writes to, None if the
                     template had no output directive
        script: Fragments for the entry routine body
        class_feature: Fragments emitted as class-level code
        mode: Mode at the end of the scan
    """
    template_path: str
    usings: List[str] = field(default_factory=list)
    output_path: Optional[str] = None
    script: List[Fragment] = field(default_factory=list)
    class_feature: List[Fragment] = field(default_factory=list)
    mode: Mode = Mode.SCRIPT
