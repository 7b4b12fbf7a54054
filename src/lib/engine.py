"""
Transformation engine

Ties the scan and serialization phases together and owns the two file
resources: the template is open only while it is scanned, the generated
program is only written once the scan succeeded and an output path is known.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config import AppSettings, appsettings
from ..models.program import ScanResult
from .diagnostics import Diagnostics, LogDiagnostics
from .directives import DirectiveRegistry
from .errors import SourceOpenError
from .log import LOG
from .scanner import Scanner
from .serializer import ProgramSerializer


PathLike = Union[str, Path]


class Engine:
    """
    Transforms a template file (.tt) into a generated program file (.cs)

    Example:
        >>> engine = Engine("Report.tt", "Report.cs")
        >>> summary = engine.transform()
        >>> summary['output_file']
        'Report.txt'
    """

    def __init__(
        self,
        template_file: PathLike,
        program_file: PathLike,
        diagnostics: Optional[Diagnostics] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        """
        Args:
            template_file: Input template path
            program_file: Generated program path
            diagnostics: Sink for directive diagnostics (defaults to LOG)
            settings: Settings override (defaults to the appsettings singleton)
        """
        self.template_file = str(template_file)
        self.program_file = str(program_file)
        self.diagnostics = diagnostics or LogDiagnostics()
        self.settings = settings or appsettings

    def template_scan(self) -> ScanResult:
        """
        Scan the template file

        Raises:
            SourceOpenError: Template cannot be opened or decoded
            TemplateSyntaxError: Template is malformed
        """
        LOG(f"Scanning {self.template_file}", level=2)
        try:
            handle = open(self.template_file, "r", encoding=self.settings.source_encoding, newline="")
        except OSError as e:
            raise SourceOpenError(self.template_file, e.strerror) from e

        with handle:
            scanner = Scanner(
                handle,
                template_path=self.template_file,
                diagnostics=self.diagnostics,
                registry=DirectiveRegistry(self.settings),
            )
            try:
                return scanner.scan()
            except (OSError, UnicodeDecodeError) as e:
                raise SourceOpenError(self.template_file, str(e)) from e

    def transform(self) -> Dict[str, Any]:
        """
        Run the full transformation

        Returns:
            dict with program_file, output_file, usings and fragment counts

        Raises:
            TransformError: Any fatal condition; no program file is left behind
        """
        result = self.template_scan()
        ProgramSerializer(result, self.settings).program_write(self.program_file)

        return {
            'program_file': self.program_file,
            'output_file': result.output_path,
            'usings': list(result.usings),
            'script_fragments': len(result.script),
            'class_fragments': len(result.class_feature),
        }
