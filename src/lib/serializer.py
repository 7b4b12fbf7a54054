"""
Program serializer for simplet4

Turns a ScanResult into the text of the generated C# program and writes it
to disk. The program layout is fixed:

    using <namespace>;                 one per import directive, in order

    public class Generator {
        private StreamWriter _writer;

        public void _Main() { using (_writer = new StreamWriter(@"<output>")) {
    <script region>    }}
    <classFeature region>
        public static void Main() { new Generator()._Main(); }
    }

Names come from AppSettings. No check is made that the regions form valid
C#; that is left to the compiler that consumes the program.
"""

import os
import tempfile
from pathlib import Path
from typing import List, Optional

from ..config import AppSettings, appsettings
from ..models.program import Fragment, ScanResult
from .errors import MissingOutputDirectiveError, OutputOpenError
from .literals import verbatim_escape
from .log import LOG


class ProgramSerializer:
    """
    Serializes scan results to generated program text

    Responsibilities:
    - Emit using-declarations in import order
    - Wrap the script region in the entry routine's writer scope
    - Append the class feature region verbatim
    - Write the program without leaving a partial file behind
    """

    def __init__(self, result: ScanResult, settings: Optional[AppSettings] = None) -> None:
        self.result = result
        self.settings = settings or appsettings

    def serialize(self) -> str:
        """
        Build the generated program text

        Returns:
            Complete program source

        Raises:
            MissingOutputDirectiveError: If the template never set an output path
        """
        if self.result.output_path is None:
            raise MissingOutputDirectiveError(self.result.template_path)

        parts = [
            self.usings_generate(),
            self.classHeader_generate(),
            self.main_generate(),
            self.classFeatures_generate(),
            self.classFooter_generate(),
        ]
        return ''.join(parts)

    def usings_generate(self) -> str:
        return ''.join(f"using {namespace};\n" for namespace in self.result.usings)

    def classHeader_generate(self) -> str:
        return (
            "\n"
            f"public class {self.settings.class_name} {{\n"
            f"    private StreamWriter {self.settings.writer_name};\n"
            "\n"
        )

    def main_generate(self) -> str:
        settings = self.settings
        output_path = verbatim_escape(self.result.output_path or "")
        return (
            f"    public void {settings.entry_method}() {{ "
            f"using ({settings.writer_name} = new StreamWriter(@\"{output_path}\")) {{\n"
            f"{self.region_render(self.result.script)}"
            "    }}\n"
        )

    def classFeatures_generate(self) -> str:
        return self.region_render(self.result.class_feature) + "\n"

    def classFooter_generate(self) -> str:
        settings = self.settings
        return (
            f"    public static void Main() {{ new {settings.class_name}().{settings.entry_method}(); }}\n"
            "}\n"
        )

    def region_render(self, fragments: List[Fragment]) -> str:
        """Concatenate rendered fragments in append order"""
        writer_name = self.settings.writer_name
        indent = self.settings.indent
        return ''.join(fragment.render(writer_name, indent) for fragment in fragments)

    def program_write(self, program_path: str) -> str:
        """
        Serialize and write the program to disk

        The text is built before the file is touched, then written to a
        temporary file in the target directory and renamed over the target.

        Args:
            program_path: Destination of the generated program

        Returns:
            The program text that was written

        Raises:
            MissingOutputDirectiveError: Nothing is written
            OutputOpenError: The file could not be created or written
        """
        program = self.serialize()
        target = Path(program_path)

        try:
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
        except OSError as e:
            raise OutputOpenError(program_path, e.strerror) from e

        try:
            with os.fdopen(fd, "w", encoding=self.settings.program_encoding, newline="") as handle:
                handle.write(program)
            os.chmod(temp_name, 0o644)
            os.replace(temp_name, target)
        except BaseException as e:
            Path(temp_name).unlink(missing_ok=True)
            if isinstance(e, OSError):
                raise OutputOpenError(program_path, e.strerror) from e
            raise

        LOG(f"Wrote {len(program)} characters to {target}", level=2)
        return program
