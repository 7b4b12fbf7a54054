"""
Program serializer tests

Tests the fixed layout of the generated program and the missing-output
failure.
"""

import pytest

from simplet4.config import AppSettings
from simplet4.lib.errors import MissingOutputDirectiveError
from simplet4.lib.serializer import ProgramSerializer
from simplet4.models import EmitExpression, EmitLiteral, RawCode, ScanResult


def program_lines(*lines):
    return "\n".join(lines) + "\n"


class TestLayout:
    """Test the generated program text"""

    def test_full_program(self):
        result = ScanResult(
            template_path="Report.tt",
            usings=["System", "System.IO"],
            output_path="Report.txt",
            script=[EmitLiteral("Hello"), EmitExpression("1+1")],
            class_feature=[RawCode("\n    int x;\n")],
        )

        program = ProgramSerializer(result, AppSettings()).serialize()

        assert program == program_lines(
            "using System;",
            "using System.IO;",
            "",
            "public class Generator {",
            "    private StreamWriter _writer;",
            "",
            '    public void _Main() { using (_writer = new StreamWriter(@"Report.txt")) {',
            '        _writer.Write(@"Hello");',
            "        _writer.Write(1+1);",
            "    }}",
            "",
            "    int x;",
            "",
            "    public static void Main() { new Generator()._Main(); }",
            "}",
        )

    def test_usings_in_order_with_duplicates(self):
        result = ScanResult(
            template_path="Report.tt",
            usings=["B", "A", "B"],
            output_path="Report.txt",
        )
        program = ProgramSerializer(result, AppSettings()).serialize()

        usings = [line for line in program.splitlines() if line.startswith("using ")]
        assert usings == ["using B;", "using A;", "using B;"]

    def test_regions_keep_append_order(self):
        result = ScanResult(
            template_path="Report.tt",
            output_path="Report.txt",
            script=[RawCode("for (int i = 0; i < 3; i++) {\n"), EmitExpression("i"), RawCode("}\n")],
        )
        program = ProgramSerializer(result, AppSettings()).serialize()

        assert "for (int i = 0; i < 3; i++) {\n        _writer.Write(i);\n}\n    }}" in program

    def test_class_features_after_main(self):
        result = ScanResult(
            template_path="Report.tt",
            output_path="Report.txt",
            class_feature=[RawCode(" int Helper() { return 1; } ")],
        )
        program = ProgramSerializer(result, AppSettings()).serialize()

        assert program.index("int Helper()") > program.index("public void _Main()")
        assert program.index("int Helper()") < program.index("public static void Main()")

    def test_output_path_quotes_are_escaped(self):
        result = ScanResult(template_path='a"b.tt', output_path='a"b.txt')
        program = ProgramSerializer(result, AppSettings()).serialize()
        assert 'new StreamWriter(@"a""b.txt")' in program

    def test_names_from_settings(self):
        settings = AppSettings(class_name="Renderer", writer_name="output", entry_method="Run")
        result = ScanResult(
            template_path="Report.tt",
            output_path="Report.txt",
            script=[EmitLiteral("x")],
        )
        program = ProgramSerializer(result, settings).serialize()

        assert "public class Renderer {" in program
        assert "private StreamWriter output;" in program
        assert 'public void Run() { using (output = new StreamWriter(@"Report.txt")) {' in program
        assert '        output.Write(@"x");' in program
        assert "new Renderer().Run();" in program


class TestMissingOutput:
    """Serialization requires an output path"""

    def test_serialize_without_output_path(self):
        result = ScanResult(template_path="Report.tt", script=[EmitLiteral("x")])

        with pytest.raises(MissingOutputDirectiveError) as excinfo:
            ProgramSerializer(result, AppSettings()).serialize()
        assert excinfo.value.template_path == "Report.tt"


class TestFragments:
    """Test how each fragment renders inside a region"""

    def test_literal_keeps_doubled_quotes(self):
        line = EmitLiteral('say ""hi""').render("_writer", "    ")
        assert line == '    _writer.Write(@"say ""hi""");\n'

    def test_expression_is_written_as_is(self):
        assert EmitExpression("a + b").render("w", "") == "w.Write(a + b);\n"

    def test_raw_code_ignores_writer_and_indent(self):
        assert RawCode(" x = 1; ").render("_writer", "        ") == " x = 1; "
