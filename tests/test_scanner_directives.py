"""
Scanner directive tests

Tests <#@ ... #> parsing, the built-in directives, diagnostics, the
permissive handling of unknown directives, and malformed properties.
"""

import pytest

from simplet4.config import AppSettings
from simplet4.lib.scanner import Scanner
from simplet4.lib.diagnostics import RecordingDiagnostics
from simplet4.lib.directives import DirectiveRegistry
from simplet4.lib.errors import (
    MalformedDirectiveError,
    UnterminatedBlockError,
    UnterminatedQuotedValueError,
)
from simplet4.models import Directive, DirectiveSpec, EmitLiteral, ScanState


def scan(text, template_path="Report.tt", diagnostics=None, **kwargs):
    return Scanner.text_scan(
        text,
        template_path=template_path,
        diagnostics=diagnostics or RecordingDiagnostics(),
        **kwargs,
    )


class TestImportDirective:
    """Test using-declaration recording"""

    def test_single_import(self):
        result = scan('<#@ import namespace="System.IO" #>')
        assert result.usings == ["System.IO"]

    def test_import_order_and_duplicates(self):
        """Usings keep encounter order and are not deduplicated"""
        template = (
            '<#@ import namespace="System" #>\n'
            '<#@ import namespace="System.Linq" #>\n'
            '<#@ import namespace="System" #>\n'
            '<#@ import namespace="System.IO" #>\n'
        )
        result = scan(template)
        assert result.usings == ["System", "System.Linq", "System", "System.IO"]

    def test_directives_produce_no_code(self):
        result = scan('<#@ import namespace="System" #>\n<#@ output extension=".txt" #>\n')
        assert result.script == []
        assert result.class_feature == []


class TestOutputDirective:
    """Test output path derivation"""

    def test_extension_without_dot(self):
        result = scan('<#@ output extension="txt" #>', template_path="Report.tt")
        assert result.output_path == "Report.txt"

    def test_extension_with_dot(self):
        result = scan('<#@ output extension=".html" #>', template_path="Report.tt")
        assert result.output_path == "Report.html"

    def test_directory_is_kept(self):
        result = scan('<#@ output extension=".cs" #>', template_path="gen/templates/Model.tt")
        assert result.output_path == "gen/templates/Model.cs"

    def test_fixed_suffix_length(self):
        """Three characters are removed whatever the template's extension"""
        result = scan('<#@ output extension=".txt" #>', template_path="Page.tmpl")
        assert result.output_path == "Page.t.txt"

    def test_suffix_length_from_settings(self):
        settings = AppSettings(source_extension_length=5)
        result = scan(
            '<#@ output extension=".txt" #>',
            template_path="Page.tmpl",
            registry=DirectiveRegistry(settings),
        )
        assert result.output_path == "Page.txt"

    def test_output_path_is_set_once(self):
        """A second output directive does not change the path"""
        diagnostics = RecordingDiagnostics()
        result = scan(
            '<#@ output extension=".txt" #><#@ output extension=".html" #>',
            diagnostics=diagnostics,
        )
        assert result.output_path == "Report.txt"
        assert any("ignoring 'Report.html'" in m for m in diagnostics.messages)

    def test_no_output_directive(self):
        assert scan("Hello").output_path is None


class TestDiagnostics:
    """Test directive diagnostics"""

    def test_template_directive_reports(self):
        diagnostics = RecordingDiagnostics()
        scan(
            '<#@ template debug="false" hostspecific="true" language="C#" #>',
            diagnostics=diagnostics,
        )
        assert diagnostics.messages == [
            "Include debugging info (#line directives): false",
            "Use specific host of transformation engine: true",
            "Language of intermediate assembly: C#",
        ]

    def test_assembly_directive_reports_only(self):
        """Assembly references are reported and not added as usings"""
        diagnostics = RecordingDiagnostics()
        result = scan('<#@ assembly name="System.Core" #>', diagnostics=diagnostics)

        assert diagnostics.messages == ["Reference added to intermediate assembly: System.Core"]
        assert result.usings == []

    def test_import_and_output_report(self):
        diagnostics = RecordingDiagnostics()
        scan(
            '<#@ import namespace="System.IO" #><#@ output extension=".txt" #>',
            diagnostics=diagnostics,
        )
        assert diagnostics.messages == [
            "Using namespace: System.IO",
            "Output file extension: .txt",
            "Output file: Report.txt",
        ]


class TestPermissiveness:
    """Unknown directives and properties are ignored"""

    def test_unknown_directive_is_ignored(self):
        diagnostics = RecordingDiagnostics()
        result = scan('<#@ include file="common.tt" #>Hi', diagnostics=diagnostics)

        assert result.script == [EmitLiteral("Hi")]
        assert result.usings == []
        assert diagnostics.records == [
            (3, "Ignoring unrecognized directive 'include' at line 1"),
        ]

    def test_unknown_property_is_ignored(self):
        result = scan('<#@ import alias="x" namespace="System" #>')
        assert result.usings == ["System"]

    def test_directive_without_properties(self):
        result = scan("<#@ template #>Hi")
        assert result.script == [EmitLiteral("Hi")]

    def test_spacing_around_equals(self):
        result = scan('<#@ import namespace = "System" #>')
        assert result.usings == ["System"]

    def test_value_may_contain_block_markers(self):
        """Values run to the next quote, whatever they contain"""
        result = scan('<#@ import namespace="A#>B" #>')
        assert result.usings == ["A#>B"]


class TestMalformedDirectives:
    """Test fatal directive errors"""

    def test_unterminated_quoted_value(self):
        with pytest.raises(UnterminatedQuotedValueError):
            scan('<#@ output extension="txt')

    def test_unterminated_value_position(self):
        with pytest.raises(UnterminatedQuotedValueError) as excinfo:
            scan('Header\n<#@ output extension="txt', template_path="Page.tt")
        assert excinfo.value.line_number == 2
        assert excinfo.value.template_path == "Page.tt"

    def test_missing_end_marker(self):
        with pytest.raises(UnterminatedBlockError):
            scan('<#@ output extension="txt"')

    def test_missing_opening_quote(self):
        with pytest.raises(MalformedDirectiveError):
            scan("<#@ output extension=txt #>")

    def test_missing_equals(self):
        with pytest.raises(MalformedDirectiveError):
            scan('<#@ output extension "txt" #>')

    def test_missing_property_name(self):
        with pytest.raises(MalformedDirectiveError):
            scan('<#@ output ="txt" #>')


class TestRegistry:
    """Test the registry directly with an explicit scan state"""

    def test_registered_names(self):
        assert DirectiveRegistry().names_list() == ["assembly", "import", "output", "template"]

    def test_apply_to_state(self):
        registry = DirectiveRegistry()
        state = ScanState(template_path="Report.tt")
        directive = Directive(
            name="import",
            properties=[("namespace", "System"), ("namespace", "System.Text")],
        )

        registry.directive_apply(directive, state, RecordingDiagnostics())

        assert state.usings == ["System", "System.Text"]

    def test_custom_directive_needs_only_name_and_handlers(self):
        registry = DirectiveRegistry()
        seen = []
        registry.register(DirectiveSpec(
            name="region",
            properties={"title": lambda value, state, diagnostics: seen.append(value)},
        ))
        state = ScanState(template_path="Report.tt")

        registry.directive_apply(
            Directive(name="region", properties=[("title", "Totals"), ("color", "red")]),
            state,
            RecordingDiagnostics(),
        )

        assert seen == ["Totals"]
        assert registry.get("region").handler_get("color") is None
