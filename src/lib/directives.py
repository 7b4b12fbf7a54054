"""
Directive registry for simplet4

Maps directive names to DirectiveSpec objects whose property handlers apply
a directive's effect to the scan state. Directives and properties that are
not registered are ignored; templates written for richer engines still
transform.
"""

from typing import Dict, List, Optional

from ..config import AppSettings, appsettings
from ..models.directives import DirectiveSpec
from ..models.blocks import Directive
from ..models.scan import ScanState
from .diagnostics import Diagnostics


class DirectiveRegistry:
    """
    Registry of directive specifications and their property handlers
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        """Initialize the registry and register the built-in directives"""
        self.settings = settings or appsettings
        self.specs: Dict[str, DirectiveSpec] = {}
        self.reportingDirectives_register()
        self.importDirective_register()
        self.outputDirective_register()

    def register(self, spec: DirectiveSpec) -> None:
        """Register a directive specification"""
        self.specs[spec.name] = spec

    def get(self, name: str) -> Optional[DirectiveSpec]:
        """Directive specification by name, None if not registered"""
        return self.specs.get(name)

    def names_list(self) -> List[str]:
        return sorted(self.specs)

    def directive_apply(
        self, directive: Directive, state: ScanState, diagnostics: Diagnostics
    ) -> None:
        """
        Apply every recognized property of a directive to the scan state

        Properties run in source order. Unknown directive names and unknown
        properties are only reported at debug verbosity.

        Args:
            directive: Parsed directive
            state: State of the running scan
            diagnostics: Sink for diagnostic messages
        """
        spec = self.get(directive.name)
        if spec is None:
            diagnostics.report(
                f"Ignoring unrecognized directive '{directive.name}' "
                f"at line {directive.line_number}",
                level=3,
            )
            return

        for property_name, value in directive.properties:
            handler = spec.handler_get(property_name)
            if handler is None:
                diagnostics.report(
                    f"Ignoring unrecognized property '{property_name}' "
                    f"of directive '{directive.name}'",
                    level=3,
                )
                continue
            handler(value, state, diagnostics)

    def reportingDirectives_register(self) -> None:
        """Register template and assembly, which only produce diagnostics"""

        def reporter(label: str):
            def handler(value: str, state: ScanState, diagnostics: Diagnostics) -> None:
                diagnostics.report(f"{label}: {value}")
            return handler

        self.register(DirectiveSpec(
            name='template',
            properties={
                'debug': reporter('Include debugging info (#line directives)'),
                'hostspecific': reporter('Use specific host of transformation engine'),
                'language': reporter('Language of intermediate assembly'),
            },
        ))

        # Assembly references are reported but not added to the generated program
        self.register(DirectiveSpec(
            name='assembly',
            properties={
                'name': reporter('Reference added to intermediate assembly'),
            },
        ))

    def importDirective_register(self) -> None:
        """Register import, which records a using-declaration"""

        def namespace_handler(value: str, state: ScanState, diagnostics: Diagnostics) -> None:
            diagnostics.report(f"Using namespace: {value}")
            state.usings.append(value)

        self.register(DirectiveSpec(
            name='import',
            properties={'namespace': namespace_handler},
        ))

    def outputDirective_register(self) -> None:
        """Register output, which fixes the rendered output path"""
        settings = self.settings

        def extension_handler(value: str, state: ScanState, diagnostics: Diagnostics) -> None:
            diagnostics.report(f"Output file extension: {value}")
            output_path = settings.outputPath_derive(state.template_path, value)
            if not state.outputPath_set(output_path):
                diagnostics.report(
                    f"Output file already set to '{state.output_path}', "
                    f"ignoring '{output_path}'"
                )
                return
            diagnostics.report(f"Output file: {output_path}")

        self.register(DirectiveSpec(
            name='output',
            properties={'extension': extension_handler},
        ))
