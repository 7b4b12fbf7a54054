"""
Scan state model

ScanState is the explicit state threaded through the block handlers during a
single pass over a template: the current Mode, the recorded usings and output
path, and the two append-only code regions.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .blocks import Mode
from .program import Fragment, ScanResult


@dataclass
class ScanState:
    """
    Mutable state of one template scan

    Attributes:
        template_path: Path of the template being scanned
        mode: Current generation mode (starts as SCRIPT)
        usings: Namespaces recorded by import directives, duplicates kept
        output_path: Rendered output path, set at most once
        script: Fragments destined for the entry routine
        class_feature: Fragments destined for class-level code
    """
    template_path: str = ""
    mode: Mode = Mode.SCRIPT
    usings: List[str] = field(default_factory=list)
    output_path: Optional[str] = None
    script: List[Fragment] = field(default_factory=list)
    class_feature: List[Fragment] = field(default_factory=list)

    def region_get(self, mode: Mode) -> List[Fragment]:
        """Region that receives fragments routed by the given mode"""
        if mode is Mode.CLASS_FEATURE:
            return self.class_feature
        return self.script

    def outputPath_set(self, path: str) -> bool:
        """
        Record the output path unless one is already set

        Returns:
            True if the path was recorded, False if an earlier output
            directive already fixed it
        """
        if self.output_path is not None:
            return False
        self.output_path = path
        return True

    def result_make(self) -> ScanResult:
        """Snapshot the state as the result handed to the serializer"""
        return ScanResult(
            template_path=self.template_path,
            usings=list(self.usings),
            output_path=self.output_path,
            script=list(self.script),
            class_feature=list(self.class_feature),
            mode=self.mode,
        )
