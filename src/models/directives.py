"""
Directive specification models

Defines the structure of the directives simplet4 understands, used by the
DirectiveRegistry for dispatch.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .scan import ScanState


# (value, scan state, diagnostics sink) -> None
PropertyHandler = Callable[[str, ScanState, Any], None]


@dataclass
class DirectiveSpec:
    """
    Specification for a template directive

    Attributes:
        name: Directive name as written after '<#@'
        properties: Property name -> handler. Properties missing from this
                    mapping are ignored.
    """
    name: str
    properties: Dict[str, PropertyHandler] = field(default_factory=dict)

    def handler_get(self, property_name: str) -> Optional[PropertyHandler]:
        """Handler for a property, None if the property is not recognized"""
        return self.properties.get(property_name)
