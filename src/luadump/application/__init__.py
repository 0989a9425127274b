"""Application layer for module dump analysis.

Components:
- services: analyze_source / generate_module_dump entry points
- reporters: Output formatting (JSON, rich console)
"""

from luadump.application.reporters import ConsoleReporter, JsonReporter
from luadump.application.services import analyze_source, generate_module_dump

__all__ = [
    # Services
    "analyze_source",
    "generate_module_dump",
    # Reporters
    "ConsoleReporter",
    "JsonReporter",
]
