"""Application services for module dump analysis.

analyze_source is the main entry point.
"""

from luadump.application.services.analyzer import (
    analyze_source,
    build_provider,
    default_provider,
    generate_module_dump,
)

__all__ = [
    "analyze_source",
    "build_provider",
    "default_provider",
    "generate_module_dump",
]
