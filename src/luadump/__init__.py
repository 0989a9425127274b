"""luadump - static export-shape inference for Lua modules."""

__version__ = "0.1.0"

from luadump.application.services import analyze_source, generate_module_dump
from luadump.domain.exceptions import LuaDumpError, LuaSyntaxError
from luadump.domain.model import MemberKind, ModuleShape, NoShape, Shape, SyntaxErrorOutcome

__all__ = [
    "LuaDumpError",
    "LuaSyntaxError",
    "MemberKind",
    "ModuleShape",
    "NoShape",
    "Shape",
    "SyntaxErrorOutcome",
    "__version__",
    "analyze_source",
    "generate_module_dump",
]
