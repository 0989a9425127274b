"""luadump domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, types, collections.abc
"""

from luadump.domain.exceptions import (
    LuaDumpError,
    LuaSyntaxError,
    RpcError,
    UnknownMemberKindError,
)
from luadump.domain.model import (
    AnalysisOutcome,
    DumpConfig,
    MemberKind,
    ModuleShape,
    NoShape,
    Shape,
    SourcePosition,
    SyntaxErrorOutcome,
)
from luadump.domain.ports import SyntaxProviderPort

__all__ = [
    # Exceptions
    "LuaDumpError",
    "LuaSyntaxError",
    "RpcError",
    "UnknownMemberKindError",
    # Enums
    "MemberKind",
    # Value objects
    "ModuleShape",
    "SourcePosition",
    "DumpConfig",
    # Outcomes
    "AnalysisOutcome",
    "NoShape",
    "Shape",
    "SyntaxErrorOutcome",
    # Ports
    "SyntaxProviderPort",
]
