"""Domain model entities."""

from luadump.domain.model.configuration import DumpConfig
from luadump.domain.model.member_kind import MemberKind
from luadump.domain.model.module_shape import ModuleShape
from luadump.domain.model.outcome import (
    AnalysisOutcome,
    NoShape,
    OutcomeKind,
    Shape,
    SyntaxErrorOutcome,
)
from luadump.domain.model.position import SourcePosition

__all__ = [
    # Configuration
    "DumpConfig",
    # Enums
    "MemberKind",
    # Value objects
    "ModuleShape",
    "SourcePosition",
    # Outcomes
    "AnalysisOutcome",
    "OutcomeKind",
    "NoShape",
    "Shape",
    "SyntaxErrorOutcome",
]
