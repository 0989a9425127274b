"""Analysis outcome: exactly one result per analysed source.

Three variants, never conflated:
    SyntaxErrorOutcome: source does not parse
    NoShape: source parses, export shape not statically determinable
    Shape: source parses, shape determined (possibly empty)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from luadump.domain.model.module_shape import ModuleShape
from luadump.domain.model.position import SourcePosition

OutcomeKind = Literal["syntax_error", "no_shape", "shape"]


@dataclass(frozen=True, slots=True)
class SyntaxErrorOutcome:
    """Source failed to parse.

    Attributes:
        position: Error position reported by the parser.
        message: Parser message.
    """

    position: SourcePosition
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must be non-empty string")

    @property
    def kind(self) -> OutcomeKind:
        return "syntax_error"

    @property
    def members(self) -> ModuleShape | None:
        return None


@dataclass(frozen=True, slots=True)
class NoShape:
    """Source is valid but exports nothing statically analysable.

    Normal outcome, NOT an error.
    """

    @property
    def kind(self) -> OutcomeKind:
        return "no_shape"

    @property
    def members(self) -> ModuleShape | None:
        return None


@dataclass(frozen=True, slots=True)
class Shape:
    """Shape determined.

    Empty shape is valid: `local M = {} return M` exports no members,
    which differs from NoShape.

    Attributes:
        shape: Inferred members.
    """

    shape: ModuleShape

    @property
    def kind(self) -> OutcomeKind:
        return "shape"

    @property
    def members(self) -> ModuleShape | None:
        return self.shape


AnalysisOutcome = SyntaxErrorOutcome | NoShape | Shape
