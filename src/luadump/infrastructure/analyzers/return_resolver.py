"""Return-value resolution: what does the module export?

Only the trailing statement of the chunk is examined.
Documented limitations kept on purpose:
    - only the first returned expression counts
    - parenthesised expressions are never unwrapped
"""

from __future__ import annotations

from dataclasses import dataclass

from luaparser import astnodes

from luadump.domain.model.module_shape import ModuleShape
from luadump.infrastructure.analyzers.base import is_wrapped
from luadump.infrastructure.analyzers.table_scan import scan_table


@dataclass(frozen=True, slots=True)
class ReturnsTable:
    """Module returns a table literal: shape is known without traversal."""

    shape: ModuleShape


@dataclass(frozen=True, slots=True)
class ReturnsName:
    """Module returns a bare identifier: traverse the file for its members."""

    base_name: str


@dataclass(frozen=True, slots=True)
class ReturnsUnknown:
    """Module returns nothing analysable."""

    reason: str


ReturnResolution = ReturnsTable | ReturnsName | ReturnsUnknown


def resolve_return(chunk: astnodes.Chunk) -> ReturnResolution:
    """Classify the module's trailing return statement.

    Examples:
        return { a = 1 }   → ReturnsTable({"a": VALUE})
        return M           → ReturnsName("M")
        return             → ReturnsUnknown
        return 3 + 5       → ReturnsUnknown
        return (M)         → ReturnsUnknown
        return M, N        → ReturnsName("M")

    Args:
        chunk: Parsed module

    Returns:
        Resolution variant
    """
    statements = chunk.body.body if chunk.body is not None else []
    if not statements:
        return ReturnsUnknown("empty module")

    match statements[-1]:
        case astnodes.Return(values=values):
            pass
        case _:
            return ReturnsUnknown("last statement is not a return")

    if not values:
        return ReturnsUnknown("returns no value")

    first = values[0]

    if isinstance(first, astnodes.BinaryOp):
        return ReturnsUnknown("returns an operator expression")

    if is_wrapped(first):
        return ReturnsUnknown("returns a parenthesised expression")

    match first:
        case astnodes.Table():
            return ReturnsTable(ModuleShape.from_members(scan_table(first)))
        case astnodes.Name(id=name):
            return ReturnsName(name)

    return ReturnsUnknown(f"returns {type(first).__name__}")
