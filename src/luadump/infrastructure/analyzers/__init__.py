"""Syntax tree analyzers for Lua module shapes."""

from luadump.infrastructure.analyzers.base import (
    INTERNAL_PREFIX,
    access_chain,
    first_token,
    index_key,
    is_call,
    is_internal,
    is_wrapped,
    iter_child_nodes,
    member_kind_of,
    static_key,
    walk,
)
from luadump.infrastructure.analyzers.context import ExtractorState
from luadump.infrastructure.analyzers.member_visitor import MemberVisitor
from luadump.infrastructure.analyzers.return_resolver import (
    ReturnResolution,
    ReturnsName,
    ReturnsTable,
    ReturnsUnknown,
    resolve_return,
)
from luadump.infrastructure.analyzers.table_scan import (
    field_name,
    is_positional,
    scan_table,
)

__all__ = [
    # Context
    "ExtractorState",
    # Base utilities
    "INTERNAL_PREFIX",
    "access_chain",
    "first_token",
    "index_key",
    "is_call",
    "is_internal",
    "is_wrapped",
    "iter_child_nodes",
    "member_kind_of",
    "static_key",
    "walk",
    # Table literals
    "field_name",
    "is_positional",
    "scan_table",
    # Return resolution
    "ReturnResolution",
    "ReturnsName",
    "ReturnsTable",
    "ReturnsUnknown",
    "resolve_return",
    # Visitors
    "MemberVisitor",
]
