"""Table field scan: members declared inside a table literal."""

from __future__ import annotations

from luaparser import astnodes

from luadump.domain.model.member_kind import MemberKind
from luadump.infrastructure.analyzers.base import (
    first_token,
    is_internal,
    member_kind_of,
    static_key,
)


def scan_table(table: astnodes.Table) -> dict[str, MemberKind]:
    """Extract members from table literal fields.

    Fields are visited in source order; duplicate keys keep the last one.
    Tables never yield METHOD.

    Examples:
        { x = 1 }                 → {"x": VALUE}
        { f = function() end }    → {"f": FUNCTION}
        { ["a b"] = 1, [2] = 2 }  → {"a b": VALUE, "2": VALUE}
        { 1, 2, [k] = 3 }         → {} (positional and computed keys skipped)
        { [""] = 1 }              → {} (empty key)
        { __index = t }           → {} (internal marker)

    Args:
        table: Table constructor node

    Returns:
        Partial name → kind mapping (unordered; ModuleShape sorts)
    """
    members: dict[str, MemberKind] = {}

    for table_field in table.fields:
        name = field_name(table_field)
        if name is None or is_internal(name):
            continue
        members[name] = member_kind_of(table_field.value)

    return members


def field_name(table_field: astnodes.Field) -> str | None:
    """Resolve the member name a field declares.

    Returns:
        Name for `name = v` and statically keyed `[k] = v`,
        None for positional fields and computed keys
    """
    if is_positional(table_field):
        return None

    if table_field.between_brackets:
        return static_key(table_field.key)

    match table_field.key:
        case astnodes.Name(id=name):
            return name
    return None


def is_positional(table_field: astnodes.Field) -> bool:
    """Check if field is array-style (`{ v }`), not `[k] = v` or `k = v`.

    luaparser gives array-style fields a synthesized Number key, marked
    between brackets like a written one. Only a written key has a source token.
    """
    match table_field.key:
        case None:
            return True
        case astnodes.Number() as key:
            return first_token(key) is None
    return False
