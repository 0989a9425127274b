"""Whole-file member visitor.

Collects members assigned into the base identifier anywhere in the module.
Single pre-order pass in source order, descending into nested blocks and
function bodies. Control flow is NOT modelled: a member assigned inside
an `if` counts the same as one at top level.
"""

from __future__ import annotations

import logging

from luaparser import astnodes

from luadump.domain.model.member_kind import MemberKind
from luadump.domain.model.module_shape import ModuleShape
from luadump.infrastructure.analyzers.base import (
    access_chain,
    index_key,
    is_call,
    is_internal,
    is_wrapped,
    member_kind_of,
    walk,
)
from luadump.infrastructure.analyzers.context import ExtractorState
from luadump.infrastructure.analyzers.table_scan import scan_table

logger = logging.getLogger(__name__)


class MemberVisitor:
    """Extracts members of the base identifier from a Lua syntax tree.

    Stateless analyzer - a fresh ExtractorState per visit() call.

    Recognised statements (M is the base identifier):
        local M = { ... }             → merge table fields
        M = { ... }                   → merge table fields
        M.x = e / M["x"] = e          → x: FUNCTION if e is a function literal, else VALUE
        M.x.y = e / M.x().y = e       → x: FUNCTION if e is a function literal, else VALUE
        M:x().y = e / M().y = e       → ignored (call on the module)
        function M.x() end            → x: FUNCTION
        function M.x.y() end          → x: VALUE
        function M:x() end            → x: METHOD
        function M() end              → ignored
    Everything else is skipped silently.
    """

    def visit(self, chunk: astnodes.Chunk, base_name: str) -> ModuleShape:
        """Traverse the whole chunk and build the base identifier's shape.

        Args:
            chunk: Parsed module
            base_name: Identifier the module returns

        Returns:
            Shape, possibly empty

        Raises:
            ValueError: If base_name is empty (FAIL-FIRST)
        """
        state = ExtractorState(base_name)

        for node in walk(chunk):
            match node:
                case astnodes.LocalAssign() | astnodes.Assign():
                    self._visit_assignment(node, state)
                case astnodes.Method(source=source, name=astnodes.Name(id=method_name)):
                    self._visit_method(source, method_name, state)
                case astnodes.Function(name=name):
                    self._visit_function(name, state)

        return state.freeze()

    def _visit_assignment(self, node: astnodes.Assign, state: ExtractorState) -> None:
        """Handle `[local] a, b.c, d["e"] = ...`, pairing targets and values by position."""
        values = node.values or []

        for position, target in enumerate(node.targets):
            value = values[position] if position < len(values) else None

            chain = access_chain(target)
            if chain is None:
                continue

            base, suffixes = chain
            if base != state.base_name:
                continue

            if not suffixes:
                # M = { ... } / local M = { ... }
                if isinstance(value, astnodes.Table) and not is_wrapped(value):
                    state.merge(scan_table(value))
                continue

            first = suffixes[0]
            if is_call(first):
                # M().x = e, M:get().x = e: assigns into a call result
                continue

            name = index_key(first)
            if name is None or is_internal(name):
                continue

            # M.a.b = e, M.a().b = e: `a` takes the kind of e, deeper segments are not read
            self._record(state, name, member_kind_of(value))

    def _visit_function(self, name: astnodes.Node, state: ExtractorState) -> None:
        """Handle `function M.a.b()`."""
        chain = access_chain(name)
        if chain is None:
            return

        base, suffixes = chain
        if base != state.base_name or not suffixes:
            # function foo() ... return M
            # function M() redefines the value itself, not a member
            return

        self._record_dotted(state, suffixes)

    def _visit_method(self, source: astnodes.Node, method_name: str, state: ExtractorState) -> None:
        """Handle `function M:m()` and `function M.a:m()`."""
        chain = access_chain(source)
        if chain is None:
            return

        base, suffixes = chain
        if base != state.base_name:
            return

        if suffixes:
            # function M.a:m() declares on M.a; only `a` is visible on M
            self._record_dotted(state, suffixes)
            return

        if not is_internal(method_name):
            self._record(state, method_name, MemberKind.METHOD)

    def _record_dotted(self, state: ExtractorState, suffixes: tuple[astnodes.Node, ...]) -> None:
        """Record first segment of a declared dotted name: FUNCTION if last, else VALUE."""
        if any(is_call(suffix) for suffix in suffixes):
            return

        name = index_key(suffixes[0])
        if name is None or is_internal(name):
            return

        kind = MemberKind.FUNCTION if len(suffixes) == 1 else MemberKind.VALUE
        self._record(state, name, kind)

    def _record(self, state: ExtractorState, name: str, kind: MemberKind) -> None:
        logger.debug("member %s.%s: %s", state.base_name, name, kind)
        state.record(name, kind)
