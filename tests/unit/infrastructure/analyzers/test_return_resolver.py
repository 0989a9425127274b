"""Tests for infrastructure/analyzers/return_resolver.py."""

import pytest

from luadump.domain.model.member_kind import MemberKind
from luadump.infrastructure.adapters.lua_parser import LuaparserSyntaxProvider
from luadump.infrastructure.analyzers.return_resolver import (
    ReturnsName,
    ReturnsTable,
    ReturnsUnknown,
    resolve_return,
)

PARSER = LuaparserSyntaxProvider()


class TestResolveReturn:
    """Tests for resolve_return function."""

    def test_returns_name(self) -> None:
        resolution = resolve_return(PARSER.parse("local M = {}\nreturn M"))
        assert resolution == ReturnsName("M")

    def test_returns_table(self) -> None:
        resolution = resolve_return(PARSER.parse("return { x = 1, y = function() end }"))
        assert isinstance(resolution, ReturnsTable)
        assert resolution.shape == {"x": MemberKind.VALUE, "y": MemberKind.FUNCTION}

    def test_table_ignores_other_statements(self) -> None:
        code = "local M = {}\nfunction M.foo() end\nreturn { bar = 1 }"
        resolution = resolve_return(PARSER.parse(code))
        assert isinstance(resolution, ReturnsTable)
        assert list(resolution.shape) == ["bar"]

    def test_only_first_value_counts(self) -> None:
        resolution = resolve_return(PARSER.parse("local M, N = {}, {}\nreturn M, N"))
        assert resolution == ReturnsName("M")

    def test_first_value_not_table(self) -> None:
        resolution = resolve_return(PARSER.parse("return 1, { a = 1 }"))
        assert isinstance(resolution, ReturnsUnknown)

    @pytest.mark.parametrize(
        "code",
        [
            "",
            "local M = {}",
            "local M = {}\nprint(M)",
            "return",
            "return 3 + 5",
            "return a .. b",
            "return a or b",
            "return a == b",
            "return require('other')",
            "return 42",
            "return 'text'",
            "return nil",
            "return M.inner",
            "return function() end",
            "return -x",
        ],
    )
    def test_no_shape(self, code: str) -> None:
        assert isinstance(resolve_return(PARSER.parse(code)), ReturnsUnknown)

    @pytest.mark.parametrize(
        "code",
        [
            "local M = {}\nM.a = 1\nreturn (M)",
            "return ({ a = 1 })",
            "return ((M))",
        ],
    )
    def test_parenthesised_return_has_no_shape(self, code: str) -> None:
        assert isinstance(resolve_return(PARSER.parse(code)), ReturnsUnknown)

    def test_return_inside_block_is_not_trailing(self) -> None:
        code = "local M = {}\ndo return M end\nlocal x = 1"
        assert isinstance(resolve_return(PARSER.parse(code)), ReturnsUnknown)
