"""Tests for presentation/bindings.py."""

from luadump.presentation.bindings import generate_module_dump_js, generate_module_dump_pairs


class TestGenerateModuleDumpPairs:
    """Tests for generate_module_dump_pairs binding."""

    def test_pairs_sorted(self) -> None:
        code = "local M = {}\nfunction M:b() end\nM.a = 1\nreturn M"
        assert generate_module_dump_pairs(code) == [["a", "Value"], ["b", "Method"]]

    def test_no_shape_is_empty(self) -> None:
        assert generate_module_dump_pairs("return 1 + 1") == []

    def test_syntax_error_is_empty(self) -> None:
        assert generate_module_dump_pairs("return {") == []

    def test_empty_shape_is_empty(self) -> None:
        assert generate_module_dump_pairs("local M = {}\nreturn M") == []


class TestGenerateModuleDumpJs:
    """Tests for generate_module_dump_js binding."""

    def test_pairs(self) -> None:
        assert generate_module_dump_js("return { f = function() end }") == [["f", "Function"]]

    def test_no_shape_is_none(self) -> None:
        assert generate_module_dump_js("return") is None

    def test_syntax_error_is_none(self) -> None:
        assert generate_module_dump_js("local = 1") is None

    def test_empty_shape_is_empty_list(self) -> None:
        assert generate_module_dump_js("local M = {}\nreturn M") == []
