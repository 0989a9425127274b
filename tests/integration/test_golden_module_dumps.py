"""Golden-file test: every tests/fixtures/module_dumps/<case>.lua against <case>.json."""

from pathlib import Path

import pytest

from luadump.application.reporters import JsonReporter
from luadump.presentation.pytest_plugin import GoldenModuleDumps

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "module_dumps"
CASES = sorted(p.stem for p in FIXTURES_DIR.glob("*.lua"))


@pytest.mark.golden
@pytest.mark.parametrize("case", CASES)
def test_module_dump_matches_golden(module_dump_golden: GoldenModuleDumps, case: str) -> None:
    module_dump_golden.check(case)


class TestGoldenFixtures:
    """Sanity checks on the fixture set itself."""

    def test_known_cases_present(self) -> None:
        assert set(CASES) >= {
            "assigned_global",
            "assigned_instantly",
            "assigned_instantly_and_later",
            "assigned_later",
            "assigned_later_as_function",
            "no_return",
            "returns_but_nothing",
            "returns_not_table",
        }

    def test_every_case_has_expected_output(self) -> None:
        for case in CASES:
            assert (FIXTURES_DIR / f"{case}.json").is_file(), case

    def test_fixture_points_at_configured_directory(
        self, module_dump_golden: GoldenModuleDumps
    ) -> None:
        assert module_dump_golden.directory.resolve() == FIXTURES_DIR.resolve()
        assert module_dump_golden.cases() == tuple(CASES)

    def test_mismatch_fails(self, tmp_path: Path) -> None:
        (tmp_path / "case.lua").write_text("return { a = 1 }\n")
        (tmp_path / "case.json").write_text('{"a": "Function"}\n')
        golden = GoldenModuleDumps(directory=tmp_path, reporter=JsonReporter())
        with pytest.raises(AssertionError):
            golden.check("case")

    def test_missing_expected_is_written(self, tmp_path: Path) -> None:
        (tmp_path / "case.lua").write_text("return { b = 1, a = function() end }\n")
        golden = GoldenModuleDumps(directory=tmp_path, reporter=JsonReporter())
        golden.check("case")
        shape = JsonReporter.load((tmp_path / "case.json").read_text())
        assert shape is not None
        assert shape.to_dict() == {"a": "Function", "b": "Value"}

    def test_syntax_error_fails(self, tmp_path: Path) -> None:
        (tmp_path / "case.lua").write_text("return {\n")
        golden = GoldenModuleDumps(directory=tmp_path, reporter=JsonReporter())
        with pytest.raises(pytest.fail.Exception):
            golden.check("case")
