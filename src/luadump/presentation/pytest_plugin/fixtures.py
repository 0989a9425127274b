"""pytest fixtures for golden-file module dump tests.

Each case is `<name>.lua` paired with `<name>.json` in the fixtures directory.
Missing JSON files are generated on first run; afterwards the analysis must
match them structurally and serialize with keys in lexicographic order.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import pytest

from luadump.application.reporters import JsonReporter
from luadump.application.services import analyze_source
from luadump.domain.model.outcome import SyntaxErrorOutcome

FIXTURES_DIR_OPTION = "luadump_fixtures_dir"
DEFAULT_FIXTURES_DIR = "tests/fixtures/module_dumps"


@dataclass(frozen=True, slots=True)
class GoldenModuleDumps:
    """Golden-file checker bound to one fixtures directory.

    Attributes:
        directory: Directory holding <case>.lua / <case>.json pairs
        reporter: Serializer used for writing and re-serializing
    """

    directory: Path
    reporter: JsonReporter

    def cases(self) -> tuple[str, ...]:
        """Names of all .lua cases, sorted."""
        return tuple(sorted(p.stem for p in self.directory.glob("*.lua")))

    def check(self, case: str) -> None:
        """Analyse <case>.lua and compare against <case>.json.

        Writes <case>.json when missing.

        Raises:
            FileNotFoundError: <case>.lua does not exist
            pytest.fail.Exception: syntax error or mismatch
        """
        source_path = self.directory / f"{case}.lua"
        expected_path = self.directory / f"{case}.json"

        source = source_path.read_text(encoding="utf-8")
        outcome = analyze_source(source)

        if isinstance(outcome, SyntaxErrorOutcome):
            pytest.fail(f"{source_path}:{outcome.position}: {outcome.message}")

        actual = self.reporter.report(outcome)

        if not expected_path.exists():
            expected_path.write_text(actual + "\n", encoding="utf-8")
            return

        expected_text = expected_path.read_text(encoding="utf-8")
        expected = self.reporter.load(expected_text)

        assert expected == outcome.members, (
            f"{case}: expected {expected!r}, got {outcome.members!r}"
        )

        # Deterministic order: re-serialization lists keys lexicographically
        data = json.loads(actual)
        if data is not None:
            assert list(data) == sorted(data), f"{case}: keys not in lexicographic order"


@pytest.fixture(scope="session")
def module_dump_golden(request: pytest.FixtureRequest) -> GoldenModuleDumps:
    """Golden-file checker for the configured fixtures directory.

    Reads luadump_fixtures_dir from pytest.ini / pyproject.toml,
    relative to rootdir. Default: tests/fixtures/module_dumps.

    Returns:
        GoldenModuleDumps
    """
    root_dir = Path(str(request.config.rootpath))
    configured = request.config.getini(FIXTURES_DIR_OPTION) or DEFAULT_FIXTURES_DIR
    directory = root_dir / str(configured)

    if not directory.is_dir():
        raise FileNotFoundError(
            f"{FIXTURES_DIR_OPTION} '{directory}' does not exist. "
            f"Configure {FIXTURES_DIR_OPTION} in pytest.ini or pyproject.toml."
        )

    return GoldenModuleDumps(directory=directory, reporter=JsonReporter(indent=2))
