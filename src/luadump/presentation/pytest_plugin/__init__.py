"""pytest plugin for luadump.

Provides fixtures for golden-file testing:
    module_dump_golden: checker for <case>.lua / <case>.json pairs

Configuration (pytest.ini or pyproject.toml):
    luadump_fixtures_dir: fixtures directory (default: "tests/fixtures/module_dumps")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from luadump.presentation.pytest_plugin.fixtures import (
    DEFAULT_FIXTURES_DIR,
    FIXTURES_DIR_OPTION,
    GoldenModuleDumps,
    module_dump_golden,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "GoldenModuleDumps",
    "module_dump_golden",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        FIXTURES_DIR_OPTION,
        help="Directory with <case>.lua / <case>.json golden module dumps",
        default=DEFAULT_FIXTURES_DIR,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register golden-file marker."""
    config.addinivalue_line(
        "markers",
        "golden: module dump golden-file test",
    )
