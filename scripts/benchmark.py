#!/usr/bin/env python3
"""Benchmark script for luadump analysis throughput.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures" / "module_dumps"


def benchmark_import_time() -> float:
    """Measure import time of luadump package."""
    start = time.perf_counter()
    import luadump  # noqa: F401

    return time.perf_counter() - start


def _sources() -> list[str]:
    return [p.read_text(encoding="utf-8") for p in sorted(FIXTURES_DIR.glob("*.lua"))]


def benchmark_uncached(iterations: int) -> float:
    """Measure analysis of all fixtures, parsing every time."""
    from luadump.application.services import analyze_source
    from luadump.infrastructure.adapters import LuaparserSyntaxProvider

    provider = LuaparserSyntaxProvider()
    sources = _sources()

    start = time.perf_counter()
    for _ in range(iterations):
        for source in sources:
            analyze_source(source, provider)
    return time.perf_counter() - start


def benchmark_cached(iterations: int) -> float:
    """Measure analysis of all fixtures with the parsed-tree cache warm."""
    from luadump.application.services import analyze_source
    from luadump.infrastructure.adapters import CachedSyntaxProvider, LuaparserSyntaxProvider

    provider = CachedSyntaxProvider(LuaparserSyntaxProvider())
    sources = _sources()
    for source in sources:
        analyze_source(source, provider)

    start = time.perf_counter()
    for _ in range(iterations):
        for source in sources:
            analyze_source(source, provider)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run luadump benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=50,
        help="Passes over the fixture set per benchmark",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": f"Fixture Analysis, uncached ({args.iterations} passes)",
            "unit": "seconds",
            "value": benchmark_uncached(args.iterations),
        },
        {
            "name": f"Fixture Analysis, cached ({args.iterations} passes)",
            "unit": "seconds",
            "value": benchmark_cached(args.iterations),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
