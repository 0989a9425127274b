"""Command-line interface.

    luadump dump FILE... [--format json|console] [--no-cache] [--indent N]
    luadump serve

Exit codes: 0 ok, 1 at least one file has a syntax error, 2 a file could not be read.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from luadump import __version__
from luadump.application.reporters import ConsoleReporter, JsonReporter, to_json_value
from luadump.application.services import analyze_source, build_provider
from luadump.domain.model.configuration import LOG_LEVELS, DumpConfig
from luadump.domain.model.outcome import SyntaxErrorOutcome
from luadump.presentation.logging_config import configure_logging
from luadump.presentation.rpc import serve_stdio

if TYPE_CHECKING:
    from collections.abc import Sequence

    from luadump.domain.model.outcome import AnalysisOutcome

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SYNTAX_ERROR = 1
EXIT_READ_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser with dump and serve subcommands."""
    parser = argparse.ArgumentParser(
        prog="luadump",
        description="Infer the exported members of Lua modules without running them.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS),
        default="WARNING",
        help="Logging level (logs go to stderr)",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Disable the parsed-tree cache",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    dump = subparsers.add_parser("dump", help="Print module dumps of Lua files")
    dump.add_argument("files", nargs="+", type=Path, metavar="FILE")
    dump.add_argument(
        "--format",
        choices=("json", "console"),
        default="json",
        help="Output format (default: json)",
    )
    dump.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation, negative for compact output",
    )
    dump.add_argument("--no-color", action="store_true", help="Plain console output")

    subparsers.add_parser("serve", help="Serve generate_module_dump as JSON-RPC over stdio")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI.

    Args:
        argv: Arguments without program name. None = sys.argv[1:].

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    indent = getattr(args, "indent", 2)
    config = DumpConfig(
        cache_size=0 if args.no_cache else DumpConfig().cache_size,
        json_indent=None if indent < 0 else indent,
        log_level=args.log_level,
    )
    configure_logging(config.log_level)

    if args.command == "serve":
        serve_stdio(sys.stdin, sys.stdout, build_provider(config))
        return EXIT_OK

    return _dump(args.files, args.format, not args.no_color, config)


def _dump(files: Sequence[Path], output_format: str, color: bool, config: DumpConfig) -> int:
    """Analyse files and print reports to stdout."""
    provider = build_provider(config)
    outcomes: dict[str, AnalysisOutcome] = {}

    for path in files:
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("cannot read %s: %s", path, e)
            return EXIT_READ_ERROR

        outcome = analyze_source(source, provider)
        if isinstance(outcome, SyntaxErrorOutcome):
            logger.warning("%s:%s: %s", path, outcome.position, outcome.message)
        outcomes[str(path)] = outcome

    if output_format == "console":
        for name, outcome in outcomes.items():
            sys.stdout.write(ConsoleReporter(title=name, color=color).report(outcome))
    elif len(outcomes) == 1:
        (outcome,) = outcomes.values()
        sys.stdout.write(JsonReporter(indent=config.json_indent).report(outcome) + "\n")
    else:
        data = {name: to_json_value(outcome) for name, outcome in outcomes.items()}
        sys.stdout.write(json.dumps(data, indent=config.json_indent) + "\n")

    if any(isinstance(o, SyntaxErrorOutcome) for o in outcomes.values()):
        return EXIT_SYNTAX_ERROR
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
