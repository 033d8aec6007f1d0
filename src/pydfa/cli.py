"""
Command-line driver: ``pydfa <description> <input>``.

Exit codes: 0 accepted, 1 rejected, 2 bad invocation or malformed description.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydfa.core.config import BuildConfig, EngineConfig
from pydfa.core.errors import FormatError
from pydfa.core.table import BuiltAutomaton
from pydfa.core.types import Outcome
from pydfa.driver import judge
from pydfa.io.builder import build_file, dump_description
from pydfa.logging_setup import configure_logging
from pydfa.measures.structure import outdegree_vector, sink_states


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pydfa",
        description="Evaluate an input string against a DFA transition description.",
    )
    parser.add_argument("description", help="path to the transition description file")
    parser.add_argument("input", help="input string to evaluate")
    parser.add_argument(
        "--skip-self-loops",
        action="store_true",
        help="never take a transition back into the current state (compatibility mode)",
    )
    parser.add_argument(
        "--literal-symbols",
        action="store_true",
        help="read symbols as single characters instead of ordinal codes",
    )
    parser.add_argument(
        "--strict-blank-lines",
        action="store_true",
        help="reject blank lines in the description",
    )
    parser.add_argument(
        "--reject-duplicates",
        action="store_true",
        help="reject a state that lists the same symbol twice",
    )
    parser.add_argument("--dump", action="store_true", help="print the parsed table")
    parser.add_argument("--stats", action="store_true", help="print table statistics")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _print_stats(built: BuiltAutomaton) -> None:
    table = built.table
    _, degrees = outdegree_vector(table)
    print(f"Sources: {table.source_count}")
    print(f"Transitions: {table.transition_count}")
    print(f"States: {len(table.states())}")
    print(f"Max out-degree: {int(degrees.max()) if degrees.size else 0}")
    print(f"Sinks: {list(sink_states(table))}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    build_config = BuildConfig(
        symbols="literal" if args.literal_symbols else "ordinal",
        blank_lines="reject" if args.strict_blank_lines else "skip",
        reject_duplicates=args.reject_duplicates,
    )
    engine_config = EngineConfig(skip_self_loops=args.skip_self_loops)

    print(f"Building DFA from {args.description}")
    try:
        built = build_file(args.description, build_config)
    except OSError as exc:
        print(f"error: cannot read {args.description}: {exc.strerror or exc}", file=sys.stderr)
        return Outcome.ERROR.exit_code
    except UnicodeDecodeError as exc:
        print(f"error: cannot read {args.description}: {exc}", file=sys.stderr)
        return Outcome.ERROR.exit_code
    except FormatError as exc:
        print(f"error: {args.description}: {exc}", file=sys.stderr)
        return Outcome.ERROR.exit_code

    if args.dump:
        print(dump_description(built.table, built.initial, built.accepting, build_config.symbols), end="")
    if args.stats:
        _print_stats(built)

    verdict = judge(built, args.input, engine_config)
    print(f"Input: {args.input}")
    print(f"Evaluation: {verdict.accepted}")
    return verdict.outcome.exit_code
