"""Command-line interface for impcut."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from impcut.algorithms.types import Cut
from impcut.config import SearchConfig
from impcut.cuts import enumerate_important_cuts
from impcut.errors import InvalidInputError
from impcut.loader import Problem, load_problem_yaml
from impcut.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _sorted_nodes(nodes) -> List[Any]:
    return sorted(nodes, key=lambda n: (type(n).__name__, n))


def cut_to_dict(cut: Cut) -> Dict[str, Any]:
    """Return a JSON-serializable representation of a cut."""
    return {
        "size": cut.size,
        "edges": [[u, v] for u, v in cut.edges],
        "source_side": _sorted_nodes(cut.source_side),
    }


def _run_problem(
    path: Path,
    k_override: Optional[int],
    parallelism: int,
    output: Optional[Path],
) -> None:
    """Load a problem file, enumerate its important cuts and emit JSON."""
    logger.info(f"Loading problem from: {path}")
    try:
        problem: Problem = load_problem_yaml(path.read_text(encoding="utf-8"))
        k = k_override if k_override is not None else problem.k
        if k is None:
            raise InvalidInputError("No budget given: set 'k' in the problem or pass --k.")
        config = SearchConfig(parallelism=parallelism)

        start = perf_counter()
        cuts = sorted(
            enumerate_important_cuts(
                problem.graph, problem.sources, problem.sinks, k, config=config
            )
        )
        logger.info(
            f"Enumerated {len(cuts)} important cut(s) in "
            f"{_format_duration(perf_counter() - start)}"
        )
    except FileNotFoundError:
        logger.error(f"Problem file not found: {path}")
        sys.exit(1)
    except ValueError as exc:
        logger.error(f"Invalid problem: {exc}")
        sys.exit(1)

    payload = {
        "k": k,
        "sources": _sorted_nodes(problem.sources),
        "sinks": _sorted_nodes(problem.sinks),
        "cuts": [cut_to_dict(cut) for cut in cuts],
    }
    text = json.dumps(payload, indent=2)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Results written to: {output}")
    else:
        print(text)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``impcut`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="impcut",
        description="Enumerate important edge cuts of an undirected graph.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Enumerate important cuts")
    run_parser.add_argument("problem", type=Path, help="Path to problem YAML")
    run_parser.add_argument(
        "--k",
        "-k",
        type=int,
        default=None,
        help="Maximum cut size (overrides 'k' in the problem file)",
    )
    run_parser.add_argument(
        "--parallelism",
        "-j",
        type=int,
        default=1,
        help="Number of worker processes for the search",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write JSON results to this file instead of stdout",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_problem(
            path=args.problem,
            k_override=args.k,
            parallelism=args.parallelism,
            output=args.output,
        )


if __name__ == "__main__":
    main()
