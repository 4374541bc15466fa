"""Command line entry point: print the result of every exercise."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from pointfree.config import ExerciseConfig
from pointfree.exercises import run_exercises
from pointfree.kernel import Trace

logger = logging.getLogger("pointfree")


def number(text: str) -> int | float:
    """Parse a CLI number, keeping integers as int."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pointfree",
        description="Run the point-free composition exercises",
    )
    parser.add_argument("--sentence", type=str, help="Text whose word lengths are computed")
    parser.add_argument(
        "--author", dest="authors", action="append",
        help="Name to check against the sample articles (repeatable)",
    )
    parser.add_argument("--numbers", type=number, nargs="+", help="Values to average")
    parser.add_argument("--trace", action="store_true", help="Print the call trace after the results")
    parser.add_argument("--log-level", type=str, help="Logging level (default: WARNING)")
    return parser


def format_trace(trace: Trace) -> list[str]:
    """Render trace events as indented lines, children under their parent."""
    events = {ev.id: ev for ev in trace.get_events()}
    tree = trace.as_tree()
    lines: list[str] = []

    def walk(parent: int | None, depth: int) -> None:
        for event_id in tree.get(parent, []):
            ev = events[event_id]
            duration = f" ({ev.duration_ms:.3f} ms)" if ev.duration_ms is not None else ""
            lines.append(f"{'  ' * depth}{ev.action} {ev.info.get('fn', '')}{duration}")
            walk(event_id, depth + 1)

    walk(None, 0)
    return lines


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = ExerciseConfig.from_args(args)
    except ValidationError as exc:
        print(f"Invalid arguments: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    trace = Trace() if config.trace else None
    try:
        results = run_exercises(config, trace=trace)
    except Exception:
        logger.exception("exercise failed")
        return 1

    for label, value in results.items():
        print(f"{label}: {value}")

    if trace is not None:
        print("-" * 60)
        for line in format_trace(trace):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
