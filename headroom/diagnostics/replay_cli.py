"""Command-line replay of exported evaluation traces."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from headroom.diagnostics.trace import read_trace, replay_trace
from headroom.runtime.decision import decide
from headroom.runtime.logging import setup_headroom_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="headroom-trace-replay",
        description="Re-run the pin decision function over a recorded JSONL trace.",
    )
    parser.add_argument("--trace", type=Path, required=True, help="Trace JSONL file.")
    parser.add_argument("--pin-start", type=float, default=None, help="Override pin start px.")
    parser.add_argument("--up-tolerance", type=float, default=None, help="Override up tolerance px.")
    parser.add_argument(
        "--down-tolerance", type=float, default=None, help="Override down tolerance px."
    )
    parser.add_argument(
        "--element-height", type=float, default=None, help="Override measured header height px."
    )
    parser.add_argument(
        "--max-mismatches",
        type=int,
        default=20,
        help="Maximum mismatches printed.",
    )
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.pin_start is not None:
        overrides["pin_start"] = args.pin_start
    if args.up_tolerance is not None:
        overrides["up_tolerance"] = args.up_tolerance
    if args.down_tolerance is not None:
        overrides["down_tolerance"] = args.down_tolerance
    if args.element_height is not None:
        overrides["element_height"] = args.element_height
    return overrides


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_headroom_logging()
    try:
        records, skipped = read_trace(args.trace)
    except OSError as exc:
        print(f"cannot read trace {args.trace}: {exc}", file=sys.stderr)
        return 2
    if skipped or not records:
        print(
            f"unreadable trace {args.trace}: records={len(records)} malformed={skipped}",
            file=sys.stderr,
        )
        return 2

    result = replay_trace(records, decide_fn=decide, overrides=_overrides(args))
    print(f"records={result.total} mismatches={len(result.mismatches)}")
    for mismatch in result.mismatches[: max(0, args.max_mismatches)]:
        print(
            f"  seq={mismatch.sequence} expected={mismatch.expected.value} "
            f"actual={mismatch.actual.value}"
        )
    return 0 if result.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
