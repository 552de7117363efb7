"""Entry point for the hdwheel CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from ..boot.logging import configure_logging
from . import assemble, band, gate, summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hdwheel", description="Radial wheel layout CLI")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Root log level (defaults to $LOG_LEVEL, then INFO)",
    )
    parser.add_argument(
        "--trace-placement",
        action="store_true",
        help="Emit per-band placement DEBUG records",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    assemble.add_subparser(sub)
    summary.add_subparser(sub)
    band.add_subparser(sub)
    gate.add_subparser(sub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(level=args.log_level, trace_placement=args.trace_placement)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
