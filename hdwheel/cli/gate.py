"""``hdwheel gate``: dump what the wheel knows about a gate."""

from __future__ import annotations

import argparse
import json
import sys

from ..knowledge.positioning import docking_data


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``gate`` subcommand."""

    parser = sub.add_parser(
        "gate",
        help="Print docking data for a gate as JSON",
    )
    parser.add_argument("gate", type=int, help="Gate number (1-64)")
    parser.add_argument("--line", type=int, help="Line number (1-6)")
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    try:
        data = docking_data(args.gate, args.line)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(json.dumps(data.to_payload(), indent=2))
    return 0
