"""``hdwheel summary``: print where each band lands without rendering it."""

from __future__ import annotations

import argparse
import sys

from ..exceptions import WheelError
from ..visual.assembler import plan_wheel
from ..visual.snap import snap_summary
from ._common import add_layout_options, assembly_config, load_cli_settings


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``summary`` subcommand."""

    parser = sub.add_parser(
        "summary",
        help="Print the snap placement of every band",
    )
    add_layout_options(parser)
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    settings = load_cli_settings(args)
    try:
        config = assembly_config(args, settings)
        placements = plan_wheel(config)
    except WheelError as exc:
        print(f"placement failed: {exc}", file=sys.stderr)
        return 1
    print(
        snap_summary(
            placements,
            center=config.center,
            start_radius=config.start_radius,
            padding=config.padding,
        )
    )
    return 0
