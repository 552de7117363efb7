"""``hdwheel assemble``: compose the wheel and write SVG or PNG."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from ..exceptions import WheelError
from ..visual.assembler import assemble_rings, export_wheel
from ._common import add_layout_options, assembly_config, load_cli_settings


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``assemble`` subcommand."""

    parser = sub.add_parser(
        "assemble",
        help="Compose the bands into one wheel",
        description=(
            "Stack the configured bands around a common centre and write the "
            "result as SVG, or as a PNG placement preview."
        ),
    )
    add_layout_options(parser)
    parser.add_argument("--out", help="Destination file (SVG defaults to stdout)")
    parser.add_argument(
        "--format",
        choices=("svg", "png"),
        default="svg",
        help="Output format (default: svg)",
    )
    parser.add_argument("--size", type=int, default=800, help="PNG edge length in pixels")
    parser.add_argument(
        "--no-background",
        action="store_true",
        help="Omit the background rectangle",
    )
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    """Execute the assemble subcommand."""

    if args.format == "png" and not args.out:
        print("--out is required for PNG output", file=sys.stderr)
        return 2

    settings = load_cli_settings(args)
    try:
        config = assembly_config(args, settings)
        if args.no_background:
            config = dataclasses.replace(config, include_background=False)
        assembly = assemble_rings(
            config,
            theme=settings.theme.to_runtime(),
            calibration=settings.calibration.to_runtime(),
        )
        payload = export_wheel(assembly, args.format, size=args.size)
    except WheelError as exc:
        print(f"assembly failed: {exc}", file=sys.stderr)
        return 1

    if not args.out:
        sys.stdout.write(payload.decode("utf-8"))
        return 0
    Path(args.out).write_bytes(payload)
    print(f"wrote {len(assembly.bands)}-band wheel to {args.out}")
    return 0
