"""``hdwheel band``: render one band in its native coordinates."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..bands import RenderContext, default_registry, render_band_document
from ..core.angles import AngleModel
from ..exceptions import WheelError
from ._common import load_cli_settings


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``band`` subcommand."""

    parser = sub.add_parser(
        "band",
        help="Render a single band as a standalone SVG",
    )
    parser.add_argument("name", help="Registered band name (numbers, hexagrams, codons)")
    parser.add_argument("--config", help="Settings YAML file")
    parser.add_argument("--out", help="Destination SVG file (default: stdout)")
    parser.add_argument("--no-background", action="store_true", help="Omit the background")
    parser.add_argument(
        "--no-structure",
        action="store_true",
        help="Skip ring circles and dividers",
    )
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    settings = load_cli_settings(args)
    try:
        definition = default_registry().get(args.name)
    except WheelError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    ctx = RenderContext(
        theme=settings.theme.to_runtime(),
        model=AngleModel(settings.calibration.to_runtime()),
        include_structure=not args.no_structure,
    )
    doc = render_band_document(definition, ctx, include_background=not args.no_background)
    if args.out:
        Path(args.out).write_bytes(doc.to_bytes())
        print(f"wrote {definition.name} band to {args.out}")
    else:
        sys.stdout.write(doc.to_string())
    return 0
