"""Option handling shared by the wheel subcommands."""

from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path

from ..config.settings import (
    CONFIG_FILENAME,
    Settings,
    default_settings,
    get_config_home,
    load_settings,
)
from ..visual.assembler import AssemblyConfig


def add_layout_options(parser: argparse.ArgumentParser) -> None:
    """Options that override the ``assembly`` section of the settings file."""

    parser.add_argument(
        "--config",
        help=f"Settings YAML file (default: $HDWHEEL_HOME/{CONFIG_FILENAME} when present)",
    )
    parser.add_argument("--start-radius", type=float, help="Radius where the first band begins")
    parser.add_argument("--padding", type=float, help="Gap between adjacent bands")
    parser.add_argument(
        "--uniform-scale",
        type=float,
        help="Scale every band by this factor instead of fitting each to its seam",
    )
    parser.add_argument(
        "--rings",
        help="Comma separated band names, innermost first (default: numbers,hexagrams,codons)",
    )


def load_cli_settings(args: argparse.Namespace) -> Settings:
    if args.config:
        return load_settings(Path(args.config))
    default_path = get_config_home() / CONFIG_FILENAME
    if default_path.exists():
        return load_settings(default_path)
    return default_settings()


def assembly_config(args: argparse.Namespace, settings: Settings) -> AssemblyConfig:
    config = settings.assembly.to_runtime()
    overrides: dict[str, object] = {}
    if args.start_radius is not None:
        overrides["start_radius"] = args.start_radius
    if args.padding is not None:
        overrides["padding"] = args.padding
    if args.uniform_scale is not None:
        overrides["uniform_scale"] = args.uniform_scale
    if args.rings:
        overrides["rings"] = tuple(name.strip() for name in args.rings.split(",") if name.strip())
    return dataclasses.replace(config, **overrides) if overrides else config
