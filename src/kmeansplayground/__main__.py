"""Command-line interface."""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from kmeansplayground import __version__
from kmeansplayground.config import PRESETS, DEFAULT_PRESET, SimulationConfig, get_preset
from kmeansplayground.logging_config import setup_logging, LEVEL_NAMES
from kmeansplayground.view.themes import DARK, LIGHT, Theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmeansplayground",
        description="Interactive k-means clustering playground.",
    )
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), default=DEFAULT_PRESET,
        help="Configuration preset (default: %(default)s)",
    )
    parser.add_argument("--k", type=int, default=None, help="Initial number of clusters")
    parser.add_argument("--seed", type=int, default=None, help="Seed for centroid placement")
    parser.add_argument("--light", action="store_true", help="Start with the light theme")
    parser.add_argument(
        "--log-level", default="INFO",
        type=str.upper, choices=LEVEL_NAMES,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace) -> SimulationConfig:
    """Preset plus command-line overrides."""
    config = get_preset(args.preset)
    if args.k is not None:
        config = config.with_default_k(args.k)
    return config


def resolve_theme(args: argparse.Namespace) -> Theme:
    return LIGHT if args.light else DARK


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        config = resolve_config(args)
    except ValueError as e:
        parser.error(str(e))

    # Qt is only imported once the arguments are known to be valid
    from kmeansplayground.main import main as run_app

    return run_app(config, resolve_theme(args), seed=args.seed)


if __name__ == "__main__":
    sys.exit(main())
