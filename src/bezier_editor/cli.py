"""
Command-line interface for the curve editor.

Usage:
    bezier-editor [--verbose] [--sampling oscillating|monotonic] [--fps 120]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .settings import EditorSettings, get_settings

Logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bezier-editor",
        description="Drag the control points of a cubic Bezier curve.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    parser.add_argument(
        "--sampling",
        choices=["oscillating", "monotonic"],
        default=None,
        help="How the curve parameter is swept each frame (default: oscillating).",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Target frames per second (default: 120).",
    )
    return parser


def load_settings(args: argparse.Namespace) -> EditorSettings:
    """Build settings from the environment, letting CLI flags take priority."""
    return get_settings(sampling=args.sampling, fps=args.fps)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = load_settings(args)
    except ValidationError as exc:
        Logger.error("Invalid configuration: %s", exc)
        if Logger.isEnabledFor(logging.DEBUG):
            Logger.exception("Stack trace")
        return 1

    from .gui.app import run  # Local import to avoid Qt initialization unless needed

    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
