"""Command-line interface for buildlog."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from buildlog.report.prettify import prettify
from buildlog.report.summary import generate_summary
from buildlog.snapshot import load_build_pass

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildlog",
        description="Print a one-line summary of a build pass snapshot.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("snapshot", type=Path, help="Build pass snapshot (.json, .yaml, .yml or .toml).")
    parser.add_argument(
        "--now",
        type=float,
        default=None,
        help="End of the pass in milliseconds since epoch (defaults to the current time).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the buildlog CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Arguments: %s", prettify(vars(args)))

    try:
        build_pass = load_build_pass(args.snapshot)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(
        generate_summary(
            build_pass.start_time,
            build_pass.copied_assets,
            build_pass.generated_files,
            build_pass.disposed_files,
            now=args.now,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
