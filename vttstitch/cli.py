"""
Command line interface for VTTStitch.

Usage:
    vttstitch <input-dir> <output-file> [--jobs N] [-v] [--log-level LEVEL]
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .exceptions import UsageError, VTTStitchError
from .merger import merge_from_config
from .models import MergeConfig

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "VTTSTITCH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(f"{message}\n{self.format_usage().strip()}")


def setup_logging(level: Optional[str] = None, verbose: bool = False) -> None:
    """
    Configure root logging for command line use.

    Args:
        level: Log level name (e.g. "INFO"). Falls back to DEBUG when verbose,
               then to the VTTSTITCH_LOG_LEVEL environment variable, then WARNING.
        verbose: Enable debug output when no explicit level is given
    """
    if not level:
        level = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV) or "WARNING"
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="vttstitch",
        description="Merge a directory of WebVTT segments into one time-ordered VTT file.",
    )
    parser.add_argument("input_dir", help="Directory containing the .vtt segments")
    parser.add_argument("output_file", help="Merged .vtt path (overwritten)")
    parser.add_argument("--jobs", type=int, default=None, help="Parallel file reads (default: automatic)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-level", default=None, help=f"Log level name (default: ${LOG_LEVEL_ENV} or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        if args.jobs is not None and args.jobs < 1:
            raise UsageError("--jobs must be at least 1")

        setup_logging(args.log_level, args.verbose)
        config = MergeConfig(input_dir=args.input_dir, output_file=args.output_file, max_workers=args.jobs)
        merged = merge_from_config(config)
    except (VTTStitchError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Merged {len(merged.cues)} cues into {args.output_file}")
    return 0
