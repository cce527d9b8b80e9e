# src/tokenlint/cli.py
import sys
import argparse
import logging
import math
from typing import List, Optional

# Module imports
from tokenlint.config import DEFAULT_RATIO, DEFAULT_THRESHOLD, RECURSIVE_CWD, SOURCE_EXTENSION
from tokenlint.core.ignore import load_exclude_spec
from tokenlint.core.report import report
from tokenlint.core.scanner import analyze_files, expand_args
from tokenlint.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="token-lint",
        description=f"Reports {SOURCE_EXTENSION} files whose estimated token count exceeds a threshold.",
        epilog="Paths: FILE, DIR (non-recursive), DIR/... (recursive), ./... (current directory, recursive). "
               "Exit status is 1 when any file exceeds the threshold.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("paths", nargs="*", help=f"Files or directories to check (default: {RECURSIVE_CWD})")
    parser.add_argument("-h", "-help", "--help", action="help", help="Show this help message and exit")
    parser.add_argument(
        "-threshold", "--threshold",
        type=int,
        default=DEFAULT_THRESHOLD,
        help=f"Maximum tokens before warning (default: {DEFAULT_THRESHOLD})",
    )
    parser.add_argument(
        "-ratio", "--ratio",
        type=float,
        default=DEFAULT_RATIO,
        help=f"Tokens per character ratio (default: {DEFAULT_RATIO})",
    )
    parser.add_argument(
        "-all", "--all",
        dest="show_all",
        action="store_true",
        help="Show token counts for all files, not just violations",
    )
    parser.add_argument(
        "-exclude", "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern to skip during recursive scans (repeatable)",
    )
    parser.add_argument("-v", "-verbose", "--verbose", action="store_true", help="Log expansion decisions to stderr")
    return parser


def parse_args(argv: Optional[List[str]] = None):
    """Returns parsed args, or an exit code when parsing stops early (help or bad flags)."""
    parser = create_arg_parser()
    try:
        return parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 0 for help and 2 for usage errors
        return 0 if e.code in (0, None) else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if isinstance(args, int):
        return args

    configure_logging(args.verbose)

    try:
        # 1. Validation
        if not (math.isfinite(args.ratio) and args.ratio > 0):
            print("error: ratio must be positive", file=sys.stderr)
            return 1
        if args.threshold <= 0:
            print("error: threshold must be positive", file=sys.stderr)
            return 1

        try:
            exclude_spec = load_exclude_spec(args.exclude)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

        # 2. Expansion
        paths = args.paths or [RECURSIVE_CWD]
        try:
            files = expand_args(paths, exclude_spec)
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

        if not files:
            print(f"no {SOURCE_EXTENSION} files found", file=sys.stderr)
            return 0

        # 3. Analysis
        logger.debug("Analyzing %d file(s), threshold=%d ratio=%s", len(files), args.threshold, args.ratio)
        results, violations = analyze_files(files, args.threshold, args.ratio)
        results.sort(key=lambda r: r.tokens, reverse=True)

        # 4. Report
        return report(results, violations, args.threshold, show_all=args.show_all)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 1


def entry_point() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
