from __future__ import annotations
import argparse
import logging
import sys
import time
from typing import Optional, Sequence
from .config import ScanConfig, DEFAULT_ROOT, DEFAULT_TOP, DEFAULT_MIN_SIZE, DEFAULT_DAYS_UNUSED
from .scanner import ScanError, scan_tree
from .analyzer import analyze_collection
from .drives import volume_usage
from .report import NO_FILES_MESSAGE, build_report, header_lines, render_report

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diskreport",
        description="Report the largest, least recently used and most space hungry files under a directory.",
        epilog="Examples:\n"
               "  diskreport -dir ~/Downloads -top 20\n"
               "  diskreport -dir /data -min-size 0 -days-unused 90",
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-dir", "--dir", dest="dir", type=str, default=DEFAULT_ROOT,
                        help="Directory to analyze (default: current directory).")
    parser.add_argument("-top", "--top", dest="top", type=int, default=DEFAULT_TOP,
                        help="Number of top items to show per section; 0 or less shows none (default: 10).")
    parser.add_argument("-min-size", "--min-size", dest="min_size", type=int, default=DEFAULT_MIN_SIZE,
                        help="Minimum file size to consider, in bytes (default: 1000000).")
    parser.add_argument("-days-unused", "--days-unused", dest="days_unused", type=int,
                        default=DEFAULT_DAYS_UNUSED,
                        help="Consider files unused if not accessed in this many days (default: 30).")
    parser.add_argument("-v", "-verbose", "--verbose", dest="verbose", action="store_true",
                        help="Log debug diagnostics to stderr.")
    return parser

def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = ScanConfig.from_args(args)
    setup_logging(config.verbose)

    error = config.validate()
    if error:
        print(f"Error: {error}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    now = time.time()
    try:
        collection = scan_tree(config.root, min_size=config.min_size)
    except ScanError as e:
        print(f"Error walking directory: {e}", file=sys.stderr)
        return 1

    print("\n".join(header_lines(config)))
    print()
    if not collection.records:
        print(NO_FILES_MESSAGE)
        return 0

    summary = analyze_collection(collection)
    sections = build_report(summary, config, now=now, collection=collection,
                            volume=volume_usage(config.root))
    print(render_report(sections))
    return 0