# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from colorama import Fore, Style, just_fix_windows_console

from .__about__ import __title__, __version__
from .common.logging_utils import setup_logger
from .common.progress import make_progress
from .common.textio import input_size, open_input, read_lines, write_lines
from .config.loader import load_config, merge_cli_overrides
from .sorter.engine import SorterEngine
from .sorter.options import ConfigurationError, SortOptions

EXIT_OK = 0
EXIT_UNSORTED = 1
EXIT_ERROR = 2


def _error(msg: str) -> None:
    if sys.stderr.isatty():
        msg = f"{Fore.RED}{msg}{Style.RESET_ALL}"
    sys.stderr.write(f"{__title__}: {msg}\n")


def build_parser() -> argparse.ArgumentParser:
    # -h is human-numeric sort, so help lives on --help only
    p = argparse.ArgumentParser(
        prog=__title__,
        description="Sort lines of text (whole line or one tab-separated column)",
        add_help=False,
    )
    p.add_argument("files", nargs="*", metavar="FILE", help="input file (default: stdin); at most one")
    p.add_argument("-k", "--key", dest="column", type=int, default=None, metavar="N",
                   help="sort by tab-separated column N (1-based; default whole line)")
    p.add_argument("-n", "--numeric-sort", dest="numeric", action="store_true", default=None,
                   help="compare by numeric value")
    p.add_argument("-h", "--human-numeric-sort", dest="human", action="store_true", default=None,
                   help="compare human readable numbers (2k, 1M, 3G)")
    p.add_argument("-M", "--month-sort", dest="month", action="store_true", default=None,
                   help="compare by month name (JAN < ... < DEC)")
    p.add_argument("-r", "--reverse", action="store_true", default=None, help="reverse the result")
    p.add_argument("-u", "--unique", action="store_true", default=None,
                   help="drop lines equal to the preceding sorted line")
    p.add_argument("-b", "--ignore-trailing-blanks", dest="ignore_trailing_blanks", action="store_true",
                   default=None, help="ignore trailing spaces and tabs in keys")
    p.add_argument("-c", "--check", action="store_true", default=None,
                   help="check whether input is sorted; do not sort")
    p.add_argument("--config", default=None, help="YAML config file with defaults")
    p.add_argument("--progress", action="store_true", default=None, help="show a progress bar while reading")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("-q", "--quiet", action="store_true", help="only log errors")
    p.add_argument("--help", action="help", help="show this help message and exit")
    p.add_argument("--version", action="version", version=f"{__title__} {__version__}")
    return p


def _log_level(cfg_level: str, args: argparse.Namespace) -> str:
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "ERROR"
    return cfg_level


def main(argv: Optional[List[str]] = None) -> int:
    just_fix_windows_console()
    args = build_parser().parse_args(argv)

    overrides = {k: getattr(args, k) for k in (
        "column", "numeric", "human", "month", "reverse", "unique", "ignore_trailing_blanks", "check")}
    try:
        cfg = merge_cli_overrides(load_config(args.config), overrides)
        options = SortOptions.from_mapping(cfg.get("sort", {}))
    except (ConfigurationError, OSError) as e:
        _error(str(e))
        return EXIT_ERROR

    logger = setup_logger(__title__, _log_level(str(cfg["logging"].get("level", "WARNING")), args))
    show_progress = bool(args.progress if args.progress is not None else cfg.get("progress", False))

    try:
        stream = open_input(args.files)
    except (ConfigurationError, OSError) as e:
        _error(str(e))
        return EXIT_ERROR
    try:
        with make_progress(input_size(args.files), "reading", enabled=show_progress) as bar:
            lines = read_lines(stream, bar)
    except OSError as e:
        _error(str(e))
        return EXIT_ERROR
    finally:
        if args.files and args.files[0] != "-":
            stream.close()
    logger.debug(f"read {len(lines)} lines from {args.files[0] if args.files else 'stdin'}")

    result = SorterEngine(options, logger).run(lines)
    if options.check:
        if not result.is_sorted:
            _error("data is not sorted")
            return EXIT_UNSORTED
        return EXIT_OK

    write_lines(result.lines, sys.stdout.buffer)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
