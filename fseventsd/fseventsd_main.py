#!/usr/bin/env python3
"""
fseventsd_main.py — CLI entry point for fseventsd.

Parses every FSEvents journal in a directory and writes the decoded records
to ``output.csv`` and ``output.json`` in the current directory.

Usage
-----
    # Scan the live system journal (needs root)
    python -m fseventsd.fseventsd_main

    # Scan a journal directory copied from another machine
    python -m fseventsd.fseventsd_main /evidence/.fseventsd
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from colorama import Fore, Style, init as colorama_init

from fseventsd.config import ParserConfig
from fseventsd.errors import JournalDirectoryError
from fseventsd.output import output_data
from fseventsd.parser import BatchResult, list_fseventsd_files, parse_fseventsd_files

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("fseventsd")


def _print_summary(result: BatchResult, config: ParserConfig) -> None:
    print()
    print(f"{Fore.GREEN}Parsed  : {len(result.parsed)} file(s), "
          f"{len(result.records)} record(s){Style.RESET_ALL}")
    for failure in result.skipped:
        print(f"{Fore.YELLOW}Skipped : {failure.path} ({failure.reason}){Style.RESET_ALL}")
    for failure in result.failed:
        print(f"{Fore.RED}Failed  : {failure.path} ({failure.reason}){Style.RESET_ALL}")
    print(
        f"\nFinished parsing FsEvents data. Saved results to: "
        f"{config.csv_path} and {config.json_path}"
    )


def run(config: ParserConfig) -> BatchResult | None:
    """Parse the configured journal directory and write both outputs.

    Returns ``None`` if the directory cannot be listed.
    """
    try:
        files = list_fseventsd_files(config.fseventsd_dir)
    except JournalDirectoryError as exc:
        logger.error("Failed to get FSEvents files: %s", exc)
        print(f"{Fore.RED}Failed to get FSEvents files: {exc}{Style.RESET_ALL}")
        return None

    print(f"Going to parse {len(files)} files")
    result = parse_fseventsd_files(files, config)
    output_data(result.records, config)
    _print_summary(result, config)
    return result


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="fseventsd",
        description="Decode macOS FSEvents journal files to CSV and JSON.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Journal directory to parse "
             f"(default: {ParserConfig().fseventsd_dir}).",
    )
    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI args and run the parser."""
    colorama_init()
    args = build_parser().parse_args(argv)

    config = ParserConfig()
    if args.directory:
        config = config.with_directory(args.directory)

    print("Starting FSEvents parser...")
    run(config)


if __name__ == "__main__":
    main()
