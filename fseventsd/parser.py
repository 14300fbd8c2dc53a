"""
parser.py — Journal discovery, decompression and batch parsing.

Public API
----------
list_fseventsd_files(directory)
    Journal files in *directory*, skipping the ``fseventsd-uuid`` file.

decompress(path)
    Inflate a (multi-member) gzip journal into one byte buffer.

parse_file(path, config)
    Size-check, inflate and decode a single journal.

parse_fseventsd_files(paths, config)
    Decode many journals; a bad file is reported and skipped, never fatal.

parse_fseventsd_data(config, legacy)
    Discover the default (or legacy) directory and decode everything in it.
"""

from __future__ import annotations

import gzip
import logging
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from fseventsd.config import ParserConfig
from fseventsd.errors import (
    DecompressError,
    FileTooLargeError,
    JournalDirectoryError,
    ParseError,
)
from fseventsd.events import FsEvent
from fseventsd.stream import parse_fsevents

logger = logging.getLogger(__name__)

UUID_FILE_NAME = "fseventsd-uuid"


@dataclass
class FileFailure:
    """A journal file that contributed no records, and why."""

    path: Path
    reason: str


@dataclass
class BatchResult:
    """Outcome of parsing a set of journal files.

    Attributes:
        records: Records of every successfully parsed file, in file order.
        parsed:  Files that decoded cleanly.
        skipped: Files rejected by the size guard.
        failed:  Files that could not be read or decoded.
    """

    records: list[FsEvent] = field(default_factory=list)
    parsed: list[Path] = field(default_factory=list)
    skipped: list[FileFailure] = field(default_factory=list)
    failed: list[FileFailure] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------

def list_fseventsd_files(directory: str | Path) -> list[Path]:
    """Return the journal files in *directory*, sorted by name.

    Raises:
        JournalDirectoryError: *directory* is missing or cannot be listed.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise JournalDirectoryError(f"Not a directory: {directory}")
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise JournalDirectoryError(f"Cannot list {directory}: {exc}") from exc

    return [entry for entry in entries if entry.name != UUID_FILE_NAME]


def get_fseventsd(config: ParserConfig | None = None) -> list[Path]:
    """Journal files in the configured default directory."""
    config = config or ParserConfig()
    return list_fseventsd_files(config.fseventsd_dir)


def get_fseventsd_legacy(config: ParserConfig | None = None) -> list[Path]:
    """Journal files in the configured legacy directory."""
    config = config or ParserConfig()
    return list_fseventsd_files(config.legacy_dir)


# ---------------------------------------------------------------------------
# Per-file steps
# ---------------------------------------------------------------------------

def within_size_limit(path: str | Path, max_size: int) -> bool:
    """Return ``True`` if *path* is smaller than *max_size* bytes.

    A file whose size cannot be determined is treated as too large.
    """
    try:
        size = Path(path).stat().st_size
    except OSError as exc:
        logger.warning("Cannot determine size of fsevents file %s: %s", path, exc)
        return False
    return size < max_size


def decompress(path: str | Path) -> bytes:
    """Read and inflate the gzip journal at *path*.

    Raises:
        DecompressError: *path* is not a regular file, cannot be read, or is
            not valid gzip data.
    """
    path = Path(path)
    if not path.is_file():
        raise DecompressError(f"Not a file: {path}")
    try:
        with gzip.open(path, "rb") as fh:
            return fh.read()
    except (OSError, EOFError, zlib.error) as exc:
        raise DecompressError(f"Failed to decompress {path}: {exc}") from exc


def parse_file(path: str | Path, config: ParserConfig | None = None) -> list[FsEvent]:
    """Decode every record in the journal at *path*.

    Raises:
        FileTooLargeError: the file is at or above ``config.max_file_size``.
        DecompressError:   the file cannot be read or inflated.
        ParseError:        the inflated data is malformed.
    """
    config = config or ParserConfig()
    if not within_size_limit(path, config.max_file_size):
        raise FileTooLargeError(
            f"{path} is not below the {config.max_file_size}-byte limit"
        )
    data = decompress(path)
    logger.debug("Decompressed %s to %d bytes", path, len(data))
    return parse_fsevents(data)


# ---------------------------------------------------------------------------
# Batch
# ---------------------------------------------------------------------------

def parse_fseventsd_files(
    paths: Iterable[str | Path],
    config: ParserConfig | None = None,
) -> BatchResult:
    """Decode each journal in *paths* and concatenate the results.

    Failures are isolated per file: the file is logged, recorded in the
    result, and its partial records are dropped.
    """
    config = config or ParserConfig()
    result = BatchResult()

    for path in map(Path, paths):
        logger.info("Parsing file: %s", path)
        try:
            records = parse_file(path, config)
        except FileTooLargeError as exc:
            logger.warning("Skipping %s: %s", path, exc)
            result.skipped.append(FileFailure(path, str(exc)))
            continue
        except DecompressError as exc:
            logger.error("Failed to decompress file %s: %s", path, exc)
            result.failed.append(FileFailure(path, str(exc)))
            continue
        except ParseError as exc:
            logger.error("Failed parsing FsEvent file %s: %s", path, exc)
            result.failed.append(FileFailure(path, str(exc)))
            continue

        logger.debug("%s: %d records", path, len(records))
        result.records.extend(records)
        result.parsed.append(path)

    return result


def parse_fseventsd_data(
    config: ParserConfig | None = None,
    legacy: bool = False,
) -> BatchResult:
    """Parse every journal in the default (or legacy) directory.

    Raises:
        JournalDirectoryError: the directory cannot be listed.
    """
    config = config or ParserConfig()
    files = get_fseventsd_legacy(config) if legacy else get_fseventsd(config)
    return parse_fseventsd_files(files, config)
