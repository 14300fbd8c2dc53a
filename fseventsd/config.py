"""
config.py — Run configuration for fseventsd.

Collects the well-known journal locations, the file size ceiling and the
output file names in one value that is passed to the parser and writers.
Point ``fseventsd_dir`` at a mounted image to examine an offline system.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_FSEVENTSD_DIR = "/System/Volumes/Data/.fseventsd/"
LEGACY_FSEVENTSD_DIR = "/.fseventsd"
MAX_FILE_SIZE = 2 * 1024 * 1024 * 1024  # 2 GiB
DEFAULT_CSV_PATH = "output.csv"
DEFAULT_JSON_PATH = "output.json"


@dataclass(frozen=True)
class ParserConfig:
    """Settings shared by discovery, decoding and output.

    Attributes:
        fseventsd_dir: Journal directory scanned by default (macOS 10.15+).
        legacy_dir:    Journal directory used by older macOS releases.
        max_file_size: Files of this many bytes or more are skipped.
        csv_path:      CSV output file (overwritten).
        json_path:     JSON output file (appended to).
    """

    fseventsd_dir: Path = Path(DEFAULT_FSEVENTSD_DIR)
    legacy_dir: Path = Path(LEGACY_FSEVENTSD_DIR)
    max_file_size: int = MAX_FILE_SIZE
    csv_path: Path = Path(DEFAULT_CSV_PATH)
    json_path: Path = Path(DEFAULT_JSON_PATH)

    def with_directory(self, directory: str | Path) -> ParserConfig:
        """Return a copy that scans *directory* instead of the default."""
        return replace(self, fseventsd_dir=Path(directory))
