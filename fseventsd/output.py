"""
output.py — CSV and JSON writers for decoded records.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Sequence

from fseventsd.config import ParserConfig
from fseventsd.events import FsEvent

logger = logging.getLogger(__name__)

CSV_HEADER = ["Path", "Flags", "Node", "Event ID"]


def write_csv(records: Sequence[FsEvent], path: str | Path) -> None:
    """Write *records* to *path* as CSV, replacing any existing file."""
    with open(path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(CSV_HEADER)
        for record in records:
            writer.writerow(
                [record.path, record.flags_text, str(record.node), str(record.event_id)]
            )
    logger.info("Wrote %d records to %s", len(records), path)


def write_json(records: Sequence[FsEvent], path: str | Path) -> None:
    """Append *records* to *path* as one JSON array."""
    with open(path, "a", encoding="utf-8") as fh:
        json.dump([record.to_dict() for record in records], fh)
    logger.info("Appended %d records to %s", len(records), path)


def output_data(records: Sequence[FsEvent], config: ParserConfig) -> None:
    """Write *records* to the CSV and JSON files named in *config*."""
    write_csv(records, config.csv_path)
    write_json(records, config.json_path)
