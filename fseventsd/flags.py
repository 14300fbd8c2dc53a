"""
flags.py — Flag word decoding for fseventsd.

Every record carries a 32-bit flag word whose set bits each name one kind of
change.  The table below is ordered by bit value and that order is the order
in which names are reported.
"""

from __future__ import annotations

from typing import Iterable

FLAG_SEPARATOR = ","

# ---------------------------------------------------------------------------
# (bit, name) pairs, increasing bit value.  Unlisted bits are ignored.
# ---------------------------------------------------------------------------
FLAG_TABLE: tuple[tuple[int, str], ...] = (
    (0x00000001, "Created"),
    (0x00000002, "Removed"),
    (0x00000004, "InodeMetadataModified"),
    (0x00000008, "Renamed"),
    (0x00000010, "Modified"),
    (0x00000020, "Exchange"),
    (0x00000040, "FinderInfoModified"),
    (0x00000080, "DirectoryCreated"),
    (0x00000100, "PermissionChanged"),
    (0x00000200, "ExtendedAttributeModified"),
    (0x00000400, "ExtendedAttributeRemoved"),
    (0x00000800, "DocumentCreated"),
    (0x00001000, "DocumentRevision"),
    (0x00002000, "UnmountPending"),
    (0x00004000, "ItemCloned"),
    (0x00010000, "NotificationClone"),
    (0x00020000, "ItemTruncated"),
    (0x00040000, "DirectoryEvent"),
    (0x00080000, "LastHardLinkRemoved"),
    (0x00100000, "IsHardLink"),
    (0x00400000, "IsSymbolicLink"),
    (0x00800000, "IsFile"),
    (0x01000000, "IsDirectory"),
    (0x02000000, "Mount"),
    (0x04000000, "Unmount"),
    (0x20000000, "EndOfTransaction"),
)


def decode_flags(word: int) -> list[str]:
    """Return the names of the known bits set in *word*, in bit order."""
    return [name for bit, name in FLAG_TABLE if word & bit]


def format_flags(names: Iterable[str]) -> str:
    """Join flag names the way they are rendered in CSV and JSON output."""
    return FLAG_SEPARATOR.join(names)
