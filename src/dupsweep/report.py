"""
Plain-text report of duplicate groups.
The destination is always passed in; nothing here writes to a global stream.
"""
from typing import TextIO

from dupsweep.core.models import GroupingResult

NO_MATCHES_MESSAGE = "No duplicates found."
HEADER = "Duplicate files found:"


def write_report(result: GroupingResult, sink: TextIO) -> None:
    """
    Write the groups to sink.
    One line per path: representative first, then its duplicates, then a blank line.
    """
    if not result.groups:
        sink.write(f"{NO_MATCHES_MESSAGE}\n")
        return

    sink.write(f"{HEADER}\n")
    for group in result.groups:
        sink.write(f"{group.representative}\n")
        for path in group.duplicates:
            sink.write(f"{path}\n")
        sink.write("\n")


def write_skipped(result: GroupingResult, sink: TextIO) -> None:
    """List files left out under the skip policy, if any."""
    if not result.skipped:
        return

    sink.write(f"Skipped {len(result.skipped)} unreadable path(s):\n")
    for skipped in result.skipped:
        sink.write(f"  {skipped.path}: {skipped.reason}\n")
