"""
dupsweep finds byte-for-byte identical files in a directory tree.

Core features:
- Size pre-filter: only files sharing a size are ever hashed
- Hard links (same device and inode) are never reported as duplicates
- Streaming full-content digest (xxHash3-128 by default, SHA-256 or BLAKE2b optional)
- Regex exclusions on full paths
- Fail-fast by default, optional skipping of unreadable files
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("dupsweep")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API: only what users should import directly
from dupsweep.commands import FindDuplicatesCommand
from dupsweep.core import (
    DuplicateGroup, ErrorPolicy, GroupingResult, HashAlgorithmName, ScanParams,
    DupSweepError, NotFoundError, AccessError, ReadError)
from dupsweep.report import write_report

__all__ = [
    "FindDuplicatesCommand",
    "DuplicateGroup",
    "ErrorPolicy",
    "GroupingResult",
    "HashAlgorithmName",
    "ScanParams",
    "DupSweepError",
    "NotFoundError",
    "AccessError",
    "ReadError",
    "write_report",
    "__version__",
]
