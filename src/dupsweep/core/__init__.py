"""
Core duplicate detection engine: prober, hasher, scanner and grouper.

This package contains the whole detection algorithm:
- StatProberImpl: size and (device, inode) storage id from os.stat
- HasherImpl + XXHash128AlgorithmImpl: streaming full-content digests
- FileScannerImpl: recursive traversal with regex exclusions
- DuplicateGrouperImpl: size runs → hard-link filter → full hash → groups
- Models: Candidate, DuplicateGroup, GroupingResult, ScanParams

All components are pure Python with no output dependencies, suitable for CLI and library usage.
"""

from .errors import DupSweepError, NotFoundError, AccessError, ReadError
from .prober import StatProberImpl
from .hasher import HasherImpl, XXHash128AlgorithmImpl, Sha256AlgorithmImpl, Blake2bAlgorithmImpl
from .scanner import FileScannerImpl
from .grouper import DuplicateGrouperImpl
from .models import (
    Candidate, DuplicateGroup, ErrorPolicy, FileMetadata, GroupingResult,
    GroupingStats, HashAlgorithmName, ScanParams, SkippedFile)

__all__ = [
    "DupSweepError",
    "NotFoundError",
    "AccessError",
    "ReadError",
    "StatProberImpl",
    "HasherImpl",
    "XXHash128AlgorithmImpl",
    "Sha256AlgorithmImpl",
    "Blake2bAlgorithmImpl",
    "FileScannerImpl",
    "DuplicateGrouperImpl",
    "Candidate",
    "DuplicateGroup",
    "ErrorPolicy",
    "FileMetadata",
    "GroupingResult",
    "GroupingStats",
    "HashAlgorithmName",
    "ScanParams",
    "SkippedFile",
]
