"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file scanning and duplicate grouping.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Pattern, Tuple

from dupsweep.utils.convert_utils import ConvertUtils

# (st_dev, st_ino): equal for two paths that are hard links to one inode
StorageId = Tuple[int, int]

DEFAULT_CHUNK_SIZE = 1024 * 1024


# =============================
# Enums
# =============================

class ErrorPolicy(Enum):
    """
    What to do when a file cannot be probed or read during a run.
    """
    FAIL_FAST = "fail-fast"
    SKIP = "skip"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            ErrorPolicy.FAIL_FAST: "Fail fast",
            ErrorPolicy.SKIP: "Skip unreadable files",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class HashAlgorithmName(Enum):
    """
    Content digest used to confirm duplicates.
    All choices produce at least 128 bits.
    """
    XXH128 = "xxh128"
    SHA256 = "sha256"
    BLAKE2B = "blake2b"

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            HashAlgorithmName.XXH128: "xxHash3 128-bit (fastest, non-cryptographic)",
            HashAlgorithmName.SHA256: "SHA-256 (cryptographic)",
            HashAlgorithmName.BLAKE2B: "BLAKE2b 512-bit (cryptographic)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileMetadata:
    """Result of a metadata probe: size and storage identifier."""
    size: int
    storage_id: StorageId


@dataclass(frozen=True)
class Candidate:
    """
    A regular file found during traversal, pending duplicate analysis.
    Created once per traversal hit and never modified.
    """
    path: str
    size: int  # in bytes
    storage_id: StorageId

    def __repr__(self):
        return f"<Candidate path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    A representative file plus every other file with identical content.
    All members share the same size and digest.
    """
    representative: str
    size: int
    duplicates: List[str] = field(default_factory=list)

    @property
    def paths(self) -> List[str]:
        """Representative first, then duplicates in discovery order."""
        return [self.representative] + self.duplicates

    @property
    def duplicate_count(self) -> int:
        return len(self.duplicates)

    def add_duplicate(self, path: str) -> None:
        self.duplicates.append(path)

    def is_duplicate(self) -> bool:
        """True if at least one file matches the representative."""
        return self.duplicate_count >= 1

    def __repr__(self):
        return f"<DuplicateGroup representative={self.representative}, count={len(self.paths)}>"


@dataclass(frozen=True)
class SkippedFile:
    """A file left out of the run under the skip policy."""
    path: str
    reason: str


@dataclass
class GroupingStats:
    """
    Counters collected during one grouping run.
    """
    candidates: int = 0
    size_classes: int = 0
    colliding_size_classes: int = 0
    files_hashed: int = 0
    bytes_hashed: int = 0
    total_time: float = 0.0

    def merge(self, other: "GroupingStats") -> None:
        """Adds the per-class counters of another stats object to this one."""
        self.size_classes += other.size_classes
        self.colliding_size_classes += other.colliding_size_classes
        self.files_hashed += other.files_hashed
        self.bytes_hashed += other.bytes_hashed

    def print_summary(self) -> str:
        lines = [
            "Grouping Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Candidates: {self.candidates}",
            f"Size classes: {self.size_classes} ({self.colliding_size_classes} with collisions)",
            f"Files hashed: {self.files_hashed}",
            f"Bytes hashed: {ConvertUtils.bytes_to_human(self.bytes_hashed)}",
        ]
        return "\n".join(lines)


@dataclass
class GroupingResult:
    """Output of a grouping run."""
    groups: List[DuplicateGroup] = field(default_factory=list)
    any_matches: bool = False
    skipped: List[SkippedFile] = field(default_factory=list)
    stats: GroupingStats = field(default_factory=GroupingStats)


"""
DTO for scan parameters with built-in validation.
Interface-agnostic, used by the CLI and by library callers.
"""

@dataclass
class ScanParams:
    """Parameters for a duplicate scan with validation."""
    root_dir: str
    exclude_patterns: List[str] = field(default_factory=list)
    error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST
    algorithm: HashAlgorithmName = HashAlgorithmName.XXH128
    chunk_size: int = DEFAULT_CHUNK_SIZE
    jobs: int = 1
    exclusions: Tuple[Pattern, ...] = field(init=False, default=())

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if self.jobs < 1:
            raise ValueError("Number of jobs must be at least 1")

        self.exclusions = compile_patterns(self.exclude_patterns)


def compile_patterns(patterns: Optional[List[str]]) -> Tuple[Pattern, ...]:
    """
    Compiles exclusion regexes.
    Raises ValueError naming the first invalid pattern.
    """
    compiled = []
    for pattern in patterns or []:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise ValueError(f"Invalid exclusion pattern '{pattern}': {e}")
    return tuple(compiled)
