"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detection system.
These protocols enforce structural typing using Python's `typing.Protocol` so that
components can be swapped (e.g. by counting doubles in tests).

Key Components:
---------------
- MetadataProber: Interface for reading size and storage identifier of a path.
- HashAlgorithm: Factory for incremental digest objects (xxHash, SHA-256, ...).
- Hasher: Interface for computing a full-content digest of a file.
- FileScanner: Interface for walking a directory tree and yielding candidates.
- DuplicateGrouper: Interface for assembling duplicate groups from candidates.
"""

from typing import Protocol, Iterable, Iterator

from dupsweep.core.models import Candidate, FileMetadata, GroupingResult


# ===== Interfaces =====

class MetadataProber(Protocol):
    """Interface for cheap metadata queries that never read file contents."""
    def probe(self, path: str) -> FileMetadata: ...


class HashState(Protocol):
    """Incremental digest object, as returned by hashlib and xxhash constructors."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256, BLAKE2 or xxHash
    without affecting the rest of the grouping logic.
    """

    @staticmethod
    def new() -> HashState:
        """Returns a fresh incremental digest object."""
        ...


class Hasher(Protocol):
    """Interface for hashing whole files."""
    def compute_full_hash(self, path: str) -> bytes: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting candidates.
    """
    def scan(self) -> Iterator[Candidate]:
        """
        Validate the root and walk it.

        Returns:
            A single-use iterator over every regular, non-excluded file.
        """
        ...


class DuplicateGrouper(Protocol):
    """
    Interface for the core grouping algorithm.
    """
    def group(self, candidates: Iterable[Candidate]) -> GroupingResult:
        """
        Group content-identical candidates.

        Args:
            candidates: Candidates produced by a scanner.

        Returns:
            GroupingResult with the duplicate groups and the any_matches flag.
        """
        ...
