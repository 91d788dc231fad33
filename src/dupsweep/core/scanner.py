"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements directory traversal for duplicate detection.
Features:
- Validates the root directory before the walk starts
- Recursively walks the tree with os.walk (symlinks are never followed)
- Drops paths matching any exclusion regex before probing them
- Yields Candidate objects lazily, one per regular file
"""

import logging
import os
import stat
import time
from typing import Iterator, List, Optional, Pattern, Sequence, Union

from dupsweep.core.errors import AccessError, NotFoundError
from dupsweep.core.interfaces import FileScanner, MetadataProber
from dupsweep.core.models import Candidate, ErrorPolicy, SkippedFile, compile_patterns
from dupsweep.core.prober import StatProberImpl

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Scans a directory tree recursively and yields regular files as candidates.

    Attributes:
        root_dir: Root directory to scan (made absolute)
        exclusions: Compiled regexes; a file whose full path matches any is dropped
        prober: Metadata prober used to read size and storage id
        error_policy: FAIL_FAST raises on unreadable entries, SKIP records them
        skipped: Entries left out under the SKIP policy
    """

    def __init__(
        self,
        root_dir: str,
        exclusions: Optional[Sequence[Union[str, Pattern]]] = None,
        prober: Optional[MetadataProber] = None,
        error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST
    ):
        self.root_dir = os.path.abspath(root_dir)
        self.exclusions = self._normalize_exclusions(exclusions)
        self.prober = prober or StatProberImpl()
        self.error_policy = error_policy
        self.skipped: List[SkippedFile] = []

    def validate_root(self) -> None:
        """Raises NotFoundError if the root is missing or is not a directory."""
        if not os.path.exists(self.root_dir):
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise NotFoundError(error_msg, path=self.root_dir)
        if not os.path.isdir(self.root_dir):
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise NotFoundError(error_msg, path=self.root_dir)

    def scan(self) -> Iterator[Candidate]:
        """
        Validates the root eagerly, then returns a lazy single-use walk.
        """
        self.validate_root()
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Exclusions: {[p.pattern for p in self.exclusions]}")
        return self._walk()

    def _walk(self) -> Iterator[Candidate]:
        start_time = time.time()
        found = 0

        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_walk_error):
            # Sorted for a reproducible order; os.walk does not descend into symlinked dirs
            dirs.sort()
            for filename in sorted(files):
                candidate = self._process_file(os.path.join(root, filename))
                if candidate is not None:
                    found += 1
                    yield candidate

        elapsed_time = time.time() - start_time
        logger.debug(f"Scan completed in {elapsed_time:.2f} seconds. Found {found} candidates.")

    def _process_file(self, path: str) -> Optional[Candidate]:
        """
        Turn one directory entry into a Candidate if it passes all filters.
        Returns None for excluded paths, symlinks, non-regular files and
        entries skipped under the SKIP policy.
        """
        if self._is_excluded(path):
            logger.debug(f"Skipping excluded path: {path}")
            return None

        try:
            mode = self._lstat_mode(path)
            if stat.S_ISLNK(mode):
                logger.debug(f"Skipping symbolic link: {path}")
                return None
            if not stat.S_ISREG(mode):
                logger.debug(f"Skipping non-regular file: {path}")
                return None
            metadata = self.prober.probe(path)
        except AccessError as e:
            if self.error_policy is ErrorPolicy.FAIL_FAST:
                raise
            self._skip(path, str(e))
            return None

        return Candidate(path=path, size=metadata.size, storage_id=metadata.storage_id)

    @staticmethod
    def _lstat_mode(path: str) -> int:
        try:
            return os.lstat(path).st_mode
        except OSError as e:
            raise AccessError(f"Cannot stat {path}: {e.strerror or e}", path=path) from e

    def _is_excluded(self, path: str) -> bool:
        return any(pattern.search(path) for pattern in self.exclusions)

    def _on_walk_error(self, error: OSError) -> None:
        path = error.filename or self.root_dir
        if self.error_policy is ErrorPolicy.FAIL_FAST:
            raise AccessError(f"Cannot list directory {path}: {error.strerror or error}", path=path) from error
        self._skip(path, f"Cannot list directory: {error.strerror or error}")

    def _skip(self, path: str, reason: str) -> None:
        logger.warning(f"Skipping {path}: {reason}")
        self.skipped.append(SkippedFile(path=path, reason=reason))

    @staticmethod
    def _normalize_exclusions(exclusions) -> tuple:
        if not exclusions:
            return ()
        raw = [p for p in exclusions if isinstance(p, str)]
        compiled = [p for p in exclusions if not isinstance(p, str)]
        return tuple(compiled) + compile_patterns(raw)
