"""
Command orchestrator for duplicate detection.
This is the single place where the core components are wired together, used by the CLI
and by library callers. No output or argument parsing here.
"""
from typing import Optional

from dupsweep.core.grouper import DuplicateGrouperImpl
from dupsweep.core.hasher import HasherImpl
from dupsweep.core.interfaces import Hasher
from dupsweep.core.models import GroupingResult, ScanParams
from dupsweep.core.scanner import FileScannerImpl


class FindDuplicatesCommand:
    """
    Orchestrates the whole workflow:
    1. Validate the root directory (before any traversal)
    2. Walk the tree and probe each file
    3. Group candidates by size and full-content hash

    Usage:
        params = ScanParams(root_dir="/home/me/Downloads", exclude_patterns=[r"\\.git/"])
        result = FindDuplicatesCommand().execute(params)
        for group in result.groups:
            ...
    """

    def __init__(self, hasher: Optional[Hasher] = None):
        self._hasher = hasher

    def execute(self, params: ScanParams) -> GroupingResult:
        """
        Execute duplicate detection with given parameters.

        Args:
            params: Validated scan parameters

        Returns:
            GroupingResult with groups, any_matches flag, skipped files and stats

        Raises:
            NotFoundError: If the root directory is missing or not a directory
            AccessError: If a file cannot be probed or opened (fail-fast policy)
            ReadError: If a read fails mid-file (fail-fast policy)
        """
        scanner = FileScannerImpl(
            root_dir=params.root_dir,
            exclusions=params.exclusions,
            error_policy=params.error_policy
        )
        hasher = self._hasher or HasherImpl.from_name(params.algorithm, chunk_size=params.chunk_size)
        grouper = DuplicateGrouperImpl(hasher, error_policy=params.error_policy, jobs=params.jobs)

        candidates = scanner.scan()
        result = grouper.group(candidates)

        # Scanner skips are only complete once the walk has been consumed
        result.skipped = scanner.skipped + result.skipped
        return result
