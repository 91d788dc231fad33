"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements the duplicate grouping algorithm.

ALGORITHM
---------
1. Sort all candidates by (size, path). Files of one size form a contiguous run.
2. Sweep each run keeping an "anchor" (first file of the run). A candidate with
   the anchor's storage id is a hard link of it and becomes the new anchor.
3. Any other candidate is hashed together with the anchor (each path at most
   once per run). If its digest already has a representative it joins that
   representative's group, otherwise it becomes the representative itself.
4. Groups with at least one duplicate are returned.

Files of a size that occurs only once are never hashed.
Size runs share no state, so with jobs > 1 they are swept in a thread pool.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from itertools import groupby
from typing import Dict, Iterable, List, Optional, Set

from dupsweep.core.errors import AccessError, ReadError
from dupsweep.core.hasher import HasherImpl
from dupsweep.core.interfaces import DuplicateGrouper, Hasher
from dupsweep.core.models import (
    Candidate, DuplicateGroup, ErrorPolicy, GroupingResult, GroupingStats,
    SkippedFile, StorageId)

logger = logging.getLogger(__name__)


class _SizeRunSweep:
    """
    State of the sweep over one size run: digest cache, representative map,
    and the groups built so far. Owned by exactly one thread.
    """

    def __init__(self, hasher: Hasher, error_policy: ErrorPolicy):
        self.hasher = hasher
        self.error_policy = error_policy
        self.digests: Dict[str, bytes] = {}
        self.representatives: Dict[bytes, DuplicateGroup] = {}
        self.claimed: Dict[bytes, Set[StorageId]] = {}
        self.groups: List[DuplicateGroup] = []
        self.skipped: List[SkippedFile] = []
        self.stats = GroupingStats()

    def run(self, candidates: List[Candidate]) -> "_SizeRunSweep":
        anchor: Optional[Candidate] = None

        for candidate in candidates:
            if anchor is None or candidate.storage_id == anchor.storage_id:
                anchor = candidate
                continue

            anchor_digest = self._digest(anchor)
            if anchor_digest is None:
                # Unreadable anchor (skip policy): start over from this candidate
                anchor = candidate
                continue
            self._register(anchor_digest, anchor)

            digest = self._digest(candidate)
            if digest is None:
                continue

            group = self.representatives.get(digest)
            if group is None:
                self._register(digest, candidate)
            elif candidate.storage_id not in self.claimed[digest]:
                group.add_duplicate(candidate.path)
                self.claimed[digest].add(candidate.storage_id)
            else:
                logger.debug(f"Not reporting hard link {candidate.path}")

        return self

    def _register(self, digest: bytes, candidate: Candidate) -> None:
        if digest in self.representatives:
            return
        group = DuplicateGroup(representative=candidate.path, size=candidate.size)
        self.representatives[digest] = group
        self.claimed[digest] = {candidate.storage_id}
        self.groups.append(group)

    def _digest(self, candidate: Candidate) -> Optional[bytes]:
        """Memoized full hash. Returns None only when the file is skipped."""
        cached = self.digests.get(candidate.path)
        if cached is not None:
            return cached

        try:
            digest = self.hasher.compute_full_hash(candidate.path)
        except (AccessError, ReadError) as e:
            if self.error_policy is ErrorPolicy.FAIL_FAST:
                raise
            logger.warning(f"Skipping {candidate.path}: {e}")
            self.skipped.append(SkippedFile(path=candidate.path, reason=str(e)))
            return None

        self.digests[candidate.path] = digest
        self.stats.files_hashed += 1
        self.stats.bytes_hashed += candidate.size
        return digest


class DuplicateGrouperImpl(DuplicateGrouper):
    """
    Groups content-identical files using size runs and full-content hashes.
    Uses an injected Hasher instance for flexibility and testability.
    """

    def __init__(
        self,
        hasher: Optional[Hasher] = None,
        error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST,
        jobs: int = 1
    ):
        if jobs < 1:
            raise ValueError("Number of jobs must be at least 1")
        self.hasher = hasher or HasherImpl()
        self.error_policy = error_policy
        self.jobs = jobs

    def group(self, candidates: Iterable[Candidate]) -> GroupingResult:
        """
        Runs the grouping pass over all candidates.
        Args:
            candidates: Candidates from a scanner (consumed once)
        Returns:
            GroupingResult with groups ordered by size, then representative path
        """
        start_time = time.time()
        ordered = sorted(candidates, key=lambda c: (c.size, c.path))
        runs = self._split_size_runs(ordered)

        stats = GroupingStats(candidates=len(ordered), size_classes=len(runs))
        colliding = [run for run in runs if len(run) >= 2]
        stats.colliding_size_classes = len(colliding)
        logger.debug(f"{len(ordered)} candidates in {len(runs)} size classes, "
                     f"{len(colliding)} with collisions")

        sweeps = self._sweep_all(colliding)

        result = GroupingResult(stats=stats)
        for sweep in sweeps:
            result.groups.extend(g for g in sweep.groups if g.is_duplicate())
            result.skipped.extend(sweep.skipped)
            stats.merge(sweep.stats)

        result.any_matches = bool(result.groups)
        stats.total_time = time.time() - start_time
        logger.debug(f"Found {len(result.groups)} duplicate groups")
        return result

    def _sweep_all(self, runs: List[List[Candidate]]) -> List[_SizeRunSweep]:
        if self.jobs == 1 or len(runs) < 2:
            return [self._new_sweep().run(run) for run in runs]

        # Each run gets its own sweep state; result order follows input order
        with ThreadPoolExecutor(max_workers=self.jobs) as executor:
            futures = [executor.submit(self._new_sweep().run, run) for run in runs]
            try:
                return [future.result() for future in futures]
            except BaseException:
                # Includes KeyboardInterrupt, so queued runs never start
                executor.shutdown(wait=False, cancel_futures=True)
                raise

    def _new_sweep(self) -> _SizeRunSweep:
        return _SizeRunSweep(self.hasher, self.error_policy)

    @staticmethod
    def _split_size_runs(ordered: List[Candidate]) -> List[List[Candidate]]:
        return [list(run) for _, run in groupby(ordered, key=lambda c: c.size)]
