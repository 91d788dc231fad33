"""
Shared fixtures for duplicate detection tests.
Creates isolated temporary directories with controlled test files.
"""
import os
import sys
from pathlib import Path
from typing import Dict, List

import pytest

# Add src/ to sys.path so 'dupsweep' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from dupsweep.core.models import Candidate  # noqa: E402


@pytest.fixture
def temp_dir(tmp_path):
    """Isolated temporary directory, auto-cleanup after test."""
    return tmp_path


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 2 identical files + 1 identical copy in a subdirectory
    - 2 more identical files of a different size
    - 2 unique files, one sharing a size with the first pair
    - 2 empty files (a valid duplicate pair)
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.bin"
    files["dup2_b"] = temp_dir / "dup2_b.bin"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size as dup1 but different content
    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1024)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    files["empty_a"] = temp_dir / "empty_a.txt"
    files["empty_b"] = temp_dir / "empty_b.txt"
    files["empty_a"].write_bytes(b"")
    files["empty_b"].write_bytes(b"")

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)  # Same as dup1_a/b

    return files


@pytest.fixture
def make_hard_link():
    """Creates a hard link or skips the test where the filesystem refuses."""
    def _link(source: Path, link: Path) -> Path:
        try:
            os.link(source, link)
        except (OSError, NotImplementedError) as e:
            pytest.skip(f"Hard links not supported here: {e}")
        return link
    return _link


class CountingHasher:
    """Test double: records every path hashed, digest is the path's content."""

    def __init__(self, contents: Dict[str, bytes] = None):
        self.contents = contents or {}
        self.calls: List[str] = []

    def compute_full_hash(self, path: str) -> bytes:
        self.calls.append(path)
        if path in self.contents:
            return b"digest:" + self.contents[path]
        with open(path, "rb") as f:
            return b"digest:" + f.read()


@pytest.fixture
def counting_hasher():
    return CountingHasher()


def candidate(path: str, size: int, inode: int, device: int = 1) -> Candidate:
    """Builds a Candidate without touching the filesystem."""
    return Candidate(path=path, size=size, storage_id=(device, inode))
