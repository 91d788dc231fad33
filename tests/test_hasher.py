"""
Unit tests for HasherImpl and the pluggable algorithms.
Verifies full-content digests, determinism and error mapping.
"""
import hashlib
from unittest import mock

import pytest
import xxhash

from dupsweep.core.errors import AccessError, ReadError
from dupsweep.core.hasher import (
    HasherImpl, XXHash128AlgorithmImpl, Sha256AlgorithmImpl, Blake2bAlgorithmImpl)
from dupsweep.core.models import HashAlgorithmName


class TestHasherImpl:
    """Test streaming full-content hashing."""

    def test_same_content_produces_same_full_hash(self, tmp_path):
        """Identical files must produce identical 16-byte xxh128 digests."""
        content = b"test content " * 1000
        f1 = tmp_path / "one.bin"
        f2 = tmp_path / "two.bin"
        f1.write_bytes(content)
        f2.write_bytes(content)

        hasher = HasherImpl(XXHash128AlgorithmImpl())
        hash1 = hasher.compute_full_hash(str(f1))
        hash2 = hasher.compute_full_hash(str(f2))

        assert hash1 == hash2
        assert isinstance(hash1, bytes)
        assert len(hash1) == 16  # 128 bits

    def test_different_content_produces_different_hashes(self, tmp_path):
        f1 = tmp_path / "a.bin"
        f2 = tmp_path / "b.bin"
        f1.write_bytes(b"A" * 1024)
        f2.write_bytes(b"B" * 1024)

        hasher = HasherImpl()
        assert hasher.compute_full_hash(str(f1)) != hasher.compute_full_hash(str(f2))

    def test_difference_in_last_byte_is_detected(self, tmp_path):
        """Whole file is read, not just a prefix."""
        f1 = tmp_path / "a.bin"
        f2 = tmp_path / "b.bin"
        f1.write_bytes(b"X" * 300_000 + b"1")
        f2.write_bytes(b"X" * 300_000 + b"2")

        hasher = HasherImpl(chunk_size=4096)
        assert hasher.compute_full_hash(str(f1)) != hasher.compute_full_hash(str(f2))

    def test_chunk_size_does_not_change_digest(self, tmp_path):
        data = bytes(range(256)) * 500
        path = tmp_path / "data.bin"
        path.write_bytes(data)

        small = HasherImpl(chunk_size=7).compute_full_hash(str(path))
        large = HasherImpl(chunk_size=1024 * 1024).compute_full_hash(str(path))

        assert small == large == xxhash.xxh3_128(data).digest()

    def test_empty_file_has_empty_content_digest(self, tmp_path):
        path = tmp_path / "empty"
        path.write_bytes(b"")

        assert HasherImpl().compute_full_hash(str(path)) == xxhash.xxh3_128(b"").digest()

    @pytest.mark.parametrize("name, reference", [
        (HashAlgorithmName.SHA256, hashlib.sha256),
        (HashAlgorithmName.BLAKE2B, hashlib.blake2b),
    ])
    def test_from_name_uses_matching_algorithm(self, tmp_path, name, reference):
        path = tmp_path / "data.bin"
        path.write_bytes(b"hello world")

        hasher = HasherImpl.from_name(name, chunk_size=3)
        assert hasher.compute_full_hash(str(path)) == reference(b"hello world").digest()

    def test_algorithms_meet_minimum_digest_width(self):
        for algorithm in (XXHash128AlgorithmImpl, Sha256AlgorithmImpl, Blake2bAlgorithmImpl):
            assert len(algorithm.new().digest()) >= 16

    def test_rejects_non_positive_chunk_size(self):
        with pytest.raises(ValueError):
            HasherImpl(chunk_size=0)


class TestHasherErrors:
    """Open failures map to AccessError, mid-stream failures to ReadError."""

    def test_missing_file_raises_access_error(self, tmp_path):
        path = tmp_path / "vanished.txt"
        path.write_bytes(b"content")
        path.unlink()

        with pytest.raises(AccessError) as exc_info:
            HasherImpl().compute_full_hash(str(path))
        assert exc_info.value.path == str(path)

    def test_permission_denied_raises_access_error(self, tmp_path):
        path = tmp_path / "locked.txt"
        path.write_bytes(b"content")

        with mock.patch("dupsweep.core.hasher.open", create=True, side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(AccessError):
                HasherImpl().compute_full_hash(str(path))

    def test_read_fault_raises_read_error(self, tmp_path):
        path = tmp_path / "flaky.bin"
        path.write_bytes(b"0123456789")

        faulty = mock.MagicMock()
        faulty.__enter__.return_value = faulty
        faulty.read.side_effect = [b"0123", OSError(5, "Input/output error")]

        with mock.patch("dupsweep.core.hasher.open", create=True, return_value=faulty):
            with pytest.raises(ReadError) as exc_info:
                HasherImpl(chunk_size=4).compute_full_hash(str(path))

        assert exc_info.value.path == str(path)
        faulty.__exit__.assert_called_once()
