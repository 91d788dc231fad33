"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements full-content file hashing with pluggable hash algorithms.

The file is streamed in fixed-size chunks, so memory use does not grow with
file size. Digests are not cached here: memoization belongs to the grouping
run that asks for them.
"""

import hashlib
import logging
from typing import Optional

import xxhash

from dupsweep.core.errors import AccessError, ReadError
from dupsweep.core.interfaces import Hasher, HashAlgorithm, HashState
from dupsweep.core.models import DEFAULT_CHUNK_SIZE, HashAlgorithmName

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class XXHash128AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashState:
        return xxhash.xxh3_128()


class Sha256AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashState:
        return hashlib.sha256()


class Blake2bAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashState:
        return hashlib.blake2b()


ALGORITHMS = {
    HashAlgorithmName.XXH128: XXHash128AlgorithmImpl,
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.BLAKE2B: Blake2bAlgorithmImpl,
}


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Reads the whole file and returns the digest of its full byte stream.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or XXHash128AlgorithmImpl()
        self.chunk_size = chunk_size

    @classmethod
    def from_name(cls, name: HashAlgorithmName, chunk_size: int = DEFAULT_CHUNK_SIZE) -> "HasherImpl":
        return cls(ALGORITHMS[name](), chunk_size=chunk_size)

    def compute_full_hash(self, path: str) -> bytes:
        """
        Computes the digest of the entire file.

        Raises:
            AccessError: the file cannot be opened
            ReadError: a read fails part way through
        """
        state = self.algorithm.new()
        try:
            f = open(path, 'rb')
        except OSError as e:
            logger.debug(f"Could not open {path}: {e}")
            raise AccessError(f"Cannot open {path}: {e.strerror or e}", path=path) from e

        with f:
            try:
                for chunk in iter(lambda: f.read(self.chunk_size), b''):
                    state.update(chunk)
            except OSError as e:
                logger.debug(f"Read failed for {path}: {e}")
                raise ReadError(f"Error reading {path}: {e.strerror or e}", path=path) from e

        return state.digest()
