"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/prober.py
Reads file size and storage identifier without touching file contents.
"""

import logging
import os

from dupsweep.core.errors import AccessError
from dupsweep.core.interfaces import MetadataProber
from dupsweep.core.models import FileMetadata

logger = logging.getLogger(__name__)


class StatProberImpl(MetadataProber):
    """
    Metadata prober backed by os.stat().
    The storage identifier is (st_dev, st_ino), so hard links compare equal.
    """

    def probe(self, path: str) -> FileMetadata:
        try:
            stat_result = os.stat(path)
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            raise AccessError(f"Cannot stat {path}: {e.strerror or e}", path=path) from e

        return FileMetadata(
            size=stat_result.st_size,
            storage_id=(stat_result.st_dev, stat_result.st_ino),
        )
