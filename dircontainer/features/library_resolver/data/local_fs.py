import os
import logging
from pathlib import Path
from typing import Iterator
from ..domain.interfaces import IDirectoryLister

logger = logging.getLogger(__name__)

class LocalDirectoryLister(IDirectoryLister):
    """
    Concrete implementation using os.scandir for a single-level listing.
    """

    def list_entries(self, root: Path) -> Iterator[Path]:
        # Read the whole listing up front so an OSError surfaces before any entry is used
        with os.scandir(root) as it:
            entries = list(it)
        for entry in entries:
            try:
                if not entry.is_file():
                    continue
            except OSError:
                # Entry vanished or cannot be stat'ed: treat as absent
                logger.debug(f"Skipping unreadable entry: {entry.path}")
                continue
            yield root / entry.name

    def exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError:
            return False

    def is_directory(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False
