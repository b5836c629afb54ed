from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class IDirectoryLister(ABC):
    """
    Contract for the read-only filesystem probes the resolver needs.
    Abstracts os.scandir vs pathlib vs a fake tree in tests.
    """
    @abstractmethod
    def list_entries(self, root: Path) -> Iterator[Path]:
        """
        Yields the immediate (non-recursive) file entries of root, in listing order.

        Raises:
            OSError: If the directory itself cannot be listed.
        """
        pass

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """
        Returns True if path exists. Must return False instead of raising.
        """
        pass

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """
        Returns True if path is an existing directory.
        """
        pass
