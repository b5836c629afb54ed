from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from dircontainer.core.common.enums import DirectoryErrorKind, SuffixClass


class DirectoryError(Exception):
    """
    Raised when the configured root cannot be scanned.
    """

    def __init__(self, kind: DirectoryErrorKind, path: Path, detail: str = ""):
        # pickle and copy rebuild the error from args
        super().__init__(kind, path, detail)
        self.kind = kind
        self.path = path
        self.detail = detail

    def __str__(self):
        message = f"Library directory {self.kind.value.replace('_', ' ')}: {self.path}"
        if self.detail:
            message = f"{message} ({self.detail})"
        return message


@dataclass(frozen=True)
class ResolverConfig:
    """
    What to scan and which archive extensions count as libraries.
    Extensions are stored lowercase without a leading dot.
    """
    root_directory: Path
    accepted_extensions: FrozenSet[str]

    def __post_init__(self):
        normalized = frozenset(
            ext.strip().lstrip(".").lower() for ext in self.accepted_extensions
        )
        normalized = frozenset(ext for ext in normalized if ext)
        if not normalized:
            raise ValueError("At least one accepted extension is required.")
        # Frozen dataclass: bypass __setattr__ to store the normalized values
        object.__setattr__(self, "accepted_extensions", normalized)
        object.__setattr__(self, "root_directory", Path(self.root_directory))

    @classmethod
    def from_extensions(cls, root_directory: Path, extensions: Iterable[str]) -> "ResolverConfig":
        return cls(root_directory=Path(root_directory), accepted_extensions=frozenset(extensions))

    def accepts(self, extension: str) -> bool:
        return extension.lower() in self.accepted_extensions

    @property
    def probe_order(self):
        """Accepted extensions in the order companion archives are probed."""
        return sorted(self.accepted_extensions)


@dataclass(frozen=True)
class CandidateFile:
    """
    A directory entry whose name splits into stem and extension.
    """
    path: Path
    stem: str
    extension: str
    suffix_class: SuffixClass

    @property
    def is_library(self) -> bool:
        return self.suffix_class == SuffixClass.PLAIN

    @property
    def base(self) -> str:
        """Absolute path string with the final '.ext' removed."""
        full = str(self.path)
        return full[: len(full) - len(self.extension) - 1]


@dataclass(frozen=True)
class ResolvedLibrary:
    main_path: Path
    source_path: Optional[Path] = None
    javadoc_path: Optional[Path] = None
