from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import FrozenSet, Iterable, Optional, Tuple

from dircontainer.core.config.settings import settings
from dircontainer.core.common.enums import EntryKind

JAVADOC_LOCATION_ATTRIBUTE = "javadoc_location"


@dataclass(frozen=True)
class ContainerPath:
    """
    Value Object for an encoded container identifier:
        <container-id>/<project-relative dir>/<ext1,ext2,...>
    The directory part may span several segments; settings.ROOT_DIR means the project root.
    """
    directory: str
    extensions: FrozenSet[str]

    def __post_init__(self):
        normalized = frozenset(
            ext.strip().lstrip(".").lower() for ext in self.extensions
        )
        normalized = frozenset(ext for ext in normalized if ext)
        if not normalized:
            raise ValueError("Container path must name at least one extension.")
        object.__setattr__(self, "extensions", normalized)

    @classmethod
    def parse(cls, encoded: str) -> "ContainerPath":
        segments = [s for s in str(encoded).split("/") if s]
        if len(segments) < 3:
            raise ValueError(f"Container path needs id, directory and extensions: {encoded!r}")
        if segments[0] != settings.CONTAINER_ID:
            raise ValueError(f"Not a directory container path: {encoded!r}")

        return cls(directory="/".join(segments[1:-1]), extensions=frozenset(segments[-1].split(",")))

    @classmethod
    def build(cls, directory: str, extensions: Optional[Iterable[str]] = None) -> str:
        """
        Encodes a container path. Without extensions, settings.default_extensions is used.

        Raises:
            ValueError: If no usable extension remains after normalization.
        """
        directory = str(PurePosixPath(directory)).strip("/")
        if directory in ("", "."):
            directory = settings.ROOT_DIR
        if extensions is None:
            extensions = settings.default_extensions
        return cls(directory=directory, extensions=frozenset(extensions)).encode()

    @staticmethod
    def is_container_path(path: str) -> bool:
        return str(path).split("/", 1)[0] == settings.CONTAINER_ID

    @property
    def is_project_root(self) -> bool:
        return self.directory == settings.ROOT_DIR

    @property
    def relative_directory(self) -> str:
        return "" if self.is_project_root else self.directory

    def encode(self) -> str:
        return f"{settings.CONTAINER_ID}/{self.directory}/{','.join(sorted(self.extensions))}"


@dataclass(frozen=True)
class ClasspathAttribute:
    name: str
    value: str


@dataclass(frozen=True)
class ClasspathEntry:
    """
    Host-neutral build path entry.
    Library entries reference an archive plus optional source attachment and attributes.
    """
    kind: EntryKind
    path: str
    source_attachment_path: Optional[Path] = None
    source_attachment_root: Optional[str] = None
    access_rules: Tuple[str, ...] = ()
    extra_attributes: Tuple[ClasspathAttribute, ...] = field(default_factory=tuple)
    exported: bool = False

    def attribute(self, name: str) -> Optional[str]:
        for attr in self.extra_attributes:
            if attr.name == name:
                return attr.value
        return None

    @property
    def javadoc_location(self) -> Optional[str]:
        return self.attribute(JAVADOC_LOCATION_ATTRIBUTE)
