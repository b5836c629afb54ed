import logging
from pathlib import Path
from typing import Optional, Tuple

from dircontainer.core.common.enums import ContainerKind, EntryKind, Severity
from dircontainer.core.diagnostics import DiagnosticSink, LoggingDiagnosticSink
from dircontainer.features.library_resolver.domain.models import (
    DirectoryError,
    ResolvedLibrary,
    ResolverConfig,
)
from dircontainer.features.library_resolver.service.api import LibraryResolver

from ..domain.models import (
    JAVADOC_LOCATION_ATTRIBUTE,
    ClasspathAttribute,
    ClasspathEntry,
    ContainerPath,
)

logger = logging.getLogger(__name__)

class DirectoryContainer:
    """
    Exposes the archives of one project directory as library build path entries,
    with -src/-source/-sources and -javadoc archives attached.
    """

    def __init__(
        self,
        container_path: ContainerPath,
        project_root: Path,
        resolver: Optional[LibraryResolver] = None,
        sink: Optional[DiagnosticSink] = None,
    ):
        self.container_path = container_path
        self.project_root = Path(project_root).absolute()
        self.resolver = resolver or LibraryResolver()
        self.sink = sink or LoggingDiagnosticSink()

        if container_path.is_project_root:
            self.directory = self.project_root
        else:
            self.directory = self.project_root / container_path.directory

        self.config = ResolverConfig(
            root_directory=self.directory,
            accepted_extensions=container_path.extensions,
        )

    @classmethod
    def from_encoded(cls, encoded: str, project_root: Path, **kwargs) -> "DirectoryContainer":
        return cls(ContainerPath.parse(encoded), project_root, **kwargs)

    @property
    def path(self) -> str:
        return self.container_path.encode()

    @property
    def description(self) -> str:
        """UI label reflecting the configured directory."""
        return f"/{self.container_path.relative_directory} Libraries"

    @property
    def kind(self) -> ContainerKind:
        return ContainerKind.APPLICATION

    def is_valid(self) -> bool:
        return self.directory.exists() and self.directory.is_dir()

    def get_classpath_entries(self) -> Tuple[ClasspathEntry, ...]:
        """
        Resolves the directory and converts every library into a build path entry.
        An unusable directory is reported to the sink and yields no entries.
        """
        try:
            libraries = self.resolver.resolve(self.config)
        except DirectoryError as e:
            self.sink.log(Severity.ERROR, e)
            return ()

        logger.debug(f"{self.description}: {len(libraries)} entries from {self.directory}")
        return tuple(self._to_entry(lib) for lib in libraries)

    def is_contained(self, file_path: Path) -> bool:
        return self.resolver.is_contained(self.config, file_path)

    def _to_entry(self, library: ResolvedLibrary) -> ClasspathEntry:
        attributes = ()
        if library.javadoc_path is not None:
            attributes = (ClasspathAttribute(JAVADOC_LOCATION_ATTRIBUTE, str(library.javadoc_path)),)

        return ClasspathEntry(
            kind=EntryKind.LIBRARY,
            path=str(library.main_path),
            source_attachment_path=library.source_path,
            source_attachment_root="/",
            access_rules=(),
            extra_attributes=attributes,
            exported=False,
        )
