import logging
from pathlib import Path
from typing import Any, Callable, Optional

from dircontainer.core.common.enums import EntryKind, Severity
from dircontainer.core.diagnostics import DiagnosticSink, LoggingDiagnosticSink
from dircontainer.features.classpath_container.domain.models import ContainerPath
from dircontainer.features.classpath_container.service.container import DirectoryContainer

from ..domain.models import ProjectFile, ProjectModelError

logger = logging.getLogger(__name__)

ContainerFactory = Callable[[str, Path], DirectoryContainer]

class ContainerDirFilter:
    """
    Hides files from the project tree view when a directory container on the
    project's build path already includes them, so they are not added twice.
    """

    def __init__(
        self,
        sink: Optional[DiagnosticSink] = None,
        container_factory: Optional[ContainerFactory] = None,
    ):
        self.sink = sink or LoggingDiagnosticSink()
        self.container_factory = container_factory or self._default_factory

    def select(self, parent: Any, element: Any) -> bool:
        """
        Returns False if element is a file included by one of its project's
        directory containers, True otherwise.
        """
        if not isinstance(element, ProjectFile):
            return True

        project = element.project
        try:
            entries = project.get_raw_classpath()
        except ProjectModelError as e:
            self.sink.log(Severity.ERROR, e)
            return True

        for entry in entries:
            if entry.kind != EntryKind.CONTAINER:
                continue
            if not ContainerPath.is_container_path(entry.path):
                continue

            try:
                container = self.container_factory(entry.path, project.location)
                contained = container.is_contained(element.location)
            except ValueError as e:
                # One malformed container must not hide the others
                self.sink.log(Severity.ERROR, e)
                continue

            if contained:
                logger.debug(f"Hiding {element.location}: included by {container.description}")
                return False

        return True

    def _default_factory(self, encoded: str, project_root: Path) -> DirectoryContainer:
        return DirectoryContainer.from_encoded(encoded, project_root, sink=self.sink)
