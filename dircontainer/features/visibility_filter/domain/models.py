from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from dircontainer.features.classpath_container.domain.models import ClasspathEntry

from .interfaces import IClasspathSource


class ProjectModelError(Exception):
    """Raised by a classpath source when the project's build path cannot be read."""


@dataclass(frozen=True)
class StaticClasspathSource(IClasspathSource):
    """
    Fixed, in-memory raw classpath.
    """
    entries: Tuple[ClasspathEntry, ...] = field(default_factory=tuple)

    def get_raw_classpath(self) -> Tuple[ClasspathEntry, ...]:
        return self.entries


@dataclass(frozen=True)
class Project:
    """
    Entity representing a project in the host workspace.
    """
    name: str
    location: Path
    classpath: IClasspathSource

    def __post_init__(self):
        if not self.name.strip():
            raise ValueError("Project name cannot be empty.")

    def get_raw_classpath(self) -> Tuple[ClasspathEntry, ...]:
        return tuple(self.classpath.get_raw_classpath())


@dataclass(frozen=True)
class ProjectFile:
    """
    A file element shown in the project tree view.
    """
    project: Project
    location: Path
