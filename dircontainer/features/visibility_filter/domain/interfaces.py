from abc import ABC, abstractmethod
from typing import Sequence

from dircontainer.features.classpath_container.domain.models import ClasspathEntry

class IClasspathSource(ABC):
    """
    Contract for reading a project's raw (unresolved) build path.
    Abstracts the host's project model and its on-disk format.
    """
    @abstractmethod
    def get_raw_classpath(self) -> Sequence[ClasspathEntry]:
        """
        Returns the raw entries, container entries included.

        Raises:
            ProjectModelError: If the build path cannot be read.
        """
        pass
