import logging
from pathlib import Path
from typing import Iterator, List, Optional

from dircontainer.core.common.enums import DirectoryErrorKind, SuffixClass

from ..domain.interfaces import IDirectoryLister
from ..domain.models import CandidateFile, DirectoryError, ResolvedLibrary, ResolverConfig
from ..data.local_fs import LocalDirectoryLister
from ..data.naming_rules import NamingRules

logger = logging.getLogger(__name__)

class LibraryResolver:
    """
    Facade for the Library Resolver feature.
    Turns a directory of archives into main/source/javadoc path triples.
    Holds no state between calls: every call re-reads the directory.
    """

    def __init__(self, lister: Optional[IDirectoryLister] = None):
        self.lister = lister or LocalDirectoryLister()

    def resolve(self, config: ResolverConfig) -> List[ResolvedLibrary]:
        """
        Scans config.root_directory and returns one ResolvedLibrary per main archive,
        in directory listing order.

        Raises:
            DirectoryError: If the root is missing, not a directory, or cannot be listed.
        """
        root = config.root_directory
        self._check_root(root)

        # 1. Collect main archives (fails before any result is produced)
        try:
            candidates = [c for c in self._candidates(root.absolute(), config) if c.is_library]
        except OSError as e:
            raise DirectoryError(DirectoryErrorKind.UNREADABLE, root, str(e)) from e

        # 2. Attach companions
        libraries = []
        for candidate in candidates:
            libraries.append(ResolvedLibrary(
                main_path=candidate.path,
                source_path=self._find_companion(candidate, config, SuffixClass.SOURCE),
                javadoc_path=self._find_companion(candidate, config, SuffixClass.JAVADOC),
            ))

        logger.info(f"Resolved {len(libraries)} libraries in {root}")
        return libraries

    def is_contained(self, config: ResolverConfig, file_path: Path) -> bool:
        """
        True if file_path sits directly in the root and has an accepted extension.
        Companion archives count as contained too.
        """
        if Path(file_path).parent != config.root_directory:
            return False
        parts = NamingRules.split_extension(Path(file_path).name)
        if parts is None:
            return False
        return config.accepts(parts[1])

    def _check_root(self, root: Path) -> None:
        if not self.lister.exists(root):
            raise DirectoryError(DirectoryErrorKind.NOT_FOUND, root)
        if not self.lister.is_directory(root):
            raise DirectoryError(DirectoryErrorKind.NOT_A_DIRECTORY, root)

    def _candidates(self, root: Path, config: ResolverConfig) -> Iterator[CandidateFile]:
        for path in self.lister.list_entries(root):
            parts = NamingRules.split_extension(path.name)
            if parts is None:
                continue
            stem, extension = parts
            if not config.accepts(extension):
                continue
            candidate = CandidateFile(
                path=path,
                stem=stem,
                extension=extension.lower(),
                suffix_class=NamingRules.classify_stem(stem),
            )
            if not candidate.is_library:
                logger.debug(f"{path.name} is a {candidate.suffix_class.value} companion, not a library")
            yield candidate

    def _find_companion(
        self, candidate: CandidateFile, config: ResolverConfig, suffix_class: SuffixClass
    ) -> Optional[Path]:
        base = candidate.base
        for suffix in NamingRules.suffixes_for(suffix_class):
            for extension in config.probe_order:
                probe = Path(f"{base}{suffix}.{extension}")
                if self.lister.exists(probe):
                    return probe
        return None


# Singleton Instance for easy import
resolver = LibraryResolver()


def resolve(config: ResolverConfig) -> List[ResolvedLibrary]:
    return resolver.resolve(config)


def is_contained(config: ResolverConfig, file_path: Path) -> bool:
    return resolver.is_contained(config, file_path)
