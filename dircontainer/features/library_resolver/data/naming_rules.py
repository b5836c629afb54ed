from typing import Optional, Sequence, Tuple

from dircontainer.core.config.settings import settings
from dircontainer.core.common.enums import SuffixClass

class NamingRules:
    """
    Central logic for how archive file names are read.
    """

    SOURCE_SUFFIXES: Tuple[str, ...] = settings.SOURCE_SUFFIXES
    JAVADOC_SUFFIXES: Tuple[str, ...] = settings.JAVADOC_SUFFIXES

    @staticmethod
    def split_extension(name: str) -> Optional[Tuple[str, str]]:
        """
        Splits on the last '.' into (stem, extension).
        Returns None if the name has no '.'.
        """
        stem, dot, extension = name.rpartition(".")
        if not dot:
            return None
        return stem, extension

    @staticmethod
    def has_suffix(stem: str, suffixes: Sequence[str]) -> bool:
        return any(stem.endswith(suffix) for suffix in suffixes)

    @classmethod
    def is_source_stem(cls, stem: str) -> bool:
        return cls.has_suffix(stem, cls.SOURCE_SUFFIXES)

    @classmethod
    def is_javadoc_stem(cls, stem: str) -> bool:
        return cls.has_suffix(stem, cls.JAVADOC_SUFFIXES)

    @classmethod
    def classify_stem(cls, stem: str) -> SuffixClass:
        # Source suffixes are checked first; the two sets do not overlap
        if cls.is_source_stem(stem):
            return SuffixClass.SOURCE
        if cls.is_javadoc_stem(stem):
            return SuffixClass.JAVADOC
        return SuffixClass.PLAIN

    @classmethod
    def suffixes_for(cls, suffix_class: SuffixClass) -> Tuple[str, ...]:
        if suffix_class == SuffixClass.SOURCE:
            return cls.SOURCE_SUFFIXES
        if suffix_class == SuffixClass.JAVADOC:
            return cls.JAVADOC_SUFFIXES
        return ()
