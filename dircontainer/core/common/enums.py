# File: dircontainer/core/common/enums.py

from enum import Enum, unique

@unique
class SuffixClass(str, Enum):
    PLAIN = "plain"
    SOURCE = "source"
    JAVADOC = "javadoc"

@unique
class DirectoryErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    UNREADABLE = "unreadable"

@unique
class Severity(str, Enum):
    OK = "ok"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CANCEL = "cancel"

@unique
class EntryKind(str, Enum):
    LIBRARY = "library"
    CONTAINER = "container"
    SOURCE = "source"

@unique
class ContainerKind(str, Enum):
    APPLICATION = "application"
