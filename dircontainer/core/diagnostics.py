import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, Union

from dircontainer.core.common.enums import Severity
from dircontainer.core.config.settings import settings

Payload = Union[str, BaseException]

_LEVELS = {
    Severity.OK: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.CANCEL: logging.WARNING,
}


class DiagnosticSink(ABC):
    """
    Contract for reporting problems to the host environment.
    Collaborators receive a sink explicitly instead of reaching for a global log.
    """

    @abstractmethod
    def log(self, severity: Severity, payload: Payload) -> None:
        """
        Records a message or an exception at the given severity.
        Must never raise.
        """
        pass


class LoggingDiagnosticSink(DiagnosticSink):
    """
    Forwards diagnostics to a standard library logger.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(settings.PLUGIN_ID)

    def log(self, severity: Severity, payload: Payload) -> None:
        level = _LEVELS[severity]
        if isinstance(payload, BaseException):
            # Keep the traceback attached, like a stack trace in the host error log
            self.logger.log(level, str(payload) or type(payload).__name__, exc_info=payload)
        else:
            self.logger.log(level, payload)


class RecordingDiagnosticSink(DiagnosticSink):
    """In-memory sink for hosts that collect diagnostics themselves."""

    def __init__(self):
        self.records: List[Tuple[Severity, Payload]] = []

    def log(self, severity: Severity, payload: Payload) -> None:
        self.records.append((severity, payload))

    def by_severity(self, severity: Severity) -> List[Payload]:
        return [payload for sev, payload in self.records if sev == severity]
