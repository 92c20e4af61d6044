"""sonar_review.diagnostics

Injectable diagnostic sinks.

Parsers report non-fatal notices (skipped issues, unknown severities) through
a sink passed in by the caller instead of a module-global logger. Production
code uses :class:`LoggerDiagnostics`; tests use :class:`RecordingDiagnostics`
and assert on ``entries`` directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple


class DiagnosticSink(Protocol):
    def debug(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


class LoggerDiagnostics:
    """Forward diagnostics to a stdlib logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("sonar_review")

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)


@dataclass
class RecordingDiagnostics:
    """Keep (level, message) pairs in emission order."""

    entries: List[Tuple[str, str]] = field(default_factory=list)

    def debug(self, message: str) -> None:
        self.entries.append(("debug", message))

    def warning(self, message: str) -> None:
        self.entries.append(("warning", message))

    def messages(self, level: Optional[str] = None) -> List[str]:
        return [m for lvl, m in self.entries if level is None or lvl == level]


def default_diagnostics(name: str) -> DiagnosticSink:
    return LoggerDiagnostics(logging.getLogger(name))
