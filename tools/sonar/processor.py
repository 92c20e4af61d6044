"""tools/sonar/processor.py

Config-driven facade over :class:`SonarResultParser`.

Running the analysis itself is left to the caller (CI step, build plugin);
the processor only knows where the engine leaves its issues export and turns
it into a ReviewResult.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from sonar_review.config import ReviewConfig
from sonar_review.diagnostics import DiagnosticSink, LoggerDiagnostics
from sonar_review.domain import ReviewResult

from .parser import SonarResultParser

logger = logging.getLogger(__name__)


class SonarProcessor:
    name = "Sonar"

    def __init__(
        self,
        config: Optional[ReviewConfig] = None,
        diagnostics: Optional[DiagnosticSink] = None,
    ) -> None:
        self.config = config or ReviewConfig()
        self.diagnostics = diagnostics or LoggerDiagnostics(logger)

    @property
    def report_path(self) -> Path:
        return self.config.report_path

    def process(self) -> ReviewResult:
        logger.info("%s: parsing %s", self.name, self.report_path)
        return SonarResultParser(self.report_path, self.diagnostics).parse_results()
