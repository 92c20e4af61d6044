"""tools/sonar/parser.py

Parses the JSON issues report written by a Sonar analysis.

  report file -> JSON -> component index -> classify each issue -> ReviewResult

The parse is all-or-nothing. Any failure (missing file, invalid JSON, missing
section or field, unresolvable component) is re-raised as one
:class:`SonarReportError` with the original exception chained.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator, List, Mapping, Optional, Union

from sonar_review.diagnostics import DiagnosticSink, LoggerDiagnostics
from sonar_review.domain import ReviewResult, Violation
from sonar_review.io import read_json

from .components import build_component_index
from .errors import ComponentResolutionError, ReportStructureError, SonarReportError
from .resolve import Filtered, classify_issue
from .types import SonarIssue

logger = logging.getLogger(__name__)


def _require_list(report: Mapping[str, Any], key: str) -> List[Any]:
    value = report.get(key)
    if value is None:
        raise ReportStructureError(f"report has no {key!r} section")
    if not isinstance(value, list):
        raise ReportStructureError(f"report section {key!r} must be an array")
    return value


def classify_report(
    report: Mapping[str, Any],
    diagnostics: Optional[DiagnosticSink] = None,
) -> Iterator[Union[Violation, Filtered]]:
    """Classify every issue of an already-loaded report, lazily and in report order.

    Errors are raised unwrapped; :class:`SonarResultParser` does the wrapping.
    """
    issues = _require_list(report, "issues")
    index = build_component_index(_require_list(report, "components"))
    for raw in issues:
        yield classify_issue(SonarIssue.from_dict(raw), index, diagnostics)


class SonarResultParser:
    """Parses one Sonar result file into a ReviewResult.

    The parser keeps no state between :meth:`parse_results` calls.
    """

    def __init__(
        self,
        result_file: Union[str, Path],
        diagnostics: Optional[DiagnosticSink] = None,
    ) -> None:
        self.result_file = Path(result_file)
        self.diagnostics = diagnostics or LoggerDiagnostics(logger)

    def parse_results(self) -> ReviewResult:
        try:
            return self._parse()
        except (OSError, ValueError, RecursionError, ComponentResolutionError) as e:
            # ReportStructureError and json.JSONDecodeError are ValueErrors;
            # RecursionError comes from json on deeply nested documents.
            raise SonarReportError(self.result_file, e) from e

    def _parse(self) -> ReviewResult:
        report = read_json(self.result_file)
        if not isinstance(report, dict):
            raise ReportStructureError("report root must be an object")

        result = ReviewResult()
        for outcome in classify_report(report, self.diagnostics):
            if isinstance(outcome, Filtered):
                self.diagnostics.debug(outcome.describe())
            else:
                result.add(outcome)

        logger.debug("Parsed %d violation(s) from %s", len(result), self.result_file)
        return result


def parse_sonar_report(
    path: Union[str, Path],
    diagnostics: Optional[DiagnosticSink] = None,
) -> ReviewResult:
    """Parse *path* and return its violations in report order."""
    return SonarResultParser(path, diagnostics).parse_results()
