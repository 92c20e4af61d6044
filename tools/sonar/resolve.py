"""tools/sonar/resolve.py

Per-issue classification: an issue either becomes a :class:`Violation` or is
:class:`Filtered` out. Nothing here loops over the report; the parser maps
:func:`classify_issue` over the issues and keeps the violations.

Filters (first match wins)
--------------------------
1) ``isNew`` is false  -> already indexed by a previous analysis
2) no ``line``         -> nothing to anchor a review comment to

Path resolution
---------------
A component without a module key resolves to its own path. A component with
a module key resolves to ``<module path>/<component path>``. Only one level is
followed: the module's own ``moduleKey`` is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from sonar_review.diagnostics import DiagnosticSink
from sonar_review.domain import Violation

from .errors import ComponentResolutionError
from .severity import map_sonar_severity
from .types import Component, SonarIssue


ALREADY_INDEXED = "already_indexed"
NO_LINE = "no_line"


@dataclass(frozen=True)
class Filtered:
    """An issue dropped by the relevance filters."""

    reason: str
    issue: SonarIssue

    def describe(self) -> str:
        if self.reason == ALREADY_INDEXED:
            return f"Skipping already indexed issue: {dict(self.issue.raw)}"
        return f"Skipping an issue with no line information: {dict(self.issue.raw)}"


def _lookup(index: Mapping[str, Component], key: str, role: str) -> Component:
    component = index.get(key)
    if component is None:
        raise ComponentResolutionError(key, role=role)
    return component


def resolve_issue_file_path(component_key: str, index: Mapping[str, Component]) -> str:
    """Return the project-relative file path for an issue's component key."""
    component = _lookup(index, component_key, "component")
    if not component.module_key:
        return component.path
    module = _lookup(index, component.module_key, "module")
    return f"{module.path}/{component.path}"


def filter_reason(issue: SonarIssue) -> Optional[str]:
    if not issue.is_new:
        return ALREADY_INDEXED
    if issue.line is None:
        return NO_LINE
    return None


def classify_issue(
    issue: SonarIssue,
    index: Mapping[str, Component],
    diagnostics: Optional[DiagnosticSink] = None,
) -> Union[Violation, Filtered]:
    """Classify one issue.

    Raises ReportFieldError when a surviving issue lacks component / message /
    severity, and ComponentResolutionError when its path cannot be resolved.
    """
    reason = filter_reason(issue)
    if reason is not None:
        return Filtered(reason=reason, issue=issue)

    file_path = resolve_issue_file_path(issue.require("component"), index)
    return Violation(
        file_path=file_path,
        line=issue.line,
        message=issue.require("message"),
        severity=map_sonar_severity(issue.require("severity"), diagnostics),
    )
