from __future__ import annotations

from typing import Dict, Optional

from sonar_review.diagnostics import DiagnosticSink, default_diagnostics
from sonar_review.domain import Severity


SONAR_SEVERITY_MAP: Dict[str, Severity] = {
    "BLOCKER": Severity.ERROR,
    "CRITICAL": Severity.ERROR,
    "MAJOR": Severity.ERROR,
    "MINOR": Severity.WARNING,
    "INFO": Severity.INFO,
}

FALLBACK_SEVERITY = Severity.WARNING


def map_sonar_severity(
    severity_raw: Optional[str],
    diagnostics: Optional[DiagnosticSink] = None,
) -> Severity:
    """Convert a Sonar severity label to a review Severity.

    Labels are matched exactly. Anything unrecognised (including "" and
    near-misses like "MINORR") maps to WARNING and emits a warning diagnostic.
    """
    sev = SONAR_SEVERITY_MAP.get(severity_raw) if isinstance(severity_raw, str) else None
    if sev is not None:
        return sev

    (diagnostics or default_diagnostics(__name__)).warning(f"Unknown severity: {severity_raw}")
    return FALLBACK_SEVERITY
