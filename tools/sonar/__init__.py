"""Sonar report parsing modules.

Split into:
  - types.py      : Component / SonarIssue records read from the report
  - errors.py     : internal error taxonomy + the public SonarReportError
  - components.py : component index (key -> Component)
  - severity.py   : Sonar severity -> unified Severity
  - resolve.py    : per-issue classification and file path resolution
  - parser.py     : orchestration (read, index, classify, wrap failures)
  - processor.py  : config-driven facade used by the CLI

The review_cli.py script acts as the entrypoint.
"""

from __future__ import annotations

from .errors import SonarReportError
from .parser import SonarResultParser, parse_sonar_report
from .processor import SonarProcessor

__all__ = [
    "SonarProcessor",
    "SonarReportError",
    "SonarResultParser",
    "parse_sonar_report",
]
