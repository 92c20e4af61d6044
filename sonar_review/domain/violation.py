"""sonar_review.domain.violation

Canonical representation of a review *violation*.

A violation is one comment-worthy finding: a file path relative to the
analysed project, a line, a message and a unified severity. Engine-specific
severities are mapped onto :class:`Severity` by the parsers, so consumers only
ever see ERROR / WARNING / INFO.

Why dataclasses instead of untyped dicts?
----------------------------------------
Review posting code reads these objects field by field. A frozen dataclass
gives a single source of truth for the field names and a predictable
conversion boundary to JSON (:meth:`ReviewResult.to_dict`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping


class Severity(Enum):
    """Unified review severity levels."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Violation:
    """One resolved finding, ready to be posted as a review comment."""

    file_path: str
    line: int
    message: str
    severity: Severity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file_path,
            "line": self.line,
            "message": self.message,
            "severity": self.severity.value,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Violation":
        """Parse a dict as emitted by :meth:`to_dict`."""
        if not isinstance(d, Mapping):
            raise TypeError(f"Violation.from_dict expected mapping, got {type(d)!r}")
        return cls(
            file_path=str(d["file"]),
            line=int(d["line"]),
            message=str(d["message"]),
            severity=Severity(d["severity"]),
        )


@dataclass
class ReviewResult:
    """Ordered collection of violations produced by one parse.

    Insertion order is report order; nothing here sorts or de-duplicates.
    """

    violations: List[Violation] = field(default_factory=list)

    def add(self, violation: Violation) -> None:
        self.violations.append(violation)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self.violations)

    def __len__(self) -> int:
        return len(self.violations)

    def count_by_severity(self) -> Dict[Severity, int]:
        """Count violations per severity (every level present, zero included)."""
        counts: Dict[Severity, int] = {sev: 0 for sev in Severity}
        for v in self.violations:
            counts[v.severity] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {"violations": [v.to_dict() for v in self.violations]}
