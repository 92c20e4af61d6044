from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import ReportFieldError, ReportStructureError


def _require_mapping(record: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise ReportStructureError(f"{what} entry must be an object, got {type(record).__name__}")
    return record


def _optional_str(record: Mapping[str, Any], key: str, what: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ReportFieldError(f"{what} field {key!r} must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class Component:
    """A file or directory listed in the report.

    ``module_key`` references the parent module component whose path
    prefixes this one.
    """

    key: str
    path: str
    module_key: Optional[str] = None

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> Optional["Component"]:
        """Parse a report component; None for entries without a path."""
        record = _require_mapping(record, "component")
        path = _optional_str(record, "path", "component")
        if path is None:
            return None
        if not path.strip():
            raise ReportFieldError(f"component {record.get('key')!r} has a blank 'path'")
        key = _optional_str(record, "key", "component")
        if key is None:
            raise ReportFieldError(f"component with path {path!r} has no 'key'")
        return cls(key=key, path=path, module_key=_optional_str(record, "moduleKey", "component"))


@dataclass(frozen=True)
class SonarIssue:
    """One raw entry of the report's ``issues`` array.

    ``component``, ``message`` and ``severity`` stay optional here: they are
    only required once the issue passes the relevance filters
    (see :meth:`require`).
    """

    is_new: bool
    line: Optional[int]
    component: Optional[str]
    message: Optional[str]
    severity: Optional[str]
    raw: Mapping[str, Any]

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "SonarIssue":
        record = _require_mapping(record, "issue")

        is_new = record.get("isNew")
        if not isinstance(is_new, bool):
            raise ReportFieldError(f"issue field 'isNew' must be a boolean, got {is_new!r}")

        line = record.get("line")
        # bool is a subclass of int; treat as invalid.
        if line is not None and (isinstance(line, bool) or not isinstance(line, int)):
            raise ReportFieldError(f"issue field 'line' must be an integer, got {line!r}")

        return cls(
            is_new=is_new,
            line=line,
            component=_optional_str(record, "component", "issue"),
            message=_optional_str(record, "message", "issue"),
            severity=_optional_str(record, "severity", "issue"),
            raw=record,
        )

    def require(self, name: str) -> str:
        value = getattr(self, name)
        if value is None:
            raise ReportFieldError(f"issue has no {name!r}: {dict(self.raw)!r}")
        return value
