"""tools/sonar/errors.py

Error taxonomy for Sonar report parsing.

Only :class:`SonarReportError` escapes :mod:`tools.sonar.parser`. The other
classes describe *why* a parse failed and are reachable as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class ReportStructureError(ValueError):
    """The document is JSON but not shaped like a Sonar issues report."""


class ReportFieldError(ReportStructureError):
    """An issue or component lacks a field the parser needs."""


class ComponentResolutionError(LookupError):
    """An issue references a component (or module) key absent from the report."""

    def __init__(self, key: str, *, role: str = "component") -> None:
        super().__init__(f"Unknown {role} key: {key!r}")
        self.key = key
        self.role = role


class SonarReportError(Exception):
    """The report at *source* could not be parsed.

    The root cause is chained (``__cause__``) and also kept on ``cause``.
    """

    def __init__(self, source: Union[str, Path], cause: BaseException) -> None:
        super().__init__(f"Error while analyzing {source}: {cause}")
        self.source = str(source)
        self.cause = cause
