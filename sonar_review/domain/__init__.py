"""sonar_review.domain

Domain objects that form the *contract* between the report parser and the
code that posts review comments.

Engines produce raw reports in their own formats. Parsers normalize those into
Violation objects so that review posting does not need to know vendor quirks.
"""

from __future__ import annotations

from .violation import ReviewResult, Severity, Violation

__all__ = [
    "ReviewResult",
    "Severity",
    "Violation",
]
