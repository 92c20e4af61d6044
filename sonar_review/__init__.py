"""sonar_review

Core package for turning code-quality engine reports into review violations.

Layout
------
* ``sonar_review.domain``      : the Violation / ReviewResult contract handed to
  review-posting code
* ``sonar_review.io``          : filesystem helpers (JSON read / atomic write)
* ``sonar_review.config``      : ReviewConfig loading (.env, YAML, environment)
* ``sonar_review.diagnostics`` : injectable diagnostic sinks

Engine-specific parsing lives under ``tools/sonar``; this package stays free
of engine vocabulary so other analysers can reuse the same contract.
"""

from __future__ import annotations
